from scripts.init_db import init_db
from sofaclean.models.post import Post
from tests.conftest import engine


def test_init_db_creates_tables():
    tables = init_db(bind=engine)
    assert tables == ["admin_users", "posts", "quotes", "site_documents"]


def test_init_db_reset_clears_rows(db, seed_posts):
    assert db.query(Post).count() == 5
    db.close()
    init_db(bind=engine, reset=True)
    assert db.query(Post).count() == 0
