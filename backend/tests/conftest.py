import io

import pytest
from fastapi.testclient import TestClient
from PIL import Image as PILImage
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from sofaclean.database import Base, get_db
from sofaclean.main import app
from sofaclean.models.post import Post
from sofaclean.services.auth_service import create_admin

TEST_DB_URL = "sqlite:///./test_sofaclean.db"

ADMIN_EMAIL = "admin@sofaclean.test"
ADMIN_PASSWORD = "s3cret-pass"

engine = create_engine(TEST_DB_URL, connect_args={"check_same_thread": False})
TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def override_get_db():
    db = TestingSession()
    try:
        yield db
    finally:
        db.close()


app.dependency_overrides[get_db] = override_get_db


@pytest.fixture(autouse=True)
def setup_db():
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db():
    db = TestingSession()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def seed_admin(db):
    return create_admin(db, ADMIN_EMAIL, ADMIN_PASSWORD, display_name="Admin")


@pytest.fixture
def seed_posts(db):
    posts = [
        Post(title="Fabric sofa care", slug="how-to-clean-fabric-sofa", image="https://placehold.co/800x400.png",
             image_hint="sofa", date="2024-07-21", category="Sofa", description="Sofa tips",
             content="<p>sofa</p>", status="published", meta_title="", meta_description=""),
        Post(title="Car seats", slug="when-to-clean-car-seats", image="https://placehold.co/800x400.png",
             image_hint="car", date="2024-07-18", category="Car", description="Car tips",
             content="<p>car</p>", status="published", meta_title="Car seat cleaning guide",
             meta_description="When to book a car seat clean"),
        Post(title="Draft post", slug="secret-draft", image="https://placehold.co/800x400.png",
             image_hint="", date="2024-08-01", category="Misc", description="Not ready",
             content="<p>draft</p>", status="draft"),
        Post(title="ซักเบาะโซฟา", slug="ซักเบาะโซฟา-ถึงบ้าน", image="https://placehold.co/800x400.png",
             image_hint="", date="2025-08-13", category="บริการ", description="บริการถึงบ้าน",
             content="<p>ไทย</p>", status="published"),
        Post(title="Curtains", slug="curtain-cleaning", image="https://placehold.co/800x400.png",
             image_hint="", date="2024-06-01", category="Curtain", description="Curtain tips",
             content="<p>curtain</p>", status="published"),
    ]
    db.add_all(posts)
    db.commit()
    for post in posts:
        db.refresh(post)
    return {post.slug: post for post in posts}


def make_image_bytes(size=(1600, 1200), fmt="PNG", color=(200, 80, 40)) -> bytes:
    buf = io.BytesIO()
    PILImage.new("RGB", size, color=color).save(buf, format=fmt)
    return buf.getvalue()


def get_token(client, email: str = ADMIN_EMAIL, password: str = ADMIN_PASSWORD) -> str:
    resp = client.post("/api/auth/login", json={"email": email, "password": password})
    assert resp.status_code == 200, resp.text
    return resp.json()["access_token"]


def auth_headers(client, email: str = ADMIN_EMAIL, password: str = ADMIN_PASSWORD) -> dict:
    return {"Authorization": f"Bearer {get_token(client, email, password)}"}
