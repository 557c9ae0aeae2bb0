"""Read-side fetchers: publication filter, ordering and singleton defaults."""

from urllib.parse import quote

from sofaclean.config import content_defaults
from sofaclean.models.site_document import SiteDocument
from sofaclean.services import content_service


def test_get_post_returns_published(db, seed_posts):
    post = content_service.get_post(db, "how-to-clean-fabric-sofa")
    assert post is not None
    assert post.title == "Fabric sofa care"


def test_get_post_hides_drafts(db, seed_posts):
    assert content_service.get_post(db, "secret-draft") is None


def test_get_post_missing_slug(db, seed_posts):
    assert content_service.get_post(db, "no-such-post") is None
    assert content_service.get_post(db, "") is None


def test_get_post_accepts_percent_encoded_thai_slug(db, seed_posts):
    post = content_service.get_post(db, quote("ซักเบาะโซฟา-ถึงบ้าน"))
    assert post is not None
    assert post.slug == "ซักเบาะโซฟา-ถึงบ้าน"


def test_get_posts_only_published_newest_first(db, seed_posts):
    slugs = [post.slug for post in content_service.get_posts(db)]
    assert slugs == [
        "ซักเบาะโซฟา-ถึงบ้าน",
        "how-to-clean-fabric-sofa",
        "when-to-clean-car-seats",
        "curtain-cleaning",
    ]


def test_get_posts_empty(db):
    assert content_service.get_posts(db) == []


def test_recent_posts_limit(db, seed_posts):
    recent = content_service.get_recent_posts(db)
    assert len(recent) == 3
    assert all(post.status == "published" for post in recent)


def test_related_posts_exclude_current(db, seed_posts):
    current = seed_posts["how-to-clean-fabric-sofa"]
    related = content_service.get_related_posts(db, current.post_id)
    assert len(related) == 2
    assert current.post_id not in [post.post_id for post in related]
    assert "secret-draft" not in [post.slug for post in related]


def test_home_page_data_defaults_when_missing(db):
    data = content_service.get_home_page_data(db, content_defaults)
    assert data.hero_image_url == content_defaults.home["hero_image_url"]
    assert data.before_image_url == content_defaults.home["before_image_url"]


def test_contact_settings_defaults_when_missing(db):
    data = content_service.get_contact_settings(db, content_defaults)
    assert data.phone == "0812345678"
    assert data.line_url == content_defaults.contact["line_url"]


def test_stored_values_override_defaults(db):
    db.add(SiteDocument(collection="pages", doc_key="home", data={"hero_image_url": "https://cdn.test/hero.jpg", "after_image_url": ""}))
    db.commit()
    data = content_service.get_home_page_data(db, content_defaults)
    assert data.hero_image_url == "https://cdn.test/hero.jpg"
    assert data.after_image_url == content_defaults.home["after_image_url"]
