from sofaclean.config import settings
from sofaclean.models.site_document import SiteDocument
from tests.conftest import auth_headers


def test_settings_require_login(client):
    assert client.get("/api/admin/settings/home").status_code == 401
    assert client.get("/api/admin/settings/contact").status_code == 401
    assert client.put("/api/admin/settings/home", json={}).status_code == 401
    assert client.put("/api/admin/settings/contact", json={}).status_code == 401


def test_home_settings_defaults(client, seed_admin):
    resp = client.get("/api/admin/settings/home", headers=auth_headers(client))
    assert resp.status_code == 200
    assert resp.json()["hero_image_url"] == settings.DEFAULT_HERO_IMAGE_URL


def test_home_settings_merge_write(client, db, seed_admin):
    headers = auth_headers(client)
    resp = client.put("/api/admin/settings/home", json={"hero_image_url": "https://cdn.test/hero.jpg"}, headers=headers)
    assert resp.status_code == 200, resp.text
    assert resp.json()["hero_image_url"] == "https://cdn.test/hero.jpg"

    resp = client.put("/api/admin/settings/home", json={"before_image_url": "https://cdn.test/before.jpg"}, headers=headers)
    data = resp.json()
    assert data["hero_image_url"] == "https://cdn.test/hero.jpg"
    assert data["before_image_url"] == "https://cdn.test/before.jpg"
    assert data["after_image_url"] == settings.DEFAULT_AFTER_IMAGE_URL

    row = db.query(SiteDocument).filter_by(collection="pages", doc_key="home").one()
    assert row.updated_by == seed_admin.admin_id


def test_contact_settings_roundtrip_to_public_site(client, seed_admin):
    payload = {"phone": "021234567", "facebook_url": "https://facebook.com/sofaclean", "line_url": "https://line.me/ti/p/~sofaclean"}
    resp = client.put("/api/admin/settings/contact", json=payload, headers=auth_headers(client))
    assert resp.status_code == 200, resp.text

    public = client.get("/api/site/contact").json()
    assert public == payload
    home = client.get("/th").json()
    assert home["json_ld"][0]["contactPoint"]["telephone"] == "+66-21234567"


def test_contact_settings_require_every_field(client, db, seed_admin):
    payload = {"phone": "021234567", "facebook_url": "", "line_url": "https://line.me/ti/p/~sofaclean"}
    resp = client.put("/api/admin/settings/contact", json=payload, headers=auth_headers(client))
    assert resp.status_code == 400
    assert db.query(SiteDocument).count() == 0
