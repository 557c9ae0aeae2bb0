"""Locale prefix redirects for public paths."""

import pytest

from sofaclean.middleware.locale_middleware import get_locale, resolve_locale_redirect


@pytest.mark.parametrize(
    "header, expected",
    [
        (None, "th"),
        ("", "th"),
        ("en-US,en;q=0.9", "en"),
        ("en", "en"),
        ("th-TH,th;q=0.9,en;q=0.8", "th"),
        ("fr-FR,en;q=0.5", "th"),
        ("EN-gb", "en"),
        ("en;q=0.8", "en"),
        (",,,;;", "th"),
        ("*", "th"),
    ],
)
def test_get_locale(header, expected):
    assert get_locale(header) == expected


@pytest.mark.parametrize(
    "path",
    ["/th", "/en", "/th/blog", "/en/blog/some-post", "/admin", "/admin/blog", "/api/health", "/logo.png", "/sitemap.xml"],
)
def test_resolve_passes_through(path):
    assert resolve_locale_redirect(path, "en-US") is None


@pytest.mark.parametrize(
    "path, header, expected",
    [
        ("/", None, "/th"),
        ("/", "en-US,en;q=0.9", "/en"),
        ("/blog", "en", "/en/blog"),
        ("/blog/how-to-clean-fabric-sofa", "de", "/th/blog/how-to-clean-fabric-sofa"),
        ("/thai", "en", "/en/thai"),
        ("/english/page", None, "/th/english/page"),
    ],
)
def test_resolve_redirect_target(path, header, expected):
    assert resolve_locale_redirect(path, header) == expected


def test_middleware_redirects_unprefixed_path(client):
    resp = client.get("/blog", headers={"Accept-Language": "en-US,en;q=0.9"}, follow_redirects=False)
    assert resp.status_code == 307
    assert resp.headers["location"].endswith("/en/blog")


def test_middleware_defaults_to_thai(client):
    resp = client.get("/", follow_redirects=False)
    assert resp.status_code == 307
    assert resp.headers["location"].endswith("/th")


def test_middleware_keeps_query_string(client):
    resp = client.get("/blog?page=2", headers={"Accept-Language": "en"}, follow_redirects=False)
    assert resp.status_code == 307
    assert resp.headers["location"].endswith("/en/blog?page=2")


def test_middleware_leaves_api_and_admin_alone(client):
    assert client.get("/api/health", follow_redirects=False).status_code == 200
    resp = client.get("/admin", follow_redirects=False)
    assert resp.status_code == 200


def test_middleware_leaves_prefixed_paths_alone(client):
    resp = client.get("/th", follow_redirects=False)
    assert resp.status_code == 200
