"""
Integration tests for the SEO admin routes: settings and document meta box.
"""

from __future__ import annotations

import re

from src.adapters.sqlite.repos import SQLitePostMetaRepo
from src.api.auth_utils import create_nonce
from src.shell.hooks.filters import META_BOX_POST_TYPES_HOOK

SETTINGS_URL = "/api/admin/seo/settings"
NONCE_ACTION = "db_seo_save_meta_box"


def extract_nonce(html: str) -> str:
    match = re.search(r'name="db_seo_meta_box_nonce" value="([^"]+)"', html)
    assert match is not None
    return match.group(1)


class TestSettingsAccess:
    def test_requires_authentication(self, client) -> None:
        assert client.get(SETTINGS_URL).status_code == 401

    def test_editor_forbidden(self, client, make_user) -> None:
        _, headers = make_user("editor")

        assert client.get(SETTINGS_URL, headers=headers).status_code == 403

    def test_garbage_token_rejected(self, client) -> None:
        response = client.get(SETTINGS_URL, headers={"Authorization": "Bearer not-a-jwt"})

        assert response.status_code == 401

    def test_openapi_declares_http_bearer(self, client) -> None:
        schemes = client.get("/openapi.json").json()["components"]["securitySchemes"]

        assert schemes["HTTPBearer"]["type"] == "http"
        assert schemes["HTTPBearer"]["scheme"] == "bearer"
        assert all(s.get("type") != "oauth2" for s in schemes.values())

    def test_nonce_is_not_an_access_token(self, client, make_user) -> None:
        admin, _ = make_user("admin")
        nonce = create_nonce(NONCE_ACTION, admin.id)

        response = client.get(SETTINGS_URL, headers={"Authorization": f"Bearer {nonce}"})

        assert response.status_code == 401


class TestSettingsEndpoints:
    def test_defaults(self, client, make_user) -> None:
        _, headers = make_user("admin")

        response = client.get(SETTINGS_URL, headers=headers)

        assert response.status_code == 200
        data = response.json()
        assert data["og_enabled"] is True
        assert data["twitter_enabled"] is True
        assert data["schema_enabled"] is True
        assert data["default_og_type"] == "website"
        assert data["twitter_handle"] is None

    def test_update(self, client, make_user) -> None:
        _, headers = make_user("admin")

        response = client.put(
            SETTINGS_URL,
            json={"twitter_handle": "@example", "schema_enabled": False},
            headers=headers,
        )

        assert response.status_code == 200
        assert response.json()["twitter_handle"] == "@example"
        assert response.json()["schema_enabled"] is False
        assert client.get(SETTINGS_URL, headers=headers).json()["twitter_handle"] == "@example"

    def test_invalid_og_type(self, client, make_user) -> None:
        _, headers = make_user("admin")

        response = client.put(
            SETTINGS_URL,
            json={"default_og_type": "podcast", "twitter_handle": "@kept"},
            headers=headers,
        )

        assert response.status_code == 400
        errors = response.json()["detail"]["errors"]
        assert [e["field"] for e in errors] == ["default_og_type"]
        assert errors[0]["code"] == "invalid_value"
        # Nothing persisted
        assert client.get(SETTINGS_URL, headers=headers).json()["twitter_handle"] is None

    def test_reset(self, client, make_user) -> None:
        _, headers = make_user("admin")
        client.put(SETTINGS_URL, json={"og_enabled": False}, headers=headers)

        response = client.post(f"{SETTINGS_URL}/reset", headers=headers)

        assert response.status_code == 200
        assert response.json()["og_enabled"] is True

    def test_disabling_twitter_removes_tags(self, client, make_user, seed_documents) -> None:
        _, headers = make_user("admin")
        client.put(SETTINGS_URL, json={"twitter_enabled": False}, headers=headers)

        html = client.get("/p/hello-world").text

        assert "twitter:" not in html
        assert "og:title" in html

    def test_form(self, client, make_user) -> None:
        _, headers = make_user("admin")

        response = client.get(f"{SETTINGS_URL}/form", headers=headers)

        assert response.status_code == 200
        assert "<h1>DB SEO Settings</h1>" in response.text
        assert 'name="db_seo_og_enabled" value="1" checked="checked"' in response.text
        assert '<option value="website" selected="selected">' in response.text

    def test_submit_rendered_form(self, client, make_user, seed_documents) -> None:
        _, headers = make_user("admin")
        page = client.get(f"{SETTINGS_URL}/form", headers=headers).text
        action = re.search(r'<form method="post" action="([^"]+)"', page).group(1)

        # og box left checked, twitter and schema boxes unchecked
        response = client.post(
            action,
            data={
                "db_seo_og_enabled": "1",
                "db_seo_twitter_handle": "@me",
                "db_seo_og_type": "website",
            },
            headers=headers,
        )

        assert response.status_code == 200
        assert "Settings saved." in response.text
        settings = client.get(SETTINGS_URL, headers=headers).json()
        assert settings["og_enabled"] is True
        assert settings["twitter_enabled"] is False
        assert settings["schema_enabled"] is False
        assert settings["twitter_handle"] == "@me"

        html = client.get("/p/hello-world").text
        assert "og:title" in html
        assert "twitter:" not in html
        assert "application/ld+json" not in html

    def test_submit_form_invalid(self, client, make_user) -> None:
        _, headers = make_user("admin")

        response = client.post(
            f"{SETTINGS_URL}/form",
            data={"db_seo_og_enabled": "1", "db_seo_og_type": "podcast"},
            headers=headers,
        )

        assert response.status_code == 400
        assert "notice-error" in response.text
        assert client.get(SETTINGS_URL, headers=headers).json()["twitter_enabled"] is True

    def test_submit_form_requires_manage_options(self, client, make_user) -> None:
        _, headers = make_user("editor")

        response = client.post(f"{SETTINGS_URL}/form", data={}, headers=headers)

        assert response.status_code == 403


class TestMetaBox:
    def test_renders_with_nonce(self, client, make_user, seed_documents) -> None:
        _, headers = make_user("editor")

        response = client.get("/api/admin/seo/posts/1/meta-box", headers=headers)

        assert response.status_code == 200
        assert extract_nonce(response.text)
        assert '<option value="article" selected="selected">' in response.text

    def test_author_cannot_open_page(self, client, make_user, seed_documents) -> None:
        _, headers = make_user("author")

        response = client.get("/api/admin/seo/posts/2/meta-box", headers=headers)

        assert response.status_code == 403

    def test_missing_document(self, client, make_user) -> None:
        _, headers = make_user("admin")

        assert client.get("/api/admin/seo/posts/99/meta-box", headers=headers).status_code == 404

    def test_filtered_post_type(self, client, make_user, seed_documents, filter_registry) -> None:
        filter_registry.add_filter(
            META_BOX_POST_TYPES_HOOK, lambda types: [t for t in types if t != "page"]
        )
        _, headers = make_user("admin")

        assert client.get("/api/admin/seo/posts/2/meta-box", headers=headers).status_code == 404
        assert client.get("/api/admin/seo/posts/1/meta-box", headers=headers).status_code == 200


class TestSaveMeta:
    def test_save_round_trip(self, client, make_user, seed_documents, db_path) -> None:
        _, headers = make_user("editor")
        nonce = extract_nonce(client.get("/api/admin/seo/posts/1/meta-box", headers=headers).text)

        response = client.post(
            "/api/admin/seo/posts/1/meta",
            json={
                "db_seo_meta_box_nonce": nonce,
                "db_seo_custom_meta_title": "  <b>Share</b> me ",
                "db_seo_custom_image": "http://cdn.example.com/a.png",
            },
            headers=headers,
        )

        assert response.status_code == 200
        body = response.json()
        assert body["saved"] is True
        assert body["written"]["_db_seo_custom_meta_title"] == "Share me"

        meta = SQLitePostMetaRepo(db_path)
        # Stored as submitted, upgraded only at render time
        assert meta.get_meta(1, "_db_seo_custom_image") == "http://cdn.example.com/a.png"
        assert meta.get_meta(1, "_db_seo_custom_meta_description") is None

        html = client.get("/p/hello-world").text
        assert '<meta property="og:title" content="Share me" />' in html
        assert '<meta property="og:image" content="https://cdn.example.com/a.png" />' in html

        fetched = client.get("/api/admin/seo/posts/1/meta", headers=headers).json()
        assert fetched["custom_title"] == "Share me"

    def test_missing_nonce(self, client, make_user, seed_documents, db_path) -> None:
        _, headers = make_user("editor")

        response = client.post(
            "/api/admin/seo/posts/1/meta",
            json={"db_seo_custom_meta_title": "Nope"},
            headers=headers,
        )

        assert response.status_code == 200
        assert response.json()["saved"] is False
        assert response.json()["skipped_reason"] == "missing_nonce"
        assert SQLitePostMetaRepo(db_path).get_meta(1, "_db_seo_custom_meta_title") is None

    def test_nonce_from_other_user(self, client, make_user, seed_documents) -> None:
        other, _ = make_user("editor", email="other@example.com")
        _, headers = make_user("admin")

        response = client.post(
            "/api/admin/seo/posts/1/meta",
            json={
                "db_seo_meta_box_nonce": create_nonce(NONCE_ACTION, other.id),
                "db_seo_custom_meta_title": "Nope",
            },
            headers=headers,
        )

        assert response.json()["skipped_reason"] == "invalid_nonce"

    def test_anonymous_save_is_skipped(self, client, make_user, seed_documents) -> None:
        editor, _ = make_user("editor")

        response = client.post(
            "/api/admin/seo/posts/1/meta",
            json={
                "db_seo_meta_box_nonce": create_nonce(NONCE_ACTION, editor.id),
                "db_seo_custom_meta_title": "Nope",
            },
        )

        assert response.status_code == 200
        assert response.json()["skipped_reason"] == "invalid_nonce"

    def test_autosave_ignored(self, client, make_user, seed_documents) -> None:
        editor, headers = make_user("editor")

        response = client.post(
            "/api/admin/seo/posts/1/meta",
            json={
                "db_seo_meta_box_nonce": create_nonce(NONCE_ACTION, editor.id),
                "db_seo_custom_meta_title": "Draft",
                "autosave": True,
            },
            headers=headers,
        )

        assert response.json()["skipped_reason"] == "autosave"

    def test_author_cannot_save_page(self, client, make_user, seed_documents, db_path) -> None:
        author, headers = make_user("author")

        response = client.post(
            "/api/admin/seo/posts/2/meta",
            json={
                "db_seo_meta_box_nonce": create_nonce(NONCE_ACTION, author.id),
                "db_seo_custom_meta_title": "Mine now",
            },
            headers=headers,
        )

        assert response.json()["skipped_reason"] == "forbidden"
        assert SQLitePostMetaRepo(db_path).get_meta(2, "_db_seo_custom_meta_title") is None
