"""Tests for the JSON resolution API."""

from __future__ import annotations

from variantkit.web.app import create_app


class TestAppFactory:
    def test_engine_stored(self, app, engine):
        assert app.extensions["engine"] is engine

    def test_default_engine(self):
        application = create_app()
        assert application.extensions["engine"].config.cache_size == 256

    def test_config_applied(self):
        assert create_app(config={"TESTING": True}).config["TESTING"] is True


class TestResolveRoute:
    def test_button(self, client):
        resp = client.post("/api/resolve/button", json={"label": "Docs", "href": "https://nextjs.org"})
        assert resp.status_code == 200
        body = resp.get_json()
        assert body["kind"] == "button"
        assert body["plan"]["attributes"]["rel"] == "noopener noreferrer"
        assert body["deprecations"] == []

    def test_deprecations_reported(self, client):
        resp = client.post("/api/resolve/logo", json={"src": "/a.svg"})
        assert resp.status_code == 200
        assert resp.get_json()["deprecations"] == ["logo: 'src' is deprecated, use 'address'"]

    def test_deprecations_scoped_to_request(self, client):
        first = client.post("/api/resolve/button", json={"className": "x", "ariaLabel": "Go"})
        second = client.post("/api/resolve/logo", json={"alt": "Home"})
        third = client.post("/api/resolve/button", json={"label": "Go"})
        assert first.get_json()["deprecations"] == [
            "button: 'className' is deprecated, use 'class_name'",
            "button: 'ariaLabel' is deprecated, use 'aria_label'",
        ]
        assert second.get_json()["deprecations"] == ["logo: 'alt' is deprecated, use 'alt_text'"]
        assert third.get_json()["deprecations"] == []

    def test_wrong_type_is_client_error(self, client):
        resp = client.post("/api/resolve/button", json={"href": 123})
        assert resp.status_code == 400
        body = resp.get_json()
        assert body["key"] == "href"
        assert "'href' must be str | None, got int" in body["error"]

    def test_nested_wrong_type_is_client_error(self, client):
        resp = client.post("/api/resolve/header", json={"navigation": [{"label": "a", "href": 7}]})
        assert resp.status_code == 400
        assert resp.get_json()["key"] == "href"

    def test_string_bool_is_client_error(self, client):
        resp = client.post("/api/resolve/button", json={"loading": "false"})
        assert resp.status_code == 400
        assert resp.get_json()["key"] == "loading"

    def test_config_error(self, client):
        resp = client.post("/api/resolve/button", json={"variant": "tertiary"})
        assert resp.status_code == 400
        body = resp.get_json()
        assert "'tertiary'" in body["error"]
        assert body["dimension"] == "variant"
        assert body["key"] is None

    def test_unknown_key(self, client):
        resp = client.post("/api/resolve/header", json={"menu": True})
        assert resp.status_code == 400
        assert resp.get_json()["key"] == "menu"

    def test_unknown_kind(self, client):
        resp = client.post("/api/resolve/carousel", json={})
        assert resp.status_code == 404

    def test_non_object_body(self, client):
        resp = client.post("/api/resolve/button", json=["label"])
        assert resp.status_code == 400
        assert resp.get_json()["error"] == "JSON object body required"

    def test_missing_body(self, client):
        resp = client.post("/api/resolve/button", data="not json", content_type="text/plain")
        assert resp.status_code == 400

    def test_page(self, client):
        resp = client.post(
            "/api/resolve/page",
            json={"variant": "centered", "overrides": {"max_width": "md", "show_footer": False}},
        )
        body = resp.get_json()
        assert body["plan"]["layout"]["main_classes"] == "w-full max-w-md"
        assert body["plan"]["footer"] is None

    def test_uses_app_engine_cache(self, client, engine):
        client.post("/api/resolve/button", json={"label": "a"})
        client.post("/api/resolve/button", json={"label": "b"})
        assert engine.styles.info().hits >= 1

    def test_cors_headers(self, client):
        resp = client.post("/api/resolve/button", json={})
        assert resp.headers["Access-Control-Allow-Origin"] == "*"

    def test_preflight(self, client):
        resp = client.options("/api/resolve/button")
        assert resp.status_code == 204
        assert "POST" in resp.headers["Access-Control-Allow-Methods"]


class TestValidateRoute:
    def test_valid(self, client):
        resp = client.post("/api/validate/button", json={"label": "Go"})
        assert resp.get_json() == {"valid": True, "diagnostics": []}

    def test_invalid(self, client):
        resp = client.post("/api/validate/footer", json={"variant": "fancy", "gridPosition": "x"})
        body = resp.get_json()
        assert body["valid"] is False
        severities = sorted(d["severity"] for d in body["diagnostics"])
        assert severities == ["ERROR", "WARNING"]

    def test_non_object_body(self, client):
        body = client.post("/api/validate/button", json=[1]).get_json()
        assert body["valid"] is False
        assert body["diagnostics"][0]["rule"] == "check_shape"

    def test_wrong_type(self, client):
        body = client.post("/api/validate/button", json={"disabled": "yes"}).get_json()
        assert body["valid"] is False
        assert body["diagnostics"][0]["rule"] == "check_field_types"
        assert body["diagnostics"][0]["key"] == "disabled"

    def test_nested_path(self, client):
        body = client.post(
            "/api/validate/header", json={"actions": [{"label": "a"}, {"size": "huge"}]}
        ).get_json()
        assert [d["path"] for d in body["diagnostics"]] == ["header.actions[1]"]

    def test_unknown_kind(self, client):
        assert client.post("/api/validate/icon", json={}).status_code == 404


class TestPresetsRoute:
    def test_presets(self, client):
        body = client.get("/api/presets").get_json()
        assert set(body["layouts"]) == {"default", "landing", "app", "docs", "centered", "fullscreen"}
        assert body["layouts"]["centered"]["main_classes"] == "w-full max-w-md"
        assert body["max_widths"][0] == "sm"
        assert "page" in body["kinds"]
