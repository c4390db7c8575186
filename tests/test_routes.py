import inspect
from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

from wallet_locale.config import settings
from wallet_locale.errors import MalformedResourceError
from wallet_locale.main import app
from wallet_locale.registry import registry
from wallet_locale.routes import activate_locale, get_locale_table


# --- GET /api/locales ---

class TestGetLocales:
    def test_active_and_available(self, client):
        resp = client.get("/api/locales")
        assert resp.status_code == 200
        data = resp.json()
        assert data["active"] == "en"
        assert {"en", "zh"} <= set(data["available"])

    def test_custom_locales_dir(self, locales_dir):
        settings.LOCALES_DIR = str(locales_dir)
        with TestClient(app) as c:
            data = c.get("/api/locales").json()
        assert data["available"] == ["de", "en"]


# --- GET /api/locales/{lang} ---

class TestGetLocaleTable:
    def test_english_table(self, client):
        resp = client.get("/api/locales/en")
        assert resp.status_code == 200
        data = resp.json()
        assert data["button"]["cancel"] == "Cancel"
        assert data["newAccount"]["hint"] == {
            "label": "password hint",
            "hint": "(optional) a hint to help with remembering the password",
        }

    def test_partial_table_is_merged(self, client):
        data = client.get("/api/locales/zh").json()
        assert data["button"]["cancel"] == "取消"
        assert data["button"]["print"] == "Print Phrase"

    def test_does_not_change_active_locale(self, client):
        client.get("/api/locales/zh")
        assert registry.locale == "en"

    def test_unknown_locale(self, client):
        resp = client.get("/api/locales/xx")
        assert resp.status_code == 404
        assert resp.json()["lang"] == "xx"


# --- POST /api/locale ---

class TestActivateLocale:
    def test_switch(self, client):
        resp = client.post("/api/locale", json={"lang": "zh"})
        assert resp.status_code == 200
        assert resp.json()["locale"] == "zh"
        assert resp.json()["key_count"] > 0
        assert registry.locale == "zh"

        resolved = client.post("/api/resolve", json={"key": "button.cancel"}).json()
        assert resolved["text"] == "取消"
        assert resolved["locale"] == "zh"

    def test_unknown_locale(self, client):
        resp = client.post("/api/locale", json={"lang": "xx"})
        assert resp.status_code == 404
        assert registry.locale == "en"

    def test_undecodable_table_keeps_active_locale(self, locales_dir):
        settings.LOCALES_DIR = str(locales_dir)
        (locales_dir / "de.json").write_bytes(b'{"button": {"cancel": "\xff\xfe"}}')
        with TestClient(app) as c:
            resp = c.post("/api/locale", json={"lang": "de"})
            assert resp.status_code == 500
            assert "UTF-8" in resp.json()["detail"]
            assert registry.locale == "en"

    def test_table_handlers_run_in_threadpool(self):
        assert not inspect.iscoroutinefunction(get_locale_table)
        assert not inspect.iscoroutinefunction(activate_locale)


# --- POST /api/resolve ---

class TestResolve:
    def test_plain(self, client):
        resp = client.post("/api/resolve", json={"key": "button.cancel"})
        assert resp.status_code == 200
        assert resp.json() == {"key": "button.cancel", "text": "Cancel", "locale": "en"}

    def test_segment_list(self, client):
        resp = client.post("/api/resolve", json={"key": ["title", "accountInfo"]})
        assert resp.json()["key"] == "title.accountInfo"
        assert resp.json()["text"] == "account information"

    def test_context(self, client):
        resp = client.post("/api/resolve", json={
            "key": "accountDetailsGeth.imported",
            "context": {"number": 5},
        })
        assert resp.json()["text"] == "You have imported 5 addresses from the Geth keystore:"

    def test_no_context_keeps_placeholder(self, client):
        resp = client.post("/api/resolve", json={"key": "accountDetailsGeth.imported"})
        assert "{number}" in resp.json()["text"]

    def test_fallback(self, client):
        resp = client.post("/api/resolve", json={"key": "nonexistent.key", "fallback": "N/A"})
        assert resp.status_code == 200
        assert resp.json()["text"] == "N/A"

    def test_missing_key(self, client):
        resp = client.post("/api/resolve", json={"key": "nonexistent.key"})
        assert resp.status_code == 404
        data = resp.json()
        assert data["key"] == "nonexistent.key"
        assert data["reason"] == "missing"

    def test_intermediate_node(self, client):
        resp = client.post("/api/resolve", json={"key": "newAccount.hint"})
        assert resp.status_code == 404
        assert resp.json()["reason"] == "not_a_leaf"

    def test_invalid_payload(self, client):
        resp = client.post("/api/resolve", json={})
        assert resp.status_code == 422


# --- GET /api/keys ---

class TestKeys:
    def test_lists_active_keys(self, client):
        data = client.get("/api/keys").json()
        assert data["locale"] == "en"
        assert "button.cancel" in data["keys"]
        assert "newAccount.hint.label" in data["keys"]
        assert "newAccount.hint" not in data["keys"]


# --- startup ---

class TestStartup:
    def test_default_locale_from_env(self):
        with patch.dict("os.environ", {"DEFAULT_LOCALE": "zh"}):
            with TestClient(app) as c:
                assert c.get("/api/locales").json()["active"] == "zh"

    def test_malformed_table_aborts_startup(self, tmp_path):
        (tmp_path / "en.json").write_text('{"button": {"cancel": 1}}', encoding="utf-8")
        settings.LOCALES_DIR = str(tmp_path)
        with pytest.raises(MalformedResourceError):
            with TestClient(app):
                pass
        assert not registry.loaded
