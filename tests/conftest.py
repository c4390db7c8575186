import json
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from wallet_locale.config import settings
from wallet_locale.loader import LOCALES_DIR, load_source
from wallet_locale.main import app
from wallet_locale.registry import registry
from wallet_locale.tree import build_tree

SAMPLE_SOURCE = {
    "accountDetailsGeth": {
        "imported": "You have imported {number} addresses from the Geth keystore:",
    },
    "button": {"cancel": "Cancel", "next": "Next"},
    "newAccount": {
        "hint": {
            "hint": "(optional) a hint to help with remembering the password",
            "label": "password hint",
        },
    },
}


@pytest.fixture
def en_source() -> dict:
    return load_source(LOCALES_DIR / "en.json")


@pytest.fixture
def en_tree(en_source):
    return build_tree(en_source, locale="en")


@pytest.fixture
def sample_tree():
    return build_tree(SAMPLE_SOURCE, locale="en")


@pytest.fixture
def locales_dir(tmp_path: Path) -> Path:
    """A scratch locales directory with a full ``en`` and a partial ``de``."""
    write_locale(tmp_path, "en", SAMPLE_SOURCE)
    write_locale(tmp_path, "de", {"button": {"cancel": "Abbrechen"}})
    return tmp_path


def write_locale(directory: Path, lang: str, data) -> Path:
    path = directory / f"{lang}.json"
    path.write_text(json.dumps(data, ensure_ascii=False), encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def _reset_registry():
    registry.reset()
    yield
    registry.reset()
    settings.DEFAULT_LOCALE = None
    settings.FALLBACK_LOCALE = None
    settings.LOCALES_DIR = None


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c
