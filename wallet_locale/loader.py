"""Locale loading: reads ``locales/<lang>.json`` and builds a tree.

Fallback chain:  overrides → lang → fallback.

The fallback table is deep-merged underneath the requested one, so a
partial translation (e.g. ``zh.json``) still resolves every key that the
fallback locale defines.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from wallet_locale.errors import LocaleNotFoundError, MalformedResourceError
from wallet_locale.tree import ResourceTree, build_tree

LOCALES_DIR = Path(__file__).resolve().parent / "locales"

logger = logging.getLogger("wallet_locale.loader")


def load_source(path: Path) -> dict[str, Any]:
    if not path.is_file():
        return {}
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as exc:
        raise MalformedResourceError("", f"{path.name}: invalid JSON ({exc.msg} at line {exc.lineno})") from exc
    except UnicodeDecodeError as exc:
        raise MalformedResourceError("", f"{path.name}: not valid UTF-8 (byte {exc.start})") from exc
    if not isinstance(data, dict):
        raise MalformedResourceError("", f"{path.name}: root must be an object")
    return data


def available_locales(locales_dir: Path | str | None = None) -> list[str]:
    search = Path(locales_dir) if locales_dir else LOCALES_DIR
    if not search.is_dir():
        return []
    return sorted(p.stem for p in search.glob("*.json"))


def merge(base: Mapping[str, Any], override: Mapping[str, Any]) -> dict[str, Any]:
    """Deep-merge ``override`` onto ``base`` without touching either."""
    result: dict[str, Any] = dict(base)
    for key, value in override.items():
        current = result.get(key)
        if isinstance(current, Mapping) and isinstance(value, Mapping):
            result[key] = merge(current, value)
        else:
            result[key] = value
    return result


def unflatten(flat: Mapping[str, Any]) -> dict[str, Any]:
    """Turn ``{"button.cancel": "Stop"}`` into ``{"button": {"cancel": "Stop"}}``."""
    nested: dict[str, Any] = {}
    for dotted, value in flat.items():
        *parents, leaf = dotted.split(".")
        node = nested
        for part in parents:
            node = node.setdefault(part, {})
            if not isinstance(node, dict):
                raise MalformedResourceError(dotted, f"'{part}' is already a string")
        if isinstance(node.get(leaf), dict):
            raise MalformedResourceError(dotted, f"'{leaf}' already has nested keys")
        node[leaf] = value
    return nested


def load_locale(
    lang: str = "en",
    fallback: str = "en",
    locales_dir: Path | str | None = None,
    overrides: Mapping[str, Any] | None = None,
) -> ResourceTree:
    """Build the tree for ``lang`` layered over ``fallback``.

    Raises ``LocaleNotFoundError`` when neither table exists, and
    ``MalformedResourceError`` when the merged table fails validation.
    """
    search = Path(locales_dir) if locales_dir else LOCALES_DIR

    lang_path = search / f"{lang}.json"
    base = load_source(search / f"{fallback}.json") if fallback != lang else {}
    if not lang_path.is_file():
        if not base:
            raise LocaleNotFoundError(lang)
        logger.warning("No table for locale '%s', using '%s' strings", lang, fallback)

    source = merge(base, load_source(lang_path))
    if overrides:
        source = merge(source, unflatten(overrides))

    tree = build_tree(source, locale=lang)
    logger.info("Loaded locale '%s' (%d keys)", lang, len(tree.keys()))
    return tree
