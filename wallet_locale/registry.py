"""Process-wide holder of the active string table.

Readers take ``registry.tree`` without locking.  A locale switch builds the
replacement tree completely, then publishes it with one reference
assignment, so a reader always sees either the old or the new table.
"""

import logging
import threading
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from wallet_locale.loader import load_locale
from wallet_locale.resolver import KeyPath, resolve
from wallet_locale.tree import ResourceTree

logger = logging.getLogger("wallet_locale.registry")


class LocaleRegistry:
    def __init__(self) -> None:
        self._tree: ResourceTree | None = None
        self._lock = threading.Lock()  # serialises writers only

    @property
    def tree(self) -> ResourceTree:
        tree = self._tree
        if tree is None:
            raise RuntimeError("No locale loaded; call activate() first")
        return tree

    @property
    def loaded(self) -> bool:
        return self._tree is not None

    @property
    def locale(self) -> str | None:
        tree = self._tree
        return tree.locale if tree else None

    def publish(self, tree: ResourceTree) -> None:
        with self._lock:
            previous = self._tree
            self._tree = tree
        if previous is None or previous.locale != tree.locale:
            logger.info("Active locale: %s", tree.locale)

    def activate(
        self,
        lang: str,
        fallback: str = "en",
        locales_dir: Path | str | None = None,
    ) -> ResourceTree:
        tree = load_locale(lang, fallback=fallback, locales_dir=locales_dir)
        self.publish(tree)
        return tree

    def resolve(
        self,
        key_path: KeyPath,
        context: Mapping[str, Any] | None = None,
        fallback: str | None = None,
    ) -> str:
        return resolve(self.tree, key_path, context, fallback)

    def reset(self) -> None:
        with self._lock:
            self._tree = None


# Module-level singleton
registry = LocaleRegistry()
