"""UI-side translator, reads from ``wallet_locale/locales/<lang>.json``.

The same locale files are served to the JS wizard via ``/api/locales`` and
read on the Python side for server-rendered text.

Fallback chain:  overrides → lang → fallback.

Usage::

    from wallet_locale.i18n import I18n

    t = I18n('zh')                              # Chinese, English fallback
    t = I18n(overrides={'button.next': 'Continue'})

    t('button.cancel')                          # "取消"
    t('accountDetailsGeth.imported', number=5)  # "You have imported 5 ..."

A missing key renders as the dotted key itself so gaps stay visible in the
UI; pass ``strict=True`` to get ``KeyNotFoundError`` instead.
"""

import logging
from pathlib import Path
from typing import Any

from wallet_locale.errors import KeyNotFoundError
from wallet_locale.loader import load_locale
from wallet_locale.resolver import KeyPath, resolve

logger = logging.getLogger("wallet_locale.i18n")


class I18n:
    """Callable key→string translator bound to one locale."""

    def __init__(
        self,
        lang: str = 'en',
        fallback: str = 'en',
        locales_dir: Path | str | None = None,
        overrides: dict[str, str] | None = None,
        strict: bool = False,
    ) -> None:
        self.tree = load_locale(lang, fallback=fallback, locales_dir=locales_dir, overrides=overrides)
        self.strict = strict

    @property
    def lang(self) -> str:
        return self.tree.locale

    def __call__(self, key: KeyPath, **kwargs: Any) -> str:
        try:
            return resolve(self.tree, key, kwargs)
        except KeyNotFoundError as exc:
            if self.strict:
                raise
            logger.warning("Missing string %s for locale '%s' (%s)", exc.path, self.lang, exc.reason)
            return exc.path
