"""Global configuration singleton for wallet-locale.

Reads settings from environment variables by default.  When embedded in
a host application, the caller can populate the singleton *before* the
first request so that nothing has to live in the process environment.

    from wallet_locale.config import settings
    settings.DEFAULT_LOCALE = "zh"
"""

import os
from typing import Optional


class Settings:
    """Lightweight mutable config, one global instance."""

    DEFAULT_LOCALE: Optional[str] = None
    FALLBACK_LOCALE: Optional[str] = None
    LOCALES_DIR: Optional[str] = None
    LOG_LEVEL: Optional[str] = None

    def get(self, name: str, default: Optional[str] = None) -> Optional[str]:
        """Return the attribute value if set, otherwise fall back to env."""
        value = getattr(self, name, None)
        if value is not None:
            return str(value)
        return os.getenv(name, default)

    @property
    def default_locale(self) -> str:
        return self.get("DEFAULT_LOCALE", "en")

    @property
    def fallback_locale(self) -> str:
        return self.get("FALLBACK_LOCALE", "en")

    @property
    def locales_dir(self) -> Optional[str]:
        return self.get("LOCALES_DIR")


settings = Settings()
