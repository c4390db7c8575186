import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s - %(message)s"


def setup_logging(level: str = "INFO") -> None:
    """Attach one console handler to the ``wallet_locale`` logger tree."""
    logger = logging.getLogger("wallet_locale")
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    if any(getattr(h, "_wallet_locale", False) for h in logger.handlers):
        return
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%H:%M:%S"))
    handler._wallet_locale = True  # type: ignore[attr-defined]
    logger.addHandler(handler)
