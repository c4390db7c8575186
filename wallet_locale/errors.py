"""Error taxonomy for string-table loading and key resolution."""


class LocaleError(Exception):
    pass


class MalformedResourceError(LocaleError):
    """Raised while building a tree; the table cannot be used at all."""

    def __init__(self, path: str, message: str):
        self.path = path
        self.message = message
        where = path or "<root>"
        super().__init__(f"Malformed resource at '{where}': {message}")


class LocaleNotFoundError(LocaleError):
    def __init__(self, lang: str):
        self.lang = lang
        super().__init__(f"No string table found for locale '{lang}'")


class ResolutionError(LocaleError):
    pass


class KeyNotFoundError(ResolutionError):
    def __init__(self, path: str, reason: str = "missing"):
        self.path = path
        self.reason = reason  # "missing" | "not_a_leaf" | "past_leaf" | "empty"
        super().__init__(f"No string at '{path}' ({reason})")
