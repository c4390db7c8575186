from wallet_locale.errors import (
    KeyNotFoundError,
    LocaleError,
    LocaleNotFoundError,
    MalformedResourceError,
    ResolutionError,
)
from wallet_locale.loader import load_locale
from wallet_locale.resolver import Resolver, interpolate, resolve
from wallet_locale.tree import Entry, Leaf, Namespace, ResourceTree, build_tree

__all__ = [
    "Entry",
    "KeyNotFoundError",
    "Leaf",
    "LocaleError",
    "LocaleNotFoundError",
    "MalformedResourceError",
    "Namespace",
    "ResolutionError",
    "Resolver",
    "ResourceTree",
    "build_tree",
    "interpolate",
    "load_locale",
    "resolve",
]
