"""Key-path resolution and ``{placeholder}`` interpolation.

    resolve(tree, "button.cancel")                                 # "Cancel"
    resolve(tree, ["accountDetailsGeth", "imported"], {"number": 5})
    resolve(tree, "nonexistent.key", fallback="N/A")               # "N/A"

Placeholders missing from the context are kept verbatim, so
``"{number} addresses"`` without a context stays ``"{number} addresses"``.
"""

from __future__ import annotations

import re
from collections.abc import Mapping, Sequence
from typing import Any

from wallet_locale.errors import KeyNotFoundError
from wallet_locale.tree import Entry, Leaf, Namespace, ResourceTree

PLACEHOLDER = re.compile(r"\{([A-Za-z][A-Za-z0-9]*)\}")

KeyPath = str | Sequence[str]


def split_key(key_path: KeyPath) -> list[str]:
    if isinstance(key_path, str):
        return key_path.split(".") if key_path else []
    return list(key_path)


def interpolate(template: str, context: Mapping[str, Any] | None = None) -> str:
    if not context:
        return template

    def _sub(match: re.Match) -> str:
        name = match.group(1)
        if name in context:
            return str(context[name])
        return match.group(0)

    return PLACEHOLDER.sub(_sub, template)


def lookup(tree: ResourceTree, key_path: KeyPath) -> str:
    """Return the raw template at ``key_path`` or raise ``KeyNotFoundError``."""
    segments = split_key(key_path)
    dotted = ".".join(str(s) for s in segments)
    if not segments:
        raise KeyNotFoundError(dotted, "empty")

    node: Namespace | Entry | Leaf = tree.root
    for i, segment in enumerate(segments):
        if isinstance(node, Leaf):
            raise KeyNotFoundError(dotted, "past_leaf")
        if isinstance(node, Entry):
            text = node.field(segment)
            if text is None or i != len(segments) - 1:
                raise KeyNotFoundError(dotted, "missing" if text is None else "past_leaf")
            return text
        child = node.get(segment)
        if child is None:
            raise KeyNotFoundError(dotted, "missing")
        node = child

    if isinstance(node, Leaf):
        return node.text
    raise KeyNotFoundError(dotted, "not_a_leaf")


def resolve(
    tree: ResourceTree,
    key_path: KeyPath,
    context: Mapping[str, Any] | None = None,
    fallback: str | None = None,
) -> str:
    try:
        template = lookup(tree, key_path)
    except KeyNotFoundError:
        if fallback is not None:
            return fallback
        raise
    return interpolate(template, context)


class Resolver:
    """Resolver bound to a single tree."""

    def __init__(self, tree: ResourceTree) -> None:
        self.tree = tree

    def resolve(
        self,
        key_path: KeyPath,
        context: Mapping[str, Any] | None = None,
        fallback: str | None = None,
    ) -> str:
        return resolve(self.tree, key_path, context, fallback)

    def has(self, key_path: KeyPath) -> bool:
        try:
            lookup(self.tree, key_path)
        except KeyNotFoundError:
            return False
        return True
