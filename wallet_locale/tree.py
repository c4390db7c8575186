"""Immutable resource tree for one locale.

A string table is a nested literal::

    {
        "button": {"cancel": "Cancel"},
        "newAccount": {"name": {"label": "account name", "hint": "..."}},
    }

``build_tree`` validates it once and turns it into frozen nodes:

* ``Leaf``:      a string template
* ``Entry``:     a ``{label, hint}`` pair (a mapping whose keys are only
  ``label``/``hint`` and whose values are strings)
* ``Namespace``: any other mapping, nested to any depth
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Union

from wallet_locale.errors import MalformedResourceError

ENTRY_FIELDS = ("label", "hint")


@dataclass(frozen=True)
class Leaf:
    text: str


@dataclass(frozen=True)
class Entry:
    label: str | None = None
    hint: str | None = None

    def field(self, name: str) -> str | None:
        if name not in ENTRY_FIELDS:
            return None
        return getattr(self, name)


@dataclass(frozen=True)
class Namespace:
    children: Mapping[str, "Node"]

    def get(self, key: str) -> "Node | None":
        return self.children.get(key)


Node = Union[Leaf, Entry, Namespace]


@dataclass(frozen=True)
class ResourceTree:
    locale: str
    root: Namespace

    def namespaces(self) -> list[str]:
        return list(self.root.children)

    def keys(self) -> list[str]:
        """Every dotted path that resolves to a string, sorted."""
        return sorted(_iter_keys(self.root, ""))

    def to_dict(self) -> dict[str, Any]:
        return _to_plain(self.root)


def _join(prefix: str, key: str) -> str:
    return f"{prefix}.{key}" if prefix else key


def _iter_keys(node: Node, prefix: str) -> Iterator[str]:
    if isinstance(node, Leaf):
        yield prefix
    elif isinstance(node, Entry):
        for name in ENTRY_FIELDS:
            if node.field(name) is not None:
                yield _join(prefix, name)
    else:
        for key, child in node.children.items():
            yield from _iter_keys(child, _join(prefix, key))


def _to_plain(node: Node) -> Any:
    if isinstance(node, Leaf):
        return node.text
    if isinstance(node, Entry):
        return {name: node.field(name) for name in ENTRY_FIELDS if node.field(name) is not None}
    return {key: _to_plain(child) for key, child in node.children.items()}


def _is_entry(value: Mapping) -> bool:
    return bool(value) and all(
        k in ENTRY_FIELDS and isinstance(v, str) for k, v in value.items()
    )


def _build(value: Any, path: str) -> Node:
    if isinstance(value, str):
        return Leaf(value)
    if not isinstance(value, Mapping):
        raise MalformedResourceError(path, f"expected string or mapping, got {type(value).__name__}")
    if _is_entry(value):
        return Entry(label=value.get("label"), hint=value.get("hint"))

    children: dict[str, Node] = {}
    for key, child in value.items():
        if not isinstance(key, str) or not key:
            raise MalformedResourceError(path, f"invalid key {key!r}")
        if "." in key:
            raise MalformedResourceError(_join(path, key), "keys must not contain '.'")
        children[key] = _build(child, _join(path, key))
    return Namespace(MappingProxyType(children))


def build_tree(source: Mapping[str, Any], locale: str = "en") -> ResourceTree:
    """Validate ``source`` and return a frozen tree.

    Raises ``MalformedResourceError`` on the first invalid node; nothing is
    returned for a table that fails validation.
    """
    if not isinstance(source, Mapping):
        raise MalformedResourceError("", f"root must be a mapping, got {type(source).__name__}")
    root = _build(source, "")
    if not isinstance(root, Namespace):
        # A root made only of label/hint strings is still a namespace.
        root = Namespace(MappingProxyType({k: Leaf(v) for k, v in source.items()}))
    return ResourceTree(locale=locale, root=root)
