#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html_to_text/node.py
"""Document tree nodes consumed by the converter.

The converter works on a lightweight, immutable tree produced by the HTML
parser boundary (see :mod:`html_to_text.parser`). The tree walker and the
base locator only ever read it.

"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType


class NodeKind(Enum):
    """Kind of a document tree node."""

    TAG = "tag"
    TEXT = "text"
    OTHER = "other"


_EMPTY_ATTRIBS: Mapping[str, str] = MappingProxyType({})


@dataclass(frozen=True)
class Node:
    """A node of the parsed document tree.

    Parameters
    ----------
    kind : NodeKind
        Node kind. ``OTHER`` covers comments, doctypes, scripts and styles,
        which contribute no text.
    name : str or None
        Lower-case tag name, present for ``TAG`` nodes only
    attribs : Mapping[str, str]
        Attribute values. Multi-valued attributes are space-joined.
    children : tuple of Node
        Child nodes, empty for non-tag nodes
    data : str or None
        Character data, present for ``TEXT`` nodes only

    """

    kind: NodeKind
    name: str | None = None
    attribs: Mapping[str, str] = field(default_factory=lambda: _EMPTY_ATTRIBS)
    children: tuple[Node, ...] = ()
    data: str | None = None

    @classmethod
    def tag(
        cls,
        name: str,
        attribs: Mapping[str, str] | None = None,
        children: Iterable[Node] = (),
    ) -> Node:
        """Create a tag node."""
        return cls(
            kind=NodeKind.TAG,
            name=name,
            attribs=MappingProxyType(dict(attribs)) if attribs else _EMPTY_ATTRIBS,
            children=tuple(children),
        )

    @classmethod
    def text(cls, data: str) -> Node:
        """Create a text node."""
        return cls(kind=NodeKind.TEXT, data=data)

    @classmethod
    def other(cls, data: str = "") -> Node:
        """Create a node that contributes no text (comment, doctype, script)."""
        return cls(kind=NodeKind.OTHER, data=data)

    @property
    def is_tag(self) -> bool:
        return self.kind is NodeKind.TAG

    @property
    def is_text(self) -> bool:
        return self.kind is NodeKind.TEXT

    def get(self, attribute: str, default: str = "") -> str:
        """Return an attribute value, or ``default`` when missing."""
        return self.attribs.get(attribute, default)
