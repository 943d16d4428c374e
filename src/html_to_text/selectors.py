#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html_to_text/selectors.py
"""Compact tag selectors of the form ``tag.class#id``.

Selectors name an element and, optionally, classes and ids the element must
carry. They are case-sensitive. Characters outside the grammar are ignored.

"""

from __future__ import annotations

import re
from dataclasses import dataclass
from functools import lru_cache

from html_to_text.node import Node, NodeKind

_ELEMENT_RE = re.compile(r"^\w*")
_CLASS_RE = re.compile(r"\.([\w-]*)")
_ID_RE = re.compile(r"#([\w-]*)")


@dataclass(frozen=True)
class TagSelector:
    """A parsed ``tag.class#id`` selector.

    Parameters
    ----------
    element : str
        Required tag name
    classes : tuple of str
        Classes the element must have
    ids : tuple of str
        Ids the element must have

    Examples
    --------
        >>> TagSelector.parse("div.article#main")
        TagSelector(element='div', classes=('article',), ids=('main',))

    """

    element: str
    classes: tuple[str, ...] = ()
    ids: tuple[str, ...] = ()

    @classmethod
    def parse(cls, selector: str) -> TagSelector:
        """Split a selector string into element, classes and ids."""
        return _parse_cached(selector)

    def matches(self, node: Node) -> bool:
        """Check whether a node satisfies this selector."""
        if node.kind is not NodeKind.TAG or node.name != self.element:
            return False

        class_attr = node.get("class")
        id_attr = node.get("id")
        document_classes = set(class_attr.split(" ")) if class_attr else set()
        document_ids = set(id_attr.split(" ")) if id_attr else set()
        return document_classes.issuperset(self.classes) and document_ids.issuperset(self.ids)

    def __str__(self) -> str:
        return self.element + "".join(f".{c}" for c in self.classes) + "".join(f"#{i}" for i in self.ids)


@lru_cache(maxsize=128)
def _parse_cached(selector: str) -> TagSelector:
    element_match = _ELEMENT_RE.match(selector)
    return TagSelector(
        element=element_match.group(0) if element_match else "",
        classes=tuple(_CLASS_RE.findall(selector)),
        ids=tuple(_ID_RE.findall(selector)),
    )
