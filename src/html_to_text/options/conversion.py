#  Copyright (c) 2025 Tom Villani, Ph.D.
# html_to_text/options/conversion.py
"""Configuration options for HTML to plain text conversion.

This module defines the option dataclasses consumed by the tree walker, the
word-wrap engine, the base locator and the built-in formatters. All options
are frozen: a conversion call constructs its configuration once (defaults
merged with caller overrides), validates it, and never mutates it. The only
mutable value during a conversion, the line character cursor, lives in
:class:`html_to_text.walker.WalkState`.

Examples
--------
Override a nested setting:

    >>> from html_to_text.options import HtmlToTextOptions
    >>> options = HtmlToTextOptions.from_dict({"wrap": {"width": 40}})
    >>> options.wrap.width
    40

"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field, fields, is_dataclass, replace
from types import MappingProxyType
from typing import Any, TypeVar

from html_to_text.constants import (
    DEFAULT_BASE_ELEMENTS,
    DEFAULT_ELLIPSIS,
    DEFAULT_FORCE_WRAP_ON_LIMIT,
    DEFAULT_HIDE_LINK_HREF_IF_SAME_AS_TEXT,
    DEFAULT_IGNORE_HREF,
    DEFAULT_IGNORE_IMAGE,
    DEFAULT_MAX_CHILD_NODES,
    DEFAULT_MAX_DEPTH,
    DEFAULT_NO_ANCHOR_URL,
    DEFAULT_NO_LINK_BRACKETS,
    DEFAULT_PRESERVE_NEWLINES,
    DEFAULT_RETURN_DOM_BY_DEFAULT,
    DEFAULT_SINGLE_NEWLINE_PARAGRAPHS,
    DEFAULT_TABLE_COLUMN_SPACING,
    DEFAULT_TAG_FORMAT,
    DEFAULT_TAG_FORMATS,
    DEFAULT_UNORDERED_LIST_ITEM_PREFIX,
    DEFAULT_UPPERCASE_HEADER_CELLS,
    DEFAULT_UPPERCASE_HEADINGS,
    DEFAULT_WORDWRAP_WIDTH,
    DEFAULT_WRAP_CHARACTERS,
)
from html_to_text.exceptions import ValidationError
from html_to_text.options.base import CloneFrozenMixin

logger = logging.getLogger(__name__)

_T = TypeVar("_T")


def _validate_optional_count(name: str, value: Any) -> None:
    if value is None:
        return
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(f"{name} must be an integer or None, got {value!r}", name, value)
    if value < 0:
        raise ValidationError(f"{name} must be non-negative, got {value}", name, value)


@dataclass(frozen=True)
class LimitsOptions(CloneFrozenMixin):
    """Traversal limits shared by the tree walker and the base locator.

    Parameters
    ----------
    max_depth : int or None, default None
        Number of nesting levels below the base elements that are rendered.
        Deeper content is replaced by ``ellipsis``. None means unbounded.
    max_child_nodes : int or None, default None
        Maximum number of siblings processed per level. When exceeded, the
        remaining siblings are dropped and ``ellipsis`` is appended once.
    ellipsis : str, default "..."
        Marker appended wherever content was truncated. Empty disables it.

    """

    max_depth: int | None = field(
        default=DEFAULT_MAX_DEPTH,
        metadata={"help": "Maximum recursion depth (None = unbounded)", "type": int, "importance": "core"},
    )
    max_child_nodes: int | None = field(
        default=DEFAULT_MAX_CHILD_NODES,
        metadata={"help": "Maximum sibling nodes processed per level", "type": int, "importance": "core"},
    )
    ellipsis: str = field(
        default=DEFAULT_ELLIPSIS,
        metadata={"help": "Marker appended when content is truncated", "type": str, "importance": "advanced"},
    )

    def __post_init__(self) -> None:
        """Validate limit ranges.

        Raises
        ------
        ValidationError
            If a limit is negative or not an integer.

        """
        _validate_optional_count("max_depth", self.max_depth)
        _validate_optional_count("max_child_nodes", self.max_child_nodes)
        if self.ellipsis is None:
            object.__setattr__(self, "ellipsis", "")
        elif not isinstance(self.ellipsis, str):
            raise ValidationError(f"ellipsis must be a string, got {self.ellipsis!r}", "ellipsis", self.ellipsis)


@dataclass(frozen=True)
class LongWordSplitOptions(CloneFrozenMixin):
    """Policy for words longer than the wrap width.

    Parameters
    ----------
    force_wrap_on_limit : bool, default False
        Split words longer than the width, after one of the
        ``wrap_characters`` when one occurs in range, else at the width
        boundary. When False such words are kept whole and may exceed the
        width.
    wrap_characters : tuple of str, default ()
        Characters after which a forced split is preferred, in order of
        preference.

    """

    force_wrap_on_limit: bool = field(
        default=DEFAULT_FORCE_WRAP_ON_LIMIT,
        metadata={"help": "Split over-long words at the width limit", "importance": "advanced"},
    )
    wrap_characters: tuple[str, ...] = field(
        default=DEFAULT_WRAP_CHARACTERS,
        metadata={"help": "Preferred characters to split over-long words after", "importance": "advanced"},
    )

    def __post_init__(self) -> None:
        """Coerce wrap characters to a tuple and validate them.

        Raises
        ------
        ValidationError
            If a wrap character is not a single-character string.

        """
        characters = self.wrap_characters
        if isinstance(characters, str):
            characters = tuple(characters)
        object.__setattr__(self, "wrap_characters", tuple(characters))

        for char in self.wrap_characters:
            if not isinstance(char, str) or len(char) != 1:
                raise ValidationError(
                    f"wrap_characters entries must be single characters, got {char!r}", "wrap_characters", char
                )


@dataclass(frozen=True)
class WrapOptions(CloneFrozenMixin):
    """Word-wrap layout settings.

    Parameters
    ----------
    width : int or None, default 80
        Target line width. None disables wrapping entirely.
    preserve_newlines : bool, default False
        Keep explicit newlines found in text nodes. When False all original
        whitespace is collapsed and lines break by width only.
    long_word_split : LongWordSplitOptions
        Policy for words longer than ``width``.

    """

    width: int | None = field(
        default=DEFAULT_WORDWRAP_WIDTH,
        metadata={"help": "Target line width (None = no wrapping)", "type": int, "importance": "core"},
    )
    preserve_newlines: bool = field(
        default=DEFAULT_PRESERVE_NEWLINES,
        metadata={"help": "Keep line breaks found in text nodes", "importance": "core"},
    )
    long_word_split: LongWordSplitOptions = field(
        default_factory=LongWordSplitOptions,
        metadata={"help": "Policy for words longer than the width", "importance": "advanced"},
    )

    def __post_init__(self) -> None:
        """Validate the wrap width.

        Raises
        ------
        ValidationError
            If ``width`` is not a positive integer or None.

        """
        if self.width is not None:
            if isinstance(self.width, bool) or not isinstance(self.width, int):
                raise ValidationError(f"width must be an integer or None, got {self.width!r}", "width", self.width)
            if self.width <= 0:
                raise ValidationError(f"width must be positive, got {self.width}", "width", self.width)
        if isinstance(self.long_word_split, Mapping):
            object.__setattr__(self, "long_word_split", LongWordSplitOptions(**self.long_word_split))


@dataclass(frozen=True)
class TagSpec(CloneFrozenMixin):
    """Formatting rule for one tag name.

    Parameters
    ----------
    format : str, default "children"
        Id of the formatter in the registry
    inline : bool, default False
        Whether the formatter output merges with surrounding inline text

    """

    format: str = DEFAULT_TAG_FORMAT
    inline: bool = False

    def __post_init__(self) -> None:
        """Validate the formatter id."""
        if not isinstance(self.format, str) or not self.format:
            raise ValidationError(f"Tag format must be a non-empty string, got {self.format!r}", "tags", self.format)

    @classmethod
    def coerce(cls, value: Any) -> TagSpec:
        """Build a TagSpec from a TagSpec, a mapping, a format id or a ``(format, inline)`` pair."""
        if isinstance(value, TagSpec):
            return value
        if isinstance(value, Mapping):
            return cls(**value)
        if isinstance(value, str):
            return cls(format=value)
        if isinstance(value, tuple) and len(value) == 2:
            return cls(format=value[0], inline=bool(value[1]))
        raise ValidationError(f"Cannot interpret {value!r} as a tag specification", "tags", value)


def _default_tags() -> Mapping[str, TagSpec]:
    return MappingProxyType(
        {name: TagSpec(format=fmt, inline=inline) for name, (fmt, inline) in DEFAULT_TAG_FORMATS.items()}
    )


@dataclass(frozen=True)
class HtmlToTextOptions(CloneFrozenMixin):
    """Configuration options for HTML to plain text conversion.

    Parameters
    ----------
    base_elements : tuple of str, default ("body",)
        Selectors (``tag.class#id``) of the elements traversal starts from.
        Their outputs are concatenated in order.
    limits : LimitsOptions
        Depth and breadth limits for traversal
    wrap : WrapOptions
        Word-wrap layout settings
    tags : Mapping[str, TagSpec]
        Tag name to formatter mapping. The ``""`` key is the default for
        unmatched tags.
    return_dom_by_default : bool, default True
        Convert the whole tree when a base element matches nothing. When
        False such a base element produces no text.
    uppercase_headings : bool, default True
        Upper-case heading text
    single_newline_paragraphs : bool, default False
        Separate paragraphs with one newline instead of a blank line
    unordered_list_item_prefix : str, default " * "
        Marker placed before unordered list items
    ignore_href : bool, default False
        Drop link targets and keep only link text
    ignore_image : bool, default False
        Drop images entirely
    no_anchor_url : bool, default True
        Hide targets of in-page anchors (``href="#..."``)
    no_link_brackets : bool, default False
        Render link targets without surrounding brackets
    hide_link_href_if_same_as_text : bool, default False
        Hide the target when it equals the link text
    link_href_base_url : str or None, default None
        Prefix for root-relative link and image URLs
    tables : bool or tuple of str, default ()
        Selectors of tables laid out as data tables. True lays out every
        table; other tables are rendered as plain blocks.
    uppercase_header_cells : bool, default True
        Upper-case ``th`` cell text in data tables
    table_column_spacing : int, default 3
        Spaces between data table columns

    """

    base_elements: tuple[str, ...] = field(
        default=DEFAULT_BASE_ELEMENTS,
        metadata={"help": "Selectors where traversal starts", "importance": "core"},
    )
    limits: LimitsOptions = field(
        default_factory=LimitsOptions,
        metadata={"help": "Depth and breadth limits", "importance": "core"},
    )
    wrap: WrapOptions = field(
        default_factory=WrapOptions,
        metadata={"help": "Word-wrap settings", "importance": "core"},
    )
    tags: Mapping[str, TagSpec] = field(
        default_factory=_default_tags,
        metadata={"help": "Tag name to formatter mapping", "importance": "advanced"},
    )
    return_dom_by_default: bool = field(
        default=DEFAULT_RETURN_DOM_BY_DEFAULT,
        metadata={"help": "Convert the whole tree when a base element is not found", "importance": "core"},
    )
    uppercase_headings: bool = field(
        default=DEFAULT_UPPERCASE_HEADINGS,
        metadata={"help": "Upper-case heading text", "importance": "core"},
    )
    single_newline_paragraphs: bool = field(
        default=DEFAULT_SINGLE_NEWLINE_PARAGRAPHS,
        metadata={"help": "Use a single newline between paragraphs", "importance": "advanced"},
    )
    unordered_list_item_prefix: str = field(
        default=DEFAULT_UNORDERED_LIST_ITEM_PREFIX,
        metadata={"help": "Prefix for unordered list items", "type": str, "importance": "advanced"},
    )
    ignore_href: bool = field(
        default=DEFAULT_IGNORE_HREF,
        metadata={"help": "Drop link targets", "importance": "core"},
    )
    ignore_image: bool = field(
        default=DEFAULT_IGNORE_IMAGE,
        metadata={"help": "Drop images", "importance": "core"},
    )
    no_anchor_url: bool = field(
        default=DEFAULT_NO_ANCHOR_URL,
        metadata={"help": "Hide in-page anchor targets", "importance": "advanced"},
    )
    no_link_brackets: bool = field(
        default=DEFAULT_NO_LINK_BRACKETS,
        metadata={"help": "Render link targets without brackets", "importance": "advanced"},
    )
    hide_link_href_if_same_as_text: bool = field(
        default=DEFAULT_HIDE_LINK_HREF_IF_SAME_AS_TEXT,
        metadata={"help": "Hide link target when equal to link text", "importance": "advanced"},
    )
    link_href_base_url: str | None = field(
        default=None,
        metadata={"help": "Base URL for root-relative links and images", "type": str, "importance": "advanced"},
    )
    tables: bool | tuple[str, ...] = field(
        default=(),
        metadata={"help": "Selectors of tables laid out as data tables (True = all)", "importance": "core"},
    )
    uppercase_header_cells: bool = field(
        default=DEFAULT_UPPERCASE_HEADER_CELLS,
        metadata={"help": "Upper-case table header cells", "importance": "advanced"},
    )
    table_column_spacing: int = field(
        default=DEFAULT_TABLE_COLUMN_SPACING,
        metadata={"help": "Spaces between data table columns", "type": int, "importance": "advanced"},
    )

    def __post_init__(self) -> None:
        """Coerce collection fields and validate option values.

        Raises
        ------
        ValidationError
            If any field value violates its contract.

        """
        base_elements = self.base_elements
        if isinstance(base_elements, str):
            base_elements = (base_elements,)
        base_elements = tuple(base_elements)
        if not base_elements:
            raise ValidationError("base_elements must contain at least one selector", "base_elements", base_elements)
        for selector in base_elements:
            if not isinstance(selector, str) or not selector:
                raise ValidationError(f"Invalid base element selector: {selector!r}", "base_elements", selector)
        object.__setattr__(self, "base_elements", base_elements)

        if isinstance(self.limits, Mapping):
            object.__setattr__(self, "limits", LimitsOptions(**self.limits))
        if isinstance(self.wrap, Mapping):
            object.__setattr__(self, "wrap", WrapOptions(**self.wrap))

        tags = {name: TagSpec.coerce(spec) for name, spec in self.tags.items()}
        if "" not in tags:
            tags[""] = TagSpec()
        object.__setattr__(self, "tags", MappingProxyType(tags))

        tables = self.tables
        if tables is False or tables is None:
            tables = ()
        elif isinstance(tables, str):
            tables = (tables,)
        elif tables is not True:
            tables = tuple(tables)
        object.__setattr__(self, "tables", tables)

        if not isinstance(self.unordered_list_item_prefix, str):
            raise ValidationError(
                "unordered_list_item_prefix must be a string",
                "unordered_list_item_prefix",
                self.unordered_list_item_prefix,
            )
        _validate_optional_count("table_column_spacing", self.table_column_spacing)
        if self.table_column_spacing is None:
            raise ValidationError("table_column_spacing cannot be None", "table_column_spacing", None)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> HtmlToTextOptions:
        """Build options from a partial, possibly nested mapping merged over the defaults.

        Parameters
        ----------
        data : Mapping[str, Any]
            Partial configuration, e.g. ``{"wrap": {"width": 40}}``

        Returns
        -------
        HtmlToTextOptions
            Fully specified, validated options

        Raises
        ------
        ValidationError
            If a key is unknown or a value is invalid

        """
        return merge_options(cls(), **data)


def _merge_dataclass(instance: _T, overrides: Mapping[str, Any], path: str) -> _T:
    known = {f.name for f in fields(instance)}  # type: ignore[arg-type]
    changes: dict[str, Any] = {}

    for key, value in overrides.items():
        if key not in known:
            qualified = f"{path}.{key}" if path else key
            raise ValidationError(f"Unknown option '{qualified}'", qualified, value)

        current = getattr(instance, key)
        if is_dataclass(current) and isinstance(value, Mapping):
            value = _merge_dataclass(current, value, f"{path}.{key}" if path else key)
        elif isinstance(current, Mapping) and isinstance(value, Mapping):
            value = _merge_tags(current, value, f"{path}.{key}" if path else key)
        changes[key] = value

    return replace(instance, **changes)  # type: ignore[type-var]


def _merge_tags(current: Mapping[str, TagSpec], overrides: Mapping[str, Any], path: str) -> dict[str, Any]:
    """Merge tag overrides over an existing tag table.

    A mapping or a bare format id updates only the fields it names, so
    ``{"a": {"inline": False}}`` keeps the anchor formatter. Complete
    specifications (``TagSpec`` or ``(format, inline)`` pairs) replace the
    entry.
    """
    merged: dict[str, Any] = dict(current)
    for name, value in overrides.items():
        existing = current.get(name)
        if isinstance(existing, TagSpec) and isinstance(value, Mapping):
            value = _merge_dataclass(existing, value, f"{path}.{name}")
        elif isinstance(existing, TagSpec) and isinstance(value, str):
            value = existing.create_updated(format=value)
        merged[name] = value
    return merged


def merge_options(base: HtmlToTextOptions | None = None, **overrides: Any) -> HtmlToTextOptions:
    """Merge keyword overrides field-wise over existing options.

    Nested sections (``limits``, ``wrap``, ``wrap.long_word_split``) accept
    either a complete dataclass, which replaces the section, or a partial
    mapping, which is merged into it. Tag tables are merged per tag and per
    field; sequences replace.

    Parameters
    ----------
    base : HtmlToTextOptions or None
        Options to start from. Defaults are used when None.
    **overrides : Any
        Field values to override

    Returns
    -------
    HtmlToTextOptions
        New validated options instance

    Raises
    ------
    ValidationError
        If an override names an unknown field or holds an invalid value

    """
    base = base if base is not None else HtmlToTextOptions()
    if not overrides:
        return base
    logger.debug("Merging option overrides: %s", sorted(overrides))
    try:
        return _merge_dataclass(base, overrides, "")
    except TypeError as e:
        raise ValidationError(f"Invalid option value: {e}", original_error=e) from e
