#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for html_to_text conversion.

Options are frozen dataclasses with named defaults, validated once at
construction. Use :meth:`HtmlToTextOptions.from_dict` or
:func:`merge_options` to build them from partial overrides.
"""

from __future__ import annotations

from html_to_text.options.base import CloneFrozenMixin
from html_to_text.options.conversion import (
    HtmlToTextOptions,
    LimitsOptions,
    LongWordSplitOptions,
    TagSpec,
    WrapOptions,
    merge_options,
)

__all__ = [
    "CloneFrozenMixin",
    "HtmlToTextOptions",
    "LimitsOptions",
    "LongWordSplitOptions",
    "TagSpec",
    "WrapOptions",
    "merge_options",
]
