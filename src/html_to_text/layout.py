#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html_to_text/layout.py
"""Word-wrap text layout engine.

This module reflows text into fixed-width lines. Text is tokenized into
words (and, when newlines are preserved, explicit line breaks) and fed to a
:class:`TextBuilder`, which places each word on the current line if it fits
and otherwise starts a new one. The first line may be partially occupied by
text the caller already emitted, so wrapping continues seamlessly from the
current column.

Lengths are counted in code points.

"""

from __future__ import annotations

import re

from html_to_text.constants import MAX_CONTROL_WHITESPACE_RUN
from html_to_text.options import HtmlToTextOptions

_LEADING_WHITESPACE_RE = re.compile(rf"^[\r\n\t]{{0,{MAX_CONTROL_WHITESPACE_RUN}}}[^\S\r\n\t]")
_TRAILING_WHITESPACE_RE = re.compile(rf"[^\S\r\n\t][\r\n\t]{{0,{MAX_CONTROL_WHITESPACE_RUN}}}$")
_WORD_OR_NEWLINE_RE = re.compile(r"\S+|\n")
_WORD_RE = re.compile(r"\S+")


class TextBuilder:
    """Accumulate words into lines no wider than a maximum width.

    Parameters
    ----------
    max_line_length : int or None
        Maximum line width. None disables wrapping.
    first_line_offset : int, default 0
        Columns already occupied on the first line
    wrap_characters : tuple of str, default ()
        Preferred split points for forced splits, most preferred first
    force_wrap_on_limit : bool, default False
        Split over-long words. Without it they are kept whole

    """

    def __init__(
        self,
        max_line_length: int | None,
        first_line_offset: int = 0,
        wrap_characters: tuple[str, ...] = (),
        force_wrap_on_limit: bool = False,
    ):
        self.lines: list[str] = []
        self.next_line_words: list[str] = []
        self.max_line_length = max_line_length
        self.next_line_available_chars = self._line_capacity() - first_line_offset
        self.wrap_characters = wrap_characters
        self.force_wrap_on_limit = force_wrap_on_limit

    @classmethod
    def from_options(cls, options: HtmlToTextOptions, first_line_offset: int = 0) -> TextBuilder:
        """Create a builder configured by conversion options."""
        long_word_split = options.wrap.long_word_split
        return cls(
            options.wrap.width,
            first_line_offset,
            wrap_characters=long_word_split.wrap_characters,
            force_wrap_on_limit=long_word_split.force_wrap_on_limit,
        )

    def _line_capacity(self) -> float:
        return float("inf") if self.max_line_length is None else self.max_line_length

    def add_word(self, word: str) -> None:
        """Place a word on the current line, or on new lines when it does not fit."""
        if self.next_line_available_chars <= 0:
            self.start_new_line()

        is_line_start = not self.next_line_words
        cost = len(word) + (0 if is_line_start else 1)
        if cost <= self.next_line_available_chars:
            self.next_line_words.append(word)
            self.next_line_available_chars -= cost
            return

        first, *rest = self.split_long_word(word)
        if not is_line_start:
            self.start_new_line()
        self.next_line_words.append(first)
        self.next_line_available_chars -= len(first)
        for part in rest:
            self.start_new_line()
            self.next_line_words.append(part)
            self.next_line_available_chars -= len(part)

    def start_new_line(self, count: int = 1) -> None:
        """Flush the current line, followed by ``count - 1`` blank lines."""
        self.lines.append(" ".join(self.next_line_words))
        self.lines.extend("" for _ in range(count - 1))
        self.next_line_words = []
        self.next_line_available_chars = self._line_capacity()

    def split_long_word(self, word: str) -> list[str]:
        """Split a word longer than the maximum line length.

        Words are only split when ``force_wrap_on_limit`` is set; otherwise
        the word is returned whole and may exceed the line. Wrap characters
        are tried in order of preference: for the current character the word
        is split after its last occurrence within the first
        ``max_line_length`` characters. When no wrap character is left, the
        word is hard-split at the limit.

        Parameters
        ----------
        word : str
            Word to split

        Returns
        -------
        list of str
            Word parts in order; a single element when no split applies

        """
        if self.max_line_length is None or not self.force_wrap_on_limit:
            return [word]

        limit = self.max_line_length
        parts = []
        char_index = 0
        while len(word) > limit:
            first_line = word[:limit]
            remaining = word[limit:]

            split_index = -1
            if char_index < len(self.wrap_characters):
                split_index = first_line.rfind(self.wrap_characters[char_index])

            if split_index > -1:
                parts.append(first_line[: split_index + 1])
                word = first_line[split_index + 1 :] + remaining
                continue

            char_index += 1
            if char_index < len(self.wrap_characters):
                continue

            parts.append(first_line)
            word = remaining

        parts.append(word)
        return parts

    def to_string(self) -> str:
        """Join the accumulated lines with newlines."""
        return "\n".join([*self.lines, " ".join(self.next_line_words)])

    def __str__(self) -> str:
        return self.to_string()


def wordwrap(text: str, options: HtmlToTextOptions, first_line_offset: int = 0) -> str:
    """Wrap text to the configured width and collapse whitespace.

    Parameters
    ----------
    text : str
        Input text
    options : HtmlToTextOptions
        Conversion options; ``options.wrap`` controls the layout
    first_line_offset : int, default 0
        Number of characters already occupying the first line

    Returns
    -------
    str
        Text with newlines inserted at wrap locations

    Examples
    --------
        >>> from html_to_text.options import HtmlToTextOptions
        >>> wordwrap("one two three", HtmlToTextOptions.from_dict({"wrap": {"width": 7}}))
        'one two\\nthree'

    """
    if not text:
        return ""

    builder = TextBuilder.from_options(options, first_line_offset)

    # a blank at either edge is significant when joining with neighbouring text
    if _LEADING_WHITESPACE_RE.search(text):
        builder.add_word("")

    if options.wrap.preserve_newlines:
        for match in _WORD_OR_NEWLINE_RE.finditer(text):
            token = match.group(0)
            if token == "\n":
                builder.start_new_line()
            else:
                builder.add_word(token)
    else:
        for match in _WORD_RE.finditer(text):
            builder.add_word(match.group(0))

    if _TRAILING_WHITESPACE_RE.search(text):
        builder.add_word("")

    return builder.to_string()
