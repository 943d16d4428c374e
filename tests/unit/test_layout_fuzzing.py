"""Property-based tests for the word-wrap layout engine.

Test Coverage:
- Property: wrapping never adds, drops or reorders words
- Property: forced splitting keeps every line within the width
- Property: words shorter than the width never overflow a line
- Property: short single-spaced text is returned unchanged
- Property: re-wrapping with preserved newlines changes nothing
"""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from html_to_text.layout import wordwrap
from html_to_text.options import HtmlToTextOptions

words = st.text(alphabet="abcxyz", min_size=1, max_size=5)
loose_text = st.text(alphabet="abc -\t\n", max_size=200)


def wrap_options(**wrap) -> HtmlToTextOptions:
    return HtmlToTextOptions.from_dict({"wrap": wrap})


@pytest.mark.unit
@pytest.mark.fuzzing
class TestWordwrapProperties:
    """Invariants of wordwrap over generated text."""

    @given(loose_text, st.integers(min_value=1, max_value=40), st.booleans())
    def test_words_are_preserved(self, text, width, preserve_newlines):
        output = wordwrap(text, wrap_options(width=width, preserve_newlines=preserve_newlines))
        assert output.split() == text.split()

    @given(loose_text, st.integers(min_value=1, max_value=20), st.booleans())
    def test_forced_split_respects_width(self, text, width, preserve_newlines):
        options = wrap_options(
            width=width,
            preserve_newlines=preserve_newlines,
            long_word_split={"force_wrap_on_limit": True},
        )
        for line in wordwrap(text, options).split("\n"):
            assert len(line) <= width

    @given(st.lists(words, max_size=40), st.integers(min_value=5, max_value=30))
    def test_short_words_fit(self, word_list, width):
        output = wordwrap(" ".join(word_list), wrap_options(width=width))
        assert all(len(line) <= width for line in output.split("\n"))

    @given(st.lists(words, min_size=1, max_size=10))
    def test_short_text_unchanged(self, word_list):
        text = " ".join(word_list)
        assert wordwrap(text, wrap_options(width=80)) == text

    @given(st.text(alphabet="ab \n", max_size=120), st.integers(min_value=1, max_value=30))
    def test_idempotent_with_preserved_newlines(self, text, width):
        options = wrap_options(width=width, preserve_newlines=True)
        once = wordwrap(text, options)
        assert wordwrap(once, options) == once
