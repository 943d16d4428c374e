#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_options.py
"""Unit tests for conversion options.

Tests cover:
- Default values
- Nested partial overrides
- Validation of limits, widths and wrap characters
- Tag mapping coercion and merging
- Table selector coercion

"""

import pytest

from html_to_text.exceptions import ValidationError
from html_to_text.options import (
    HtmlToTextOptions,
    LimitsOptions,
    LongWordSplitOptions,
    TagSpec,
    WrapOptions,
    merge_options,
)


@pytest.mark.unit
class TestDefaults:

    def test_defaults(self):
        options = HtmlToTextOptions()
        assert options.base_elements == ("body",)
        assert options.wrap.width == 80
        assert options.wrap.preserve_newlines is False
        assert options.limits.max_depth is None
        assert options.limits.max_child_nodes is None
        assert options.limits.ellipsis == "..."
        assert options.return_dom_by_default is True
        assert options.tables == ()

    def test_default_tags(self):
        tags = HtmlToTextOptions().tags
        assert tags[""] == TagSpec("children", False)
        assert tags["a"] == TagSpec("anchor", True)
        assert tags["img"].inline
        assert tags["h3"].format == "heading"

    def test_tags_are_read_only(self):
        with pytest.raises(TypeError):
            HtmlToTextOptions().tags["p"] = TagSpec("children")


@pytest.mark.unit
class TestMerging:

    def test_from_dict_nested_partial(self):
        options = HtmlToTextOptions.from_dict({"wrap": {"width": 40}})
        assert options.wrap.width == 40
        assert options.wrap.preserve_newlines is False

    def test_deeply_nested_partial(self):
        options = HtmlToTextOptions.from_dict({"wrap": {"long_word_split": {"wrap_characters": ["-"]}}})
        assert options.wrap.long_word_split.wrap_characters == ("-",)
        assert options.wrap.width == 80

    def test_unknown_key(self):
        with pytest.raises(ValidationError) as exc_info:
            HtmlToTextOptions.from_dict({"wrap": {"nonsense": 1}})
        assert exc_info.value.parameter_name == "wrap.nonsense"

    def test_merge_keeps_base(self):
        base = HtmlToTextOptions(uppercase_headings=False)
        merged = merge_options(base, limits={"max_depth": 3})
        assert merged.uppercase_headings is False
        assert merged.limits.max_depth == 3
        assert base.limits.max_depth is None

    def test_merge_without_overrides_returns_base(self):
        base = HtmlToTextOptions()
        assert merge_options(base) is base

    def test_replacing_section_with_dataclass(self):
        options = merge_options(wrap=WrapOptions(width=None))
        assert options.wrap.width is None

    def test_tags_merge_key_wise(self):
        options = HtmlToTextOptions.from_dict({"tags": {"b": ("bold", True)}})
        assert options.tags["b"] == TagSpec("bold", True)
        assert options.tags["p"].format == "paragraph"

    def test_partial_tag_entry_keeps_other_fields(self):
        options = HtmlToTextOptions.from_dict({"tags": {"a": {"inline": False}}})
        assert options.tags["a"] == TagSpec("anchor", False)

    def test_tag_format_string_keeps_inline_flag(self):
        options = HtmlToTextOptions.from_dict({"tags": {"a": "image"}})
        assert options.tags["a"] == TagSpec("image", True)

    def test_partial_entry_for_new_tag_uses_defaults(self):
        options = HtmlToTextOptions.from_dict({"tags": {"span": {"inline": True}}})
        assert options.tags["span"] == TagSpec("children", True)

    def test_complete_tag_spec_replaces_entry(self):
        options = merge_options(HtmlToTextOptions(), tags={"a": TagSpec("children")})
        assert options.tags["a"] == TagSpec("children", False)

    def test_unknown_tag_field_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            HtmlToTextOptions.from_dict({"tags": {"a": {"block": True}}})
        assert exc_info.value.parameter_name == "tags.a.block"

    def test_create_updated(self):
        options = HtmlToTextOptions()
        updated = options.create_updated(ignore_image=True)
        assert updated.ignore_image
        assert not options.ignore_image


@pytest.mark.unit
class TestValidation:

    @pytest.mark.parametrize("width", [0, -5, True, "80"])
    def test_invalid_width(self, width):
        with pytest.raises(ValidationError):
            WrapOptions(width=width)

    @pytest.mark.parametrize("field_name", ["max_depth", "max_child_nodes"])
    def test_negative_limits(self, field_name):
        with pytest.raises(ValidationError) as exc_info:
            LimitsOptions(**{field_name: -1})
        assert exc_info.value.parameter_name == field_name

    def test_zero_limits_allowed(self):
        limits = LimitsOptions(max_depth=0, max_child_nodes=0)
        assert limits.max_depth == 0

    def test_none_ellipsis_becomes_empty(self):
        assert LimitsOptions(ellipsis=None).ellipsis == ""

    def test_wrap_characters_must_be_single(self):
        with pytest.raises(ValidationError):
            LongWordSplitOptions(wrap_characters=("ab",))

    def test_wrap_characters_string(self):
        assert LongWordSplitOptions(wrap_characters="-/").wrap_characters == ("-", "/")

    def test_base_elements_string(self):
        assert HtmlToTextOptions(base_elements="main").base_elements == ("main",)

    def test_base_elements_empty(self):
        with pytest.raises(ValidationError):
            HtmlToTextOptions(base_elements=())

    def test_table_column_spacing(self):
        with pytest.raises(ValidationError):
            HtmlToTextOptions(table_column_spacing=-1)

    def test_bad_override_type(self):
        with pytest.raises(ValidationError):
            merge_options(limits={"max_depth": "deep"})


@pytest.mark.unit
class TestCoercion:

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("paragraph", TagSpec("paragraph")),
            (("anchor", True), TagSpec("anchor", True)),
            ({"format": "image", "inline": True}, TagSpec("image", True)),
            (TagSpec("pre"), TagSpec("pre")),
        ],
    )
    def test_tag_spec(self, value, expected):
        assert TagSpec.coerce(value) == expected

    def test_tag_spec_invalid(self):
        with pytest.raises(ValidationError):
            TagSpec.coerce(5)

    def test_empty_format(self):
        with pytest.raises(ValidationError):
            TagSpec("")

    def test_default_tag_added(self):
        options = HtmlToTextOptions(tags={"p": "paragraph"})
        assert options.tags[""] == TagSpec()

    @pytest.mark.parametrize("value,expected", [(False, ()), (None, ()), ("table.x", ("table.x",)), (True, True)])
    def test_tables(self, value, expected):
        assert HtmlToTextOptions(tables=value).tables == expected

    def test_section_mappings(self):
        options = HtmlToTextOptions(limits={"max_depth": 2}, wrap={"width": 30})
        assert options.limits == LimitsOptions(max_depth=2)
        assert options.wrap.width == 30
