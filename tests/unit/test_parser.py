#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_parser.py
"""Unit tests for the BeautifulSoup parsing boundary."""

import pytest
from bs4 import BeautifulSoup

from html_to_text.exceptions import ParsingError
from html_to_text.node import Node, NodeKind
from html_to_text.parser import nodes_from_soup, parse_html


@pytest.mark.unit
class TestParseHtml:

    def test_tag_tree(self):
        nodes = parse_html("<div class='a b' id='x'>Hi<!-- note --></div>")
        assert len(nodes) == 1
        div = nodes[0]
        assert div.kind is NodeKind.TAG
        assert div.name == "div"
        assert div.get("class") == "a b"
        assert div.get("id") == "x"
        assert div.children[0] == Node.text("Hi")
        assert div.children[1].kind is NodeKind.OTHER

    def test_script_and_style_become_other(self):
        nodes = parse_html("<script>var x = 1;</script><style>p {}</style><p>A</p>")
        assert [node.kind for node in nodes] == [NodeKind.OTHER, NodeKind.OTHER, NodeKind.TAG]

    def test_doctype_becomes_other(self):
        nodes = parse_html("<!DOCTYPE html><p>x</p>")
        assert nodes[0].kind is NodeKind.OTHER
        assert nodes[1].name == "p"

    def test_entities_decoded(self):
        nodes = parse_html("<p>Fish &amp; Chips</p>")
        assert nodes[0].children[0].data == "Fish & Chips"

    def test_attribute_without_value(self):
        nodes = parse_html("<input disabled>")
        assert nodes[0].get("disabled") == ""

    def test_unknown_backend(self):
        with pytest.raises(ParsingError) as exc_info:
            parse_html("<p>x</p>", parser="no-such-parser")
        assert exc_info.value.parsing_stage == "backend"


@pytest.mark.unit
class TestNodesFromSoup:

    def test_single_element(self):
        soup = BeautifulSoup("<div><p>One</p><p>Two</p></div>", "html.parser")
        nodes = nodes_from_soup(soup.find("p"))
        assert nodes == [Node.tag("p", children=[Node.text("One")])]

    def test_preserves_document_order(self):
        soup = BeautifulSoup("<ul><li>1</li><li>2</li><li>3</li></ul>", "html.parser")
        (ul,) = nodes_from_soup(soup)
        assert [item.children[0].data for item in ul.children] == ["1", "2", "3"]
