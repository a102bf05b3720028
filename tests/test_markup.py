"""Tests for the declarative XML body builder."""

import xml.etree.ElementTree as ET

import pytest

from fluentrest import MarkupBuilder, RestError, build_xml
from fluentrest.markup import XML_DECLARATION


def nested(xml):
    with xml.root(attr="v"):
        xml.child("text")


class TestBuildXml:
    """Serializing builder callbacks."""

    def test_with_declaration(self):
        result = build_xml(nested)

        assert result.startswith('<?xml version="1.0" encoding="UTF-8"?>')
        assert result[len(XML_DECLARATION):].strip() == '<root attr="v"><child>text</child></root>'

    def test_without_declaration(self):
        assert build_xml(nested, xml_declaration=False) == '<root attr="v"><child>text</child></root>'

    def test_escaping(self):
        result = build_xml(lambda xml: xml.note("a < b & c", title='say "hi"'), xml_declaration=False)

        parsed = ET.fromstring(result)
        assert parsed.text == "a < b & c"
        assert parsed.get("title") == 'say "hi"'

    def test_keyword_names_and_non_string_values(self):
        def body(xml):
            with xml.item(class_="big", count=3):
                xml.element("text", 42)

        result = build_xml(body, xml_declaration=False)

        assert result == '<item class="big" count="3"><text>42</text></item>'

    def test_attrs_mapping_and_none_skipped(self):
        result = build_xml(
            lambda xml: xml.element("ns:item", None, {"xml:lang": "en"}, skipped=None),
            xml_declaration=False,
        )
        assert result == '<ns:item xml:lang="en" />'

    def test_reserved_parameter_names_become_attributes(self):
        assert build_xml(lambda xml: xml.user(name="bob"), xml_declaration=False) == '<user name="bob" />'
        assert build_xml(lambda xml: xml.field(text="label"), xml_declaration=False) == '<field text="label" />'
        assert build_xml(lambda xml: xml.x(attrs="a"), xml_declaration=False) == '<x attrs="a" />'

    def test_element_keyword_attributes_with_text(self):
        result = build_xml(
            lambda xml: xml.element("user", "Bob", name="bob", text="t"),
            xml_declaration=False,
        )
        assert result == '<user name="bob" text="t">Bob</user>'

    def test_mixed_text(self):
        def body(xml):
            with xml.p():
                xml.text("hello ")
                xml.b("world")
                xml.text("!")

        assert build_xml(body, xml_declaration=False) == "<p>hello <b>world</b>!</p>"

    def test_deep_nesting(self):
        def body(xml):
            with xml.a():
                with xml.b():
                    xml.c()
                xml.d()

        assert build_xml(body, xml_declaration=False) == "<a><b><c /></b><d /></a>"

    def test_multiple_top_level_elements(self):
        def body(xml):
            xml.first()
            xml.second()

        assert build_xml(body, xml_declaration=False) == "<first /><second />"


class TestMarkupBuilder:
    """Builder state handling."""

    def test_text_outside_element_rejected(self):
        xml = MarkupBuilder()
        with pytest.raises(RestError):
            xml.text("loose")

    def test_private_names_not_elements(self):
        xml = MarkupBuilder()
        with pytest.raises(AttributeError):
            xml._hidden

    def test_roots(self):
        xml = MarkupBuilder()
        with xml.root() as root:
            xml.child()

        assert xml.roots == [root]
        assert [c.tag for c in root] == ["child"]
