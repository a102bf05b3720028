"""
Declarative XML body builder.

A builder callback receives a MarkupBuilder and describes elements by calling
them by name. Elements used as context managers collect the elements created
inside the ``with`` block as children::

    def body(xml):
        with xml.content(attr="value"):
            xml.sub("text")

    build_xml(body)
    # <?xml version="1.0" encoding="UTF-8"?>
    # <content attr="value"><sub>text</sub></content>

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

import functools
import xml.etree.ElementTree as ET
from typing import Any, Callable

from fluentrest.errors import RestError


XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>'

BodyBuilder = Callable[["MarkupBuilder"], Any]


def _clean_name(name: str) -> str:
    """Strip the trailing underscore used to spell Python keywords (class_)."""
    if len(name) > 1 and name.endswith("_"):
        return name[:-1]
    return name


class ElementScope:
    """Context manager returned for every element created by the builder."""

    def __init__(self, builder: "MarkupBuilder", element: ET.Element):
        self.builder = builder
        self.element = element

    def __enter__(self) -> ET.Element:
        self.builder._stack.append(self.element)
        return self.element

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.builder._stack.pop()


class MarkupBuilder:
    """Collects a tree of elements and serializes it with ElementTree.

    ``element``, ``text``, ``roots`` and ``to_string`` belong to the builder; use
    ``xml.element("text")`` for an element whose name collides with them
    or is not a Python identifier.
    """

    def __init__(self):
        self._roots: list[ET.Element] = []
        self._stack: list[ET.Element] = []

    def __getattr__(self, name: str):
        if name.startswith("_"):
            raise AttributeError(name)
        return functools.partial(self.element, _clean_name(name))

    def element(
        self,
        name: str,
        text: Any = None,
        attrs: dict[str, Any] | None = None,
        /,
        **attributes: Any,
    ) -> ElementScope:
        """Create an element under the current parent.

        ``name``, ``text`` and ``attrs`` are positional so keywords with those
        names become attributes: ``xml.user(name="bob")``.
        """
        attrib = {}
        for key, value in {**(attrs or {}), **attributes}.items():
            if value is not None:
                attrib[_clean_name(key)] = str(value)

        if self._stack:
            el = ET.SubElement(self._stack[-1], name, attrib)
        else:
            el = ET.Element(name, attrib)
            self._roots.append(el)

        if text is not None:
            el.text = str(text)

        return ElementScope(self, el)

    def text(self, value: Any) -> None:
        """Append text content at the current position."""
        if not self._stack:
            raise RestError("Text content must be written inside an element")

        parent = self._stack[-1]
        value = str(value)
        if len(parent):
            last = parent[-1]
            last.tail = (last.tail or "") + value
        else:
            parent.text = (parent.text or "") + value

    @property
    def roots(self) -> list[ET.Element]:
        return list(self._roots)

    def to_string(self, xml_declaration: bool = True) -> str:
        body = "".join(ET.tostring(root, encoding="unicode") for root in self._roots)
        if xml_declaration:
            return f"{XML_DECLARATION}\n{body}"
        return body


def build_xml(builder: BodyBuilder, xml_declaration: bool = True) -> str:
    """Run a builder callback and return the serialized XML."""
    xml = MarkupBuilder()
    builder(xml)
    return xml.to_string(xml_declaration=xml_declaration)
