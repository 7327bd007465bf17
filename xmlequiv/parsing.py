"""
Compare XML and HTML markup trees for equivalence.

Copyright 2022-2026, Levente Hunyadi
"""

from pathlib import Path
from typing import Union

import lxml.etree as ET
import lxml.html

from .environment import ParseError
from .nodes import ElementTreeType, ElementType


def _xml_parser() -> ET.XMLParser:
    return ET.XMLParser(
        remove_comments=False,
        strip_cdata=True,
        resolve_entities=False,
        no_network=True,
    )


def xml_from_string(content: Union[str, bytes]) -> ElementType:
    """
    Creates an XML element tree from a string.

    :param content: XML document or fragment with a single root element.
    :returns: Root element of the document.
    """

    if isinstance(content, str) and content.lstrip().startswith("<?xml"):
        # lxml rejects Unicode strings with an encoding declaration
        content = content.encode("utf-8")

    try:
        return ET.fromstring(content, parser=_xml_parser())
    except ET.XMLSyntaxError as ex:
        raise ParseError(f"invalid XML: {ex}") from ex


def html_from_string(content: str) -> ElementType:
    """
    Creates an HTML element from a string that holds a single HTML element.

    :param content: HTML fragment with a single root element, e.g. `<a href="/">Home</a>`.
    """

    try:
        return lxml.html.fragment_fromstring(content)
    except ET.ParserError as ex:
        raise ParseError(f"invalid HTML fragment: {ex}") from ex


def html_fragments_from_string(content: str) -> list[Union[ElementType, str]]:
    """
    Creates a node set from an HTML fragment that may hold several top-level elements.

    The first item is a string if the fragment starts with text.
    """

    try:
        return lxml.html.fragments_fromstring(content)
    except ET.ParserError as ex:
        raise ParseError(f"invalid HTML fragment: {ex}") from ex


def document_from_file(path: Path, *, html: bool) -> ElementTreeType:
    """
    Parses an XML or HTML file into a document.

    :param path: Path to the file to parse.
    :param html: True to use the (lenient) HTML parser, false to use the XML parser.
    :returns: Document as an element tree.
    :raises ParseError: Raised when the file is malformed or holds no root element.
    """

    try:
        if html:
            tree = lxml.html.parse(str(path))
        else:
            tree = ET.parse(str(path), parser=_xml_parser())
    except ET.XMLSyntaxError as ex:
        raise ParseError(f"invalid {'HTML' if html else 'XML'} in file: {path}") from ex

    if tree.getroot() is None:
        raise ParseError(f"no root element in file: {path}")
    return tree
