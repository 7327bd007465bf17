"""
Compare XML and HTML markup trees for equivalence.

Copyright 2022-2026, Levente Hunyadi
"""

import logging
import tempfile
import unittest
from pathlib import Path

import lxml.html

from tests.utility import TypedTestCase
from xmlequiv.environment import ParseError
from xmlequiv.parsing import document_from_file, html_fragments_from_string, html_from_string, xml_from_string

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(levelname)s - %(funcName)s [%(lineno)d] - %(message)s",
)


class TestParsing(TypedTestCase):
    def test_xml(self) -> None:
        root = xml_from_string("<r><!--c--><a>x</a></r>")
        self.assertEqual(root.tag, "r")
        self.assertEqual(len(root), 2)

    def test_xml_declaration(self) -> None:
        root = xml_from_string('<?xml version="1.0" encoding="utf-8"?>\n<r>á</r>')
        self.assertEqual(root.tag, "r")
        self.assertEqual(root.text, "á")

        root = xml_from_string(b'<?xml version="1.0" encoding="utf-8"?><r/>')
        self.assertEqual(root.tag, "r")

    def test_xml_invalid(self) -> None:
        with self.assertRaises(ParseError):
            xml_from_string("<r><a></r>")
        with self.assertRaises(ParseError):
            xml_from_string("<r/><s/>")

    def test_html(self) -> None:
        elem = html_from_string('<a href="/">Home</a>')
        self.assertEqual(elem.tag, "a")
        self.assertIsInstance(elem, lxml.html.HtmlElement)

    def test_html_invalid(self) -> None:
        with self.assertRaises(ParseError):
            html_from_string("<p>a</p><p>b</p>")
        with self.assertRaises(ParseError):
            html_from_string("")

    def test_html_fragments(self) -> None:
        items = html_fragments_from_string("lead <b>x</b> tail <i>y</i>")
        self.assertEqual(items[0], "lead ")
        self.assertListEqual([item.tag for item in items[1:] if not isinstance(item, str)], ["b", "i"])

    def test_document_from_file(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "doc.xml"
            path.write_text("<root><item/></root>", encoding="utf-8")
            tree = document_from_file(path, html=False)
            root = tree.getroot()
            self.assertIsNotNone(root)
            self.assertEqual(root.tag, "root")

            empty = Path(tmp) / "empty.html"
            empty.write_text("", encoding="utf-8")
            with self.assertRaises(ParseError):
                document_from_file(empty, html=True)
            with self.assertRaises(ParseError):
                document_from_file(empty, html=False)


if __name__ == "__main__":
    unittest.main()
