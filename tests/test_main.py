"""
Compare XML and HTML markup trees for equivalence.

Copyright 2022-2026, Levente Hunyadi
"""

import logging
import os.path
import tempfile
import unittest
from contextlib import redirect_stdout
from io import StringIO
from pathlib import Path

from tests.utility import TypedTestCase
from xmlequiv.__main__ import get_help, main

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(levelname)s - %(funcName)s [%(lineno)d] - %(message)s",
)


class TestMain(TypedTestCase):
    out_dir: Path

    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.out_dir = Path(self._tmp.name)

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def write(self, name: str, content: str) -> str:
        path = self.out_dir / name
        with open(path, "w", encoding="utf-8") as f:
            f.write(content)
        return str(path)

    def run_main(self, *args: str) -> tuple[int, str]:
        buf = StringIO()
        with redirect_stdout(buf):
            code = main(list(args))
        return code, buf.getvalue()

    def test_help(self) -> None:
        text = get_help()
        self.assertIn("--ignore-attr-order", text)
        self.assertIn("--no-ignore-comments", text)
        self.assertIn("--ignore-nodes CSS [CSS ...]", text)

    def test_equivalent_html(self) -> None:
        left = self.write("left.html", "<html><body><p class='a' id='b'>Hello   world</p><!-- note --></body></html>")
        right = self.write("right.html", "<html>\n<body>\n<p id='b' class='a'>Hello world</p>\n</body>\n</html>")
        code, output = self.run_main(left, right)
        self.assertEqual(code, 0)
        self.assertEqual(output.strip(), "equivalent")

    def test_different_xml(self) -> None:
        left = self.write("left.xml", "<root><item>1</item><item>2</item></root>")
        right = self.write("right.xml", "<root><item>1</item><item>3</item></root>")
        code, output = self.run_main(left, right, "--verbose")
        self.assertEqual(code, 1)
        lines = output.strip().splitlines()
        self.assertEqual(len(lines), 2)
        self.assertStartsWith(lines[0], "UNEQUAL_TEXT_CONTENTS: root:item(2)")
        self.assertEqual(lines[1], "not equivalent")

    def test_options(self) -> None:
        left = self.write("left.xml", "<root><item>1</item><skip>x</skip></root>")
        right = self.write("right.xml", "<root><item>1</item></root>")
        self.assertEqual(self.run_main(left, right)[0], 1)
        self.assertEqual(self.run_main(left, right, "--ignore-nodes", "skip")[0], 0)

    def test_format(self) -> None:
        left = self.write("left.txt", "<p>unclosed")
        right = self.write("right.txt", "<p>unclosed</p>")
        self.assertEqual(self.run_main(left, right, "--html")[0], 0)
        self.assertEqual(self.run_main(left, right, "--xml")[0], 2)

    def test_empty_file(self) -> None:
        empty = self.write("empty.html", "")
        other = self.write("other.html", "<p>x</p>")
        self.assertEqual(self.run_main(empty, other)[0], 2)
        self.assertEqual(self.run_main(other, empty)[0], 2)
        self.assertEqual(self.run_main(empty, other, "--xml")[0], 2)

    def test_missing_file(self) -> None:
        right = self.write("right.xml", "<root/>")
        code, _ = self.run_main(os.path.join(self.out_dir, "missing.xml"), right)
        self.assertEqual(code, 2)


if __name__ == "__main__":
    unittest.main()
