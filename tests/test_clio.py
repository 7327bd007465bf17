"""
Compare XML and HTML markup trees for equivalence.

Copyright 2022-2026, Levente Hunyadi
"""

import unittest
from argparse import ArgumentParser
from dataclasses import dataclass, field
from io import StringIO

from xmlequiv.clio import add_arguments, boolean_option, get_options, list_option
from xmlequiv.options import ComparisonOptions


@dataclass(frozen=True)
class Options:
    bool_flag: bool = field(
        default=False,
        metadata=boolean_option(
            "Help text for the case when flag is enabled.",
            "Help text for the case when flag is disabled.",
        ),
    )
    list_val: tuple[str, ...] = field(default=(), metadata=list_option("Help text for list option.", "ITEM"))
    untracked_value: str = "untracked"


@dataclass
class InvalidOptions:
    int_val: int = field(default=1, metadata=list_option("Help text for integer option.", "INT"))


class TestCommandLine(unittest.TestCase):
    def test_help(self) -> None:
        parser = ArgumentParser()
        add_arguments(parser, Options)

        s = StringIO()
        parser.print_help(file=s)
        text = s.getvalue()
        self.assertIn("usage:", text)
        self.assertIn("--bool-flag", text)
        self.assertIn("--no-bool-flag", text)
        self.assertIn("--list-val ITEM [ITEM ...]", text)
        self.assertNotIn("--untracked-value", text)

    def test_values(self) -> None:
        parser = ArgumentParser()
        add_arguments(parser, Options)

        options = get_options(parser.parse_args(["--bool-flag", "--list-val", "a", "b", "--list-val", "c"]), Options)
        self.assertTrue(options.bool_flag)
        self.assertEqual(options.list_val, ("a", "b", "c"))
        self.assertEqual(options.untracked_value, "untracked")

        options = get_options(parser.parse_args([]), Options)
        self.assertFalse(options.bool_flag)
        self.assertEqual(options.list_val, ())

    def test_comparison_options(self) -> None:
        parser = ArgumentParser()
        add_arguments(parser, ComparisonOptions)

        args = parser.parse_args(["--no-ignore-comments", "--ignore-nodes", "script", "style", "--ignore-nodes", "div.ad", "--verbose"])
        options = get_options(args, ComparisonOptions)
        self.assertFalse(options.ignore_comments)
        self.assertEqual(options.ignore_nodes, ("script", "style", "div.ad"))
        self.assertTrue(options.verbose)
        self.assertTrue(options.collapse_whitespace)
        self.assertEqual(options.ignore_attrs, ())

        options = get_options(parser.parse_args([]), ComparisonOptions)
        self.assertEqual(options, ComparisonOptions())

    def test_invalid(self) -> None:
        with self.assertRaises(TypeError):
            add_arguments(ArgumentParser(), InvalidOptions)
        with self.assertRaises(TypeError):
            add_arguments(ArgumentParser(), str)


if __name__ == "__main__":
    unittest.main()
