"""
Compare XML and HTML markup trees for equivalence.

Copyright 2022-2026, Levente Hunyadi
"""

import unittest
from typing import Any

from .equivalence import compare
from .nodes import NodeLike
from .options import OptionsLike, merge_options


class MarkupAssertions(unittest.TestCase):
    """
    Assertions that compare rendered or generated markup against an expected baseline.

    Differences are listed in the failure message.
    """

    def assertMarkupEqual(
        self,
        tree1: NodeLike,
        tree2: NodeLike,
        options: OptionsLike = None,
        *,
        msg: str | None = None,
        **overrides: Any,
    ) -> None:
        opts = merge_options(options, **{**overrides, "verbose": True})
        result = compare(tree1, tree2, opts)
        if not result.is_equivalent:
            lines = "\n".join(f"* {difference}" for difference in result.differences)
            self.fail(self._formatMessage(msg, f"markup trees are not equivalent:\n{lines}"))

    def assertMarkupNotEqual(
        self,
        tree1: NodeLike,
        tree2: NodeLike,
        options: OptionsLike = None,
        *,
        msg: str | None = None,
        **overrides: Any,
    ) -> None:
        result = compare(tree1, tree2, options, **overrides)
        if result.is_equivalent:
            self.fail(self._formatMessage(msg, "markup trees are equivalent"))
