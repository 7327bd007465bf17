"""
Compare XML and HTML markup trees for equivalence.

Copyright 2022-2026, Levente Hunyadi
"""

import logging
from dataclasses import dataclass
from typing import Any, Optional, Union

from .comparator import NodeComparator
from .difference import Difference, DifferenceRecorder
from .nodes import NodeLike, as_node
from .options import OptionsLike, child_options_for, describe, merge_options
from .status import Status

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class Comparison:
    """
    Outcome of comparing two markup trees.

    :param status: Final status, where the last non-equivalent status found wins.
    :param differences: Differences in discovery order (populated only in verbose mode).
    """

    status: Status
    differences: list[Difference]

    @property
    def is_equivalent(self) -> bool:
        return self.status is Status.EQUIVALENT

    def __bool__(self) -> bool:
        return self.is_equivalent


def compare(
    left: NodeLike,
    right: NodeLike,
    options: OptionsLike = None,
    *,
    child_options: Optional[OptionsLike] = None,
    **overrides: Any,
) -> Comparison:
    """
    Compares two XML or HTML documents, elements or node sets.

    :param left: Left markup tree: an lxml element tree, element, comment, or a sequence of elements.
    :param right: Right markup tree.
    :param options: Comparison options, or a mapping of option names to values, merged over the defaults.
    :param child_options: Options for all nodes below the two roots, if they differ from `options`.
    :param overrides: Individual options that take precedence over `options`.
    :returns: Final status and the differences found.
    :raises NodeTypeError: Raised when either argument is not a markup node or node collection.
    :raises ArgumentError: Raised when an option is not recognized.
    """

    opts = merge_options(options, **overrides)
    child_opts = child_options_for(opts, child_options)

    n1 = as_node(left)
    n2 = as_node(right)

    LOGGER.debug("Comparing %s with %s using %s", n1.name, n2.name, describe(opts))
    recorder = DifferenceRecorder(opts.verbose)
    status = NodeComparator(recorder).compare_nodes(n1, n2, opts, child_opts)
    LOGGER.debug("Comparison finished with %s and %d difference(s)", status.name, len(recorder.differences))

    return Comparison(status, recorder.differences)


def equivalent(
    left: NodeLike,
    right: NodeLike,
    options: OptionsLike = None,
    *,
    child_options: Optional[OptionsLike] = None,
    **overrides: Any,
) -> Union[bool, list[Difference]]:
    """
    Determines whether two XML or HTML documents, elements or node sets are equivalent.

    :param left: Left markup tree: an lxml element tree, element, comment, or a sequence of elements.
    :param right: Right markup tree.
    :param options: Comparison options, or a mapping of option names to values, merged over the defaults.
    :param child_options: Options for all nodes below the two roots, if they differ from `options`.
    :param overrides: Individual options that take precedence over `options`.
    :returns: In verbose mode, the list of differences (empty if equivalent); otherwise, true if equivalent.
    """

    opts = merge_options(options, **overrides)
    result = compare(left, right, opts, child_options=child_options)
    if opts.verbose:
        return result.differences
    else:
        return result.is_equivalent
