"""
Compare XML and HTML markup trees for equivalence.

Copyright 2022-2026, Levente Hunyadi
"""

from typing import Optional, Sequence

from .difference import DifferenceRecorder
from .exclusion import is_attr_excluded
from .nodes import Attribute, Node
from .options import ComparisonOptions
from .status import Status, merge_status


def _text(attr: Optional[Attribute]) -> Optional[str]:
    return str(attr) if attr is not None else None


def compare_attributes(
    n1: Node,
    n2: Node,
    a1: Optional[Attribute],
    a2: Optional[Attribute],
    options: ComparisonOptions,
    recorder: DifferenceRecorder,
) -> Status:
    """
    Compares two attributes by name and value.

    Attributes excluded by name, by CSS selector or by content are equivalent by definition, and produce no difference.

    :param n1: Element that owns the left attribute.
    :param n2: Element that owns the right attribute.
    :param a1: Left attribute, or `None` if it has no counterpart.
    :param a2: Right attribute, or `None` if it has no counterpart.
    :param options: Comparison options.
    :param recorder: Collects differences.
    """

    if a1 is None or a2 is None:
        if a1 is None and a2 is None:
            return Status.EQUIVALENT
        recorder.add(Status.MISSING_ATTRIBUTE, n1, n2, _text(a1), _text(a2))
        return Status.MISSING_ATTRIBUTE

    if a1.name != a2.name:
        recorder.add(Status.UNEQUAL_ATTRIBUTES, n1, n2, _text(a1), _text(a2))
        return Status.UNEQUAL_ATTRIBUTES

    if is_attr_excluded(n1, n2, a1, a2, options):
        return Status.EQUIVALENT

    if a1.value != a2.value:
        recorder.add(Status.UNEQUAL_ATTRIBUTES, n1, n2, _text(a1), _text(a2))
        return Status.UNEQUAL_ATTRIBUTES

    return Status.EQUIVALENT


def compare_sorted_attribute_sets(
    n1: Node,
    n2: Node,
    a1_set: Sequence[Attribute],
    a2_set: Sequence[Attribute],
    options: ComparisonOptions,
    recorder: DifferenceRecorder,
) -> Status:
    """
    Compares two attribute sets by sorting them by name first.

    Only attributes with the same name are compared to one another, and attributes with no counterpart are reported
    as missing.
    """

    s1 = sorted(a1_set, key=lambda a: a.name)
    s2 = sorted(a2_set, key=lambda a: a.name)

    status = Status.EQUIVALENT
    i = j = 0
    while i < len(s1) or j < len(s2):
        if i >= len(s1):
            result = compare_attributes(n1, n2, None, s2[j], options, recorder)
            j += 1
        elif j >= len(s2):
            result = compare_attributes(n1, n2, s1[i], None, options, recorder)
            i += 1
        elif s1[i].name < s2[j].name:
            result = compare_attributes(n1, n2, s1[i], None, options, recorder)
            i += 1
        elif s1[i].name > s2[j].name:
            result = compare_attributes(n1, n2, None, s2[j], options, recorder)
            j += 1
        else:
            result = compare_attributes(n1, n2, s1[i], s2[j], options, recorder)
            i += 1
            j += 1

        status = merge_status(status, result)
        if status is not Status.EQUIVALENT and not options.verbose:
            break

    return status


def compare_positional_attribute_sets(
    n1: Node,
    n2: Node,
    a1_set: Sequence[Attribute],
    a2_set: Sequence[Attribute],
    options: ComparisonOptions,
    recorder: DifferenceRecorder,
) -> Status:
    """
    Compares two attribute sets in source order.

    Attributes with different names may be paired, and even if both sets hold the same attributes, comparison stops as
    soon as two unequal attributes are found.
    """

    status = Status.EQUIVALENT
    for i in range(max(len(a1_set), len(a2_set))):
        a1 = a1_set[i] if i < len(a1_set) else None
        a2 = a2_set[i] if i < len(a2_set) else None
        status = merge_status(status, compare_attributes(n1, n2, a1, a2, options, recorder))
        if status is not Status.EQUIVALENT:
            break
    return status


def compare_attribute_sets(n1: Node, n2: Node, options: ComparisonOptions, recorder: DifferenceRecorder) -> Status:
    """
    Compares the attributes of two elements.

    Unless in verbose mode, attribute sets of different size fail immediately, before exclusion rules are evaluated.
    """

    a1_set = n1.attributes
    a2_set = n2.attributes
    if len(a1_set) != len(a2_set) and not options.verbose:
        return Status.MISSING_ATTRIBUTE

    if options.ignore_attr_order:
        return compare_sorted_attribute_sets(n1, n2, a1_set, a2_set, options, recorder)
    else:
        return compare_positional_attribute_sets(n1, n2, a1_set, a2_set, options, recorder)
