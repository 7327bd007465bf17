"""
Compare XML and HTML markup trees for equivalence.

Copyright 2022-2026, Levente Hunyadi
"""

import logging
import unittest

from tests.utility import TypedTestCase, xml
from xmlequiv.attributes import compare_attribute_sets, compare_attributes
from xmlequiv.difference import DifferenceRecorder
from xmlequiv.nodes import Attribute, Node, as_node
from xmlequiv.options import ComparisonOptions
from xmlequiv.status import Status

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(levelname)s - %(funcName)s [%(lineno)d] - %(message)s",
)


def element(content: str) -> Node:
    return as_node(xml(content))


class TestAttributePair(TypedTestCase):
    def setUp(self) -> None:
        self.n1 = element("<a/>")
        self.n2 = element("<a/>")
        self.options = ComparisonOptions(verbose=True)
        self.recorder = DifferenceRecorder(True)

    def test_equal(self) -> None:
        status = compare_attributes(self.n1, self.n2, Attribute("x", "1"), Attribute("x", "1"), self.options, self.recorder)
        self.assertEqual(status, Status.EQUIVALENT)
        self.assertListEqual(self.recorder.differences, [])

    def test_case_sensitive(self) -> None:
        status = compare_attributes(self.n1, self.n2, Attribute("x", "a"), Attribute("x", "A"), self.options, self.recorder)
        self.assertEqual(status, Status.UNEQUAL_ATTRIBUTES)

    def test_missing(self) -> None:
        status = compare_attributes(self.n1, self.n2, None, Attribute("x", "1"), self.options, self.recorder)
        self.assertEqual(status, Status.MISSING_ATTRIBUTE)
        self.assertIsNone(self.recorder.differences[0].value_left)
        self.assertEqual(self.recorder.differences[0].value_right, 'x="1"')

    def test_unequal_names(self) -> None:
        status = compare_attributes(self.n1, self.n2, Attribute("x", "1"), Attribute("y", "1"), self.options, self.recorder)
        self.assertEqual(status, Status.UNEQUAL_ATTRIBUTES)

    def test_excluded_not_recorded(self) -> None:
        options = ComparisonOptions(verbose=True, ignore_attrs_by_name=("x",))
        status = compare_attributes(self.n1, self.n2, Attribute("x", "1"), Attribute("x", "2"), options, self.recorder)
        self.assertEqual(status, Status.EQUIVALENT)
        self.assertListEqual(self.recorder.differences, [])


class TestAttributeSet(TypedTestCase):
    def test_sorted_merge(self) -> None:
        n1 = element('<a b="1" c="2" d="3"/>')
        n2 = element('<a b="9" d="8" e="1"/>')
        recorder = DifferenceRecorder(True)
        status = compare_attribute_sets(n1, n2, ComparisonOptions(verbose=True), recorder)
        self.assertEqual(status, Status.MISSING_ATTRIBUTE)
        self.assertListEqual(
            [(d.status, d.value_left, d.value_right) for d in recorder.differences],
            [
                (Status.UNEQUAL_ATTRIBUTES, 'b="1"', 'b="9"'),
                (Status.MISSING_ATTRIBUTE, 'c="2"', None),
                (Status.UNEQUAL_ATTRIBUTES, 'd="3"', 'd="8"'),
                (Status.MISSING_ATTRIBUTE, None, 'e="1"'),
            ],
        )

    def test_sorted_short_circuit(self) -> None:
        n1 = element('<a b="1" c="2"/>')
        n2 = element('<a c="3" b="4"/>')
        status = compare_attribute_sets(n1, n2, ComparisonOptions(), DifferenceRecorder(False))
        self.assertEqual(status, Status.UNEQUAL_ATTRIBUTES)

    def test_length_precheck(self) -> None:
        n1 = element('<a b="1" c="2"/>')
        n2 = element('<a b="1"/>')
        recorder = DifferenceRecorder(False)
        self.assertEqual(compare_attribute_sets(n1, n2, ComparisonOptions(), recorder), Status.MISSING_ATTRIBUTE)

    def test_positional(self) -> None:
        n1 = element('<a x="1" y="2"/>')
        n2 = element('<a y="2" x="1"/>')
        recorder = DifferenceRecorder(True)
        status = compare_attribute_sets(n1, n2, ComparisonOptions(ignore_attr_order=False, verbose=True), recorder)
        self.assertEqual(status, Status.UNEQUAL_ATTRIBUTES)
        self.assertEqual(len(recorder.differences), 1)

    def test_positional_missing(self) -> None:
        n1 = element('<a x="1"/>')
        n2 = element('<a x="1" y="2"/>')
        recorder = DifferenceRecorder(True)
        status = compare_attribute_sets(n1, n2, ComparisonOptions(ignore_attr_order=False, verbose=True), recorder)
        self.assertEqual(status, Status.MISSING_ATTRIBUTE)
        self.assertEqual(recorder.differences[0].value_right, 'y="2"')

    def test_no_attributes(self) -> None:
        status = compare_attribute_sets(element("<a/>"), element("<a/>"), ComparisonOptions(), DifferenceRecorder(False))
        self.assertEqual(status, Status.EQUIVALENT)


if __name__ == "__main__":
    unittest.main()
