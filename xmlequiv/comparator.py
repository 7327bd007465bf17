"""
Compare XML and HTML markup trees for equivalence.

Copyright 2022-2026, Levente Hunyadi
"""

from typing import Optional, Sequence

from .attributes import compare_attribute_sets
from .difference import DifferenceRecorder
from .exclusion import is_node_excluded
from .nodes import Node, NodeKind
from .options import ComparisonOptions
from .status import Status, merge_status
from .text import normalize


def _value(node: Optional[Node]) -> Optional[str]:
    return str(node) if node is not None else None


def _text_location(node: Node) -> Node:
    "Text nodes have no position worth reporting, the location is attributed to their parent."

    if node.kind is NodeKind.TEXT and node.parent is not None:
        return node.parent
    return node


def _diverges(n1: Optional[Node], n2: Optional[Node]) -> bool:
    "True if two nodes differ in kind or element name, after which pairing their siblings is meaningless."

    if n1 is None or n2 is None:
        return False
    if n1.kind is not n2.kind:
        return True
    return n1.kind is NodeKind.ELEMENT and n1.name != n2.name


class NodeComparator:
    """
    Recursively compares two markup trees.

    The comparator dispatches on node kind, and walks child sequences in lock-step. Unless in verbose mode, comparison
    stops at the first difference.
    """

    recorder: DifferenceRecorder

    def __init__(self, recorder: DifferenceRecorder) -> None:
        self.recorder = recorder

    def compare_nodes(
        self,
        n1: Optional[Node],
        n2: Optional[Node],
        options: ComparisonOptions,
        child_options: Optional[ComparisonOptions] = None,
    ) -> Status:
        """
        Compares two nodes and their descendants.

        :param n1: Left node, or `None` if absent.
        :param n2: Right node, or `None` if absent.
        :param options: Options that apply to the two nodes.
        :param child_options: Options that apply to descendants, if different.
        :returns: Equivalence status of the two subtrees.
        """

        if n1 is None and n2 is None:
            return Status.EQUIVALENT

        if n1 is None or n2 is None:
            present = n1 if n1 is not None else n2
            if present is None:  # unreachable, for type checkers
                raise AssertionError()
            self.recorder.add(Status.MISSING_NODE, present, present, _value(n1), _value(n2))
            return Status.MISSING_NODE

        if n1.kind is not n2.kind:
            self.recorder.add(Status.UNEQUAL_NODE_TYPES, _text_location(n1), _text_location(n2), _value(n1), _value(n2))
            return Status.UNEQUAL_NODE_TYPES

        if child_options is None:
            child_options = options

        match n1.kind:
            case NodeKind.COMMENT:
                return self.compare_comments(n1, n2, options)
            case NodeKind.DOCUMENT:
                return self.compare_documents(n1, n2, options, child_options)
            case NodeKind.ELEMENT:
                return self.compare_elements(n1, n2, options, child_options)
            case NodeKind.TEXT:
                return self.compare_texts(n1, n2, options)
            case NodeKind.DOCTYPE | NodeKind.OTHER:
                return self.compare_children(n1.children, n2.children, child_options)

    def compare_comments(self, n1: Node, n2: Node, options: ComparisonOptions) -> Status:
        if options.ignore_comments:
            return Status.EQUIVALENT

        t1 = normalize(n1.content, options.collapse_whitespace)
        t2 = normalize(n2.content, options.collapse_whitespace)
        if t1 != t2:
            self.recorder.add(Status.UNEQUAL_COMMENTS, n1.parent or n1, n2.parent or n2, t1, t2)
            return Status.UNEQUAL_COMMENTS

        return Status.EQUIVALENT

    def compare_documents(self, n1: Node, n2: Node, options: ComparisonOptions, child_options: ComparisonOptions) -> Status:
        if n1.name != n2.name:
            self.recorder.add(Status.UNEQUAL_DOCUMENTS, n1, n2, n1.name, n2.name)
            return Status.UNEQUAL_DOCUMENTS

        return self.compare_children(n1.children, n2.children, child_options)

    def compare_elements(self, n1: Node, n2: Node, options: ComparisonOptions, child_options: ComparisonOptions) -> Status:
        """
        Compares two elements.

        Element names must match. Attributes are compared next, and children are compared last, unless attributes
        already differ (overridden by `force_children`), or children are ignored with `ignore_children`.
        """

        if n1.name != n2.name:
            self.recorder.add(Status.UNEQUAL_ELEMENTS, n1, n2, n1.name, n2.name)
            return Status.UNEQUAL_ELEMENTS

        status = compare_attribute_sets(n1, n2, options, self.recorder)
        if status is not Status.EQUIVALENT and not options.force_children:
            return status

        if child_options.ignore_children:
            return status

        return merge_status(status, self.compare_children(n1.children, n2.children, child_options))

    def compare_texts(self, n1: Node, n2: Node, options: ComparisonOptions) -> Status:
        if options.ignore_text_nodes:
            return Status.EQUIVALENT

        t1 = normalize(n1.content, options.collapse_whitespace)
        t2 = normalize(n2.content, options.collapse_whitespace)
        if t1 != t2:
            self.recorder.add(Status.UNEQUAL_TEXT_CONTENTS, n1.parent or n1, n2.parent or n2, t1, t2)
            return Status.UNEQUAL_TEXT_CONTENTS

        return Status.EQUIVALENT

    def compare_children(self, c1: Sequence[Node], c2: Sequence[Node], options: ComparisonOptions) -> Status:
        """
        Compares two sequences of child nodes in lock-step, skipping excluded nodes.

        Once a sequence is exhausted, remaining nodes in the other sequence are compared against an absent node. If a
        pair of nodes differs in kind or element name, the rest of the sequence is not compared (even in verbose mode)
        but comparison of the ancestors' other children continues.

        :param c1: Left child sequence.
        :param c2: Right child sequence.
        :param options: Options that apply to the children.
        :returns: Composite status, where the last non-equivalent status wins.
        """

        status = Status.EQUIVALENT
        i = j = 0
        while i < len(c1) or j < len(c2):
            n1 = c1[i] if i < len(c1) else None
            n2 = c2[j] if j < len(c2) else None

            if n1 is not None and is_node_excluded(n1, options):
                i += 1
                continue
            if n2 is not None and is_node_excluded(n2, options):
                j += 1
                continue

            status = merge_status(status, self.compare_nodes(n1, n2, options))

            # halt comparison of this subtree but let siblings of ancestors be compared (in verbose mode)
            if _diverges(n1, n2):
                return status

            # stop at the first difference unless in verbose mode
            if status is not Status.EQUIVALENT and not options.verbose:
                break

            i += 1
            j += 1

        return status
