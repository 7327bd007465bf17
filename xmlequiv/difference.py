"""
Compare XML and HTML markup trees for equivalence.

Copyright 2022-2026, Levente Hunyadi
"""

from dataclasses import dataclass, field
from typing import Optional

from .nodes import FRAGMENT_NAME, Node, NodeKind
from .status import Status


@dataclass(frozen=True)
class Difference:
    """
    A discrepancy found when comparing two markup trees.

    :param location_left: Location path of the left node, e.g. `html:body:div(2):p`.
    :param value_left: Left value that differs (e.g. text content or `name="value"` for attributes).
    :param status: Classification of the discrepancy.
    :param value_right: Right value that differs.
    :param location_right: Location path of the right node.
    :param left: Left node the difference is attributed to.
    :param right: Right node the difference is attributed to.
    """

    location_left: str
    value_left: Optional[str]
    status: Status
    value_right: Optional[str]
    location_right: str
    left: Optional[Node] = field(default=None, compare=False, repr=False)
    right: Optional[Node] = field(default=None, compare=False, repr=False)

    def __str__(self) -> str:
        return f"{self.status.name}: {self.location_left} {self.value_left!r} <> {self.location_right} {self.value_right!r}"


def _is_container(node: Node) -> bool:
    return node.kind is NodeKind.DOCUMENT or (node.kind is NodeKind.OTHER and node.name == FRAGMENT_NAME)


class LocationResolver:
    """
    Computes location paths that identify a node by its ancestry.

    Path segments are joined with `:`. A segment is suffixed with a 1-based index such as `div(2)` only if the parent
    has more than one child with the same name. Documents and node sets are not part of the path.
    """

    _cache: dict[Node, str]

    def __init__(self) -> None:
        self._cache = {}

    def _segment(self, node: Node) -> str:
        parent = node.parent
        if parent is None:
            return node.name

        index = 0
        count = 0
        for sibling in parent.children:
            if sibling.name == node.name:
                count += 1
                if sibling is node:
                    index = count
        if count > 1:
            return f"{node.name}({index})"
        else:
            return node.name

    def location(self, node: Node) -> str:
        "Returns the location path of a node."

        path = self._cache.get(node)
        if path is not None:
            return path

        if _is_container(node):
            path = node.name
        else:
            parent = node.parent
            segment = self._segment(node)
            if parent is None or _is_container(parent):
                path = segment
            else:
                path = f"{self.location(parent)}:{segment}"

        self._cache[node] = path
        return path


class DifferenceRecorder:
    """
    Accumulates differences in the order they are discovered.

    Nothing is recorded unless verbose reporting is requested.
    """

    verbose: bool
    differences: list[Difference]
    _resolver: LocationResolver

    def __init__(self, verbose: bool) -> None:
        self.verbose = verbose
        self.differences = []
        self._resolver = LocationResolver()

    def add(
        self,
        status: Status,
        node1: Node,
        node2: Node,
        value1: Optional[str],
        value2: Optional[str],
    ) -> None:
        """
        Records a difference.

        :param status: Classification of the difference.
        :param node1: Left node to attribute the difference to.
        :param node2: Right node to attribute the difference to.
        :param value1: Left value that differs.
        :param value2: Right value that differs.
        """

        if not self.verbose:
            return

        self.differences.append(
            Difference(
                self._resolver.location(node1),
                value1,
                status,
                value2,
                self._resolver.location(node2),
                left=node1,
                right=node2,
            )
        )
