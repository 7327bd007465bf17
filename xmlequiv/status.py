"""
Compare XML and HTML markup trees for equivalence.

Copyright 2022-2026, Levente Hunyadi
"""

import enum


@enum.unique
class Status(enum.IntEnum):
    """
    Outcome of comparing two nodes, two attributes or two subtrees.

    `EQUIVALENT` is the success value; all other members classify the first (or, in verbose mode, the last) discrepancy
    found, and double as tags in recorded differences.
    """

    EQUIVALENT = 1
    "Nodes are equivalent."

    MISSING_ATTRIBUTE = 2
    "Attribute is missing its counterpart."

    MISSING_NODE = 3
    "Node is missing its counterpart."

    UNEQUAL_ATTRIBUTES = 4
    "Attribute names or values are not equal."

    UNEQUAL_COMMENTS = 5
    "Comment contents are not equal."

    UNEQUAL_DOCUMENTS = 6
    "Document types are not equal."

    UNEQUAL_ELEMENTS = 7
    "Nodes are elements but their names are not equal."

    UNEQUAL_NODE_TYPES = 8
    "Nodes are not of the same kind."

    UNEQUAL_TEXT_CONTENTS = 9
    "Text node contents are not equal."


def merge_status(status: Status, result: Status) -> Status:
    "Combines a running status with a new result such that the last non-equivalent result wins."

    return status if result is Status.EQUIVALENT else result
