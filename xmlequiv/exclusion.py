"""
Compare XML and HTML markup trees for equivalence.

Copyright 2022-2026, Levente Hunyadi
"""

from .nodes import Attribute, Node, NodeKind
from .options import ComparisonOptions
from .selector import matches
from .text import collapse


def is_node_excluded(node: Node, options: ComparisonOptions) -> bool:
    """
    Determines if a node should be excluded from the comparison.

    An excluded node is completely ignored, as if it did not exist. The following are excluded:

    * document type declarations,
    * comments (only with `ignore_comments`),
    * text nodes (with `ignore_text_nodes`, or when the text is blank),
    * nodes that match a CSS selector in `ignore_nodes` within the scope of their parent.

    :param node: Node to test for exclusion.
    :param options: Comparison options.
    :returns: True if the node is to be treated as absent.
    """

    match node.kind:
        case NodeKind.DOCTYPE:
            return True
        case NodeKind.COMMENT:
            if options.ignore_comments:
                return True
        case NodeKind.TEXT:
            if options.ignore_text_nodes or not collapse(node.content):
                return True
        case _:
            pass

    return any(matches(node, css) for css in options.ignore_nodes)


def is_attr_name_excluded(name1: str, name2: str, options: ComparisonOptions) -> bool:
    "True if both attribute names contain a string listed in `ignore_attrs_by_name`."

    return _both_contain(name1, name2, options.ignore_attrs_by_name)


def is_attr_content_excluded(a1: Attribute, a2: Attribute, options: ComparisonOptions) -> bool:
    """
    Checks whether two attributes should be excluded based on their values.

    Returns true only if an excluded string is contained in both attribute values. The same string need not match
    both values.
    """

    return _both_contain(a1.value, a2.value, options.ignore_attr_content)


def is_attr_selected(n1: Node, n2: Node, a1: Attribute, a2: Attribute, options: ComparisonOptions) -> bool:
    """
    Checks whether two attributes should be excluded based on a CSS selector in `ignore_attrs`.

    Only selectors that mention the attribute name are considered, e.g. `a[href]` is used to exclude `href` but not
    `title`. The attributes are excluded if both owning elements match the selector.

    :param n1: Element that owns the left attribute.
    :param n2: Element that owns the right attribute.
    :param a1: Left attribute.
    :param a2: Right attribute.
    :param options: Comparison options.
    """

    for css in options.ignore_attrs:
        if a1.name in css and a2.name in css:
            if matches(n1, css) and matches(n2, css):
                return True
    return False


def is_attr_excluded(n1: Node, n2: Node, a1: Attribute, a2: Attribute, options: ComparisonOptions) -> bool:
    "True if an attribute pair with matching names is invisible to comparison."

    return (
        is_attr_name_excluded(a1.name, a2.name, options)
        or is_attr_selected(n1, n2, a1, a2, options)
        or is_attr_content_excluded(a1, a2, options)
    )


def _both_contain(text1: str, text2: str, substrings: tuple[str, ...]) -> bool:
    found1 = False
    found2 = False
    for substring in substrings:
        found1 = found1 or substring in text1
        found2 = found2 or substring in text2
        if found1 and found2:
            return True
    return False
