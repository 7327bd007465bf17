"""
Compare XML and HTML markup trees for equivalence.

Copyright 2022-2026, Levente Hunyadi
"""

import functools
import logging

from lxml.cssselect import CSSSelector

from .nodes import ElementType, Node, NodeKind

LOGGER = logging.getLogger(__name__)


@functools.lru_cache(maxsize=256)
def _compile(css: str) -> CSSSelector:
    LOGGER.debug("Compiling CSS selector: %s", css)
    return CSSSelector(css)


def element_matches(elem: ElementType, css: str) -> bool:
    """
    Checks whether an element is selected by a CSS selector evaluated in the scope of the element's parent.

    Selector syntax errors are not caught; they surface to the caller as `cssselect.SelectorError`.

    :param elem: An lxml element.
    :param css: CSS selector text, e.g. `div.banner > a[href]`.
    :returns: True if the element is among the elements selected within its parent.
    """

    selector = _compile(css)
    scope = elem.getparent()
    if scope is None:
        return elem in selector(elem.getroottree())
    else:
        return elem in selector(scope)


def matches(node: Node, css: str) -> bool:
    "Checks whether a node is selected by a CSS selector. Only elements can match a selector."

    if node.kind is not NodeKind.ELEMENT or node.source is None:
        return False
    return element_matches(node.source, css)
