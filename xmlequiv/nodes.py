"""
Compare XML and HTML markup trees for equivalence.

Copyright 2022-2026, Levente Hunyadi
"""

import enum
import weakref
from dataclasses import dataclass, field
from typing import Iterable, Optional, Union

import lxml.etree as ET
import lxml.html

from .environment import NodeTypeError

ElementType = ET._Element  # pyright: ignore [reportPrivateUsage]
ElementTreeType = ET._ElementTree  # pyright: ignore [reportPrivateUsage]


@enum.unique
class NodeKind(enum.Enum):
    "Identifies the kind of a markup node, which determines the comparison rule applied to it."

    DOCUMENT = "document"
    ELEMENT = "element"
    TEXT = "text"
    COMMENT = "comment"
    DOCTYPE = "doctype"
    OTHER = "other"


TEXT_NAME = "#text"
COMMENT_NAME = "#comment"
FRAGMENT_NAME = "#fragment"
XML_DOCUMENT_NAME = "#document"
HTML_DOCUMENT_NAME = "#html-document"


@dataclass(frozen=True)
class Attribute:
    """
    An attribute of an element.

    :param name: Attribute name, unique within its owning element.
    :param value: Attribute value, always compared as a string.
    """

    name: str
    value: str

    def __str__(self) -> str:
        return f'{self.name}="{self.value}"'


@dataclass(eq=False)
class Node:
    """
    A read-only view of a markup node.

    lxml keeps character data in the `text` and `tail` properties of elements; this view turns character data into
    text nodes of their own such that children of an element follow document order.

    :param kind: Node kind.
    :param name: Tag name for elements, target for processing instructions, pseudo-name (e.g. `#text`) otherwise.
    :param content: Character data of text and comment nodes.
    :param attributes: Attributes of an element in source order.
    :param children: Child nodes in document order.
    :param source: The lxml object the node was created from, if any.
    """

    kind: NodeKind
    name: str
    content: str = ""
    attributes: tuple[Attribute, ...] = ()
    children: list["Node"] = field(default_factory=list)
    source: Optional[ElementType] = field(default=None, repr=False)
    _parent: Optional["weakref.ReferenceType[Node]"] = field(default=None, init=False, repr=False)

    @property
    def parent(self) -> Optional["Node"]:
        "The node that holds this node as a child, if any."

        if self._parent is None:
            return None
        return self._parent()

    def append(self, child: "Node") -> None:
        child._parent = weakref.ref(self)
        self.children.append(child)

    def extend(self, children: Iterable["Node"]) -> None:
        for child in children:
            self.append(child)

    def __str__(self) -> str:
        match self.kind:
            case NodeKind.TEXT | NodeKind.COMMENT:
                return self.content
            case _:
                return self.name


def text_node(content: str) -> Node:
    return Node(NodeKind.TEXT, TEXT_NAME, content=content)


def _is_html(obj: ElementType) -> bool:
    return isinstance(obj, lxml.html.HtmlMixin)


def _from_element(elem: ElementType) -> Node:
    "Creates a node from an lxml element, comment, processing instruction or entity (excluding its tail)."

    if isinstance(elem, ET._Comment):  # pyright: ignore [reportPrivateUsage]
        return Node(NodeKind.COMMENT, COMMENT_NAME, content=elem.text or "", source=elem)
    elif isinstance(elem, ET._ProcessingInstruction):  # pyright: ignore [reportPrivateUsage]
        return Node(NodeKind.OTHER, elem.target, content=elem.text or "", source=elem)
    elif isinstance(elem, ET._Entity):  # pyright: ignore [reportPrivateUsage]
        return Node(NodeKind.OTHER, elem.name, source=elem)

    node = Node(
        NodeKind.ELEMENT,
        elem.tag,
        attributes=tuple(Attribute(str(name), str(value)) for name, value in elem.attrib.items()),
        source=elem,
    )
    if elem.text:
        node.append(text_node(elem.text))
    for child in elem:
        node.append(_from_element(child))
        if child.tail:
            node.append(text_node(child.tail))
    return node


def _from_tree(tree: ElementTreeType) -> Node:
    "Creates a document node, including the document type declaration and top-level comments."

    root = tree.getroot()
    name = HTML_DOCUMENT_NAME if root is not None and _is_html(root) else XML_DOCUMENT_NAME
    document = Node(NodeKind.DOCUMENT, name)

    if root is not None:
        # lxml refuses to report document information for a tree without a root
        docinfo = tree.docinfo
        if docinfo.doctype:
            document.append(Node(NodeKind.DOCTYPE, docinfo.root_name or "", content=docinfo.doctype))

        preceding = list(root.itersiblings(preceding=True))
        preceding.reverse()
        document.extend(_from_element(sibling) for sibling in preceding)
        document.append(_from_element(root))
        document.extend(_from_element(sibling) for sibling in root.itersiblings())

    return document


def _from_sequence(items: Iterable[Union[ElementType, str]]) -> Node:
    "Creates a node set, e.g. from the list returned by `lxml.html.fragments_fromstring`."

    fragment = Node(NodeKind.OTHER, FRAGMENT_NAME)
    for item in items:
        if isinstance(item, str):
            fragment.append(text_node(item))
        elif isinstance(item, ET._Element):  # pyright: ignore [reportPrivateUsage]
            fragment.append(_from_element(item))
            if item.tail:
                fragment.append(text_node(item.tail))
        else:
            raise NodeTypeError(f"expected: markup node in node set; got: {type(item).__name__}")
    return fragment


NodeLike = Union[Node, ElementType, ElementTreeType, list[Union[ElementType, str]], tuple[Union[ElementType, str], ...]]


def as_node(obj: NodeLike) -> Node:
    """
    Creates a node view of an lxml document, element or node set.

    :param obj: An lxml element tree, element, comment, processing instruction, a sequence of such objects, or a
        node view returned by an earlier call.
    :returns: A node view that the comparator can traverse.
    :raises NodeTypeError: Raised when the object is not a recognized markup node or node collection.
    """

    if isinstance(obj, Node):
        return obj
    elif isinstance(obj, ET._ElementTree):  # pyright: ignore [reportPrivateUsage]
        return _from_tree(obj)
    elif isinstance(obj, ET._Element):  # pyright: ignore [reportPrivateUsage]
        return _from_element(obj)
    elif isinstance(obj, (list, tuple)):
        return _from_sequence(obj)
    else:
        raise NodeTypeError(f"expected: markup node or node set; got: {type(obj).__name__}")
