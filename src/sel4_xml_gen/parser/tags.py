"""DOM navigation shared by the invocation model builders.

The builders walk an ``xml.dom.minidom`` tree sibling by sibling. Text
nodes that contain only whitespace and comment nodes carry no meaning in
the dialect, so every sibling fetch goes through ``next_significant``.
"""

from collections.abc import Callable, Iterator
from enum import Enum
from typing import TypeVar
from xml.dom import Node

from .errors import MissingAttribute, source_location

T = TypeVar("T")

TEXT_NODES = (Node.TEXT_NODE, Node.CDATA_SECTION_NODE)


class Tag(str, Enum):
    """Element names of the invocation dialect, lower-cased."""

    API = "api"
    STRUCT = "struct"
    INTERFACE = "interface"
    METHOD = "method"
    PARAM = "param"
    ERROR = "error"
    RETURN = "return"
    ERRORENUMDESC = "errorenumdesc"
    CAP_PARAM = "cap_param"
    BRIEF = "brief"
    DESCRIPTION = "description"
    DOCREF = "docref"
    TEXTTT = "texttt"
    SHORTREF = "shortref"
    AUTOREF = "autoref"
    OBJ = "obj"

    @classmethod
    def of(cls, node: Node) -> "Tag | None":
        """Resolve the tag of an element node, ``None`` for anything else."""
        if node.nodeType != Node.ELEMENT_NODE:
            return None
        try:
            return cls(tag_name(node).lower())
        except ValueError:
            return None


def tag_name(node: Node) -> str:
    """The name used in error messages: local element name or DOM node name."""
    if node.nodeType == Node.ELEMENT_NODE:
        return node.localName or node.nodeName
    return node.nodeName


def is_insignificant(node: Node) -> bool:
    if node.nodeType == Node.COMMENT_NODE:
        return True
    return node.nodeType == Node.TEXT_NODE and node.data.strip() == ""


def next_significant(node: Node | None) -> Node | None:
    """Return ``node`` or its first following sibling that is not noise."""
    while node is not None and is_insignificant(node):
        node = node.nextSibling
    return node


def significant_children(node: Node) -> Iterator[Node]:
    child = next_significant(node.firstChild)
    while child is not None:
        yield child
        child = next_significant(child.nextSibling)


def optional(node: Node, attr: str) -> str | None:
    if node.nodeType != Node.ELEMENT_NODE or not node.hasAttribute(attr):
        return None
    return node.getAttribute(attr)


def required(node: Node, attr: str) -> str:
    value = optional(node, attr)
    if value is None:
        raise MissingAttribute(attr, tag_name(node), source_location(1))
    return value


def take_section(
    node: Node | None,
    tag: Tag,
    convert: Callable[[Node], T],
    into: list[T],
) -> Node | None:
    """Consume an optional ``<tag>`` section starting at ``node``.

    If ``node`` is a ``<tag>`` element, each of its significant children
    is converted and appended to ``into`` and the following sibling is
    returned. Otherwise ``node`` is returned untouched, meaning the
    section is absent and the caller should look for the next one here.
    """
    node = next_significant(node)
    if node is None or Tag.of(node) is not tag:
        return node
    for child in significant_children(node):
        into.append(convert(child))
    return node.nextSibling


def take_repeated(
    node: Node | None,
    tag: Tag,
    convert: Callable[[Node], T],
    into: list[T],
) -> Node | None:
    """Consume a run of zero or more ``<tag>`` siblings starting at ``node``.

    Returns the first significant sibling that is not a ``<tag>`` element,
    or ``None`` at the end of the siblings.
    """
    node = next_significant(node)
    while node is not None and Tag.of(node) is tag:
        into.append(convert(node))
        node = next_significant(node.nextSibling)
    return node
