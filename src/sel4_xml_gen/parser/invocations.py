"""Invocation description parser.

Parses the seL4 interface XML (``sel4.xml``, ``sel4arch.xml`` and friends)
into an ``Api`` model. The dialect mixes text with inline markup and lets
some content appear either as an attribute or as a child element, which a
schema-driven deserializer handles poorly, so the document is walked by
hand. Child order is preserved but never validated beyond what each
builder expects next.
"""

import logging
import xml.dom.minidom
from pathlib import Path
from xml.dom import Node
from xml.parsers.expat import ErrorString, ExpatError

from .base import (
    Api,
    CapParam,
    DocLeaf,
    DocRef,
    ErrorElement,
    ErrorEnumDesc,
    Interface,
    Leaf,
    Leaves,
    Method,
    Obj,
    Param,
    PCData,
    ShortRef,
    StructElem,
    TextTT,
)
from .errors import UnsupportedElement, XmlSyntaxError
from .tags import (
    TEXT_NODES,
    Tag,
    next_significant,
    optional,
    required,
    significant_children,
    tag_name,
    take_repeated,
    take_section,
)

logger = logging.getLogger(__name__)


def parse_invocations(file_path: Path) -> Api:
    """Parse an invocation XML file into an Api."""
    return parse_invocations_string(file_path.read_bytes())


def parse_invocations_string(data: str | bytes) -> Api:
    try:
        doc = xml.dom.minidom.parseString(data)
    except ExpatError as e:
        raise XmlSyntaxError(ErrorString(e.code), e.lineno, e.offset) from e
    try:
        return api_from_document(doc)
    finally:
        doc.unlink()


def api_from_document(doc: xml.dom.minidom.Document) -> Api:
    root = doc.documentElement
    if Tag.of(root) is not Tag.API:
        raise UnsupportedElement(tag_name(root))

    children = [_api_element(child) for child in significant_children(root)]
    api = Api(
        name=optional(root, "name"),
        label_prefix=optional(root, "label_prefix"),
        children=children,
    )
    logger.debug("Parsed api %r with %d elements", api.name, len(children))
    return api


def _api_element(node: Node) -> StructElem | Interface:
    tag = Tag.of(node)
    if tag is Tag.STRUCT:
        return _struct(node)
    if tag is Tag.INTERFACE:
        return _interface(node)
    raise UnsupportedElement(tag_name(node))


def _struct(node: Node) -> StructElem:
    name = required(node, "name")
    members = [
        required(child, "name")
        for child in node.childNodes
        if child.nodeType == Node.ELEMENT_NODE
    ]
    return StructElem(name=name, members=members)


def _interface(node: Node) -> Interface:
    name = required(node, "name")
    methods = []
    for child in significant_children(node):
        if Tag.of(child) is not Tag.METHOD:
            raise UnsupportedElement(tag_name(child))
        methods.append(_method(child))

    logger.debug("Parsed interface %s with %d methods", name, len(methods))
    return Interface(
        name=name,
        manual_name=optional(node, "manual_name"),
        cap_desc=optional(node, "capability_description"),
        methods=methods,
    )


def _method(node: Node) -> Method:
    name = required(node, "name")
    id_ = required(node, "id")

    # brief? description? return? cap_param? param* error*
    brief, description, return_value = [], [], []
    child = take_section(node.firstChild, Tag.BRIEF, _doc_leaf, brief)
    child = take_section(child, Tag.DESCRIPTION, _doc_leaf, description)
    child = take_section(child, Tag.RETURN, _return, return_value)

    cap_param = None
    child = next_significant(child)
    if child is not None and Tag.of(child) is Tag.CAP_PARAM:
        text = optional(child, "append_description")
        if text is not None:
            cap_param = CapParam(append_description=text)
        child = child.nextSibling

    params: list[Param] = []
    errors: list[ErrorElement] = []
    child = take_repeated(child, Tag.PARAM, _param, params)
    child = take_repeated(child, Tag.ERROR, _error, errors)
    if child is not None:
        raise UnsupportedElement(tag_name(child))

    return Method(
        name=name,
        id=id_,
        condition=optional(node, "condition"),
        manual_name=optional(node, "manual_name"),
        manual_label=optional(node, "manual_label"),
        brief=brief,
        description=description,
        return_value=return_value,
        cap_param=cap_param,
        params=params,
        errors=errors,
    )


def _param(node: Node) -> Param:
    type_ = required(node, "type")
    name = required(node, "name")
    dir_ = required(node, "dir")

    description = _description(node)
    errors: list[ErrorElement] = []
    child = take_section(node.firstChild, Tag.DESCRIPTION, _doc_leaf, description)
    child = take_repeated(child, Tag.ERROR, _error, errors)
    if child is not None:
        raise UnsupportedElement(tag_name(child))

    return Param(type=type_, name=name, dir=dir_, description=description, errors=errors)


def _error(node: Node) -> ErrorElement:
    name = required(node, "name")
    description = _description(node)
    child = take_section(node.firstChild, Tag.DESCRIPTION, _doc_leaf, description)
    if child is not None:
        raise UnsupportedElement(tag_name(child))
    return ErrorElement(name=name, description=description)


def _description(node: Node) -> list[DocLeaf]:
    """Leaves from a ``description`` attribute; a child element may add more."""
    text = optional(node, "description")
    if text is None:
        return []
    return [Leaf(leaf=PCData(text=text))]


def _return(node: Node) -> ErrorEnumDesc | Leaves:
    if Tag.of(node) is Tag.ERRORENUMDESC:
        return ErrorEnumDesc()
    return Leaves(leaf=_doc_leaf(node))


def _doc_leaf(node: Node) -> DocRef | Leaf:
    if Tag.of(node) is Tag.DOCREF:
        return DocRef(leaves=[_leaf_node(child) for child in significant_children(node)])
    return Leaf(leaf=_leaf_node(node))


def _leaf_node(node: Node) -> PCData | TextTT | ShortRef | Obj:
    if node.nodeType in TEXT_NODES:
        return PCData(text=node.data)

    tag = Tag.of(node)
    if tag is Tag.TEXTTT:
        return TextTT(text=required(node, "text"))
    if tag is Tag.SHORTREF:
        return ShortRef(sec=required(node, "sec"))
    if tag is Tag.AUTOREF:
        # autoref is keyed by label but rendered as a short reference
        return ShortRef(sec=required(node, "label"))
    if tag is Tag.OBJ:
        return Obj(name=required(node, "name"))
    raise UnsupportedElement(tag_name(node))
