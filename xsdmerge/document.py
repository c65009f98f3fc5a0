"""Conversion between XML documents and `Node` trees.

Tags and attribute names are kept in the prefixed form they were written
in (`xs:element`), and namespace declarations show up as plain `xmlns:*`
attributes, so merging compares documents as authored. Every node
carries the declarations its own names depend on. Serializing resolves
the prefixes again and only writes declarations not already in scope.
"""
from pathlib import Path
from typing import Dict, Optional, Set, Union
import logging

from lxml import etree

from xsdmerge.model import DOCUMENT_TAG, Node

logger = logging.getLogger(__name__)

XML_NS = "http://www.w3.org/XML/1998/namespace"


def _parser() -> etree.XMLParser:
    return etree.XMLParser(remove_comments=True, remove_pis=True, remove_blank_text=True)


def _prefixed(qname: etree.QName, nsmap: Dict[Optional[str], str]) -> str:
    if qname.namespace is None:
        return qname.localname
    if qname.namespace == XML_NS:
        return f"xml:{qname.localname}"
    for prefix, uri in nsmap.items():
        if prefix is not None and uri == qname.namespace:
            return f"{prefix}:{qname.localname}"
    return qname.localname


def _used_prefixes(el, names) -> Set[Optional[str]]:
    """Prefixes the element depends on: in its tag, its attribute names, or
    QName valued attributes such as `type="xs:string"`."""
    used = set()
    if etree.QName(el).namespace is not None:
        used.add(el.prefix)
    for name in names:
        if ":" in name:
            used.add(name.split(":", 1)[0])
    for v in el.attrib.values():
        if ":" in v and v.split(":", 1)[0] in el.nsmap:
            used.add(v.split(":", 1)[0])
    used.discard("xml")
    return used


def from_element(el, inherited: Optional[Dict[Optional[str], str]] = None) -> Node:
    inherited = inherited or {}
    qname = etree.QName(el)
    tag = f"{el.prefix}:{qname.localname}" if el.prefix else qname.localname
    own = [(_prefixed(etree.QName(k), el.nsmap), v) for k, v in el.attrib.items()]

    # Declarations the node relies on are repeated on it, so the node
    # still serializes when merged under a parent from another document.
    used = _used_prefixes(el, [k for k, _ in own])
    attributes = {}
    for prefix, uri in el.nsmap.items():
        if inherited.get(prefix) != uri or prefix in used:
            attributes["xmlns" if prefix is None else f"xmlns:{prefix}"] = uri
    attributes.update(own)

    text = el.text if el.text and el.text.strip() else None
    node = Node(tag, text, attributes)
    for c in el:
        # Entities and anything else that isn't an element
        if not isinstance(c.tag, str):
            continue
        node.append(from_element(c, el.nsmap))
    return node


def parse(data: bytes) -> Node:
    """Parse a document into a tree rooted at a `#document` node."""
    root = etree.fromstring(data, _parser())
    doc = Node.document()
    doc.append(from_element(root))
    return doc


def load(path: Union[str, Path]) -> Node:
    data = Path(path).read_bytes()
    logger.info(f"Read {len(data)} bytes from {path}")
    return parse(data)


def _resolve(name: str, scope: Dict[Optional[str], str], is_attr: bool) -> str:
    if ":" not in name:
        if is_attr or scope.get(None) is None:
            return name
        return f"{{{scope[None]}}}{name}"

    prefix, local = name.split(":", 1)
    uri = XML_NS if prefix == "xml" else scope.get(prefix)
    if uri is None:
        logger.warning(f"Undeclared namespace prefix in {name}, writing it as {local}")
        return local
    return f"{{{uri}}}{local}"


def to_element(node: Node, parent=None, scope: Optional[Dict[Optional[str], str]] = None):
    decls: Dict[Optional[str], str] = {}
    plain = []
    for k, v in node.attributes.items():
        if k == "xmlns":
            decls[None] = v
        elif k.startswith("xmlns:"):
            decls[k[len("xmlns:"):]] = v
        else:
            plain.append((k, v))
    scope = scope or {}
    # Declarations repeated from an ancestor are already in scope
    decls = {p: uri for p, uri in decls.items() if scope.get(p) != uri}
    scope = {**scope, **decls}

    tag = _resolve(node.tag, scope, is_attr=False)
    if parent is None:
        el = etree.Element(tag, nsmap=decls or None)
    else:
        el = etree.SubElement(parent, tag, nsmap=decls or None)
    for k, v in plain:
        el.set(_resolve(k, scope, is_attr=True), v)
    el.text = node.text

    for c in node.children:
        to_element(c, el, scope)
    return el


def serialize(root: Node) -> bytes:
    """Render a tree as a pretty printed UTF-8 document.

    A `#document` node must hold exactly one element, since a document
    has a single root.
    """
    if root.tag == DOCUMENT_TAG:
        if len(root.children) != 1:
            raise ValueError(
                f"A document needs exactly one root element, found {len(root.children)}: "
                f"{[c.tag for c in root.children]}"
            )
        root = root.children[0]
    el = to_element(root)
    return etree.tostring(el, pretty_print=True, xml_declaration=True, encoding="UTF-8")


def dump(root: Node, path: Union[str, Path]) -> None:
    data = serialize(root)
    Path(path).write_bytes(data)
    logger.info(f"Wrote {len(data)} bytes to {path}")
