from xsdmerge.model import Node


def n(tag, *children, text=None, **attrs):
    """Build a tree in one expression: n("xs:element", n("xs:sequence"), name="x")."""
    return Node(tag, text, attrs, list(children))


def doc(*children):
    d = Node.document()
    for c in children:
        d.append(c)
    return d
