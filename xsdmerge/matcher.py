from typing import Optional

from xsdmerge.model import CasePolicy, Node


# Attribute that carries the identity of a schema declaration.
IDENTITY_ATTR = "name"


class NodeMatcher:
    """Finds the child of an accumulator node a candidate should merge into.

    Named declarations are unique across the schema, so a candidate that
    carries a `name` attribute is matched on that attribute alone, whatever
    its tag. Anonymous nodes (sequences, complex types without a name, ...)
    are matched on their tag.
    """

    def __init__(self, policy: CasePolicy):
        self.policy = policy

    def find_by_attr(self, container: Node, name: str, value: str) -> Optional[Node]:
        """Returns first child with a matching attribute. Both key and value must match."""
        for child in container.children:
            for k, v in child.attributes.items():
                if self.policy.equals(k, name) and self.policy.equals(v, value):
                    return child
        return None

    def find_by_tag(self, container: Node, tag: str) -> Optional[Node]:
        """Returns first child with a matching tag."""
        for child in container.children:
            if self.policy.equals(child.tag, tag):
                return child
        return None

    def match(self, candidate: Node, container: Node) -> Optional[Node]:
        identity = candidate.get_attr(IDENTITY_ATTR, self.policy)
        if identity is not None:
            return self.find_by_attr(container, IDENTITY_ATTR, identity)
        return self.find_by_tag(container, candidate.tag)
