from typing import Dict, Iterator, List, Optional


# Tag given to the node that owns the top level element of a document.
DOCUMENT_TAG = "#document"


class CasePolicy:
    """How strings (tags, attribute names and values) are compared.

    The policy is picked once when the run starts and handed to everything
    that compares strings, so matcher and merge engine always agree.
    """

    def __init__(self, case_insensitive: bool = False):
        self._case_insensitive = case_insensitive

    @property
    def case_insensitive(self) -> bool:
        return self._case_insensitive

    def equals(self, left: str, right: str) -> bool:
        if not self._case_insensitive:
            return left == right
        return left.casefold() == right.casefold()

    def __repr__(self):
        return f"CasePolicy[case_insensitive={self._case_insensitive}]"


CASE_SENSITIVE = CasePolicy(False)


class Node:
    """A labeled tree node with ordered attributes and children.

    Nodes produced by the parser describe one input document, while nodes
    created by `clone` live in the accumulator tree.
    """

    def __init__(
            self,
            tag: str,
            text: Optional[str] = None,
            attributes: Optional[Dict[str, str]] = None,
            children: Optional[List["Node"]] = None,
    ):
        self._tag = tag
        self.text = text
        self.attributes: Dict[str, str] = {} if attributes is None else dict(attributes)
        self.children: List[Node] = [] if children is None else children

    @classmethod
    def document(cls) -> "Node":
        return cls(DOCUMENT_TAG)

    @property
    def tag(self) -> str:
        return self._tag

    def get_attr(self, name: str, policy: CasePolicy = CASE_SENSITIVE) -> Optional[str]:
        """Returns the value of the first attribute whose name matches."""
        for k, v in self.attributes.items():
            if policy.equals(k, name):
                return v
        return None

    def append(self, child: "Node") -> "Node":
        self.children.append(child)
        return child

    def clone(self) -> "Node":
        """Copy the tag, text and direct attributes. Not recursive."""
        return Node(self._tag, self.text, dict(self.attributes))

    def iter(self) -> Iterator["Node"]:
        """Yield this node and all its descendants, depth first."""
        yield self
        for c in self.children:
            yield from c.iter()

    def __eq__(self, other):
        if not isinstance(other, Node):
            return NotImplemented
        return (
            self._tag == other._tag
            and self.text == other.text
            and list(self.attributes.items()) == list(other.attributes.items())
            and self.children == other.children
        )

    def __len__(self):
        return len(self.children)

    def __str__(self):
        attrs = ",".join(f"{k}={v}" for k, v in self.attributes.items())
        return f"Node[tag={self._tag}, attributes=[{attrs}], children={len(self.children)}]"

    def __repr__(self):
        return str(self)
