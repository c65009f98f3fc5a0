from abc import ABC
from typing import Dict, List, Mapping, Optional
import logging

from xsdmerge.gen.typemap import INVALID_TYPE, map_type
from xsdmerge.model import CASE_SENSITIVE, CasePolicy, Node

logger = logging.getLogger(__name__)


class Check(ABC):
    """A check is a read-only visitor over a merged tree.

    """
    def visit(self, node: Node, path: List[str]) -> None:
        pass

    def descend(self, node: Node) -> bool:
        """Whether the children of `node` get visited too."""
        return True

    def check(self, root: Node) -> None:
        def recurse(n: Node, path: List[str]):
            self.visit(n, path)
            if not self.descend(n):
                return
            for c in n.children:
                recurse(c, path + [c.tag])
        recurse(root, [])


class TypeCoverageCheck(Check):
    """Collect field types the generator can only emit as a placeholder.

    Unknown types are not fatal, the placeholder makes the generated code
    fail to compile, but it is nicer to learn about them up front.
    """
    def __init__(self, overrides: Optional[Mapping[str, str]] = None,
                 policy: CasePolicy = CASE_SENSITIVE):
        self.overrides = overrides
        self.policy = policy
        self.unmapped: Dict[str, List[str]] = {}

    def is_field(self, node: Node) -> bool:
        return (node.get_attr("name", self.policy) is not None
                and node.get_attr("type", self.policy) is not None)

    def descend(self, node: Node) -> bool:
        # Fields are leaves in the generated code
        return not self.is_field(node)

    def visit(self, node: Node, path: List[str]) -> None:
        if not self.is_field(node):
            return
        name = node.get_attr("name", self.policy)
        typename = node.get_attr("type", self.policy)
        if map_type(typename, self.overrides) == INVALID_TYPE:
            self.unmapped.setdefault(typename, []).append(name)
            logger.warning(f"Field {'/'.join(path)}[{name}] has unmapped type {typename}")

    def summary(self) -> Optional[str]:
        if not self.unmapped:
            return None
        fields = sum(len(v) for v in self.unmapped.values())
        types = ", ".join(sorted(self.unmapped))
        return f"{fields} fields use {len(self.unmapped)} unmapped types: {types}"
