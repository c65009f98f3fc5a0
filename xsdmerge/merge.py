import logging

from xsdmerge.matcher import NodeMatcher
from xsdmerge.model import CASE_SENSITIVE, CasePolicy, Node

logger = logging.getLogger(__name__)


class Merger:
    """Folds input trees into an accumulator tree.

    The merge only ever appends: a child of the accumulator is never removed
    or moved once inserted, so sibling order is the order in which distinct
    entities were first seen across all inputs. The input tree is only read.
    """

    def __init__(self, policy: CasePolicy = CASE_SENSITIVE):
        self.policy = policy
        self.matcher = NodeMatcher(policy)

    def merge(self, innode: Node, outnode: Node) -> Node:
        for ichild in innode.children:
            ochild = self.matcher.match(ichild, outnode)
            if ochild is None:
                ochild = outnode.append(ichild.clone())
                logger.debug(f"Adding {ochild} under {outnode.tag}")
            self.merge(ichild, ochild)
        return outnode


def merge(innode: Node, outnode: Node, policy: CasePolicy = CASE_SENSITIVE) -> Node:
    return Merger(policy).merge(innode, outnode)
