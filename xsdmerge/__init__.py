from .model import CasePolicy, Node
from .matcher import NodeMatcher
from .merge import Merger, merge
from .gen import CppGenerator, generate, map_type

__all__ = [
    "CasePolicy",
    "Node",
    "NodeMatcher",
    "Merger",
    "merge",
    "CppGenerator",
    "generate",
    "map_type",
]
