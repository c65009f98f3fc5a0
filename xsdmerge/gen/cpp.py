# A C++ declaration generator
from io import StringIO
from typing import Dict, Mapping, Optional, TextIO
import logging

from xsdmerge.gen.generator import IGenerator
from xsdmerge.gen.typemap import map_type
from xsdmerge.model import CASE_SENSITIVE, CasePolicy, Node


class CppGenerator(IGenerator):
    """Emits nested C++ structs for a merged schema tree.

    Nodes with both a `name` and a `type` become fields, nodes with only
    a `name` become structs wrapping their children, and nodes without a
    `name` are skipped over while their children are still visited.
    """

    def __init__(
            self,
            dest: TextIO,
            overrides: Optional[Mapping[str, str]] = None,
            policy: CasePolicy = CASE_SENSITIVE,
    ):
        IGenerator.__init__(self, dest)
        self.logger = logging.getLogger("xsdmerge.gen.cpp.CppGenerator")
        self.type_overrides: Dict[str, str] = dict(overrides) if overrides else {}
        self.policy = policy
        self.indent = ""

    def set_type_overrides(self, overrides: Mapping[str, str]) -> "CppGenerator":
        self.type_overrides = dict(overrides)
        return self

    def line(self, text: str) -> None:
        self.write(f"{self.indent}{text}\n")

    def gen_field(self, name: str, typename: str) -> None:
        cpptype = map_type(typename, self.type_overrides)
        self.logger.debug(f"Generating field {name}: {typename} -> {cpptype}")
        self.line(f"{cpptype} {name};")

    def gen_struct(self, name: str, node: Node) -> None:
        self.logger.debug(f"Generating struct {name} ({len(node)} children)")
        self.line(f"struct {name} {{")
        self.indent += "\t"
        self.gen_children(node)
        self.indent = self.indent[:-1]
        self.line("};")

    def gen_children(self, node: Node) -> None:
        for c in node.children:
            self.gen_node(c)

    def gen_node(self, node: Node) -> None:
        name = node.get_attr("name", self.policy)
        if name is None:
            self.gen_children(node)
            return

        typename = node.get_attr("type", self.policy)
        if typename is not None:
            self.gen_field(name, typename)
        else:
            self.gen_struct(name, node)

    def generate(self, root: Node) -> None:
        self.indent = ""
        self.gen_node(root)


def generate(root: Node, overrides: Optional[Mapping[str, str]] = None,
             policy: CasePolicy = CASE_SENSITIVE) -> str:
    dest = StringIO()
    CppGenerator(dest, overrides, policy).generate(root)
    return dest.getvalue()
