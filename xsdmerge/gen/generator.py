"""
Generator interface!
"""

from abc import ABC, abstractmethod
from typing import TextIO

from xsdmerge.model import Node


class IGenerator(ABC):
    """
    Base for everything that walks a merged tree and emits text into
    a destination stream.
    """

    def __init__(self, dest: TextIO):
        self.dest = dest

    def write(self, text: str) -> None:
        self.dest.write(text)

    @abstractmethod
    def generate(self, root: Node) -> None:
        pass
