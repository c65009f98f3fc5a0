from xsdmerge.gen.generator import IGenerator
from xsdmerge.gen.cpp import CppGenerator, generate
from xsdmerge.gen.typemap import INVALID_TYPE, map_type, typemap

__all__ = [
    IGenerator,
    CppGenerator,
    generate,
    INVALID_TYPE,
    map_type,
    typemap,
]
