"""tsgen construct tree -- builds TypeScript interfaces and classes in memory.

Quick usage::

    from tsgen.codegen import new_generator
    from tsgen.config import GeneratorOptions

    gen = new_generator("./out", GeneratorOptions(indent=2))
    sf = gen.add_source_file("models.ts")
    sf.add_interface("User", True, lambda i: i.add_property("id", "string"))
    print(gen.render())
"""

from tsgen.codegen.constructs import (
    Assignment,
    Class,
    ClassMethod,
    ClassProperty,
    CodegenError,
    Construct,
    Constructor,
    Interface,
    MissingConstructorError,
    Parameter,
    ParameterCollection,
    Property,
    RenderContext,
    SourceFile,
)
from tsgen.codegen.generator import Generator, new_generator

__all__ = [
    "Assignment",
    "Class",
    "ClassMethod",
    "ClassProperty",
    "CodegenError",
    "Construct",
    "Constructor",
    "Generator",
    "Interface",
    "MissingConstructorError",
    "Parameter",
    "ParameterCollection",
    "Property",
    "RenderContext",
    "SourceFile",
    "new_generator",
]
