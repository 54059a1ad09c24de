"""tsgen -- a programmatic builder for TypeScript source.

Build a tree of interfaces, classes, constructors and methods through an
imperative API, then render it to a single source string.

Quick usage::

    from tsgen import GeneratorOptions, new_generator

    gen = new_generator("./out", GeneratorOptions(indent=2))
    sf = gen.add_source_file("user.ts")

    def build_user(cls):
        cls.add_member("id", "string", "private")
        cls.add_constructor(lambda c: c.add_parameter("id", "string"))

    sf.add_class("User", True, build_user)
    print(gen.render())
"""

from tsgen.codegen import (
    Class,
    ClassMethod,
    CodegenError,
    Constructor,
    Generator,
    Interface,
    MissingConstructorError,
    RenderContext,
    SourceFile,
    new_generator,
)
from tsgen.config import GeneratorOptions

__version__ = "0.1.0"

__all__ = [
    "Class",
    "ClassMethod",
    "CodegenError",
    "Constructor",
    "Generator",
    "GeneratorOptions",
    "Interface",
    "MissingConstructorError",
    "RenderContext",
    "SourceFile",
    "new_generator",
]
