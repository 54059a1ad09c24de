"""Syntax constructs for generated TypeScript source.

Every construct is a plain mutable record with a ``render(ctx)`` method that
returns its text. Parents render their children in a fixed structural order
and concatenate the results. The indent width is never stored on a
construct; it arrives through the ``RenderContext`` passed to ``render``.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Optional, Protocol, TypeVar


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class CodegenError(Exception):
    """Base class for errors raised while rendering a construct tree."""


class MissingConstructorError(CodegenError):
    """Raised when a class is rendered before a constructor was added."""

    def __init__(self, class_name: str) -> None:
        self.class_name = class_name
        super().__init__(f"class {class_name!r} has no constructor")


# ---------------------------------------------------------------------------
# Render context
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class RenderContext:
    """Values shared by every ``render`` call in one traversal."""

    indent: int = 2

    def pad(self, level: int = 1) -> str:
        """Return the leading whitespace for *level* nesting levels."""
        return " " * (self.indent * level)


class Construct(Protocol):
    """Anything that renders to source text."""

    def render(self, ctx: RenderContext) -> str: ...


T = TypeVar("T")


def _configure(construct: T, builder: Optional[Callable[[T], object]]) -> T:
    # The builder runs to completion before the parent attaches the child.
    if builder is not None:
        builder(construct)
    return construct


def _prefixed(token: str) -> str:
    return f"{token} " if token else ""


# ---------------------------------------------------------------------------
# Leaves
# ---------------------------------------------------------------------------


@dataclass
class Parameter:
    """A ``name: type`` entry in a parameter list."""

    name: str
    type_info: str

    def render(self, ctx: RenderContext) -> str:
        return f"{self.name}: {self.type_info}"


@dataclass
class ParameterCollection:
    """Ordered parameters rendered as a single comma-separated line."""

    parameters: list[Parameter] = field(default_factory=list)

    def add(self, name: str, type_info: str) -> Parameter:
        param = Parameter(name, type_info)
        self.parameters.append(param)
        return param

    def __len__(self) -> int:
        return len(self.parameters)

    def render(self, ctx: RenderContext) -> str:
        return ", ".join(p.render(ctx) for p in self.parameters)


@dataclass
class Property:
    """An interface member."""

    name: str
    type_info: str

    def render(self, ctx: RenderContext) -> str:
        return f"{ctx.pad()}{self.name}: {self.type_info};\n"


@dataclass
class ClassProperty:
    """A class member with an optional visibility scope."""

    name: str
    type_info: str
    scope: str = ""

    def render(self, ctx: RenderContext) -> str:
        return f"{ctx.pad()}{_prefixed(self.scope)}{self.name} : {self.type_info};\n"


@dataclass
class Assignment:
    """A verbatim ``lhs = rhs;`` statement. The owner applies indentation."""

    lhs: str
    rhs: str

    def render(self, ctx: RenderContext) -> str:
        return f"{self.lhs} = {self.rhs};"


# ---------------------------------------------------------------------------
# Class members
# ---------------------------------------------------------------------------


@dataclass
class Constructor:
    """A class constructor: parameters plus field assignments.

    Parameters and assignments keep independent insertion orders.
    """

    parameters: ParameterCollection = field(default_factory=ParameterCollection)
    assignments: list[Assignment] = field(default_factory=list)

    def add_parameter(self, name: str, type_info: str) -> Parameter:
        return self.parameters.add(name, type_info)

    def add_assignment(self, lhs: str, rhs: str) -> Assignment:
        assignment = Assignment(lhs, rhs)
        self.assignments.append(assignment)
        return assignment

    def render(self, ctx: RenderContext) -> str:
        out = f"{ctx.pad()}constructor({self.parameters.render(ctx)}) {{\n"
        for assignment in self.assignments:
            out += f"{ctx.pad(2)}{assignment.render(ctx)}\n"
        out += f"{ctx.pad()}}}\n"
        return out


@dataclass
class ClassMethod:
    """A method rendered as an arrow-function property with an empty body.

    Statement bodies are not modelled; every method is a stub.
    """

    name: str
    return_type: str = ""
    scope: str = ""
    parameters: ParameterCollection = field(default_factory=ParameterCollection)

    def set_return_type(self, type_info: str) -> None:
        self.return_type = type_info

    def set_scope(self, scope: str) -> None:
        self.scope = scope

    def add_parameter(self, name: str, type_info: str) -> Parameter:
        return self.parameters.add(name, type_info)

    def render(self, ctx: RenderContext) -> str:
        returns = f" : {self.return_type}" if self.return_type else ""
        out = (
            f"{_prefixed(self.scope)}{self.name} = "
            f"({self.parameters.render(ctx)}){returns} => {{\n"
        )
        out += f"{ctx.pad()}}}\n"
        return out


# ---------------------------------------------------------------------------
# Top-level declarations
# ---------------------------------------------------------------------------


@dataclass
class Interface:
    """An interface declaration with typed properties."""

    name: str
    export: bool = False
    properties: list[Property] = field(default_factory=list)

    def add_property(self, name: str, type_info: str) -> Property:
        prop = Property(name, type_info)
        self.properties.append(prop)
        return prop

    def render(self, ctx: RenderContext) -> str:
        out = f"{_prefixed('export' if self.export else '')}interface {self.name} {{\n"
        for prop in self.properties:
            out += prop.render(ctx)
        out += "}\n"
        return out


@dataclass
class Class:
    """A class declaration.

    Renders members, then the constructor, then methods. A constructor is
    required: rendering without one raises ``MissingConstructorError``.
    Calling ``add_constructor`` again replaces the previous constructor.
    """

    name: str
    export: bool = False
    extends: str = ""
    properties: list[ClassProperty] = field(default_factory=list)
    constructor: Optional[Constructor] = None
    methods: list[ClassMethod] = field(default_factory=list)

    def set_extends(self, clause: str) -> None:
        """Set the inheritance clause, rendered verbatim (e.g. ``"extends Base"``)."""
        self.extends = clause

    def add_member(self, name: str, type_info: str, scope: str = "") -> ClassProperty:
        prop = ClassProperty(name, type_info, scope)
        self.properties.append(prop)
        return prop

    def add_constructor(
        self, builder: Optional[Callable[[Constructor], object]] = None
    ) -> Constructor:
        self.constructor = _configure(Constructor(), builder)
        return self.constructor

    def add_class_method(
        self, name: str, builder: Optional[Callable[[ClassMethod], object]] = None
    ) -> ClassMethod:
        method = _configure(ClassMethod(name), builder)
        self.methods.append(method)
        return method

    def render(self, ctx: RenderContext) -> str:
        if self.constructor is None:
            raise MissingConstructorError(self.name)

        extends = f" {self.extends} " if self.extends else ""
        out = f"{_prefixed('export' if self.export else '')}class {self.name}{extends} {{\n"
        for prop in self.properties:
            out += prop.render(ctx)
        out += self.constructor.render(ctx)
        for method in self.methods:
            out += f"{ctx.pad()}{method.render(ctx)}\n"
        out += "}\n"
        return out


@dataclass
class SourceFile:
    """One output file. Interfaces always render before classes."""

    path: str
    interfaces: list[Interface] = field(default_factory=list)
    classes: list[Class] = field(default_factory=list)

    def add_interface(
        self,
        name: str,
        export: bool = False,
        builder: Optional[Callable[[Interface], object]] = None,
    ) -> Interface:
        iface = _configure(Interface(name, export=export), builder)
        self.interfaces.append(iface)
        return iface

    def add_class(
        self,
        name: str,
        export: bool = False,
        builder: Optional[Callable[[Class], object]] = None,
        extends: str = "",
    ) -> Class:
        cls = _configure(Class(name, export=export, extends=extends), builder)
        self.classes.append(cls)
        return cls

    def render(self, ctx: RenderContext) -> str:
        out = ""
        for iface in self.interfaces:
            out += f"{iface.render(ctx)}\n"
        for cls in self.classes:
            out += f"{cls.render(ctx)}\n"
        return out
