"""Declarative blueprints for the construct tree.

A blueprint is a JSON or YAML document listing source files, their
interfaces and classes. ``load_blueprint`` validates it into Pydantic v2
models and ``build_generator`` replays it through the builder API in
document order.

Example (YAML)::

    files:
      - path: models.ts
        interfaces:
          - name: User
            export: true
            properties:
              - {name: id, type: string}
        classes:
          - name: UserModel
            export: true
            members:
              - {name: id, type: string, scope: private}
            constructor:
              parameters:
                - {name: id, type: string}
              assignments:
                - {lhs: this.id, rhs: id}
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import BaseModel, Field, ValidationError

from tsgen.codegen import Class, Generator, SourceFile, new_generator
from tsgen.config import GeneratorOptions


class BlueprintError(Exception):
    """Raised when a blueprint cannot be read or validated."""


# ---------------------------------------------------------------------------
# Models
# ---------------------------------------------------------------------------

class ParameterSpec(BaseModel):
    name: str
    type: str


class PropertySpec(BaseModel):
    name: str
    type: str


class MemberSpec(BaseModel):
    """A class member; ``scope`` is a visibility modifier such as ``private``."""
    name: str
    type: str
    scope: str = ""


class AssignmentSpec(BaseModel):
    lhs: str
    rhs: str


class ConstructorSpec(BaseModel):
    parameters: list[ParameterSpec] = Field(default_factory=list)
    assignments: list[AssignmentSpec] = Field(default_factory=list)


class MethodSpec(BaseModel):
    name: str
    scope: str = ""
    return_type: str = ""
    parameters: list[ParameterSpec] = Field(default_factory=list)


class InterfaceSpec(BaseModel):
    name: str
    export: bool = False
    properties: list[PropertySpec] = Field(default_factory=list)


class ClassSpec(BaseModel):
    name: str
    export: bool = False
    extends: str = Field(default="", description="Verbatim inheritance clause, e.g. 'extends Base'")
    members: list[MemberSpec] = Field(default_factory=list)
    constructor: Optional[ConstructorSpec] = None
    methods: list[MethodSpec] = Field(default_factory=list)


class SourceFileSpec(BaseModel):
    path: str = Field(..., min_length=1)
    interfaces: list[InterfaceSpec] = Field(default_factory=list)
    classes: list[ClassSpec] = Field(default_factory=list)


class Blueprint(BaseModel):
    """Top-level blueprint document."""
    files: list[SourceFileSpec] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# Loading
# ---------------------------------------------------------------------------

_SUFFIXES = (".json", ".yaml", ".yml")


def parse_blueprint(data: Any) -> Blueprint:
    """Validate already-decoded data into a ``Blueprint``."""
    try:
        return Blueprint.model_validate(data)
    except ValidationError as exc:
        raise BlueprintError(f"Invalid blueprint: {exc}") from exc


def load_blueprint(path: str | Path) -> Blueprint:
    """Read and validate a ``.json``, ``.yaml`` or ``.yml`` blueprint file.

    Raises:
        BlueprintError: If the file is missing, has an unsupported
            extension, cannot be decoded, or fails validation.
    """
    file_path = Path(path)
    if not file_path.exists():
        raise BlueprintError(f"Blueprint file not found: {file_path}")
    if file_path.suffix.lower() not in _SUFFIXES:
        raise BlueprintError(f"Expected a .json, .yaml or .yml file, got: {file_path.suffix}")

    try:
        raw = file_path.read_text(encoding="utf-8")
        if file_path.suffix.lower() == ".json":
            data = json.loads(raw)
        else:
            data = yaml.safe_load(raw)
    except (OSError, UnicodeDecodeError) as exc:
        raise BlueprintError(f"Could not read {file_path}: {exc}") from exc
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise BlueprintError(f"Could not parse {file_path}: {exc}") from exc

    # An empty YAML document decodes to None.
    return parse_blueprint(data if data is not None else {})


# ---------------------------------------------------------------------------
# Building
# ---------------------------------------------------------------------------

def build_generator(
    blueprint: Blueprint,
    options: Optional[GeneratorOptions] = None,
) -> Generator:
    """Replay *blueprint* through the builder API and return the generator."""
    options = options or GeneratorOptions()
    generator = new_generator(options.out_dir, options)
    for file_spec in blueprint.files:
        _build_source_file(generator.add_source_file(file_spec.path), file_spec)
    return generator


def _build_source_file(source_file: SourceFile, spec: SourceFileSpec) -> None:
    for iface_spec in spec.interfaces:
        iface = source_file.add_interface(iface_spec.name, iface_spec.export)
        for prop in iface_spec.properties:
            iface.add_property(prop.name, prop.type)

    for class_spec in spec.classes:
        _build_class(
            source_file.add_class(class_spec.name, class_spec.export, extends=class_spec.extends),
            class_spec,
        )


def _build_class(cls: Class, spec: ClassSpec) -> None:
    for member in spec.members:
        cls.add_member(member.name, member.type, member.scope)

    if spec.constructor is not None:
        ctor = cls.add_constructor()
        for param in spec.constructor.parameters:
            ctor.add_parameter(param.name, param.type)
        for assignment in spec.constructor.assignments:
            ctor.add_assignment(assignment.lhs, assignment.rhs)

    for method_spec in spec.methods:
        method = cls.add_class_method(method_spec.name)
        method.set_scope(method_spec.scope)
        method.set_return_type(method_spec.return_type)
        for param in method_spec.parameters:
            method.add_parameter(param.name, param.type)
