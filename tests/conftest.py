"""Shared pytest fixtures for the tsgen test suite.

Provides reusable fixtures for:
- Render contexts and generators with known indent widths
- The reference ``test.ts`` tree (interface + class with constructor/method)
- Blueprint documents on disk (JSON and YAML)
"""

from __future__ import annotations

import json
import textwrap
from pathlib import Path
from typing import Any

import pytest

from tsgen.codegen import Class, ClassMethod, Constructor, Generator, Interface, RenderContext
from tsgen.config import GeneratorOptions


# ---------------------------------------------------------------------------
# Contexts & generators
# ---------------------------------------------------------------------------

@pytest.fixture
def ctx() -> RenderContext:
    """Render context with a two-space indent."""
    return RenderContext(indent=2)


@pytest.fixture
def generator(tmp_path: Path) -> Generator:
    """Empty generator with a two-space indent."""
    return Generator(tmp_path, GeneratorOptions(indent=2, out_dir=tmp_path))


@pytest.fixture
def reference_generator(generator: Generator) -> Generator:
    """The ``test.ts`` tree: one exported interface and one exported class."""
    sf = generator.add_source_file("test.ts")

    def build_interface(i: Interface) -> None:
        i.add_property("testProp", "string")
        i.add_property("anotherProp", "number")

    def build_constructor(cb: Constructor) -> None:
        cb.add_parameter("something", "string")
        cb.add_assignment("this.something", "something")

    def build_method(method: ClassMethod) -> None:
        method.set_return_type("string")
        method.set_scope("private")
        method.add_parameter("input", "string")
        method.add_parameter("anotherInput", "number")

    def build_class(c: Class) -> None:
        c.add_member("something", "string", "private")
        c.add_constructor(build_constructor)
        c.add_class_method("doSomething", build_method)

    sf.add_interface("TestInterface", True, build_interface)
    sf.add_class("MyClass", True, build_class)
    return generator


@pytest.fixture
def reference_output() -> str:
    """Exact rendering of ``reference_generator`` at indent width 2."""
    return (
        "\n"
        "// test.ts\n"
        "export interface TestInterface {\n"
        "  testProp: string;\n"
        "  anotherProp: number;\n"
        "}\n"
        "\n"
        "export class MyClass {\n"
        "  private something : string;\n"
        "  constructor(something: string) {\n"
        "    this.something = something;\n"
        "  }\n"
        "  private doSomething = (input: string, anotherInput: number) : string => {\n"
        "  }\n"
        "\n"
        "}\n"
        "\n"
    )


# ---------------------------------------------------------------------------
# Blueprints
# ---------------------------------------------------------------------------

@pytest.fixture
def blueprint_data() -> dict[str, Any]:
    """Blueprint document equivalent to ``reference_generator``."""
    return {
        "files": [
            {
                "path": "test.ts",
                "interfaces": [
                    {
                        "name": "TestInterface",
                        "export": True,
                        "properties": [
                            {"name": "testProp", "type": "string"},
                            {"name": "anotherProp", "type": "number"},
                        ],
                    }
                ],
                "classes": [
                    {
                        "name": "MyClass",
                        "export": True,
                        "members": [
                            {"name": "something", "type": "string", "scope": "private"}
                        ],
                        "constructor": {
                            "parameters": [{"name": "something", "type": "string"}],
                            "assignments": [{"lhs": "this.something", "rhs": "something"}],
                        },
                        "methods": [
                            {
                                "name": "doSomething",
                                "scope": "private",
                                "return_type": "string",
                                "parameters": [
                                    {"name": "input", "type": "string"},
                                    {"name": "anotherInput", "type": "number"},
                                ],
                            }
                        ],
                    }
                ],
            }
        ]
    }


@pytest.fixture
def blueprint_json_file(tmp_path: Path, blueprint_data: dict[str, Any]) -> Path:
    path = tmp_path / "blueprint.json"
    path.write_text(json.dumps(blueprint_data, indent=2), encoding="utf-8")
    return path


@pytest.fixture
def blueprint_yaml_file(tmp_path: Path) -> Path:
    path = tmp_path / "blueprint.yaml"
    path.write_text(
        textwrap.dedent(
            """\
            files:
              - path: test.ts
                interfaces:
                  - name: TestInterface
                    export: true
                    properties:
                      - {name: testProp, type: string}
                      - {name: anotherProp, type: number}
                classes:
                  - name: MyClass
                    export: true
                    members:
                      - {name: something, type: string, scope: private}
                    constructor:
                      parameters:
                        - {name: something, type: string}
                      assignments:
                        - {lhs: this.something, rhs: something}
                    methods:
                      - name: doSomething
                        scope: private
                        return_type: string
                        parameters:
                          - {name: input, type: string}
                          - {name: anotherInput, type: number}
            """
        ),
        encoding="utf-8",
    )
    return path
