"""tsgen command line.

Renders a blueprint to stdout, or writes each source file to disk.

Usage::

    tsgen blueprint.yaml
    tsgen blueprint.yaml --indent 4
    tsgen blueprint.yaml --output ./src/generated --write
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path
from typing import Optional, Sequence

from pydantic import ValidationError

from tsgen.blueprint import BlueprintError, build_generator, load_blueprint
from tsgen.codegen import CodegenError
from tsgen.config import GeneratorOptions
from tsgen.utils import print_error, print_success, print_summary_table, print_warning
from tsgen.writer import SourceWriter, WriterError


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tsgen",
        description="tsgen -- render TypeScript interfaces and classes from a blueprint",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  tsgen blueprint.yaml\n"
            "  tsgen blueprint.json --indent 4\n"
            "  tsgen blueprint.yaml -o ./src/generated --write\n"
        ),
    )
    parser.add_argument(
        "blueprint",
        help="Path to a .json, .yaml or .yml blueprint",
    )
    parser.add_argument(
        "--indent",
        type=int,
        default=None,
        help="Spaces per nesting level (default: $TSGEN_INDENT or 2)",
    )
    parser.add_argument(
        "--output", "-o",
        default=None,
        help="Output directory for --write (default: $TSGEN_OUT_DIR or ./generated)",
    )
    parser.add_argument(
        "--write",
        action="store_true",
        help="Write files under the output directory instead of printing",
    )
    return parser


def _resolve_options(args: argparse.Namespace) -> GeneratorOptions:
    base = GeneratorOptions.from_env()
    overrides: dict[str, object] = {}
    if args.indent is not None:
        overrides["indent"] = args.indent
    if args.output is not None:
        overrides["out_dir"] = Path(args.output)
    if not overrides:
        return base
    return GeneratorOptions(**{**base.model_dump(), **overrides})


def main(argv: Optional[Sequence[str]] = None) -> int:
    """CLI entry point for ``tsgen`` and ``python -m tsgen``."""
    args = _build_parser().parse_args(argv)

    try:
        options = _resolve_options(args)
    except (ValidationError, ValueError) as exc:
        print_error(f"Error: invalid options: {exc}")
        return 1

    try:
        blueprint = load_blueprint(args.blueprint)
        generator = build_generator(blueprint, options)
        if not blueprint.files:
            print_warning(f"Blueprint declares no files: {args.blueprint}")

        if not args.write:
            sys.stdout.write(generator.render())
            return 0

        written = asyncio.run(SourceWriter(options.out_dir).write(generator))
    except (BlueprintError, CodegenError, WriterError) as exc:
        print_error(f"Error: {exc}")
        return 1

    print_summary_table(
        {str(path): f"{path.stat().st_size} bytes" for path in written},
        title="Written files",
    )
    print_success(f"Wrote {len(written)} file(s) to {options.out_dir}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
