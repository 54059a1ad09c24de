"""Root of a construct tree.

A ``Generator`` owns the source files and the options that fix the indent
width. Rendering concatenates each file's body behind a path comment.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from tsgen.config import GeneratorOptions

from .constructs import RenderContext, SourceFile


class Generator:
    """Builds and renders a set of TypeScript source files.

    Attributes:
        out_dir: Directory the persistence collaborator writes into.
        options: Frozen options; ``options.indent`` is shared by every
            construct in the tree.
    """

    def __init__(self, out_dir: str | Path, options: Optional[GeneratorOptions] = None) -> None:
        self.options = options or GeneratorOptions()
        self.out_dir = Path(out_dir)
        self._source_files: list[SourceFile] = []

    @property
    def context(self) -> RenderContext:
        return RenderContext(indent=self.options.indent)

    @property
    def source_files(self) -> list[SourceFile]:
        """Source files in insertion order (a copy)."""
        return list(self._source_files)

    def add_source_file(self, path: str) -> SourceFile:
        """Append a new source file. Duplicate paths are kept and rendered separately."""
        source_file = SourceFile(path)
        self._source_files.append(source_file)
        return source_file

    def render(self) -> str:
        ctx = self.context
        out = ""
        for source_file in self._source_files:
            out += f"\n// {source_file.path}\n"
            out += source_file.render(ctx)
        return out

    def generate(self) -> None:
        """Placeholder for persistence; intentionally does nothing.

        Use ``render()`` and persist the text yourself, or hand the generator
        to ``tsgen.writer.SourceWriter``.
        """
        return None

    def __str__(self) -> str:
        return self.render()


def new_generator(out_dir: str | Path, options: Optional[GeneratorOptions] = None) -> Generator:
    """Create a ``Generator`` writing to *out_dir* with the given options."""
    return Generator(out_dir, options)
