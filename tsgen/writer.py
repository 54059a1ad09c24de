"""Persistence for rendered source files.

``SourceWriter`` takes a finished ``Generator`` and writes each source
file's body to disk under an output directory. The construct tree itself
never touches the filesystem.
"""

from __future__ import annotations

import asyncio
from pathlib import Path

from tsgen.codegen.generator import Generator


class WriterError(Exception):
    """Raised when a source file path cannot be written safely."""


class SourceWriter:
    """Writes a generator's source files beneath *out_dir*."""

    def __init__(self, out_dir: str | Path) -> None:
        self.out_dir = Path(out_dir)

    def plan(self, generator: Generator) -> dict[str, str]:
        """Return ``{path: content}`` without writing anything.

        Files sharing a path are rendered independently and their bodies
        concatenated in insertion order.
        """
        ctx = generator.context
        planned: dict[str, str] = {}
        for source_file in generator.source_files:
            planned[source_file.path] = planned.get(source_file.path, "") + source_file.render(ctx)
        return planned

    async def write(self, generator: Generator) -> list[Path]:
        """Render and write every source file.

        Returns:
            Written file paths, in first-seen order.

        Raises:
            WriterError: If a path is empty, absolute, names *out_dir* itself,
                escapes *out_dir*, lies inside another target file, or the
                write itself fails.
        """
        planned = self.plan(generator)
        targets = {path: self._resolve(path) for path in planned}
        _check_collisions(targets)

        written: list[Path] = []
        for path, content in planned.items():
            out = targets[path]
            try:
                await asyncio.to_thread(_write_file, out, content)
            except OSError as exc:
                raise WriterError(f"Could not write {path}: {exc}") from exc
            written.append(out)
        return written

    def _resolve(self, path: str) -> Path:
        if not path:
            raise WriterError("Source file path is empty")
        rel = Path(path)
        if rel.is_absolute():
            raise WriterError(f"Source file path must be relative: {path}")

        base = self.out_dir.resolve()
        target = (base / rel).resolve()
        if target == base:
            raise WriterError(f"Source file path names the output directory itself: {path}")
        if not target.is_relative_to(base):
            raise WriterError(f"Source file path escapes output directory: {path}")
        return target


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _check_collisions(targets: dict[str, Path]) -> None:
    """Reject a target that would need another target file as its directory."""
    files = set(targets.values())
    for path, target in targets.items():
        for parent in target.parents:
            if parent in files:
                raise WriterError(f"Source file path {path} is nested inside another source file")


def _write_file(path: Path, content: str) -> None:
    """Synchronous helper: create parent dirs and write content."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
