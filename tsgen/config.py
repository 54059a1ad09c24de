"""tsgen configuration.

Typed options for a ``Generator``. Uses a Pydantic v2 model so values are
validated at construction time and can be serialised to/from JSON or read
from environment variables without boiler-plate.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class GeneratorOptions(BaseModel):
    """Options shared by every construct in one generator tree.

    The model is frozen: the indent width is fixed once the generator is
    created and stays constant for the whole tree.
    """

    model_config = ConfigDict(frozen=True)

    indent: int = Field(default=2, ge=0, description="Spaces per nesting level")
    out_dir: Path = Field(default=Path("./generated"))

    # ------------------------------------------------------------------
    # Serialisation helpers
    # ------------------------------------------------------------------

    def save(self, path: Path) -> Path:
        """Persist the options to a JSON file.

        Returns:
            The path where the file was written.
        """
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(self.model_dump_json(indent=2), encoding="utf-8")
        return target

    @classmethod
    def load(cls, path: Path) -> "GeneratorOptions":
        """Load previously-saved options from JSON."""
        raw = Path(path).read_text(encoding="utf-8")
        return cls.model_validate_json(raw)

    @classmethod
    def from_env(cls) -> "GeneratorOptions":
        """Build options from environment variables.

        Recognised variables (all optional): TSGEN_INDENT, TSGEN_OUT_DIR.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("TSGEN_INDENT"):
            kwargs["indent"] = int(os.environ["TSGEN_INDENT"])
        if os.environ.get("TSGEN_OUT_DIR"):
            kwargs["out_dir"] = Path(os.environ["TSGEN_OUT_DIR"])
        return cls(**kwargs)
