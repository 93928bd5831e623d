"""
Cryptogram Report Generator
===========================

Generates JSON reports from cryptograms and round statistics. The
report wraps the model dump with the tool name and a generation
timestamp.
"""

from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from pydantic import BaseModel

from cryptogram import __tool_name__, __version__


class CryptogramReportGenerator:
    """Serialises result models to JSON.

    Usage::

        reporter = CryptogramReportGenerator()
        print(reporter.to_json(puzzle))
        reporter.generate_json(puzzle, Path("puzzle.json"))
    """

    def build_report(self, result: BaseModel) -> dict[str, Any]:
        """Wrap *result* with report metadata."""
        return {
            "tool": __tool_name__,
            "version": __version__,
            "generated_at": datetime.now(timezone.utc).isoformat(),
            "kind": type(result).__name__,
            "result": result.model_dump(mode="json"),
        }

    def to_json(self, result: BaseModel, *, indent: int = 2) -> str:
        return json.dumps(
            self.build_report(result),
            indent=indent,
            ensure_ascii=False,
            default=str,
        )

    def generate_json(self, result: BaseModel, output_path: Path) -> Path:
        """Write the JSON report to *output_path*, creating parent directories.

        Returns:
            The resolved path written.
        """
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(self.to_json(result), encoding="utf-8")
        return output_path.resolve()
