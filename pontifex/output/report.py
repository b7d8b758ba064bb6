"""
Pontifex Report Generator
==========================

Writes machine-readable JSON reports of cipher runs.
"""

from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from pontifex import __version__
from pontifex.core.models import CipherResult


class PontifexReportGenerator:
    """Generates JSON reports from :class:`CipherResult` objects.

    Usage::

        generator = PontifexReportGenerator()
        generator.generate_json(result, Path("report.json"))
    """

    def build(self, result: CipherResult) -> dict[str, Any]:
        """Report contents as a plain dictionary."""
        return {
            "report_metadata": {
                "generated_at": datetime.now(timezone.utc).isoformat(),
                "tool": "pontifex",
                "version": __version__,
            },
            "result": result.model_dump(mode="json"),
        }

    def generate_json(self, result: CipherResult, output_path: Path) -> Path:
        """Write the report for *result* to *output_path*.

        Returns:
            Path to the generated JSON file.
        """
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(
            json.dumps(self.build(result), indent=2, ensure_ascii=False, default=str),
            encoding="utf-8",
        )
        return output_path
