"""
Warning / error boundary between the arrangement engine and whoever hosts it.

The engine never shows anything itself: it calls ``warning`` or ``error`` on the
sink it was given and keeps going (or stops) on its own. The HTTP layer uses
``ReportCollector`` to turn those calls into report items.
"""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional

from loguru import logger

LENGTH_MISMATCH = "length_mismatch"
NO_ROWS_RECOGNIZED = "no_rows_recognized"


class SignalSink:
    """Base sink: logs and drops the signal."""

    def warning(self, issue: str, counts: Optional[Mapping[str, int]] = None) -> None:
        logger.warning(f"[Signals] {issue}: {dict(counts or {})}")

    def error(self, issue: str) -> None:
        logger.error(f"[Signals] {issue}")


class ReportCollector(SignalSink):
    """Collects signals as report items (row / column / issue / value / action)."""

    def __init__(self) -> None:
        self.warnings: List[Dict[str, Any]] = []
        self.errors: List[Dict[str, Any]] = []

    def warning(self, issue: str, counts: Optional[Mapping[str, int]] = None) -> None:
        super().warning(issue, counts)
        counts = dict(counts or {})
        rows_used = counts.pop("rows_used", None)
        self.warnings.append({
            "row": None,
            "column": None,
            "issue": issue,
            "value": ",".join(f"{k}={v}" for k, v in counts.items()) or None,
            "action": f"truncated_to_{rows_used}" if rows_used is not None else "none",
        })

    def error(self, issue: str) -> None:
        super().error(issue)
        self.errors.append({
            "row": None,
            "column": None,
            "issue": issue,
            "value": None,
            "action": "input_unchanged",
        })
