"""Aggregation and rendering of check results."""

from __future__ import annotations

import json
from typing import Iterable, List, Sequence

from .models import CheckReport, Classification, UsageStatus

FORMATS = ("text", "json")


class Reporter:
    """Partitions classifications and renders them for the console."""

    def partition(
        self,
        classifications: Iterable[Classification],
        *,
        catalog: str,
        files_scanned: int,
        search_roots: Sequence[str],
    ) -> CheckReport:
        """Group classifications by status, keeping catalog order in each group."""
        report = CheckReport(
            catalog=catalog,
            declared=[],
            files_scanned=files_scanned,
            search_roots=list(search_roots),
        )
        for item in classifications:
            report.declared.append(item.message_id)
            if item.status is UsageStatus.USED:
                report.used.append(item.message_id)
            elif item.status is UsageStatus.DYNAMIC:
                report.dynamic.append(item)
            else:
                report.unused.append(item.message_id)
        return report

    def render(self, report: CheckReport, fmt: str = "text") -> str:
        if fmt == "json":
            return render_json(report)
        if fmt == "text":
            return render_text(report)
        raise ValueError(f"Unknown report format: {fmt}")


def render_text(report: CheckReport) -> str:
    lines: List[str] = [
        f"Found {len(report.declared)} message IDs in {report.catalog}",
        "",
        f"Searching in {report.files_scanned} files under: {', '.join(report.search_roots)}",
        "",
    ]

    if report.dynamic:
        lines.append(
            f"~ {len(report.dynamic)} ID(s) likely built dynamically (template literals):"
        )
        lines.append("")
        for item in report.dynamic:
            lines.append(f"  {item.message_id}")
            lines.append(f"    → {item.location}")
        lines.append("")

    if report.ok:
        lines.append("✓ All remaining message IDs are used.")
    else:
        lines.append(f"✗ {len(report.unused)} unused message ID(s):")
        lines.append("")
        lines.extend(f"  {message_id}" for message_id in report.unused)

    return "\n".join(lines) + "\n"


def render_json(report: CheckReport) -> str:
    payload = {
        "catalog": report.catalog,
        "declared": len(report.declared),
        "files_scanned": report.files_scanned,
        "search_roots": report.search_roots,
        "used": report.used,
        "dynamic": [
            {
                "id": item.message_id,
                "path": item.location.path if item.location else None,
                "line": item.location.line if item.location else None,
            }
            for item in report.dynamic
        ],
        "unused": report.unused,
        "ok": report.ok,
    }
    return json.dumps(payload, indent=2, sort_keys=True, ensure_ascii=False) + "\n"


__all__ = ["FORMATS", "Reporter", "render_json", "render_text"]
