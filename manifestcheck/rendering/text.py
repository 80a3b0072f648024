"""Render file reports to line-oriented console text."""

import sys
import threading
from typing import List

from manifestcheck.models import FileReport, ReportStatus
from manifestcheck.utils import get_logger

logger = get_logger(__name__)

_STDOUT_LOCK = threading.Lock()


def render_report(report: FileReport) -> str:
    """Render a validated file's report block.

    Args:
        report: Report with status VALID or INVALID

    Returns:
        Newline-terminated text block

    Raises:
        ValueError: If the report was never validated
    """
    if not report.validated:
        raise ValueError(f"Cannot render report with status {report.status.value}")

    lines: List[str] = [
        f"File: {report.path}",
        f"  apiVersion: {report.api_version}",
        f"  kind: {report.kind}",
    ]
    if report.errors:
        lines.append("  Validation errors:")
        for err in report.errors:
            lines.append(f"    - {err}")
    else:
        lines.append("  Validation successful!")
    return "\n".join(lines) + "\n"


def emit_report(report: FileReport) -> None:
    """Write one report: validated blocks to stdout in a single write, notices to the log."""
    if report.status == ReportStatus.SKIPPED:
        logger.warning("File: %s: Missing `apiVersion` or `kind`. Skipping validation.", report.path)
        return
    if report.status in (ReportStatus.PARSE_ERROR, ReportStatus.FAILED):
        logger.error("%s", report.detail or f"Failed to process file: {report.path}")
        return

    text = render_report(report)
    with _STDOUT_LOCK:
        sys.stdout.write(text)
        sys.stdout.flush()
