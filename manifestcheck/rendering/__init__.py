"""Report rendering."""

from .text import emit_report, render_report

__all__ = ["emit_report", "render_report"]
