"""Pydantic models describing per-file validation outcomes."""

from __future__ import annotations

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class BaseModelWithConfig(BaseModel):
    """Base model forbidding silent data loss."""

    model_config = ConfigDict(populate_by_name=True, extra="forbid")


class ReportStatus(str, Enum):
    VALID = "valid"
    INVALID = "invalid"
    SKIPPED = "skipped"
    PARSE_ERROR = "parse_error"
    FAILED = "failed"


class FileReport(BaseModelWithConfig):
    """Outcome of one file's validation unit."""

    path: str
    status: ReportStatus
    api_version: Optional[str] = Field(default=None, description="Top-level apiVersion, when a string")
    kind: Optional[str] = Field(default=None, description="Top-level kind, when a string")
    errors: List[str] = Field(default_factory=list)
    detail: Optional[str] = Field(default=None, description="Reason for skipped/parse_error/failed outcomes")

    @property
    def validated(self) -> bool:
        return self.status in (ReportStatus.VALID, ReportStatus.INVALID)


class RunSummary(BaseModelWithConfig):
    files: int = 0
    valid: int = 0
    invalid: int = 0
    skipped: int = 0
    parse_errors: int = 0
    failed: int = 0

    @classmethod
    def from_reports(cls, reports: List[FileReport]) -> "RunSummary":
        counts = {status: 0 for status in ReportStatus}
        for report in reports:
            counts[report.status] += 1
        return cls(
            files=len(reports),
            valid=counts[ReportStatus.VALID],
            invalid=counts[ReportStatus.INVALID],
            skipped=counts[ReportStatus.SKIPPED],
            parse_errors=counts[ReportStatus.PARSE_ERROR],
            failed=counts[ReportStatus.FAILED],
        )
