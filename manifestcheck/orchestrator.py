import time
import uuid
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Any, Callable, Dict, List, Optional

from manifestcheck import validator
from manifestcheck.config import Settings, load_settings
from manifestcheck.config.constants import EXIT_OK, EXIT_SETUP_FAILURE
from manifestcheck.documents import discriminators, load_document
from manifestcheck.exceptions import DocumentParseError, ManifestCheckError
from manifestcheck.locator import list_documents
from manifestcheck.models import FileReport, ReportStatus, RunSummary
from manifestcheck.rendering import emit_report
from manifestcheck.schema_store import SchemaStore
from manifestcheck.utils import get_logger

logger = get_logger(__name__)


def validate_file(path: str, schema: Dict[str, Any], settings: Settings) -> FileReport:
    """Load one manifest and check it against the shared schema."""
    try:
        document = load_document(path)
    except DocumentParseError as e:
        return FileReport(path=path, status=ReportStatus.PARSE_ERROR, detail=str(e))
    except (OSError, UnicodeDecodeError) as e:
        return FileReport(path=path, status=ReportStatus.FAILED, detail=f"Failed to read document file: {path} ({e})")

    api_version, kind = discriminators(document)
    if api_version is None or kind is None:
        return FileReport(path=path, status=ReportStatus.SKIPPED, api_version=api_version, kind=kind)

    errors = validator.validate(
        document,
        schema,
        max_depth=settings.max_depth,
        sort_properties=settings.sort_properties,
    )
    return FileReport(
        path=path,
        status=ReportStatus.INVALID if errors else ReportStatus.VALID,
        api_version=api_version,
        kind=kind,
        errors=errors,
    )


def validate_files(
    files: List[str],
    schema: Dict[str, Any],
    settings: Settings,
    emit: Callable[[FileReport], None] = emit_report,
) -> List[FileReport]:
    """Validate every file concurrently; each report is emitted as soon as its unit finishes.

    A fault escaping one unit is turned into a FAILED report for that file only.
    """
    if not files:
        return []

    reports: List[FileReport] = []
    workers = settings.max_workers or len(files)
    with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="manifestcheck") as executor:
        futures = {executor.submit(validate_file, f, schema, settings): f for f in files}
        for future in as_completed(futures):
            path = futures[future]
            try:
                report = future.result()
            except Exception as e:
                logger.debug("unit failed path=%s", path, exc_info=True)
                report = FileReport(
                    path=path,
                    status=ReportStatus.FAILED,
                    detail=f"Unexpected error while validating {path}: {e}",
                )
            emit(report)
            reports.append(report)
    return reports


def run(path: str, settings: Optional[Settings] = None, store: Optional[SchemaStore] = None) -> int:
    """Validate the manifests under ``path``; returns the process exit status."""
    run_id = uuid.uuid4().hex[:8]
    logger.info("=== run start id=%s ===", run_id)
    try:
        settings = settings or load_settings()
        store = store or SchemaStore.from_settings(settings)

        t0 = time.monotonic()
        schema = store.get_schema()
        files = list_documents(path, settings.document_extension)
        logger.info("setup done files=%d took_ms=%d", len(files), int((time.monotonic() - t0) * 1000))
    except ManifestCheckError as e:
        logger.error("%s", e)
        logger.info("=== run end id=%s (setup failed) ===", run_id)
        return EXIT_SETUP_FAILURE

    t1 = time.monotonic()
    reports = validate_files(files, schema, settings)
    summary = RunSummary.from_reports(reports)
    logger.info(
        "files=%d valid=%d invalid=%d skipped=%d parse_errors=%d failed=%d took_ms=%d",
        summary.files,
        summary.valid,
        summary.invalid,
        summary.skipped,
        summary.parse_errors,
        summary.failed,
        int((time.monotonic() - t1) * 1000),
    )
    logger.info("=== run end id=%s ===", run_id)
    return EXIT_OK
