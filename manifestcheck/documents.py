"""Loading manifests from disk."""

from typing import Any, Optional, Tuple

import yaml

from manifestcheck.config.constants import API_VERSION_FIELD, KIND_FIELD
from manifestcheck.exceptions import DocumentParseError
from manifestcheck.utils import get_logger, load_file

logger = get_logger(__name__)


def load_document(path: str) -> Any:
    """Read and parse a single-document YAML file.

    OSError from reading propagates unchanged; YAML errors, including a
    multi-document stream, become DocumentParseError.
    """
    content = load_file(path)
    try:
        return yaml.safe_load(content)
    except yaml.YAMLError as e:
        logger.debug("yaml error path=%s error=%s", path, e)
        raise DocumentParseError(path) from e


def discriminators(document: Any) -> Tuple[Optional[str], Optional[str]]:
    """Return (apiVersion, kind); a value that is absent or not a string is None."""
    if not isinstance(document, dict):
        return None, None
    api_version = document.get(API_VERSION_FIELD)
    kind = document.get(KIND_FIELD)
    return (
        api_version if isinstance(api_version, str) else None,
        kind if isinstance(kind, str) else None,
    )
