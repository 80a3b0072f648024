"""Schema-driven structural check of a manifest.

Only two schema keywords matter here:

- ``required``: names that must be keys of the current document mapping.
- ``properties``: per-key child schemas, descended into only when the
  document has that key.

Everything else in the schema is ignored. The walk never mutates either
tree, so one schema can be shared by any number of threads.
"""

from typing import Any, List

from manifestcheck.config.constants import DEFAULT_MAX_DEPTH
from manifestcheck.exceptions import DepthLimitExceeded


def _has_key(node: Any, name: str) -> bool:
    return isinstance(node, dict) and name in node


def _walk(node: Any, schema: Any, errors: List[str], depth: int, max_depth: int, sort_properties: bool) -> None:
    if depth > max_depth:
        raise DepthLimitExceeded(f"schema nesting exceeds max depth {max_depth}")
    if not isinstance(schema, dict):
        return

    required = schema.get("required")
    if isinstance(required, list):
        for name in required:
            if isinstance(name, str) and not _has_key(node, name):
                errors.append(f"Missing required field: {name}")

    properties = schema.get("properties")
    if isinstance(properties, dict):
        keys = sorted(properties) if sort_properties else properties
        for key in keys:
            if _has_key(node, key):
                _walk(node[key], properties[key], errors, depth + 1, max_depth, sort_properties)


def validate(
    document: Any,
    schema: Any,
    *,
    max_depth: int = DEFAULT_MAX_DEPTH,
    sort_properties: bool = False,
) -> List[str]:
    """Return the ordered error messages for ``document`` against ``schema``.

    Missing required fields of a level are reported before any nested
    result; nested results follow ``properties`` order (sorted when
    ``sort_properties`` is set).

    Raises:
        DepthLimitExceeded: when descent goes deeper than ``max_depth``.
    """
    errors: List[str] = []
    _walk(document, schema, errors, 0, max_depth, sort_properties)
    return errors
