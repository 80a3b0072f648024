"""Reference schema acquisition with a single flat local cache artifact."""

from __future__ import annotations

import json
import time
from pathlib import Path
from typing import Any, Callable, Dict, Optional, Protocol

import requests

from manifestcheck.config import Settings
from manifestcheck.exceptions import SchemaUnavailable
from manifestcheck.net import http_session
from manifestcheck.utils import get_logger

logger = get_logger(__name__)


class SchemaCache(Protocol):
    """Storage port for the cached schema document."""

    def load(self) -> Optional[Dict[str, Any]]:
        ...

    def save(self, schema: Dict[str, Any]) -> None:
        ...


class FileSchemaCache:
    """Cache artifact stored as compact JSON at a fixed path.

    The artifact is read as-is on every run: no integrity or staleness
    check. Deleting the file forces a re-fetch.
    """

    def __init__(self, path: str | Path):
        self.path = Path(path)

    def load(self) -> Optional[Dict[str, Any]]:
        if not self.path.exists():
            return None
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            raise SchemaUnavailable(
                f"Schema cache {self.path} is unreadable ({e}); delete it to force a re-fetch"
            ) from e
        return _ensure_object(data, str(self.path))

    def save(self, schema: Dict[str, Any]) -> None:
        self.path.write_text(
            json.dumps(schema, ensure_ascii=False, separators=(",", ":")),
            encoding="utf-8",
        )


def _ensure_object(data: Any, origin: str) -> Dict[str, Any]:
    if not isinstance(data, dict):
        raise SchemaUnavailable(f"Schema from {origin} is not a JSON object")
    return data


class SchemaStore:
    """Hands back the reference schema, from the cache if present, else the network."""

    def __init__(
        self,
        url: str,
        cache: SchemaCache,
        *,
        timeout: Optional[float] = None,
        session_factory: Callable[[], requests.Session] = http_session,
    ):
        self.url = url
        self.cache = cache
        self.timeout = timeout
        self.session_factory = session_factory

    @classmethod
    def from_settings(cls, settings: Settings) -> "SchemaStore":
        return cls(
            settings.schema_url,
            FileSchemaCache(settings.cache_file),
            timeout=settings.fetch_timeout,
        )

    def get_schema(self) -> Dict[str, Any]:
        cached = self.cache.load()
        if cached is not None:
            logger.info("schema loaded from cache")
            return cached

        schema = self._fetch()
        try:
            self.cache.save(schema)
        except OSError as e:
            logger.warning("schema cache write failed: %s", e)
        return schema

    def _fetch(self) -> Dict[str, Any]:
        t0 = time.monotonic()
        try:
            with self.session_factory() as session:
                response = session.get(self.url, timeout=self.timeout)
                response.raise_for_status()
        except requests.RequestException as e:
            raise SchemaUnavailable(f"Failed to fetch schema from {self.url}: {e}") from e
        try:
            data = response.json()
        except ValueError as e:
            raise SchemaUnavailable(f"Schema from {self.url} is not valid JSON: {e}") from e
        logger.info("schema fetched url=%s took_ms=%d", self.url, int((time.monotonic() - t0) * 1000))
        return _ensure_object(data, self.url)