"""Discovery of manifest files from a file or directory path."""

import os
from typing import List

from manifestcheck.config.constants import DOCUMENT_EXTENSION
from manifestcheck.exceptions import InvalidPath
from manifestcheck.utils import get_logger

logger = get_logger(__name__)


def list_documents(path: str, extension: str = DOCUMENT_EXTENSION) -> List[str]:
    """Return the manifest files named by ``path``.

    A regular file is returned as-is whatever its extension. For a directory,
    direct entries whose extension equals ``extension`` are returned in listing
    order; subdirectories are never entered. A directory that cannot be
    listed raises InvalidPath.
    """
    if os.path.isfile(path):
        return [path]

    if os.path.isdir(path):
        files: List[str] = []
        try:
            with os.scandir(path) as entries:
                for entry in entries:
                    if os.path.splitext(entry.name)[1] == extension and entry.is_file():
                        files.append(os.path.join(path, entry.name))
        except OSError as e:
            raise InvalidPath(f"Cannot list directory: {path} ({e})") from e
        logger.debug("located files=%d dir=%s", len(files), path)
        return files

    raise InvalidPath(f"Invalid path: {path}")
