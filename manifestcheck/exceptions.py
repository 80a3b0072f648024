"""Custom exceptions for manifestcheck."""


class ManifestCheckError(Exception):
    """Base exception for manifestcheck errors."""
    pass


class ConfigError(ManifestCheckError):
    """Raised when the manifestcheck configuration is invalid."""
    pass


class SchemaUnavailable(ManifestCheckError):
    """Raised when the reference schema can be neither loaded from cache nor fetched."""
    pass


class InvalidPath(ManifestCheckError):
    """Raised when the input path is neither a file nor a directory."""
    pass


class DocumentParseError(ManifestCheckError):
    """Raised when a manifest file does not parse as YAML."""

    def __init__(self, path: str):
        super().__init__(f"Failed to parse document in file: {path}")
        self.path = path


class DepthLimitExceeded(ManifestCheckError):
    """Raised when schema-driven recursion goes deeper than the configured cap."""
    pass
