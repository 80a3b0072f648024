"""Networking utilities for fetching the reference schema."""

from .http import http_session

__all__ = ["http_session"]
