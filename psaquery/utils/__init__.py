"""Utility modules."""

from .http import HTTPClient, error_for_status

__all__ = ["HTTPClient", "error_for_status"]
