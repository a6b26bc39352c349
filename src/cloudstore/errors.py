"""Structured error types for cloudstore."""

from __future__ import annotations


class CloudStoreError(Exception):
    """Base error for all cloudstore errors."""


class InvalidConfigurationError(CloudStoreError, ValueError):
    """Raised when a configuration value fails validation."""

    def __init__(self, field: str, reason: str) -> None:
        self.field = field
        self.reason = reason
        super().__init__(f"{field} {reason}")
