"""sampling-reset error hierarchy and exceptions."""

from __future__ import annotations


class SamplingResetError(Exception):
    """Base exception for all sampling-reset errors."""

    def __init__(self, message: str, details: dict = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            details_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            return f"{self.message} ({details_str})"
        return self.message


class ConfigError(SamplingResetError):
    """Raised when configuration is invalid or cannot be read."""
    pass


class BindError(SamplingResetError):
    """Raised when the listening socket cannot be bound."""
    pass
