"""
Custom exceptions for the Autocrop engine.
Provides a single hierarchy that the engine raises and the API maps to responses.
"""

from typing import Dict, Optional


class AutocropException(Exception):
    """Base exception for Autocrop."""

    def __init__(self, message: str, status_code: int = 500, details: Optional[Dict] = None):
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(message)


class InputError(AutocropException):
    """Exception raised when the image batch cannot be processed."""

    def __init__(self, reason: str, details: Optional[Dict] = None):
        super().__init__(
            message=f"Invalid input: {reason}",
            status_code=400,
            details={"reason": reason, **(details or {})},
        )


class NamingError(AutocropException):
    """Exception raised when an output file name cannot be derived."""

    def __init__(self, path: str, reason: str = "Could not retrieve original file name."):
        super().__init__(
            message=f"Naming failed for {path!r}: {reason}",
            status_code=400,
            details={"path": path, "reason": reason},
        )


class IoError(AutocropException):
    """Exception raised when writing an output file fails."""

    def __init__(self, path: str, reason: str):
        super().__init__(
            message=f"Failed to write {path}: {reason}",
            status_code=500,
            details={"path": path, "reason": reason},
        )


class EncodingError(IoError):
    """Exception raised when a raster cannot be encoded to PNG."""


class ConfigurationError(AutocropException):
    """Exception raised when a crop configuration is invalid."""

    def __init__(self, config_key: str, reason: str):
        super().__init__(
            message=f"Invalid configuration for {config_key}: {reason}",
            status_code=400,
            details={"config_key": config_key, "reason": reason},
        )
