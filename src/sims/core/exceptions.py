"""
Custom exception classes for the SimS content package.

The bundle itself is trusted once constructed; these exceptions belong to the
layers around it that read content from outside the process (files,
environment) or look things up in it by name.
"""

from typing import Any, Dict, Optional


class SimsException(Exception):
    """Base exception class for all sims exceptions."""

    pass


class ContentSourceNotFoundError(SimsException):
    """Raised when a content file does not exist."""

    pass


class ContentFormatError(SimsException):
    """Raised when a content file cannot be parsed or has an unsupported suffix."""

    pass


class ContentValidationError(SimsException):
    """
    Raised when content does not conform to the bundle schema.

    Carries the pydantic error locations so callers can report which entry
    was malformed.

    Example:
        >>> raise ContentValidationError(
        ...     reason="Invalid content in site.yaml",
        ...     details={"navigation.1.id": "Value error, duplicate navigation ids: [1]"}
        ... )
    """

    def __init__(self, reason: str, details: Optional[Dict[str, Any]] = None):
        self.reason = reason
        self.details = details or {}
        message = f"{reason}"
        if self.details:
            message += f" - {self.details}"
        super().__init__(message)


class UnknownSectionError(SimsException, KeyError):
    """Raised when a section or navigation entry is looked up by a name/id that does not exist."""

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the plain message.
        return str(self.args[0]) if self.args else ""


class ConfigurationError(SimsException):
    """Raised when settings taken from the environment are invalid."""

    pass
