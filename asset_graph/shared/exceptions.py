"""
Exception hierarchy for the asset graph layer.

Caller-input problems inherit from InputValidationError so the gateway
can map all of them to one HTTP status. Driver errors are never wrapped.
"""


class AssetGraphError(Exception):
    """Base exception for all asset graph errors."""


class InputValidationError(AssetGraphError):
    """A request parameter was rejected before any query was built."""

    code = "INVALID_INPUT"

    def __init__(self, message: str, field: str | None = None):
        self.field = field
        self.message = message
        prefix = f"[{field}] " if field else ""
        super().__init__(f"{prefix}{message}")


class MissingFieldError(InputValidationError):
    """A required value is absent or empty."""

    code = "MISSING_FIELD"


class BadFormatError(InputValidationError):
    """A value is present but does not parse as an amount, timestamp or selector."""

    code = "BAD_FORMAT"


class TooLongError(InputValidationError):
    """A relationship-type token reached the length limit."""

    code = "TOO_LONG"


class IllegalCharactersError(InputValidationError):
    """A relationship-type token contains characters outside [A-Za-z0-9_]."""

    code = "ILLEGAL_CHARACTERS"


class NoSearchCriteriaError(InputValidationError):
    """A search was requested without a single constraint."""

    code = "NO_SEARCH_CRITERIA"


class DatabaseConnectionError(AssetGraphError):
    """Failed to connect to Neo4j."""
