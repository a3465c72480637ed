"""Error code constants for template-file parsing.

These constants prevent stringly-typed error codes and let callers
branch on the kind of failure without matching on messages.
"""

from enum import Enum


class ParseErrorCode(str, Enum):
    """Parse error codes carried by TemplateParseError."""

    # Discriminant line
    EMPTY_TEMPLATE = "EMPTY_TEMPLATE"
    MISSING_TYPE = "MISSING_TYPE"
    UNKNOWN_TYPE = "UNKNOWN_TYPE"

    # Field values
    MISSING_FIELD = "MISSING_FIELD"
    INVALID_VERSION = "INVALID_VERSION"
    INVALID_REQUIREMENT = "INVALID_REQUIREMENT"
    INVALID_BOOLEAN = "INVALID_BOOLEAN"

    # Block sub-grammars (strict mode only)
    MALFORMED_BLOCK = "MALFORMED_BLOCK"

    # Input decoding
    DECODE_ERROR = "DECODE_ERROR"
