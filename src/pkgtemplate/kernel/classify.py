"""Template variant classification from the discriminant line."""

from typing import Sequence

from pkgtemplate.codes import ParseErrorCode
from pkgtemplate.errors import TemplateParseError

from .fields import extract_single_line
from .models import TemplateKind


def classify(lines: Sequence[str]) -> TemplateKind:
    """Read "type file" / "type project" from the first line only."""
    if not lines:
        raise TemplateParseError(ParseErrorCode.EMPTY_TEMPLATE, "Empty template file.")

    value = extract_single_line(lines[:1], "type")
    if value is None:
        raise TemplateParseError(
            ParseErrorCode.MISSING_TYPE,
            "First line of template file had no 'type' declaration.",
        )

    try:
        return TemplateKind(value.strip().lower())
    except ValueError:
        raise TemplateParseError(
            ParseErrorCode.UNKNOWN_TYPE,
            f"Unknown template type '{value}' (expected 'file' or 'project').",
        ) from None
