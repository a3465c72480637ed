"""Builders for the id/version/authors/description block."""

from typing import Optional, Sequence, Tuple

import semver

from pkgtemplate.codes import ParseErrorCode
from pkgtemplate.errors import TemplateParseError

from .fields import extract_field
from .models import CompleteCoreInfo, InheritedCoreInfo
from .versions import VersionParseError, parse_semver


def split_authors(text: str) -> Tuple[str, ...]:
    """Split on commas and trim each name; empty names are kept."""
    return tuple(author.strip() for author in text.split(","))


def _version(text: str) -> semver.Version:
    try:
        return parse_semver(text)
    except VersionParseError as e:
        raise TemplateParseError(ParseErrorCode.INVALID_VERSION, f"Invalid version in template file: {e}") from e


def _require(lines: Sequence[str], name: str) -> str:
    value = extract_field(lines, name)
    if value is None:
        raise TemplateParseError(ParseErrorCode.MISSING_FIELD, f"No {name} line in template file.")
    return value


def build_complete_core(lines: Sequence[str]) -> CompleteCoreInfo:
    """Extract the four required fields, failing on the first one missing."""
    package_id = _require(lines, "id")
    if not package_id.strip():
        raise TemplateParseError(ParseErrorCode.MISSING_FIELD, "Empty id in template file.")
    version = _version(_require(lines, "version"))
    authors = split_authors(_require(lines, "authors"))
    description = _require(lines, "description")

    return CompleteCoreInfo(
        id=package_id,
        version=version,
        authors=authors,
        description=description,
    )


def build_inherited_core(lines: Sequence[str]) -> InheritedCoreInfo:
    """Extract the four fields; each one missing is left to be inherited."""
    version_text: Optional[str] = extract_field(lines, "version")
    authors_text: Optional[str] = extract_field(lines, "authors")

    return InheritedCoreInfo(
        id=extract_field(lines, "id"),
        version=None if version_text is None else _version(version_text),
        authors=None if authors_text is None else split_authors(authors_text),
        description=extract_field(lines, "description"),
    )
