"""Builder for the optional packaging attributes."""

from typing import Optional, Sequence, Tuple

from pkgtemplate.codes import ParseErrorCode
from pkgtemplate.errors import TemplateParseError

from .dependencies import parse_dependencies
from .fields import extract_field
from .files import parse_file_mappings
from .models import OptionalInfo
from .versions import BooleanParseError, parse_bool


def _split_owners(text: Optional[str]) -> Optional[Tuple[str, ...]]:
    if text is None:
        return None
    return tuple(owner.strip() for owner in text.split(","))


def _split_tags(text: Optional[str]) -> Optional[Tuple[str, ...]]:
    if text is None:
        return None
    return tuple(text.split())


def _development_dependency(lines: Sequence[str]) -> Optional[bool]:
    text = extract_field(lines, "developmentDependency")
    if text is None:
        return None
    try:
        return parse_bool(text)
    except BooleanParseError as e:
        raise TemplateParseError(
            ParseErrorCode.INVALID_BOOLEAN,
            f"Invalid developmentDependency value: {e}",
        ) from e


def build_optional_info(lines: Sequence[str], strict_blocks: bool = False) -> OptionalInfo:
    """Extract every optional attribute; each is independently absent or present."""
    return OptionalInfo(
        title=extract_field(lines, "title"),
        owners=_split_owners(extract_field(lines, "owners")),
        release_notes=extract_field(lines, "releaseNotes"),
        summary=extract_field(lines, "summary"),
        language=extract_field(lines, "language"),
        project_url=extract_field(lines, "projectUrl"),
        icon_url=extract_field(lines, "iconUrl"),
        license_url=extract_field(lines, "licenseUrl"),
        copyright=extract_field(lines, "copyright"),
        require_license_acceptance=extract_field(lines, "requireLicenseAcceptance"),
        tags=_split_tags(extract_field(lines, "tags")),
        development_dependency=_development_dependency(lines),
        dependencies=parse_dependencies(lines, strict=strict_blocks),
        files=parse_file_mappings(lines, strict=strict_blocks),
    )
