"""Parsing of the dependencies block.

Each line is "<package id> <version requirement>", e.g.::

    dependencies
      FSharp.Core >= 4.0
      Newtonsoft.Json
"""

from typing import Optional, Sequence, Tuple

from loguru import logger

from pkgtemplate.codes import ParseErrorCode
from pkgtemplate.errors import TemplateParseError

from .fields import extract_field
from .models import DependencyEntry
from .versions import RequirementParseError, parse_version_requirement


def parse_dependency_line(line: str, strict: bool = False) -> DependencyEntry:
    """Split a line into the leading non-whitespace id and its requirement."""
    parts = line.split(None, 1)
    if not parts:
        if strict:
            raise TemplateParseError(
                ParseErrorCode.MALFORMED_BLOCK,
                f"Dependency line '{line}' has no package id.",
            )
        logger.debug("Dependency line {!r} has no package id; kept with any-version requirement", line)
        return DependencyEntry(package_id=line, requirement=parse_version_requirement(""))

    package_id = parts[0]
    requirement_text = parts[1].strip() if len(parts) > 1 else ""
    try:
        requirement = parse_version_requirement(requirement_text)
    except RequirementParseError as e:
        raise TemplateParseError(
            ParseErrorCode.INVALID_REQUIREMENT,
            f"Invalid version requirement for dependency '{package_id}': {e}",
        ) from e
    return DependencyEntry(package_id=package_id, requirement=requirement)


def parse_dependencies(lines: Sequence[str], strict: bool = False) -> Optional[Tuple[DependencyEntry, ...]]:
    """Parse the dependencies field, or return None when it is absent."""
    block = extract_field(lines, "dependencies")
    if block is None:
        return None
    if not block:
        return ()
    return tuple(parse_dependency_line(line, strict=strict) for line in block.split("\n"))
