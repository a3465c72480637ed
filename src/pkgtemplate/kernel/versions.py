"""Version, version-requirement and boolean primitives.

Each parser raises a ValueError subclass on bad input; the template
builders translate those into TemplateParseError codes.
"""

import operator
import re
from enum import Enum
from typing import Callable, Dict, List, Literal, Optional, Tuple

import semver
from pydantic import BaseModel, ConfigDict, field_serializer


class VersionParseError(ValueError):
    """Text is not a semantic version."""


class RequirementParseError(ValueError):
    """Text is not a version requirement."""


class BooleanParseError(ValueError):
    """Text is not 'true' or 'false'."""


# NuGet-style "major.minor.patch.revision", optionally with prerelease and build.
_FOUR_PART = re.compile(r"^(\d+\.\d+\.\d+)\.(\d+)(-[0-9A-Za-z.-]+)?(?:\+([0-9A-Za-z.-]+))?$")


def _fold_revision(text: str) -> str:
    """Move a fourth numeric component into build metadata: 1.0.0.5 -> 1.0.0+5."""
    match = _FOUR_PART.match(text)
    if not match:
        return text
    core, revision, prerelease, build = match.groups()
    metadata = revision if build is None else f"{revision}.{build}"
    return f"{core}{prerelease or ''}+{metadata}"


def parse_semver(text: str) -> semver.Version:
    """Parse a semantic version; missing minor/patch components default to 0.

    A fourth (revision) component is kept as build metadata, so it is
    shown in str() but ignored when comparing versions.
    """
    try:
        return semver.Version.parse(_fold_revision(text.strip()), optional_minor_and_patch=True)
    except (ValueError, TypeError) as e:
        raise VersionParseError(f"'{text}' is not a valid semantic version") from e


def parse_bool(text: str) -> bool:
    """Parse 'true'/'false' (any case, surrounding whitespace ignored)."""
    value = text.strip().lower()
    if value == "true":
        return True
    if value == "false":
        return False
    raise BooleanParseError(f"'{text}' is not a valid boolean (expected 'true' or 'false')")


BoundOperator = Literal[">=", ">", "<=", "<", "=="]

_COMPARE: Dict[str, Callable[[semver.Version, semver.Version], bool]] = {
    ">=": operator.ge,
    ">": operator.gt,
    "<=": operator.le,
    "<": operator.lt,
    "==": operator.eq,
}

# Longest first: "==" must win over "=", "<=" over "<".
_OPERATORS = ("~>", "==", "<=", ">=", "=", "<", ">")

_ANY_VERSION = semver.Version(0)


class PrereleasePolicy(str, Enum):
    """Which prerelease versions a requirement accepts."""
    NONE = "none"
    ALL = "all"
    CHANNELS = "channels"


class VersionBound(BaseModel):
    """One comparison a version must satisfy, e.g. ">= 1.2.0"."""
    operator: BoundOperator
    version: semver.Version

    model_config = ConfigDict(frozen=True, extra="forbid", arbitrary_types_allowed=True)

    @field_serializer("version")
    def serialize_version(self, v: semver.Version) -> str:
        return str(v)

    def matches(self, version: semver.Version) -> bool:
        return _COMPARE[self.operator](version, self.version)


class VersionRequirement(BaseModel):
    """A parsed version requirement.

    An empty text parses to the "any version" requirement (>= 0.0.0).
    All bounds must hold for a version to be allowed.
    """
    text: str
    bounds: Tuple[VersionBound, ...]
    prereleases: PrereleasePolicy = PrereleasePolicy.NONE
    channels: Tuple[str, ...] = ()
    prefer_lowest: bool = False

    model_config = ConfigDict(frozen=True, extra="forbid")

    @property
    def is_any(self) -> bool:
        return self.bounds == (VersionBound(operator=">=", version=_ANY_VERSION),)

    def allows(self, version: semver.Version) -> bool:
        """Return True if version satisfies every bound and the prerelease policy."""
        if version.prerelease and not self._allows_prerelease(version):
            return False
        return all(bound.matches(version) for bound in self.bounds)

    def _allows_prerelease(self, version: semver.Version) -> bool:
        if self.prereleases is PrereleasePolicy.ALL:
            return True
        # Pinning an exact prerelease opts into it.
        if any(b.operator == "==" and b.version == version for b in self.bounds):
            return True
        if self.prereleases is PrereleasePolicy.CHANNELS:
            tag = version.prerelease.lower()
            return any(tag.startswith(channel) for channel in self.channels)
        return False


def _split_operator(token: str) -> Tuple[bool, Optional[str], str]:
    """Split a token into (prefer_lowest, operator, remainder)."""
    prefer_lowest = token.startswith("!")
    body = token[1:] if prefer_lowest else token
    for op in _OPERATORS:
        if body.startswith(op):
            return prefer_lowest, op, body[len(op):]
    return prefer_lowest, None, body


def _parse_bound_version(text: str) -> semver.Version:
    try:
        return parse_semver(text)
    except VersionParseError as e:
        raise RequirementParseError(str(e)) from e


def _twiddle_upper(text: str, version: semver.Version) -> semver.Version:
    # "~> 1.2" -> < 2.0.0, "~> 1.2.3" -> < 1.3.0, "~> 1.2.3.4" -> < 1.2.4
    components = text.split("-", 1)[0].split("+", 1)[0].split(".")
    if len(components) <= 2:
        return version.bump_major()
    if len(components) >= 4:
        return version.bump_patch()
    return version.bump_minor()


def _bounds_for(op: str, text: str) -> List[VersionBound]:
    version = _parse_bound_version(text)
    if op == "~>":
        return [
            VersionBound(operator=">=", version=version),
            VersionBound(operator="<", version=_twiddle_upper(text, version)),
        ]
    if op == "=":
        op = "=="
    return [VersionBound(operator=op, version=version)]


def parse_version_requirement(text: str) -> VersionRequirement:
    """Parse a requirement such as ">= 1.0 < 2.0", "~> 4.0" or "1.2 beta".

    Tokens are whitespace separated. An operator may carry a leading "!"
    (prefer the lowest matching version) and may be glued to its version.
    A bare leading version means ">=". Trailing words select prerelease
    channels; "prerelease" accepts them all.
    """
    bounds: List[VersionBound] = []
    channels: List[str] = []
    prefer_lowest = False
    pending: Optional[str] = None

    for token in text.split():
        bang, op, rest = _split_operator(token)
        if pending is not None:
            if op is not None or bang:
                raise RequirementParseError(f"Operator '{pending}' in '{text}' has no version")
            bounds.extend(_bounds_for(pending, token))
            pending = None
            continue
        if op is not None:
            if channels:
                raise RequirementParseError(f"Unexpected operator '{op}' after prerelease channels in '{text}'")
            prefer_lowest = prefer_lowest or bang
            if rest:
                bounds.extend(_bounds_for(op, rest))
            else:
                pending = op
            continue
        if rest.isalpha():
            channels.append(rest.lower())
            continue
        if bounds or channels:
            raise RequirementParseError(f"Unexpected token '{token}' in '{text}'")
        prefer_lowest = prefer_lowest or bang
        bounds.extend(_bounds_for(">=", rest))

    if pending is not None:
        raise RequirementParseError(f"Operator '{pending}' in '{text}' has no version")

    if not bounds:
        bounds.append(VersionBound(operator=">=", version=_ANY_VERSION))

    if "prerelease" in channels:
        policy = PrereleasePolicy.ALL
    elif channels:
        policy = PrereleasePolicy.CHANNELS
    else:
        policy = PrereleasePolicy.NONE

    return VersionRequirement(
        text=text,
        bounds=tuple(bounds),
        prereleases=policy,
        channels=tuple(channels),
        prefer_lowest=prefer_lowest,
    )
