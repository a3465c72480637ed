"""Pydantic models for parsed template files.

All models are frozen: a parse builds them once and nothing mutates
them afterwards.
"""

from enum import Enum
from pathlib import Path
from typing import Annotated, Literal, Optional, Tuple, Union

import semver
from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

from .versions import VersionRequirement


class TemplateKind(str, Enum):
    """Value of the discriminant line ("type file" / "type project")."""
    COMPLETE = "file"
    INHERITED = "project"


class DependencyEntry(BaseModel):
    """A package dependency declared in a dependencies block."""
    package_id: str
    requirement: VersionRequirement

    model_config = ConfigDict(frozen=True, extra="forbid")


class FileMapping(BaseModel):
    """A from/to pair declared in a files block. Paths are not checked."""
    source: str
    destination: str

    model_config = ConfigDict(frozen=True, extra="forbid")


class CompleteCoreInfo(BaseModel):
    """Required metadata of a self-contained ("type file") template."""
    id: str
    version: semver.Version
    authors: Tuple[str, ...]
    description: str

    model_config = ConfigDict(frozen=True, extra="forbid", arbitrary_types_allowed=True)

    @field_validator("id")
    @classmethod
    def validate_id(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Package id must not be empty")
        return v

    @field_validator("authors")
    @classmethod
    def validate_authors(cls, v: Tuple[str, ...]) -> Tuple[str, ...]:
        if not v:
            raise ValueError("At least one author is required")
        return v

    @field_serializer("version")
    def serialize_version(self, v: semver.Version) -> str:
        return str(v)


class InheritedCoreInfo(BaseModel):
    """Core metadata of a "type project" template.

    None means the value is inherited from the project file later on.
    """
    id: Optional[str] = None
    version: Optional[semver.Version] = None
    authors: Optional[Tuple[str, ...]] = None
    description: Optional[str] = None

    model_config = ConfigDict(frozen=True, extra="forbid", arbitrary_types_allowed=True)

    @field_serializer("version")
    def serialize_version(self, v: Optional[semver.Version]) -> Optional[str]:
        return None if v is None else str(v)


class OptionalInfo(BaseModel):
    """Packaging attributes that may be absent in either variant."""
    title: Optional[str] = None
    owners: Optional[Tuple[str, ...]] = None
    release_notes: Optional[str] = None
    summary: Optional[str] = None
    language: Optional[str] = None
    project_url: Optional[str] = None
    icon_url: Optional[str] = None
    license_url: Optional[str] = None
    copyright: Optional[str] = None
    require_license_acceptance: Optional[str] = None  # raw text, not interpreted
    tags: Optional[Tuple[str, ...]] = None
    development_dependency: Optional[bool] = None
    dependencies: Optional[Tuple[DependencyEntry, ...]] = None
    files: Optional[Tuple[FileMapping, ...]] = None

    model_config = ConfigDict(frozen=True, extra="forbid")


class CompleteTemplate(BaseModel):
    """Contents of a "type file" template."""
    kind: Literal["file"] = "file"
    core: CompleteCoreInfo
    optional: OptionalInfo = Field(default_factory=OptionalInfo)

    model_config = ConfigDict(frozen=True, extra="forbid")


class InheritedTemplate(BaseModel):
    """Contents of a "type project" template."""
    kind: Literal["project"] = "project"
    core: InheritedCoreInfo = Field(default_factory=InheritedCoreInfo)
    optional: OptionalInfo = Field(default_factory=OptionalInfo)

    model_config = ConfigDict(frozen=True, extra="forbid")


TemplateContents = Annotated[
    Union[CompleteTemplate, InheritedTemplate],
    Field(discriminator="kind"),
]


class TemplateFile(BaseModel):
    """Parsed contents paired with the file they were loaded from."""
    path: Path
    contents: TemplateContents

    model_config = ConfigDict(frozen=True, extra="forbid")
