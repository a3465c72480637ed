"""Parser configuration."""

import os
from typing import Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_TEMPLATE_SUFFIX = "paket.template"

STRICT_BLOCKS_ENV = "PKGTEMPLATE_STRICT_BLOCKS"
SUFFIX_ENV = "PKGTEMPLATE_SUFFIX"

_TRUTHY = {"1", "true", "yes", "on"}


class ParserOptions(BaseModel):
    """Options controlling how template files are found and parsed."""

    strict_blocks: bool = Field(
        False,
        description="Reject malformed lines in dependencies/files blocks instead of dropping them",
    )
    template_suffix: str = Field(
        DEFAULT_TEMPLATE_SUFFIX,
        description="File name suffix used when discovering template files",
    )

    model_config = ConfigDict(frozen=True, extra="forbid")

    @field_validator("template_suffix")
    @classmethod
    def validate_template_suffix(cls, v: str) -> str:
        if not v or "/" in v or "\\" in v:
            raise ValueError(f"Template suffix '{v}' must be a non-empty file name suffix")
        return v

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ParserOptions":
        """Build options from PKGTEMPLATE_* environment variables."""
        env = os.environ if environ is None else environ
        values = {}
        if STRICT_BLOCKS_ENV in env:
            values["strict_blocks"] = env[STRICT_BLOCKS_ENV].strip().lower() in _TRUTHY
        if env.get(SUFFIX_ENV):
            values["template_suffix"] = env[SUFFIX_ENV]
        return cls(**values)
