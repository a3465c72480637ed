"""Public API for pkgtemplate.

High-level functions over template files. Callers should use these
instead of importing from pkgtemplate.kernel or pkgtemplate._internal.
"""

import io
import os
from pathlib import Path
from typing import IO, List, Optional, Union

from loguru import logger
from pydantic import BaseModel, ConfigDict, model_validator

from pkgtemplate.codes import ParseErrorCode
from pkgtemplate.config import ParserOptions
from pkgtemplate.errors import TemplateLoadError, TemplateParseError
from pkgtemplate.kernel.models import TemplateContents, TemplateFile
from pkgtemplate.kernel.parser import parse_lines
from pkgtemplate._internal.io.template_io import (
    find_template_files as _find_template_files,
    read_lines,
)


def _normalize_path(path: Union[str, os.PathLike, Path]) -> Path:
    """Normalize path input to Path object."""
    return Path(path) if not isinstance(path, Path) else path


class ParseIssue(BaseModel):
    """The error that stopped a parse."""
    code: ParseErrorCode
    message: str

    model_config = ConfigDict(frozen=True)


class ParseOutcome(BaseModel):
    """Result of try_parse(): either contents or the first error."""
    ok: bool
    contents: Optional[TemplateContents] = None
    error: Optional[ParseIssue] = None

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def check_exclusive(self) -> "ParseOutcome":
        if self.ok != (self.contents is not None) or self.ok == (self.error is not None):
            raise ValueError("ParseOutcome must carry contents when ok and an error otherwise")
        return self


def parse(stream: IO, options: Optional[ParserOptions] = None) -> TemplateContents:
    """Parse a template file from a binary or text stream.

    The stream is read to the end; closing it is left to the caller.

    Raises:
        TemplateParseError: for the first problem found.
    """
    return parse_lines(read_lines(stream), options)


def parse_text(text: str, options: Optional[ParserOptions] = None) -> TemplateContents:
    """Parse a template file held in a string."""
    return parse(io.StringIO(text), options)


def try_parse(stream: IO, options: Optional[ParserOptions] = None) -> ParseOutcome:
    """Like parse(), but return the failure instead of raising it."""
    try:
        contents = parse(stream, options)
    except TemplateParseError as e:
        return ParseOutcome(ok=False, error=ParseIssue(code=e.code, message=e.message))
    return ParseOutcome(ok=True, contents=contents)


def load(path: Union[str, os.PathLike, Path], options: Optional[ParserOptions] = None) -> TemplateFile:
    """Load and parse the template file at path.

    A parse failure is fatal for the caller and raised as TemplateLoadError;
    missing files raise FileNotFoundError.
    """
    template_path = _normalize_path(path)
    with open(template_path, "rb") as stream:
        try:
            contents = parse(stream, options)
        except TemplateParseError as e:
            logger.debug("Template file {} failed to parse: {}", template_path, e.message)
            raise TemplateLoadError(template_path, e) from e
    logger.debug("Loaded '{}' template {}", contents.kind, template_path)
    return TemplateFile(path=template_path, contents=contents)


def find_template_files(
    root: Union[str, os.PathLike, Path],
    suffix: Optional[str] = None,
) -> List[Path]:
    """Recursively find template files under root (sorted)."""
    if suffix is None:
        suffix = ParserOptions().template_suffix
    return _find_template_files(_normalize_path(root), suffix)


def load_all(
    root: Union[str, os.PathLike, Path],
    options: Optional[ParserOptions] = None,
) -> List[TemplateFile]:
    """Find and load every template file under root, stopping at the first failure."""
    options = options or ParserOptions()
    return [load(path, options) for path in find_template_files(root, options.template_suffix)]
