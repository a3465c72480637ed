"""pkgtemplate: parser for line-based package template files."""

from importlib.metadata import version, PackageNotFoundError

from loguru import logger

try:
    __version__ = version("pkgtemplate")
except PackageNotFoundError:
    __version__ = "dev"

# Library logging stays silent unless an application (or the CLI) enables it.
logger.disable("pkgtemplate")

# Public API exports
from pkgtemplate.api import (
    parse,
    parse_text,
    try_parse,
    load,
    load_all,
    find_template_files,
    ParseIssue,
    ParseOutcome,
)
from pkgtemplate.codes import ParseErrorCode
from pkgtemplate.config import ParserOptions
from pkgtemplate.errors import TemplateLoadError, TemplateParseError
from pkgtemplate.kernel.models import (
    CompleteCoreInfo,
    CompleteTemplate,
    DependencyEntry,
    FileMapping,
    InheritedCoreInfo,
    InheritedTemplate,
    OptionalInfo,
    TemplateContents,
    TemplateFile,
    TemplateKind,
)

__all__ = [
    "__version__",
    "parse",
    "parse_text",
    "try_parse",
    "load",
    "load_all",
    "find_template_files",
    "ParseIssue",
    "ParseOutcome",
    "ParseErrorCode",
    "ParserOptions",
    "TemplateLoadError",
    "TemplateParseError",
    "CompleteCoreInfo",
    "CompleteTemplate",
    "DependencyEntry",
    "FileMapping",
    "InheritedCoreInfo",
    "InheritedTemplate",
    "OptionalInfo",
    "TemplateContents",
    "TemplateFile",
    "TemplateKind",
]
