"""Parse pipeline: classify, build core info, build optional info."""

from typing import Optional, Sequence

from loguru import logger

from pkgtemplate.config import ParserOptions

from .classify import classify
from .core_info import build_complete_core, build_inherited_core
from .models import CompleteTemplate, InheritedTemplate, TemplateContents, TemplateKind
from .optional_info import build_optional_info


def parse_lines(lines: Sequence[str], options: Optional[ParserOptions] = None) -> TemplateContents:
    """Parse the lines of a template file.

    Raises TemplateParseError for the first problem found; nothing is
    returned for a template that fails part way through.
    """
    options = options or ParserOptions()
    kind = classify(lines)
    logger.debug("Parsing {} line(s) as '{}' template", len(lines), kind.value)

    if kind is TemplateKind.COMPLETE:
        core = build_complete_core(lines)
        optional = build_optional_info(lines, strict_blocks=options.strict_blocks)
        return CompleteTemplate(core=core, optional=optional)

    core = build_inherited_core(lines)
    optional = build_optional_info(lines, strict_blocks=options.strict_blocks)
    return InheritedTemplate(core=core, optional=optional)
