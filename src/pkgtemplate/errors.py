"""Exceptions raised by the template-file parser."""

from pathlib import Path

from pkgtemplate.codes import ParseErrorCode


class TemplateParseError(ValueError):
    """A template file could not be parsed.

    Raised for the first failure found; the parse stops there.
    """

    def __init__(self, code: ParseErrorCode, message: str):
        super().__init__(message)
        self.code = code
        self.message = message

    def __repr__(self) -> str:
        return f"TemplateParseError({self.code.value}, {self.message!r})"


class TemplateLoadError(RuntimeError):
    """A template file on disk failed to parse.

    Not a ValueError: callers of load() should abort the operation
    rather than treat this as a recoverable parse result.
    """

    def __init__(self, path: Path, error: TemplateParseError):
        super().__init__(f"Failed to load template file '{path}': {error.message}")
        self.path = path
        self.error = error

    @property
    def code(self) -> ParseErrorCode:
        return self.error.code
