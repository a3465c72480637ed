"""Template file I/O helpers (internal)."""

from pathlib import Path
from typing import IO, List, Union

from loguru import logger

from pkgtemplate.codes import ParseErrorCode
from pkgtemplate.errors import TemplateParseError

_BOM = "\ufeff"


def split_lines(text: str) -> List[str]:
    """Split text into physical lines without their terminators.

    Accepts \\n, \\r\\n and \\r. A trailing terminator does not produce an
    extra empty line.
    """
    lines = text.replace("\r\n", "\n").replace("\r", "\n").split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines


def read_lines(stream: IO) -> List[str]:
    """Read a whole binary or text stream into a list of lines.

    The stream is consumed but not closed; whoever opened it closes it.
    """
    data = stream.read()
    if isinstance(data, bytes):
        try:
            text = data.decode("utf-8-sig")
        except UnicodeDecodeError as e:
            raise TemplateParseError(
                ParseErrorCode.DECODE_ERROR,
                f"Template file is not valid UTF-8: {e}",
            ) from e
    else:
        text = data[1:] if data.startswith(_BOM) else data
    lines = split_lines(text)
    logger.debug("Read {} line(s) from template stream", len(lines))
    return lines


def find_template_files(root: Union[str, Path], suffix: str) -> List[Path]:
    """Recursively list files under root whose name ends with suffix, sorted."""
    root_path = Path(root)
    if not root_path.is_dir():
        raise FileNotFoundError(f"Template search root not found: {root_path}")
    # Suffix is matched literally, never as a glob pattern.
    found = sorted(p for p in root_path.rglob("*") if p.is_file() and p.name.endswith(suffix))
    logger.debug("Found {} template file(s) under {}", len(found), root_path)
    return found
