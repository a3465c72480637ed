"""Parsing of the files block.

The block alternates "from <source>" and "to <destination>" lines::

    files
      from src/**/*.fs
      to lib
"""

from typing import List, Optional, Sequence, Set, Tuple

from loguru import logger

from pkgtemplate.codes import ParseErrorCode
from pkgtemplate.errors import TemplateParseError

from .fields import extract_field
from .models import FileMapping

FROM_PREFIX = "from "
TO_PREFIX = "to "


def _pairs_permissive(entries: Sequence[str]) -> Tuple[FileMapping, ...]:
    mappings: List[FileMapping] = []
    used: Set[int] = set()
    for index, (first, second) in enumerate(zip(entries, entries[1:])):
        if first.startswith(FROM_PREFIX) and second.startswith(TO_PREFIX):
            mappings.append(FileMapping(
                source=first[len(FROM_PREFIX):],
                destination=second[len(TO_PREFIX):],
            ))
            used.update((index, index + 1))

    dropped = [entry for index, entry in enumerate(entries) if index not in used]
    if dropped:
        logger.debug("Dropped {} line(s) outside from/to pairs in files block: {}", len(dropped), dropped)
    return tuple(mappings)


def _pairs_strict(entries: Sequence[str]) -> Tuple[FileMapping, ...]:
    if len(entries) % 2:
        raise TemplateParseError(
            ParseErrorCode.MALFORMED_BLOCK,
            f"Files block line '{entries[-1]}' has no matching 'to' line.",
        )
    mappings: List[FileMapping] = []
    for first, second in zip(entries[::2], entries[1::2]):
        if not first.startswith(FROM_PREFIX):
            raise TemplateParseError(
                ParseErrorCode.MALFORMED_BLOCK,
                f"Expected 'from <source>' in files block, got '{first}'.",
            )
        if not second.startswith(TO_PREFIX):
            raise TemplateParseError(
                ParseErrorCode.MALFORMED_BLOCK,
                f"Expected 'to <destination>' in files block, got '{second}'.",
            )
        mappings.append(FileMapping(
            source=first[len(FROM_PREFIX):],
            destination=second[len(TO_PREFIX):],
        ))
    return tuple(mappings)


def parse_file_mappings(lines: Sequence[str], strict: bool = False) -> Optional[Tuple[FileMapping, ...]]:
    """Parse the files field, or return None when it is absent.

    Permissive mode keeps every adjacent from/to pair and drops the rest
    (including an unpaired trailing "from"). Strict mode requires an exact
    from/to alternation.
    """
    block = extract_field(lines, "files")
    if block is None:
        return None
    if not block:
        return ()
    entries = block.split("\n")
    if strict:
        return _pairs_strict(entries)
    return _pairs_permissive(entries)
