"""Field extraction over the raw lines of a template file.

A field is written either on one line::

    description A sample package

or as a header line followed by indented lines::

    dependencies
      FSharp.Core >= 4.0
      Newtonsoft.Json ~> 9.0

The single-line form is searched over the whole document first; the
block form is only tried when no single-line declaration exists.
"""

import re
from enum import Enum
from functools import lru_cache
from typing import List, Optional, Sequence


@lru_cache(maxsize=None)
def _single_line_pattern(name: str) -> "re.Pattern[str]":
    # Keyed on the lowercased name; compiled once per process.
    return re.compile(rf"^{re.escape(name)} (.*)$", re.IGNORECASE | re.DOTALL)


def extract_single_line(lines: Sequence[str], name: str) -> Optional[str]:
    """Return the text after "<name> " on the first matching line."""
    pattern = _single_line_pattern(name.lower())
    for line in lines:
        match = pattern.match(line)
        if match:
            return match.group(1)
    return None


class BlockState(Enum):
    IDLE = "idle"
    MATCHED_HEADER = "matched_header"
    COLLECTING = "collecting"
    DONE = "done"


def extract_block(lines: Sequence[str], name: str) -> Optional[str]:
    """Return the indented block following the first "<name>" header line.

    Each collected line is stripped and the lines are joined with "\\n".
    Collection stops at the first line that does not start with a space.
    A header with nothing indented below it yields "".
    """
    wanted = name.lower()
    state = BlockState.IDLE
    body: List[str] = []

    for line in lines:
        if state is BlockState.IDLE:
            if line.strip().lower() == wanted:
                state = BlockState.MATCHED_HEADER
        elif line.startswith(" "):
            body.append(line.strip())
            state = BlockState.COLLECTING
        else:
            state = BlockState.DONE
            break

    if state is BlockState.IDLE:
        return None
    return "\n".join(body)


def extract_field(lines: Sequence[str], name: str) -> Optional[str]:
    """Return a field's value in either form, or None if it is absent."""
    value = extract_single_line(lines, name)
    if value is not None:
        return value
    return extract_block(lines, name)
