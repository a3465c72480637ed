"""Tests for the files block."""

import pytest

from pkgtemplate.codes import ParseErrorCode
from pkgtemplate.errors import TemplateParseError
from pkgtemplate.kernel.files import parse_file_mappings


def _pairs(mappings):
    return [(m.source, m.destination) for m in mappings]


def test_absent_block():
    assert parse_file_mappings(["type file"]) is None


def test_single_mapping():
    mappings = parse_file_mappings(["files", "  from src/**/*.fs", "  to lib"])
    assert _pairs(mappings) == [("src/**/*.fs", "lib")]


def test_multiple_mappings():
    lines = ["files", "  from a/*.dll", "  to lib/net45", "  from docs/*", "  to content"]
    assert _pairs(parse_file_mappings(lines)) == [("a/*.dll", "lib/net45"), ("docs/*", "content")]


def test_unpaired_trailing_from_dropped():
    lines = ["files", "  from src/**/*.fs", "  to lib", "  from orphan"]
    assert _pairs(parse_file_mappings(lines)) == [("src/**/*.fs", "lib")]


def test_out_of_cadence_lines_dropped():
    lines = ["files", "  junk", "  from a", "  from b", "  to c"]
    assert _pairs(parse_file_mappings(lines)) == [("b", "c")]


def test_empty_block():
    assert parse_file_mappings(["files"]) == ()


def test_strict_accepts_alternation():
    lines = ["files", "  from a", "  to b", "  from c", "  to d"]
    assert _pairs(parse_file_mappings(lines, strict=True)) == [("a", "b"), ("c", "d")]


def test_strict_rejects_unpaired_from():
    with pytest.raises(TemplateParseError, match="no matching 'to'") as excinfo:
        parse_file_mappings(["files", "  from a", "  to b", "  from c"], strict=True)
    assert excinfo.value.code is ParseErrorCode.MALFORMED_BLOCK


def test_strict_rejects_out_of_order():
    with pytest.raises(TemplateParseError, match="Expected 'from"):
        parse_file_mappings(["files", "  to b", "  from a"], strict=True)
