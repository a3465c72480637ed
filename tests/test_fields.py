"""Tests for field extraction."""

from pkgtemplate.kernel.fields import extract_block, extract_field, extract_single_line


def test_single_line_value_after_one_space():
    lines = ["id MyPackage", "description  two spaces"]
    assert extract_single_line(lines, "id") == "MyPackage"
    # Only the separating space is consumed
    assert extract_single_line(lines, "description") == " two spaces"


def test_single_line_name_is_case_insensitive():
    assert extract_single_line(["ID MyPackage"], "id") == "MyPackage"
    assert extract_single_line(["releasenotes fixed it"], "releaseNotes") == "fixed it"


def test_single_line_first_match_wins():
    lines = ["id First", "title x", "id Second"]
    assert extract_single_line(lines, "id") == "First"


def test_single_line_requires_separating_space():
    assert extract_single_line(["idMyPackage"], "id") is None
    assert extract_single_line(["identity foo"], "id") is None
    assert extract_single_line(["  id indented"], "id") is None


def test_single_line_name_with_regex_characters():
    assert extract_single_line(["a.b value"], "a.b") == "value"
    assert extract_single_line(["axb value"], "a.b") is None


def test_block_collects_indented_lines():
    lines = [
        "type file",
        "dependencies",
        "  FSharp.Core >= 4.0",
        "    Newtonsoft.Json",
        "title After",
    ]
    assert extract_block(lines, "dependencies") == "FSharp.Core >= 4.0\nNewtonsoft.Json"


def test_block_stops_at_first_unindented_line():
    lines = ["files", " from a", "to b", " from c"]
    assert extract_block(lines, "files") == "from a"


def test_block_stops_at_empty_line():
    lines = ["files", " from a", "", " to b"]
    assert extract_block(lines, "files") == "from a"


def test_block_keeps_whitespace_only_lines_as_empty():
    lines = ["releaseNotes", "  first", "   ", "  second"]
    assert extract_block(lines, "releaseNotes") == "first\n\nsecond"


def test_block_header_trimmed_and_case_insensitive():
    lines = ["  DESCRIPTION  ", "  multi", "  line"]
    assert extract_block(lines, "description") == "multi\nline"


def test_block_header_without_body_is_empty():
    assert extract_block(["files", "type file"], "files") == ""
    assert extract_block(["files"], "files") == ""


def test_block_absent():
    assert extract_block(["type file", "id x"], "files") is None
    assert extract_block([], "files") is None


def test_block_uses_first_header():
    lines = ["summary", " one", "summary", " two"]
    assert extract_block(lines, "summary") == "one"


def test_extract_field_prefers_single_line_form():
    lines = ["description", "  block text", "description inline text"]
    assert extract_field(lines, "description") == "inline text"


def test_extract_field_falls_back_to_block():
    lines = ["description", "  block text", "  more"]
    assert extract_field(lines, "description") == "block text\nmore"


def test_extract_field_absent():
    assert extract_field(["type file"], "title") is None


def test_extraction_is_order_independent():
    lines_a = ["type file", "id A", "title T"]
    lines_b = ["type file", "title T", "id A"]
    for name in ("id", "title"):
        assert extract_field(lines_a, name) == extract_field(lines_b, name)


def test_block_trailing_whitespace_only_line_kept_as_empty():
    assert extract_block(["notes", "  a", "   "], "notes") == "a\n"
