"""Tests for the discriminant line."""

import pytest

from pkgtemplate.codes import ParseErrorCode
from pkgtemplate.errors import TemplateParseError
from pkgtemplate.kernel.classify import classify
from pkgtemplate.kernel.models import TemplateKind


def test_file_type():
    assert classify(["type file"]) is TemplateKind.COMPLETE


def test_project_type():
    assert classify(["type project", "id x"]) is TemplateKind.INHERITED


def test_type_is_case_insensitive():
    assert classify(["TYPE File"]) is TemplateKind.COMPLETE
    assert classify(["Type PROJECT "]) is TemplateKind.INHERITED


def test_empty_document():
    with pytest.raises(TemplateParseError) as excinfo:
        classify([])
    assert excinfo.value.code is ParseErrorCode.EMPTY_TEMPLATE


def test_first_line_without_type():
    with pytest.raises(TemplateParseError) as excinfo:
        classify(["id MyPackage", "type file"])
    assert excinfo.value.code is ParseErrorCode.MISSING_TYPE


def test_only_first_line_is_inspected():
    with pytest.raises(TemplateParseError) as excinfo:
        classify(["", "type file"])
    assert excinfo.value.code is ParseErrorCode.MISSING_TYPE


def test_block_form_type_is_not_accepted():
    with pytest.raises(TemplateParseError) as excinfo:
        classify(["type", "  file"])
    assert excinfo.value.code is ParseErrorCode.MISSING_TYPE


def test_unknown_type_names_value():
    with pytest.raises(TemplateParseError, match="'solution'") as excinfo:
        classify(["type solution"])
    assert excinfo.value.code is ParseErrorCode.UNKNOWN_TYPE
