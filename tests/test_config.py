"""Tests for ParserOptions."""

import pytest
from pydantic import ValidationError

from pkgtemplate.config import DEFAULT_TEMPLATE_SUFFIX, ParserOptions


def test_defaults():
    options = ParserOptions()
    assert options.strict_blocks is False
    assert options.template_suffix == DEFAULT_TEMPLATE_SUFFIX == "paket.template"


def test_from_env():
    options = ParserOptions.from_env({"PKGTEMPLATE_STRICT_BLOCKS": "yes", "PKGTEMPLATE_SUFFIX": "pkg.tmpl"})
    assert options.strict_blocks is True
    assert options.template_suffix == "pkg.tmpl"


def test_from_env_falsy_and_empty():
    options = ParserOptions.from_env({"PKGTEMPLATE_STRICT_BLOCKS": "0", "PKGTEMPLATE_SUFFIX": ""})
    assert options == ParserOptions()


def test_from_process_env(monkeypatch):
    monkeypatch.setenv("PKGTEMPLATE_STRICT_BLOCKS", "true")
    monkeypatch.delenv("PKGTEMPLATE_SUFFIX", raising=False)
    assert ParserOptions.from_env().strict_blocks is True


def test_invalid_suffix():
    with pytest.raises(ValidationError):
        ParserOptions(template_suffix="a/b")


def test_unknown_option_rejected():
    with pytest.raises(ValidationError):
        ParserOptions(strict=True)


def test_frozen():
    options = ParserOptions()
    with pytest.raises(ValidationError):
        options.strict_blocks = True
