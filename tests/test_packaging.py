"""Packaging regression tests.

Tests that verify the installed package structure and behavior.
"""

from pathlib import Path


def test_source_layout():
    """Test that the source tree has the expected package layout."""
    here = Path(__file__).resolve().parent
    repo_root = here.parent
    src_pkg = repo_root / "src" / "pkgtemplate"

    assert src_pkg.exists(), "pkgtemplate package should exist in src/"
    assert (src_pkg / "kernel").exists(), "pkgtemplate.kernel should exist"
    assert (src_pkg / "_internal").exists(), "pkgtemplate._internal should exist"
    assert (repo_root / "pyproject.toml").exists()


def test_import_boundary():
    """Test that the installed package and its subpackages import."""
    import pkgtemplate
    import pkgtemplate.kernel.parser  # noqa: F401
    import pkgtemplate._internal.io.template_io  # noqa: F401

    # In dev mode it's "dev", in installed mode it's "1.0.0"
    assert pkgtemplate.__version__ in ("1.0.0", "dev")
