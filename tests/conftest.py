"""Shared fixtures for python_docx_review tests."""

from pathlib import Path

import pytest
from _docx_helpers import comments_xml, create_docx

from python_docx_review import OOXMLPackage


@pytest.fixture
def plain_docx(tmp_path: Path) -> Path:
    """An untracked document with no comments."""
    return create_docx(tmp_path / "plain.docx")


@pytest.fixture
def commented_docx(tmp_path: Path) -> Path:
    """A document whose comments are by A, B, A, C in that order."""
    return create_docx(tmp_path / "review.docx", comments=comments_xml(["A", "B", "A", "C"]))


@pytest.fixture
def package(plain_docx: Path):
    """An opened package for plain_docx."""
    pkg = OOXMLPackage.open(plain_docx)
    yield pkg
    pkg.close()
