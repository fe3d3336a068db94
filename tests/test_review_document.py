"""Tests for the ReviewDocument facade."""

import io
from pathlib import Path

import pytest
from _docx_helpers import comments_xml, create_docx, read_entry

from python_docx_review import ReviewDocument, ValidationError


class TestOpen:
    def test_from_path(self, plain_docx: Path):
        with ReviewDocument(plain_docx) as doc:
            assert doc.path == plain_docx
            assert doc.default_alias_path == plain_docx.with_suffix(".json")

    def test_from_bytes(self, plain_docx: Path):
        with ReviewDocument(plain_docx.read_bytes()) as doc:
            assert doc.path is None
            assert doc.default_alias_path is None

    def test_from_file_object(self, plain_docx: Path):
        with ReviewDocument(io.BytesIO(plain_docx.read_bytes())) as doc:
            assert doc.path is None
            assert not doc.tracking_enabled

    def test_invalid_source(self, tmp_path: Path):
        with pytest.raises(ValidationError):
            ReviewDocument(tmp_path / "missing.docx")

    def test_close_on_exit(self, plain_docx: Path):
        with ReviewDocument(plain_docx) as doc:
            temp_dir = doc.package.temp_dir
        assert not temp_dir.exists()


class TestComments:
    def test_comments_and_authors(self, commented_docx: Path):
        with ReviewDocument(commented_docx) as doc:
            comments = doc.comments
            assert [c.author for c in comments] == ["A", "B", "A", "C"]
            assert [c.id for c in comments] == ["0", "1", "2", "3"]
            assert comments[0].text == "Comment 0"
            assert comments[0].initials == "X"
            assert comments[0].date is not None
            assert doc.comment_authors == ["A", "B", "C"]

    def test_no_comments_part(self, plain_docx: Path):
        with ReviewDocument(plain_docx) as doc:
            assert doc.comments == []
            assert doc.comment_authors == []

    def test_authors_skip_missing_attribute(self, tmp_path: Path):
        docx = create_docx(tmp_path / "a.docx", comments=comments_xml([None, "Ann"]))
        with ReviewDocument(docx) as doc:
            assert doc.comment_authors == ["Ann"]


class TestOperations:
    def test_enable_tracked_changes_and_save(self, plain_docx: Path, tmp_path: Path):
        output = tmp_path / "tracked.docx"
        with ReviewDocument(plain_docx) as doc:
            assert doc.enable_tracked_changes().changed
            assert doc.tracking_enabled
            assert doc.save(output) == output

        assert b"<w:trackRevisions/>" in read_entry(output, "word/settings.xml")
        assert b"trackRevisions" not in read_entry(plain_docx, "word/settings.xml")

        with ReviewDocument(output) as doc:
            result = doc.enable_tracked_changes()
            assert result.success and not result.changed

    def test_save_defaults_to_source(self, plain_docx: Path):
        with ReviewDocument(plain_docx) as doc:
            doc.enable_tracked_changes()
            assert doc.save() == plain_docx
        assert b"<w:trackRevisions/>" in read_entry(plain_docx, "word/settings.xml")

    def test_save_in_memory_requires_path(self, plain_docx: Path):
        with ReviewDocument(plain_docx.read_bytes()) as doc:
            with pytest.raises(ValueError, match="output_path is required"):
                doc.save()

    def test_save_to_bytes(self, plain_docx: Path):
        with ReviewDocument(plain_docx.read_bytes()) as doc:
            doc.enable_tracked_changes()
            data = doc.save_to_bytes()

        with ReviewDocument(data) as reopened:
            assert reopened.tracking_enabled

    def test_in_memory_anonymize_with_explicit_path(self, commented_docx: Path, tmp_path: Path):
        alias_path = tmp_path / "names.json"
        with ReviewDocument(commented_docx.read_bytes()) as doc:
            assert not doc.anonymize_comments().success
            result = doc.anonymize_comments(alias_path)
            assert result.success
            assert doc.comment_authors == ["Author1", "Author2", "Author3"]
        assert alias_path.exists()

    def test_result_str(self, plain_docx: Path):
        with ReviewDocument(plain_docx) as doc:
            assert str(doc.enable_tracked_changes()) == "✓ enable_tracked_changes: OK"
            assert (
                str(doc.enable_tracked_changes())
                == "○ enable_tracked_changes: No change needed."
            )
            assert str(doc.anonymize_comments()).startswith("✗ anonymize_comments")
