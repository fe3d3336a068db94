"""Tests for the command-line interface."""

import json
from pathlib import Path

from _docx_helpers import comments_xml, create_docx, read_entry, settings_xml
from typer.testing import CliRunner

from python_docx_review import __version__
from python_docx_review.cli import app

runner = CliRunner()


class TestCLIVersion:
    """Tests for version flag."""

    def test_version_flag(self):
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.stdout

    def test_version_short_flag(self):
        result = runner.invoke(app, ["-v"])
        assert result.exit_code == 0
        assert __version__ in result.stdout


class TestCLIHelp:
    def test_main_help(self):
        result = runner.invoke(app, ["--help"])
        assert result.exit_code == 0
        for command in ("track", "anonymize", "deanonymize", "authors"):
            assert command in result.stdout

    def test_anonymize_help(self):
        result = runner.invoke(app, ["anonymize", "--help"])
        assert result.exit_code == 0
        assert "--aliases" in result.stdout
        assert "--output" in result.stdout


class TestTrack:
    def test_track_in_place(self, plain_docx: Path):
        result = runner.invoke(app, ["track", str(plain_docx)])
        assert result.exit_code == 0
        assert "Enabled change tracking" in result.stdout
        assert b"<w:trackRevisions/>" in read_entry(plain_docx, "word/settings.xml")

    def test_track_twice(self, plain_docx: Path):
        runner.invoke(app, ["track", str(plain_docx)])
        result = runner.invoke(app, ["track", str(plain_docx)])
        assert result.exit_code == 0
        assert "already enabled" in result.stdout

    def test_track_to_output(self, plain_docx: Path, tmp_path: Path):
        output = tmp_path / "out.docx"
        result = runner.invoke(app, ["track", str(plain_docx), "-o", str(output)])
        assert result.exit_code == 0
        assert b"trackRevisions" in read_entry(output, "word/settings.xml")
        assert b"trackRevisions" not in read_entry(plain_docx, "word/settings.xml")

    def test_track_already_tracked_still_writes_output(self, tmp_path: Path):
        docx = create_docx(
            tmp_path / "tracked.docx",
            settings=settings_xml('<w:zoom w:percent="100"/><w:trackRevisions/>'),
        )
        output = tmp_path / "out.docx"
        result = runner.invoke(app, ["track", str(docx), "-o", str(output)])
        assert result.exit_code == 0
        assert "already enabled" in result.stdout
        assert output.exists()
        assert read_entry(output, "word/settings.xml") == read_entry(docx, "word/settings.xml")

    def test_track_missing_settings(self, tmp_path: Path):
        docx = create_docx(tmp_path / "nosettings.docx", settings=None)
        result = runner.invoke(app, ["track", str(docx)])
        assert result.exit_code == 1
        assert "Can't access word/settings.xml!" in result.output

    def test_track_missing_file(self, tmp_path: Path):
        result = runner.invoke(app, ["track", str(tmp_path / "nope.docx")])
        assert result.exit_code == 1
        assert "Error:" in result.output


class TestAnonymize:
    def test_round_trip(self, commented_docx: Path, tmp_path: Path):
        review = tmp_path / "for_review.docx"
        result = runner.invoke(app, ["anonymize", str(commented_docx), "-o", str(review)])
        assert result.exit_code == 0
        assert "Anonymized 3 authors" in result.stdout

        alias_file = tmp_path / "for_review.json"
        assert json.loads(alias_file.read_text(encoding="utf-8")) == {
            "A": "Author1",
            "B": "Author2",
            "C": "Author3",
        }

        result = runner.invoke(app, ["authors", str(review)])
        assert "Author1" in result.stdout
        assert "  A\n" not in result.stdout

        result = runner.invoke(app, ["deanonymize", str(review)])
        assert result.exit_code == 0
        assert read_entry(review, "word/comments.xml") == read_entry(
            commented_docx, "word/comments.xml"
        )

    def test_explicit_alias_file(self, commented_docx: Path, tmp_path: Path):
        alias_file = tmp_path / "names.yaml"
        result = runner.invoke(app, ["anonymize", str(commented_docx), "-a", str(alias_file)])
        assert result.exit_code == 0
        assert alias_file.exists()

        result = runner.invoke(app, ["deanonymize", str(commented_docx), "-a", str(alias_file)])
        assert result.exit_code == 0

    def test_no_comments_fails_without_saving(self, tmp_path: Path):
        docx = create_docx(tmp_path / "empty.docx", comments=comments_xml([]))
        before = docx.read_bytes()
        result = runner.invoke(app, ["anonymize", str(docx)])
        assert result.exit_code == 1
        assert "No comments found" in result.output
        assert docx.read_bytes() == before

    def test_deanonymize_without_alias_file(self, commented_docx: Path):
        result = runner.invoke(app, ["deanonymize", str(commented_docx)])
        assert result.exit_code == 1
        assert "Can't load authors" in result.output


class TestAuthors:
    def test_lists_authors(self, commented_docx: Path):
        result = runner.invoke(app, ["authors", str(commented_docx)])
        assert result.exit_code == 0
        assert "Comments: 4" in result.stdout
        assert "Change tracking: off" in result.stdout
        lines = [line.strip() for line in result.stdout.splitlines()]
        assert lines[-3:] == ["A", "B", "C"]

    def test_details_lists_each_comment(self, commented_docx: Path):
        result = runner.invoke(app, ["authors", str(commented_docx), "--details"])
        assert result.exit_code == 0
        assert "  [0] A (2024-03-01T10:00:00+00:00): Comment 0" in result.stdout
        assert "  [3] C (2024-03-01T10:00:00+00:00): Comment 3" in result.stdout
