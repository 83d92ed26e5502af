"""Tests for the eso-manifest command-line interface."""

import io
import json
from pathlib import Path

import pytest

from eso_addon_manifest import cli

VALID_MANIFEST = "## Title: MyAddon\n## Author: me\n## APIVersion: 101041\n## Credits: friends\n"


@pytest.fixture
def valid_file(tmp_path: Path) -> Path:
    path = tmp_path / "MyAddon.txt"
    path.write_text(VALID_MANIFEST, encoding="utf-8")
    return path


class TestMain:
    """Test CLI output and exit codes."""

    def test_prints_json(self, valid_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """Test that the record is written to stdout as JSON."""
        cli.main(["--path", str(valid_file), "--full-validate"])

        captured = capsys.readouterr()
        output = json.loads(captured.out)
        assert output["title"] == "MyAddon"
        assert output["api_version"] == 101041
        assert output["errors"] == []
        assert output["warnings"][0]["kind"] == "UnmappedDirective"
        assert "Warning: unmapped directive: Credits" in captured.err
        assert "Validation successful!" in captured.err

    def test_missing_file(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc:
            cli.main(["--path", str(tmp_path / "missing.txt")])

        assert exc.value.code == cli.EXIT_FAILURE
        assert "does not exist" in capsys.readouterr().err

    def test_strict_fails_on_errors(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Test that --strict exits non-zero but still prints the record."""
        path = tmp_path / "bad.txt"
        path.write_text("## Title: MyAddon\n", encoding="utf-8")

        with pytest.raises(SystemExit) as exc:
            cli.main(["--path", str(path), "--full-validate", "--strict"])

        assert exc.value.code == cli.EXIT_MANIFEST_ERRORS
        captured = capsys.readouterr()
        assert json.loads(captured.out)["title"] == "MyAddon"
        assert "Error: missing required directive: Author" in captured.err

    def test_errors_without_strict_exit_cleanly(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.txt"
        path.write_text("## AddOnVersion: x\n", encoding="utf-8")

        cli.main(["--path", str(path), "--no-schema-check"])

    def test_reads_stdin(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        monkeypatch.setattr("sys.stdin", io.StringIO(VALID_MANIFEST))

        cli.main(["--path", "-"])

        captured = capsys.readouterr()
        assert json.loads(captured.out)["author"] == "me"
        assert "<stdin>" in captured.err

    def test_schema_failure(
        self,
        valid_file: Path,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        monkeypatch.setattr(
            cli,
            "validate_manifest_with_error_details",
            lambda manifest: (False, "Validation error at root: broken"),
        )

        with pytest.raises(SystemExit) as exc:
            cli.main(["--path", str(valid_file)])

        assert exc.value.code == cli.EXIT_FAILURE
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "broken" in captured.err
