"""Unit tests for scan command.

Tests for the CLI scan command implementation.
"""

import json
from pathlib import Path
from unittest.mock import patch

from reclaimspace.cli.main import app
from reclaimspace.core.config import SettingsError
from reclaimspace.scanner.ignore import IGNORE_FILE_NAME
from typer.testing import CliRunner

runner = CliRunner()


class TestScanCommand:
    """Tests for reclaimspace scan command."""

    def test_scan_help(self) -> None:
        """Scan command shows help."""
        result = runner.invoke(app, ["scan", "--help"])
        assert result.exit_code == 0
        assert "reclaimable folders" in result.stdout

    def test_scan_table(self, project_tree: Path) -> None:
        """Scan lists targets and a summary."""
        result = runner.invoke(app, ["-q", "scan", str(project_tree)])

        assert result.exit_code == 0
        assert "Reclaimable Folders" in result.stdout
        assert "node_modules" in result.stdout
        assert "Found 4 folder(s), 10.74 KB reclaimable" in result.stdout

    def test_scan_json(self, project_tree: Path) -> None:
        """JSON output lists ranked targets with their fields."""
        result = runner.invoke(app, ["scan", str(project_tree), "--format", "json"])

        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert [item["name"] for item in data] == ["node_modules", ".next", "dist", "coverage"]
        assert data[0]["category"] == "node_modules"
        assert data[0]["size"] == 5000
        assert "index.js" in data[2]["build_patterns"]

    def test_scan_json_limit(self, project_tree: Path) -> None:
        """--limit caps the number of reported targets."""
        result = runner.invoke(app, ["scan", str(project_tree), "-f", "json", "--limit", "2"])

        assert result.exit_code == 0
        assert len(json.loads(result.stdout)) == 2

    def test_scan_table_limit_note(self, project_tree: Path) -> None:
        """A limited table says how many targets were hidden."""
        result = runner.invoke(app, ["-q", "scan", str(project_tree), "-l", "1"])

        assert result.exit_code == 0
        assert "showing 1 of 4, limited to 1" in result.stdout

    def test_scan_ignore_option(self, project_tree: Path) -> None:
        """--ignore excludes matching folders."""
        result = runner.invoke(
            app, ["scan", str(project_tree), "-f", "json", "--ignore", "coverage, dist"]
        )

        assert result.exit_code == 0
        names = [item["name"] for item in json.loads(result.stdout)]
        assert names == ["node_modules", ".next"]

    def test_scan_include_option(self, tmp_path: Path, make_dir) -> None:
        """--include switches to custom folder names."""
        make_dir(tmp_path / "p" / "custom-build", 100)
        make_dir(tmp_path / "p" / "node_modules", 100)

        result = runner.invoke(
            app, ["scan", str(tmp_path), "-f", "json", "--include", "custom-build"]
        )

        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert [(d["name"], d["category"]) for d in data] == [("custom-build", "custom")]

    def test_scan_include_from_settings(self, tmp_path: Path, make_dir, default_settings) -> None:
        """Settings supply include patterns when none are given."""
        default_settings.include.append("generated")
        make_dir(tmp_path / "p" / "generated", 100)

        result = runner.invoke(app, ["scan", str(tmp_path), "-f", "json"])

        assert [d["name"] for d in json.loads(result.stdout)] == ["generated"]

    def test_scan_ignore_file(self, project_tree: Path, monkeypatch) -> None:
        """Patterns from the ignore file in the working directory apply."""
        (project_tree / IGNORE_FILE_NAME).write_text("# generated\nnode_modules\n")
        monkeypatch.chdir(project_tree)

        result = runner.invoke(app, ["scan", "-f", "json"])

        assert result.exit_code == 0
        names = [item["name"] for item in json.loads(result.stdout)]
        assert "node_modules" not in names
        assert len(names) == 3

    def test_scan_build_analysis(self, project_tree: Path) -> None:
        """--build-analysis prints the analysis after the table."""
        result = runner.invoke(app, ["-q", "scan", str(project_tree), "--build-analysis"])

        assert result.exit_code == 0
        assert "Build Analysis" in result.stdout
        assert "Common patterns" in result.stdout

    def test_scan_clean_workspace(self, tmp_path: Path) -> None:
        """An empty scan prints a success message."""
        (tmp_path / "project").mkdir()

        result = runner.invoke(app, ["-q", "scan", str(tmp_path)])

        assert result.exit_code == 0
        assert "Your workspace is clean!" in result.stdout

    def test_scan_missing_directory(self, tmp_path: Path) -> None:
        """A missing directory is an error."""
        result = runner.invoke(app, ["scan", str(tmp_path / "nope")])

        assert result.exit_code == 1
        assert "does not exist" in result.output

    def test_scan_skips_missing_among_valid(self, project_tree: Path, tmp_path: Path) -> None:
        """Missing roots are reported but valid ones are still scanned."""
        result = runner.invoke(
            app, ["scan", str(tmp_path / "nope"), str(project_tree), "-f", "json"]
        )

        assert result.exit_code == 0
        assert "does not exist" in result.output

    def test_scan_bad_settings(self, project_tree: Path) -> None:
        """Invalid settings abort the scan."""
        with patch(
            "reclaimspace.cli.scanning.load_settings",
            side_effect=SettingsError("Invalid settings content: bad"),
        ):
            result = runner.invoke(app, ["scan", str(project_tree)])

        assert result.exit_code == 1
        assert "Invalid settings content" in result.output

    def test_scan_reports_enumeration_errors(self, project_tree: Path) -> None:
        """Unexpected read errors are shown as warnings."""
        with patch(
            "reclaimspace.scanner.collector.async_scandir",
            side_effect=OSError(5, "Input/output error"),
        ):
            result = runner.invoke(app, ["-q", "scan", str(project_tree)])

        assert result.exit_code == 0
        assert "Error collecting directories" in result.output

    def test_scan_default_cwd(self, project_tree: Path, monkeypatch) -> None:
        """Without arguments the working directory is scanned."""
        monkeypatch.chdir(project_tree)

        result = runner.invoke(app, ["scan", "-f", "json"])

        assert len(json.loads(result.stdout)) == 4
