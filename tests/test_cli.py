"""Tests for the file-identify command line and report helpers."""

from __future__ import annotations

import csv
import json
from pathlib import Path

import pytest

from fileformat.common.report import human_size, print_rows, write_csv, write_json
from fileformat.identify.cli import main

PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 32


def _run(argv: list[str]) -> int:
    with pytest.raises(SystemExit) as excinfo:
        main(argv)
    return excinfo.value.code


@pytest.fixture()
def png_file(tmp_path: Path) -> Path:
    path = tmp_path / "upload.bin"
    path.write_bytes(PNG_BYTES)
    return path


# ---------------------------------------------------------------------------
# main()
# ---------------------------------------------------------------------------


class TestMain:
    """Exit codes and report output of the CLI."""

    def test_list_formats(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert _run(["--list-formats"]) == 0
        out = capsys.readouterr().out
        assert "known formats" in out

    def test_identify_file(
        self, png_file: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        assert _run([str(png_file)]) == 0
        out = capsys.readouterr().out
        assert "Identification Results" in out
        assert "Identified" in out

    def test_json_report(self, png_file: Path, tmp_path: Path) -> None:
        report = tmp_path / "out" / "report.json"
        assert _run([str(png_file), "--json-report", str(report)]) == 0

        data = json.loads(report.read_text(encoding="utf-8"))
        assert data["total_files"] == 1
        assert data["identified"] == 1
        assert data["errors"] == 0
        assert data["max_bytes"] == 36870
        [record] = data["results"]
        assert record["media_type"] == "image/png"
        assert record["extension"] == "png"
        assert record["path"] == str(png_file)

    def test_csv_report(self, png_file: Path, tmp_path: Path) -> None:
        report = tmp_path / "report.csv"
        assert _run([str(png_file), "--csv-report", str(report)]) == 0

        with open(report, newline="", encoding="utf-8") as fh:
            rows = list(csv.DictReader(fh))
        assert list(rows[0]) == [
            "path", "media_type", "extension", "name",
            "short_name", "kind", "bytes_read", "error",
        ]
        assert rows[0]["extension"] == "png"

    def test_missing_file_exits_nonzero(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        assert _run([str(tmp_path / "missing.bin")]) == 1
        out = capsys.readouterr().out
        assert "warning: cannot read" in out
        assert "CRITICAL" not in out

    def test_directory_with_max_bytes(self, png_file: Path, tmp_path: Path) -> None:
        report = tmp_path / "report.json"
        argv = [str(png_file.parent), "--max-bytes", "4", "--json-report", str(report)]
        assert _run(argv) == 0
        data = json.loads(report.read_text(encoding="utf-8"))
        [record] = data["results"]
        assert record["bytes_read"] == 4
        assert record["extension"] == "bin"

    def test_empty_directory(self, tmp_path: Path) -> None:
        empty = tmp_path / "empty"
        empty.mkdir()
        assert _run([str(empty)]) == 0

    def test_no_paths_is_usage_error(self) -> None:
        assert _run([]) == 2

    @pytest.mark.parametrize("value", ["-1", "36871"])
    def test_bad_max_bytes_is_usage_error(self, png_file: Path, value: str) -> None:
        assert _run([str(png_file), "--max-bytes", value]) == 2


# ---------------------------------------------------------------------------
# Report helpers
# ---------------------------------------------------------------------------


class TestReportHelpers:
    """Report files and formatting helpers."""

    @pytest.mark.parametrize(
        "n, expected",
        [(0, "0 bytes"), (512, "512 bytes"), (36870, "36.9 kB")],
    )
    def test_human_size(self, n: int, expected: str) -> None:
        assert human_size(n) == expected

    def test_write_json(self, tmp_path: Path) -> None:
        out = write_json(tmp_path / "nested" / "r.json", {"name": "Ogg Speex", "n": 1})
        assert out.exists()
        assert json.loads(out.read_text(encoding="utf-8")) == {"name": "Ogg Speex", "n": 1}

    def test_write_csv_drops_extra_keys_and_blanks_none(self, tmp_path: Path) -> None:
        out = write_csv(
            tmp_path / "r.csv",
            [{"path": "a", "error": None, "info": object()}],
            ["path", "error"],
        )
        with open(out, newline="", encoding="utf-8") as fh:
            assert list(csv.DictReader(fh)) == [{"path": "a", "error": ""}]

    def test_rows_are_not_markup(self, capsys: pytest.CaptureFixture[str]) -> None:
        """File names with brackets are printed as-is."""
        print_rows(["Path"], [("[red]x[/red]",)])
        assert "[red]x[/red]" in capsys.readouterr().out
