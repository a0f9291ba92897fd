import io
import json
from pathlib import Path

import pytest

from contraption.cli import main


def test_energize_mode_prints_single_count(capsys: pytest.CaptureFixture[str]):
    exit_code = main(["--input", "example"])

    assert exit_code == 0
    assert capsys.readouterr().out == "46\n"


def test_maximize_mode_prints_best_count(capsys: pytest.CaptureFixture[str]):
    exit_code = main(["--input", "example", "--mode", "maximize", "--workers", "2", "--backend", "threading"])

    assert exit_code == 0
    assert capsys.readouterr().out == "51\n"


def test_reads_from_stdin(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]):
    monkeypatch.setattr("sys.stdin", io.StringIO(".....\n.....\n\n"))

    assert main([]) == 0
    assert capsys.readouterr().out.strip() == "5"


def test_custom_entry_and_map(capsys: pytest.CaptureFixture[str]):
    exit_code = main(["--input", "example", "--start", "9", "0", "--direction", "down", "--map"])
    lines = capsys.readouterr().out.splitlines()

    assert exit_code == 0
    assert int(lines[0]) >= 1
    assert len(lines) == 11
    assert lines[1][9] == "#"


def test_json_summary_for_maximize(capsys: pytest.CaptureFixture[str]):
    main(["--input", "example", "--mode", "maximize", "--workers", "1", "--json"])
    payload = json.loads(capsys.readouterr().out)

    assert payload["energized"] == 51
    assert payload["dimensions"] == "10x10"
    assert set(payload["entry"]) == {"position", "direction"}


def test_json_summary_for_energize(capsys: pytest.CaptureFixture[str]):
    main(["--input", "example", "--json"])
    payload = json.loads(capsys.readouterr().out)

    assert payload["energized"] == 46
    assert payload["entry"] == {"position": [0, 0], "direction": "RIGHT"}


def test_invalid_tile_reports_position(tmp_path: Path, capsys: pytest.CaptureFixture[str]):
    bad = tmp_path / "bad.txt"
    bad.write_text("..\n.#\n")

    exit_code = main(["--input", str(bad)])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert captured.out == ""
    assert "'#'" in captured.err
    assert "(1, 1)" in captured.err


def test_empty_stdin_is_an_error(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]):
    monkeypatch.setattr("sys.stdin", io.StringIO(""))

    assert main([]) == 1
    assert "empty" in capsys.readouterr().err


def test_missing_input_is_an_error(capsys: pytest.CaptureFixture[str]):
    assert main(["--input", "no_such_layout"]) == 1
    assert "error:" in capsys.readouterr().err


def test_lists_bundled_inputs(capsys: pytest.CaptureFixture[str]):
    exit_code = main(["--list-inputs"])
    output = capsys.readouterr().out

    assert exit_code == 0
    assert "Available inputs" in output
    assert "example" in output


def test_render_writes_an_image(tmp_path: Path, capsys: pytest.CaptureFixture[str]):
    target = tmp_path / "renders" / "example.bmp"

    assert main(["--input", "example", "--render", str(target)]) == 0
    assert capsys.readouterr().out == "46\n"
    assert target.exists()
    assert target.stat().st_size > 0
