from __future__ import annotations

import pytest

import main
import plot_thresholds
from bet_thresholds.errors import EmptyInputError
from bet_thresholds.grid import GridRow, build_grid
from bet_thresholds.report import format_summary, format_table, plot_thresholds as plot_grid, summarize


def test_summarize_default_grid(default_grid: list[GridRow]) -> None:
    summary = summarize(default_grid)
    assert list(summary.slopes) == [0.1, 0.5, 0.9]
    assert summary.slopes[0.1] > summary.slopes[0.5] > summary.slopes[0.9]
    assert summary.max_error <= 2


def test_summarize_empty_grid_raises() -> None:
    with pytest.raises(EmptyInputError):
        summarize([])


def test_format_summary_mentions_each_level(default_grid: list[GridRow]) -> None:
    text = format_summary(summarize(default_grid))
    assert "10% confidence" in text
    assert "50% confidence" in text
    assert "90% confidence" in text
    assert "rule of thumb: 0.40" in text
    assert "rule of thumb: 0.25" in text
    assert "never off by more than" in text


def test_format_table_has_row_per_dice_count() -> None:
    table = format_table(build_grid([0.1, 0.9], 6))
    lines = table.splitlines()
    assert lines[0].split() == ["Dice", "10%", "90%"]
    assert len(lines) == 2 + 7
    assert lines[-1].split() == ["6", "4/2", "1/2"]


def test_plot_thresholds_writes_png(tmp_path) -> None:
    output = tmp_path / "bets.png"
    result = plot_grid(build_grid(max_dice=10), str(output))
    assert result == str(output)
    assert output.read_bytes()[:8] == b"\x89PNG\r\n\x1a\n"


def test_main_prints_summary(capsys: pytest.CaptureFixture[str]) -> None:
    args = main.build_parser().parse_args(["--max-dice", "20", "--table"])
    assert main.main(args) == 0
    out = capsys.readouterr().out
    assert "Liar's Dice Bet Thresholds" in out
    assert "Recovered rules of thumb" in out
    assert "Dice" in out


def test_main_reports_unsupported_confidence(capsys: pytest.CaptureFixture[str]) -> None:
    args = main.build_parser().parse_args(["--confidences", "0.3"])
    assert main.main(args) == 1
    assert "Error: No approximation for confidence 0.3" in capsys.readouterr().out


def test_main_reports_insufficient_data(capsys: pytest.CaptureFixture[str]) -> None:
    args = main.build_parser().parse_args(["--max-dice", "0"])
    assert main.main(args) == 1
    assert "Error: Need at least 2 distinct dice counts" in capsys.readouterr().out


def test_plot_script_writes_to_nested_directory(tmp_path, capsys: pytest.CaptureFixture[str]) -> None:
    output = tmp_path / "plots" / "thresholds.png"
    assert plot_thresholds.main(["--max-dice", "8", "--output", str(output)]) == 0
    assert output.exists()
    assert "Plot saved to" in capsys.readouterr().out


def test_plot_script_rejects_negative_dice(tmp_path, capsys: pytest.CaptureFixture[str]) -> None:
    assert plot_thresholds.main(["--max-dice", "-1", "--output", str(tmp_path / "x.png")]) == 1
    assert "Error:" in capsys.readouterr().out
