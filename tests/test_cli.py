import pytest

from adventcal.cli import format_duration, icon, main, run, show_all

DAY02_EXAMPLE = """7 6 4 2 1
1 2 7 8 9
9 7 6 2 1
1 3 2 4 5
8 6 4 4 1
1 3 6 7 9
"""


@pytest.fixture
def inputs(tmp_path):
    folder = tmp_path / "year2024"
    folder.mkdir()
    (folder / "day02.example").write_text(DAY02_EXAMPLE, encoding="utf-8")
    return tmp_path


def test_format_duration_whole_and_fraction():
    assert format_duration(1.5) == "Execution time: 1.5000 seconds"


def test_format_duration_keeps_unpadded_parts():
    assert format_duration(2.000003) == "Execution time: 2.03 seconds"


def test_format_duration_shape():
    text = format_duration(0.25)
    assert text.startswith("Execution time: 0.")
    assert text.endswith(" seconds")


def test_icons_show_their_marks():
    assert "✓" in icon(True)
    assert "x" in icon(False)
    assert "?" in icon(None)
    assert len({icon(True), icon(False), icon(None)}) == 3


def test_run_prints_answers(inputs, capsys):
    run(2024, 2, True, inputs)
    out = capsys.readouterr().out
    assert "AoC 2024-2: Red-Nosed Reports" in out
    assert "Solution 1: 2" in out
    assert "Solution 2: 4" in out
    assert "Execution time:" in out


def test_run_unknown_day_raises(inputs):
    with pytest.raises(LookupError, match="Day 5 not found for year 2024."):
        run(2024, 5, True, inputs)


def test_run_unknown_year_raises(inputs):
    with pytest.raises(ValueError, match="Year 2023 not found."):
        run(2023, 2, True, inputs)


def test_show_all_unknown_year_raises(tmp_path):
    with pytest.raises(ValueError):
        show_all(2023, tmp_path)


def test_main_run(inputs, capsys):
    assert main(["run", "-d", "2", "-e", "--root", str(inputs)]) == 0
    assert "Red-Nosed Reports" in capsys.readouterr().out


def test_main_missing_day_reports_error(inputs, capsys):
    assert main(["run", "--day", "5", "--root", str(inputs)]) == 1
    assert "Day 5 not found for year 2024." in capsys.readouterr().err


def test_main_all_without_inputs_fails(tmp_path, capsys):
    assert main(["all", "--root", str(tmp_path)]) == 1
    assert "Expected input file" in capsys.readouterr().err


@pytest.mark.parametrize(
    "argv",
    [
        ["run", "-d", "26"],
        ["run", "-d", "0"],
        ["run", "-y", "2023", "-d", "1"],
        ["run"],
        [],
    ],
)
def test_main_rejects_bad_arguments(argv):
    with pytest.raises(SystemExit) as excinfo:
        main(argv)
    assert excinfo.value.code == 2