import pytest

from apps.cli.run import main


def test_all_mode_prints_summary(capsys):
    assert main(["--all", "--length", "1", "--progress", "plain"]) == 0
    out = capsys.readouterr().out
    assert "Solving problem #0" in out and "Solving problem #3" in out
    assert "Average: 2.25" in out
    assert "Worst Case: b | 3 tries" in out


def test_all_mode_writes_reports(tmp_path, capsys):
    assert main(["--all", "--length", "1", "--progress", "off", "--outdir", str(tmp_path)]) == 0
    assert len(list(tmp_path.glob("run_*.csv"))) == 1
    assert len(list(tmp_path.glob("run_*_manifest.json"))) == 1


def test_once_mode(capsys):
    assert main(["--once", "--length", "3", "--seed", "7", "--solver", "entropy"]) == 0
    lines = capsys.readouterr().out.splitlines()
    secret = lines[0].split(": ")[1]
    assert lines[1].startswith("Guess #1: ")
    assert lines[-1].startswith(f"Solved: {secret} in ")


def test_assist_mode_unavailable(capsys):
    assert main(["--assist", "--length", "1"]) == 2
    assert "not implemented" in capsys.readouterr().err


@pytest.mark.parametrize("argv", [
    ["--all", "--once"],
    [],
    ["--all", "--solver", "nope"],
    ["--all", "--length", "9"],
    ["--all", "--length", "2.5"],
])
def test_bad_arguments(argv):
    with pytest.raises(SystemExit):
        main(argv)
