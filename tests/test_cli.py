import pytest

from pyrohex.cli import build_parser, main


def test_parser_defaults():
    args = build_parser().parse_args(["-s"])
    assert args.simulation is True
    assert args.game is False
    assert args.grid == ["25", "50"]
    assert args.steps is None


def test_parser_reads_grid_and_steps():
    args = build_parser().parse_args(["-s", "--steps", "3", "--grid", "7", "9"])
    assert args.steps == 3
    assert args.grid == ["7", "9"]


@pytest.mark.parametrize(
    "argv",
    [
        [],
        ["-g", "-s"],
        ["-g", "--steps", "2"],
        ["-s", "--steps", "-1"],
        ["-s", "--steps", "many"],
    ],
)
def test_invalid_arguments_exit_with_usage_error(argv):
    with pytest.raises(SystemExit) as excinfo:
        main(argv)
    assert excinfo.value.code == 2


def test_simulation_requires_steps():
    with pytest.raises(SystemExit) as excinfo:
        main(["-s"])
    assert excinfo.value.code == 2


def test_version_flag(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["--version"])
    assert excinfo.value.code == 0
    assert "1.0" in capsys.readouterr().out


def test_simulation_writes_plot(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    assert main(["-s", "--steps", "1", "--grid", "3", "4"]) == 0
    output = capsys.readouterr().out
    assert "Grid size: 3 x 4" in output
    assert "simulation flag present: true" in output
    assert (tmp_path / "survivors_vs_density.png").stat().st_size > 0


def test_unparsable_grid_falls_back_to_default(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    assert main(["-s", "--steps", "0", "--grid", "abc", "4"]) == 0
    assert "Grid size: 25 x 4" in capsys.readouterr().out
    assert (tmp_path / "survivors_vs_density.png").exists()