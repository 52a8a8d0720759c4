import math

import matplotlib

matplotlib.use("Agg")

from coltable_demos.__main__ import main as demo_main  # noqa: E402
from coltable_demos.cli.euler import TaylorConfig, taylor_steps  # noqa: E402
from coltable_demos.cli.example import CONCEAL, REVEAL, magic  # noqa: E402

from coltable import Phase  # noqa: E402


def test_taylor_steps_converge_to_e():
    steps = list(taylor_steps(TaylorConfig()))

    assert [s.iteration for s in steps] == list(range(1, 11))
    assert [s.converges for s in steps] == [False] * 9 + [True]
    assert abs(steps[-1].difference) <= 1e-6
    assert abs(steps[-1].estimate - math.e) < 1e-6


def test_taylor_steps_respect_iteration_cap():
    steps = list(taylor_steps(TaylorConfig(x=50.0, eps=1e-30, max_iterations=5)))
    assert len(steps) == 5
    assert not any(s.converges for s in steps)


def test_euler_cli_table(capsys):
    assert demo_main(["euler", "--no-color"]) == 0
    lines = capsys.readouterr().out.splitlines()

    assert lines[0].split() == ["ITERATION", "DIFFERENCE", "CONVERGES", "EXPONENTIAL"]
    assert len(lines) == 11
    assert lines[1].split() == ["1", "1.000000", "no", "1.000000"]
    assert lines[-1].split()[2] == "yes"


def test_euler_cli_plot(tmp_path, capsys):
    target = tmp_path / "figs" / "euler.png"
    assert demo_main(["euler", "--no-color", "--plot", str(target)]) == 0
    assert target.exists()
    assert "Saved plot to" in capsys.readouterr().out


def test_example_cli_plain(capsys):
    assert demo_main(["example", "--rows", "3", "--no-color"]) == 0
    out = capsys.readouterr().out

    assert "\x1b" not in out
    assert out.splitlines() == [
        "FOO  IS GREEN  BAR  " + " " * 14 + "MAGIC  ",
        "  1  " + " " * 6 + "no  " + "Testing 123 -> 42  " + "42  ",
        "  2  " + " " * 5 + "yes  " + "Testing 123 -> 43  " + "42  ",
        "  3  " + " " * 6 + "no  " + "Testing 123 -> 44  " + "42  ",
    ]


def test_example_cli_colored(capsys):
    assert demo_main(["example", "--rows", "2", "--color"]) == 0
    out = capsys.readouterr().out.splitlines()

    # odd rows green, even rows red, always bold
    assert "\x1b[31m\x1b[1mno  \x1b[m\x1b[22m" in out[1]
    assert "\x1b[32m\x1b[1myes  \x1b[m\x1b[22m" in out[2]
    assert f"{CONCEAL}42  {REVEAL}" in out[1]


def test_magic_decorator():
    assert magic(Phase.START) == CONCEAL
    assert magic(Phase.END) == REVEAL


def test_csv_cli(tmp_path, capsys):
    path = tmp_path / "scores.csv"
    path.write_text("name , games\nalpha,3\nbeta,12\n")

    assert demo_main(["csv", str(path), "--no-color"]) == 0
    assert capsys.readouterr().out.splitlines() == [
        "name   games  ",
        "alpha  3  ",
        "beta   12  ",
    ]


def test_csv_cli_missing_file(tmp_path, capsys):
    assert demo_main(["csv", str(tmp_path / "nope.csv")]) == 1
    assert "CSV not found" in capsys.readouterr().err


def test_unknown_subcommand(capsys):
    assert demo_main(["bogus"]) == 2
    assert "Usage:" in capsys.readouterr().out
