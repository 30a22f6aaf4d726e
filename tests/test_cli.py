import pytest

from foodgrid.__main__ import build_parser, build_simulation, main


def test_defaults_match_reference_behaviour():
    args = build_parser().parse_args([])
    assert args.ui == "terminal"
    assert args.delay == 0.05
    assert args.ticks is None
    assert args.epsilon == 100
    assert args.learning_rate == 0.3
    assert args.discount == 0.8


def test_build_simulation_from_arguments():
    args = build_parser().parse_args(["--seed", "5", "--epsilon", "0", "--no-learn"])
    sim = build_simulation(args)
    assert sim.board.agent == (0, 0)
    assert sim.board.food != (0, 0)
    assert sim.agent.config.epsilon == 0
    assert sim.learn is False


def test_same_seed_gives_same_run():
    first = build_simulation(build_parser().parse_args(["--seed", "42"]))
    results_a = [first.tick() for _ in range(100)]
    second = build_simulation(build_parser().parse_args(["--seed", "42"]))
    results_b = [second.tick() for _ in range(100)]
    assert results_a == results_b


def test_plain_run_prints_frames_and_summary(capsys):
    exit_code = main(["--ui", "plain", "--ticks", "4", "--delay", "0", "--seed", "1"])
    out = capsys.readouterr().out
    assert exit_code == 0
    assert out.count("|" + " " * 10 + "|") > 0
    assert "Ticks: 4" in out
    assert "Greedy policy:" in out


def test_terminal_falls_back_to_plain_when_not_a_tty(capsys):
    exit_code = main(["--ticks", "1", "--delay", "0", "--seed", "1"])
    out = capsys.readouterr().out
    assert exit_code == 0
    assert "falling back to plain output" in out


@pytest.mark.parametrize("argv", [
    ["--epsilon", "2000"],
    ["--delay", "-1"],
    ["--ticks", "-5"],
    ["--learning-rate", "0"],
])
def test_bad_arguments_exit_with_usage_error(argv):
    with pytest.raises(SystemExit) as excinfo:
        main(argv)
    assert excinfo.value.code == 2
