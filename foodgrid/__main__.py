"""Main entry point for the food grid Q-Learning demo."""

import argparse
import sys
from typing import List, Optional

from .app.simulation import Simulation
from .domain.board import Board
from .domain.qlearning import QLearningAgent
from .domain.types import LearnerConfig, WorldConfig
from .utils.rng import set_global_seed


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="foodgrid",
        description="Watch a tabular Q-Learning agent learn to chase food on a 10x10 grid",
    )
    parser.add_argument("--ui", choices=["terminal", "plain", "qt"], default="terminal",
                        help="Live full-screen view, plain text frames, or a Qt window")
    parser.add_argument("--seed", type=int, help="Seed for the random stream")
    parser.add_argument("--delay", type=float, default=0.05, help="Seconds between ticks")
    parser.add_argument("--ticks", type=int, help="Stop after this many ticks (default: run forever)")
    parser.add_argument("--epsilon", type=int, default=100,
                        help="Exploration threshold out of 1000")
    parser.add_argument("--learning-rate", type=float, default=0.3, help="Q-Learning step size")
    parser.add_argument("--discount", type=float, default=0.8, help="Discount factor")
    parser.add_argument("--report-interval", type=int, default=0,
                        help="Print a progress line every N ticks (plain UI only)")
    parser.add_argument("--no-learn", action="store_true", help="Act without updating Q-values")
    return parser


def build_simulation(args: argparse.Namespace) -> Simulation:
    """Create the board, agent and simulation described by the arguments."""
    rng = set_global_seed(args.seed)
    learner_config = LearnerConfig(
        learning_rate=args.learning_rate,
        discount_factor=args.discount,
        epsilon=args.epsilon,
    )
    board = Board(WorldConfig(), rng=rng)
    agent = QLearningAgent(learner_config, rng=rng)
    report_interval = args.report_interval if args.ui == "plain" else 0
    return Simulation(board, agent, learn=not args.no_learn, report_interval=report_interval)


def print_summary(simulation: Simulation):
    """Print end-of-run statistics and the greedy policy."""
    stats = simulation.stats
    print("\n🧠 Food Grid Q-Learning summary")
    print("=" * 40)
    print(f"   Ticks: {stats.ticks}")
    print(f"   Final score: {simulation.board.score}")
    print(f"   Captures: {stats.captures}")
    print(f"   Wall hits: {stats.wall_hits}")
    print(f"   Capture rate: {stats.capture_rate:.1%}")
    print(f"   Q-table entries: {len(simulation.agent.table)}")
    print("   Greedy policy:")
    for state, action in simulation.agent.policy().items():
        print(f"      {state.name:<10} -> {action.name if action is not None else '-'}")


def run_qt(simulation: Simulation, ticks: Optional[int], delay: float) -> int:
    """Run the simulation in a Qt window."""
    from PySide6.QtWidgets import QApplication

    app = QApplication.instance() or QApplication(sys.argv)
    app.setApplicationName("Food Grid Q-Learning")

    # Import UI components (after QApplication is created)
    from .app.controller import SimulationController
    from .ui.main_window import MainWindow

    controller = SimulationController(simulation, delay_ms=max(1, int(delay * 1000)), max_ticks=ticks)
    window = MainWindow(controller)

    window.show()
    controller.start()
    try:
        return app.exec()
    finally:
        controller.cleanup()


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the food grid demo."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.delay < 0:
        parser.error("--delay cannot be negative")
    if args.ticks is not None and args.ticks < 0:
        parser.error("--ticks cannot be negative")
    if args.report_interval < 0:
        parser.error("--report-interval cannot be negative")

    try:
        simulation = build_simulation(args)
    except ValueError as e:
        parser.error(str(e))

    ui = args.ui
    if ui == "terminal" and not sys.stdout.isatty():
        print("stdout is not a terminal, falling back to plain output")
        ui = "plain"

    try:
        if ui == "qt":
            exit_code = run_qt(simulation, args.ticks, args.delay)
        elif ui == "plain":
            from .ui.terminal import StreamRenderer
            renderer = StreamRenderer(simulation, sys.stdout)
            renderer.draw()
            simulation.run(ticks=args.ticks, delay=args.delay, on_tick=renderer.draw)
            exit_code = 0
        else:
            from .ui.terminal import run_in_terminal
            run_in_terminal(simulation, ticks=args.ticks, delay=args.delay)
            exit_code = 0
    except KeyboardInterrupt:
        print("\n⏹️  Stopped by user")
        exit_code = 0
    except Exception as e:
        print(f"\n❌ Simulation failed: {e}")
        return 1

    print_summary(simulation)
    return exit_code


if __name__ == "__main__":
    sys.exit(main())
