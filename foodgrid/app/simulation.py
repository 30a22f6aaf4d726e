"""Learning loop tying the board, the state encoder and the Q-Learning agent."""

import time
from collections import deque
from typing import Callable, Deque, Optional, Tuple

from ..domain.board import Board
from ..domain.encoder import encode
from ..domain.qlearning import QLearningAgent
from ..domain.types import MoveEvent, RunStats, StateLabel, TickResult
from .fsm import RunStateMachine


class Simulation:
    """
    Continuous online learning on a single board.

    Every tick encodes the current state, lets the agent pick an action, applies
    it, derives the reward from the score change and feeds the transition back
    to the agent. There are no episodes; the run lasts until it is stopped.
    """

    def __init__(self, board: Board, agent: QLearningAgent, learn: bool = True,
                 report_window: int = 100, report_interval: int = 0):
        if report_window <= 0:
            raise ValueError(f"report_window must be positive, got {report_window}")
        if report_interval < 0:
            raise ValueError(f"report_interval cannot be negative, got {report_interval}")

        self.board = board
        self.agent = agent
        self.learn = learn
        self.report_interval = report_interval
        self.state_machine = RunStateMachine()

        self._previous_score = board.score
        self._ticks = 0
        self._total_reward = 0
        # (captured, reward) for the most recent ticks
        self._recent: Deque[Tuple[bool, int]] = deque(maxlen=report_window)
        self.last_result: Optional[TickResult] = None

    @property
    def ticks(self) -> int:
        return self._ticks

    @property
    def state(self) -> StateLabel:
        """Current encoded state of the board."""
        return encode(self.board.agent, self.board.food)

    @property
    def stats(self) -> RunStats:
        """Totals so far plus the recent window."""
        return RunStats(
            ticks=self._ticks,
            captures=self.board.captures,
            wall_hits=self.board.wall_hits,
            total_reward=self._total_reward,
            recent_captures=sum(1 for captured, _ in self._recent if captured),
            recent_reward=sum(reward for _, reward in self._recent),
            recent_ticks=len(self._recent),
        )

    def tick(self) -> TickResult:
        """Run one step of the learning loop."""
        previous_state = self.state
        action = self.agent.choose(previous_state)

        moved = self.board.move(action)

        next_state = self.state
        reward = self.board.score - self._previous_score
        if self.learn:
            self.agent.learn(previous_state, action, reward, next_state)
        self._previous_score = self.board.score

        captured = self.board.last_event is MoveEvent.CAPTURE
        self._ticks += 1
        self._total_reward += reward
        self._recent.append((captured, reward))

        self.last_result = TickResult(
            tick=self._ticks,
            state=previous_state,
            action=action,
            moved=moved,
            reward=reward,
            next_state=next_state,
            captured=captured,
            score=self.board.score,
        )

        if self.report_interval and self._ticks % self.report_interval == 0:
            self._report()

        return self.last_result

    def run(self, ticks: Optional[int] = None, delay: float = 0.05,
            on_tick: Optional[Callable[[TickResult], None]] = None,
            poll: Optional[Callable[["Simulation"], None]] = None) -> RunStats:
        """
        Tick repeatedly, sleeping between ticks.

        Args:
            ticks: Number of ticks to run, None to run until stopped
            delay: Seconds to sleep after every tick
            on_tick: Called with each TickResult, typically a renderer
            poll: Called before every tick; may pause or stop the state machine

        Returns:
            Statistics for the whole simulation
        """
        if ticks is not None and ticks < 0:
            raise ValueError(f"ticks cannot be negative, got {ticks}")

        if self.state_machine.is_idle():
            self.state_machine.start()

        completed = 0
        while not self.state_machine.is_stopped():
            if ticks is not None and completed >= ticks:
                self.state_machine.stop()
                break

            if poll:
                poll(self)
            if self.state_machine.is_stopped():
                break
            if self.state_machine.is_paused():
                time.sleep(max(delay, 0.01))
                continue

            result = self.tick()
            completed += 1
            if on_tick:
                on_tick(result)

            if delay > 0:
                time.sleep(delay)

        return self.stats

    def stop(self) -> bool:
        """Stop a running or paused simulation."""
        return self.state_machine.stop()

    def _report(self):
        """Print a one-line progress summary."""
        stats = self.stats
        print(f"Tick {stats.ticks}: Score: {self.board.score}, Captures: {stats.captures}, "
              f"Recent capture rate: {stats.recent_capture_rate:.1%}, "
              f"Recent avg reward: {stats.recent_average_reward:.2f}")
