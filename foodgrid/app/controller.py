"""Qt controller driving a simulation from a timer for the window UI."""

from typing import Optional
from PySide6.QtCore import QObject, QTimer, Signal

from ..domain.types import TickResult
from .fsm import RunState
from .simulation import Simulation


class SimulationController(QObject):
    """
    Controller that ticks the simulation and connects it to the UI.

    Signals:
        state_changed: Emitted when the run state changes
        tick_completed: Emitted after every tick with its TickResult
        board_updated: Emitted when the board needs to be redrawn
        error_occurred: Emitted when an error occurs
    """

    # Qt Signals
    state_changed = Signal(object)  # RunState
    tick_completed = Signal(object)  # TickResult
    board_updated = Signal()
    error_occurred = Signal(str)  # Error message

    def __init__(self, simulation: Simulation, delay_ms: int = 50, max_ticks: Optional[int] = None):
        super().__init__()
        self._simulation = simulation
        self._state_machine = simulation.state_machine
        self._delay_ms = delay_ms
        self._max_ticks = max_ticks  # None runs until stopped

        self._timer = QTimer()
        self._timer.timeout.connect(self._on_timer_tick)

        self._setup_state_callbacks()

    def _setup_state_callbacks(self):
        """Setup callbacks for state machine transitions."""
        for state in RunState:
            self._state_machine.on_state_enter(state, self._on_state_entered)

    # Properties

    @property
    def simulation(self) -> Simulation:
        return self._simulation

    @property
    def current_state(self) -> RunState:
        return self._state_machine.current_state

    @property
    def delay_ms(self) -> int:
        return self._delay_ms

    # Run control

    def start(self) -> bool:
        """Start ticking, unless the tick limit is already reached."""
        if self._limit_reached():
            return False
        if not self._state_machine.start():
            return False
        self._timer.start(self._delay_ms)
        return True

    def pause(self) -> bool:
        if not self._state_machine.pause():
            return False
        self._timer.stop()
        return True

    def resume(self) -> bool:
        if not self._state_machine.resume():
            return False
        self._timer.start(self._delay_ms)
        return True

    def toggle_pause(self) -> bool:
        if self._state_machine.is_paused():
            return self.resume()
        return self.pause()

    def step(self) -> bool:
        """Advance a single tick while paused."""
        if not self._state_machine.is_paused():
            return False
        self._do_tick()
        return True

    def stop(self) -> bool:
        self._timer.stop()
        return self._state_machine.stop()

    def set_delay(self, delay_ms: int):
        """Change the pause between ticks."""
        self._delay_ms = max(1, delay_ms)
        if self._timer.isActive():
            self._timer.setInterval(self._delay_ms)

    # Timer callbacks

    def _on_timer_tick(self):
        try:
            if self._state_machine.is_running():
                self._do_tick()
        except Exception as e:
            self.error_occurred.emit(f"Tick error: {str(e)}")
            self.stop()

    def _do_tick(self):
        result: TickResult = self._simulation.tick()
        self.tick_completed.emit(result)
        self.board_updated.emit()
        if self._limit_reached():
            self.stop()

    def _limit_reached(self) -> bool:
        return self._max_ticks is not None and self._simulation.ticks >= self._max_ticks

    def _on_state_entered(self, context):
        self.state_changed.emit(self._state_machine.current_state)

    def cleanup(self):
        """Stop the timer before application shutdown."""
        try:
            self._timer.stop()
        except RuntimeError:
            pass  # Qt object already deleted

    # Utility methods

    def get_statistics(self) -> dict:
        """Get current run statistics."""
        stats = self._simulation.stats
        return {
            "ticks": stats.ticks,
            "score": self._simulation.board.score,
            "captures": stats.captures,
            "wall_hits": stats.wall_hits,
            "recent_capture_rate": stats.recent_capture_rate,
            "recent_average_reward": stats.recent_average_reward,
            "q_entries": len(self._simulation.agent.table),
            "state_description": self._state_machine.get_state_description(),
        }
