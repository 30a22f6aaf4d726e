"""Finite State Machine for the simulation run loop."""

from enum import Enum, auto
from typing import Callable, Dict, Optional


class RunState(Enum):
    """States of a running simulation."""
    IDLE = auto()
    RUNNING = auto()
    PAUSED = auto()
    STOPPED = auto()


class RunStateMachine:
    """State machine shared by the terminal and Qt drivers."""

    def __init__(self):
        self.current_state = RunState.IDLE
        self._enter_callbacks: Dict[RunState, Callable[[Optional[Dict]], None]] = {}

        # Define valid state transitions
        self._valid_transitions = {
            RunState.IDLE: {RunState.RUNNING, RunState.STOPPED},
            RunState.RUNNING: {RunState.PAUSED, RunState.STOPPED},
            RunState.PAUSED: {RunState.RUNNING, RunState.STOPPED},
            RunState.STOPPED: set(),
        }

    def on_state_enter(self, state: RunState, callback: Callable[[Optional[Dict]], None]):
        """Register callback for state entry."""
        self._enter_callbacks[state] = callback

    def can_transition(self, to_state: RunState) -> bool:
        """Check if transition to target state is valid."""
        return to_state in self._valid_transitions.get(self.current_state, set())

    def transition(self, to_state: RunState, context: Optional[Dict] = None) -> bool:
        """Attempt to transition to target state."""
        if not self.can_transition(to_state):
            return False

        self.current_state = to_state

        if to_state in self._enter_callbacks:
            self._enter_callbacks[to_state](context)

        return True

    # Convenience methods for common transitions

    def start(self, context: Optional[Dict] = None) -> bool:
        """Start running."""
        return self.transition(RunState.RUNNING, context)

    def pause(self, context: Optional[Dict] = None) -> bool:
        """Pause the run."""
        return self.transition(RunState.PAUSED, context)

    def resume(self, context: Optional[Dict] = None) -> bool:
        """Resume from paused state."""
        if self.current_state == RunState.PAUSED:
            return self.transition(RunState.RUNNING, context)
        return False

    def toggle_pause(self, context: Optional[Dict] = None) -> bool:
        """Pause when running, resume when paused."""
        if self.is_paused():
            return self.resume(context)
        return self.pause(context)

    def stop(self, context: Optional[Dict] = None) -> bool:
        """Stop for good."""
        return self.transition(RunState.STOPPED, context)

    # State checking methods

    def is_idle(self) -> bool:
        return self.current_state == RunState.IDLE

    def is_running(self) -> bool:
        return self.current_state == RunState.RUNNING

    def is_paused(self) -> bool:
        return self.current_state == RunState.PAUSED

    def is_stopped(self) -> bool:
        return self.current_state == RunState.STOPPED

    def get_state_description(self) -> str:
        """Get human-readable state description."""
        descriptions = {
            RunState.IDLE: "Ready",
            RunState.RUNNING: "Learning - agent is chasing food",
            RunState.PAUSED: "Paused",
            RunState.STOPPED: "Stopped",
        }
        return descriptions.get(self.current_state, "Unknown state")
