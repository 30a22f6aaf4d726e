"""Q-Learning algorithm implementation for the food grid."""

import numpy as np
from typing import Dict, Iterator, Optional, Tuple
from .types import Action, LearnerConfig, StateLabel, ACTIONS, STATE_LABELS
from ..utils.rng import SeededRNG, get_default_rng


class QTable:
    """
    Q-values for every (state, action) pair, stored as a dense array.

    Unseen entries read as 0.0. Reading never marks an entry as seen; only
    writes do, so iteration and len() cover written entries only.
    """

    def __init__(self):
        self._values = np.zeros((len(STATE_LABELS), len(ACTIONS)), dtype=np.float64)
        self._seen = np.zeros((len(STATE_LABELS), len(ACTIONS)), dtype=bool)

    def get(self, state: StateLabel, action: Action) -> float:
        """Get Q-value for state-action pair."""
        return float(self._values[state, action])

    def set(self, state: StateLabel, action: Action, value: float):
        """Set Q-value for state-action pair."""
        self._values[state, action] = value
        self._seen[state, action] = True

    def values(self, state: StateLabel) -> np.ndarray:
        """Return the four Q-values of a state, indexed by Action."""
        return self._values[state].copy()

    def max_value(self, state: StateLabel) -> float:
        """Get the maximum Q-value over all actions of a state."""
        return float(self._values[state].max())

    def best_actions(self, state: StateLabel) -> np.ndarray:
        """Indices of every action tied at the maximum Q-value."""
        row = self._values[state]
        return np.flatnonzero(row == row.max())

    def is_seen(self, state: StateLabel, action: Action) -> bool:
        return bool(self._seen[state, action])

    def is_state_seen(self, state: StateLabel) -> bool:
        return bool(self._seen[state].any())

    def items(self) -> Iterator[Tuple[Tuple[StateLabel, Action], float]]:
        """Iterate over written entries as ((state, action), value)."""
        for state_idx, action_idx in zip(*np.nonzero(self._seen)):
            key = (StateLabel(int(state_idx)), Action(int(action_idx)))
            yield key, float(self._values[state_idx, action_idx])

    def __iter__(self) -> Iterator[Tuple[StateLabel, Action]]:
        for key, _ in self.items():
            yield key

    def __len__(self) -> int:
        return int(self._seen.sum())

    def __contains__(self, key) -> bool:
        state, action = key
        return self.is_seen(state, action)

    def as_dict(self) -> Dict[str, Dict[str, float]]:
        """Written entries keyed by label names, for reports."""
        result: Dict[str, Dict[str, float]] = {}
        for (state, action), value in self.items():
            result.setdefault(state.name, {})[action.name] = value
        return result


class QLearningAgent:
    """Tabular Q-Learning agent with epsilon-greedy exploration."""

    def __init__(self, config: Optional[LearnerConfig] = None, rng: Optional[SeededRNG] = None,
                 table: Optional[QTable] = None):
        self.config = config or LearnerConfig()
        self.table = table if table is not None else QTable()
        self._rng = rng or get_default_rng()
        self.updates = 0

    def get_q_value(self, state: StateLabel, action: Action) -> float:
        """Get Q-value for state-action pair."""
        return self.table.get(state, action)

    def set_q_value(self, state: StateLabel, action: Action, value: float):
        """Set Q-value for state-action pair."""
        self.table.set(state, action, value)

    def choose(self, state: StateLabel) -> Action:
        """
        Select an action with the epsilon-greedy rule.

        A draw r from [0, epsilon_scale) below epsilon picks a uniformly random
        action. Otherwise one of the actions tied at the maximum Q-value is
        picked uniformly, so equal values never favour the first action.
        """
        if self._rng.randrange(self.config.epsilon_scale) < self.config.epsilon:
            return self._rng.choice(ACTIONS)
        return self.greedy(state)

    def greedy(self, state: StateLabel) -> Action:
        """Best action for state, ties broken uniformly at random."""
        best = self.table.best_actions(state)
        if len(best) == 1:
            return Action(int(best[0]))
        return Action(int(best[self._rng.randrange(len(best))]))

    def learn(self, state: StateLabel, action: Action, reward: float,
              next_state: StateLabel) -> float:
        """
        Update Q(state, action) with the temporal-difference rule.

        There are no terminal states, so the bootstrap always takes the max
        over the next state's actions.

        Returns:
            The updated Q-value
        """
        current_q = self.table.get(state, action)
        next_q_max = self.table.max_value(next_state)

        target = reward + self.config.discount_factor * next_q_max
        new_q = current_q + self.config.learning_rate * (target - current_q)

        self.table.set(state, action, new_q)
        self.updates += 1
        return new_q

    def policy(self) -> Dict[StateLabel, Optional[Action]]:
        """Greedy action per state by plain argmax, None for states never written."""
        result: Dict[StateLabel, Optional[Action]] = {}
        for state in STATE_LABELS:
            if self.table.is_state_seen(state):
                result[state] = Action(int(np.argmax(self.table.values(state))))
            else:
                result[state] = None
        return result

    def get_agent_state(self) -> Dict:
        """Get a JSON-friendly snapshot of the agent for run summaries."""
        return {
            "updates": self.updates,
            "entries": len(self.table),
            "q_table": self.table.as_dict(),
            "config": {
                "learning_rate": self.config.learning_rate,
                "discount_factor": self.config.discount_factor,
                "epsilon": self.config.epsilon,
                "epsilon_scale": self.config.epsilon_scale,
            },
        }
