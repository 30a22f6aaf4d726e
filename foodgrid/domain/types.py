"""Core type definitions for the food grid Q-Learning demo."""

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Dict, Tuple

# Grid positions are (row, col)
Coord = Tuple[int, int]


class Action(IntEnum):
    """Moves the agent can take. UP/DOWN change the row, LEFT/RIGHT the column."""
    UP = 0
    DOWN = 1
    LEFT = 2
    RIGHT = 3


class StateLabel(IntEnum):
    """Direction of the food as seen from the agent."""
    LEFT = 0
    RIGHT = 1
    UP = 2
    DOWN = 3
    UPLEFT = 4
    UPRIGHT = 5
    DOWNLEFT = 6
    DOWNRIGHT = 7


class Cell(IntEnum):
    """Contents of a board cell, as handed to renderers."""
    EMPTY = 0
    AGENT = 1
    FOOD = 2


class MoveEvent(Enum):
    """Outcome of a single move attempt."""
    WALL = "wall"
    STEP = "step"
    CAPTURE = "capture"


ACTIONS: Tuple[Action, ...] = tuple(Action)
STATE_LABELS: Tuple[StateLabel, ...] = tuple(StateLabel)

ACTION_DELTAS: Dict[Action, Coord] = {
    Action.UP: (-1, 0),
    Action.DOWN: (1, 0),
    Action.LEFT: (0, -1),
    Action.RIGHT: (0, 1),
}


@dataclass
class WorldConfig:
    """Board geometry and reward shaping."""
    height: int = 10
    width: int = 10
    reward_food: int = 100
    reward_wall: int = -100
    reward_step: int = -3  # Applied on every successful move, captures included

    def __post_init__(self):
        if self.height <= 0 or self.width <= 0:
            raise ValueError(f"Board dimensions must be positive, got {self.height}x{self.width}")
        if self.height * self.width < 2:
            raise ValueError("Board needs at least two cells to place food away from the agent")

    def in_bounds(self, coord: Coord) -> bool:
        """Check if coordinate is within board bounds."""
        row, col = coord
        return 0 <= row < self.height and 0 <= col < self.width


@dataclass
class LearnerConfig:
    """Hyperparameters for the Q-Learning agent."""
    learning_rate: float = 0.3
    discount_factor: float = 0.8
    epsilon: int = 100  # Out of epsilon_scale, so 100 is ~10% random moves
    epsilon_scale: int = 1000

    def __post_init__(self):
        if not 0.0 < self.learning_rate <= 1.0:
            raise ValueError(f"learning_rate must be in (0, 1], got {self.learning_rate}")
        if not 0.0 <= self.discount_factor <= 1.0:
            raise ValueError(f"discount_factor must be in [0, 1], got {self.discount_factor}")
        if self.epsilon_scale <= 0:
            raise ValueError(f"epsilon_scale must be positive, got {self.epsilon_scale}")
        if not 0 <= self.epsilon <= self.epsilon_scale:
            raise ValueError(f"epsilon must be in [0, {self.epsilon_scale}], got {self.epsilon}")

    @property
    def exploration_rate(self) -> float:
        """Probability of a random action."""
        return self.epsilon / self.epsilon_scale


@dataclass
class TickResult:
    """Record of one pass through the learning loop."""
    tick: int
    state: StateLabel
    action: Action
    moved: bool
    reward: int
    next_state: StateLabel
    captured: bool
    score: int


@dataclass
class RunStats:
    """Running totals for a simulation."""
    ticks: int = 0
    captures: int = 0
    wall_hits: int = 0
    total_reward: int = 0
    recent_captures: int = 0
    recent_reward: int = 0
    recent_ticks: int = 0

    @property
    def capture_rate(self) -> float:
        """Captures per tick over the whole run."""
        return self.captures / self.ticks if self.ticks > 0 else 0.0

    @property
    def recent_capture_rate(self) -> float:
        """Captures per tick over the recent window."""
        return self.recent_captures / self.recent_ticks if self.recent_ticks > 0 else 0.0

    @property
    def recent_average_reward(self) -> float:
        """Average reward per tick over the recent window."""
        return self.recent_reward / self.recent_ticks if self.recent_ticks > 0 else 0.0
