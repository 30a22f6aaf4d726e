"""Grid world environment: an agent, a piece of food and a running score."""

from typing import List, Optional
from .types import Action, Cell, Coord, MoveEvent, WorldConfig, ACTION_DELTAS
from ..utils.rng import SeededRNG, get_default_rng


class Board:
    """
    Continuous food-chasing environment.

    The board is the only owner of the agent and food positions. There is no
    terminal state: capturing the food spawns a new one and the run goes on.
    """

    def __init__(self, config: Optional[WorldConfig] = None, rng: Optional[SeededRNG] = None,
                 agent: Coord = (0, 0), food: Optional[Coord] = None):
        self.config = config or WorldConfig()
        self._rng = rng or get_default_rng()

        if not self.config.in_bounds(agent):
            raise ValueError(f"Agent position {agent} is outside the {self.height}x{self.width} board")
        self._agent: Coord = tuple(agent)

        if food is None:
            self._food = self._spawn_food()
        else:
            if not self.config.in_bounds(food):
                raise ValueError(f"Food position {food} is outside the {self.height}x{self.width} board")
            if tuple(food) == self._agent:
                raise ValueError(f"Food cannot start on the agent at {food}")
            self._food = tuple(food)

        self._score = 0
        self._captures = 0
        self._wall_hits = 0
        self._last_event: Optional[MoveEvent] = None
        self._cells: List[List[Cell]] = []
        self._update_cells()

    @property
    def height(self) -> int:
        return self.config.height

    @property
    def width(self) -> int:
        return self.config.width

    @property
    def agent(self) -> Coord:
        return self._agent

    @property
    def food(self) -> Coord:
        return self._food

    @property
    def score(self) -> int:
        """Cumulative score since construction."""
        return self._score

    @property
    def captures(self) -> int:
        return self._captures

    @property
    def wall_hits(self) -> int:
        return self._wall_hits

    @property
    def last_event(self) -> Optional[MoveEvent]:
        """What the most recent move did, None before the first move."""
        return self._last_event

    def move(self, action: Action) -> bool:
        """
        Apply an action to the agent.

        Args:
            action: Direction to move

        Returns:
            True if the move stayed on the board, False if it was rejected
        """
        delta = ACTION_DELTAS[Action(action)]
        next_pos = (self._agent[0] + delta[0], self._agent[1] + delta[1])

        if not self.config.in_bounds(next_pos):
            # Hit boundary - stay in place
            self._score += self.config.reward_wall
            self._wall_hits += 1
            self._last_event = MoveEvent.WALL
            return False

        self._agent = next_pos
        self._last_event = MoveEvent.STEP

        if self._agent == self._food:
            self._score += self.config.reward_food
            self._captures += 1
            self._food = self._spawn_food()
            self._last_event = MoveEvent.CAPTURE

        self._score += self.config.reward_step
        self._update_cells()
        return True

    def cells(self) -> List[List[Cell]]:
        """Return a height x width copy of the board contents."""
        return [list(row) for row in self._cells]

    def _spawn_food(self) -> Coord:
        """Pick a uniformly random cell that is not under the agent."""
        while True:
            candidate = (self._rng.randrange(self.height), self._rng.randrange(self.width))
            if candidate != self._agent:
                return candidate

    def _update_cells(self):
        self._cells = [[Cell.EMPTY] * self.width for _ in range(self.height)]
        self._cells[self._agent[0]][self._agent[1]] = Cell.AGENT
        self._cells[self._food[0]][self._food[1]] = Cell.FOOD
