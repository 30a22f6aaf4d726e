import pytest

from foodgrid.domain.board import Board
from foodgrid.domain.types import Action, Cell, MoveEvent, WorldConfig
from foodgrid.utils.rng import SeededRNG


def make_board(agent=(5, 5), food=(9, 9), seed=0):
    return Board(WorldConfig(), rng=SeededRNG(seed), agent=agent, food=food)


@pytest.mark.parametrize("action, expected", [
    (Action.UP, (4, 5)),
    (Action.DOWN, (6, 5)),
    (Action.LEFT, (5, 4)),
    (Action.RIGHT, (5, 6)),
])
def test_move_mechanics(action, expected):
    board = make_board()
    assert board.move(action) is True
    assert board.agent == expected
    assert board.score == -3
    assert board.last_event is MoveEvent.STEP


@pytest.mark.parametrize("agent, action", [
    ((0, 0), Action.UP),
    ((0, 0), Action.LEFT),
    ((9, 9), Action.DOWN),
    ((9, 9), Action.RIGHT),
    ((0, 4), Action.UP),
    ((7, 9), Action.RIGHT),
])
def test_boundary_penalty_keeps_agent_in_place(agent, action):
    board = make_board(agent=agent, food=(5, 5))
    assert board.move(action) is False
    assert board.agent == agent
    assert board.score == -100
    assert board.wall_hits == 1
    assert board.last_event is MoveEvent.WALL


def test_agent_at_origin_moving_up():
    board = Board(rng=SeededRNG(3))
    assert board.agent == (0, 0)
    board.move(Action.UP)
    assert board.agent == (0, 0)
    assert board.score == -100


def test_walk_right_onto_food():
    board = make_board(agent=(5, 5), food=(5, 7))

    assert board.move(Action.RIGHT)
    assert board.agent == (5, 6)
    assert board.score == -3

    assert board.move(Action.RIGHT)
    assert board.agent == (5, 7)
    assert board.score == 94
    assert board.captures == 1
    assert board.last_event is MoveEvent.CAPTURE
    assert board.food != (5, 7)
    assert board.config.in_bounds(board.food)


def test_respawned_food_never_lands_on_agent():
    # Many captures with different seeds, always checking the fresh food
    for seed in range(200):
        board = make_board(agent=(3, 3), food=(3, 4), seed=seed)
        board.move(Action.RIGHT)
        assert board.food != board.agent
        assert 0 <= board.food[0] < 10 and 0 <= board.food[1] < 10


def test_fresh_board_food_not_on_agent():
    for seed in range(200):
        board = Board(rng=SeededRNG(seed))
        assert board.food != board.agent


def test_spawn_on_two_cell_board_terminates():
    config = WorldConfig(height=1, width=2)
    board = Board(config, rng=SeededRNG(1))
    assert board.food == (0, 1)
    board.move(Action.RIGHT)
    assert board.agent == (0, 1)
    assert board.food == (0, 0)
    assert board.score == 97


def test_cells_projection_follows_moves():
    board = make_board(agent=(2, 2), food=(7, 1))
    cells = board.cells()
    assert len(cells) == 10 and all(len(row) == 10 for row in cells)
    assert cells[2][2] == Cell.AGENT
    assert cells[7][1] == Cell.FOOD
    assert sum(value != Cell.EMPTY for row in cells for value in row) == 2

    board.move(Action.DOWN)
    cells = board.cells()
    assert cells[2][2] == Cell.EMPTY
    assert cells[3][2] == Cell.AGENT


def test_cells_returns_a_copy():
    board = make_board()
    cells = board.cells()
    cells[0][0] = Cell.FOOD
    assert board.cells()[0][0] == Cell.EMPTY


@pytest.mark.parametrize("kwargs", [
    {"agent": (10, 0)},
    {"agent": (-1, 0)},
    {"agent": (0, 0), "food": (0, 10)},
    {"agent": (4, 4), "food": (4, 4)},
])
def test_invalid_positions_rejected(kwargs):
    with pytest.raises(ValueError):
        Board(rng=SeededRNG(0), **kwargs)


def test_world_config_rejects_single_cell():
    with pytest.raises(ValueError):
        WorldConfig(height=1, width=1)
    with pytest.raises(ValueError):
        WorldConfig(height=0, width=5)
