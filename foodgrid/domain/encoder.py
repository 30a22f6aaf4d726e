"""Coarse state encoding: where is the food relative to the agent."""

from .types import Coord, StateLabel


def encode(agent: Coord, food: Coord) -> StateLabel:
    """
    Map an (agent, food) pair to the direction of the food.

    Only the relative direction matters; distance and absolute position are
    dropped. Agent and food on the same cell encodes as RIGHT.

    Args:
        agent: Agent position as (row, col)
        food: Food position as (row, col)

    Returns:
        One of the eight StateLabel values
    """
    agent_row, agent_col = agent
    food_row, food_col = food

    if agent_row == food_row:
        return StateLabel.LEFT if agent_col > food_col else StateLabel.RIGHT

    if agent_row > food_row:
        # Food is above the agent
        if agent_col == food_col:
            return StateLabel.UP
        return StateLabel.UPLEFT if agent_col > food_col else StateLabel.UPRIGHT

    if agent_col == food_col:
        return StateLabel.DOWN
    return StateLabel.DOWNLEFT if agent_col > food_col else StateLabel.DOWNRIGHT
