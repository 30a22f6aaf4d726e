"""Food Grid Q-Learning - an agent that learns to chase food on a small grid.

This package implements a tabular Q-Learning agent on a continuous 10x10 world,
rendered every tick so the policy can be watched as it improves.
"""

__version__ = "1.0.0"
__author__ = "Food Grid Q-Learning Demo"
