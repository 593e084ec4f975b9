"""Player strategies and the basic strategy table."""

from core.strategy.basic import BasicStrategy, Action
from core.strategy.players import (
    AUTOMATED_STRATEGIES,
    STRATEGIES,
    Strategy,
    basic_strategy,
    cautious_strategy,
    coin_flip_strategy,
    get_strategy,
    greedy_strategy,
    inactive_strategy,
    interactive_strategy,
    threshold_strategy,
)

__all__ = [
    "BasicStrategy",
    "Action",
    "AUTOMATED_STRATEGIES",
    "STRATEGIES",
    "Strategy",
    "basic_strategy",
    "cautious_strategy",
    "coin_flip_strategy",
    "get_strategy",
    "greedy_strategy",
    "inactive_strategy",
    "interactive_strategy",
    "threshold_strategy",
]
