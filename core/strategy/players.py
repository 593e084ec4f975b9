"""Player decision strategies.

A strategy is any callable that takes the current GameState and returns True
to hit or False to stand. Strategies only read the state they are given.
"""

from random import Random
from typing import Callable

from core.game.state import GameState
from core.strategy.basic import Action, BasicStrategy

Strategy = Callable[[GameState], bool]

CAUTIOUS_THRESHOLD = 15
GREEDY_THRESHOLD = 21


def inactive_strategy(state: GameState) -> bool:
    """Never hit."""
    return False


def threshold_strategy(threshold: int) -> Strategy:
    """Build a strategy that hits while the player's total is below threshold."""

    def strategy(state: GameState) -> bool:
        return state.player_hand.value < threshold

    strategy.__name__ = f"threshold_{threshold}_strategy"
    return strategy


cautious_strategy = threshold_strategy(CAUTIOUS_THRESHOLD)
greedy_strategy = threshold_strategy(GREEDY_THRESHOLD)


def coin_flip_strategy(rng: Random | None = None) -> Strategy:
    """Build a strategy that hits on a fair coin flip."""
    rng = rng or Random()

    def strategy(state: GameState) -> bool:
        return rng.randrange(2) == 1

    return strategy


def interactive_strategy(
    read_line: Callable[[], str] = input,
    write: Callable[[str], None] = print,
) -> Strategy:
    """
    Build a strategy that asks a person.

    Args:
        read_line: Returns one line of input
        write: Shows the prompt

    Only an answer of "y" hits; anything else stands, including end of input.
    """

    def strategy(state: GameState) -> bool:
        write("Hit? y/n")
        try:
            answer = read_line()
        except EOFError:
            return False
        return answer.strip() == "y"

    return strategy


_basic = BasicStrategy()


def basic_strategy(state: GameState) -> bool:
    """Hit or stand by the basic strategy chart against the dealer's upcard."""
    upcard = state.dealer_upcard
    if upcard is None:
        return state.player_hand.value < 17
    hand = state.player_hand
    action = _basic.get_action(hand.value, upcard.value, is_soft=hand.is_soft)
    return action is Action.HIT


# Strategy factories by name. Each takes the run's random generator.
STRATEGIES: dict[str, Callable[[Random], Strategy]] = {
    "inactive": lambda rng: inactive_strategy,
    "cautious": lambda rng: cautious_strategy,
    "greedy": lambda rng: greedy_strategy,
    "coin_flip": coin_flip_strategy,
    "basic": lambda rng: basic_strategy,
    "interactive": lambda rng: interactive_strategy(),
}

# Strategies that never wait on a person
AUTOMATED_STRATEGIES = tuple(name for name in STRATEGIES if name != "interactive")


def get_strategy(name: str, rng: Random | None = None) -> Strategy:
    """
    Look up a strategy by name.

    Raises:
        KeyError: if no strategy has that name
    """
    try:
        factory = STRATEGIES[name]
    except KeyError:
        raise KeyError(
            f"Unknown strategy {name!r}; choose from {', '.join(STRATEGIES)}"
        ) from None
    return factory(rng or Random())
