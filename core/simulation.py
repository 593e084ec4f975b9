"""Batch runner: play many independent rounds and tally the outcomes."""

from random import Random

from core.game.engine import play_round
from core.game.events import EventEmitter, EventType
from core.game.state import new_game
from core.statistics.tally import Tally
from core.strategy.players import Strategy


def run_many(
    n: int,
    strategy: Strategy,
    rng: Random | None = None,
    events: EventEmitter | None = None,
) -> Tally:
    """
    Play n rounds, each from a freshly shuffled deck.

    Args:
        n: Number of rounds to play
        strategy: Player decision function
        rng: Random number generator shared by every shuffle in the batch
        events: Optional emitter for narration

    Returns:
        Tally of the n outcomes

    Raises:
        ValueError: if n is negative
    """
    if n < 0:
        raise ValueError(f"Number of rounds must be non-negative, got {n}")

    rng = rng or Random()
    tally = Tally()

    if events is not None:
        events.emit_new(EventType.BATCH_STARTED, rounds=n)

    for round_number in range(1, n + 1):
        if events is not None:
            events.emit_new(EventType.ROUND_STARTED, round=round_number)

        result = play_round(strategy, new_game(rng), events)
        tally = tally.record(result.outcome)

        if events is not None:
            events.emit_new(EventType.ROUND_ENDED, round=round_number, outcome=str(result.outcome))

    if events is not None:
        events.emit_new(
            EventType.BATCH_COMPLETE,
            player_wins=tally.player_wins,
            dealer_wins=tally.dealer_wins,
            draws=tally.draws,
        )

    return tally
