"""Console entry point: simulate many rounds and print the win rates."""

import argparse
import sys
from random import Random
from typing import Callable, TextIO

from config import config
from core.game.events import EventEmitter, EventType, GameEvent
from core.hand import RoundOutcome
from core.simulation import run_many
from core.statistics.tally import Tally
from core.strategy.players import STRATEGIES, get_strategy

_SUMMARY_LABELS = [
    ("Player win:", RoundOutcome.PLAYER_WIN),
    ("Dealer win:", RoundOutcome.DEALER_WIN),
    ("Draws:     ", RoundOutcome.DRAW),
]


class Narrator:
    """Prints a line for each round event."""

    _FORMATS: dict[EventType, Callable[[dict], str]] = {
        EventType.DEALER_SHOWING: lambda d: f"Dealer is showing: {d['card']}",
        EventType.HAND_SHOWN: lambda d: (
            f"{d['owner']}'s hand: {', '.join(d['cards'])}; {d['score']} points"
        ),
        EventType.PLAYER_HITS: lambda d: f"Player hits: {d['card']}\n",
        EventType.PLAYER_STANDS: lambda d: "Player stays\n",
        EventType.PLAYER_BUSTS: lambda d: "Player busts!\n",
        EventType.DEALER_HITS: lambda d: f"Dealer hits: {d['card']}\n",
        EventType.DEALER_STANDS: lambda d: "Dealer must stay\n",
        EventType.DEALER_BUSTS: lambda d: "Dealer busts!\n",
        EventType.PLAYER_WINS: lambda d: "++++ Player Wins ++++\n",
        EventType.DEALER_WINS: lambda d: "---- Dealer Wins ----\n",
        EventType.DRAW: lambda d: "==== Draw! ====\n",
    }

    def __init__(self, out: TextIO = sys.stdout) -> None:
        self._out = out

    def __call__(self, event: GameEvent) -> None:
        fmt = self._FORMATS.get(event.event_type)
        if fmt is not None:
            print(fmt(event.data), file=self._out)


def format_summary(tally: Tally, strategy_name: str) -> str:
    """Format the final win/loss/draw report."""
    title = strategy_name.replace("_", " ").title()
    lines = [f"{title} Player Strategy\n"]
    for label, outcome in _SUMMARY_LABELS:
        lines.append(
            f"{label} {tally.percentage(outcome):.2f}%, {tally.count(outcome)}/{tally.total}"
        )
    return "\n".join(lines)


def build_parser() -> argparse.ArgumentParser:
    """Build the command-line parser; defaults come from the environment."""
    settings = config.simulation
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "-n", "--trials",
        type=int,
        default=settings.trials,
        help=f"number of rounds to play (default: {settings.trials})",
    )
    parser.add_argument(
        "-s", "--strategy",
        choices=sorted(STRATEGIES),
        default=settings.strategy,
        help=f"player strategy (default: {settings.strategy})",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=settings.seed,
        help="seed for a reproducible run",
    )
    parser.add_argument(
        "-q", "--quiet",
        action="store_true",
        default=not settings.narrate,
        help="only print the summary",
    )
    return parser


def main(argv: list[str] | None = None, out: TextIO = sys.stdout) -> int:
    """Run a simulation and print the results."""
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.trials < 0:
        parser.error("--trials must be non-negative")

    rng = Random(args.seed)
    strategy = get_strategy(args.strategy, rng)

    events = None
    if not args.quiet:
        events = EventEmitter(keep_history=False)
        events.subscribe(Narrator(out))

    tally = run_many(args.trials, strategy, rng=rng, events=events)
    print(format_summary(tally, args.strategy), file=out)
    return 0


if __name__ == "__main__":
    sys.exit(main())
