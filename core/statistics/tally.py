"""Outcome tallies for batches of rounds."""

from dataclasses import dataclass, replace

from core.hand import RoundOutcome


@dataclass(frozen=True)
class Tally:
    """
    Running count of round outcomes.

    Every recorded round lands in exactly one field, so the three fields
    always sum to the number of rounds recorded.
    """

    player_wins: int = 0
    dealer_wins: int = 0
    draws: int = 0

    def record(self, outcome: RoundOutcome) -> "Tally":
        """Return a new tally with one more round of the given outcome."""
        if outcome is RoundOutcome.PLAYER_WIN:
            return replace(self, player_wins=self.player_wins + 1)
        if outcome is RoundOutcome.DEALER_WIN:
            return replace(self, dealer_wins=self.dealer_wins + 1)
        return replace(self, draws=self.draws + 1)

    def __add__(self, other: "Tally") -> "Tally":
        if not isinstance(other, Tally):
            return NotImplemented
        return Tally(
            player_wins=self.player_wins + other.player_wins,
            dealer_wins=self.dealer_wins + other.dealer_wins,
            draws=self.draws + other.draws,
        )

    @property
    def total(self) -> int:
        """Return the number of rounds recorded."""
        return self.player_wins + self.dealer_wins + self.draws

    def count(self, outcome: RoundOutcome) -> int:
        """Return the number of rounds with the given outcome."""
        return {
            RoundOutcome.PLAYER_WIN: self.player_wins,
            RoundOutcome.DEALER_WIN: self.dealer_wins,
            RoundOutcome.DRAW: self.draws,
        }[outcome]

    def percentage(self, outcome: RoundOutcome) -> float:
        """Return the share of rounds with the given outcome, 0-100."""
        if self.total == 0:
            return 0.0
        return self.count(outcome) / self.total * 100
