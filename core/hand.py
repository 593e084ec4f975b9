"""Hand evaluation for blackjack."""

import math
from dataclasses import dataclass
from enum import Enum, auto
from typing import Iterable, Iterator

from core.cards import Card, card_value

BLACKJACK = 21


def hand_total(cards: Iterable[Card]) -> int:
    """
    Calculate the best total for a set of cards.

    Every Ace starts at 11. When that busts the hand, the fewest Aces needed
    to get back to 21 or under are revalued to 1. A hand that still busts
    with every Ace at 1 returns its bust total.
    """
    cards = list(cards)
    total = sum(card_value(card) for card in cards)
    if total <= BLACKJACK:
        return total

    aces = sum(1 for card in cards if card.is_ace)
    needed = math.ceil((total - BLACKJACK) / 10)
    return total - 10 * min(needed, aces)


class RoundOutcome(Enum):
    """Result of a finished round, from the player's point of view."""

    PLAYER_WIN = auto()
    DEALER_WIN = auto()
    DRAW = auto()

    def __str__(self) -> str:
        return self.name.replace("_", " ").title()


@dataclass(frozen=True)
class Hand:
    """An immutable blackjack hand. The newest card is first."""

    cards: tuple[Card, ...] = ()

    def with_card(self, card: Card) -> "Hand":
        """Return a new hand with the card added on top."""
        return Hand((card, *self.cards))

    @property
    def value(self) -> int:
        """Best total for the hand (see hand_total)."""
        return hand_total(self.cards)

    @property
    def is_soft(self) -> bool:
        """
        Check if the hand is soft (has an ace counted as 11).

        A hand is soft if it contains an ace that can be counted as 11
        without busting.
        """
        if not any(card.is_ace for card in self.cards):
            return False

        total_hard = sum(1 if card.is_ace else card.value for card in self.cards)
        return total_hard + 10 <= BLACKJACK

    @property
    def is_blackjack(self) -> bool:
        """Check if the hand is a natural (21 with 2 cards)."""
        return len(self.cards) == 2 and self.value == BLACKJACK

    @property
    def is_busted(self) -> bool:
        """Check if the hand has busted (value > 21)."""
        return self.value > BLACKJACK

    def __len__(self) -> int:
        return len(self.cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self.cards)

    def __str__(self) -> str:
        cards_str = " ".join(str(card) for card in self.cards)
        value_str = f"({self.value})"
        if self.is_soft:
            value_str = f"(soft {self.value})"
        if self.is_busted:
            value_str = "(BUST)"
        return f"{cards_str} {value_str}"

    def __repr__(self) -> str:
        return f"Hand({list(self.cards)!r}, value={self.value})"


def resolve(player_score: int, dealer_score: int) -> RoundOutcome:
    """
    Decide a round from the two final scores.

    The checks run in a fixed order: player win, then draw, then dealer win.
    A player bust always loses, even against a dealer bust on the same total.
    """
    if player_score <= BLACKJACK and (
        dealer_score > BLACKJACK or player_score > dealer_score
    ):
        return RoundOutcome.PLAYER_WIN
    if player_score == dealer_score and player_score <= BLACKJACK:
        return RoundOutcome.DRAW
    return RoundOutcome.DEALER_WIN


def evaluate_hands(player_hand: Hand, dealer_hand: Hand) -> RoundOutcome:
    """Compare two finished hands."""
    return resolve(player_hand.value, dealer_hand.value)
