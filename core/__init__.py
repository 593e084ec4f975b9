"""Core blackjack simulation engine - 100% UI-agnostic."""

from core.cards import Card, Rank, Suit, card_to_string, card_value, make_deck, shuffle
from core.hand import Hand, RoundOutcome, hand_total, resolve
from core.statistics import Tally
from core.simulation import run_many

__all__ = [
    "Card",
    "Rank",
    "Suit",
    "card_to_string",
    "card_value",
    "make_deck",
    "shuffle",
    "Hand",
    "RoundOutcome",
    "hand_total",
    "resolve",
    "Tally",
    "run_many",
]
