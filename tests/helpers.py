"""Card and hand builders shared by the tests."""

from core.cards import Card, make_deck
from core.hand import Hand


def cards(*codes: str) -> tuple[Card, ...]:
    """Build cards from compact strings, e.g. cards("AS", "KH")."""
    return tuple(Card.from_string(code) for code in codes)


def hand(*codes: str) -> Hand:
    """Build a hand holding the given cards in order."""
    return Hand(cards(*codes))


def stacked_deck(*codes: str) -> tuple[Card, ...]:
    """The given cards on top, followed by the rest of a fresh deck."""
    top = cards(*codes)
    return top + tuple(c for c in make_deck() if c not in top)
