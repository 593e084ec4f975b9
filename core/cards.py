"""Card model and deck construction - immutable card representations."""

from dataclasses import dataclass
from enum import Enum
from random import Random


class Suit(Enum):
    """Card suits, in deck order."""

    SPADES = "Spades"
    CLUBS = "Clubs"
    DIAMONDS = "Diamonds"
    HEARTS = "Hearts"

    def __str__(self) -> str:
        symbols = {
            Suit.SPADES: "♠",
            Suit.CLUBS: "♣",
            Suit.DIAMONDS: "♦",
            Suit.HEARTS: "♥",
        }
        return symbols[self]


class Rank(Enum):
    """Card kinds. Ace is low (1); Jack, Queen and King are 11-13."""

    ACE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13

    def __str__(self) -> str:
        if 2 <= self.value <= 10:
            return str(self.value)
        return {
            Rank.ACE: "A",
            Rank.JACK: "J",
            Rank.QUEEN: "Q",
            Rank.KING: "K",
        }[self]

    @property
    def display_name(self) -> str:
        """Return the long name used in narration ("Ace", "Queen", "7")."""
        if 2 <= self.value <= 10:
            return str(self.value)
        return self.name.title()

    @property
    def blackjack_value(self) -> int:
        """Return the blackjack point value (Ace = 11, face cards = 10)."""
        if self == Rank.ACE:
            return 11
        if self.value >= 11:
            return 10  # Face cards
        return self.value

    @property
    def is_ace(self) -> bool:
        """Check if this rank is an Ace."""
        return self == Rank.ACE


@dataclass(frozen=True, slots=True)
class Card:
    """Immutable playing card."""

    rank: Rank
    suit: Suit

    def __str__(self) -> str:
        return f"{self.rank}{self.suit}"

    def __repr__(self) -> str:
        return f"Card({self.rank.name}, {self.suit.name})"

    @property
    def value(self) -> int:
        """Return the blackjack point value."""
        return self.rank.blackjack_value

    @property
    def is_ace(self) -> bool:
        """Check if this card is an Ace."""
        return self.rank.is_ace

    @property
    def name(self) -> str:
        """Return the long description, e.g. 'Ace of Spades'."""
        return f"{self.rank.display_name} of {self.suit.value}"

    @classmethod
    def from_string(cls, s: str) -> "Card":
        """Create a card from a string like '2♣', 'AS', 'Kh'."""
        s = s.strip().upper()
        if len(s) < 2:
            raise ValueError(f"Invalid card string: {s}")

        rank_str = s[:-1]
        suit_str = s[-1]

        rank_map = {str(rank): rank for rank in Rank}
        rank_map["T"] = Rank.TEN

        suit_map = {
            "S": Suit.SPADES,
            "♠": Suit.SPADES,
            "C": Suit.CLUBS,
            "♣": Suit.CLUBS,
            "D": Suit.DIAMONDS,
            "♦": Suit.DIAMONDS,
            "H": Suit.HEARTS,
            "♥": Suit.HEARTS,
        }

        if rank_str not in rank_map:
            raise ValueError(f"Invalid rank: {rank_str}")
        if suit_str not in suit_map:
            raise ValueError(f"Invalid suit: {suit_str}")

        return cls(rank_map[rank_str], suit_map[suit_str])


def card_value(card: Card) -> int:
    """Return the blackjack value of a card with every Ace counted as 11."""
    return card.value


def card_to_string(card: Card) -> str:
    """Return the narration name of a card."""
    return card.name


def make_deck() -> tuple[Card, ...]:
    """Return the 52 cards in a fixed order: 13 Spades, 13 Clubs, and so on."""
    return tuple(Card(rank, suit) for suit in Suit for rank in Rank)


def shuffle(cards: tuple[Card, ...], rng: Random | None = None) -> tuple[Card, ...]:
    """
    Return a uniformly random permutation of the cards.

    Each index i is swapped with an index drawn uniformly from [i, n-1], so
    every ordering is equally likely. The input is left untouched.

    Args:
        cards: Cards to shuffle
        rng: Random number generator, for reproducible shuffles
    """
    rng = rng or Random()
    shuffled = list(cards)
    n = len(shuffled)
    for i in range(n):
        j = rng.randrange(i, n)
        shuffled[i], shuffled[j] = shuffled[j], shuffled[i]
    return tuple(shuffled)
