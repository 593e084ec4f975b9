"""Game state values and the dealing transitions."""

from dataclasses import dataclass, field, replace
from enum import Enum, auto
from random import Random

from core.cards import Card, make_deck, shuffle
from core.hand import Hand


class HandOwner(Enum):
    """Who a hand belongs to."""

    PLAYER = auto()
    DEALER = auto()

    def __str__(self) -> str:
        return self.name.title()


class TurnPhase(Enum):
    """
    Turn state machine states.

    Flow: HITTING → HITTING ... → STANDING | BUSTED
    """

    HITTING = auto()
    STANDING = auto()
    BUSTED = auto()

    def __str__(self) -> str:
        return self.name.title()


class EmptyDeckError(IndexError):
    """Raised when a card is requested from an exhausted deck."""


@dataclass(frozen=True)
class GameState:
    """
    A single round in progress: the undealt deck and both hands.

    Values are never mutated; every transition returns a new state.
    """

    deck: tuple[Card, ...] = ()
    player_hand: Hand = field(default_factory=Hand)
    dealer_hand: Hand = field(default_factory=Hand)

    def hand(self, owner: HandOwner) -> Hand:
        """Return the hand belonging to owner."""
        if owner is HandOwner.PLAYER:
            return self.player_hand
        return self.dealer_hand

    @property
    def dealer_upcard(self) -> Card | None:
        """The dealer's first card, shown to the player."""
        if not self.dealer_hand.cards:
            return None
        return self.dealer_hand.cards[-1]


def hit(owner: HandOwner, state: GameState) -> GameState:
    """
    Deal the top card of the deck to owner's hand.

    Raises:
        EmptyDeckError: if the deck has no cards left
    """
    if not state.deck:
        raise EmptyDeckError(f"Cannot deal to {owner}: deck is empty")

    card, *rest = state.deck
    if owner is HandOwner.PLAYER:
        return replace(state, deck=tuple(rest), player_hand=state.player_hand.with_card(card))
    return replace(state, deck=tuple(rest), dealer_hand=state.dealer_hand.with_card(card))


def deal(cards: tuple[Card, ...]) -> GameState:
    """
    Deal the opening hands from an ordered deck.

    Cards go player, dealer, player, dealer; the rest stays in the deck.
    """
    if len(cards) < 4:
        raise ValueError(f"Need at least 4 cards to deal, got {len(cards)}")

    state = GameState(deck=tuple(cards))
    for owner in (HandOwner.PLAYER, HandOwner.DEALER) * 2:
        state = hit(owner, state)
    return state


def new_game(rng: Random | None = None) -> GameState:
    """Shuffle a fresh deck and deal the opening hands."""
    return deal(shuffle(make_deck(), rng))
