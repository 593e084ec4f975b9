"""Pytest fixtures for blackjack simulator tests."""

import pytest
from random import Random

from core.game import EventEmitter, GameState, deal
from core.hand import Hand

from helpers import hand, stacked_deck


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return Random(42)


@pytest.fixture
def events():
    """An event emitter that keeps its history."""
    return EventEmitter()


@pytest.fixture
def empty_hand():
    """An empty hand."""
    return Hand()


@pytest.fixture
def soft_17_hand():
    """A soft 17 hand (A-6)."""
    return hand("AS", "6H")


@pytest.fixture
def hard_16_hand():
    """A hard 16 hand (10-6)."""
    return hand("10S", "6H")


@pytest.fixture
def blackjack_hand():
    """A natural blackjack hand."""
    return hand("AS", "KH")


@pytest.fixture
def player_20_state() -> GameState:
    """
    Player K-Q (20) against dealer 5-4, with a Jack next in the deck.

    Deal order is player, dealer, player, dealer.
    """
    return deal(stacked_deck("KS", "5H", "QD", "4C", "JH"))


@pytest.fixture
def empty_deck_state() -> GameState:
    """Both hands dealt, nothing left to draw."""
    return GameState(
        deck=(),
        player_hand=hand("2S", "3H"),
        dealer_hand=hand("2D", "3C"),
    )
