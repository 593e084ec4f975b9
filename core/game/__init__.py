"""Game state, turn engine and event management."""

from core.game.events import EventEmitter, EventType, GameEvent
from core.game.state import (
    EmptyDeckError,
    GameState,
    HandOwner,
    TurnPhase,
    deal,
    hit,
    new_game,
)
from core.game.engine import (
    DEALER_STANDS_ON,
    RoundResult,
    Turn,
    dealer_turn,
    play_round,
    player_turn,
)

__all__ = [
    "EventEmitter",
    "EventType",
    "GameEvent",
    "EmptyDeckError",
    "GameState",
    "HandOwner",
    "TurnPhase",
    "deal",
    "hit",
    "new_game",
    "DEALER_STANDS_ON",
    "RoundResult",
    "Turn",
    "dealer_turn",
    "play_round",
    "player_turn",
]
