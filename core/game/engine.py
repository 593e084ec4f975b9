"""Turn engine: dealer and player turns run as small state machines."""

from dataclasses import dataclass
from typing import Callable

from transitions import Machine

from core.hand import BLACKJACK, RoundOutcome, resolve
from core.game.events import EventEmitter, EventType
from core.game.state import GameState, HandOwner, TurnPhase, hit

# Dealer stands on 17 (hard or soft). House rule, not configurable.
DEALER_STANDS_ON = 17

Decision = Callable[[GameState], bool]

_TURN_EVENTS: dict[HandOwner, tuple[EventType, EventType, EventType]] = {
    HandOwner.PLAYER: (EventType.PLAYER_HITS, EventType.PLAYER_STANDS, EventType.PLAYER_BUSTS),
    HandOwner.DEALER: (EventType.DEALER_HITS, EventType.DEALER_STANDS, EventType.DEALER_BUSTS),
}

_OUTCOME_EVENTS: dict[RoundOutcome, EventType] = {
    RoundOutcome.PLAYER_WIN: EventType.PLAYER_WINS,
    RoundOutcome.DEALER_WIN: EventType.DEALER_WINS,
    RoundOutcome.DRAW: EventType.DRAW,
}


def dealer_policy(state: GameState) -> bool:
    """The dealer hits below 17."""
    return state.dealer_hand.value < DEALER_STANDS_ON


class Turn:
    """
    One owner's turn, driven to completion.

    Every step looks at the owner's score first: over 21 busts the turn,
    otherwise the decision function chooses between taking a card and
    standing. Standing and busting are terminal.
    """

    STATES = [p.name.lower() for p in TurnPhase]

    TRANSITIONS = [
        {"trigger": "take_card", "source": "hitting", "dest": "hitting"},
        {"trigger": "stand", "source": "hitting", "dest": "standing"},
        {"trigger": "bust", "source": "hitting", "dest": "busted"},
    ]

    def __init__(
        self,
        owner: HandOwner,
        decide: Decision,
        events: EventEmitter | None = None,
    ) -> None:
        """
        Initialize a turn.

        Args:
            owner: Whose hand this turn plays
            decide: Returns True to take another card
            events: Optional emitter for narration
        """
        self.owner = owner
        self.decide = decide
        self.events = events

        self.machine = Machine(
            model=self,
            states=self.STATES,
            transitions=self.TRANSITIONS,
            initial="hitting",
            auto_transitions=False,
            model_attribute="_machine_state",
        )

    @property
    def phase(self) -> TurnPhase:
        """Get current turn phase as enum."""
        return TurnPhase[self._machine_state.upper()]  # type: ignore

    @property
    def is_finished(self) -> bool:
        """Check if the turn reached a terminal phase."""
        return self.phase is not TurnPhase.HITTING

    def step(self, state: GameState) -> GameState:
        """Take a single action and return the resulting state."""
        hand = state.hand(self.owner)
        score = hand.value
        hit_event, stand_event, bust_event = _TURN_EVENTS[self.owner]

        self._emit(
            EventType.HAND_SHOWN,
            owner=str(self.owner),
            cards=[card.name for card in hand],
            score=score,
        )

        if score > BLACKJACK:
            self.bust()
            self._emit(bust_event, score=score)
            return state

        if self.decide(state):
            state = hit(self.owner, state)
            self.take_card()
            self._emit(hit_event, card=state.hand(self.owner).cards[0].name)
            return state

        self.stand()
        self._emit(stand_event, score=score)
        return state

    def play(self, state: GameState) -> GameState:
        """Step until the turn stands or busts."""
        while not self.is_finished:
            state = self.step(state)
        return state

    def _emit(self, event_type: EventType, **data) -> None:
        if self.events is not None:
            self.events.emit_new(event_type, **data)


def dealer_turn(state: GameState, events: EventEmitter | None = None) -> GameState:
    """Play the dealer's hand under the stand-on-17 rule."""
    return Turn(HandOwner.DEALER, dealer_policy, events).play(state)


def player_turn(
    strategy: Decision,
    state: GameState,
    events: EventEmitter | None = None,
) -> GameState:
    """Play the player's hand, asking the strategy before each card."""
    return Turn(HandOwner.PLAYER, strategy, events).play(state)


@dataclass(frozen=True)
class RoundResult:
    """A finished round."""

    state: GameState
    player_score: int
    dealer_score: int
    outcome: RoundOutcome


def play_round(
    strategy: Decision,
    state: GameState,
    events: EventEmitter | None = None,
) -> RoundResult:
    """
    Play one round from a freshly dealt state.

    The player goes first, then the dealer. The dealer plays out the hand
    even when the player has already busted.
    """
    if events is not None:
        upcard = state.dealer_upcard
        events.emit_new(
            EventType.DEALER_SHOWING,
            card=upcard.name if upcard is not None else None,
        )

    state = player_turn(strategy, state, events)
    state = dealer_turn(state, events)

    player_score = state.player_hand.value
    dealer_score = state.dealer_hand.value
    outcome = resolve(player_score, dealer_score)

    if events is not None:
        events.emit_new(
            _OUTCOME_EVENTS[outcome],
            player_score=player_score,
            dealer_score=dealer_score,
        )

    return RoundResult(
        state=state,
        player_score=player_score,
        dealer_score=dealer_score,
        outcome=outcome,
    )
