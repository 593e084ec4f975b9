"""Simulation API endpoints."""

from random import Random

from fastapi import APIRouter, HTTPException, Request

from api.limits import limiter, per_minute_limit
from api.schemas import (
    CardResponse,
    EventResponse,
    HandResponse,
    OutcomeStats,
    RoundRequest,
    RoundResponse,
    SimulationRequest,
    SimulationResponse,
    StrategiesResponse,
)
from core.cards import Card
from core.game import EventEmitter, new_game, play_round
from core.hand import Hand, RoundOutcome
from core.simulation import run_many
from core.strategy import AUTOMATED_STRATEGIES, Strategy, get_strategy

router = APIRouter()


def _card_response(card: Card) -> CardResponse:
    """Convert a card to its response model."""
    return CardResponse(
        rank=str(card.rank),
        suit=card.suit.value,
        value=card.value,
        name=card.name,
    )


def _hand_response(hand: Hand) -> HandResponse:
    """Convert a hand to its response model."""
    return HandResponse(
        cards=[_card_response(c) for c in hand.cards],
        value=hand.value,
        is_soft=hand.is_soft,
        is_busted=hand.is_busted,
    )


def _automated_strategy(name: str, rng: Random) -> Strategy:
    """Resolve a strategy name, rejecting ones that need a person."""
    if name not in AUTOMATED_STRATEGIES:
        raise HTTPException(status_code=404, detail=f"Unknown strategy: {name}")
    return get_strategy(name, rng)


@router.get("/strategies", response_model=StrategiesResponse)
async def list_strategies() -> StrategiesResponse:
    """List the strategies available to the API."""
    return StrategiesResponse(strategies=list(AUTOMATED_STRATEGIES))


@router.post("/run", response_model=SimulationResponse)
@limiter.limit(per_minute_limit)
def run_simulation(request: Request, body: SimulationRequest) -> SimulationResponse:
    """Play a batch of rounds and report outcome counts and percentages."""
    rng = Random(body.seed)
    strategy = _automated_strategy(body.strategy, rng)
    tally = run_many(body.trials, strategy, rng=rng)

    def stats(outcome: RoundOutcome) -> OutcomeStats:
        return OutcomeStats(
            count=tally.count(outcome),
            percentage=round(tally.percentage(outcome), 2),
        )

    return SimulationResponse(
        strategy=body.strategy,
        rounds=tally.total,
        player_wins=stats(RoundOutcome.PLAYER_WIN),
        dealer_wins=stats(RoundOutcome.DEALER_WIN),
        draws=stats(RoundOutcome.DRAW),
    )


@router.post("/round", response_model=RoundResponse)
@limiter.limit(per_minute_limit)
def play_single_round(request: Request, body: RoundRequest) -> RoundResponse:
    """Play one round and return the final hands with the event log."""
    rng = Random(body.seed)
    strategy = _automated_strategy(body.strategy, rng)

    events = EventEmitter()
    result = play_round(strategy, new_game(rng), events)
    upcard = result.state.dealer_upcard

    return RoundResponse(
        strategy=body.strategy,
        player_hand=_hand_response(result.state.player_hand),
        dealer_hand=_hand_response(result.state.dealer_hand),
        dealer_upcard=_card_response(upcard) if upcard is not None else None,
        player_score=result.player_score,
        dealer_score=result.dealer_score,
        outcome=result.outcome.name,
        events=[
            EventResponse(type=e.event_type.name, data=e.data)
            for e in events.history
        ],
    )
