"""Pydantic schemas for API requests and responses."""

from typing import Any

from pydantic import BaseModel, Field

from config import config


# Simulation schemas
class SimulationRequest(BaseModel):
    """Request to simulate a batch of rounds."""

    trials: int = Field(
        default=config.simulation.trials,
        ge=1,
        le=config.simulation.max_api_trials,
        description="Number of rounds to play",
    )
    strategy: str = Field(default="inactive", description="Player strategy name")
    seed: int | None = Field(default=None, description="Seed for a reproducible run")


class RoundRequest(BaseModel):
    """Request to play a single narrated round."""

    strategy: str = Field(default="inactive", description="Player strategy name")
    seed: int | None = Field(default=None, description="Seed for a reproducible deal")


class OutcomeStats(BaseModel):
    """Count and share of one outcome."""

    count: int
    percentage: float


class SimulationResponse(BaseModel):
    """Batch results."""

    strategy: str
    rounds: int
    player_wins: OutcomeStats
    dealer_wins: OutcomeStats
    draws: OutcomeStats


class CardResponse(BaseModel):
    """Card representation."""

    rank: str
    suit: str
    value: int
    name: str


class HandResponse(BaseModel):
    """Hand representation."""

    cards: list[CardResponse]
    value: int
    is_soft: bool
    is_busted: bool


class EventResponse(BaseModel):
    """One narration event."""

    type: str
    data: dict[str, Any]


class RoundResponse(BaseModel):
    """A finished round with its narration."""

    strategy: str
    player_hand: HandResponse
    dealer_hand: HandResponse
    dealer_upcard: CardResponse | None
    player_score: int
    dealer_score: int
    outcome: str
    events: list[EventResponse]


class StrategiesResponse(BaseModel):
    """Strategies the API can run."""

    strategies: list[str]
