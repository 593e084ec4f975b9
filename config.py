"""Configuration management with environment variable support."""

import os
from dataclasses import dataclass, field


def _parse_cors_origins() -> list[str]:
    """Parse CORS_ORIGINS environment variable."""
    origins = os.getenv("CORS_ORIGINS", "http://localhost:8000")
    return [o.strip() for o in origins.split(",") if o.strip()]


def _parse_seed() -> int | None:
    """Parse BLACKJACK_SEED; unset or empty means an unseeded run."""
    seed = os.getenv("BLACKJACK_SEED", "").strip()
    return int(seed) if seed else None


@dataclass(frozen=True)
class CORSConfig:
    """CORS configuration."""

    allowed_origins: list[str] = field(default_factory=_parse_cors_origins)
    allow_credentials: bool = True
    allow_methods: list[str] = field(default_factory=lambda: ["*"])
    allow_headers: list[str] = field(default_factory=lambda: ["*"])


@dataclass(frozen=True)
class RateLimitConfig:
    """Rate limiting configuration."""

    enabled: bool = field(
        default_factory=lambda: os.getenv("RATE_LIMIT_ENABLED", "true").lower() == "true"
    )
    requests_per_minute: int = field(
        default_factory=lambda: int(os.getenv("RATE_LIMIT_RPM", "60"))
    )


@dataclass(frozen=True)
class SimulationConfig:
    """Batch simulation defaults."""

    trials: int = field(default_factory=lambda: int(os.getenv("BLACKJACK_TRIALS", "1000")))
    strategy: str = field(default_factory=lambda: os.getenv("BLACKJACK_STRATEGY", "inactive"))
    seed: int | None = field(default_factory=_parse_seed)
    narrate: bool = field(
        default_factory=lambda: os.getenv("BLACKJACK_NARRATE", "true").lower() == "true"
    )
    max_api_trials: int = field(
        default_factory=lambda: int(os.getenv("BLACKJACK_MAX_API_TRIALS", "10000"))
    )

    def __post_init__(self) -> None:
        """Validate settings."""
        if self.trials < 0:
            raise ValueError("trials must be non-negative")
        if self.max_api_trials < 1:
            raise ValueError("max_api_trials must be at least 1")


@dataclass(frozen=True)
class AppConfig:
    """Application configuration."""

    debug: bool = field(default_factory=lambda: os.getenv("DEBUG", "false").lower() == "true")
    host: str = field(default_factory=lambda: os.getenv("HOST", "0.0.0.0"))
    port: int = field(default_factory=lambda: int(os.getenv("PORT", "8000")))

    simulation: SimulationConfig = field(default_factory=SimulationConfig)
    cors: CORSConfig = field(default_factory=CORSConfig)
    rate_limit: RateLimitConfig = field(default_factory=RateLimitConfig)


# Global configuration instance
config = AppConfig()
