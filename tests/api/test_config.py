"""Tests for configuration classes."""

import os
import pytest
from unittest.mock import patch


class TestCORSConfig:
    """Tests for CORSConfig class."""

    def test_cors_default_origins(self):
        """Test that default CORS origins are set correctly."""
        with patch.dict(os.environ, {}, clear=True):
            from config import CORSConfig

            config = CORSConfig()

            assert "http://localhost:8000" in config.allowed_origins

    def test_cors_parses_env_var(self):
        """Test that CORS origins are parsed from environment variable."""
        env_origins = "http://example.com,  http://localhost:3000  "
        with patch.dict(os.environ, {"CORS_ORIGINS": env_origins}):
            from config import _parse_cors_origins

            origins = _parse_cors_origins()

            assert origins == ["http://example.com", "http://localhost:3000"]


class TestRateLimitConfig:
    """Tests for RateLimitConfig class."""

    def test_rate_limit_from_env(self):
        """Test rate limit settings are read from the environment."""
        with patch.dict(os.environ, {"RATE_LIMIT_ENABLED": "false", "RATE_LIMIT_RPM": "5"}):
            from config import RateLimitConfig

            config = RateLimitConfig()

            assert config.enabled is False
            assert config.requests_per_minute == 5


class TestSimulationConfig:
    """Tests for SimulationConfig class."""

    def test_defaults(self):
        """Test defaults with a clean environment."""
        with patch.dict(os.environ, {}, clear=True):
            from config import SimulationConfig

            config = SimulationConfig()

            assert config.trials == 1000
            assert config.strategy == "inactive"
            assert config.seed is None
            assert config.narrate is True
            assert config.max_api_trials == 10000

    def test_from_env(self):
        """Test every setting can come from the environment."""
        env = {
            "BLACKJACK_TRIALS": "250",
            "BLACKJACK_STRATEGY": "greedy",
            "BLACKJACK_SEED": "42",
            "BLACKJACK_NARRATE": "false",
            "BLACKJACK_MAX_API_TRIALS": "500",
        }
        with patch.dict(os.environ, env, clear=True):
            from config import SimulationConfig

            config = SimulationConfig()

            assert config.trials == 250
            assert config.strategy == "greedy"
            assert config.seed == 42
            assert config.narrate is False
            assert config.max_api_trials == 500

    def test_empty_seed_is_unseeded(self):
        """Test an empty seed variable means no seed."""
        with patch.dict(os.environ, {"BLACKJACK_SEED": "  "}):
            from config import SimulationConfig

            assert SimulationConfig().seed is None

    def test_rejects_negative_trials(self):
        """Test validation of the trial count."""
        from config import SimulationConfig

        with pytest.raises(ValueError):
            SimulationConfig(trials=-1)

    def test_config_is_frozen(self):
        """Test configuration cannot be changed at runtime."""
        from config import SimulationConfig

        config = SimulationConfig()
        with pytest.raises(AttributeError):
            config.trials = 5


class TestAppConfig:
    """Tests for AppConfig class."""

    def test_nested_sections(self):
        """Test the app config carries every section."""
        from config import AppConfig, CORSConfig, RateLimitConfig, SimulationConfig

        config = AppConfig()

        assert isinstance(config.simulation, SimulationConfig)
        assert isinstance(config.cors, CORSConfig)
        assert isinstance(config.rate_limit, RateLimitConfig)

    def test_port_from_env(self):
        """Test the port is read from the environment."""
        with patch.dict(os.environ, {"PORT": "9000"}):
            from config import AppConfig

            assert AppConfig().port == 9000
