"""Statistics for simulated rounds."""

from core.statistics.tally import Tally

__all__ = [
    "Tally",
]
