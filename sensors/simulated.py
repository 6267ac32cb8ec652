# sensors/simulated.py
import random
import time
from typing import Tuple

# Demo values only: seeded from the clock, not meant to be random in any strong sense.


def _clock_fraction(offset: int = 0) -> float:
    rng = random.Random(time.time_ns() + offset)
    return rng.randrange(1000) / 1000.0


def simulate_temperature() -> float:
    """Temperature in [20.0, 35.0) C."""
    return 20.0 + _clock_fraction() * 15.0


def simulate_humidity() -> float:
    """Relative humidity in [40.0, 80.0) %."""
    return 40.0 + _clock_fraction(12345) * 40.0


def read_simulated() -> Tuple[float, float]:
    return simulate_temperature(), simulate_humidity()
