"""Pacing constants.

Unit conventions:
- Swim pace is seconds per 100 meters
- Run pace is seconds per 1000 meters
- Bike uses speed in km/h
"""

from typing import Literal

Discipline = Literal["swim", "bike", "run"]

DISCIPLINES: tuple[str, ...] = ("swim", "bike", "run")

# Meters covered by one unit of pace
PACE_UNIT_METERS: dict[str, float] = {
    "swim": 100.0,
    "run": 1000.0,
}

MAX_DURATION_S = 86_400  # 24 hours
MAX_DISTANCE_M = 1_000_000.0  # 1000 km
MAX_SPEED_KMH = 100.0

SECONDS_PER_HOUR = 3600
METERS_PER_KM = 1000.0
