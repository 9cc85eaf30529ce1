"""
Rule-based weather probability scoring.

These are coarse threshold heuristics, not a calibrated model: temperature
extremes, a heat-index-like heat+humidity band, and precipitation intensity
tiers with a hemispheric season correction.

The season correction is a known approximation. Northern "wet" months
(October to March) only earn the bonus north of the equator, and the
remaining months only earn it at latitude <= 0, so the equator itself is
treated as southern.
"""
from __future__ import annotations

from dataclasses import asdict, dataclass

from weather_odds import config

SEASONAL_WET_BONUS = 15


@dataclass(frozen=True)
class ProbabilityScores:
    hot: float
    cold: float
    wet: float
    uncomfortable: float

    def rounded(self) -> dict[str, int]:
        """Integer percentages keyed the way the HTTP payload names them."""
        return {
            "veryHotProbability": int(round(self.hot)),
            "veryColdProbability": int(round(self.cold)),
            "veryWetProbability": int(round(self.wet)),
            "veryUncomfortableProbability": int(round(self.uncomfortable)),
        }

    def as_dict(self) -> dict[str, float]:
        return asdict(self)


def _hot(temperature: float) -> int:
    if temperature >= 35:
        return 90
    if temperature >= 32:
        return 70
    if temperature >= 30:
        return 50
    return 0


def _cold(temperature: float) -> int:
    if temperature <= -5:
        return 90
    if temperature <= 0:
        return 70
    if temperature <= 5:
        return 50
    return 0


def _uncomfortable(temperature: float, humidity: float) -> int:
    if temperature >= 32 and humidity >= 60:
        return 90
    if temperature >= 28 and humidity >= 70:
        return 75
    if temperature >= 25 and humidity >= 60:
        return 50
    return 0


def _wet(precipitation: float, latitude: float, month: int) -> int:
    if precipitation >= 15:
        wet = 85
    elif precipitation >= 5:
        wet = 50
    elif precipitation >= 1:
        wet = 20
    else:
        wet = 0

    # October through March
    if month >= 10 or month <= 3:
        if latitude > 0:
            wet += SEASONAL_WET_BONUS
    elif latitude <= 0:
        wet += SEASONAL_WET_BONUS
    return wet


def score(
    temperature: float,
    humidity: float,
    precipitation: float,
    latitude: float,
    month: int,
) -> ProbabilityScores:
    """Score one set of conditions. Every result is capped at MAX_PROBABILITY."""
    cap = config.MAX_PROBABILITY
    return ProbabilityScores(
        hot=min(_hot(temperature), cap),
        cold=min(_cold(temperature), cap),
        wet=min(_wet(precipitation, latitude, month), cap),
        uncomfortable=min(_uncomfortable(temperature, humidity), cap),
    )
