"""
Reference-window aggregation.

The target date's prior-year anniversary, padded by a week on either side,
stands in for "typical" conditions on that calendar date. Each valid day is
scored on its own, then the window means are scored once more with the same
function.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date, timedelta
from typing import Any

import numpy as np
import pandas as pd

from weather_odds import config
from weather_odds.errors import NoDataError, NoValidDataError
from weather_odds.nasa_power import (
    NasaPowerClient,
    extract_parameters,
    format_power_date,
    missing_value,
)
from weather_odds.scoring import ProbabilityScores, score

logger = logging.getLogger("weather_odds.aggregation")

# NASA POWER parameter → column name
COLUMNS = {"T2M": "temperature", "RH2M": "humidity", "PRECTOTCORR": "rain"}


def prior_year_date(target: date) -> date:
    try:
        return target.replace(year=target.year - 1)
    except ValueError:
        # 29 February has no counterpart the year before; roll over to 1 March
        return date(target.year - 1, 3, 1)


@dataclass(frozen=True)
class ReferenceWindow:
    start: date
    end: date

    def days(self) -> list[date]:
        return [self.start + timedelta(days=i) for i in range((self.end - self.start).days + 1)]

    def label(self) -> str:
        return f"{format_power_date(self.start)} to {format_power_date(self.end)}"


def reference_window(target: date) -> ReferenceWindow:
    center = prior_year_date(target)
    half = timedelta(days=config.WINDOW_HALF_WIDTH_DAYS)
    return ReferenceWindow(start=center - half, end=center + half)


@dataclass(frozen=True)
class DailyProbabilities:
    date: str  # YYYYMMDD, as keyed by NASA POWER
    temperature: float
    humidity: float
    rain: float
    scores: ProbabilityScores

    def to_dict(self) -> dict[str, Any]:
        return {
            "date": self.date,
            "temperature": self.temperature,
            "humidity": self.humidity,
            "rain": self.rain,
            **self.scores.rounded(),
        }


@dataclass(frozen=True)
class AggregateResult:
    latitude: float
    longitude: float
    reference_period: str
    reference_days_used: int
    mean_rain_mm: float
    mean_temperature_c: float
    mean_humidity_percent: float
    scores: ProbabilityScores
    daily: list[DailyProbabilities] = field(default_factory=list)
    location: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "location": self.location,
            "latitude": self.latitude,
            "longitude": self.longitude,
            "reference_period": self.reference_period,
            "reference_days_used": self.reference_days_used,
            "mean_rain_mm": self.mean_rain_mm,
            "mean_temperature_C": self.mean_temperature_c,
            "mean_humidity_percent": self.mean_humidity_percent,
            **self.scores.rounded(),
            "daily": [day.to_dict() for day in self.daily],
        }


def valid_days(parameters: dict[str, dict[str, float]], sentinel: float) -> pd.DataFrame:
    """
    One row per date (ascending) whose temperature, humidity and rain are all
    present and none equals the sentinel.
    """
    frame = pd.DataFrame(
        {
            column: pd.Series(parameters.get(name) or {}, dtype="float64")
            for name, column in COLUMNS.items()
        }
    )
    frame = frame.replace(sentinel, np.nan).dropna()
    return frame.sort_index()


class ClimateWindowAggregator:
    def __init__(self, provider: NasaPowerClient | None = None) -> None:
        self.provider = provider or NasaPowerClient()

    def aggregate(self, latitude: float, longitude: float, target: date) -> AggregateResult:
        window = reference_window(target)
        month = target.month
        document = self.provider.fetch_daily(latitude, longitude, window.start, window.end)

        parameters = extract_parameters(document)
        if not parameters:
            raise NoDataError(f"No parameter data for {latitude}, {longitude}")

        frame = valid_days(parameters, missing_value(document))
        if frame.empty:
            raise NoValidDataError(f"All days in {window.label()} are missing data")

        # Per-day scores use the target month: the window is centred on the anniversary
        daily = [
            DailyProbabilities(
                date=str(day),
                temperature=float(row.temperature),
                humidity=float(row.humidity),
                rain=float(row.rain),
                scores=score(row.temperature, row.humidity, row.rain, latitude, month),
            )
            for day, row in frame.iterrows()
        ]

        means = frame.mean()
        aggregate_scores = score(
            float(means["temperature"]),
            float(means["humidity"]),
            float(means["rain"]),
            latitude,
            month,
        )
        logger.info(
            "Scored %d/%d valid days for %s, %s (%s)",
            len(frame), len(window.days()), latitude, longitude, window.label(),
        )

        return AggregateResult(
            latitude=latitude,
            longitude=longitude,
            reference_period=window.label(),
            reference_days_used=len(frame),
            mean_rain_mm=round(float(means["rain"]), 2),
            mean_temperature_c=round(float(means["temperature"]), 1),
            mean_humidity_percent=round(float(means["humidity"]), 1),
            scores=aggregate_scores,
            daily=daily,
        )
