"""
NASA POWER daily point client.

One GET per request for PRECTOTCORR, T2M and RH2M over a YYYYMMDD date range.
No retries: a failed call is reported to the caller as UpstreamError.
"""
from __future__ import annotations

import logging
from datetime import date
from typing import Any

import requests

from weather_odds import config
from weather_odds.errors import UpstreamError

logger = logging.getLogger("weather_odds.nasa_power")


def format_power_date(day: date) -> str:
    return day.strftime("%Y%m%d")


class NasaPowerClient:
    """Fetch daily climate series from https://power.larc.nasa.gov/ (no API key)."""

    def __init__(
        self,
        base_url: str = config.NASA_POWER_URL,
        timeout: float = config.NASA_TIMEOUT_SECONDS,
        session: requests.Session | None = None,
    ) -> None:
        self.base_url = base_url
        self.timeout = timeout
        self._http = session or requests

    def fetch_daily(self, latitude: float, longitude: float, start: date, end: date) -> dict[str, Any]:
        params = {
            "parameters": ",".join(config.NASA_POWER_PARAMETERS),
            "community": config.NASA_POWER_COMMUNITY,
            "longitude": longitude,
            "latitude": latitude,
            "start": format_power_date(start),
            "end": format_power_date(end),
            "format": "JSON",
        }
        logger.info(
            "NASA POWER request lat=%s lon=%s %s..%s",
            latitude, longitude, params["start"], params["end"],
        )

        try:
            response = self._http.get(self.base_url, params=params, timeout=self.timeout)
        except requests.exceptions.RequestException as exc:
            raise UpstreamError(f"NASA API unreachable: {exc}") from exc

        if not response.ok:
            raise UpstreamError(f"NASA API error: {response.status_code}")

        try:
            return response.json()
        except ValueError as exc:
            logger.error("NASA POWER sent invalid JSON: %s", response.text[:200])
            raise UpstreamError(f"NASA API returned invalid JSON: {exc}") from exc


def extract_parameters(document: dict[str, Any]) -> dict[str, dict[str, float]]:
    """Return properties.parameter, or an empty dict when the block is absent."""
    properties = document.get("properties") or {}
    return properties.get("parameter") or {}


def missing_value(document: dict[str, Any]) -> float:
    """The sentinel the response declares in header.fill_value, else the documented -999."""
    header = document.get("header") or {}
    fill_value = header.get("fill_value")
    if fill_value is None:
        return config.MISSING_VALUE
    try:
        return float(fill_value)
    except (TypeError, ValueError):
        return config.MISSING_VALUE
