from __future__ import annotations

import logging
from dataclasses import dataclass

from geopy.geocoders import Nominatim

from weather_odds import config

logger = logging.getLogger("weather_odds.geocoding")


@dataclass(frozen=True)
class LocationLabel:
    name: str
    resolved: bool


def fallback_label(latitude: float, longitude: float) -> LocationLabel:
    return LocationLabel(name=f"Location ({latitude:.2f}, {longitude:.2f})", resolved=False)


class LocationResolver:
    """Best-effort reverse geocoding through Nominatim. Never raises."""

    def __init__(self, geolocator=None, timeout: float = config.GEOCODE_TIMEOUT_SECONDS) -> None:
        self._geolocator = geolocator or Nominatim(user_agent=config.NOMINATIM_USER_AGENT)
        self.timeout = timeout

    def resolve(self, latitude: float, longitude: float) -> LocationLabel:
        try:
            location = self._geolocator.reverse((latitude, longitude), timeout=self.timeout)
        except Exception as exc:
            # Any geocoder failure (timeout, rate limit, bad answer) falls back to coordinates
            logger.warning("Reverse geocoding failed for %s, %s: %s", latitude, longitude, exc)
            return fallback_label(latitude, longitude)

        if location is None or not location.address:
            logger.info("No place name for %s, %s", latitude, longitude)
            return fallback_label(latitude, longitude)
        return LocationLabel(name=location.address, resolved=True)
