from datetime import date, timedelta

import pytest

from weather_odds.app import create_app
from weather_odds.geocoding import LocationLabel


def power_document(days, temps, humidity, rain, fill_value=-999.0):
    """Build a NASA POWER daily point response for the given dates and values."""
    keys = [d.strftime("%Y%m%d") for d in days]
    return {
        "header": {"fill_value": fill_value},
        "properties": {
            "parameter": {
                "T2M": dict(zip(keys, temps)),
                "RH2M": dict(zip(keys, humidity)),
                "PRECTOTCORR": dict(zip(keys, rain)),
            }
        },
    }


def date_range(start, count):
    return [start + timedelta(days=i) for i in range(count)]


class FakeProvider:
    def __init__(self, document=None, error=None):
        self.document = document
        self.error = error
        self.calls = []

    def fetch_daily(self, latitude, longitude, start, end):
        self.calls.append((latitude, longitude, start, end))
        if self.error is not None:
            raise self.error
        return self.document


class FakeResolver:
    def __init__(self, name="New York, United States"):
        self.name = name

    def resolve(self, latitude, longitude):
        return LocationLabel(name=self.name, resolved=True)


@pytest.fixture
def july_window_days():
    return date_range(date(2023, 6, 27), 15)


@pytest.fixture
def make_client():
    def _make(provider, resolver=None):
        app = create_app(provider=provider, resolver=resolver or FakeResolver())
        app.config["TESTING"] = True
        return app.test_client()

    return _make
