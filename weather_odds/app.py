from __future__ import annotations

import dataclasses
import logging
from datetime import date, datetime

from flask import Flask, jsonify, request
from flask_cors import CORS

from weather_odds.aggregation import ClimateWindowAggregator
from weather_odds.errors import (
    MissingParameterError,
    NoDataError,
    NoValidDataError,
    ValidationError,
)
from weather_odds.geocoding import LocationResolver
from weather_odds.nasa_power import NasaPowerClient

logger = logging.getLogger("weather_odds.app")

MISSING_PARAMS_MESSAGE = "Date, latitude, and longitude are required"
INVALID_PARAMS_MESSAGE = "Invalid latitude, longitude, or date"
NO_DATA_MESSAGE = "No weather data available for this location"
NO_VALID_DATA_MESSAGE = "No valid weather data found for the selected period"
FETCH_ERROR_MESSAGE = "Error fetching weather data"


def parse_query(args) -> tuple[float, float, date]:
    """Read lat, lon and date (YYYY-MM-DD) from the query string."""
    lat = args.get("lat")
    lon = args.get("lon")
    date_str = args.get("date")

    if not date_str or not lat or not lon:
        raise MissingParameterError(MISSING_PARAMS_MESSAGE)

    try:
        latitude = float(lat)
        longitude = float(lon)
        target = datetime.strptime(date_str, "%Y-%m-%d").date()
    except ValueError as exc:
        raise ValidationError(str(exc)) from exc

    if not -90 <= latitude <= 90:
        raise ValidationError(f"latitude {latitude} outside [-90, 90]")
    if not -180 <= longitude <= 180:
        raise ValidationError(f"longitude {longitude} outside [-180, 180]")
    if target.year < 2:
        raise ValidationError(f"date {date_str} has no prior year")
    return latitude, longitude, target


def create_app(provider=None, resolver=None) -> Flask:
    app = Flask(__name__)
    # Every origin may call the API
    CORS(app)

    aggregator = ClimateWindowAggregator(provider or NasaPowerClient())
    resolver = resolver or LocationResolver()

    @app.route("/health", methods=["GET"])
    def health():
        return jsonify({"status": "ok"})

    @app.route("/weather", methods=["GET"])
    def weather():
        try:
            latitude, longitude, target = parse_query(request.args)
        except MissingParameterError:
            logger.warning("Missing parameters in %s", dict(request.args))
            return jsonify({"error": MISSING_PARAMS_MESSAGE}), 400
        except ValidationError as exc:
            logger.warning("Rejected query %s: %s", dict(request.args), exc)
            return jsonify({"error": INVALID_PARAMS_MESSAGE, "details": str(exc)}), 400

        try:
            location = resolver.resolve(latitude, longitude)
            result = aggregator.aggregate(latitude, longitude, target)
        except NoDataError as exc:
            logger.warning("%s", exc)
            return jsonify({"error": NO_DATA_MESSAGE}), 404
        except NoValidDataError as exc:
            logger.warning("%s", exc)
            return jsonify({"error": NO_VALID_DATA_MESSAGE}), 404
        except Exception as exc:
            logger.exception("Server error for %s, %s on %s", latitude, longitude, target)
            return jsonify({"error": FETCH_ERROR_MESSAGE, "details": str(exc)}), 500

        result = dataclasses.replace(result, location=location.name)
        return jsonify(result.to_dict())

    return app
