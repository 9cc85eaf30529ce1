class WeatherOddsError(Exception):
    """Base class for every error the service maps to an HTTP response."""


class ValidationError(WeatherOddsError):
    """A required query parameter is missing or malformed."""


class NoDataError(WeatherOddsError):
    """NASA POWER returned no parameter data for the coordinate (ocean point, provider gap)."""


class NoValidDataError(WeatherOddsError):
    """Every day in the reference window carried the missing-data sentinel."""


class UpstreamError(WeatherOddsError):
    """NASA POWER was unreachable, answered with a non-OK status, or sent unreadable JSON."""


class MissingParameterError(ValidationError):
    """lat, lon or date was not supplied."""
