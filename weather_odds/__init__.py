"""Historical weather odds for a coordinate and calendar date, backed by NASA POWER."""

__version__ = "1.0.0"
