# file: backend/exceptions.py


class AirQualityError(Exception):
    """Base error for the air quality dashboard."""


class MissingDataError(AirQualityError):
    """No telemetry is available to compute a view from."""


class EmptySliceError(MissingDataError):
    """The selected time window holds no hours."""


class MalformedRecordError(AirQualityError):
    """Upstream record series disagree in length or could not be parsed."""


class UnknownCityError(AirQualityError):
    """City is not part of the catalog."""


class InvalidCredentialsError(AirQualityError):
    """Username/password pair was rejected."""
