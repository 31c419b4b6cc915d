class ForecastError(ValueError):
    """Base class for every failure raised by the forecasting engine."""


class InsufficientDataError(ForecastError):
    """Not enough observations for the requested operation."""


class UnknownModelError(ForecastError, KeyError):
    """Model name is not present in the registry."""

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the plain message.
        return str(self.args[0]) if self.args else ""


class InvalidInputError(ForecastError):
    """Malformed arguments such as mismatched lengths or non-finite values."""


class DegenerateMetricsError(ForecastError):
    """A metric is statistically undefined for the given inputs."""
