# pugplot/errors.py


class PugPlotError(Exception):
    """Base class for per-compound failures the CLI reports and skips."""


class FetchError(PugPlotError):
    """Network error or non-2xx response for one compound name."""

    def __init__(self, name: str, message: str, status=None):
        super().__init__(message)
        self.name = name
        self.status = status


class DecodeError(PugPlotError):
    """Payload is not JSON, or a field has the wrong shape."""


class PlotError(PugPlotError):
    """Bond endpoints could not be placed on the conformer."""


class NoConformerError(PlotError):
    """No first conformer in the first coordinate set."""
