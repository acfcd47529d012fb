class PolylineError(Exception):
    """Base class for all polyline codec errors."""


class FormatError(PolylineError):
    """Raised when an encoded string cannot be decoded."""

    def __init__(self, message: str, position: int):
        super().__init__(f"{message} (at index {position})")
        self.position = position


class ConfigurationError(PolylineError):
    """Raised when an EncodingConfig is built with invalid values."""


class GeometryError(PolylineError):
    """Raised when decoded points cannot form the requested geometry."""
