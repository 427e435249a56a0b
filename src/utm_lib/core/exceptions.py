"""Custom exceptions for utm-lib."""


class UTMLibError(Exception):
    """Base exception for utm-lib."""

    pass


class ProjectionError(UTMLibError):
    """Raised when a WGS84 to UTM transformation fails."""

    pass


class ValidationError(UTMLibError):
    """Raised when input validation fails."""

    pass
