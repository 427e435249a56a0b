"""Core functionality for utm-lib."""

from utm_lib.core.definitions import Axis
from utm_lib.core.diagnostics import (
    Diagnostic,
    Diagnostics,
    Severity,
    capture_diagnostics,
    get_diagnostics,
    set_diagnostics,
)
from utm_lib.core.exceptions import ProjectionError, UTMLibError, ValidationError
from utm_lib.core.projector import Projector, utm_coordinates

__all__ = [
    "Axis",
    "Projector",
    "utm_coordinates",
    "Diagnostic",
    "Diagnostics",
    "Severity",
    "capture_diagnostics",
    "get_diagnostics",
    "set_diagnostics",
    "UTMLibError",
    "ProjectionError",
    "ValidationError",
]
