"""Diagnostics sink for soft failures.

Query and conversion operations never raise on bad input. Instead they record
one ``Diagnostic`` per failure on the current ``Diagnostics`` collector and
return a sentinel. Every record is also sent to the ``utm_lib`` loggers so
applications see it without inspecting the collector.

Example:
    >>> with capture_diagnostics() as diagnostics:
    ...     zone_of(None)
    -1
    >>> diagnostics.errors
    ['Cannot query a null geospatial object.']
"""

from __future__ import annotations

import logging
import threading
from contextlib import contextmanager
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, List, Optional


class Severity(str, Enum):
    """Severity of a recorded diagnostic."""

    ERROR = "error"
    WARNING = "warning"


@dataclass(frozen=True)
class Diagnostic:
    """A single reported failure."""

    severity: Severity
    message: str


class Diagnostics:
    """Thread-safe collector of diagnostics.

    Records may be appended from the projection worker threads, so all access
    to the underlying list goes through a lock.
    """

    def __init__(self, name: str = "utm_lib") -> None:
        self._logger = logging.getLogger(name)
        self._lock = threading.Lock()
        self._records: List[Diagnostic] = []

    def record(self, severity: Severity, message: str) -> None:
        """Append a diagnostic and log it."""
        level = logging.ERROR if severity is Severity.ERROR else logging.WARNING
        self._logger.log(level, message)
        with self._lock:
            self._records.append(Diagnostic(severity, message))

    def record_error(self, message: str) -> None:
        self.record(Severity.ERROR, message)

    def record_warning(self, message: str) -> None:
        self.record(Severity.WARNING, message)

    @property
    def records(self) -> List[Diagnostic]:
        with self._lock:
            return list(self._records)

    @property
    def errors(self) -> List[str]:
        return [r.message for r in self.records if r.severity is Severity.ERROR]

    @property
    def warnings(self) -> List[str]:
        return [r.message for r in self.records if r.severity is Severity.WARNING]

    def clear(self) -> None:
        with self._lock:
            self._records.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)


_diagnostics = Diagnostics()


def get_diagnostics() -> Diagnostics:
    """Return the process-wide diagnostics collector."""
    return _diagnostics


def set_diagnostics(diagnostics: Diagnostics) -> Diagnostics:
    """Install ``diagnostics`` as the process-wide collector.

    Returns:
        The collector that was previously installed.
    """
    global _diagnostics
    previous = _diagnostics
    _diagnostics = diagnostics
    return previous


@contextmanager
def capture_diagnostics(diagnostics: Optional[Diagnostics] = None) -> Iterator[Diagnostics]:
    """Temporarily route all diagnostics to a fresh (or given) collector."""
    collector = diagnostics if diagnostics is not None else Diagnostics()
    previous = set_diagnostics(collector)
    try:
        yield collector
    finally:
        set_diagnostics(previous)


def record_error(message: str) -> None:
    """Record an error on the process-wide collector."""
    _diagnostics.record_error(message)


def record_warning(message: str) -> None:
    """Record a warning on the process-wide collector."""
    _diagnostics.record_warning(message)
