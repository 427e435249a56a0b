"""Runtime configuration for utm-lib."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from utm_lib.core.exceptions import ValidationError


@dataclass
class UTMConfig:
    """
    Configuration for UTM conversion.

    Attributes:
        max_workers: Size of the shared projection thread pool. ``None`` lets
            ``ThreadPoolExecutor`` pick its default.
        thread_name_prefix: Name prefix of the pool's worker threads
        parallel: Fan child projections out to the thread pool. When False
            every conversion runs inline on the calling thread.

    Notes:
        - Output is identical whether or not ``parallel`` is set
        - Changing the configuration with ``set_config`` recreates the pool
    """

    max_workers: Optional[int] = None
    thread_name_prefix: str = "utm_projector"
    parallel: bool = True

    def __post_init__(self):
        if self.max_workers is not None and self.max_workers < 1:
            raise ValidationError(f"max_workers must be at least 1, got {self.max_workers}")


_config = UTMConfig()


def get_config() -> UTMConfig:
    """Return the active configuration."""
    return _config


def set_config(config: UTMConfig) -> UTMConfig:
    """
    Install a new configuration.

    Args:
        config: The configuration to activate

    Returns:
        The previously active configuration
    """
    global _config
    from utm_lib.core.parallel import shutdown_thread_pool

    previous = _config
    _config = config
    shutdown_thread_pool()
    return previous
