"""Shared thread pool and fan-out helpers for child projections.

Only the outermost fan-out of a conversion submits work to the pool. A fan-out
started from inside a worker thread runs inline, so each call has a single
level of parallelism and no worker ever blocks waiting on the pool it runs in.
"""

from __future__ import annotations

import logging
import threading
from concurrent.futures import Future, ThreadPoolExecutor, as_completed
from typing import Callable, Dict, Iterable, List, Optional, Sequence, TypeVar

from utm_lib.config import get_config

logger = logging.getLogger(__name__)

T = TypeVar("T")
R = TypeVar("R")

_thread_pool: Optional[ThreadPoolExecutor] = None
_pool_lock = threading.Lock()
_worker_state = threading.local()


def get_thread_pool() -> ThreadPoolExecutor:
    """Get or create the shared thread pool for projections."""
    global _thread_pool
    with _pool_lock:
        if _thread_pool is None:
            config = get_config()
            _thread_pool = ThreadPoolExecutor(
                max_workers=config.max_workers,
                thread_name_prefix=config.thread_name_prefix,
            )
            logger.debug(
                f"Created projection thread pool (max_workers={config.max_workers})"
            )
        return _thread_pool


def shutdown_thread_pool() -> None:
    """Shut down the shared pool; the next fan-out creates a new one."""
    global _thread_pool
    with _pool_lock:
        pool, _thread_pool = _thread_pool, None
    if pool is not None:
        pool.shutdown(wait=True)


def in_worker() -> bool:
    """Return True when called from a projection worker thread."""
    return getattr(_worker_state, "active", False)


def _run_in_worker(func: Callable[[T], R], item: T) -> R:
    _worker_state.active = True
    try:
        return func(item)
    finally:
        _worker_state.active = False


def _should_fan_out(items: Sequence) -> bool:
    return get_config().parallel and len(items) > 1 and not in_worker()


def map_ordered(func: Callable[[T], Optional[R]], items: Iterable[T]) -> List[R]:
    """
    Apply ``func`` to every item, keeping the input order.

    Each task is tagged with the index of its item. Results are collected into
    an index-keyed map as they complete and linearised by sorting on the index.
    Items for which ``func`` returns None are skipped.

    Args:
        func: Conversion applied to each item
        items: Items to convert

    Returns:
        The non-None results in input order
    """
    items = list(items)
    results: Dict[int, R] = {}

    if not _should_fan_out(items):
        for index, item in enumerate(items):
            result = func(item)
            if result is not None:
                results[index] = result
    else:
        pool = get_thread_pool()
        futures: Dict[Future, int] = {
            pool.submit(_run_in_worker, func, item): index for index, item in enumerate(items)
        }
        for future in as_completed(futures):
            result = future.result()
            if result is not None:
                results[futures[future]] = result

    return [results[index] for index in sorted(results)]
