"""Worker-count configuration and runtime diagnostics."""

from __future__ import annotations

import logging
import os
import re

logger = logging.getLogger(__name__)

DEFAULT_WORKERS = 3
WORKER_THREADS_ENV = "WORKER_THREADS"

_UNSIGNED = re.compile(r"\+?[0-9]+")


def detect_cpu_cores() -> int:
    """Number of CPU cores available, at least 1."""
    return os.cpu_count() or 1


def get_worker_count() -> int:
    """Configured worker count.

    Taken from WORKER_THREADS when it holds a non-negative integer, otherwise 3;
    capped at one less than the number of cores and never below 1.
    """
    raw = os.environ.get(WORKER_THREADS_ENV)
    requested = int(raw) if raw is not None and _UNSIGNED.fullmatch(raw) else DEFAULT_WORKERS
    cap = max(detect_cpu_cores() - 1, 0)
    return max(min(requested, cap), 1)


def init_runtime() -> tuple[int, int]:
    """Log the detected cores and configured workers, and return them."""
    cpu_cores = detect_cpu_cores()
    worker_count = get_worker_count()
    logger.info(
        "Initializing runtime: %d CPU cores detected, %d worker threads configured",
        cpu_cores,
        worker_count,
    )
    return cpu_cores, worker_count


def log_runtime_config() -> list[str]:
    """Log a summary box of the runtime configuration and return its lines."""
    cpu_cores = detect_cpu_cores()
    workers = get_worker_count()
    lines = [
        "╔════════════════════════════════════════╗",
        "║     Async Multi-Worker Runtime         ║",
        "╠════════════════════════════════════════╣",
        f"║ CPU Cores: {cpu_cores:<31} ║",
        f"║ Worker Threads: {workers:<26} ║",
        f"║ Max Concurrent Tasks: {workers:<21} ║",
        "║ Core 0: API Server                      ║",
        f"║ Cores 1-{workers}: Task Workers (Parallel)     ║",
        "╚════════════════════════════════════════╝",
    ]
    for line in lines:
        logger.info("%s", line)
    return lines


def log_worker_status(available_permits: int, total_workers: int) -> int:
    """Log how many workers are busy and return that number.

    Raises ValueError if more permits are available than there are workers.
    """
    if available_permits > total_workers:
        raise ValueError(
            f"available permits ({available_permits}) exceed total workers ({total_workers})"
        )
    active = total_workers - available_permits
    logger.info(
        "Worker Pool Status: %d/%d active (available permits: %d)",
        active,
        total_workers,
        available_permits,
    )
    return active