"""A pool that bounds how many asynchronous tasks run at once."""

from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import AsyncIterator, Awaitable, Callable, Iterable
from contextlib import asynccontextmanager
from typing import Any, TypeVar, Union

logger = logging.getLogger(__name__)

T = TypeVar("T")


class WorkerPool:
    """Runs coroutine factories with at most ``num_workers`` in flight."""

    def __init__(self, num_workers: int) -> None:
        if num_workers < 0:
            raise ValueError("num_workers must not be negative")
        logger.debug("Creating worker pool with %d workers", num_workers)
        self._workers = num_workers
        self._semaphore = asyncio.Semaphore(num_workers)
        self._in_use = 0

    def worker_count(self) -> int:
        return self._workers

    def available_permits(self) -> int:
        return self._workers - self._in_use

    @asynccontextmanager
    async def _permit(self) -> AsyncIterator[None]:
        async with self._semaphore:
            self._in_use += 1
            try:
                yield
            finally:
                self._in_use -= 1

    async def execute_task(self, task: Callable[[], Awaitable[T]]) -> T:
        """Run ``task`` once a worker is free and return its result.

        An exception from the task is raised as RuntimeError chained to it.
        """
        async with self._permit():
            start = time.perf_counter()
            try:
                result = await asyncio.ensure_future(task())
            except Exception as exc:
                raise RuntimeError(f"Task execution failed: {exc}") from exc
        elapsed_ms = (time.perf_counter() - start) * 1000.0
        logger.debug(
            "Task executed in %.2fms, available permits: %d",
            elapsed_ms,
            self.available_permits(),
        )
        return result

    async def execute_batch(
        self, tasks: Iterable[Callable[[], Awaitable[Any]]]
    ) -> list[Union[Any, RuntimeError]]:
        """Run all tasks concurrently within the worker limit.

        Results come back in task order; a task that failed is represented by a
        RuntimeError chained to its exception instead of a value.
        """

        async def run(task: Callable[[], Awaitable[Any]]) -> Any:
            async with self._permit():
                start = time.perf_counter()
                result = await task()
            logger.debug(
                "Batch task executed in %.2fms", (time.perf_counter() - start) * 1000.0
            )
            return result

        outcomes = await asyncio.gather(*(run(t) for t in tasks), return_exceptions=True)
        results: list[Union[Any, RuntimeError]] = []
        for outcome in outcomes:
            if isinstance(outcome, Exception):
                error = RuntimeError(f"Batch task failed: {outcome}")
                error.__cause__ = outcome
                results.append(error)
            else:
                results.append(outcome)
        return results