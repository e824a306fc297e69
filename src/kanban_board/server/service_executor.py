"""
Service Executor - Runs blocking service calls off the event loop.

Services and repositories are synchronous SQLAlchemy code. HTTP handlers
await them through this executor so a slow query delays only its own request.
"""

import asyncio
import functools
import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Callable, TypeVar

from kanban_board.services import ServiceFactory

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ServiceExecutor:
    """
    Executes service calls in a bounded thread pool.

    The executor is created with the application and shut down when the
    application stops.
    """

    def __init__(self, factory: ServiceFactory, max_workers: int = 4):
        """
        Initialize the service executor.

        Args:
            factory: Service factory handing out services.
            max_workers: Number of threads available for database calls.
        """
        self.factory = factory
        self._executor = ThreadPoolExecutor(
            max_workers=max_workers, thread_name_prefix="kanban-service-"
        )
        self._closed = False

    async def run(self, func: Callable[..., T], *args: Any, **kwargs: Any) -> T:
        """
        Run a blocking callable in the thread pool and await its result.

        Args:
            func: Callable to run, typically a bound service method.
            *args: Positional arguments for ``func``.
            **kwargs: Keyword arguments for ``func``.

        Returns:
            Whatever ``func`` returns. Exceptions propagate to the caller.
        """
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(
            self._executor, functools.partial(func, *args, **kwargs)
        )

    def close(self) -> None:
        """Shutdown the executor."""
        if not self._closed:
            self._executor.shutdown(wait=True)
            self._closed = True
            logger.debug("Service executor shut down")
