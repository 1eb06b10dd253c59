"""Process-wide holder for the dependency injection container."""

from __future__ import annotations

import threading
from typing import TYPE_CHECKING

import structlog

if TYPE_CHECKING:
    from collections.abc import Callable

    from lagom import Container

logger = structlog.get_logger()


class ContainerHolder:
    """Create a container on first access and hand out that same instance afterwards.

    The factory runs at most once per holder, including when the first calls
    race on several threads. Reads after initialization take no lock.

    A factory that raises is fatal for the holder: the exception reaches the
    caller untouched, and every later call re-raises that same exception
    without running the factory again.
    """

    def __init__(self, factory: Callable[[], Container]) -> None:
        self._factory = factory
        self._container: Container | None = None
        self._error: BaseException | None = None
        self._lock = threading.Lock()

    def get(self) -> Container:
        container = self._container
        if container is not None:
            return container

        with self._lock:
            if self._error is not None:
                raise self._error
            # Another thread may have finished construction while we waited
            container = self._container
            if container is None:
                try:
                    container = self._factory()
                except BaseException as exc:
                    self._error = exc
                    raise
                self._container = container
                logger.info(
                    "di_container_created",
                    container_type=type(container).__name__,
                )
            return container
