"""Observer lists shared by the classes that publish events."""

import logging
from threading import Lock
from typing import Any, Generic, TypeVar

logger = logging.getLogger(__name__)


T = TypeVar("T", bound=object)


class ObserverManager(Generic[T]):
    """
    Ordered set of observers, each notified by calling a named method.

    A failing observer is logged and skipped. Observers may register or
    unregister while a notification is running; the change applies from the
    next notification.
    """

    def __init__(self, observer_type_name: str = "observer"):
        self._kind = observer_type_name
        self._observers: list[T] = []
        self._lock = Lock()

    def register(self, observer: T) -> None:
        with self._lock:
            if observer in self._observers:
                return
            self._observers.append(observer)
        logger.debug(f"Added {self._kind} observer {observer!r}")

    def unregister(self, observer: T) -> None:
        with self._lock:
            if observer not in self._observers:
                logger.debug(f"{self._kind} observer {observer!r} was not registered")
                return
            self._observers.remove(observer)
        logger.debug(f"Removed {self._kind} observer {observer!r}")

    def notify(self, callback_name: str, *args: Any, **kwargs: Any) -> None:
        """Call ``callback_name`` on every observer in registration order."""
        with self._lock:
            snapshot = tuple(self._observers)

        for observer in snapshot:
            callback = getattr(observer, callback_name, None)
            if callback is None:
                logger.error(f"{self._kind} observer {observer!r} has no '{callback_name}' method")
                continue
            try:
                callback(*args, **kwargs)
            except Exception:
                logger.exception(f"{self._kind} observer {observer!r} failed in {callback_name}")

    def __contains__(self, observer: T) -> bool:
        with self._lock:
            return observer in self._observers

    def __len__(self) -> int:
        with self._lock:
            return len(self._observers)
