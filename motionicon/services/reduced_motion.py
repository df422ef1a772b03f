"""System reduced-motion preference.

One process-wide observer watches the host's "prefers reduced motion" signal
and broadcasts changes to subscribers. It attaches to the host lazily, on the
first subscription, and detaches when the last subscriber leaves so the host
listener is never leaked.

Hosts bridge their own notification facility through a ``ReducedMotionSource``.
The default source is ``ReducedMotionSignal``, seeded from the
``MOTIONICON_PREFER_REDUCED_MOTION`` setting; a host adapter calls
``publish()`` on it whenever the OS preference changes.
"""
from __future__ import annotations

import logging
from typing import Callable, List, Optional, Protocol

from motionicon.utils.config import settings

logger = logging.getLogger(__name__)

Listener = Callable[[bool], None]


class ReducedMotionSource(Protocol):
    def matches(self) -> bool:
        ...

    def add_listener(self, listener: Listener) -> None:
        ...

    def remove_listener(self, listener: Listener) -> None:
        ...


class ReducedMotionSignal:
    """Host-fed reduced-motion signal."""

    def __init__(self, initial: Optional[bool] = None) -> None:
        self._value = settings.prefer_reduced_motion if initial is None else bool(initial)
        self._listeners: List[Listener] = []

    def matches(self) -> bool:
        return self._value

    def add_listener(self, listener: Listener) -> None:
        self._listeners.append(listener)

    def remove_listener(self, listener: Listener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    @property
    def listener_count(self) -> int:
        return len(self._listeners)

    def publish(self, value: bool) -> None:
        """Record a change reported by the host and notify listeners."""
        value = bool(value)
        if value == self._value:
            return
        self._value = value
        for listener in list(self._listeners):
            listener(value)


class SystemPreferenceObserver:
    """Reference-counted subscription to a reduced-motion source."""

    def __init__(self, source: Optional[ReducedMotionSource] = None) -> None:
        self._source = source
        self._subscribers: List[Listener] = []
        self._attached = False
        self._value = False

    @property
    def subscriber_count(self) -> int:
        return len(self._subscribers)

    @property
    def attached(self) -> bool:
        return self._attached

    @property
    def reduced_motion(self) -> bool:
        """Current preference; queried from the source when nothing is subscribed."""
        if self._attached:
            return self._value
        return self._query()

    def subscribe(self, callback: Listener) -> Callable[[], None]:
        """Register ``callback`` for changes and return a function that unsubscribes it."""
        if not self._subscribers:
            self._attach()
        self._subscribers.append(callback)
        return lambda: self.unsubscribe(callback)

    def unsubscribe(self, callback: Listener) -> None:
        if callback not in self._subscribers:
            return
        self._subscribers.remove(callback)
        if not self._subscribers:
            self._detach()

    def set_source(self, source: Optional[ReducedMotionSource]) -> None:
        """Switch to another source; subscribers and their unsubscribe handles stay valid."""
        previous = self.reduced_motion
        self._detach()
        self._source = source
        if not self._subscribers:
            return
        self._attach()
        if self._value != previous:
            self._on_change(self._value)

    def _query(self) -> bool:
        if self._source is None:
            return False
        try:
            return bool(self._source.matches())
        except Exception:
            logger.warning("Reduced-motion query failed; assuming no reduction requested", exc_info=True)
            return False

    def _attach(self) -> None:
        self._value = self._query()
        if self._source is None:
            return
        try:
            self._source.add_listener(self._on_change)
        except Exception:
            logger.warning("Could not listen for reduced-motion changes", exc_info=True)
            return
        self._attached = True
        logger.debug("Attached reduced-motion listener")

    def _detach(self) -> None:
        if not self._attached:
            return
        self._attached = False
        try:
            self._source.remove_listener(self._on_change)
        except Exception:
            logger.warning("Could not remove reduced-motion listener", exc_info=True)
            return
        logger.debug("Detached reduced-motion listener")

    def _on_change(self, value: bool) -> None:
        self._value = bool(value)
        for callback in list(self._subscribers):
            try:
                callback(self._value)
            except Exception:
                logger.exception("Reduced-motion subscriber failed", extra={"subscriber": repr(callback)})


_observer: Optional[SystemPreferenceObserver] = None


def get_system_preference_observer() -> SystemPreferenceObserver:
    """Return the process-wide observer, creating it on first use."""
    global _observer
    if _observer is None:
        _observer = SystemPreferenceObserver(ReducedMotionSignal())
    return _observer


def set_reduced_motion_source(source: Optional[ReducedMotionSource]) -> SystemPreferenceObserver:
    """Point the process-wide observer at a host source.

    The observer itself is kept: it detaches from the old source and, if
    anyone is subscribed, attaches to the new one. Handles returned by earlier
    ``subscribe`` calls keep working.
    """
    global _observer
    if _observer is None:
        _observer = SystemPreferenceObserver(source)
    else:
        _observer.set_source(source)
    return _observer


def reset_system_preference_observer() -> None:
    """Drop the process-wide observer, detaching it from its source."""
    global _observer
    if _observer is not None:
        for callback in list(_observer._subscribers):
            _observer.unsubscribe(callback)
    _observer = None


def use_reduced_motion() -> bool:
    """Current system reduced-motion preference."""
    return get_system_preference_observer().reduced_motion
