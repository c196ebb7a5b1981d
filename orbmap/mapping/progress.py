# -*- coding: utf-8 -*-
"""
Map Progress - Observer notification while a map is being plotted.

A ``Notifier`` is told after every map cell is processed and once more
when the map is complete. It forwards ``(map_size, plot_count)`` to
each subscribed ``Observer``. Rendering progress is left to the
observers; ``CallbackObserver`` adapts a plain ``progress_callback``
taking a fraction in ``[0, 1]``, and ``LoggingObserver`` logs coarse
percentage milestones.

Author
------
Duane Smalley, PhD
duane.d.smalley@gmail.com

License
-------
MIT License
Copyright (c) 2024 geoint.org
See LICENSE file for full text.

Created
-------
2026-10-19

Modified
--------
2026-10-19
"""

# Standard library
import logging
import threading
from abc import ABC, abstractmethod
from typing import Callable, List, Optional

# orbmap internal
from orbmap.exceptions import ValidationError

logger = logging.getLogger(__name__)


class Observer(ABC):
    """Receives map plotting progress."""

    @abstractmethod
    def notify(self, map_size: int, plot_count: int) -> None:
        """
        Handle a progress update.

        Parameters
        ----------
        map_size : int
            Total number of cells in the map.
        plot_count : int
            Number of cells processed so far.
        """
        ...

    def notify_done(self, map_size: int) -> None:
        """Handle completion of a map of ``map_size`` cells.

        Called once per map, after the last :meth:`notify`.
        """

    def reset(self) -> None:
        """Prepare for the next map. Called after :meth:`notify_done`."""


class CallbackObserver(Observer):
    """
    Forward progress as a completed fraction.

    Parameters
    ----------
    callback : Callable[[float], None]
        Called with ``plot_count / map_size`` after every plotted cell.
    done_callback : Callable[[int], None], optional
        Called with ``map_size`` once the map is complete.
    """

    def __init__(
        self,
        callback: Callable[[float], None],
        done_callback: Optional[Callable[[int], None]] = None
    ) -> None:
        self._callback = callback
        self._done_callback = done_callback

    def notify(self, map_size: int, plot_count: int) -> None:
        self._callback(plot_count / map_size if map_size else 1.0)

    def notify_done(self, map_size: int) -> None:
        if self._done_callback is not None:
            self._done_callback(map_size)


class LoggingObserver(Observer):
    """
    Log progress at INFO level every ``step`` percent.

    Parameters
    ----------
    step : int, default=10
        Percentage increment between messages, in ``[1, 100]``.
    """

    def __init__(self, step: int = 10) -> None:
        if not 1 <= step <= 100:
            raise ValidationError(f"step must be in [1, 100], got {step}")
        self._step = step
        self._next = step

    def notify(self, map_size: int, plot_count: int) -> None:
        percent = plot_count * 100 // map_size if map_size else 100
        if percent >= self._next:
            logger.info("Map %d%% complete", percent)
            self._next = (percent // self._step + 1) * self._step

    def notify_done(self, map_size: int) -> None:
        logger.info("Map of %d cells done", map_size)

    def reset(self) -> None:
        self._next = self._step


class Notifier:
    """
    Dispatch progress to subscribed observers.

    The plot counter and observer list are guarded by a lock so that
    lines plotted on worker threads are each counted exactly once.
    """

    def __init__(self) -> None:
        self._observers: List[Observer] = []
        self._count = 0
        self._lock = threading.Lock()

    def subscribe(self, observer: Observer) -> None:
        """Add an observer. Observers are notified in subscription order."""
        with self._lock:
            self._observers.append(observer)

    @property
    def plot_count(self) -> int:
        return self._count

    def notify_plotted(self, map_size: int) -> None:
        """Count one processed cell and notify every observer."""
        with self._lock:
            self._count += 1
            for observer in self._observers:
                observer.notify(map_size, self._count)

    def notify_done(self, map_size: int) -> None:
        """Report completion, then reset the observers and the counter."""
        with self._lock:
            for observer in self._observers:
                observer.notify_done(map_size)
                observer.reset()
            self._count = 0
