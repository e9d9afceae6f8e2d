# -*- coding: utf-8 -*-
"""
Progress Reporting - Synchronous listener fan-out for long-running runs.

``ProgressReporter`` keeps an ordered list of listener callables and
notifies each of them, in registration order, with the current progress
fraction and an optional status message. It is used as a base class by
the region growing engines; listeners never influence the computation.

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
2026-10-18

Modified
--------
2026-10-18
"""

# Standard library
from typing import Callable, List, Optional

#: Listener signature: ``listener(progress, message)``.
ProgressListener = Callable[[float, Optional[str]], None]


class ProgressReporter:
    """Ordered collection of progress listeners.

    Examples
    --------
    >>> reporter = ProgressReporter()
    >>> seen = []
    >>> reporter.add_progress_listener(lambda p, msg: seen.append(p))
    >>> reporter.notify_progress_listeners(0.5)
    >>> seen
    [0.5]
    """

    def __init__(self) -> None:
        self._progress_listeners: List[ProgressListener] = []
        self._current_progress = 0.0

    @property
    def current_progress(self) -> float:
        """Most recently reported progress fraction."""
        return self._current_progress

    def add_progress_listener(self, listener: ProgressListener) -> None:
        """Register *listener*. The same callable may be added twice."""
        self._progress_listeners.append(listener)

    def remove_progress_listener(self, listener: ProgressListener) -> None:
        """Unregister the first registration of *listener*, if any."""
        if listener in self._progress_listeners:
            self._progress_listeners.remove(listener)

    def remove_all_progress_listeners(self) -> None:
        self._progress_listeners.clear()

    def notify_progress_listeners(
        self, progress: float, message: Optional[str] = None
    ) -> None:
        """Set the current progress and notify every listener.

        Parameters
        ----------
        progress : float
            Fraction completed, in [0, 1].
        message : str, optional
            Status text forwarded to listeners.

        Raises
        ------
        ValueError
            If *progress* is outside [0, 1].
        """
        if not 0.0 <= progress <= 1.0:
            raise ValueError(
                f"progress must be in [0, 1], got {progress!r}"
            )
        self._current_progress = float(progress)
        for listener in list(self._progress_listeners):
            listener(self._current_progress, message)
