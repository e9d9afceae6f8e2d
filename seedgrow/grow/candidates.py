# -*- coding: utf-8 -*-
"""
Candidate Queue - Ordered growth frontier for seeded region growing.

Holds the candidates (unassigned pixels adjacent to some region) keyed
by their difference to the discovering region's mean. Extraction always
yields the globally smallest difference; equal differences come out in
insertion order, so a run is fully deterministic for fixed inputs.

The queue is a binary min-heap (``heapq``) of
``(difference, sequence, pixel, region)`` tuples. The sequence counter
is unique and strictly increasing, so heap comparisons never reach the
pixel or region fields.

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
import heapq
import itertools
from typing import Hashable, List, NamedTuple, Optional

# seedgrow internal
from seedgrow.exceptions import ProcessorError


class Candidate(NamedTuple):
    """A queued pixel awaiting admission into ``region``.

    Field order is the heap ordering: ``difference`` first, then the
    insertion ``sequence``.
    """

    difference: float
    sequence: int
    pixel: Hashable
    region: int


class CandidateQueue:
    """Min-priority frontier of growth candidates.

    Examples
    --------
    >>> q = CandidateQueue()
    >>> _ = q.push((0, 1), region=1, difference=5.0)
    >>> _ = q.push((1, 0), region=2, difference=5.0)
    >>> q.pop_best().pixel
    (0, 1)
    """

    def __init__(self) -> None:
        self._heap: List[Candidate] = []
        self._sequence = itertools.count()

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)

    def push(self, pixel: Hashable, region: int, difference: float) -> Candidate:
        """Insert a candidate and return the stored entry.

        Raises
        ------
        ProcessorError
            If *difference* is negative or NaN.
        """
        if not difference >= 0.0:
            raise ProcessorError(
                f"Candidate difference must be a non-negative number, "
                f"got {difference!r} for pixel {pixel!r}"
            )
        candidate = Candidate(float(difference), next(self._sequence), pixel, region)
        heapq.heappush(self._heap, candidate)
        return candidate

    def pop_best(self) -> Optional[Candidate]:
        """Remove and return the best candidate, or ``None`` when empty."""
        if not self._heap:
            return None
        return heapq.heappop(self._heap)

    def peek(self) -> Optional[Candidate]:
        return self._heap[0] if self._heap else None

    def clear(self) -> None:
        """Drop all candidates. The sequence counter keeps counting."""
        self._heap.clear()
