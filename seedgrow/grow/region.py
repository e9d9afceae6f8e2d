# -*- coding: utf-8 -*-
"""
Region Statistics - Running per-region mean and pixel distance.

Each region owns a pixel count and a running mean of the values admitted
into it. The mean is updated online, ``mean = (mean * count + value) /
(count + 1)``, so admission costs O(1) (per band) regardless of region
size; the small drift against a batch mean is accepted.

``scalar_difference`` and ``vector_difference`` measure how far a pixel
value lies from a region mean and drive the candidate ordering.

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
import math
from typing import List, Sequence

# Third-party
import numpy as np


def scalar_difference(mean: float, value: float) -> float:
    """Absolute difference between a region mean and a pixel value."""
    return abs(mean - value)


def vector_difference(mean: Sequence[float], value: Sequence[float]) -> float:
    """Euclidean distance between a region mean vector and a pixel vector.

    Parameters
    ----------
    mean : Sequence[float]
        Per-band region mean.
    value : Sequence[float]
        Per-band pixel value, same length as *mean*.

    Returns
    -------
    float
        Non-negative distance; 0 when the vectors are identical.
    """
    return math.dist(mean, value)


class RegionState:
    """Pixel count and running mean of a scalar-valued region.

    Parameters
    ----------
    label : int
        Seed label the region was created from. Reported in the output
        label image.
    """

    __slots__ = ('label', 'count', '_mean')

    def __init__(self, label: int) -> None:
        self.label = label
        self.count = 0
        self._mean = 0.0

    @property
    def mean(self) -> float:
        return self._mean

    def admit(self, value: float) -> None:
        """Fold *value* into the running mean and bump the count."""
        self._mean = (self._mean * self.count + value) / (self.count + 1)
        self.count += 1

    def difference(self, value: float) -> float:
        return scalar_difference(self._mean, value)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(label={self.label!r}, "
            f"count={self.count!r}, mean={self._mean!r})"
        )


class VectorRegionState(RegionState):
    """Pixel count and per-band running mean of a vector-valued region.

    Parameters
    ----------
    label : int
        Seed label the region was created from.
    bands : int
        Number of values per pixel.
    """

    __slots__ = ()

    def __init__(self, label: int, bands: int) -> None:
        super().__init__(label)
        self._mean: List[float] = [0.0] * bands

    @property
    def mean(self) -> np.ndarray:
        """Copy of the per-band mean."""
        return np.array(self._mean, dtype=np.float64)

    def admit(self, value: Sequence[float]) -> None:
        n = self.count
        self._mean = [(m * n + v) / (n + 1) for m, v in zip(self._mean, value)]
        self.count = n + 1

    def difference(self, value: Sequence[float]) -> float:
        return vector_difference(self._mean, value)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(label={self.label!r}, "
            f"count={self.count!r}, mean={self._mean!r})"
        )
