# -*- coding: utf-8 -*-
"""
Seed Handling - Seed point conversion and seed label lookup.

``to_seed_image`` turns per-region coordinate lists into a seed label
image. ``SeedLookup`` maps the (possibly sparse) seed labels found in a
seed image onto consecutive region indices ``1..N`` used internally by
the engines, and maps region indices back to seed labels on output.

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
from typing import Any, Optional, Sequence, Tuple

# Third-party
import numpy as np

# seedgrow internal
from seedgrow.exceptions import ValidationError


def label_dtype(max_label: int) -> np.dtype:
    """Smallest unsigned dtype (at least ``uint8``) holding *max_label*."""
    return np.result_type(np.min_scalar_type(max(int(max_label), 0)), np.uint8)


def is_point_lists(seeds: Any) -> bool:
    """True when *seeds* is a sequence of per-region point sequences.

    ``[[(0, 0)], [(5, 5), (5, 6)]]`` is a point list; ``[[0, 1], [2, 0]]``
    is a seed label buffer written as nested lists.
    """
    if isinstance(seeds, np.ndarray) or not isinstance(seeds, (list, tuple)):
        return False
    return all(
        isinstance(points, (list, tuple))
        and all(isinstance(p, (list, tuple, np.ndarray)) for p in points)
        for points in seeds
    )


def to_seed_image(
    seeds: Sequence[Sequence[Sequence[int]]],
    shape: Tuple[int, ...],
) -> np.ndarray:
    """Convert per-region seed points into a seed label image.

    Region ``i`` (0-based position in *seeds*) is written with label
    ``i + 1``.

    Parameters
    ----------
    seeds : Sequence[Sequence[Sequence[int]]]
        One list of points per region. Points are array-index tuples:
        ``(row, col)`` for 2D images, ``(slice, row, col)`` for volumes.
    shape : Tuple[int, ...]
        Spatial shape of the image the seeds belong to.

    Returns
    -------
    np.ndarray
        Seed label image of *shape*, zero where there is no seed.

    Raises
    ------
    ValidationError
        If there are no regions, a region has no points, a point has the
        wrong number of coordinates or lies outside the image, or the
        same point is listed twice.

    Examples
    --------
    >>> to_seed_image([[(0, 0)], [(2, 3), (2, 2)]], (3, 4))
    array([[1, 0, 0, 0],
           [0, 0, 0, 0],
           [0, 0, 2, 2]], dtype=uint8)
    """
    shape = tuple(int(s) for s in shape)
    if len(seeds) < 1:
        raise ValidationError("Seeds for at least one region required, got 0.")
    if any(s < 1 for s in shape):
        raise ValidationError(f"Seed image shape must be positive, got {shape}")

    image = np.zeros(shape, dtype=label_dtype(len(seeds)))
    for i, points in enumerate(seeds):
        region = i + 1
        if points is None or len(points) < 1:
            raise ValidationError(
                f"Region {region} has to have at least one seed point."
            )
        for point in points:
            try:
                point = tuple(int(c) for c in point)
            except (TypeError, ValueError) as e:
                raise ValidationError(
                    f"Seed {point!r} in region {region} is not a "
                    f"coordinate tuple."
                ) from e
            if len(point) != len(shape):
                raise ValidationError(
                    f"Seed {point} in region {region} must have "
                    f"{len(shape)} coordinates."
                )
            if any(c < 0 or c >= s for c, s in zip(point, shape)):
                raise ValidationError(
                    f"In region {region} seed at {point} is outside "
                    f"image {shape}."
                )
            if image[point] != 0:
                raise ValidationError(
                    f"Duplicate seed at {point} in region {region}."
                )
            image[point] = region
    return image


class SeedLookup:
    """Bidirectional mapping between seed labels and region indices.

    Parameters
    ----------
    labels : Sequence[int]
        Distinct positive seed labels in ascending order. Region ``i``
        (1-based) corresponds to ``labels[i - 1]``.
    """

    def __init__(self, labels: Sequence[int]) -> None:
        self.labels: Tuple[int, ...] = tuple(int(v) for v in labels)
        self._to_label = np.array((0,) + self.labels, dtype=np.int64)

    @classmethod
    def from_seed_image(
        cls, seeds: np.ndarray, mask: Optional[np.ndarray] = None
    ) -> 'SeedLookup':
        """Collect the seed labels present in *seeds* (inside *mask*)."""
        present = seeds if mask is None else seeds[mask]
        labels = np.unique(present)
        return cls(labels[labels > 0])

    @property
    def region_count(self) -> int:
        return len(self.labels)

    @property
    def dtype(self) -> np.dtype:
        """Label image dtype wide enough for every seed label."""
        return label_dtype(self.labels[-1] if self.labels else 0)

    def to_regions(self, seeds: np.ndarray) -> np.ndarray:
        """Replace seed labels with region indices; non-seeds become 0."""
        regions = np.searchsorted(self.labels, seeds) + 1
        known = np.isin(seeds, self.labels)
        return np.where(known, regions, 0).astype(np.int64)

    def to_labels(self, regions: np.ndarray) -> np.ndarray:
        """Replace region indices with seed labels.

        Values below 1 (internal candidate and outside marks) become 0.
        """
        table = self._to_label
        return table[np.clip(regions, 0, None)].astype(self.dtype)
