# -*- coding: utf-8 -*-
"""
Seeded Region Growing Engine - Control loop shared by all SRG variants.

Implements the growth loop of Adams & Bischof's Seeded Region Growing
for N-dimensional images. Concrete engines (``SRG``, ``SRG2DVector``,
``SRG3D``) supply image validation, the per-pixel value table and the
region statistics type; everything else (seeding, candidate ordering,
admission, masking, animation frames and progress) lives here.

Internally the engine works on a copy of the label image padded by one
pixel on every side. Padding pixels and masked-out pixels carry
``OUTSIDE_MARK``, so neighbour offsets can be applied to flat indices
without bounds checks and neither can ever become a candidate. Pending
candidates carry ``CANDIDATE_MARK``; admitted pixels carry their region
index ``1..N``.

Attribution
-----------
Algorithm: R. Adams and L. Bischof, "Seeded Region Growing", IEEE
Transactions on Pattern Analysis and Machine Intelligence, 16(6):641-647,
1994.

ImageJ implementation: Jarek Sacha, ``SRG2DBase.java`` and ``SRG3D.java``
in ij-plugins Toolkit (LGPL-2.1). This is an independent NumPy
reimplementation following the published algorithm.

Dependencies
------------
scipy

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
import logging
import math
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Sequence, Tuple, Union

# Third-party
import numpy as np
from scipy.ndimage import generate_binary_structure

# seedgrow internal
from seedgrow.exceptions import ValidationError
from seedgrow.grow.candidates import CandidateQueue
from seedgrow.grow.region import RegionState
from seedgrow.grow.seeds import SeedLookup, is_point_lists, to_seed_image
from seedgrow.progress import ProgressReporter

logger = logging.getLogger(__name__)

BACKGROUND_MARK = 0
CANDIDATE_MARK = -1
OUTSIDE_MARK = -2

ASSIGNMENT_RULES = ('discoverer', 'most_similar')


def neighbour_offsets(ndim: int, rank: int) -> List[Tuple[int, ...]]:
    """Neighbour displacement vectors for a given connectivity rank.

    Face neighbours come first, then edge and corner neighbours, each
    group in raster order.

    Parameters
    ----------
    ndim : int
        Number of spatial dimensions.
    rank : int
        Maximum number of non-zero components in a displacement
        (1 = face connectivity, ``ndim`` = full connectivity).

    Returns
    -------
    List[Tuple[int, ...]]
        Displacements, excluding the zero vector.
    """
    structure = generate_binary_structure(ndim, rank)
    center = np.ones(ndim, dtype=int)
    offsets = [tuple(int(c) for c in idx - center) for idx in np.argwhere(structure)]
    offsets = [o for o in offsets if any(o)]
    return sorted(offsets, key=lambda o: sum(c != 0 for c in o))


class SeededRegionGrowingBase(ProgressReporter, ABC):
    """Shared state machine of the seeded region growing engines.

    Lifecycle: configure with ``set_image``, ``set_seeds`` and optionally
    ``set_mask``, ``set_number_of_animation_frames``,
    ``set_connectivity`` and ``set_candidate_assignment``; call ``run()``;
    read ``get_region_markers()`` and ``get_animation_stack()``.

    ``run()`` validates every input before it touches any output. A
    failed validation raises ``ValidationError`` and leaves the results
    of a previous successful run in place.
    """

    NAME = 'Seeded Region Growing'

    #: Number of spatial dimensions of the image.
    _ndim: int = 2

    #: Supported connectivities mapped to ``generate_binary_structure`` rank.
    _connectivities: Dict[int, int] = {4: 1, 8: 2}
    _default_connectivity: int = 8

    #: Number of progress notifications emitted while growing.
    _progress_steps: int = 25

    def __init__(self) -> None:
        super().__init__()
        self._image: Optional[np.ndarray] = None
        self._seeds: Optional[np.ndarray] = None
        self._mask: Optional[np.ndarray] = None
        self._number_of_animation_frames = 0
        self._connectivity = self._default_connectivity
        self._assignment = 'discoverer'

        self._region_markers: Optional[np.ndarray] = None
        self._animation_stack: List[np.ndarray] = []
        self._regions: Tuple[RegionState, ...] = ()

    # -----------------------------------------------------------------
    # Image hooks
    # -----------------------------------------------------------------
    @abstractmethod
    def set_image(self, image: np.ndarray) -> None:
        """Set the image to be segmented."""
        ...

    @abstractmethod
    def _pixel_values(self) -> List[Any]:
        """Per-pixel values of the padded image, in flat (C) order."""
        ...

    @abstractmethod
    def _new_region(self, label: int) -> RegionState:
        ...

    @property
    def _shape(self) -> Tuple[int, ...]:
        return tuple(self._image.shape[:self._ndim])

    def _validate_image(self, image: Any, expected: str) -> np.ndarray:
        """Copy *image* to float64 after checking it is non-empty and finite."""
        image = np.asarray(image)
        if image.size == 0 or any(s < 1 for s in image.shape):
            raise ValidationError(
                f"Image cannot be empty, got shape {image.shape}"
            )
        if not (np.issubdtype(image.dtype, np.number)
                or np.issubdtype(image.dtype, np.bool_)):
            raise ValidationError(
                f"Image must be numeric, got dtype {image.dtype}"
            )
        if np.iscomplexobj(image):
            raise ValidationError(
                f"Expected {expected} real-valued image, got complex data"
            )
        image = image.astype(np.float64, copy=True)
        if not np.all(np.isfinite(image)):
            raise ValidationError("Image contains NaN or infinite values")
        return image

    # -----------------------------------------------------------------
    # Configuration
    # -----------------------------------------------------------------
    def set_seeds(
        self,
        seeds: Union[np.ndarray, Sequence[Sequence[Sequence[int]]]],
    ) -> None:
        """Set region seeds.

        Parameters
        ----------
        seeds : np.ndarray or Sequence[Sequence[Sequence[int]]]
            Either a seed label image with the image's spatial shape
            (nonzero values identify regions, 0 means "not a seed"; an
            array or nested lists of numbers), or one list of points per
            region, converted with
            :func:`~seedgrow.grow.seeds.to_seed_image` (requires the
            image to be set first).

            Points are in NumPy index order, not ``(x, y)``: ``(row,
            col)`` in 2D and ``(slice, row, col)`` in 3D. A seed at
            image column ``x``, line ``y`` is ``(y, x)``.

        Raises
        ------
        ValidationError
            If point seeds are given before the image, or are malformed.
        """
        if not is_point_lists(seeds):
            try:
                seeds = np.array(seeds)
            except ValueError as e:
                raise ValidationError(
                    "Seeds must be a label image or per-region point lists."
                ) from e
            if seeds.dtype == object:
                raise ValidationError(
                    "Seeds must be a label image or per-region point lists."
                )
            if seeds.size == 0:
                raise ValidationError("Seed image cannot be empty.")
            self._seeds = seeds
            return
        if self._image is None:
            raise ValidationError(
                "Image must be set before seeds are given as point lists."
            )
        self._seeds = to_seed_image(seeds, self._shape)

    def set_mask(self, mask: Optional[np.ndarray]) -> None:
        """Restrict growth to pixels where *mask* is true.

        ``None`` removes the mask (the whole image is processed).
        """
        self._mask = None if mask is None else np.asarray(mask).astype(bool)

    def set_number_of_animation_frames(self, number_of_frames: int) -> None:
        """Set how many animation frames to record; 0 disables recording."""
        if number_of_frames < 0:
            raise ValidationError(
                f"Number of animation frames cannot be negative, "
                f"got {number_of_frames}"
            )
        self._number_of_animation_frames = int(number_of_frames)

    def set_connectivity(self, connectivity: int) -> None:
        if connectivity not in self._connectivities:
            raise ValidationError(
                f"connectivity must be one of "
                f"{tuple(self._connectivities)}, got {connectivity!r}"
            )
        self._connectivity = connectivity

    def set_candidate_assignment(self, assignment: str) -> None:
        """Choose which region a newly discovered candidate is scored against.

        Parameters
        ----------
        assignment : str
            ``'discoverer'``: the region whose admitted pixel discovered
            the candidate. ``'most_similar'``: among all regions adjacent
            to the candidate at discovery time, the one with the smallest
            difference (ties go to the lower region index).
        """
        if assignment not in ASSIGNMENT_RULES:
            raise ValidationError(
                f"assignment must be one of {ASSIGNMENT_RULES}, "
                f"got {assignment!r}"
            )
        self._assignment = assignment

    # -----------------------------------------------------------------
    # Results
    # -----------------------------------------------------------------
    def get_region_markers(self) -> Optional[np.ndarray]:
        """Final label image, or ``None`` before a successful run."""
        return self._region_markers

    @property
    def region_markers(self) -> Optional[np.ndarray]:
        return self._region_markers

    def get_animation_stack(self) -> List[np.ndarray]:
        """Label image snapshots in admission order (empty if disabled)."""
        return list(self._animation_stack)

    @property
    def animation_stack(self) -> List[np.ndarray]:
        return self.get_animation_stack()

    @property
    def regions(self) -> Tuple[RegionState, ...]:
        """Region statistics of the last run, in region index order."""
        return self._regions

    # -----------------------------------------------------------------
    # Run
    # -----------------------------------------------------------------
    def _validated_inputs(self) -> Tuple[np.ndarray, np.ndarray]:
        """Check image, seeds and mask; return seeds and effective mask."""
        if self._image is None:
            raise ValidationError("Image is not set.")
        if self._seeds is None:
            raise ValidationError("Seeds image is not set.")
        shape = self._shape

        seeds = self._seeds
        if seeds.shape != shape:
            raise ValidationError(
                f"Seeds image {seeds.shape} has to have the same dimension "
                f"as input image {shape}."
            )
        if np.issubdtype(seeds.dtype, np.bool_):
            seeds = seeds.astype(np.int64)
        elif not np.issubdtype(seeds.dtype, np.integer):
            if (not np.issubdtype(seeds.dtype, np.floating)
                    or not np.all(np.isfinite(seeds))
                    or np.any(seeds != np.round(seeds))):
                raise ValidationError(
                    f"Seed labels must be integers, got dtype {seeds.dtype}"
                )
            seeds = seeds.astype(np.int64)
        if np.any(seeds < 0):
            raise ValidationError("Seed labels cannot be negative.")

        if self._mask is None:
            mask = np.ones(shape, dtype=bool)
        elif self._mask.shape != shape:
            raise ValidationError(
                f"Mask {self._mask.shape} has to have the same dimension "
                f"as input image {shape}."
            )
        else:
            mask = self._mask

        ignored = int(np.count_nonzero((seeds > 0) & ~mask))
        if ignored:
            logger.warning(
                "%d seed pixel(s) lie outside the mask and are ignored",
                ignored,
            )
        if not np.any((seeds > 0) & mask):
            raise ValidationError(
                "At least one seed pixel inside the mask is required."
            )
        return seeds, mask

    def run(self) -> None:
        """Perform region growing.

        Raises
        ------
        ValidationError
            If the image, seeds or mask are missing or inconsistent.
        """
        seeds, mask = self._validated_inputs()
        self.notify_progress_listeners(0.0, f"{self.NAME} initializing...")
        logger.debug("%s.run - initializing structures", type(self).__name__)

        lookup = SeedLookup.from_seed_image(seeds, mask)
        shape = self._shape
        padded_shape = tuple(s + 2 for s in shape)
        inner = tuple(slice(1, -1) for _ in shape)

        seed_regions = lookup.to_regions(seeds)
        markers_nd = np.full(padded_shape, OUTSIDE_MARK, dtype=np.int64)
        markers_nd[inner] = np.where(
            mask, np.where(seed_regions > 0, seed_regions, BACKGROUND_MARK),
            OUTSIDE_MARK,
        )

        strides = np.cumprod((1,) + padded_shape[:0:-1])[::-1]
        rank = self._connectivities[self._connectivity]
        self._offsets = [
            int(np.dot(o, strides))
            for o in neighbour_offsets(self._ndim, rank)
        ]
        self._markers: List[int] = markers_nd.ravel().tolist()
        self._values = self._pixel_values()
        self._region_table: List[Optional[RegionState]] = (
            [None] + [self._new_region(label) for label in lookup.labels]
        )
        self._queue = CandidateQueue()
        self._lookup = lookup
        self._inner = inner
        self._padded_shape = padded_shape

        total = int(np.count_nonzero(mask))
        frames: List[np.ndarray] = []
        n_frames = self._number_of_animation_frames

        seed_pixels = np.flatnonzero(markers_nd.ravel() > 0)
        processed = self._initialize_candidates(seed_pixels, int(strides[0]), total)

        if n_frames > 1:
            frames.append(self._snapshot())

        frame_increment = (
            math.ceil(total / (n_frames - 2)) if n_frames > 2 else 0
        )
        progress_increment = max(total // self._progress_steps, 1)
        self.notify_progress_listeners(processed / total)
        logger.debug("%s.run - process candidates", type(self).__name__)

        markers = self._markers
        values = self._values
        region_table = self._region_table
        queue = self._queue
        while queue:
            candidate = queue.pop_best()
            pixel = candidate.pixel
            if markers[pixel] != CANDIDATE_MARK:
                logger.debug("Skipping stale candidate at flat index %d", pixel)
                continue

            markers[pixel] = candidate.region
            region_table[candidate.region].admit(values[pixel])
            processed += 1
            self._candidates_from_neighbours(pixel, candidate.region)

            if processed % progress_increment == 0:
                progress = processed / total
                self.notify_progress_listeners(
                    progress, f"{self.NAME} processing..."
                )
                self._log_progress(processed, total, progress)

            if frame_increment and processed % frame_increment == 0:
                frames.append(self._snapshot())

        logger.debug("%s.run - encoding results", type(self).__name__)
        result = self._snapshot()
        if n_frames > 0:
            frames.append(result.copy())

        self._region_markers = result
        self._animation_stack = frames
        self._regions = tuple(region_table[1:])
        self._release_work_buffers()
        self.notify_progress_listeners(1.0)

    def _initialize_candidates(
        self, seed_pixels: np.ndarray, line: int, total: int
    ) -> int:
        """Admit every seed, then queue the seeds' free neighbours.

        Progress is reported once per line along the first axis (image
        row in 2D, slice in 3D).
        """
        markers = self._markers
        values = self._values
        for pixel in seed_pixels.tolist():
            self._region_table[markers[pixel]].admit(values[pixel])

        processed = 0
        n_lines = self._padded_shape[0] - 2
        bounds = np.searchsorted(
            seed_pixels, np.arange(1, n_lines + 2) * line
        ).tolist()
        for i in range(n_lines):
            for pixel in seed_pixels[bounds[i]:bounds[i + 1]].tolist():
                self._candidates_from_neighbours(pixel, markers[pixel])
                processed += 1
            self.notify_progress_listeners(
                min(processed / total, 1.0), f"{self.NAME} initializing..."
            )
        return processed

    def _candidates_from_neighbours(self, pixel: int, region: int) -> None:
        """Queue the background neighbours of an admitted *pixel*."""
        markers = self._markers
        for offset in self._offsets:
            neighbour = pixel + offset
            if markers[neighbour] != BACKGROUND_MARK:
                continue
            markers[neighbour] = CANDIDATE_MARK
            if self._assignment == 'most_similar':
                best, difference = self._most_similar_region(neighbour)
            else:
                best = region
                difference = self._region_table[region].difference(
                    self._values[neighbour]
                )
            self._queue.push(neighbour, best, difference)

    def _most_similar_region(self, pixel: int) -> Tuple[int, float]:
        markers = self._markers
        value = self._values[pixel]
        best = -1
        best_difference = math.inf
        adjacent = sorted({
            markers[pixel + offset] for offset in self._offsets
            if markers[pixel + offset] > 0
        })
        for region in adjacent:
            difference = self._region_table[region].difference(value)
            if difference < best_difference:
                best = region
                best_difference = difference
        return best, best_difference

    def _snapshot(self) -> np.ndarray:
        """Label image of the current state, candidates shown as unassigned."""
        markers_nd = np.array(self._markers, dtype=np.int64).reshape(
            self._padded_shape
        )
        return self._lookup.to_labels(markers_nd[self._inner])

    def _log_progress(self, processed: int, total: int, progress: float) -> None:
        if not logger.isEnabledFor(logging.DEBUG):
            return
        stats = ' '.join(
            f"({r.mean!s}, {r.count})" for r in self._region_table[1:]
        )
        logger.debug(
            "%s.run - candidates: %d, processed: %d, remaining %d, "
            "[%3d%%] %s",
            type(self).__name__, len(self._queue), processed,
            total - processed - len(self._queue), round(progress * 100),
            stats,
        )

    def _release_work_buffers(self) -> None:
        for name in ('_markers', '_values', '_region_table', '_queue',
                     '_offsets'):
            self.__dict__.pop(name, None)
