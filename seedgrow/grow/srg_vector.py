# -*- coding: utf-8 -*-
"""
SRG2DVector - Seeded region growing for 2D multi-band images.

Same growth loop as ``SRG`` but pixels are vectors (RGB, MSI bands,
stacked feature planes). Regions keep a per-band running mean and the
difference between a pixel and a region is their Euclidean distance,
which folds all bands into the single score the candidate queue orders
by. Neighbourhoods are 8-connected by default.

Attribution
-----------
ImageJ implementation: Jarek Sacha,
``net/sf/ij_plugins/im3d/grow/SRG2DVector.java``.

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
from typing import List

# Third-party
import numpy as np

# seedgrow internal
from seedgrow.exceptions import ValidationError
from seedgrow.grow.engine import SeededRegionGrowingBase
from seedgrow.grow.region import VectorRegionState


class SRG2DVector(SeededRegionGrowingBase):
    """Seeded region growing of a 2D vector-valued image.

    Examples
    --------
    >>> srg = SRG2DVector()
    >>> srg.set_image(rgb)                     # (rows, cols, 3)
    >>> srg.set_seeds([[(20, 100), (200, 200)], [(75, 180)], [(200, 90)]])
    >>> srg.run()
    >>> markers = srg.get_region_markers()     # (rows, cols)
    """

    @property
    def number_of_bands(self) -> int:
        return 0 if self._image is None else self._image.shape[2]

    def set_image(self, image: np.ndarray) -> None:
        """Set the image to be segmented.

        Parameters
        ----------
        image : np.ndarray
            ``(rows, cols, bands)`` array, bands last. A 2D array is
            treated as a single band.

        Raises
        ------
        ValidationError
            If the image is not 2D or 3D, is empty, or has non-finite
            values.
        """
        image = np.asarray(image)
        if image.ndim == 2:
            image = image[:, :, np.newaxis]
        if image.ndim != 3:
            raise ValidationError(
                f"Expected (rows, cols, bands) image, got shape {image.shape}"
            )
        self._image = self._validate_image(image, 'multi-band')

    def _pixel_values(self) -> List[List[float]]:
        padded = np.pad(self._image, ((1, 1), (1, 1), (0, 0)))
        return padded.reshape(-1, padded.shape[2]).tolist()

    def _new_region(self, label: int) -> VectorRegionState:
        return VectorRegionState(label, self.number_of_bands)
