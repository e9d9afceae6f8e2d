# -*- coding: utf-8 -*-
"""
SRG - Seeded region growing for 2D scalar images.

Seeds give the initial mean grey level of each region. At every step the
candidate with the smallest difference to the mean of its region is
added to that region, and its unassigned neighbours become candidates.
Growth can be restricted with a mask and recorded as an animation stack.

Attribution
-----------
Algorithm: R. Adams and L. Bischof, "Seeded Region Growing", IEEE
Transactions on Pattern Analysis and Machine Intelligence, 16(6), 1994.
ImageJ implementation: Jarek Sacha, ``net/sf/ij_plugins/im3d/grow/SRG.java``.

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
from seedgrow.grow.region import RegionState


class SRG(SeededRegionGrowingBase):
    """Seeded region growing of a 2D scalar image.

    Seed points are ``(row, col)``, the reverse of ``(x, y)``.

    Examples
    --------
    Segment background and two blobs:

    >>> srg = SRG()
    >>> srg.set_image(image)
    >>> srg.set_seeds([
    ...     [(144, 107)],  # background
    ...     [(159, 91)],   # blob 1
    ...     [(143, 119)],  # blob 2
    ... ])
    >>> srg.set_number_of_animation_frames(50)
    >>> srg.run()
    >>> markers = srg.get_region_markers()
    >>> frames = srg.get_animation_stack()
    """

    def set_image(self, image: np.ndarray) -> None:
        """Set the image to be segmented.

        Parameters
        ----------
        image : np.ndarray
            2D array ``(rows, cols)`` of any real dtype; copied as float64.

        Raises
        ------
        ValidationError
            If the image is not 2D, is empty, or has non-finite values.
        """
        image = np.asarray(image)
        if image.ndim != 2:
            raise ValidationError(
                f"Expected 2D image, got shape {image.shape}"
            )
        self._image = self._validate_image(image, '2D')

    def _pixel_values(self) -> List[float]:
        return np.pad(self._image, 1).ravel().tolist()

    def _new_region(self, label: int) -> RegionState:
        return RegionState(label)
