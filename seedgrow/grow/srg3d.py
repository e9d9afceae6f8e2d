# -*- coding: utf-8 -*-
"""
SRG3D - Seeded region growing for scalar volumes.

Generalizes ``SRG`` to image stacks addressed as ``(slice, row, col)``.
Candidates are discovered through the 26-connected neighbourhood (the
full 3x3x3 cube minus its centre) by default, clipped at the volume
boundary; 6- and 18-connectivity are available. Region statistics and
differences are scalar.

Attribution
-----------
ImageJ implementation: Jarek Sacha,
``net/sf/ij_plugins/im3d/grow/SRG3D.java``.

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


class SRG3D(SeededRegionGrowingBase):
    """Seeded region growing of a 3D scalar volume.

    Examples
    --------
    >>> srg = SRG3D()
    >>> srg.set_image(volume)                  # (slices, rows, cols)
    >>> srg.set_seeds([[(1, 1, 1)], [(28, 25, 25)], [(31, 36, 31)]])
    >>> srg.run()
    >>> markers = srg.get_region_markers()     # (slices, rows, cols)
    """

    _ndim = 3
    _connectivities = {6: 1, 18: 2, 26: 3}
    _default_connectivity = 26
    _progress_steps = 100

    def set_image(self, image: np.ndarray) -> None:
        """Set the volume to be segmented.

        Parameters
        ----------
        image : np.ndarray
            3D array ``(slices, rows, cols)`` of any real dtype.

        Raises
        ------
        ValidationError
            If the volume is not 3D, is empty, or has non-finite values.
        """
        image = np.asarray(image)
        if image.ndim != 3:
            raise ValidationError(
                f"Expected 3D volume, got shape {image.shape}"
            )
        self._image = self._validate_image(image, '3D')

    def _pixel_values(self) -> List[float]:
        return np.pad(self._image, 1).ravel().tolist()

    def _new_region(self, label: int) -> RegionState:
        return RegionState(label)
