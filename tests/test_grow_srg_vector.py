# -*- coding: utf-8 -*-
"""
Tests for the 2D multi-band seeded region growing engine.

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

import numpy as np
import pytest

from seedgrow.exceptions import ValidationError
from seedgrow.grow import SRG, SRG2DVector


def _two_colour_blocks():
    """Red block | purple column | blue block, 6 x 9 x 3."""
    image = np.zeros((6, 9, 3))
    image[:, :4] = (200.0, 50.0, 50.0)
    image[:, 4] = (125.0, 50.0, 125.0)
    image[:, 5:] = (50.0, 50.0, 200.0)
    return image


class TestSRG2DVector:
    """Tests for SRG2DVector."""

    def test_colour_blocks_fully_labelled(self):
        srg = SRG2DVector()
        srg.set_image(_two_colour_blocks())
        srg.set_seeds([[(2, 1)], [(3, 7)]])
        srg.run()
        markers = srg.get_region_markers()
        assert markers.shape == (6, 9)
        assert np.all(markers[:, :4] == 1)
        assert np.all(markers[:, 5:] == 2)
        assert np.all(markers[:, 4] > 0)

    def test_region_means_are_block_colours(self):
        srg = SRG2DVector()
        srg.set_image(_two_colour_blocks())
        srg.set_seeds([[(2, 1)], [(3, 7)]])
        srg.run()
        red, blue = srg.regions
        assert red.mean.shape == (3,)
        # Each region also absorbs some of the purple column
        assert red.mean[0] > red.mean[2]
        assert blue.mean[2] > blue.mean[0]
        assert red.count + blue.count == 54

    def test_bands_only_separable_together(self):
        """Blocks with equal band sums are still told apart."""
        image = np.zeros((4, 7, 2))
        image[:, :3] = (100.0, 0.0)
        image[:, 3] = (50.0, 50.0)
        image[:, 4:] = (0.0, 100.0)
        srg = SRG2DVector()
        srg.set_image(image)
        srg.set_seeds([[(0, 0)], [(3, 6)]])
        srg.run()
        markers = srg.get_region_markers()
        assert np.all(markers[:, :3] == 1)
        assert np.all(markers[:, 4:] == 2)

    def test_number_of_bands(self):
        srg = SRG2DVector()
        assert srg.number_of_bands == 0
        srg.set_image(np.zeros((4, 4, 5)))
        assert srg.number_of_bands == 5

    def test_single_band_matches_scalar_engine(self):
        rng = np.random.default_rng(11)
        image = rng.uniform(0, 255, size=(15, 15))
        seeds = [[(0, 0)], [(14, 14)], [(7, 7)]]

        scalar = SRG()
        scalar.set_image(image)
        scalar.set_seeds(seeds)
        scalar.run()

        vector = SRG2DVector()
        vector.set_image(image)
        vector.set_seeds(seeds)
        vector.run()

        assert vector.number_of_bands == 1
        np.testing.assert_array_equal(
            vector.get_region_markers(), scalar.get_region_markers()
        )

    def test_mask_and_animation(self):
        image = _two_colour_blocks()
        mask = np.ones((6, 9), dtype=bool)
        mask[:, 4] = False
        srg = SRG2DVector()
        srg.set_image(image)
        srg.set_seeds([[(2, 1)], [(3, 7)]])
        srg.set_mask(mask)
        srg.set_number_of_animation_frames(4)
        srg.run()
        markers = srg.get_region_markers()
        assert np.all(markers[:, 4] == 0)
        frames = srg.get_animation_stack()
        assert 2 <= len(frames) <= 4
        np.testing.assert_array_equal(frames[-1], markers)

    def test_rejects_volume_of_wrong_rank(self):
        with pytest.raises(ValidationError, match="bands"):
            SRG2DVector().set_image(np.zeros((2, 2, 2, 2)))

    def test_rejects_nan(self):
        image = np.zeros((3, 3, 3))
        image[1, 1, 2] = np.nan
        with pytest.raises(ValidationError, match="NaN"):
            SRG2DVector().set_image(image)

    def test_seed_shape_uses_spatial_extent(self):
        srg = SRG2DVector()
        srg.set_image(np.zeros((4, 5, 3)))
        srg.set_seeds(np.ones((4, 5, 3), dtype=np.uint8))
        with pytest.raises(ValidationError, match="same dimension"):
            srg.run()
