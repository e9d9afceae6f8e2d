# -*- coding: utf-8 -*-
"""
Tests for the 3D scalar seeded region growing engine.

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
from seedgrow.grow import SRG3D, neighbour_offsets


def _three_boxes():
    volume = np.zeros((12, 12, 12))
    volume[1:5, 1:5, 1:5] = 10.0
    volume[1:5, 7:11, 7:11] = 20.0
    volume[7:11, 3:9, 3:9] = 30.0
    return volume


_BOX_SEEDS = [[(2, 2, 2)], [(3, 9, 8)], [(9, 5, 6)]]


def _run(volume, seeds, **options):
    srg = SRG3D()
    srg.set_image(volume)
    srg.set_seeds(seeds)
    srg.set_mask(options.get('mask'))
    srg.set_connectivity(options.get('connectivity', 26))
    srg.set_number_of_animation_frames(options.get('frames', 0))
    srg.run()
    return srg


class TestNeighbourOffsets3D:
    """Tests for 3D neighbourhoods."""

    @pytest.mark.parametrize('rank, count', [(1, 6), (2, 18), (3, 26)])
    def test_counts(self, rank, count):
        assert len(neighbour_offsets(3, rank)) == count

    def test_face_neighbours_first(self):
        offsets = neighbour_offsets(3, 3)
        faces = offsets[:6]
        assert all(sum(c != 0 for c in o) == 1 for o in faces)
        assert sorted(faces) == sorted(neighbour_offsets(3, 1))


class TestSRG3D:
    """Tests for SRG3D."""

    def test_boxes_carry_their_labels(self):
        volume = _three_boxes()
        markers = _run(volume, _BOX_SEEDS).get_region_markers()
        assert markers.shape == (12, 12, 12)
        assert np.all(markers[1:5, 1:5, 1:5] == 1)
        assert np.all(markers[1:5, 7:11, 7:11] == 2)
        assert np.all(markers[7:11, 3:9, 3:9] == 3)
        assert np.all(markers > 0)

    def test_box_region_means(self):
        srg = _run(_three_boxes(), _BOX_SEEDS)
        markers = srg.get_region_markers()
        volume = _three_boxes()
        for region in srg.regions:
            values = volume[markers == region.label]
            assert region.count == values.size
            assert region.mean == pytest.approx(values.mean())

    def test_six_connectivity_blocks_diagonals(self):
        volume = np.zeros((3, 3, 3))
        mask = np.zeros((3, 3, 3), dtype=bool)
        mask[0, 0, 0] = True
        mask[1, 1, 1] = True
        mask[2, 2, 2] = True
        full = _run(volume, [[(0, 0, 0)]], mask=mask).get_region_markers()
        faces = _run(volume, [[(0, 0, 0)]], mask=mask,
                     connectivity=6).get_region_markers()
        assert np.count_nonzero(full) == 3
        assert np.count_nonzero(faces) == 1

    def test_eighteen_connectivity_excludes_corners(self):
        volume = np.zeros((2, 2, 2))
        mask = np.zeros((2, 2, 2), dtype=bool)
        mask[0, 0, 0] = True
        mask[1, 1, 1] = True
        edges = _run(volume, [[(0, 0, 0)]], mask=mask,
                     connectivity=18).get_region_markers()
        assert edges[1, 1, 1] == 0
        corners = _run(volume, [[(0, 0, 0)]], mask=mask).get_region_markers()
        assert corners[1, 1, 1] == 1

    def test_masked_slice_separates_volume(self):
        volume = np.zeros((6, 4, 4))
        mask = np.ones((6, 4, 4), dtype=bool)
        mask[3] = False
        markers = _run(volume, [[(0, 0, 0)]], mask=mask).get_region_markers()
        assert np.all(markers[:3] == 1)
        assert np.all(markers[3:] == 0)

    def test_animation_frames(self):
        srg = _run(_three_boxes(), _BOX_SEEDS, frames=5)
        frames = srg.get_animation_stack()
        assert 2 <= len(frames) <= 5
        assert np.count_nonzero(frames[0]) == 3
        np.testing.assert_array_equal(frames[-1], srg.get_region_markers())

    def test_each_admission_labels_one_voxel(self):
        volume = np.random.default_rng(3).uniform(0, 100, size=(4, 4, 4))
        frames = _run(volume, [[(0, 0, 0)], [(3, 3, 3)]],
                      frames=100).get_animation_stack()
        assert len(frames) == 1 + 62 + 1
        for before, after in zip(frames[:-1], frames[1:-1]):
            labelled = before > 0
            assert np.count_nonzero(after) == np.count_nonzero(before) + 1
            np.testing.assert_array_equal(after[labelled], before[labelled])

    def test_progress_reaches_one(self):
        srg = SRG3D()
        srg.set_image(_three_boxes())
        srg.set_seeds(_BOX_SEEDS)
        values = []
        srg.add_progress_listener(lambda p, m: values.append(p))
        srg.run()
        assert values[0] == 0.0
        assert values[-1] == 1.0
        assert values == sorted(values)

    def test_rejects_2d_image(self):
        with pytest.raises(ValidationError, match="3D"):
            SRG3D().set_image(np.zeros((4, 4)))

    def test_invalid_connectivity(self):
        with pytest.raises(ValidationError, match="connectivity"):
            SRG3D().set_connectivity(8)

    def test_point_outside_volume(self):
        srg = SRG3D()
        srg.set_image(np.zeros((3, 3, 3)))
        with pytest.raises(ValidationError, match="outside"):
            srg.set_seeds([[(0, 0, 3)]])
