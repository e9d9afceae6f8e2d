# -*- coding: utf-8 -*-
"""
Region Growing - Seeded region growing engines and their building blocks.

Components
----------
- ``SRG``: 2D scalar images, 8-connected (or 4-connected).
- ``SRG2DVector``: 2D multi-band images, Euclidean band distance.
- ``SRG3D``: scalar volumes, 26-connected (or 6-/18-connected).
- ``CandidateQueue``: min-heap frontier ordered by difference then
  insertion order.
- ``RegionState`` / ``VectorRegionState``: running region statistics.
- ``to_seed_image``: per-region point lists to a seed label image.

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

from seedgrow.grow.candidates import Candidate, CandidateQueue
from seedgrow.grow.region import (
    RegionState,
    VectorRegionState,
    scalar_difference,
    vector_difference,
)
from seedgrow.grow.seeds import SeedLookup, to_seed_image
from seedgrow.grow.engine import SeededRegionGrowingBase, neighbour_offsets
from seedgrow.grow.srg import SRG
from seedgrow.grow.srg_vector import SRG2DVector
from seedgrow.grow.srg3d import SRG3D

__all__ = [
    'Candidate',
    'CandidateQueue',
    'RegionState',
    'VectorRegionState',
    'scalar_difference',
    'vector_difference',
    'SeedLookup',
    'to_seed_image',
    'SeededRegionGrowingBase',
    'neighbour_offsets',
    'SRG',
    'SRG2DVector',
    'SRG3D',
]
