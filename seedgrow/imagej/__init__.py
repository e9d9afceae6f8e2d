# -*- coding: utf-8 -*-
"""
ImageJ Ports - Seeded region growing ported from the ij-plugins Toolkit.

Pure-NumPy reimplementations of Jarek Sacha's ij-plugins seeded region
growing plugins, exposed through the ``ImageTransform`` processor
protocol. Each class mirrors the original plugin's default parameters and
carries attribution to the original source file.

Components
----------
Segmentation:
- SeededRegionGrowing: 2D scalar and multi-band images
- SeededRegionGrowing3D: scalar volumes (image stacks)

Attribution
-----------
ij-plugins Toolkit is developed by Jarek Sacha and distributed under
LGPL-2.1. This module provides independent reimplementations in NumPy
that follow the published algorithm (Adams & Bischof, 1994) and cite
the original authors.

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

from seedgrow.imagej.seeded_region_growing import (
    SeededRegionGrowing,
    SeededRegionGrowing3D,
)

__all__ = [
    'SeededRegionGrowing',
    'SeededRegionGrowing3D',
]
