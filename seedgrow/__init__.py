# -*- coding: utf-8 -*-
"""
seedgrow - Seeded region growing for NumPy imagery.

Multi-region, priority-queue driven segmentation (Adams & Bischof Seeded
Region Growing) for 2D scalar, 2D multi-band and 3D scalar images, with
optional masking, animation snapshots and progress listeners.

Dependencies
------------
numpy
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

__version__ = "0.1.0"
__author__ = "Duane Smalley"

from seedgrow.exceptions import (
    SeedGrowError,
    ValidationError,
    ProcessorError,
)
from seedgrow.vocabulary import (
    ImageModality,
    ProcessorCategory,
    SegmentationType,
)
from seedgrow.grow import (
    SRG,
    SRG2DVector,
    SRG3D,
    to_seed_image,
)

__all__ = [
    'SeedGrowError',
    'ValidationError',
    'ProcessorError',
    'ImageModality',
    'ProcessorCategory',
    'SegmentationType',
    'SRG',
    'SRG2DVector',
    'SRG3D',
    'to_seed_image',
]
