# -*- coding: utf-8 -*-
"""
Vocabulary - Canonical enums for the seedgrow package.

Defines the single source of truth for the controlled vocabularies used
to tag processors: image modalities, processor categories, and
segmentation types. Tags are validated against these enums at class
definition time so typos fail at import.

Author
------
Steven Siebert

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

from enum import Enum


class ImageModality(Enum):
    """Image modalities a processor is designed for."""

    PAN = "PAN"
    EO = "EO"
    MSI = "MSI"
    HSI = "HSI"
    SAR = "SAR"
    LWIR = "LWIR"
    MICROSCOPY = "MICROSCOPY"
    CT = "CT"
    MRI = "MRI"


class ProcessorCategory(Enum):
    """Processing categories for processor tagging.

    Values mirror the ImageJ menu groupings the ported plugins came from.
    """

    SEGMENTATION = "segmentation"


class SegmentationType(Enum):
    """Type of segmentation a segmentor processor produces.

    Seeded region growing yields ``SEMANTIC`` label maps: every label is
    the caller's seed class, not a per-object instance id.
    """

    INSTANCE = "instance"
    SEMANTIC = "semantic"
    PANOPTIC = "panoptic"
