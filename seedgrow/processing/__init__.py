# -*- coding: utf-8 -*-
"""
Processing Framework - Processor base classes and metadata stamps.

Key Classes
-----------
``ImageProcessor``, ``ImageTransform``, ``processor_version``,
``processor_tags``

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

from seedgrow.processing.base import ImageProcessor, ImageTransform
from seedgrow.processing.versioning import processor_tags, processor_version

__all__ = [
    'ImageProcessor',
    'ImageTransform',
    'processor_tags',
    'processor_version',
]
