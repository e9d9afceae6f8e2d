# -*- coding: utf-8 -*-
"""
Processor Metadata - Version and capability stamps for processor classes.

``@processor_version`` records the algorithm version a processor
implements; ``@processor_tags`` records which modalities it targets and
what kind of segmentation it produces, using the enums of
:mod:`seedgrow.vocabulary`.

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
from typing import Optional, Sequence, Type, TypeVar

# seedgrow internal
from seedgrow.vocabulary import (
    ImageModality,
    ProcessorCategory,
    SegmentationType,
)

T = TypeVar('T')


def processor_version(version: str):
    """Stamp ``__processor_version__ = version`` on the decorated class."""
    if not version:
        raise ValueError("processor_version requires a version string")

    def decorator(cls: Type[T]) -> Type[T]:
        cls.__processor_version__ = version
        return cls
    return decorator


def _members(values, enum_type, name):
    values = tuple(values or ())
    for value in values:
        if not isinstance(value, enum_type):
            raise TypeError(
                f"{name} must hold {enum_type.__name__} members, got {value!r}"
            )
    return values


def processor_tags(
    modalities: Optional[Sequence[ImageModality]] = None,
    category: Optional[ProcessorCategory] = None,
    description: Optional[str] = None,
    segmentation_types: Optional[Sequence[SegmentationType]] = None,
):
    """Stamp capability metadata as the ``__processor_tags__`` dict.

    Raises
    ------
    TypeError
        If a tag is not a member of its vocabulary enum.
    """
    tags = {
        'modalities': _members(modalities, ImageModality, 'modalities'),
        'category': category,
        'description': description,
        'segmentation_types': _members(
            segmentation_types, SegmentationType, 'segmentation_types'
        ),
    }
    if category is not None and not isinstance(category, ProcessorCategory):
        raise TypeError(
            f"category must be a ProcessorCategory member, got {category!r}"
        )

    def decorator(cls: Type[T]) -> Type[T]:
        cls.__processor_tags__ = dict(tags)
        return cls
    return decorator
