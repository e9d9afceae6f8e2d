# -*- coding: utf-8 -*-
"""
Processor Base Classes - Seeded region growing processor interface.

``ImageTransform`` is the interface of the seeded region growing
adapters: ``apply(source, **kwargs)`` returns a label map (or a stack of
label maps). Adapters list their tunable parameters and defaults in
``__tunables__``; the constructor stores them as attributes and
``apply`` keywords with the same names override them for one call.
Values are checked by the ``_check_params`` hook, which the adapters
implement by configuring a region growing engine, so a bad value fails
with the engine's own ``ValidationError``.

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
import logging
import warnings
from abc import ABC, abstractmethod
from typing import Any, Dict

# Third-party
import numpy as np

logger = logging.getLogger(__name__)


class ImageProcessor(ABC):
    """
    Common base class of the region growing processors.

    Concrete classes without a ``@processor_version`` stamp warn once,
    on their first instantiation.

    Parameters
    ----------
    **params : Any
        Values for the names in ``__tunables__``. Unlisted names raise
        ``TypeError``; invalid values raise ``ValidationError``.
    """

    #: Tunable parameter names mapped to their default values.
    __tunables__: Dict[str, Any] = {}

    _unversioned_warned: set = set()

    def __new__(cls, *args: Any, **kwargs: Any) -> 'ImageProcessor':
        if (
            cls not in ImageProcessor._unversioned_warned
            and not getattr(cls, '__processor_version__', None)
            and not getattr(cls, '__abstractmethods__', None)
        ):
            ImageProcessor._unversioned_warned.add(cls)
            warnings.warn(
                f"{cls.__qualname__} has no processor version; "
                f"stamp it with @processor_version('x.y').",
                UserWarning,
                stacklevel=2,
            )
        return super().__new__(cls)

    def __init__(self, **params: Any) -> None:
        unknown = sorted(set(params) - set(self.__tunables__))
        if unknown:
            raise TypeError(
                f"{type(self).__name__} got unexpected parameter(s) {unknown}"
            )
        values = {**self.__tunables__, **params}
        self._check_params(values)
        for name, value in values.items():
            setattr(self, name, value)
        logger.debug("Created %s with %s", type(self).__name__, values)

    @property
    def params(self) -> Dict[str, Any]:
        """Current tunable values of this instance."""
        return {name: getattr(self, name) for name in self.__tunables__}

    def _resolve_params(self, kwargs: Dict[str, Any]) -> Dict[str, Any]:
        """Tunable values for one call: instance values overridden by *kwargs*.

        Keys of *kwargs* that are not tunables (``seeds``, ``mask``,
        ``progress_callback``) are ignored.
        """
        resolved = {
            name: kwargs.get(name, value)
            for name, value in self.params.items()
        }
        self._check_params(resolved)
        return resolved

    def _check_params(self, params: Dict[str, Any]) -> None:
        """Raise ``ValidationError`` if *params* holds an invalid value."""

    def _report_progress(
        self, kwargs: Dict[str, Any], fraction: float
    ) -> None:
        """Forward *fraction* to the ``progress_callback`` keyword, if any."""
        callback = kwargs.get('progress_callback')
        if callback is not None:
            callback(float(fraction))


class ImageTransform(ImageProcessor):
    """Processor mapping a source image to an array of the same extent."""

    @abstractmethod
    def apply(self, source: np.ndarray, **kwargs: Any) -> np.ndarray:
        """Apply the transform to *source*."""
        ...
