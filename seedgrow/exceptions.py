# -*- coding: utf-8 -*-
"""
seedgrow Exception Hierarchy - Domain-specific exceptions for region growing.

Provides a small exception hierarchy that lets callers catch seedgrow
errors distinctly from Python built-in exceptions. All seedgrow
exceptions subclass both ``SeedGrowError`` and the appropriate built-in
exception, so existing ``except ValueError`` handlers keep working.

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


class SeedGrowError(Exception):
    """Base exception for all seedgrow errors."""


class ValidationError(SeedGrowError, ValueError):
    """Invalid input data, parameters, or configuration.

    Raised for image/seed/mask extent mismatches, empty images, invalid
    seed labels, malformed seed point lists, and out-of-range engine
    settings. Always raised before a run mutates any output.
    """


class ProcessorError(SeedGrowError, RuntimeError):
    """Internal invariant violated while growing regions.

    Raised when the growth loop meets a state that correct setup can
    never produce (e.g. a negative or NaN candidate difference).
    """
