# -*- coding: utf-8 -*-
"""
Candidate Queue Tests.

Tests for ordering by difference, FIFO tie-breaking on insertion
sequence, and rejection of invalid differences.

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

import math

import pytest

from seedgrow.exceptions import ProcessorError
from seedgrow.grow.candidates import Candidate, CandidateQueue


class TestCandidateQueue:
    """Tests for CandidateQueue."""

    def test_empty_queue(self):
        q = CandidateQueue()
        assert len(q) == 0
        assert not q
        assert q.pop_best() is None
        assert q.peek() is None

    def test_pops_smallest_difference_first(self):
        q = CandidateQueue()
        q.push('a', region=1, difference=7.0)
        q.push('b', region=2, difference=0.5)
        q.push('c', region=1, difference=3.0)
        assert [q.pop_best().pixel for _ in range(3)] == ['b', 'c', 'a']
        assert not q

    def test_ties_pop_in_insertion_order(self):
        q = CandidateQueue()
        for pixel in range(10):
            q.push(pixel, region=1, difference=2.0)
        assert [q.pop_best().pixel for _ in range(10)] == list(range(10))

    def test_ties_ignore_pixel_and_region(self):
        """Later-inserted entries lose ties even with smaller pixel or region."""
        q = CandidateQueue()
        q.push((5, 5), region=3, difference=1.0)
        q.push((0, 0), region=1, difference=1.0)
        first = q.pop_best()
        assert first.pixel == (5, 5)
        assert first.region == 3

    def test_push_returns_entry(self):
        q = CandidateQueue()
        entry = q.push(42, region=2, difference=1)
        assert isinstance(entry, Candidate)
        assert entry.difference == 1.0
        assert isinstance(entry.difference, float)
        assert entry.pixel == 42
        assert entry.region == 2

    def test_peek_does_not_remove(self):
        q = CandidateQueue()
        q.push('x', region=1, difference=0.0)
        assert q.peek().pixel == 'x'
        assert len(q) == 1

    def test_zero_difference_allowed(self):
        q = CandidateQueue()
        q.push('x', region=1, difference=0.0)
        assert q.pop_best().difference == 0.0

    def test_clear_keeps_sequence_counting(self):
        q = CandidateQueue()
        first = q.push('a', region=1, difference=1.0)
        q.clear()
        assert len(q) == 0
        second = q.push('b', region=1, difference=1.0)
        assert second.sequence > first.sequence

    @pytest.mark.parametrize('difference', [-1.0, math.nan])
    def test_invalid_difference_rejected(self, difference):
        q = CandidateQueue()
        with pytest.raises(ProcessorError, match="non-negative"):
            q.push('x', region=1, difference=difference)
        assert len(q) == 0
