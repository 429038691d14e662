#!/usr/bin/env python3
"""
Tests for the validation result models and the tagged outcome.
"""

import unittest
from dataclasses import FrozenInstanceError

from branch_validator.models import FailureReason, Invalid, Valid, ValidationStats
from branch_validator.core import unreadable_result


class TestValidationOutcome(unittest.TestCase):
    """Test cases for the Valid and Invalid outcome types."""

    def test_valid(self):
        """Test that Valid reports itself as valid."""
        self.assertTrue(Valid().is_valid)
        self.assertEqual(Valid(), Valid())

    def test_invalid_is_not_valid(self):
        """Test that every failure reason yields an invalid outcome."""
        for reason in FailureReason:
            with self.subTest(reason=reason):
                self.assertFalse(Invalid(reason).is_valid)

    def test_invalid_immutable(self):
        """Test that outcomes are frozen."""
        outcome = Invalid(FailureReason.NON_UNIFORM_LENGTH)
        with self.assertRaises(FrozenInstanceError):
            outcome.reason = FailureReason.NO_BIRDS

    def test_symbol_not_multiple_description(self):
        """Test that the description names the bird, its count and N."""
        outcome = Invalid(
            FailureReason.SYMBOL_NOT_MULTIPLE, symbol="K", count=5, branch_length=3
        )
        self.assertEqual(outcome.describe(), "count of bird 'K' (5) is not a multiple of N=3")

    def test_no_structure_description_with_detail(self):
        """Test that a read error is carried into the description."""
        outcome = Invalid(FailureReason.NO_STRUCTURE, detail="Permission denied")
        self.assertEqual(outcome.describe(), "file could not be read: Permission denied")

    def test_descriptions_are_distinct(self):
        """Test that each reason has its own description."""
        descriptions = {Invalid(reason, branch_length=30).describe() for reason in FailureReason}
        self.assertEqual(len(descriptions), len(FailureReason))

    def test_reason_values_are_strings(self):
        """Test that reasons serialize as plain strings."""
        self.assertEqual(FailureReason.TOO_MANY_BRANCHES.value, "too_many_branches")
        self.assertEqual(FailureReason("no_birds"), FailureReason.NO_BIRDS)


class TestValidationResult(unittest.TestCase):
    """Test cases for the ValidationResult NamedTuple."""

    def test_result_immutable(self):
        """Test that ValidationResult is immutable."""
        result = unreadable_result("f.txt", "gone")
        with self.assertRaises(AttributeError):
            result.has_structure = True

    def test_is_valid_combines_flags(self):
        """Test that is_valid needs uniform lengths and correct counts."""
        result = unreadable_result("f.txt", "gone")
        self.assertFalse(result.is_valid)
        self.assertTrue(result._replace(is_length_uniform=True, are_counts_correct=True).is_valid)
        self.assertFalse(result._replace(is_length_uniform=True).is_valid)


class TestValidationStats(unittest.TestCase):
    """Test cases for the ValidationStats NamedTuple."""

    def test_stats_creation(self):
        """Test creating ValidationStats."""
        stats = ValidationStats(
            total_files=3,
            valid_files=1,
            invalid_files=1,
            unreadable_files=1,
            start_time=0.0,
            end_time=3.0,
            total_duration=3.0,
            avg_time_per_file=1.0,
        )
        self.assertEqual(stats.total_files, 3)
        with self.assertRaises(AttributeError):
            stats.total_files = 4


if __name__ == "__main__":
    unittest.main()
