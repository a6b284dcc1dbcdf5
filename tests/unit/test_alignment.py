"""
Tests for owner alignment

Checks:
1. Kept owners stay on their current index
2. Holes are filled left to right, leftovers appended
3. Unfilled holes are dropped
4. Duplicate desired owners are rejected
"""

import pytest

from safe_owner_sync.core.diff import align_owners
from safe_owner_sync.core.errors import ValidationError


class TestAlignOwners:
    """align_owners behaviour"""

    def test_kept_owners_keep_their_index(self):
        assert align_owners(["A", "B", "C"], ["C", "D", "A"]) == ["A", "D", "C"]

    def test_identical_sets_reorder_to_current(self):
        assert align_owners(["A", "B", "C"], ["C", "B", "A"]) == ["A", "B", "C"]

    def test_holes_filled_in_original_relative_order(self):
        aligned = align_owners(["A", "X", "Y", "B"], ["B", "N2", "A", "N1"])
        assert aligned == ["A", "N2", "N1", "B"]

    def test_leftovers_appended(self):
        assert align_owners(["A", "B"], ["N1", "A", "N2", "B", "N3"]) == ["A", "B", "N1", "N2", "N3"]

    def test_unfilled_holes_are_dropped(self):
        assert align_owners(["A", "B", "C", "D"], ["D", "X"]) == ["X", "D"]

    def test_empty_current_keeps_desired_order(self):
        assert align_owners([], ["Z", "Y", "X"]) == ["Z", "Y", "X"]

    def test_empty_desired_gives_empty_alignment(self):
        assert align_owners(["A", "B"], []) == []

    def test_same_members_as_desired(self):
        desired = ["Q", "B", "R", "S", "A"]
        aligned = align_owners(["A", "B", "C"], desired)
        assert sorted(aligned) == sorted(desired)
        assert len(aligned) == len(desired)

    def test_duplicate_desired_rejected(self):
        with pytest.raises(ValidationError, match="Duplicate"):
            align_owners(["A"], ["B", "B"])
