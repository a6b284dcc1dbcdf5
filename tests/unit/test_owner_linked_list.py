"""
Tests for the owner linked-list simulator

Checks:
1. Seeding builds SENTINEL -> o0 -> ... -> ok -> SENTINEL
2. prev_of / last_owner on populated and empty lists
3. swap / remove / add keep the cycle invariant
4. Operations the Safe would revert raise InvariantError
5. replay_transactions detects stale prevOwner arguments
"""

import pytest

from safe_owner_sync.builder.assembler import TransactionAssembler
from safe_owner_sync.core.domain import SENTINEL_OWNERS
from safe_owner_sync.core.errors import InvariantError
from safe_owner_sync.owner_list import OwnerLinkedList, replay_transactions


class TestSeeding:
    def test_chain_follows_owner_order(self):
        ll = OwnerLinkedList(["A", "B", "C"])
        assert ll.next_of(SENTINEL_OWNERS) == "A"
        assert ll.next_of("A") == "B"
        assert ll.next_of("C") == SENTINEL_OWNERS
        assert ll.owners() == ["A", "B", "C"]
        assert len(ll) == 3
        ll.check_invariant()

    def test_empty_list_points_sentinel_to_itself(self):
        ll = OwnerLinkedList()
        assert ll.next_of(SENTINEL_OWNERS) == SENTINEL_OWNERS
        assert ll.last_owner() == SENTINEL_OWNERS
        assert ll.owners() == []
        assert len(ll) == 0

    def test_sentinel_is_not_an_owner(self):
        ll = OwnerLinkedList(["A"])
        assert "A" in ll
        assert SENTINEL_OWNERS not in ll


class TestQueries:
    def test_prev_of_head_is_sentinel(self):
        assert OwnerLinkedList(["A", "B"]).prev_of("A") == SENTINEL_OWNERS

    def test_prev_of_middle_owner(self):
        assert OwnerLinkedList(["A", "B", "C"]).prev_of("C") == "B"

    def test_prev_of_unknown_owner_raises(self):
        with pytest.raises(InvariantError):
            OwnerLinkedList(["A"]).prev_of("Z")

    def test_last_owner(self):
        assert OwnerLinkedList(["A", "B", "C"]).last_owner() == "C"


class TestMutations:
    def test_swap_keeps_position(self):
        ll = OwnerLinkedList(["A", "B", "C"])
        ll.apply_swap("B", "D")
        assert ll.owners() == ["A", "D", "C"]
        assert ll.prev_of("C") == "D"
        assert "B" not in ll
        ll.check_invariant()

    def test_swap_tail_updates_sentinel_predecessor(self):
        ll = OwnerLinkedList(["A", "B"])
        ll.apply_swap("B", "X")
        assert ll.last_owner() == "X"
        ll.apply_add("Y")
        assert ll.owners() == ["A", "X", "Y"]
        ll.check_invariant()

    def test_remove_relinks_predecessor(self):
        ll = OwnerLinkedList(["A", "B", "C"])
        ll.apply_remove("B")
        assert ll.owners() == ["A", "C"]
        assert ll.prev_of("C") == "A"
        ll.check_invariant()

    def test_remove_head(self):
        ll = OwnerLinkedList(["A", "B"])
        ll.apply_remove("A")
        assert ll.prev_of("B") == SENTINEL_OWNERS
        ll.check_invariant()

    def test_remove_last_remaining_owner(self):
        ll = OwnerLinkedList(["A"])
        ll.apply_remove("A")
        assert ll.owners() == []
        assert ll.last_owner() == SENTINEL_OWNERS
        ll.check_invariant()

    def test_add_appends_after_tail(self):
        ll = OwnerLinkedList(["A", "B"])
        ll.apply_add("C")
        assert ll.owners() == ["A", "B", "C"]
        assert ll.prev_of("C") == "B"
        assert ll.next_of("C") == SENTINEL_OWNERS
        ll.check_invariant()

    def test_add_existing_owner_raises(self):
        with pytest.raises(InvariantError, match="already an owner"):
            OwnerLinkedList(["A"]).apply_add("A")

    def test_swap_in_existing_owner_raises(self):
        with pytest.raises(InvariantError):
            OwnerLinkedList(["A", "B"]).apply_swap("A", "B")

    def test_remove_absent_owner_raises(self):
        with pytest.raises(InvariantError):
            OwnerLinkedList(["A"]).apply_remove("B")

    def test_sentinel_cannot_be_added(self):
        with pytest.raises(InvariantError):
            OwnerLinkedList().apply_add(SENTINEL_OWNERS)


class TestReplay:
    SAFE = "0x" + "5afe" * 10

    def test_sequential_predecessors_are_replayable(self):
        assembler = TransactionAssembler(self.SAFE)
        txs = [
            assembler.remove_owner("A", "B", 1),
            assembler.remove_owner("A", "C", 1),
            assembler.add_owner_with_threshold("D", 1),
        ]
        result = replay_transactions(["A", "B", "C"], 2, txs)
        assert result.owners == ("A", "D")
        assert result.threshold == 1
        assert result.operations == 3

    def test_stale_predecessor_detected(self):
        assembler = TransactionAssembler(self.SAFE)
        # After B is removed, C's predecessor is A, not B
        txs = [
            assembler.remove_owner("A", "B", 1),
            assembler.remove_owner("B", "C", 1),
        ]
        with pytest.raises(InvariantError, match="prevOwner"):
            replay_transactions(["A", "B", "C"], 2, txs)

    def test_change_threshold_only(self):
        txs = [TransactionAssembler(self.SAFE).change_threshold(2)]
        result = replay_transactions(["A", "B"], 1, txs)
        assert result.owners == ("A", "B")
        assert result.threshold == 2
        assert result.operations == 0
