"""
Owner Linked-List Simulator — model of the Safe's owner storage

The Safe keeps its owners in a singly-linked list stored as a mapping
owner -> next owner, closed into a cycle by SENTINEL_OWNERS:

    SENTINEL -> owner_0 -> owner_1 -> ... -> owner_k -> SENTINEL

swapOwner and removeOwner take the predecessor of the affected owner as an
argument and revert if it does not match storage. Transactions in a batch
execute sequentially, so the predecessor for each call must be computed
against the list as it will be after every earlier call in the batch. The
simulator is therefore mutated right after each operation is emitted.

INVARIANT (checked by check_invariant):
    following successors from the sentinel visits every owner exactly once
    and returns to the sentinel

A reverse-pointer map is maintained alongside the successor map so that
predecessor lookup does not scan the list.
"""

from dataclasses import dataclass
from typing import Dict, Iterable, List, Sequence, Tuple

from safe_owner_sync.core.domain.address import SENTINEL_OWNERS
from safe_owner_sync.core.domain.batch import TransactionDescriptor
from safe_owner_sync.core.errors import InvariantError


class OwnerLinkedList:
    """Mutable simulation of the Safe `owners` mapping."""

    def __init__(self, owners: Iterable[str] = (), sentinel: str = SENTINEL_OWNERS):
        self.sentinel = sentinel
        self._next: Dict[str, str] = {sentinel: sentinel}
        self._prev: Dict[str, str] = {sentinel: sentinel}
        for owner in owners:
            self.apply_add(owner)

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def __contains__(self, owner: str) -> bool:
        return owner != self.sentinel and owner in self._next

    def __len__(self) -> int:
        return len(self._next) - 1

    def next_of(self, owner: str) -> str:
        """Successor of an owner (or of the sentinel)."""
        if owner not in self._next:
            raise InvariantError(f"{owner} is not in the owner list")
        return self._next[owner]

    def prev_of(self, owner: str) -> str:
        """
        Predecessor of an owner: the sentinel or another owner.

        Raises:
            InvariantError: If owner is not currently in the list
        """
        if owner not in self:
            raise InvariantError(f"cannot resolve prevOwner: {owner} is not an owner")
        return self._prev[owner]

    def last_owner(self) -> str:
        """Tail of the list, or the sentinel itself when the list is empty."""
        current = self.sentinel
        for _ in range(len(self._next)):
            successor = self._next[current]
            if successor == self.sentinel:
                return current
            current = successor
        raise InvariantError("owner list does not return to the sentinel")

    def owners(self) -> List[str]:
        """Owners in list order, head first."""
        result = []
        current = self._next[self.sentinel]
        while current != self.sentinel:
            if len(result) >= len(self):
                raise InvariantError("owner list does not return to the sentinel")
            result.append(current)
            current = self._next[current]
        return result

    def check_invariant(self) -> None:
        """
        Verify the successor chain is a single cycle through the sentinel.

        Raises:
            InvariantError: On a broken chain, a skipped owner or a stale
                reverse pointer
        """
        visited = self.owners()
        if len(visited) != len(self) or set(visited) != set(self._next) - {self.sentinel}:
            raise InvariantError(f"owner list chain skips owners: visited {visited}")
        for node, successor in self._next.items():
            if self._prev.get(successor) != node:
                raise InvariantError(f"stale reverse pointer for {successor}")

    # -------------------------------------------------------------------------
    # Mutations (mirror swapOwner / removeOwner / addOwnerWithThreshold)
    # -------------------------------------------------------------------------

    def _link(self, node: str, successor: str) -> None:
        self._next[node] = successor
        self._prev[successor] = node

    def _ensure_new(self, owner: str) -> None:
        if owner == self.sentinel:
            raise InvariantError("sentinel cannot be an owner")
        if owner in self:
            raise InvariantError(f"{owner} is already an owner")

    def apply_swap(self, old: str, new: str) -> None:
        """prevOf(old) -> new -> nextOf(old); old dropped."""
        self._ensure_new(new)
        prev = self.prev_of(old)
        successor = self._next.pop(old)
        del self._prev[old]
        self._link(prev, new)
        self._link(new, successor)

    def apply_remove(self, owner: str) -> None:
        """prevOf(owner) -> nextOf(owner); owner dropped."""
        prev = self.prev_of(owner)
        successor = self._next.pop(owner)
        del self._prev[owner]
        self._link(prev, successor)

    def apply_add(self, owner: str) -> None:
        """lastOwner() -> owner -> sentinel."""
        self._ensure_new(owner)
        last = self.last_owner()
        self._link(last, owner)
        self._link(owner, self.sentinel)


# =============================================================================
# REPLAY
# =============================================================================


@dataclass(frozen=True)
class ReplayResult:
    """State of the Safe after replaying a batch."""

    owners: Tuple[str, ...]
    threshold: int
    operations: int


def replay_transactions(
    owners: Sequence[str],
    threshold: int,
    transactions: Iterable[TransactionDescriptor],
) -> ReplayResult:
    """
    Replay assembled transactions against a freshly seeded simulator.

    Every prevOwner argument must equal the true predecessor at the moment
    the call executes; a stale one would revert on-chain.

    Args:
        owners: Owners before the batch, in list order
        threshold: Threshold before the batch
        transactions: Batch transactions in execution order

    Returns:
        ReplayResult with the owners and threshold after the batch

    Raises:
        InvariantError: On a stale prevOwner, an unknown method or a broken
            list
    """
    simulator = OwnerLinkedList(owners)
    operations = 0

    for tx in transactions:
        method = tx.method
        if method in ("swapOwner", "removeOwner"):
            target = tx.arg("oldOwner") if method == "swapOwner" else tx.arg("owner")
            expected = simulator.prev_of(target)
            if tx.arg("prevOwner") != expected:
                raise InvariantError(
                    f"{method}({target}) carries prevOwner {tx.arg('prevOwner')}, "
                    f"list has {expected}"
                )
            if method == "swapOwner":
                simulator.apply_swap(target, tx.arg("newOwner"))
            else:
                simulator.apply_remove(target)
                threshold = int(tx.arg("_threshold"))
            operations += 1
        elif method == "addOwnerWithThreshold":
            simulator.apply_add(tx.arg("owner"))
            threshold = int(tx.arg("_threshold"))
            operations += 1
        elif method == "changeThreshold":
            threshold = int(tx.arg("_threshold"))
        else:
            raise InvariantError(f"unknown Safe method in batch: {method}")
        simulator.check_invariant()

    return ReplayResult(owners=tuple(simulator.owners()), threshold=threshold, operations=operations)
