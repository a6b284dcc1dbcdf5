"""
Transaction Assembler — edit operations to Safe contract calls

Mapping:
- Swap   -> swapOwner(prevOwner, oldOwner, newOwner)
- Remove -> removeOwner(prevOwner, owner, _threshold)
- Add    -> addOwnerWithThreshold(owner, _threshold)

Remove/Add carry the final target threshold: the Safe updates the threshold
atomically with each membership change. A trailing changeThreshold is
appended only when the threshold changes and the batch has no Add/Remove to
carry it (swap-only or empty scripts).

Each operation is emitted first and applied to the owner list simulator
immediately after, so the next prevOwner reflects the list as the Safe will
hold it at that point of the batch.
"""

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Tuple

from safe_owner_sync.core.domain.batch import ContractMethod, MethodInput, TransactionDescriptor
from safe_owner_sync.core.domain.edit_ops import Add, EditOperation, Remove, Swap
from safe_owner_sync.core.errors import InvariantError, ValidationError
from safe_owner_sync.owner_list.simulator import OwnerLinkedList

logger = logging.getLogger(__name__)


# =============================================================================
# SAFE ABI FRAGMENTS
# =============================================================================


def _address(name: str) -> MethodInput:
    return MethodInput(internal_type="address", name=name, type="address")


def _uint256(name: str) -> MethodInput:
    return MethodInput(internal_type="uint256", name=name, type="uint256")


SWAP_OWNER = ContractMethod(
    inputs=(_address("prevOwner"), _address("oldOwner"), _address("newOwner")),
    name="swapOwner",
    payable=False,
)

REMOVE_OWNER = ContractMethod(
    inputs=(_address("prevOwner"), _address("owner"), _uint256("_threshold")),
    name="removeOwner",
    payable=False,
)

ADD_OWNER_WITH_THRESHOLD = ContractMethod(
    inputs=(_address("owner"), _uint256("_threshold")),
    name="addOwnerWithThreshold",
    payable=False,
)

CHANGE_THRESHOLD = ContractMethod(
    inputs=(_uint256("_threshold"),),
    name="changeThreshold",
    payable=False,
)


# =============================================================================
# THRESHOLD GUARD
# =============================================================================


def resolve_threshold(new_threshold: Optional[int], current_threshold: int, owner_count: int) -> int:
    """
    Target threshold for the batch.

    Args:
        new_threshold: Requested threshold, None to keep the current one
        current_threshold: Threshold read from the Safe
        owner_count: Size of the final desired owner set

    Returns:
        Threshold every Add/Remove/changeThreshold will carry

    Raises:
        ValidationError: If the threshold is < 1 or exceeds owner_count
    """
    threshold = current_threshold if new_threshold is None else new_threshold
    if isinstance(threshold, bool) or not isinstance(threshold, int):
        raise ValidationError(f"threshold must be an integer, got {threshold!r}")
    if threshold < 1:
        raise ValidationError(f"threshold must be at least 1, got {threshold}")
    if threshold > owner_count:
        raise ValidationError(
            f"threshold {threshold} exceeds the number of desired owners ({owner_count})"
        )
    return threshold


# =============================================================================
# ASSEMBLER
# =============================================================================


@dataclass(frozen=True)
class AssemblyResult:
    """Transactions in execution order plus what the assembler decided."""

    transactions: Tuple[TransactionDescriptor, ...]
    final_owners: Tuple[str, ...]
    has_membership_change: bool
    threshold_tx_appended: bool


class TransactionAssembler:
    """Builds the transaction list for one Safe in lockstep with a simulator."""

    def __init__(self, safe_address: str):
        self.safe_address = safe_address

    def _descriptor(self, method: ContractMethod, values: Dict[str, str]) -> TransactionDescriptor:
        return TransactionDescriptor(
            to=self.safe_address,
            value="0",
            data=None,
            contract_method=method,
            contract_inputs_values=values,
        )

    def swap_owner(self, prev_owner: str, old_owner: str, new_owner: str) -> TransactionDescriptor:
        return self._descriptor(
            SWAP_OWNER,
            {"prevOwner": prev_owner, "oldOwner": old_owner, "newOwner": new_owner},
        )

    def remove_owner(self, prev_owner: str, owner: str, threshold: int) -> TransactionDescriptor:
        return self._descriptor(
            REMOVE_OWNER,
            {"prevOwner": prev_owner, "owner": owner, "_threshold": str(threshold)},
        )

    def add_owner_with_threshold(self, owner: str, threshold: int) -> TransactionDescriptor:
        return self._descriptor(
            ADD_OWNER_WITH_THRESHOLD,
            {"owner": owner, "_threshold": str(threshold)},
        )

    def change_threshold(self, threshold: int) -> TransactionDescriptor:
        return self._descriptor(CHANGE_THRESHOLD, {"_threshold": str(threshold)})

    def assemble(
        self,
        current_owners: Sequence[str],
        operations: Sequence[EditOperation],
        threshold: int,
        current_threshold: int,
    ) -> AssemblyResult:
        """
        Convert an edit script into Safe contract calls.

        Args:
            current_owners: Owners read from the Safe, in list order
            operations: Edit script in execution order
            threshold: Target threshold (already guarded)
            current_threshold: Threshold read from the Safe

        Returns:
            AssemblyResult

        Raises:
            InvariantError: If an operation does not fit the simulated list
        """
        simulator = OwnerLinkedList(current_owners)
        transactions: List[TransactionDescriptor] = []
        has_membership_change = False

        for op in operations:
            if isinstance(op, Swap):
                prev_owner = simulator.prev_of(op.old)
                transactions.append(self.swap_owner(prev_owner, op.old, op.new))
                simulator.apply_swap(op.old, op.new)
            elif isinstance(op, Remove):
                prev_owner = simulator.prev_of(op.owner)
                transactions.append(self.remove_owner(prev_owner, op.owner, threshold))
                simulator.apply_remove(op.owner)
                has_membership_change = True
            elif isinstance(op, Add):
                prev_owner = simulator.last_owner()
                transactions.append(self.add_owner_with_threshold(op.owner, threshold))
                simulator.apply_add(op.owner)
                has_membership_change = True
            else:
                raise InvariantError(f"unsupported edit operation: {op!r}")
            logger.debug("%s %s (prev %s)", op.kind.value, op, prev_owner)

        # Add/Remove already carry the threshold
        threshold_tx_appended = threshold != current_threshold and not has_membership_change
        if threshold_tx_appended:
            transactions.append(self.change_threshold(threshold))

        return AssemblyResult(
            transactions=tuple(transactions),
            final_owners=tuple(simulator.owners()),
            has_membership_change=has_membership_change,
            threshold_tx_appended=threshold_tx_appended,
        )
