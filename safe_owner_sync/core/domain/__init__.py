"""
Domain models and value objects.

Contains the fundamental entities: owner addresses, Safe state snapshots,
edit operations and the Transaction Builder batch.
"""

from safe_owner_sync.core.domain.address import (
    RESERVED_ADDRESSES,
    SENTINEL_OWNERS,
    ZERO_ADDRESS,
    ensure_unique,
    normalize_address,
    normalize_owner,
    normalize_owners,
)
from safe_owner_sync.core.domain.batch import (
    Batch,
    BatchMeta,
    ContractMethod,
    MethodInput,
    TransactionDescriptor,
)
from safe_owner_sync.core.domain.edit_ops import Add, EditKind, EditOperation, Remove, Swap
from safe_owner_sync.core.domain.safe_state import SafeState

__all__ = [
    # Address module
    "SENTINEL_OWNERS",
    "ZERO_ADDRESS",
    "RESERVED_ADDRESSES",
    "normalize_address",
    "normalize_owner",
    "normalize_owners",
    "ensure_unique",
    # Safe state
    "SafeState",
    # Edit operations
    "EditOperation",
    "EditKind",
    "Swap",
    "Add",
    "Remove",
    # Batch document
    "Batch",
    "BatchMeta",
    "ContractMethod",
    "MethodInput",
    "TransactionDescriptor",
]
