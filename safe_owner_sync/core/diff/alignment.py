"""
Owner Alignment — positional reordering of the desired owner set

Before diffing, desired owners are laid out on the positions of the current
owner list so that owners who stay are matched to themselves. Without this,
an unrelated insertion or removal shifts indices and unchanged owners would
show up as swaps.

Rule:
1. current[i] that stays is placed at position i
2. Remaining positions (holes) are filled left to right with the other
   desired owners, in their original relative order
3. Holes left when the pool runs dry are dropped
4. Leftover desired owners are appended after the last current position
"""

from typing import List, Optional, Sequence

from safe_owner_sync.core.domain.address import ensure_unique


def align_owners(current_owners: Sequence[str], desired_owners: Sequence[str]) -> List[str]:
    """
    Reorder desired owners to maximize positional overlap with current owners.

    Args:
        current_owners: On-chain owners in list order (no duplicates)
        desired_owners: Target owners (no duplicates)

    Returns:
        Desired owners, same members, reordered

    Raises:
        ValidationError: If desired_owners contains a duplicate

    Examples:
        >>> align_owners(["A", "B", "C"], ["C", "D", "A"])
        ['A', 'D', 'C']
        >>> align_owners(["A", "B"], ["B"])
        ['B']
        >>> align_owners([], ["X", "Y"])
        ['X', 'Y']
    """
    ensure_unique(desired_owners, label="desired owners")

    desired = set(desired_owners)
    kept = set(current_owners) & desired
    pool = [owner for owner in desired_owners if owner not in kept]

    slots: List[Optional[str]] = [owner if owner in kept else None for owner in current_owners]

    pending = iter(pool)
    for i, slot in enumerate(slots):
        if slot is None:
            slots[i] = next(pending, None)

    aligned = [owner for owner in slots if owner is not None]
    aligned.extend(pending)
    return aligned
