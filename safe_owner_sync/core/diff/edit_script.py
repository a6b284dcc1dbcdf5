"""
Edit-Script Engine — minimal owner list edit sequence

Classic unit-cost edit distance over an (m+1)x(n+1) table:
- match: cost 0
- substitution (Swap): cost 1
- insertion (Add): cost 1
- deletion (Remove): cost 1

The backtrack walks from (m, n) to (0, 0). Ties between minimal-cost
transitions resolve in a fixed priority, match > substitution > insertion >
deletion, so the script is deterministic. Operations are emitted in ascending
position, which is also the execution order of the batch.
"""

import logging
from typing import List, Sequence

from safe_owner_sync.core.domain.edit_ops import Add, EditOperation, Remove, Swap
from safe_owner_sync.core.errors import InvariantError

logger = logging.getLogger(__name__)


def _distance_table(current: Sequence[str], target: Sequence[str]) -> List[List[int]]:
    m, n = len(current), len(target)
    table = [[0] * (n + 1) for _ in range(m + 1)]

    for i in range(1, m + 1):
        table[i][0] = i
    for j in range(1, n + 1):
        table[0][j] = j

    for i in range(1, m + 1):
        for j in range(1, n + 1):
            if current[i - 1] == target[j - 1]:
                table[i][j] = table[i - 1][j - 1]
            else:
                table[i][j] = 1 + min(
                    table[i - 1][j - 1],  # substitution
                    table[i][j - 1],  # insertion
                    table[i - 1][j],  # deletion
                )
    return table


def edit_distance(current: Sequence[str], target: Sequence[str]) -> int:
    """Unit-cost edit distance between two owner sequences."""
    return _distance_table(current, target)[len(current)][len(target)]


def compute_edit_script(current: Sequence[str], target: Sequence[str]) -> List[EditOperation]:
    """
    Minimal sequence of Swap/Add/Remove turning current into target.

    Args:
        current: Current owners in list order
        target: Aligned desired owners (see align_owners)

    Returns:
        Edit operations in execution order; len() equals edit_distance()

    Raises:
        InvariantError: If the backtrack reaches a cell no transition explains
    """
    table = _distance_table(current, target)
    i, j = len(current), len(target)
    script: List[EditOperation] = []

    while i > 0 or j > 0:
        cost = table[i][j]
        if i > 0 and j > 0 and current[i - 1] == target[j - 1] and cost == table[i - 1][j - 1]:
            i, j = i - 1, j - 1
        elif i > 0 and j > 0 and cost == table[i - 1][j - 1] + 1:
            script.append(Swap(old=current[i - 1], new=target[j - 1]))
            i, j = i - 1, j - 1
        elif j > 0 and cost == table[i][j - 1] + 1:
            script.append(Add(owner=target[j - 1]))
            j -= 1
        elif i > 0 and cost == table[i - 1][j] + 1:
            script.append(Remove(owner=current[i - 1]))
            i -= 1
        else:
            raise InvariantError(f"edit script backtrack dead end at ({i}, {j}), cost {cost}")

    script.reverse()
    logger.debug("edit script: %d operation(s) for %d -> %d owners", len(script), len(current), len(target))
    return script
