"""
Owner list simulation — keeps predecessor arguments in step with the batch.
"""

from .simulator import OwnerLinkedList, ReplayResult, replay_transactions

__all__ = [
    "OwnerLinkedList",
    "ReplayResult",
    "replay_transactions",
]
