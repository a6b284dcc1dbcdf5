"""
Owner set diffing: alignment and minimal edit scripts.
"""

from .alignment import align_owners
from .edit_script import compute_edit_script, edit_distance

__all__ = [
    "align_owners",
    "compute_edit_script",
    "edit_distance",
]
