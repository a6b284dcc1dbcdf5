"""
safe-owner-sync: reconcile Safe multisig owners and threshold.

Produces a reviewable Transaction Builder batch that moves a deployed Safe
from its current owner set and threshold to a desired one. Nothing is ever
submitted on-chain.
"""

from safe_owner_sync.builder.pipeline import default_output_filename, generate_transactions

__all__ = [
    "generate_transactions",
    "default_output_filename",
]
