"""
Error hierarchy

All failures propagate immediately to the caller. Nothing is retried and no
partial batch is ever returned.

- ValidationError: bad user input (malformed or duplicate address, missing
  required input, out-of-range threshold, unknown chain)
- StateFetchError: the read of current owners/threshold failed
- InvariantError: implementation defect (edit-script dead end, linked-list
  inconsistency, failed replay self-check)
"""


class SafeOwnerSyncError(Exception):
    """Base class for every error raised by safe_owner_sync."""


class ValidationError(SafeOwnerSyncError, ValueError):
    """Input rejected before any batch is built."""


class StateFetchError(SafeOwnerSyncError):
    """Reading the deployed Safe failed."""


class InvariantError(SafeOwnerSyncError, RuntimeError):
    """Internal consistency violated. Always a bug, never a user error."""
