"""
Contract Validation Module

Validation of JSON documents produced by safe_owner_sync against their
formal JSON Schema contracts.
"""

from .validators import (
    BatchValidator,
    ContractValidator,
    SchemaLoader,
    validate_batch,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "BatchValidator",
    # Functions
    "validate_batch",
]
