"""
Batch building — assembly, checksum and the end-to-end pipeline.
"""

from .assembler import AssemblyResult, TransactionAssembler, resolve_threshold
from .checksum import canonical_json, compute_checksum, stamp_batch, verify_checksum
from .pipeline import BatchDefaults, default_output_filename, generate_transactions

__all__ = [
    "AssemblyResult",
    "TransactionAssembler",
    "resolve_threshold",
    "canonical_json",
    "compute_checksum",
    "stamp_batch",
    "verify_checksum",
    "BatchDefaults",
    "default_output_filename",
    "generate_transactions",
]
