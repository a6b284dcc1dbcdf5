"""
Checksum Stamper — tamper-evident batch hash

checksum = "0x" + hex(keccak256(canonical_json(batch with meta.checksum = "")))

Canonical JSON:
- object keys sorted recursively, at every nesting level
- separators "," and ":" with no whitespace
- UTF-8, non-ASCII characters left unescaped

Identical logical batches hash identically regardless of key order in the
input, so a reviewer can recompute the checksum between generation and
manual execution.
"""

import copy
import json
from typing import Any, Dict

from eth_utils import keccak

from safe_owner_sync.core.domain.batch import Batch


def canonical_json(document: Any) -> str:
    """Serialize JSON data with every object key sorted recursively."""
    return json.dumps(document, sort_keys=True, separators=(",", ":"), ensure_ascii=False)


def compute_checksum(document: Dict[str, Any]) -> str:
    """
    Checksum of a batch document, ignoring its own meta.checksum.

    Args:
        document: Batch as plain JSON data (camelCase keys)

    Returns:
        0x-prefixed lowercase hex Keccak-256 digest
    """
    unsigned = copy.deepcopy(document)
    unsigned.setdefault("meta", {})["checksum"] = ""
    digest = keccak(canonical_json(unsigned).encode("utf-8"))
    return "0x" + digest.hex()


def stamp_batch(batch: Batch) -> Batch:
    """Return the batch with meta.checksum filled in."""
    return batch.with_checksum(compute_checksum(batch.to_json_dict()))


def verify_checksum(document: Dict[str, Any]) -> bool:
    """True if meta.checksum matches the document contents."""
    claimed = document.get("meta", {}).get("checksum", "")
    return bool(claimed) and claimed == compute_checksum(document)
