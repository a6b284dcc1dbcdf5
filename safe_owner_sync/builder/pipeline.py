"""
Pipeline — from desired owners to a stamped Transaction Builder batch

Stages, strictly in order:
1. Input normalization (safe address, desired owners, duplicates)
2. State read (injected fetcher)
3. Threshold resolution and guard
4. Owner alignment -> edit script
5. Transaction assembly in lockstep with the owner list simulator
6. Replay self-check against a fresh simulator
7. Batch build, checksum stamp, schema validation

Either one complete batch is returned or an error propagates; nothing is
written or submitted here.
"""

import logging
import re
import time
from dataclasses import dataclass
from typing import Callable, Iterable, Optional

import pydantic

from safe_owner_sync.builder.assembler import TransactionAssembler, resolve_threshold
from safe_owner_sync.builder.checksum import stamp_batch
from safe_owner_sync.core.contracts import BatchValidator
from safe_owner_sync.core.diff import align_owners, compute_edit_script
from safe_owner_sync.core.domain.address import normalize_address, normalize_owners
from safe_owner_sync.core.domain.batch import Batch, BatchMeta
from safe_owner_sync.core.errors import InvariantError, ValidationError
from safe_owner_sync.fetcher.state_fetcher import SafeStateFetcher
from safe_owner_sync.owner_list.simulator import replay_transactions

logger = logging.getLogger(__name__)

_CHAIN_ID_RE = re.compile(r"^[0-9]+$")


@dataclass(frozen=True)
class BatchDefaults:
    """Constant fields of the batch document."""

    version: str = "1.0"
    tx_builder_version: str = "1.0.0"
    name: str = "Transactions Batch"
    description: str = ""


def _now_ms() -> int:
    return int(time.time() * 1000)


def default_output_filename(chain_id: str, safe_address: str) -> str:
    """transactions_chain-<chain>_<safe>.json"""
    return f"transactions_chain-{chain_id}_{safe_address}.json"


def generate_transactions(
    safe_address: str,
    new_owners: Iterable[str],
    chain_id: str,
    fetcher: SafeStateFetcher,
    new_threshold: Optional[int] = None,
    clock: Optional[Callable[[], int]] = None,
    created_from_owner: str = "",
    defaults: Optional[BatchDefaults] = None,
) -> Batch:
    """
    Build the batch moving a Safe to the desired owners and threshold.

    Args:
        safe_address: Safe to reconcile
        new_owners: Desired owner addresses (any case, surrounding
            whitespace ignored)
        chain_id: Chain the Safe lives on
        fetcher: Source of the current owners and threshold
        new_threshold: Desired threshold; None keeps the current one
        clock: Returns epoch millis for createdAt (truncated to int)
        created_from_owner: Optional proposer address for meta
        defaults: Constant batch fields

    Returns:
        Stamped Batch

    Raises:
        ValidationError: Missing/invalid input or out-of-range threshold
        StateFetchError: The Safe could not be read
        InvariantError: The generated batch failed its own consistency checks
    """
    defaults = defaults or BatchDefaults()
    clock = clock or _now_ms

    new_owners = list(new_owners) if new_owners is not None else []
    if not safe_address or not new_owners or chain_id in (None, ""):
        raise ValidationError("Missing required parameters.")

    safe = normalize_address(safe_address, label="safeAddress")
    desired = normalize_owners(new_owners, safe_address=safe)
    proposer = normalize_address(created_from_owner, label="createdFromOwnerAddress") if created_from_owner else ""
    chain = str(chain_id).strip()
    if not _CHAIN_ID_RE.match(chain):
        raise ValidationError(f"Invalid chain id: {chain_id}")

    state = fetcher.fetch(safe)
    threshold = resolve_threshold(new_threshold, state.threshold, len(desired))

    aligned = align_owners(state.owners, desired)
    operations = compute_edit_script(state.owners, aligned)
    result = TransactionAssembler(safe).assemble(state.owners, operations, threshold, state.threshold)

    replay = replay_transactions(state.owners, state.threshold, result.transactions)
    if set(replay.owners) != set(desired) or replay.threshold != threshold:
        raise InvariantError(
            f"batch replay ends with owners {list(replay.owners)} threshold {replay.threshold}, "
            f"expected {desired} threshold {threshold}"
        )

    logger.info(
        "Planned %d owner operation(s), %d transaction(s), threshold %d -> %d",
        len(operations),
        len(result.transactions),
        state.threshold,
        threshold,
    )

    try:
        batch = Batch(
            version=defaults.version,
            chain_id=chain,
            created_at=int(clock()),
            meta=BatchMeta(
                name=defaults.name,
                description=defaults.description,
                tx_builder_version=defaults.tx_builder_version,
                created_from_safe_address=safe,
                created_from_owner_address=proposer,
                checksum="",
            ),
            transactions=result.transactions,
        )
        batch = stamp_batch(batch)
    except pydantic.ValidationError as e:
        raise InvariantError(f"assembled batch violates the batch model: {e}") from e

    violations = [
        f"{'/'.join(str(p) for p in error.absolute_path) or '<root>'}: {error.message}"
        for error in BatchValidator().iter_errors(batch.to_json_dict())
    ]
    if violations:
        raise InvariantError("assembled batch violates the batch contract: " + "; ".join(violations))

    logger.info("Batch checksum %s", batch.meta.checksum)
    return batch
