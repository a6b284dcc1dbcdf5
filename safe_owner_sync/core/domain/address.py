"""
OwnerAddress — account identifier normalization

Every address that enters the pipeline is trimmed and converted to its
EIP-55 checksum form, so equality checks and dictionary keys are stable
regardless of how the caller typed the address.

Reserved addresses:
- SENTINEL_OWNERS: head/tail marker of the Safe's internal owner list
- ZERO_ADDRESS: never a valid owner
"""

from typing import Final, Iterable, List

from eth_utils import is_address, is_checksum_address, to_checksum_address

from safe_owner_sync.core.errors import ValidationError


# =============================================================================
# RESERVED ADDRESSES
# =============================================================================

SENTINEL_OWNERS: Final[str] = "0x0000000000000000000000000000000000000001"

ZERO_ADDRESS: Final[str] = "0x0000000000000000000000000000000000000000"

RESERVED_ADDRESSES: Final[frozenset] = frozenset({SENTINEL_OWNERS, ZERO_ADDRESS})


# =============================================================================
# NORMALIZATION
# =============================================================================


def normalize_address(value: str, label: str = "address") -> str:
    """
    Normalize an address to its checksum form.

    Args:
        value: Raw address string (surrounding whitespace is ignored)
        label: Name used in the error message

    Returns:
        EIP-55 checksum address

    Raises:
        ValidationError: If the value is not a 20-byte hex address, or is
            mixed-case with an invalid checksum
    """
    if not isinstance(value, str):
        raise ValidationError(f"Invalid Ethereum address for {label}: {value!r}")

    candidate = value.strip()
    if not candidate or not is_address(candidate):
        raise ValidationError(f"Invalid Ethereum address for {label}: {value}")

    # Mixed case carries an EIP-55 checksum that must verify
    digits = candidate[2:] if candidate[:2].lower() == "0x" else candidate
    if digits != digits.lower() and digits != digits.upper() and not is_checksum_address("0x" + digits):
        raise ValidationError(f"Bad address checksum for {label}: {value}")

    return to_checksum_address(candidate)


def normalize_owner(value: str, safe_address: str = "") -> str:
    """
    Normalize an address that is about to become a Safe owner.

    The Safe contract rejects the sentinel, the zero address and the Safe
    itself as owners, so they are rejected here as well.
    """
    owner = normalize_address(value, label="owner")
    if owner in RESERVED_ADDRESSES:
        raise ValidationError(f"Reserved address cannot be an owner: {owner}")
    if safe_address and owner == safe_address:
        raise ValidationError(f"Safe cannot own itself: {owner}")
    return owner


def normalize_owners(values: Iterable[str], safe_address: str = "") -> List[str]:
    """
    Normalize a list of desired owners and reject duplicates.

    Duplicates are detected after checksum normalization, so the same
    address typed in two different cases is still a duplicate.

    Raises:
        ValidationError: On a malformed, reserved or duplicate address
    """
    owners = [normalize_owner(v, safe_address) for v in values]
    ensure_unique(owners, label="new owners list")
    return owners


def ensure_unique(owners: Iterable[str], label: str = "owner set") -> None:
    """Raise ValidationError if an address appears twice."""
    seen = set()
    for owner in owners:
        if owner in seen:
            raise ValidationError(f"Duplicate addresses found in the {label}: {owner}")
        seen.add(owner)
