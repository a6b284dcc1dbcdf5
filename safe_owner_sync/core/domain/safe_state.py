"""
SafeState — snapshot of a deployed Safe

Immutable Pydantic model holding the ordered owner list (as returned by
getOwners()) and the current threshold (getThreshold()). Fetched once per
run and never mutated.
"""

from typing import Tuple

from pydantic import BaseModel, Field, field_validator, model_validator


class SafeState(BaseModel):
    """
    Current on-chain owner configuration.

    Owner order is the order of the Safe's internal linked list, head first.
    It matters for predecessor arguments, never for membership.
    """

    owners: Tuple[str, ...] = Field(..., description="Owners in linked-list order")
    threshold: int = Field(..., ge=0, description="Required confirmations")

    model_config = {"frozen": True}  # Immutable

    @field_validator("owners")
    @classmethod
    def validate_unique_owners(cls, v: Tuple[str, ...]) -> Tuple[str, ...]:
        """Safe storage cannot hold the same owner twice."""
        if len(set(v)) != len(v):
            raise ValueError(f"duplicate owner in fetched owner list: {list(v)}")
        return v

    @model_validator(mode="after")
    def validate_threshold_range(self) -> "SafeState":
        """
        1 <= threshold <= len(owners) for an initialized Safe.

        An uninitialized Safe reports no owners and threshold 0.
        """
        if self.owners and not 1 <= self.threshold <= len(self.owners):
            raise ValueError(
                f"threshold {self.threshold} out of range for {len(self.owners)} owners"
            )
        if not self.owners and self.threshold != 0:
            raise ValueError(f"threshold {self.threshold} set on a Safe without owners")
        return self
