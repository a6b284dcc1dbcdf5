"""
Batch — Transaction Builder document

Immutable Pydantic models for the batch artifact consumed by the Safe
Transaction Builder. Field names, nesting and string-typed numeric values are
part of the compatibility contract (contracts/schema/batch.json), so Python
attribute names map onto camelCase aliases and documents are always dumped
by alias.
"""

from typing import Any, Dict, Optional, Tuple

from pydantic import BaseModel, Field


_MODEL_CONFIG = {"frozen": True, "populate_by_name": True}


# =============================================================================
# CONTRACT CALL
# =============================================================================


class MethodInput(BaseModel):
    """One ABI input of the called method."""

    internal_type: str = Field(..., alias="internalType", min_length=1)
    name: str = Field(..., min_length=1)
    type: str = Field(..., min_length=1)

    model_config = _MODEL_CONFIG


class ContractMethod(BaseModel):
    """ABI fragment of the called method."""

    inputs: Tuple[MethodInput, ...] = Field(...)
    name: str = Field(..., min_length=1)
    payable: bool = Field(False)

    model_config = _MODEL_CONFIG


class TransactionDescriptor(BaseModel):
    """
    One proposed contract call.

    value is always "0" and data always null: the Transaction Builder encodes
    calldata itself from contractMethod + contractInputsValues.
    """

    to: str = Field(..., description="Target contract (the Safe itself)")
    value: str = Field("0", description="Wei sent with the call, decimal string")
    data: Optional[str] = Field(None)
    contract_method: ContractMethod = Field(..., alias="contractMethod")
    contract_inputs_values: Dict[str, str] = Field(..., alias="contractInputsValues")

    model_config = _MODEL_CONFIG

    @property
    def method(self) -> str:
        return self.contract_method.name

    def arg(self, name: str) -> str:
        """Value of a named contract input."""
        return self.contract_inputs_values[name]


# =============================================================================
# BATCH
# =============================================================================


class BatchMeta(BaseModel):
    """Batch metadata. checksum stays empty until the batch is stamped."""

    name: str = Field("Transactions Batch")
    description: str = Field("")
    tx_builder_version: str = Field("1.0.0", alias="txBuilderVersion")
    created_from_safe_address: str = Field(..., alias="createdFromSafeAddress")
    created_from_owner_address: str = Field("", alias="createdFromOwnerAddress")
    checksum: str = Field("")

    model_config = _MODEL_CONFIG


class Batch(BaseModel):
    """
    Complete batch document.

    Built once per run. The Checksum Stamper returns a new instance with
    meta.checksum filled in; the unstamped instance is discarded.
    """

    version: str = Field("1.0")
    chain_id: str = Field(..., alias="chainId", min_length=1)
    created_at: int = Field(..., alias="createdAt", ge=0, description="Epoch millis")
    meta: BatchMeta
    transactions: Tuple[TransactionDescriptor, ...] = Field(())

    model_config = _MODEL_CONFIG

    def to_json_dict(self) -> Dict[str, Any]:
        """Artifact as plain JSON-compatible data, camelCase keys."""
        return self.model_dump(mode="json", by_alias=True)

    def with_checksum(self, checksum: str) -> "Batch":
        """Copy of the batch with meta.checksum replaced."""
        return self.model_copy(update={"meta": self.meta.model_copy(update={"checksum": checksum})})

    @property
    def methods(self) -> Tuple[str, ...]:
        """Method names in execution order."""
        return tuple(tx.method for tx in self.transactions)
