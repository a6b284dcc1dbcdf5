"""
Tests for the batch JSON Schema contract

Checks:
1. The shipped schema is itself valid Draft 2020-12
2. Pipeline-shaped documents validate
3. Violations of required fields, types and constants are detected
"""

import copy

import pytest
from jsonschema import Draft202012Validator, ValidationError

from safe_owner_sync.builder.assembler import TransactionAssembler
from safe_owner_sync.builder.checksum import stamp_batch
from safe_owner_sync.core.contracts import BatchValidator, SchemaLoader, validate_batch
from safe_owner_sync.core.domain import SENTINEL_OWNERS, Batch, BatchMeta


@pytest.fixture
def valid_batch(safe_address, owners):
    assembler = TransactionAssembler(safe_address)
    batch = Batch(
        chain_id="1",
        created_at=1700000000000,
        meta=BatchMeta(created_from_safe_address=safe_address),
        transactions=(
            assembler.swap_owner(SENTINEL_OWNERS, owners["A"], owners["B"]),
            assembler.remove_owner(owners["B"], owners["C"], 1),
            assembler.add_owner_with_threshold(owners["D"], 2),
            assembler.change_threshold(2),
        ),
    )
    return stamp_batch(batch).to_json_dict()


class TestSchemaLoader:
    def test_batch_schema_is_valid(self):
        Draft202012Validator.check_schema(SchemaLoader().load_schema("batch"))

    def test_schema_cached(self):
        loader = SchemaLoader()
        assert loader.load_schema("batch") is loader.load_schema("batch")

    def test_missing_schema(self):
        with pytest.raises(FileNotFoundError):
            SchemaLoader().load_schema("does_not_exist")

    def test_missing_directory(self, tmp_path):
        with pytest.raises(RuntimeError):
            SchemaLoader(tmp_path / "nope")


class TestBatchValidator:
    def test_valid_batch(self, valid_batch):
        validate_batch(valid_batch)
        assert list(BatchValidator().iter_errors(valid_batch)) == []

    def test_unstamped_batch_is_valid(self, valid_batch):
        doc = copy.deepcopy(valid_batch)
        doc["meta"]["checksum"] = ""
        validate_batch(doc)

    @pytest.mark.parametrize("field", ["version", "chainId", "createdAt", "meta", "transactions"])
    def test_missing_top_level_field(self, valid_batch, field):
        doc = copy.deepcopy(valid_batch)
        del doc[field]
        with pytest.raises(ValidationError):
            validate_batch(doc)

    def test_numeric_chain_id_rejected(self, valid_batch):
        doc = copy.deepcopy(valid_batch)
        doc["chainId"] = 1
        with pytest.raises(ValidationError):
            validate_batch(doc)

    def test_numeric_threshold_value_rejected(self, valid_batch):
        doc = copy.deepcopy(valid_batch)
        doc["transactions"][1]["contractInputsValues"]["_threshold"] = 1
        with pytest.raises(ValidationError):
            validate_batch(doc)

    def test_payable_must_be_false(self, valid_batch):
        doc = copy.deepcopy(valid_batch)
        doc["transactions"][0]["contractMethod"]["payable"] = True
        with pytest.raises(ValidationError):
            validate_batch(doc)

    def test_data_must_be_null(self, valid_batch):
        doc = copy.deepcopy(valid_batch)
        doc["transactions"][0]["data"] = "0x"
        with pytest.raises(ValidationError):
            validate_batch(doc)

    def test_unknown_method_rejected(self, valid_batch):
        doc = copy.deepcopy(valid_batch)
        doc["transactions"][0]["contractMethod"]["name"] = "execTransaction"
        with pytest.raises(ValidationError):
            validate_batch(doc)

    def test_malformed_checksum_rejected(self, valid_batch):
        doc = copy.deepcopy(valid_batch)
        doc["meta"]["checksum"] = "0xABC"
        with pytest.raises(ValidationError):
            validate_batch(doc)

    def test_iter_errors_reports_every_violation(self, valid_batch):
        doc = copy.deepcopy(valid_batch)
        doc["version"] = "2.0"
        doc["createdAt"] = "now"
        assert len(list(BatchValidator().iter_errors(doc))) == 2
