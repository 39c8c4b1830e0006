"""
Tests del ResourceRecord y de la declaración de campos.
"""

import pytest

from trackerprovider.core.errors import SchemaTypeError
from trackerprovider.core.runtime.state import ResourceRecord
from trackerprovider.core.schema import PROJECT_SCHEMA, synced_fields, writable_fields


def test_schema_flags():
    assert PROJECT_SCHEMA["name"].required is True
    assert PROJECT_SCHEMA["name"].optional is False
    assert PROJECT_SCHEMA["point_scale"].computed is True
    assert "status" in writable_fields()
    assert "status" not in synced_fields()
    assert "join_as" not in synced_fields()
    assert "week_start_day" not in writable_fields()
    assert len(writable_fields()) == 18


def test_typed_accessors_return_zero_when_unset():
    record = ResourceRecord()

    assert record.get_str("description") == ""
    assert record.get_int("initial_velocity") == 0
    assert record.get_bool("public") is False
    assert not record.is_set("public")


def test_accessor_type_mismatch_fails_loudly():
    record = ResourceRecord(attributes={"public": "yes"})

    with pytest.raises(SchemaTypeError):
        record.get_bool("public")
    with pytest.raises(SchemaTypeError):
        record.get_int("public")


def test_bool_is_not_accepted_as_int():
    record = ResourceRecord(attributes={"iteration_length": True})

    with pytest.raises(SchemaTypeError):
        record.get("iteration_length")


def test_unknown_attribute_is_a_programming_error():
    with pytest.raises(SchemaTypeError):
        ResourceRecord().get("velocity")


def test_apply_is_all_or_nothing():
    record = ResourceRecord(id="1", attributes={"name": "A"})

    with pytest.raises(SchemaTypeError):
        record.apply("2", {"name": "B", "public": "no"})

    assert record.id == "1"
    assert record.attributes == {"name": "A"}


def test_dict_round_trip_keeps_identity_and_attributes():
    record = ResourceRecord(id="42", attributes={"name": "Demo", "public": True})

    restored = ResourceRecord.from_dict(record.to_dict())

    assert restored.id == "42"
    assert restored.attributes == {"name": "Demo", "public": True}
    assert restored.exists
