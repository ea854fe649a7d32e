"""Tests for the public Validator API."""

import threading
from datetime import date

import pytest

from schema_guard import (
    AggregateValidationError,
    FieldSchema,
    FieldValidationError,
    SchemaFormatError,
    ValidationError,
    Validator,
)


class TestConstruction:
    """Schema compilation at construction time."""

    @pytest.mark.parametrize("raw", [None, [], "name", str, 3])
    def test_non_mapping_schema_is_rejected(self, raw):
        with pytest.raises(SchemaFormatError, match="Schema must be a mapping"):
            Validator(raw)

    def test_malformed_field_is_rejected(self):
        with pytest.raises(SchemaFormatError, match='Invalid type for the field "mount.frame"'):
            Validator({"mount": {"frame": "str"}})

    def test_prebuilt_field_with_unknown_type_fails_at_construction(self):
        with pytest.raises(SchemaFormatError, match='Invalid type for the field "a"'):
            Validator({"a": FieldSchema(type=set)})

    def test_prebuilt_sequence_without_alternatives_fails_at_construction(self):
        with pytest.raises(SchemaFormatError):
            Validator({"tags": FieldSchema(type=list)})

    def test_prebuilt_scalar_with_child_fails_at_construction(self):
        with pytest.raises(SchemaFormatError):
            Validator({"a": FieldSchema(type=str, child=(FieldSchema(type=int),))})

    def test_empty_field_name_fails_at_construction(self):
        with pytest.raises(SchemaFormatError, match="must not be empty"):
            Validator({"": int})

    def test_prebuilt_fields_validate_like_declared_ones(self):
        validator = Validator({"tags": FieldSchema(type=list, child=(FieldSchema(type=str),))})

        assert validator.collect_errors({"tags": [1]}) == {"tags[0]": "The field is not of the correct type"}
        assert not validator.is_valid({"tags": [1]})

    def test_fields_of_record_root(self, sensor_validator):
        assert list(sensor_validator.fields) == ["name", "mode", "rate", "enabled", "tags", "mount"]
        assert sensor_validator.fields["rate"] == FieldSchema(type=float)

    def test_fields_of_scalar_root(self):
        assert Validator({"type": str}).fields is None

    def test_layer_limit_override(self):
        with pytest.raises(SchemaFormatError):
            Validator({"a": {"b": str}}, layer_limit=0)

    def test_repr_shows_verbose_declaration(self):
        assert repr(Validator({"name": str})) == (
            "Validator({'type': <class 'dict'>, 'child': {'name': {'type': <class 'str'>}}})"
        )


class TestValidate:
    """Validation of whole values."""

    def test_valid_document(self, sensor_validator):
        sensor_validator.validate({
            "name": "front_lidar",
            "mode": "fast",
            "rate": 10,
            "enabled": False,
            "tags": ["lidar", "front"],
            "mount": {"frame": "base_link", "offset": [0.5, 0, 1]},
        })

    def test_every_problem_is_reported_at_once(self, sensor_validator):
        with pytest.raises(AggregateValidationError) as exc_info:
            sensor_validator.validate({
                "mode": "slow",
                "rate": "10Hz",
                "tags": ["lidar", 3],
                "mount": {"offset": ["up"]},
                "vendor": "acme",
            })

        assert exc_info.value.errors == {
            "name": "The field is required",
            "mode": "The field can only be one of: fast, safe",
            "rate": "The field is not of the correct type",
            "tags[1]": "The field is not of the correct type",
            "mount.frame": "The field is required",
            "mount.offset[0]": "The field is not of the correct type",
            "": "The object contains invalid properties: vendor",
        }

    def test_nested_required_scenario(self):
        validator = Validator({
            "type": dict,
            "child": {"firstLayer": {"type": dict, "child": {"name": {"type": str, "required": True}}}},
        })

        with pytest.raises(AggregateValidationError) as exc_info:
            validator.validate({"firstLayer": {}})

        assert exc_info.value.errors == {"firstLayer.name": "The field is required"}

    def test_scalar_root_raises_single_error(self):
        validator = Validator({"type": str, "enum": ["on", "off"]})

        with pytest.raises(FieldValidationError) as exc_info:
            validator.validate("auto")

        assert exc_info.value.path == ""
        assert exc_info.value.message == "The field can only be one of: on, off"

    def test_sequence_root_reports_indexes(self):
        validator = Validator({"type": list, "child": [int, {"id": int}]})

        with pytest.raises(AggregateValidationError) as exc_info:
            validator.validate([1, {"id": 2}, "three", {"id": "4"}])

        assert exc_info.value.errors == {
            "[2]": "The field is not of the correct type",
            "[3]": "The field is not of the correct type",
        }

    def test_record_root_with_wrong_value_type(self, sensor_validator):
        with pytest.raises(FieldValidationError) as exc_info:
            sensor_validator.validate(["not", "a", "record"])

        assert exc_info.value.path == ""
        assert exc_info.value.message == "The field is not of the correct type"

    def test_both_error_kinds_share_a_base(self, sensor_validator):
        with pytest.raises(ValidationError):
            sensor_validator.validate({})
        with pytest.raises(ValidationError):
            Validator({"type": int}).validate("1")

    def test_dates(self):
        validator = Validator({"built": date})

        validator.validate({"built": date(2024, 5, 1)})
        assert validator.collect_errors({"built": "2024-05-01"}) == {
            "built": "The field is not of the correct type"
        }

    def test_validation_does_not_mutate_input(self, sensor_validator):
        value = {"name": "x", "tags": ["a"], "mount": {"frame": "f"}}
        sensor_validator.validate(value)

        assert value == {"name": "x", "tags": ["a"], "mount": {"frame": "f"}}


class TestCollectErrors:
    """Non-raising helpers."""

    def test_empty_on_success(self, sensor_validator):
        assert sensor_validator.collect_errors({"name": "a"}) == {}
        assert sensor_validator.is_valid({"name": "a"})

    def test_single_error_becomes_mapping(self):
        validator = Validator({"type": float})

        assert validator.collect_errors(True) == {"": "The field is not of the correct type"}
        assert not validator.is_valid(True)

    def test_concurrent_validation_is_consistent(self, sensor_validator):
        results = []

        def worker(value):
            results.append(sensor_validator.collect_errors(value))

        threads = [
            threading.Thread(target=worker, args=({"name": str(i)} if i % 2 else {"rate": "x"},))
            for i in range(20)
        ]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert results.count({}) == 10
        assert results.count({
            "name": "The field is required",
            "rate": "The field is not of the correct type",
        }) == 10


class TestEngineMethods:
    """validate_field / validate_record / validate_sequence on a Validator."""

    def test_validate_record_defaults_to_own_fields(self, sensor_validator):
        with pytest.raises(AggregateValidationError) as exc_info:
            sensor_validator.validate_record({"name": ""})

        assert exc_info.value.errors == {"name": "The field is required"}

    def test_validate_record_with_prefix(self, empty_validator):
        with pytest.raises(AggregateValidationError) as exc_info:
            empty_validator.validate_record({"yaw": "x"}, {"yaw": float}, "mount")

        assert exc_info.value.errors == {"mount.yaw": "The field is not of the correct type"}

    def test_validate_sequence_with_raw_schema(self, empty_validator):
        with pytest.raises(AggregateValidationError) as exc_info:
            empty_validator.validate_sequence([1, "a"], [int], "ids")

        assert exc_info.value.errors == {"ids[1]": "The field is not of the correct type"}

    def test_validate_field_with_compiled_schema(self, empty_validator):
        empty_validator.validate_field(3, FieldSchema(type=int, enum=(1, 2, 3)), "level")

    def test_malformed_prebuilt_schema_is_rejected_before_validation(self, empty_validator):
        with pytest.raises(SchemaFormatError):
            empty_validator.validate_sequence([1], FieldSchema(type=list), "ids")
        with pytest.raises(SchemaFormatError):
            empty_validator.validate_record({"a": 1}, {"a": FieldSchema(type=set)})
