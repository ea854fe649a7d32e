"""Tests for the type-validator plugins, the registry and the shape documents."""

import math
from datetime import date, datetime

import pytest

from schema_guard import TYPE_VALIDATORS, SchemaFormatError, get_type_validator
from schema_guard.registry import is_record_type, is_sequence_type, is_type_tag
from schema_guard.shapes import clear_cache, get_shape_path, load_shape
from schema_guard.type_validators import (
    BooleanValidator,
    DateValidator,
    IntegerValidator,
    NumberValidator,
    RecordValidator,
    SequenceValidator,
    StringValidator,
)


class TestTypePredicates:
    """validate_type for each plugin."""

    @pytest.mark.parametrize(
        "validator, accepted, rejected",
        [
            (StringValidator(), ["", "abc"], [1, None, b"abc", ["a"]]),
            (NumberValidator(), [0, 1.5, -3, float("inf")], [True, "1", None, float("nan")]),
            (IntegerValidator(), [0, -7, 10 ** 20], [1.0, False, "1"]),
            (BooleanValidator(), [True, False], [0, 1, "true", None]),
            (DateValidator(date), [date(2024, 1, 1), datetime(2024, 1, 1, 12)], ["2024-01-01", 0]),
            (DateValidator(datetime), [datetime(2024, 1, 1, 12)], [date(2024, 1, 1)]),
            (RecordValidator(), [{}, {"a": 1}], [[], "a", None]),
            (SequenceValidator(), [[], [1], (1, 2)], ["ab", {}, None, b"ab"]),
        ],
    )
    def test_validate_type(self, validator, accepted, rejected):
        for value in accepted:
            assert validator.validate_type(value, None), value
        for value in rejected:
            assert not validator.validate_type(value, None), value

    def test_nan_is_not_a_number(self):
        assert not NumberValidator().validate_type(math.nan)


class TestRequiredPredicates:
    """validate_required defaults to the type predicate."""

    def test_string_requires_non_empty(self):
        assert not StringValidator().validate_required("")
        assert StringValidator().validate_required(" ")

    def test_defaults_to_type_predicate(self):
        assert NumberValidator().validate_required(0)
        assert BooleanValidator().validate_required(False)
        assert SequenceValidator().validate_required([])
        assert not RecordValidator().validate_required(None)


class TestRegistry:
    """The closed mapping from type tag to plugin."""

    def test_registered_tags(self):
        assert set(TYPE_VALIDATORS) == {str, float, int, bool, date, datetime, dict, list}

    def test_registry_is_read_only(self):
        with pytest.raises(TypeError):
            TYPE_VALIDATORS[bytes] = StringValidator()

    def test_unknown_tag_raises(self):
        with pytest.raises(SchemaFormatError, match='Invalid type for the field "a.b"'):
            get_type_validator(bytes, "a.b")

    def test_root_path_is_named(self):
        with pytest.raises(SchemaFormatError, match="<root>"):
            get_type_validator("str")

    def test_is_type_tag_handles_unhashable_input(self):
        assert not is_type_tag([str])
        assert not is_type_tag({"type": str})
        assert is_type_tag(bool)

    def test_kind_queries(self):
        assert is_record_type(dict)
        assert is_sequence_type(list)
        assert not is_record_type(list)
        assert not is_sequence_type(str)


class TestShapes:
    """Shape documents shipped with the package."""

    @pytest.mark.parametrize("shape_name", ["scalar", "record", "sequence"])
    def test_shape_documents_exist(self, shape_name):
        assert get_shape_path(shape_name).exists()
        assert load_shape(shape_name)["type"] == "object"

    def test_shapes_are_cached(self):
        clear_cache()
        assert load_shape("record") is load_shape("record")

    def test_missing_shape_raises(self):
        with pytest.raises(FileNotFoundError):
            load_shape("tensor")

    def test_scalar_shape_accepts_minimal_declaration(self):
        StringValidator().validate_schema_shape({"type": str}, "name")

    def test_shape_error_names_the_field(self):
        with pytest.raises(SchemaFormatError) as exc_info:
            SequenceValidator().validate_schema_shape({"type": list, "child": []}, "tags")

        assert exc_info.value.path == "tags"
        assert 'Invalid schema for the field "tags"' in str(exc_info.value)
