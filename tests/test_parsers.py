"""
Tests for rustic.parsers structural validation.
"""

import enum
from dataclasses import dataclass
from types import SimpleNamespace

import pytest

from rustic import (
    DataType,
    Err,
    ObjectValidationError,
    Ok,
    is_of_type,
    parsing_context,
    type_tag,
    validate,
)
from rustic.parsers import Nested, Primitive, to_type_node


class TestValidate:
    def test_valid_object(self, dog, dog_fields):
        result = validate(dog, dog_fields)
        assert isinstance(result, Ok)
        assert result.value is dog
        assert result.value["age"] == 21

    def test_empty_nested_spec(self, dog):
        result = validate(dog, [("age", "number"), ("species", [])])
        assert isinstance(result, Err)
        assert result.kind == ObjectValidationError.DATA_TYPE_SPECIFICATION_ERROR
        assert "species" in result.detail

    def test_empty_nested_spec_for_missing_key(self, dog):
        result = validate(dog, [("owner", [])])
        assert result.kind == "DataTypeSpecificationError"
        assert "owner" in result.detail

    def test_wrong_primitive_type(self, dog):
        result = validate(dog, [("age", "string")])
        assert isinstance(result, Err)
        assert result.kind == ObjectValidationError.TYPE_ERROR
        assert result.detail == "Incorrect type for key: age. Expected string, got number"

    def test_misnamed_key(self, dog):
        result = validate(dog, [("agex", "number")])
        assert isinstance(result, Err)
        assert result.kind == ObjectValidationError.KEY_MISMATCH_ERROR
        assert result.detail == "Missing key: agex"

    def test_nested_misnamed_key(self, dog):
        fields = [
            ("age", "number"),
            ("species", [("variantx", "string"), ("location", "string")]),
        ]
        result = validate(dog, fields)
        assert isinstance(result, Err)
        assert result.kind == ObjectValidationError.KEY_MISMATCH_ERROR
        assert result.detail == "Missing key: variantx"

    def test_deeply_nested_error_keeps_kind(self, kennel):
        fields = [
            ("name", "string"),
            ("owner", [("address", [("town", "string")])]),
        ]
        result = validate(kennel, fields)
        assert result.kind == ObjectValidationError.KEY_MISMATCH_ERROR
        assert "town" in result.detail

    def test_deeply_nested_empty_spec(self, kennel):
        result = validate(kennel, [("owner", [("address", [("city", [])])])])
        assert result.kind == ObjectValidationError.DATA_TYPE_SPECIFICATION_ERROR
        assert "city" in result.detail

    def test_first_failure_in_spec_order_wins(self, dog):
        missing_first = [("agex", "number"), ("age", "string")]
        assert validate(dog, missing_first).kind == "KeyMismatchError"

        wrong_type_first = [("age", "string"), ("agex", "number")]
        assert validate(dog, wrong_type_first).kind == "TypeError"

    def test_extra_keys_ignored(self, dog):
        assert isinstance(validate(dog, [("age", "number")]), Ok)

    def test_present_none_value_passes_key_check(self):
        data = {"nickname": None}
        assert isinstance(validate(data, [("nickname", "undefined")]), Ok)
        assert validate(data, [("nickname", "string")]).kind == "TypeError"

    def test_nested_spec_against_non_object(self):
        result = validate({"species": "dog"}, [("species", [("variant", "string")])])
        assert result.kind == ObjectValidationError.TYPE_ERROR
        assert "object with fields (variant)" in result.detail

    def test_nested_spec_against_none(self):
        result = validate({"species": None}, [("species", [("variant", "string")])])
        assert result.kind == ObjectValidationError.TYPE_ERROR

    def test_data_type_members_accepted(self, dog):
        fields = [("age", DataType.NUMBER), ("species", DataType.OBJECT)]
        assert isinstance(validate(dog, fields), Ok)

    def test_does_not_mutate(self, dog, dog_fields):
        snapshot = {"age": 21, "species": dict(dog["species"])}
        validate(dog, dog_fields)
        assert dog == snapshot

    def test_empty_field_list_is_ok(self, dog):
        assert validate(dog, []) == Ok(dog)


class TestMalformedSpecs:
    def test_unknown_tag(self, dog):
        result = validate(dog, [("age", "integer")])
        assert result.kind == ObjectValidationError.DATA_TYPE_SPECIFICATION_ERROR
        assert "integer" in result.detail

    def test_entry_not_a_pair(self, dog):
        result = validate(dog, [("age",)])
        assert result.kind == ObjectValidationError.DATA_TYPE_SPECIFICATION_ERROR

    def test_non_string_field_name(self, dog):
        result = validate(dog, [(1, "number")])
        assert result.kind == ObjectValidationError.DATA_TYPE_SPECIFICATION_ERROR

    def test_spec_not_a_list(self, dog):
        result = validate(dog, None)
        assert result.kind == ObjectValidationError.DATA_TYPE_SPECIFICATION_ERROR


class TestStructuralTargets:
    def test_attribute_object(self):
        pet = SimpleNamespace(age=3, species=SimpleNamespace(variant="Beagle"))
        result = validate(pet, [("age", "number"), ("species", [("variant", "string")])])
        assert isinstance(result, Ok)
        assert result.value is pet

    def test_dataclass_missing_attribute(self):
        @dataclass
        class Pet:
            age: int

        result = validate(Pet(age=3), [("name", "string")])
        assert result.kind == ObjectValidationError.KEY_MISMATCH_ERROR

    def test_dict_backed_getattr(self):
        class AttrDict:
            def __init__(self, data):
                self._data = data

            def __getattr__(self, name):
                return self._data[name]

        pet = AttrDict({"age": 3})
        assert validate(pet, [("age", "number")]) == Ok(pet)

        result = validate(pet, [("name", "string")])
        assert result == Err(ObjectValidationError.KEY_MISMATCH_ERROR, "Missing key: name")

    def test_raising_property_is_parse_error(self):
        class Lazy:
            @property
            def age(self):
                raise RuntimeError("not loaded")

        result = validate(Lazy(), [("age", "number")])
        assert isinstance(result, Err)
        assert result.kind == ObjectValidationError.PARSE_ERROR
        assert isinstance(result.detail, RuntimeError)

    def test_raising_nested_property_keeps_parse_error(self):
        class Lazy:
            @property
            def variant(self):
                raise RuntimeError("not loaded")

        result = validate({"species": Lazy()}, [("species", [("variant", "string")])])
        assert result.kind == ObjectValidationError.PARSE_ERROR

    def test_primitive_target_has_no_keys(self):
        assert validate("dog", [("upper", "function")]).kind == "KeyMismatchError"
        assert validate(None, [("age", "number")]).kind == "KeyMismatchError"


class TestTypeTag:
    class Colour(enum.Enum):
        RED = 1

    @pytest.mark.parametrize(
        "value, expected",
        [
            (None, DataType.UNDEFINED),
            (True, DataType.BOOLEAN),
            (0, DataType.NUMBER),
            (2**80, DataType.NUMBER),
            (1.5, DataType.NUMBER),
            ("text", DataType.STRING),
            ([1, 2], DataType.ARRAY),
            ((1, 2), DataType.ARRAY),
            ({"a": 1}, DataType.OBJECT),
            (SimpleNamespace(), DataType.OBJECT),
            (len, DataType.FUNCTION),
            (lambda: None, DataType.FUNCTION),
            (Colour.RED, DataType.SYMBOL),
        ],
    )
    def test_tags(self, value, expected):
        assert type_tag(value) is expected

    def test_bool_is_not_a_number(self):
        assert validate({"flag": True}, [("flag", "number")]).kind == "TypeError"


class TestArrayTag:
    def test_array_matches_lists(self):
        assert isinstance(validate({"tags": ["a", "b"]}, [("tags", "array")]), Ok)

    def test_list_is_not_an_object(self):
        assert validate({"tags": []}, [("tags", "object")]).kind == "TypeError"

    def test_legacy_array_tag(self):
        data = {"tags": ["a", "b"]}
        with parsing_context(legacy_array_tag=True):
            assert validate(data, [("tags", "array")]).kind == "TypeError"
            assert isinstance(validate(data, [("tags", "object")]), Ok)
        assert isinstance(validate(data, [("tags", "array")]), Ok)


class TestIsOfType:
    def test_primitive(self):
        assert is_of_type(5, "number") == Ok(True)
        assert is_of_type(5, "string") == Ok(False)

    def test_nested_match(self, dog):
        assert is_of_type(dog["species"], [("variant", "string")]) == Ok(True)

    def test_nested_non_object(self):
        assert is_of_type(5, [("variant", "string")]) == Ok(False)
        assert is_of_type(None, [("variant", "string")]) == Ok(False)

    def test_empty_nested_spec_is_mismatch(self, dog):
        assert is_of_type(dog, []) == Ok(False)

    def test_nested_error_propagates(self, dog):
        result = is_of_type(dog, [("agex", "number")])
        assert result == Err(ObjectValidationError.KEY_MISMATCH_ERROR, "Missing key: agex")

    def test_unknown_tag(self):
        result = is_of_type(5, "integer")
        assert result.kind == ObjectValidationError.DATA_TYPE_SPECIFICATION_ERROR


class TestToTypeNode:
    def test_conversions(self):
        assert to_type_node("string") == Primitive(DataType.STRING)
        assert to_type_node(DataType.ARRAY) == Primitive(DataType.ARRAY)
        assert to_type_node([("a", "string")]) == Nested((("a", "string"),))

    def test_pass_through(self):
        node = Primitive(DataType.NUMBER)
        assert to_type_node(node) is node

    def test_invalid(self):
        with pytest.raises(ValueError):
            to_type_node(42)


class TestParsingContext:
    def test_default(self):
        from rustic.context import is_legacy_array_tag

        assert is_legacy_array_tag() is False
        with parsing_context(legacy_array_tag=True):
            assert is_legacy_array_tag() is True
        assert is_legacy_array_tag() is False

    def test_reset_after_exception(self):
        from rustic.context import is_legacy_array_tag

        with pytest.raises(KeyError):
            with parsing_context(legacy_array_tag=True):
                raise KeyError("boom")
        assert is_legacy_array_tag() is False
