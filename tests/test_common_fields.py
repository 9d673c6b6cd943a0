"""Tests for the fields shared by every schema element."""

import pytest

from mongo_schema_validator import (
    ConstraintViolationError,
    MalformedSchemaError,
    compile_schema,
)
from mongo_schema_validator.elements.base import GENERIC_TYPE, bson_type_names
from mongo_schema_validator.elements.string import StringElement


class TestBsonTypeNames:
    """Test reading the declared type names of a schema node."""

    def test_single_name(self):
        assert bson_type_names({"bsonType": "string"}) == ("string",)

    def test_union_keeps_declared_order(self):
        assert bson_type_names({"bsonType": ["int", "string", "null"]}) == ("int", "string", "null")

    def test_union_drops_duplicates(self):
        assert bson_type_names({"bsonType": ["int", "int", "string"]}) == ("int", "string")

    def test_missing_type_selects_generic(self):
        assert bson_type_names({"enum": [1, 2]}) == (GENERIC_TYPE,)

    def test_number_is_malformed(self):
        with pytest.raises(MalformedSchemaError) as exc_info:
            bson_type_names({"bsonType": 5}, "/properties/a")

        assert exc_info.value.path == "/properties/a/bsonType"
        assert exc_info.value.constraint == "bsonType"

    def test_non_string_member_is_malformed(self):
        with pytest.raises(MalformedSchemaError) as exc_info:
            bson_type_names({"bsonType": ["string", 3]})

        assert exc_info.value.path == "/bsonType/1"

    def test_empty_list_is_malformed(self):
        with pytest.raises(MalformedSchemaError):
            bson_type_names({"bsonType": []})


class TestCommonFields:
    """Test title, description and enum handling."""

    def test_title_and_description_are_kept(self):
        element = StringElement().populate(
            {"bsonType": "string", "title": "Name", "description": "Display name"}
        )

        assert element.title == "Name"
        assert element.description == "Display name"
        assert element.type_names == ("string",)

    def test_type_names_are_kept_as_written_for_unions(self):
        element = StringElement().populate({"bsonType": ["string", "int"]})

        assert element.type_names == ("string", "int")

    def test_non_string_title_is_malformed(self):
        with pytest.raises(MalformedSchemaError) as exc_info:
            StringElement().populate({"bsonType": "string", "title": 3})

        assert exc_info.value.path == "/title"

    @pytest.mark.parametrize("raw_enum", ["red", [], {"a": 1}])
    def test_enum_must_be_non_empty_array(self, raw_enum):
        with pytest.raises(MalformedSchemaError) as exc_info:
            StringElement().populate({"bsonType": "string", "enum": raw_enum})

        assert exc_info.value.constraint == "enum"

    def test_enum_applies_after_type_checks(self):
        tree = compile_schema({"bsonType": "string", "minLength": 1, "enum": ["red", "green"]})

        tree.verify("red")
        with pytest.raises(ConstraintViolationError) as exc_info:
            tree.verify("blue")
        assert exc_info.value.constraint == "enum"

    def test_enum_only_schema_is_generic(self):
        tree = compile_schema({"enum": ["a", 1, None]})

        assert tree.root.type_names == (GENERIC_TYPE,)
        assert tree.is_valid("a")
        assert tree.is_valid(1)
        assert tree.is_valid(None)
        assert not tree.is_valid("b")

    def test_enum_does_not_confuse_bool_and_int(self):
        tree = compile_schema({"enum": [1, 0]})

        assert tree.is_valid(1)
        assert tree.is_valid(1.0)
        assert not tree.is_valid(True)
        assert not tree.is_valid(False)

    def test_enum_compares_structured_values(self):
        tree = compile_schema({"enum": [{"a": [1, 2]}, [1, "x"]]})

        assert tree.is_valid({"a": [1, 2]})
        assert tree.is_valid([1, "x"])
        assert not tree.is_valid({"a": [2, 1]})
        assert not tree.is_valid([1])

    def test_element_is_read_only_once_populated(self):
        element = StringElement().populate({"bsonType": "string"})

        with pytest.raises(AttributeError):
            element.min_length = 3

    def test_element_cannot_be_populated_twice(self):
        element = StringElement().populate({"bsonType": "string"})

        with pytest.raises(AttributeError):
            element.populate({"bsonType": "string"})


class TestUntypedNodes:
    """Test schema nodes that declare no bsonType."""

    def test_annotations_and_enum_are_allowed(self):
        tree = compile_schema({"title": "Status", "description": "Lifecycle state", "enum": ["new", "done"]})

        assert tree.is_valid("done")

    @pytest.mark.parametrize("key, value", [("required", ["a"]), ("minimum", 0), ("pattern", "^a"), ("items", {})])
    def test_type_specific_keyword_is_malformed(self, key, value):
        with pytest.raises(MalformedSchemaError) as exc_info:
            compile_schema({key: value})

        assert exc_info.value.path == f"/{key}"
        assert exc_info.value.constraint == key
        assert "bsonType" in exc_info.value.message

    def test_untyped_validator_root_does_not_accept_everything(self):
        with pytest.raises(MalformedSchemaError) as exc_info:
            compile_schema({"$jsonSchema": {"required": ["a"], "properties": {"a": {"bsonType": "int"}}}})

        assert exc_info.value.path == "/$jsonSchema/required"

    def test_nested_untyped_node(self):
        with pytest.raises(MalformedSchemaError) as exc_info:
            compile_schema({"bsonType": "object", "properties": {"age": {"minimum": 0}}})

        assert exc_info.value.path == "/properties/age/minimum"
