"""Tests for formtree.selection — invalid select detection and error merging."""

from formtree import Field, FieldType, FormNode, Nested, check_selects, merge_errors


class TestCheckSelects:
    def test_flagged_select(self) -> None:
        node = FormNode(items=(Field("color", FieldType.SELECT, data={"invalid_select": True}),))
        assert check_selects(node) == {"color": [("invalid value", [])]}

    def test_unflagged_select(self) -> None:
        node = FormNode(items=(Field("color", FieldType.SELECT, value="red"),))
        assert check_selects(node) == {}

    def test_fresh_list_per_field(self) -> None:
        node = FormNode(
            items=(
                Field("a", FieldType.SELECT, data={"invalid_select": True}),
                Field("b", FieldType.SELECT, data={"invalid_select": True}),
            )
        )
        errors = check_selects(node)
        assert errors["a"] is not errors["b"]
        assert errors["a"][0][1] == []

    def test_flag_false(self) -> None:
        node = FormNode(items=(Field("color", FieldType.SELECT, data={"invalid_select": False}),))
        assert check_selects(node) == {}

    def test_plain_string_type_tag(self) -> None:
        node = FormNode(items=(Field("tags", "multiple_select", data={"invalid_select": True}),))
        assert check_selects(node) == {"tags": [("invalid value", [])]}

    def test_other_types_ignored(self) -> None:
        node = FormNode(
            items=(
                Field("name", FieldType.TEXT, data={"invalid_select": True}),
                Field("agree", FieldType.CHECKBOX, data={"invalid_select": True}),
            )
        )
        assert check_selects(node) == {}

    def test_descendants_not_checked(self) -> None:
        child = FormNode(items=(Field("color", FieldType.SELECT, data={"invalid_select": True}),))
        assert check_selects(FormNode(items=(Nested("child", child),))) == {}


class TestMergeErrors:
    def test_concatenates_existing_first(self) -> None:
        merged = merge_errors({"a": [("first", {})]}, {"a": [("second", {})]})
        assert merged == {"a": [("first", {}), ("second", {})]}

    def test_new_field_gets_fresh_list(self) -> None:
        merged = merge_errors({"a": [("x", {})]}, {"b": [("invalid value", [])]})
        assert merged == {"a": [("x", {})], "b": [("invalid value", [])]}
        assert list(merged) == ["a", "b"]

    def test_inputs_not_mutated(self) -> None:
        existing = {"a": [("x", {})]}
        merge_errors(existing, {"a": [("y", {})]})
        assert existing == {"a": [("x", {})]}

    def test_empty_maps(self) -> None:
        assert merge_errors({}, {}) == {}
