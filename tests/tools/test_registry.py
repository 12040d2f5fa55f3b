"""Tests for the per-agent tool registry."""

from typing import Optional, Union

import pytest

from miniagent.errors import DuplicateToolError
from miniagent.tools.arithmetic import AddNumbersTool, MultiplyNumbersTool
from miniagent.tools.joke import JokeTool
from miniagent.tools.registry import ToolRegistry, _python_type_to_json_schema


@pytest.fixture
def registry() -> ToolRegistry:
    reg = ToolRegistry()
    reg.register(AddNumbersTool())
    reg.register(MultiplyNumbersTool())
    return reg


# -- ToolRegistry ---------------------------------------------------------------


def test_register_and_lookup(registry):
    tool = registry.lookup("add_numbers")

    assert isinstance(tool, AddNumbersTool)
    assert "add_numbers" in registry
    assert len(registry) == 2


def test_lookup_missing_returns_none(registry):
    assert registry.lookup("nope") is None
    assert "nope" not in registry


def test_duplicate_name_rejected(registry):
    original = registry.lookup("add_numbers")

    with pytest.raises(DuplicateToolError) as exc_info:
        registry.register(AddNumbersTool())

    assert exc_info.value.tool_name == "add_numbers"
    assert "already registered" in str(exc_info.value)
    assert registry.lookup("add_numbers") is original
    assert len(registry) == 2


def test_catalog_keeps_registration_order(registry):
    registry.register(JokeTool())

    catalog = registry.catalog()

    assert [spec.name for spec in catalog] == ["add_numbers", "multiply_numbers", "get_joke"]
    assert registry.names == ["add_numbers", "multiply_numbers", "get_joke"]
    assert catalog[0].description == "Adds two integers and returns the result"
    assert catalog[0].parameters_schema["required"] == ["a", "b"]


def test_catalog_is_fresh_each_call(registry):
    first = registry.catalog()
    registry.register(JokeTool())
    second = registry.catalog()

    assert len(first) == 2
    assert len(second) == 3


def test_empty_registry():
    reg = ToolRegistry()

    assert reg.catalog() == []
    assert list(reg) == []


# -- _python_type_to_json_schema ------------------------------------------------


def test_python_type_to_json_schema():
    assert _python_type_to_json_schema(str) == "string"
    assert _python_type_to_json_schema(int) == "integer"
    assert _python_type_to_json_schema(float) == "number"
    assert _python_type_to_json_schema(bool) == "boolean"
    assert _python_type_to_json_schema(list) == "array"
    assert _python_type_to_json_schema(dict) == "object"
    # Unknown types fall back to string
    assert _python_type_to_json_schema(bytes) == "string"


def test_python_type_optional():
    assert _python_type_to_json_schema(int | None) == "integer"
    assert _python_type_to_json_schema(Optional[float]) == "number"  # noqa: UP007


def test_python_type_union():
    assert _python_type_to_json_schema(Union[int, str]) == "integer"  # noqa: UP007


def test_python_type_generic():
    assert _python_type_to_json_schema(list[str]) == "array"
    assert _python_type_to_json_schema(dict[str, int]) == "object"
