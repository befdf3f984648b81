"""
Tests for OperationRegistry and descriptor construction.

Tests cover:
1. Lookup by exact name, listing order, containment
2. Rejection of duplicate and malformed descriptors
3. ParameterSpec consistency checks (required+default, enum values, bad defaults)
4. JSON Schema generation
"""

import pytest
from pydantic import BaseModel, ValidationError

from headhunter_mcp.registry import (
    InvalidOperationDescriptor,
    OperationAlreadyRegistered,
    OperationDescriptor,
    OperationNotFound,
    OperationRegistry,
    ParameterSpec,
)


async def _noop(args):
    return "ok"


def _descriptor(name="research_company", **kwargs):
    params = kwargs.pop("parameters", {
        "company": ParameterSpec(type="string", required=True, description="Company name"),
        "role": ParameterSpec(type="string", default="VP Engineering"),
    })
    return OperationDescriptor(
        name=name,
        description=kwargs.pop("description", f"{name} operation"),
        parameters=params,
        handler=kwargs.pop("handler", _noop),
        **kwargs,
    )


# ============================================================================
# Test Fixtures
# ============================================================================

@pytest.fixture
def registry():
    """Registry with three operations in a fixed order."""
    return OperationRegistry([
        _descriptor("research_company"),
        _descriptor("executive_brief"),
        _descriptor("linkedin_intelligence"),
    ])


# ============================================================================
# Lookup & Listing
# ============================================================================

class TestRegistryLookup:
    """Retrieval from a constructed registry."""

    def test_find_operation(self, registry):
        op = registry.find_operation("executive_brief")
        assert op.name == "executive_brief"

    def test_lookup_is_case_sensitive(self, registry):
        with pytest.raises(OperationNotFound):
            registry.find_operation("Executive_Brief")

    def test_unknown_operation_message(self, registry):
        with pytest.raises(OperationNotFound) as exc_info:
            registry.find_operation("nonexistent")
        assert "nonexistent" in str(exc_info.value)

    def test_list_preserves_declaration_order(self, registry):
        assert registry.names() == ["research_company", "executive_brief", "linkedin_intelligence"]
        assert [op.name for op in registry.list_operations()] == registry.names()

    def test_exists_and_contains(self, registry):
        assert registry.exists("research_company")
        assert "linkedin_intelligence" in registry
        assert not registry.exists("unknown")
        assert "unknown" not in registry

    def test_len(self, registry):
        assert len(registry) == 3

    def test_list_returns_copy(self, registry):
        ops = registry.list_operations()
        ops.clear()
        assert len(registry) == 3

    def test_describe_operations(self, registry):
        described = registry.describe_operations()
        assert [d["name"] for d in described] == registry.names()
        assert described[0]["input_schema"]["required"] == ["company"]

    def test_descriptor_parameters_are_read_only(self, registry):
        op = registry.find_operation("research_company")
        with pytest.raises(TypeError):
            op.parameters["extra"] = ParameterSpec(type="string")


# ============================================================================
# Construction Errors
# ============================================================================

class TestRegistryConstruction:
    """Registry rejects invalid catalogs at construction time."""

    def test_duplicate_name_rejected(self):
        with pytest.raises(OperationAlreadyRegistered) as exc_info:
            OperationRegistry([_descriptor("research_company"), _descriptor("research_company")])
        assert "research_company" in str(exc_info.value)

    def test_empty_name_rejected(self):
        with pytest.raises(InvalidOperationDescriptor):
            OperationRegistry([_descriptor("")])

    def test_missing_description_rejected(self):
        with pytest.raises(InvalidOperationDescriptor):
            OperationRegistry([_descriptor("research_company", description="")])

    def test_non_callable_handler_rejected(self):
        with pytest.raises(InvalidOperationDescriptor):
            OperationRegistry([_descriptor("research_company", handler="not callable")])

    def test_non_spec_parameter_rejected(self):
        with pytest.raises(InvalidOperationDescriptor):
            OperationRegistry([_descriptor("research_company", parameters={"company": {"type": "string"}})])

    def test_record_type_must_be_model(self):
        with pytest.raises(InvalidOperationDescriptor):
            OperationRegistry([_descriptor("research_company", record_type=dict)])

    def test_record_type_model_accepted(self):
        class Record(BaseModel):
            company: str

        registry = OperationRegistry([_descriptor("research_company", record_type=Record)])
        assert registry.find_operation("research_company").record_type is Record

    def test_empty_registry(self):
        registry = OperationRegistry([])
        assert len(registry) == 0
        assert registry.list_operations() == []


# ============================================================================
# Parameter Specs
# ============================================================================

class TestParameterSpec:
    """ParameterSpec rejects contradictory declarations."""

    def test_required_with_default_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            ParameterSpec(type="string", required=True, default="VP Engineering")
        assert "required parameter cannot declare a default" in str(exc_info.value)

    def test_enum_without_values_rejected(self):
        with pytest.raises(ValidationError):
            ParameterSpec(type="enum")

    def test_allowed_values_on_non_enum_rejected(self):
        with pytest.raises(ValidationError):
            ParameterSpec(type="string", allowed_values=["a", "b"])

    def test_default_outside_enum_rejected(self):
        with pytest.raises(ValidationError):
            ParameterSpec(type="enum", allowed_values=["basic", "detailed"], default="deep")

    def test_default_of_wrong_type_rejected(self):
        with pytest.raises(ValidationError):
            ParameterSpec(type="string_array", default="overview")

    def test_unknown_type_rejected(self):
        with pytest.raises(ValidationError):
            ParameterSpec(type="object")

    def test_unknown_field_rejected(self):
        with pytest.raises(ValidationError):
            ParameterSpec(type="string", requried=True)

    def test_has_default(self):
        assert ParameterSpec(type="string", default="x").has_default
        assert not ParameterSpec(type="string").has_default


class TestJsonSchema:
    """JSON Schema advertised to MCP clients."""

    def test_string_array_schema(self):
        spec = ParameterSpec(type="string_array", default=["overview"], description="Areas")
        assert spec.to_json_schema() == {
            "type": "array",
            "items": {"type": "string"},
            "description": "Areas",
            "default": ["overview"],
        }

    def test_enum_schema(self):
        spec = ParameterSpec(type="enum", allowed_values=["basic", "detailed"], default="detailed")
        schema = spec.to_json_schema()
        assert schema["type"] == "string"
        assert schema["enum"] == ["basic", "detailed"]
        assert schema["default"] == "detailed"

    def test_number_schema_without_default(self):
        assert ParameterSpec(type="number").to_json_schema() == {"type": "number"}

    def test_schema_default_is_a_copy(self):
        spec = ParameterSpec(type="string_array", default=["overview"])
        spec.to_json_schema()["default"].append("mutated")
        assert spec.default == ["overview"]

    def test_input_schema(self):
        schema = _descriptor().input_schema()
        assert schema["type"] == "object"
        assert list(schema["properties"]) == ["company", "role"]
        assert schema["required"] == ["company"]
