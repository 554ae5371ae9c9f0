"""
Unit tests for AdminRegistry and Operation descriptors.
"""

import inspect

import pytest

from satellite_admin.registry import (
    AdminRegistry,
    CategoryNotFound,
    Choice,
    Operation,
    OperationNotFound,
    OperationRegistryError,
    TextInput,
    TextSubtype,
    text,
)


EXPECTED_OPERATIONS = {
    "APIKeys": ["delete key"],
    "bucket": ["get", "delete geofencing", "set geofencing"],
    "project": [
        "create",
        "delete",
        "get",
        "update",
        "create API key",
        "delete API key",
        "get API keys",
        "get project usage",
        "get project limits",
        "update project limits",
    ],
    "user": ["create", "delete", "get", "update"],
}


def all_operations(registry):
    for category, operations in registry.operations.items():
        for operation in operations:
            yield category, operation


# ============================================================================
# Catalog
# ============================================================================

class TestCatalog:
    """Categories and operations in declared order."""

    def test_categories_in_order(self, admin):
        assert admin.registry.categories() == ["APIKeys", "bucket", "project", "user"]

    def test_operations_in_order(self, admin):
        for category, names in EXPECTED_OPERATIONS.items():
            assert [op.name for op in admin.registry.list(category)] == names

    def test_names_unique_within_category(self, admin):
        for category, operations in admin.operations.items():
            names = [op.name for op in operations]
            assert len(names) == len(set(names)), category

    def test_parameters_match_function_arity(self, admin):
        for category, operation in all_operations(admin.registry):
            signature = inspect.signature(operation.func)
            assert len(signature.parameters) == len(operation.parameters), (
                f"{category}/{operation.name}"
            )

    def test_every_operation_has_description(self, admin):
        for _, operation in all_operations(admin.registry):
            assert operation.description

    def test_first_parameter_is_required(self, admin):
        for _, operation in all_operations(admin.registry):
            _, descriptor = operation.parameters[0]
            assert descriptor.required

    def test_operations_are_read_only(self, admin):
        with pytest.raises(TypeError):
            admin.registry.operations["extra"] = ()

        assert isinstance(admin.registry.list("project"), tuple)

    def test_operation_is_frozen(self, admin):
        operation = admin.registry.get("project", "get")

        with pytest.raises(AttributeError):
            operation.name = "renamed"


# ============================================================================
# Parameter descriptors of specific operations
# ============================================================================

class TestDescriptors:
    """Descriptors exposed to renderers."""

    def test_set_geofencing_region(self, admin):
        operation = admin.registry.get("bucket", "set geofencing")
        label, region = operation.parameters[-1]

        assert label == "Region"
        assert isinstance(region, Choice)
        assert region.kind == "choice"
        assert region.required is True
        assert region.multiple is False
        assert region.option_values() == ["EU", "EEA", "US", "DE"]
        assert region.options[0].text == "European Union"

    def test_update_limits_are_optional_numbers(self, admin):
        operation = admin.registry.get("project", "update project limits")

        for label, descriptor in operation.parameters[1:]:
            assert isinstance(descriptor, TextInput), label
            assert descriptor.subtype == TextSubtype.NUMBER
            assert descriptor.required is False

    def test_user_create_subtypes(self, admin):
        operation = admin.registry.get("user", "create")
        subtypes = [descriptor.subtype for _, descriptor in operation.parameters]

        assert subtypes == [TextSubtype.EMAIL, TextSubtype.TEXT, TextSubtype.PASSWORD]
        assert operation.labels == ["email", "full name", "password"]


# ============================================================================
# Lookup
# ============================================================================

class TestLookup:
    """Retrieval by category and name."""

    def test_get(self, admin):
        operation = admin.registry.get("user", "get")
        assert operation.name == "get"
        assert operation.description == "Get the information of a user's account"

    def test_same_name_in_different_categories(self, admin):
        project_get = admin.registry.get("project", "get")
        user_get = admin.registry.get("user", "get")
        assert project_get is not user_get

    def test_unknown_category(self, admin):
        with pytest.raises(CategoryNotFound):
            admin.registry.list("satellites")

    def test_unknown_operation(self, admin):
        with pytest.raises(OperationNotFound) as exc_info:
            admin.registry.get("project", "archive")

        assert isinstance(exc_info.value, OperationRegistryError)
        assert "archive" in str(exc_info.value)

    @pytest.mark.asyncio
    async def test_execute_unknown_operation_sends_nothing(self, admin, server):
        with pytest.raises(OperationNotFound):
            await admin.registry.execute("project", "archive", "p1")

        assert server.requests == []


# ============================================================================
# Renderer helpers
# ============================================================================

class TestRendererHelpers:
    """Documentation and required-value checks."""

    def test_missing_required(self, admin):
        operation = admin.registry.get("user", "create")

        assert operation.missing_required(["a@example.com", "", "pw"]) == []
        assert operation.missing_required(["", "Alice", None]) == ["email", "password"]
        assert operation.missing_required(["a@example.com"]) == ["password"]

    def test_missing_required_choice(self, admin):
        operation = admin.registry.get("bucket", "set geofencing")
        assert operation.missing_required(["p1", "b", ""]) == ["Region"]

    def test_describe(self, admin):
        docs = admin.registry.get("bucket", "set geofencing").describe()

        assert docs["name"] == "set geofencing"
        assert docs["parameters"][0] == {
            "label": "Project ID",
            "kind": "text",
            "subtype": "text",
            "required": True,
        }
        assert docs["parameters"][2]["kind"] == "choice"
        assert docs["parameters"][2]["options"][1] == {
            "text": "European Economic Area",
            "value": "EEA",
        }

    def test_get_operation_docs(self, admin):
        docs = admin.registry.get_operation_docs("APIKeys", "delete key")

        assert docs["category"] == "APIKeys"
        assert docs["description"] == "Delete an API key"

    def test_get_schema(self, admin):
        schema = admin.registry.get_schema()

        assert list(schema) == list(EXPECTED_OPERATIONS)
        for category, names in EXPECTED_OPERATIONS.items():
            assert [op["name"] for op in schema[category]] == names


# ============================================================================
# Custom builders
# ============================================================================

class TestCustomBuilder:
    """Registries built from a caller-provided catalog."""

    @pytest.mark.asyncio
    async def test_custom_builder(self, transport, server):
        def builder(transport):
            async def ping() -> None:
                await transport.request("GET", "ping")
                return None

            return {
                "health": [
                    Operation(
                        name="ping",
                        description="Check the admin API is reachable",
                        parameters=(),
                        func=ping,
                    )
                ]
            }

        registry = AdminRegistry(transport, builder)

        assert registry.categories() == ["health"]
        assert registry.transport is transport
        assert await registry.execute("health", "ping") is None
        assert server.last_request.url.path == "/api/ping"

    @pytest.mark.asyncio
    async def test_operation_invoke_passes_arguments(self):
        calls = []

        async def record(*args):
            calls.append(args)

        operation = Operation(
            name="record",
            description="Record arguments",
            parameters=(("a", text(required=True)), ("b", text())),
            func=record,
        )

        await operation.invoke("x", "y")
        assert calls == [("x", "y")]
