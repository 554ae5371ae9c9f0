"""
Operation Registry - Self-describing catalog of admin operations.

Each remote administrative action is described by data: a name, a
description, labelled parameter descriptors and an async function performing
the call. Renderers enumerate categories and operations, build one input per
parameter descriptor and invoke ``operation.func`` with the collected values
as positional arguments.

Provides:
- Operation descriptors grouped by category, in declared order
- Lookup by category and operation name
- JSON-ready documentation for renderers
"""

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import (
    Any,
    Awaitable,
    Callable,
    Dict,
    List,
    Mapping,
    Optional,
    Protocol,
    Sequence,
    Tuple,
)

from ..transport import AdminTransport, JSON
from .parameters import ParameterDescriptor, is_blank, parameter_adapter

logger = logging.getLogger(__name__)

# Type aliases
OperationFunc = Callable[..., Awaitable[Optional[JSON]]]
Parameter = Tuple[str, ParameterDescriptor]


# ============================================================================
# Data Classes
# ============================================================================

@dataclass(frozen=True)
class Operation:
    """
    Describes one admin operation.

    ``parameters`` order is the positional order expected by ``func``.
    """
    name: str                            # Display name, unique within its category
    description: str                     # Human-readable description
    parameters: Tuple[Parameter, ...]    # (label, descriptor) pairs
    func: OperationFunc                  # Performs the remote call

    @property
    def labels(self) -> List[str]:
        return [label for label, _ in self.parameters]

    async def invoke(self, *args: Any) -> Optional[JSON]:
        """Invoke the operation with positional arguments."""
        return await self.func(*args)

    def missing_required(self, values: Sequence[Any]) -> List[str]:
        """
        Labels of required parameters without a value.

        Args:
            values: Collected values, in parameter order

        Returns:
            Labels of required parameters whose value is blank or absent
        """
        missing = []
        for index, (label, descriptor) in enumerate(self.parameters):
            value = values[index] if index < len(values) else None
            if descriptor.required and is_blank(value):
                missing.append(label)
        return missing

    def describe(self) -> Dict[str, Any]:
        """JSON-ready description of the operation."""
        return {
            "name": self.name,
            "description": self.description,
            "parameters": [
                {"label": label, **parameter_adapter.dump_python(descriptor, mode="json")}
                for label, descriptor in self.parameters
            ],
        }


class API(Protocol):
    """Anything exposing admin operations grouped by category."""

    @property
    def operations(self) -> Mapping[str, Sequence[Operation]]:
        ...


# ============================================================================
# Exceptions
# ============================================================================

class OperationRegistryError(Exception):
    """Base exception for registry errors."""
    pass


class CategoryNotFound(OperationRegistryError):
    """Category not found in registry."""
    pass


class OperationNotFound(OperationRegistryError):
    """Operation not found in category."""
    pass


# ============================================================================
# Operation Registry
# ============================================================================

OperationsBuilder = Callable[[AdminTransport], Mapping[str, Sequence[Operation]]]


class AdminRegistry:
    """
    Category-keyed registry of admin operations.

    Built once from a transport; the category map is read-only afterwards.
    """

    def __init__(
        self,
        transport: AdminTransport,
        builder: Optional[OperationsBuilder] = None
    ):
        """
        Initialize registry.

        Args:
            transport: Transport every operation sends its request through
            builder: Callable building the category map (default: all admin
                operations)
        """
        if builder is None:
            from .operations import build_all_operations
            builder = build_all_operations

        self._transport = transport
        self._operations: Mapping[str, Tuple[Operation, ...]] = MappingProxyType({
            category: tuple(operations)
            for category, operations in builder(transport).items()
        })

        for category, operations in self._operations.items():
            logger.info(f"Registered {len(operations)} operations in category '{category}'")

    @property
    def operations(self) -> Mapping[str, Tuple[Operation, ...]]:
        return self._operations

    @property
    def transport(self) -> AdminTransport:
        return self._transport

    # ========================================================================
    # Retrieval
    # ========================================================================

    def categories(self) -> List[str]:
        """Category names in declared order."""
        return list(self._operations.keys())

    def list(self, category: str) -> Tuple[Operation, ...]:
        """
        List the operations of a category.

        Raises:
            CategoryNotFound: If category doesn't exist
        """
        if category not in self._operations:
            raise CategoryNotFound(f"Category '{category}' not found")

        return self._operations[category]

    def get(self, category: str, name: str) -> Operation:
        """
        Retrieve an operation by category and name.

        Raises:
            CategoryNotFound: If category doesn't exist
            OperationNotFound: If the category has no such operation
        """
        for operation in self.list(category):
            if operation.name == name:
                return operation

        raise OperationNotFound(f"Operation '{name}' not found in category '{category}'")

    # ========================================================================
    # Execution
    # ========================================================================

    async def execute(self, category: str, name: str, *args: Any) -> Optional[JSON]:
        """
        Execute an operation.

        Args:
            category: Category name
            name: Operation name
            *args: Positional arguments, in parameter order

        Returns:
            Operation result

        Raises:
            CategoryNotFound: If category doesn't exist
            OperationNotFound: If operation doesn't exist
            APIError: If the operation fails
        """
        operation = self.get(category, name)
        logger.debug(f"Executing {category}/{name}")
        return await operation.invoke(*args)

    # ========================================================================
    # Documentation
    # ========================================================================

    def get_operation_docs(self, category: str, name: str) -> Dict[str, Any]:
        """Documentation of one operation, including its category."""
        docs = self.get(category, name).describe()
        docs["category"] = category
        return docs

    def get_schema(self) -> Dict[str, List[Dict[str, Any]]]:
        """JSON-ready description of every category, for renderers."""
        return {
            category: [operation.describe() for operation in operations]
            for category, operations in self._operations.items()
        }
