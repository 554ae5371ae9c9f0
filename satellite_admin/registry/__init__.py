"""
Operation Registry for the satellite admin API.

Provides a self-describing catalog of admin operations grouped by category.
"""

from .operation_registry import (
    AdminRegistry,
    API,
    Operation,
    # Exceptions
    CategoryNotFound,
    OperationNotFound,
    OperationRegistryError,
)
from .parameters import (
    Choice,
    ChoiceOption,
    ParameterDescriptor,
    TextInput,
    TextSubtype,
    choice,
    text,
)

__all__ = [
    'AdminRegistry',
    'API',
    'Operation',
    # Parameters
    'Choice',
    'ChoiceOption',
    'ParameterDescriptor',
    'TextInput',
    'TextSubtype',
    'choice',
    'text',
    # Exceptions
    'CategoryNotFound',
    'OperationNotFound',
    'OperationRegistryError',
]
