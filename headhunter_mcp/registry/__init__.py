"""
Operation Registry for the HeadHunter MCP server.

Provides the immutable operation catalog, argument validation and the
dispatcher that normalizes every call into a CallResult.
"""

from .catalog import CatalogEntry, build_registry, load_catalog
from .dispatcher import CallError, CallRequest, CallResult, Dispatcher
from .errors import (
    CatalogLoadError,
    DispatchError,
    ErrorKind,
    HandlerExecutionError,
    InvalidArgument,
    InvalidOperationDescriptor,
    MissingRequiredArgument,
    OperationAlreadyRegistered,
    OperationNotFound,
    OperationRegistryError,
    UnknownOperation,
)
from .operation_registry import (
    Handler,
    OperationDescriptor,
    OperationRegistry,
    ParameterSpec,
)
from .validation import ArgumentValidator, ParameterType

__all__ = [
    'OperationRegistry',
    'OperationDescriptor',
    'Handler',
    'ParameterSpec',
    'ParameterType',
    'ArgumentValidator',
    'Dispatcher',
    'CallRequest',
    'CallResult',
    'CallError',
    'ErrorKind',
    # Catalog
    'CatalogEntry',
    'load_catalog',
    'build_registry',
    # Exceptions
    'OperationRegistryError',
    'OperationNotFound',
    'OperationAlreadyRegistered',
    'InvalidOperationDescriptor',
    'CatalogLoadError',
    'DispatchError',
    'UnknownOperation',
    'MissingRequiredArgument',
    'InvalidArgument',
    'HandlerExecutionError',
]
