"""
Operation catalog loading.

The catalog is a static YAML listing of operation names, descriptions and
parameter specs. It is read once at startup, checked with pydantic, and
bound to handler callables to produce the immutable ``OperationRegistry``.
"""

import logging
from pathlib import Path
from typing import Dict, List, Mapping, Optional, Type, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .errors import CatalogLoadError, OperationRegistryError
from .operation_registry import Handler, OperationDescriptor, OperationRegistry, ParameterSpec

logger = logging.getLogger(__name__)

DEFAULT_CATALOG_PATH = Path(__file__).parent / "catalog.yaml"


class CatalogEntry(BaseModel):
    """One operation as declared in the catalog file."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str
    description: str
    parameters: Dict[str, ParameterSpec] = Field(default_factory=dict)
    subject_parameter: Optional[str] = "company"


class OperationCatalog(BaseModel):
    """Top-level structure of the catalog file."""

    operations: List[CatalogEntry]


def load_catalog(path: Optional[Union[str, Path]] = None) -> List[CatalogEntry]:
    """
    Load and validate the operation catalog.

    Args:
        path: Catalog YAML file (default: the catalog shipped with the package)

    Returns:
        Catalog entries in declaration order

    Raises:
        CatalogLoadError: If the file is missing, is not valid YAML, or
            declares an inconsistent parameter
    """
    catalog_path = Path(path) if path else DEFAULT_CATALOG_PATH

    try:
        with open(catalog_path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f)
    except FileNotFoundError:
        raise CatalogLoadError(f"Catalog file not found: {catalog_path}")
    except yaml.YAMLError as e:
        raise CatalogLoadError(f"Invalid YAML in catalog {catalog_path}: {e}") from e

    try:
        catalog = OperationCatalog.model_validate(data or {})
    except ValidationError as e:
        raise CatalogLoadError(f"Invalid operation catalog {catalog_path}: {e}") from e

    logger.info(f"Loaded {len(catalog.operations)} operations from {catalog_path}")
    return catalog.operations


def build_registry(
    handlers: Mapping[str, Handler],
    catalog: Optional[List[CatalogEntry]] = None,
    record_types: Optional[Mapping[str, Type[BaseModel]]] = None
) -> OperationRegistry:
    """
    Bind catalog entries to handlers.

    Args:
        handlers: Operation name -> handler callable
        catalog: Catalog entries (default: load_catalog())
        record_types: Operation name -> typed argument record model

    Returns:
        Ready OperationRegistry

    Raises:
        CatalogLoadError: If an operation has no handler, or the descriptors
            are rejected by the registry
    """
    entries = catalog if catalog is not None else load_catalog()
    record_types = record_types or {}

    descriptors = []
    for entry in entries:
        handler = handlers.get(entry.name)
        if handler is None:
            raise CatalogLoadError(f"No handler bound for operation '{entry.name}'")

        descriptors.append(OperationDescriptor(
            name=entry.name,
            description=entry.description,
            parameters=entry.parameters,
            handler=handler,
            record_type=record_types.get(entry.name),
            subject_parameter=entry.subject_parameter,
        ))

    unused = sorted(set(handlers) - {entry.name for entry in entries})
    if unused:
        logger.warning(f"Handlers without catalog entries are not exposed: {unused}")

    try:
        return OperationRegistry(descriptors)
    except OperationRegistryError as e:
        raise CatalogLoadError(f"Catalog rejected: {e}") from e
