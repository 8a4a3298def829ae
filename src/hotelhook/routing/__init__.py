"""Use case routing: normalization, catalog, matching and dispatch."""

from hotelhook.routing.catalog import CatalogBuilder, OperationCatalog
from hotelhook.routing.dispatcher import (
    OPERATION_ERROR_PREFIX,
    Resolution,
    UseCaseDispatcher,
)
from hotelhook.routing.normalizer import normalize, normalize_light
from hotelhook.routing.patterns import PATTERN_TABLE
from hotelhook.routing.response import to_text

__all__ = [
    "OperationCatalog",
    "CatalogBuilder",
    "UseCaseDispatcher",
    "Resolution",
    "OPERATION_ERROR_PREFIX",
    "PATTERN_TABLE",
    "normalize",
    "normalize_light",
    "to_text",
]
