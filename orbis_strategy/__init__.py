"""
Indexing Strategy Layer
=======================

Boundary between spatial shapes and an index: the SpatialStrategy
contract, the Document/FieldDescriptor it produces, and SpatialArgs
(operation + shape) with its text parser.
"""

from orbis_strategy.base import (
    Document,
    FieldDescriptor,
    Query,
    SpatialFieldInfo,
    SpatialStrategy,
)
from orbis_strategy.args import SpatialArgs, SpatialArgsParser, SpatialOperation

__all__ = [
    "Document",
    "FieldDescriptor",
    "Query",
    "SpatialFieldInfo",
    "SpatialStrategy",
    "SpatialArgs",
    "SpatialArgsParser",
    "SpatialOperation",
]
