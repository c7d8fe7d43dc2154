"""
Indexing Strategy Contract
==========================

Bounded Context: Turning shapes into index field data and queries.

Only the boundary lives here; concrete strategies (and their relation
tests) belong to the index implementation.

Design:
- create_fields() may return None entries: the geometry is incompatible
  with that field type and the entry is skipped on purpose (not an error)
- make_query() returns any object satisfying the Query protocol
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Generic, List, Optional, Protocol, TypeVar

from orbis_spatial.shapes.base import Shape

if TYPE_CHECKING:
    from orbis_spatial.context import SpatialContext
    from orbis_strategy.args import SpatialArgs


@dataclass(frozen=True)
class SpatialFieldInfo:
    """Identifies the index field a strategy writes to and queries."""
    field_name: str


@dataclass(frozen=True)
class FieldDescriptor:
    """
    One indexable field produced from a shape.

    Attributes:
        name: Field name
        value: Field payload (strategy specific)
        indexed: Whether the field is searchable
        stored: Whether the value is kept for retrieval
    """
    name: str
    value: Any
    indexed: bool = True
    stored: bool = False


@dataclass
class Document:
    """Ordered bag of fields, as handed to an index."""

    fields: List[FieldDescriptor] = field(default_factory=list)

    def add(self, descriptor: FieldDescriptor) -> None:
        self.fields.append(descriptor)

    def get(self, name: str) -> Optional[Any]:
        """Value of the first field called ``name``, or None."""
        for descriptor in self.fields:
            if descriptor.name == name:
                return descriptor.value
        return None

    def get_all(self, name: str) -> List[Any]:
        return [d.value for d in self.fields if d.name == name]


class Query(Protocol):
    """Executable query produced by a strategy."""

    def matches(self, document: Document) -> bool:
        ...


T = TypeVar("T", bound=SpatialFieldInfo)


class SpatialStrategy(ABC, Generic[T]):
    """
    Converts shapes to fields and spatial args to queries for one field.

    Attributes:
        ctx: SpatialContext the strategy's shapes belong to
    """

    def __init__(self, ctx: "SpatialContext"):
        self.ctx = ctx

    @abstractmethod
    def create_fields(
        self, field_info: T, shape: Shape, index: bool, store: bool
    ) -> List[Optional[FieldDescriptor]]:
        """
        Field descriptors for ``shape``.

        A None entry means the geometry is incompatible with this field
        type and was skipped.
        """

    @abstractmethod
    def make_query(self, args: "SpatialArgs", field_info: T) -> Query:
        """Query for the operation and shape in ``args``."""
