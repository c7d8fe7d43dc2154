"""Shape collection, analogous to an OGC GeometryCollection."""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Generic, Iterator, Optional, Tuple, Type, TypeVar

from orbis_spatial.exceptions import InvalidShapeError
from orbis_spatial.shapes.base import Shape

if TYPE_CHECKING:
    from orbis_spatial.context import SpatialContext

S = TypeVar("S", bound=Shape)


@dataclass(frozen=True)
class ShapeCollection(Shape, Generic[S]):
    """
    Ordered, immutable sequence of shapes of one declared element type.

    Only element-type uniformity is checked; the members are not
    validated against each other.
    """

    shapes: Tuple[S, ...]
    element_type: Type[S] = Shape
    ctx: Optional["SpatialContext"] = field(default=None, compare=False, repr=False)

    def __post_init__(self):
        object.__setattr__(self, 'shapes', tuple(self.shapes))
        for idx, shape in enumerate(self.shapes):
            if not isinstance(shape, self.element_type):
                raise InvalidShapeError(
                    f"Collection element {idx} is {type(shape).__name__}, "
                    f"expected {self.element_type.__name__}"
                )

    def __len__(self) -> int:
        return len(self.shapes)

    def __iter__(self) -> Iterator[S]:
        return iter(self.shapes)

    def __getitem__(self, idx: int) -> S:
        return self.shapes[idx]


