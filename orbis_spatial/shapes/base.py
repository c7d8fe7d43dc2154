"""Common base for every shape produced by a SpatialContext."""

from abc import ABC


class Shape(ABC):
    """
    Marker base for immutable shape values.

    Concrete shapes are frozen dataclasses carrying a read-only reference
    to the SpatialContext that created them (``ctx``). The reference takes
    no part in equality or repr.
    """

    __slots__ = ()
