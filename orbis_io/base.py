"""Contract for textual shape codecs."""

from typing import Protocol

from orbis_spatial.shapes.base import Shape


class ShapeReadWriter(Protocol):
    """Reads shapes from text and writes them back."""

    def read_shape(self, value: str) -> Shape:
        """
        Parse shape text.

        Raises:
            InvalidShapeError: If the text is not a recognized shape
        """
        ...

    def write_shape(self, shape: Shape) -> str:
        """Format a shape as text."""
        ...
