"""
Shape Text Codecs
=================

Bounded Context: Textual shape (de)serialization, used by
SpatialContext.read_shape / to_string and by the test oracle's data files.

Public API
----------
    ShapeReadWriter: Codec contract (protocol)
    LegacyShapeReadWriter: The legacy "x y" / "minX minY maxX maxY" format
"""

from orbis_io.base import ShapeReadWriter
from orbis_io.legacy import LegacyShapeReadWriter, format_number

__all__ = [
    "ShapeReadWriter",
    "LegacyShapeReadWriter",
    "format_number",
]
