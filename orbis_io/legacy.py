"""
Legacy Shape Format
===================

The old, pre-WKT shape text format:

    "x y"                   point (x first)
    "lat,lon"               point (comma form, latitude first)
    "minX minY maxX maxY"   rectangle
    "Circle(x y d=dist)"    circle (center may also be "lat,lon")

Coordinates go through the context's norm_x/norm_y and then through its
shape factories, so parsed shapes carry the same guarantees as any other.
Numbers are written with at most six fraction digits.
"""

from typing import TYPE_CHECKING, Tuple

from orbis_spatial.exceptions import InvalidShapeError
from orbis_spatial.logging import LogEvent, create_logger
from orbis_spatial.shapes import Circle, Point, Rectangle, Shape

if TYPE_CHECKING:
    from orbis_spatial.context import SpatialContext

_logger = create_logger("codec")

_CIRCLE_PREFIX = "Circle("


class LegacyShapeReadWriter:
    """
    Codec for the legacy shape format, bound to one SpatialContext.

    Thread Safety:
        Stateless apart from the immutable context; safe to share.
    """

    def __init__(self, ctx: "SpatialContext"):
        self.ctx = ctx

    def read_shape(self, value: str) -> Shape:
        """
        Parse legacy shape text.

        Raises:
            InvalidShapeError: On unrecognized or out-of-bounds input
        """
        try:
            return self._read_shape(value)
        except InvalidShapeError as e:
            _logger.debug(
                event=LogEvent.CODEC_PARSE_FAILED,
                message="Could not read legacy shape",
                metadata={'value': value, 'reason': e.message}
            )
            raise

    def _read_shape(self, value: str) -> Shape:
        text = value.strip()
        if not text:
            raise InvalidShapeError("Empty shape text")

        if text[0].isalpha():
            if text.startswith(_CIRCLE_PREFIX) and text.endswith(")"):
                return self._read_circle(text[len(_CIRCLE_PREFIX):-1], value)
            raise InvalidShapeError(f"Unknown shape format: {value!r}")

        if "," in text:
            return self._read_lat_comma_lon(text, value)

        tokens = text.split()
        if len(tokens) == 2:
            x, y = _parse_numbers(tokens, value)
            return self.ctx.make_point(self.ctx.norm_x(x), self.ctx.norm_y(y))
        if len(tokens) == 4:
            min_x, min_y, max_x, max_y = _parse_numbers(tokens, value)
            return self.ctx.make_rectangle(
                self.ctx.norm_x(min_x), self.ctx.norm_x(max_x),
                self.ctx.norm_y(min_y), self.ctx.norm_y(max_y),
            )
        raise InvalidShapeError(
            f"Expected 2 (point) or 4 (rectangle) numbers: {value!r}"
        )

    def _read_circle(self, body: str, value: str) -> Circle:
        center_text, sep, dist_text = body.partition("d=")
        if not sep:
            raise InvalidShapeError(f"Circle is missing 'd=' distance: {value!r}")
        center_text = center_text.strip()
        if "," in center_text:
            center = self._read_lat_comma_lon(center_text, value)
        else:
            tokens = center_text.split()
            if len(tokens) != 2:
                raise InvalidShapeError(f"Circle center needs 2 numbers: {value!r}")
            x, y = _parse_numbers(tokens, value)
            center = self.ctx.make_point(self.ctx.norm_x(x), self.ctx.norm_y(y))
        (dist,) = _parse_numbers([dist_text.strip()], value)
        return self.ctx.make_circle(center, dist)

    def _read_lat_comma_lon(self, text: str, value: str) -> Point:
        parts = text.split(",")
        if len(parts) != 2:
            raise InvalidShapeError(f"Expected 'lat,lon': {value!r}")
        lat, lon = _parse_numbers([p.strip() for p in parts], value)
        return self.ctx.make_point(self.ctx.norm_x(lon), self.ctx.norm_y(lat))

    def write_shape(self, shape: Shape) -> str:
        """Format a point, rectangle or circle; other shapes use str()."""
        if isinstance(shape, Point):
            return f"{format_number(shape.x)} {format_number(shape.y)}"
        if isinstance(shape, Rectangle):
            return " ".join(
                format_number(v)
                for v in (shape.min_x, shape.min_y, shape.max_x, shape.max_y)
            )
        if isinstance(shape, Circle):
            center = shape.center
            return (
                f"Circle({format_number(center.x)} {format_number(center.y)} "
                f"d={format_number(shape.radius)})"
            )
        return str(shape)


def format_number(value: float) -> str:
    """Up to six fraction digits, no trailing zeros: 10.5 -> '10.5', 3.0 -> '3'."""
    text = f"{value:.6f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text == "-0":
        text = "0"
    return text


def _parse_numbers(tokens, value: str) -> Tuple[float, ...]:
    try:
        return tuple(float(t) for t in tokens)
    except ValueError as e:
        raise InvalidShapeError(f"Invalid number in shape {value!r}: {e}") from e
