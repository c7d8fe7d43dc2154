"""
Distance Calculators
====================

Pure functions of two coordinate pairs, one implementation per coordinate
system. Selected once when a SpatialContext is resolved and then carried
immutably.

Design:
- Frozen dataclasses (value equality, thread-safe)
- Geodetic results are degrees of arc, the same unit as circle radii
- distances() is the vectorized batch form (numpy broadcasting)
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np

from orbis_spatial.distance import utils

if TYPE_CHECKING:
    from orbis_spatial.shapes.point import Point


class DistanceCalculator(ABC):
    """Distance between a point and another point or (x, y) pair."""

    def distance(self, from_point: "Point", to_point: "Point") -> float:
        return self.distance_xy(from_point, to_point.x, to_point.y)

    @abstractmethod
    def distance_xy(self, from_point: "Point", x: float, y: float) -> float:
        """Distance from from_point to the coordinate (x, y)."""

    @abstractmethod
    def distances(self, from_point: "Point", xs, ys) -> np.ndarray:
        """Distances from from_point to every (xs[i], ys[i])."""


@dataclass(frozen=True)
class CartesianDistCalc(DistanceCalculator):
    """
    Euclidean distance in the native units of x and y.

    Attributes:
        squared: Return the squared distance (ranking only, skips sqrt)
    """

    squared: bool = False

    def distance_xy(self, from_point: "Point", x: float, y: float) -> float:
        dx = from_point.x - x
        dy = from_point.y - y
        result = dx * dx + dy * dy
        return result if self.squared else float(np.sqrt(result))

    def distances(self, from_point: "Point", xs, ys) -> np.ndarray:
        dx = from_point.x - np.asarray(xs, dtype=float)
        dy = from_point.y - np.asarray(ys, dtype=float)
        result = dx * dx + dy * dy
        return result if self.squared else np.sqrt(result)

    def __str__(self) -> str:
        return "CartesianDistCalc^2" if self.squared else "CartesianDistCalc"


class GeodesicSphereDistCalc(DistanceCalculator):
    """
    Great-circle distance on a sphere, in degrees.

    Subclasses supply _distance_rad; x is longitude and y is latitude.
    """

    def distance_xy(self, from_point: "Point", x: float, y: float) -> float:
        return float(self.distances(from_point, x, y))

    def distances(self, from_point: "Point", xs, ys) -> np.ndarray:
        lat1 = from_point.y * utils.DEG_TO_RAD
        lon1 = from_point.x * utils.DEG_TO_RAD
        lat2 = np.asarray(ys, dtype=float) * utils.DEG_TO_RAD
        lon2 = np.asarray(xs, dtype=float) * utils.DEG_TO_RAD
        return self._distance_rad(lat1, lon1, lat2, lon2) * utils.RAD_TO_DEG

    @abstractmethod
    def _distance_rad(self, lat1, lon1, lat2, lon2):
        ...

    def __str__(self) -> str:
        return type(self).__name__


@dataclass(frozen=True)
class HaversineDistCalc(GeodesicSphereDistCalc):
    """Haversine formula. The default geodetic calculator."""

    def _distance_rad(self, lat1, lon1, lat2, lon2):
        return utils.dist_haversine_rad(lat1, lon1, lat2, lon2)


@dataclass(frozen=True)
class LawOfCosinesDistCalc(GeodesicSphereDistCalc):
    """Spherical law of cosines. Loses precision for very close points."""

    def _distance_rad(self, lat1, lon1, lat2, lon2):
        return utils.dist_law_of_cosines_rad(lat1, lon1, lat2, lon2)


@dataclass(frozen=True)
class VincentySphereDistCalc(GeodesicSphereDistCalc):
    """Vincenty's formula for a sphere. Accurate for all separations."""

    def _distance_rad(self, lat1, lon1, lat2, lon2):
        return utils.dist_vincenty_rad(lat1, lon1, lat2, lon2)


# Names accepted by SpatialContextFactory.from_dict
CALCULATORS_BY_NAME = {
    "haversine": HaversineDistCalc,
    "lawOfCosines": LawOfCosinesDistCalc,
    "vincentySphere": VincentySphereDistCalc,
    "cartesian": CartesianDistCalc,
    "cartesian^2": lambda: CartesianDistCalc(squared=True),
}
