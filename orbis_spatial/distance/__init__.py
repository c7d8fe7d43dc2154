"""
Distance Layer
==============

DistanceCalculator contract plus planar and great-circle implementations.
"""

from orbis_spatial.distance.calculators import (
    CALCULATORS_BY_NAME,
    CartesianDistCalc,
    DistanceCalculator,
    GeodesicSphereDistCalc,
    HaversineDistCalc,
    LawOfCosinesDistCalc,
    VincentySphereDistCalc,
)
from orbis_spatial.distance.utils import (
    DEG_TO_KM,
    EARTH_MEAN_RADIUS_KM,
    KM_TO_DEG,
    degrees_to_dist,
    dist_to_degrees,
    norm_lat_deg,
    norm_lon_deg,
)

__all__ = [
    "DistanceCalculator",
    "CartesianDistCalc",
    "GeodesicSphereDistCalc",
    "HaversineDistCalc",
    "LawOfCosinesDistCalc",
    "VincentySphereDistCalc",
    "CALCULATORS_BY_NAME",
    "DEG_TO_KM",
    "KM_TO_DEG",
    "EARTH_MEAN_RADIUS_KM",
    "degrees_to_dist",
    "dist_to_degrees",
    "norm_lat_deg",
    "norm_lon_deg",
]
