"""
Distance Utilities
==================

Unit constants, degree normalization and the great-circle formulas shared
by the geodetic calculators.

The formulas take radians and are written with numpy ufuncs, so they accept
either scalars or arrays (broadcasting) and return radians.
"""

import math

import numpy as np

EARTH_MEAN_RADIUS_KM = 6371.0087714

DEG_TO_RAD = math.pi / 180.0
RAD_TO_DEG = 180.0 / math.pi

DEG_TO_KM = DEG_TO_RAD * EARTH_MEAN_RADIUS_KM
KM_TO_DEG = 1.0 / DEG_TO_KM


def norm_lon_deg(lon_deg: float) -> float:
    """
    Wrap a longitude into the standard range.

    Values already in [-180, 180] are returned as-is; anything else is
    reduced modularly into [-180, 180), so 181 becomes -179 and -181 becomes
    179. NaN stays NaN.
    """
    if -180.0 <= lon_deg <= 180.0:
        return lon_deg
    return (lon_deg + 180.0) % 360.0 - 180.0


def norm_lat_deg(lat_deg: float) -> float:
    """Fold a latitude over the poles back into [-90, 90]."""
    if -90.0 <= lat_deg <= 90.0:
        return lat_deg
    off = abs(math.fmod(lat_deg + 90.0, 360.0))
    return (off if off <= 180.0 else 360.0 - off) - 90.0


def dist_to_degrees(dist: float, radius: float = EARTH_MEAN_RADIUS_KM) -> float:
    """Convert a surface distance into degrees of arc on a sphere."""
    return math.degrees(dist / radius)


def degrees_to_dist(degrees: float, radius: float = EARTH_MEAN_RADIUS_KM) -> float:
    """Convert degrees of arc into a surface distance on a sphere."""
    return math.radians(degrees) * radius


def dist_haversine_rad(lat1, lon1, lat2, lon2):
    """Great-circle angle between two points (haversine formula)."""
    hsin_x = np.sin((lon1 - lon2) * 0.5)
    hsin_y = np.sin((lat1 - lat2) * 0.5)
    h = hsin_y * hsin_y + np.cos(lat1) * np.cos(lat2) * hsin_x * hsin_x
    # rounding can push h a hair past 1 for antipodal points
    h = np.minimum(h, 1.0)
    return 2.0 * np.arctan2(np.sqrt(h), np.sqrt(1.0 - h))


def dist_law_of_cosines_rad(lat1, lon1, lat2, lon2):
    """Great-circle angle between two points (spherical law of cosines)."""
    cos_angle = (
        np.sin(lat1) * np.sin(lat2)
        + np.cos(lat1) * np.cos(lat2) * np.cos(lon2 - lon1)
    )
    return np.arccos(np.clip(cos_angle, -1.0, 1.0))


def dist_vincenty_rad(lat1, lon1, lat2, lon2):
    """Great-circle angle between two points (Vincenty, spherical case)."""
    d_lon = lon2 - lon1
    cos_lat1, sin_lat1 = np.cos(lat1), np.sin(lat1)
    cos_lat2, sin_lat2 = np.cos(lat2), np.sin(lat2)
    cos_d_lon = np.cos(d_lon)

    a = cos_lat2 * np.sin(d_lon)
    b = cos_lat1 * sin_lat2 - sin_lat1 * cos_lat2 * cos_d_lon
    c = sin_lat1 * sin_lat2 + cos_lat1 * cos_lat2 * cos_d_lon
    return np.arctan2(np.sqrt(a * a + b * b), c)
