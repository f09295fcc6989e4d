# roadgraph/domain/geo.py
import math
import re

import numpy as np

EARTH_RADIUS_MI = 3963.0

_NOT_LETTER_OR_SPACE = re.compile(r"[^A-Za-z ]")
_NOT_ALNUM = re.compile(r"[^A-Za-z0-9]")


def distance(lon_a: float, lat_a: float, lon_b: float, lat_b: float) -> float:
    """Great-circle (haversine) distance in miles."""
    phi1, phi2 = math.radians(lat_a), math.radians(lat_b)
    dphi = math.radians(lat_b - lat_a)
    dlambda = math.radians(lon_b - lon_a)

    a = math.sin(dphi / 2.0) ** 2
    a += math.cos(phi1) * math.cos(phi2) * math.sin(dlambda / 2.0) ** 2
    # rounding can push a a hair above 1 for antipodal points
    a = min(1.0, max(0.0, a))
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_MI * c


def distance_many(lon: float, lat: float, lons: np.ndarray, lats: np.ndarray) -> np.ndarray:
    """Vectorized `distance` from one point to arrays of points."""
    phi1 = np.radians(lat)
    phi2 = np.radians(lats)
    dphi = np.radians(lats - lat)
    dlambda = np.radians(lons - lon)

    a = np.sin(dphi / 2.0) ** 2 + np.cos(phi1) * np.cos(phi2) * np.sin(dlambda / 2.0) ** 2
    # rounding can push a a hair above 1 for antipodal points
    a = np.clip(a, 0.0, 1.0)
    c = 2 * np.arctan2(np.sqrt(a), np.sqrt(1 - a))
    return EARTH_RADIUS_MI * c


def bearing(lon_a: float, lat_a: float, lon_b: float, lat_b: float) -> float:
    """
    Initial bearing from A to B in degrees, in (-180, 180].
    Not symmetric: bearing(A, B) is generally not bearing(B, A) + 180.
    """
    phi1, phi2 = math.radians(lat_a), math.radians(lat_b)
    dlambda = math.radians(lon_b - lon_a)

    y = math.sin(dlambda) * math.cos(phi2)
    x = math.cos(phi1) * math.sin(phi2)
    x -= math.sin(phi1) * math.cos(phi2) * math.cos(dlambda)
    deg = math.degrees(math.atan2(y, x))
    return 180.0 if deg == -180.0 else deg


def normalize(s: str) -> str:
    """General string cleaning: ASCII letters and spaces, lowercased."""
    return _NOT_LETTER_OR_SPACE.sub("", s).lower()


def normalize_key(s: str) -> str:
    """Vertex name key: ASCII letters and digits only, lowercased."""
    return _NOT_ALNUM.sub("", s).lower()
