# roadgraph/graph/nearest.py
import math
from collections.abc import Iterable

import numpy as np

from roadgraph.app.protocols import NearestIndex
from roadgraph.domain import geo
from roadgraph.domain.entities.vertex import Vertex
from roadgraph.domain.errors import EmptyGraphError


def _check_query(lon: float, lat: float) -> None:
    if not (math.isfinite(lon) and math.isfinite(lat)):
        raise ValueError(f"query point must be finite, got ({lon!r}, {lat!r})")


class LinearScanNearest(NearestIndex):
    """O(n) scan per query. Visits vertices by ascending id, so the lowest id wins ties."""

    def __init__(self, vertices: Iterable[Vertex]):
        self._points = sorted((v.id, v.lon, v.lat) for v in vertices)

    def nearest(self, lon: float, lat: float) -> int:
        _check_query(lon, lat)
        if not self._points:
            raise EmptyGraphError()
        best_id, best_d = self._points[0][0], float("inf")
        for vid, vlon, vlat in self._points:
            d = geo.distance(lon, lat, vlon, vlat)
            if d < best_d:
                best_id, best_d = vid, d
        return best_id

    def __len__(self) -> int:
        return len(self._points)


class ArrayNearest(NearestIndex):
    """Same contract as LinearScanNearest, with the scan vectorized through numpy."""

    def __init__(self, vertices: Iterable[Vertex]):
        rows = sorted((v.id, v.lon, v.lat) for v in vertices)
        self._ids = np.array([r[0] for r in rows], dtype=np.int64)
        self._lons = np.array([r[1] for r in rows], dtype=float)
        self._lats = np.array([r[2] for r in rows], dtype=float)

    def nearest(self, lon: float, lat: float) -> int:
        _check_query(lon, lat)
        if self._ids.size == 0:
            raise EmptyGraphError()
        d = geo.distance_many(lon, lat, self._lons, self._lats)
        # argmin returns the first minimum; ids are ascending
        return int(self._ids[int(np.argmin(d))])

    def __len__(self) -> int:
        return int(self._ids.size)
