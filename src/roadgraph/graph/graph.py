# roadgraph/graph/graph.py
from collections.abc import Mapping
from types import MappingProxyType

from roadgraph.app.protocols import NearestIndex
from roadgraph.domain import geo
from roadgraph.domain.entities.vertex import Vertex
from roadgraph.domain.errors import UnknownVertexError
from roadgraph.domain.names import NameIndex


class Graph:
    """
    Read-only road network produced by GraphBuilder.build().

    Two views over the same vertices:
      • full set: every vertex ever added (coordinates, names, distance, bearing)
      • active set: connected vertices only (vertices, adjacency, streets, closest)
    Nothing mutable is handed out, so a built graph can be shared between readers.
    """

    def __init__(
        self,
        *,
        name: str,
        full: Mapping[int, Vertex],
        active: Mapping[int, Vertex],
        names: NameIndex,
        nearest: NearestIndex,
    ):
        self.name = name
        # own copies, so handles kept from the loading phase cannot reach in
        self._full = {k: v.copy() for k, v in full.items()}
        self._active = {k: self._full[k] for k in active}
        self._names = names
        self._nearest = nearest

    # ---------------- lookups -----------------------------

    def _get_full(self, v: int) -> Vertex:
        try:
            return self._full[v]
        except KeyError:
            raise UnknownVertexError(v, "full set") from None

    def _get_active(self, v: int) -> Vertex:
        try:
            return self._active[v]
        except KeyError:
            raise UnknownVertexError(v, "active set") from None

    # ---------------- connectivity ------------------------

    def vertices(self) -> list[int]:
        return sorted(self._active)

    def adjacent(self, v: int) -> tuple[int, ...]:
        return tuple(self._get_active(v).neighbors)

    def get_neighbors(self, v: int) -> tuple[int, ...]:
        return tuple(self._get_active(v).neighbors)

    def get_streets(self, v: int) -> Mapping[int, str]:
        return MappingProxyType(self._get_active(v).streets)

    # ---------------- geometry ----------------------------

    def distance(self, v: int, w: int) -> float:
        """Great-circle distance between two vertices in miles."""
        a, b = self._get_full(v), self._get_full(w)
        return geo.distance(a.lon, a.lat, b.lon, b.lat)

    def bearing(self, v: int, w: int) -> float:
        """Initial bearing from v to w in degrees, in (-180, 180]."""
        a, b = self._get_full(v), self._get_full(w)
        return geo.bearing(a.lon, a.lat, b.lon, b.lat)

    def closest(self, lon: float, lat: float) -> int:
        """Active vertex nearest to (lon, lat); lowest id on ties."""
        return self._nearest.nearest(lon, lat)

    def lon(self, v: int) -> float:
        return self._get_full(v).lon

    def lat(self, v: int) -> float:
        return self._get_full(v).lat

    # ---------------- names -------------------------------

    def get_name(self, v: int) -> str | None:
        """Normalized name key of v, None if the vertex is unnamed."""
        return self._get_full(v).name

    @property
    def names(self) -> NameIndex:
        return self._names

    def vertex(self, v: int) -> Vertex:
        return self._get_full(v).copy()

    # ---------------- sizes -------------------------------

    @property
    def total(self) -> int:
        return len(self._full)

    def __len__(self) -> int:
        return len(self._active)

    def __contains__(self, v: object) -> bool:
        return v in self._active

    def __repr__(self) -> str:
        return f"Graph(name={self.name!r}, active={len(self._active)}, total={len(self._full)})"
