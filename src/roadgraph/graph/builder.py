# roadgraph/graph/builder.py
import math
from collections.abc import Iterable, Mapping
from typing import Any

from roadgraph.config.models import LoadModel, NearestLinearModel, NearestUnion
from roadgraph.domain.entities.vertex import Vertex
from roadgraph.domain.errors import MalformedInputError, UnknownVertexError
from roadgraph.domain.geo import normalize_key
from roadgraph.domain.names import NameIndex
from roadgraph.graph.graph import Graph
from roadgraph.graph.hooks import GraphHooks, NoopHooks
from roadgraph.runtime.registries import make_nearest

EdgeRecord = tuple[Any, Any, str]


def _parse_id(record: Mapping[str, Any]) -> int:
    if "id" not in record or record["id"] is None:
        raise MalformedInputError("id", record, "missing")
    raw = record["id"]
    if isinstance(raw, bool):
        raise MalformedInputError("id", record, "not an integer")
    try:
        return int(raw) if isinstance(raw, (int, str)) else int(_integral(raw))
    except (TypeError, ValueError):
        raise MalformedInputError("id", record, "not an integer") from None


def _integral(x: Any) -> int:
    f = float(x)
    if not f.is_integer():
        raise ValueError(x)
    return int(f)


def _parse_coord(record: Mapping[str, Any], key: str) -> float:
    if key not in record or record[key] is None:
        raise MalformedInputError(key, record, "missing")
    raw = record[key]
    if isinstance(raw, bool):
        raise MalformedInputError(key, record, "not a number")
    try:
        value = float(raw)
    except (TypeError, ValueError):
        raise MalformedInputError(key, record, "not a number") from None
    if not math.isfinite(value):
        raise MalformedInputError(key, record, "must be finite")
    return value


def _as_id(v: Any) -> int | None:
    """Edge/removal endpoints may arrive as ints or integer strings."""
    if isinstance(v, bool):
        return None
    if isinstance(v, int):
        return v
    try:
        return int(v) if isinstance(v, str) else _integral(v)
    except (TypeError, ValueError):
        return None


class GraphBuilder:
    """
    Loading phase of a road graph. A loader streams records in:

        b = GraphBuilder()
        b.add_node({"id": "1", "lon": "0", "lat": "0"})
        b.add_node({"id": "2", "lon": "0", "lat": "1", "name": "Main & 1st"})
        b.add_edge("1", "2", "Main St")
        g = b.build()  # prunes isolated vertices, returns a read-only Graph

    Once build() has run the builder refuses further mutation.
    """

    def __init__(
        self,
        *,
        name: str = "roadgraph",
        nearest: NearestUnion | None = None,
        load: LoadModel | None = None,
        hooks: GraphHooks | None = None,
    ):
        self.name = name
        self._nearest_cfg = nearest or NearestLinearModel()
        self._load = load or LoadModel()
        self._hooks = hooks or NoopHooks()
        self._full: dict[int, Vertex] = {}
        self._active: dict[int, Vertex] = {}
        self._names = NameIndex()
        self._cleaned = False
        self._built = False
        self.skipped = 0
        self._hooks.build_start(graph=name)

    def _check_loading(self, op: str) -> None:
        if self._built:
            self._hooks.error(op, reason="already_built")
            raise RuntimeError(f"{op}: graph {self.name!r} is already built")

    # ---------------- construction ------------------------

    def add_node(self, fields: Mapping[str, Any]) -> Vertex:
        self._check_loading("add_node")
        vid = _parse_id(fields)
        lon = _parse_coord(fields, "lon")
        lat = _parse_coord(fields, "lat")

        display = fields.get("name")
        v = Vertex(id=vid, lon=lon, lat=lat)
        if display:
            v.display_name = str(display)
            v.name = normalize_key(v.display_name)

        self._full[vid] = v
        self._active[vid] = v
        if v.display_name:
            self._names.register(v.name, v.display_name, vid)
        self._hooks.node_added(v)
        return v

    def add_edge(self, a: Any, b: Any, street: str) -> None:
        self._check_loading("add_edge")
        ia, ib = _as_id(a), _as_id(b)
        # validate both endpoints before touching either
        for raw, vid in ((a, ia), (b, ib)):
            if vid is None or vid not in self._active:
                self._hooks.error("add_edge", reason="unknown_vertex", vertex_id=raw)
                raise UnknownVertexError(raw, "active set")
        self._active[ia].connect(ib, street)
        self._active[ib].connect(ia, street)
        self._hooks.edge_added(a=ia, b=ib, street=street)

    def remove_node(self, v: Any) -> None:
        """Drop v from the active set. Coordinates and names stay resolvable."""
        self._check_loading("remove_node")
        vid = _as_id(v)
        if vid is None or self._active.pop(vid, None) is None:
            return
        self._hooks.node_removed(vertex_id=vid)

    # ---------------- bulk loading ------------------------

    def add_nodes(self, records: Iterable[Mapping[str, Any]]) -> int:
        """Add node records, honoring the malformed-record policy. Returns the count added."""
        added = 0
        for rec in records:
            try:
                self.add_node(rec)
            except MalformedInputError as e:
                if self._load.on_malformed == "raise":
                    raise
                self.skipped += 1
                self._hooks.record_skipped(kind="node", reason=str(e), record=rec)
                continue
            added += 1
        return added

    def add_edges(self, records: Iterable[EdgeRecord]) -> int:
        added = 0
        for a, b, street in records:
            self.add_edge(a, b, street)
            added += 1
        return added

    # ---------------- lifecycle ---------------------------

    def clean(self) -> int:
        """
        Remove active vertices without neighbors (points of interest off the road
        network, say). Remaining vertices are not guaranteed mutually reachable.
        """
        self._check_loading("clean")
        if self._cleaned:
            raise RuntimeError(f"clean: graph {self.name!r} was already cleaned")
        pruned = 0
        for vid in list(self._active):
            if self._active[vid].isolated:
                del self._active[vid]
                pruned += 1
        self._cleaned = True
        self._hooks.clean_end(pruned=pruned, active=len(self._active), total=len(self._full))
        return pruned

    def build(self) -> Graph:
        self._check_loading("build")
        if not self._cleaned:
            self.clean()
        nearest = make_nearest(self._nearest_cfg, self._active.values())
        self._built = True
        g = Graph(
            name=self.name,
            full=self._full,
            active=self._active,
            names=self._names.freeze(),
            nearest=nearest,
        )
        self._hooks.build_end(
            active=len(self._active), total=len(self._full), nearest=self._nearest_cfg.kind
        )
        return g

    # ---------------- introspection -----------------------

    @property
    def names(self) -> NameIndex:
        return self._names

    def __len__(self) -> int:
        return len(self._active)

    def __contains__(self, v: object) -> bool:
        return v in self._active
