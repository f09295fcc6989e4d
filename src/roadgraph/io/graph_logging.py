# io/graph_logging.py
import json
import logging
import sys

from roadgraph.domain.entities.vertex import Vertex
from roadgraph.graph.hooks import NoopHooks


def _default_json_logger(name="roadgraph", level="INFO"):
    logger = logging.getLogger(name)
    if not logger.handlers:
        h = logging.StreamHandler(sys.stdout)

        class _JsonFormatter(logging.Formatter):
            def format(self, record: logging.LogRecord) -> str:
                payload = {
                    "level": record.levelname,
                    "msg": record.getMessage(),
                    "logger": record.name,
                }
                extra = getattr(record, "extra", None)
                if isinstance(extra, dict):
                    payload.update(extra)
                return json.dumps(payload, default=str)

        h.setFormatter(_JsonFormatter())
        logger.addHandler(h)
        logger.setLevel(level)
    return logger


class GraphLogging(NoopHooks):
    """
    Structured JSON logs for the graph loading phase.
    Per-record events are DEBUG only and sampled; lifecycle events are INFO.
    """

    def __init__(
        self,
        graph: str = "roadgraph",
        level: str = "INFO",
        debug: bool = False,
        sample_every: int = 1000,
        logger: logging.Logger | None = None,
    ):
        self.graph, self.debug, self.sample_every = graph, debug, max(1, sample_every)
        self.log = logger or _default_json_logger(level=level)
        self.nodes = 0
        self.edges = 0

    def _emit(self, level: str, msg: str, **extra):
        payload = {"graph": self.graph}
        self.log.log(getattr(logging, level), msg, extra={"extra": {**payload, **extra}})

    # ---------------- loading ----------------------------

    def build_start(self, *, graph: str):
        self.graph = graph
        self._emit("INFO", "build_start")

    def node_added(self, v: Vertex):
        self.nodes += 1
        if self.debug and (self.nodes % self.sample_every) == 0:
            self._emit("DEBUG", "node_added", vertex_id=v.id, name=v.name, count=self.nodes)

    def edge_added(self, *, a: int, b: int, street: str):
        self.edges += 1
        if self.debug and (self.edges % self.sample_every) == 0:
            self._emit("DEBUG", "edge_added", a=a, b=b, street=street, count=self.edges)

    def node_removed(self, *, vertex_id: int):
        if self.debug:
            self._emit("DEBUG", "node_removed", vertex_id=vertex_id)

    def record_skipped(self, *, kind: str, reason: str, record):
        self._emit("WARNING", "record_skipped", kind=kind, reason=reason, record=record)

    # ---------------- lifecycle --------------------------

    def clean_end(self, *, pruned: int, active: int, total: int):
        self._emit("INFO", "clean_end", pruned=pruned, active=active, total=total)

    def build_end(self, *, active: int, total: int, nearest: str):
        self._emit(
            "INFO",
            "build_end",
            nodes=self.nodes,
            edges=self.edges,
            active=active,
            total=total,
            nearest=nearest,
        )

    def error(self, op: str, *, reason: str, **extra):
        self._emit("ERROR", "graph_error", op=op, reason=reason, **extra)
