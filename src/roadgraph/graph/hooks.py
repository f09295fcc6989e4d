# graph/hooks.py
from typing import Protocol

from roadgraph.domain.entities.vertex import Vertex


class GraphHooks(Protocol):
    def build_start(self, *, graph: str): ...
    def node_added(self, v: Vertex): ...
    def edge_added(self, *, a: int, b: int, street: str): ...
    def node_removed(self, *, vertex_id: int): ...
    def record_skipped(self, *, kind: str, reason: str, record): ...
    def clean_end(self, *, pruned: int, active: int, total: int): ...
    def build_end(self, *, active: int, total: int, nearest: str): ...
    def error(self, op: str, *, reason: str, **kw): ...


class NoopHooks:
    def build_start(self, **_):
        pass

    def node_added(self, *_, **__):
        pass

    def edge_added(self, **_):
        pass

    def node_removed(self, **_):
        pass

    def record_skipped(self, **_):
        pass

    def clean_end(self, **_):
        pass

    def build_end(self, **_):
        pass

    def error(self, *_, **__):
        pass
