# runtime/registries.py
from collections.abc import Callable, Iterable

from roadgraph.app.protocols import NearestIndex
from roadgraph.config.models import NearestArrayModel, NearestLinearModel, NearestUnion
from roadgraph.domain.entities.vertex import Vertex
from roadgraph.graph.nearest import ArrayNearest, LinearScanNearest

NearestFactory = Callable[[NearestUnion, Iterable[Vertex]], NearestIndex]

_nearest_registry: dict[str, NearestFactory] = {}


# ------------------- Nearest-vertex registries ---------------------------


def register_nearest(kind: str):
    def deco(fn: NearestFactory):
        _nearest_registry[kind] = fn
        return fn

    return deco


def make_nearest(cfg: NearestUnion, vertices: Iterable[Vertex]) -> NearestIndex:
    try:
        factory = _nearest_registry[cfg.kind]
    except KeyError:
        raise ValueError(f"Unknown nearest kind {cfg.kind!r}")
    return factory(cfg, vertices)


@register_nearest("linear")
def _make_linear(cfg: NearestLinearModel, vertices):
    return LinearScanNearest(vertices)


@register_nearest("array")
def _make_array(cfg: NearestArrayModel, vertices):
    return ArrayNearest(vertices)
