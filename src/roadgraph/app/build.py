# roadgraph/app/build.py
import os
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from roadgraph.config.models import GraphModel
from roadgraph.graph.builder import EdgeRecord, GraphBuilder
from roadgraph.graph.graph import Graph
from roadgraph.graph.hooks import GraphHooks, NoopHooks
from roadgraph.io.graph_logging import GraphLogging  # JSON logs
from roadgraph.runtime.resources import load_graph_from_path, save_graph


@dataclass
class App:
    model: GraphModel
    graph: Graph
    hooks: GraphHooks


def build(
    cfg: GraphModel | Mapping,
    *,
    nodes: Iterable[Mapping[str, Any]] = (),
    edges: Iterable[EdgeRecord] = (),
    use_logging: bool = True,
) -> App:
    # 0) Validate config
    model = cfg if isinstance(cfg, GraphModel) else GraphModel.model_validate(cfg)

    # 1) Hooks
    hooks = (
        GraphLogging(
            graph=model.name,
            level=model.log.level,
            debug=model.log.debug,
            sample_every=model.log.sample_every,
        )
        if use_logging
        else NoopHooks()
    )

    # 2) Snapshot short-circuit
    snap = model.snapshot
    if snap is not None:
        if os.path.exists(snap.file):
            return App(model, load_graph_from_path(snap.file, snap.fmt), hooks)
        if snap.must_exist:
            raise FileNotFoundError(snap.file)

    # 3) Loading phase: all nodes, then all edges, then cleanup
    builder = GraphBuilder(name=model.name, nearest=model.nearest, load=model.load, hooks=hooks)
    builder.add_nodes(nodes)
    builder.add_edges(edges)
    graph = builder.build()

    # 4) Persist for the next run
    if snap is not None:
        save_graph(graph, snap.file, snap.fmt)

    return App(model, graph, hooks)
