# roadgraph/runtime/resources.py
import pickle
from functools import lru_cache

from roadgraph.graph.graph import Graph


def save_graph(graph: Graph, file: str, fmt: str = "pickle") -> None:
    if fmt == "pickle":
        with open(file, "wb") as f:
            pickle.dump(graph, f, protocol=pickle.HIGHEST_PROTOCOL)
        load_graph_from_path.cache_clear()
        return
    raise ValueError(f"Unsupported graph fmt {fmt!r}")


@lru_cache(maxsize=8)
def load_graph_from_path(file: str, fmt: str = "pickle") -> Graph:
    if fmt == "pickle":
        with open(file, "rb") as f:
            g = pickle.load(f)
        if not isinstance(g, Graph):
            raise TypeError(f"{file} does not hold a Graph snapshot")
        return g
    raise ValueError(f"Unsupported graph fmt {fmt!r}")
