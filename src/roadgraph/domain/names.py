# roadgraph/domain/names.py
from collections.abc import Mapping, Sequence
from types import MappingProxyType

from roadgraph.domain.geo import normalize_key


class NameIndex:
    """
    Two lookups keyed by normalized name:
      • key -> display name (last registration wins)
      • key -> ids of vertices sharing that key, in insertion order
    Only vertices with a non-empty display name are ever registered.
    """

    def __init__(self):
        self._display: dict[str, str] = {}
        self._locations: dict[str, list[int]] = {}
        self._frozen = False

    def register(self, key: str, display_name: str, vertex_id: int) -> None:
        if self._frozen:
            raise RuntimeError("name index is frozen")
        self._display[key] = display_name
        self._locations.setdefault(key, []).append(vertex_id)

    def freeze(self) -> "NameIndex":
        """Read-only copy with tuple-valued locations."""
        out = NameIndex()
        out._display = dict(self._display)
        out._locations = {k: tuple(v) for k, v in self._locations.items()}
        out._frozen = True
        return out

    # ---------------- read access ----------------

    @property
    def display_names(self) -> Mapping[str, str]:
        return MappingProxyType(self._display)

    @property
    def locations(self) -> Mapping[str, Sequence[int]]:
        return MappingProxyType(self._locations)

    def display_name(self, key: str) -> str | None:
        return self._display.get(key)

    def locations_of(self, key: str) -> tuple[int, ...]:
        return tuple(self._locations.get(key, ()))

    def search(self, prefix: str) -> list[str]:
        """Display names whose key starts with the normalized prefix, sorted."""
        p = normalize_key(prefix)
        if not p:
            return []
        return sorted(self._display[k] for k in self._display if k.startswith(p))

    def __contains__(self, key: object) -> bool:
        return key in self._display

    def __len__(self) -> int:
        return len(self._display)
