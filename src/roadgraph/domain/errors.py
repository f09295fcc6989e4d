# roadgraph/domain/errors.py
from collections.abc import Mapping
from typing import Any


class RoadGraphError(Exception):
    pass


class MalformedInputError(RoadGraphError, ValueError):
    """A node record is missing a required field or carries a non-numeric id/coordinate."""

    def __init__(self, field: str, record: Mapping[str, Any] | None = None, reason: str = ""):
        self.field, self.record = field, record
        msg = f"malformed node record: {field!r}"
        if reason:
            msg += f" ({reason})"
        super().__init__(msg)


class UnknownVertexError(RoadGraphError, LookupError):
    def __init__(self, vertex_id: Any, where: str = "graph"):
        self.vertex_id = vertex_id
        super().__init__(f"unknown vertex {vertex_id!r} in {where}")


class EmptyGraphError(RoadGraphError, ValueError):
    def __init__(self, msg: str = "graph has no active vertices"):
        super().__init__(msg)
