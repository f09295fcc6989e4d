from typing import Protocol, runtime_checkable


# ------------- Queries --------------------
@runtime_checkable
class NearestIndex(Protocol):
    """
    Responsibilities:
      • Answer "which active vertex is closest to (lon, lat)" by great-circle distance.
      • Break ties by lowest vertex id.
    Built once from the active vertex set; never mutated afterwards.
    """

    def nearest(self, lon: float, lat: float) -> int: ...
    def __len__(self) -> int: ...
