from dataclasses import dataclass, field


@dataclass
class Vertex:
    id: int
    lon: float  # degrees
    lat: float
    display_name: str | None = None
    name: str | None = None  # normalized key, set iff display_name is
    neighbors: list[int] = field(default_factory=list)  # duplicates kept
    streets: dict[int, str] = field(default_factory=dict)  # neighbor id -> street name

    def connect(self, other: int, street: str) -> None:
        self.neighbors.append(other)
        self.streets[other] = street

    @property
    def isolated(self) -> bool:
        return not self.neighbors

    def copy(self) -> "Vertex":
        return Vertex(
            id=self.id,
            lon=self.lon,
            lat=self.lat,
            display_name=self.display_name,
            name=self.name,
            neighbors=list(self.neighbors),
            streets=dict(self.streets),
        )
