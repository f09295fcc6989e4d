import os
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator


class LogModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    debug: bool = False
    sample_every: int = Field(default=1, ge=1)


class LoadModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    # what the loader does with a node record that fails validation
    on_malformed: Literal["raise", "skip"] = "raise"


# ----------------- NEAREST VERTEX ---------------------


class NearestLinearModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["linear"] = "linear"


class NearestArrayModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["array"] = "array"


NearestUnion = Annotated[
    NearestLinearModel | NearestArrayModel,
    Field(discriminator="kind"),
]


# ----------------- SNAPSHOT ---------------------


class SnapshotModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    file: str
    fmt: Literal["pickle"] = "pickle"
    must_exist: bool = False

    @field_validator("file")
    @classmethod
    def _expand(cls, v: str) -> str:
        return os.path.expandvars(os.path.expanduser(v))


# ------------------------------------------------------------------


class GraphModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    name: str = "roadgraph"
    log: LogModel = LogModel()
    load: LoadModel = LoadModel()
    nearest: NearestUnion = Field(default_factory=NearestLinearModel)
    snapshot: SnapshotModel | None = None
