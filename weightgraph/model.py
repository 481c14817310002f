"""Canonical model — graph files, config, route reports."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, PositiveInt, model_validator


class EdgeEntry(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    from_name: str = Field(alias="from")
    to_name: str = Field(alias="to")
    weight: PositiveInt


class GraphFile(BaseModel):
    """On-disk graph description: a name table plus weighted edges between names.

    Names that YAML reads as booleans or null (`NO`, `yes`, `null`, ...) must be
    quoted, otherwise they fail validation as non-strings.
    """

    vertices: list[str] = Field(min_length=1)
    edges: list[EdgeEntry] = Field(default_factory=list)

    @model_validator(mode="after")
    def _check_names(self) -> GraphFile:
        seen: set[str] = set()
        for name in self.vertices:
            if not name:
                raise ValueError("vertex names must be non-empty")
            if name in seen:
                raise ValueError(f"duplicate vertex name {name!r}")
            seen.add(name)
        for edge in self.edges:
            for endpoint in (edge.from_name, edge.to_name):
                if endpoint not in seen:
                    raise ValueError(f"edge endpoint {endpoint!r} is not a declared vertex")
        return self


class SearchConfig(BaseModel):
    # None: no ceiling, every stored edge qualifies
    default_max_weight: int | None = None


class DisplayConfig(BaseModel):
    show_weights: bool = True


class WeightGraphConfig(BaseModel):
    search: SearchConfig = Field(default_factory=SearchConfig)
    display: DisplayConfig = Field(default_factory=DisplayConfig)


class RouteReport(BaseModel):
    source: str
    destination: str
    max_weight: int
    hops: int
    path: list[str] = Field(default_factory=list)
    indices: list[int] = Field(default_factory=list)
