from __future__ import annotations

from types import MappingProxyType
from typing import Annotated, Any, Literal, Mapping, Union

from pydantic import AfterValidator, BaseModel, ConfigDict, Field

# Channel indices are non-negative; -1 is reserved as the "not found" sentinel.
ChannelIndex = Annotated[int, Field(ge=0)]


def _freeze(value: Mapping[str, Any]) -> Mapping[str, Any]:
    return MappingProxyType(dict(value))


def _empty_map() -> Mapping[str, Any]:
    return MappingProxyType({})


# ---------------------------------------------------------------------------
# Identifier
# ---------------------------------------------------------------------------


class Identifier(BaseModel):
    """Opaque node name. Two identifiers are equal iff their text is equal."""

    model_config = ConfigDict(frozen=True)

    value: str

    @classmethod
    def from_string(cls, s: str) -> Identifier:
        return cls(value=s)

    @classmethod
    def from_int(cls, n: int) -> Identifier:
        return cls(value=str(n))

    def to_string(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.value


# Anything accepted where a node identifier is expected.
IdLike = Union[Identifier, str, int]


def as_identifier(value: IdLike) -> Identifier:
    """Coerce a str or int into an :class:`Identifier` (identity for identifiers)."""
    if isinstance(value, Identifier):
        return value
    if isinstance(value, int):
        return Identifier.from_int(value)
    return Identifier.from_string(value)


# ---------------------------------------------------------------------------
# Params (discriminated union on "type")
# ---------------------------------------------------------------------------


class ValueParam(BaseModel):
    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    type: Literal["value"] = "value"
    value: float


class NoteParam(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: Literal["note"] = "note"
    value: int


class FrequencyParam(BaseModel):
    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    type: Literal["frequency"] = "frequency"
    value: float


class WaveformParam(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: Literal["waveform"] = "waveform"
    value: str


Param = Annotated[
    Union[ValueParam, NoteParam, FrequencyParam, WaveformParam],
    Field(discriminator="type"),
]

# Read-only views over private copies; node maps cannot be edited in place.
ParamMap = Annotated[Mapping[str, Param], AfterValidator(_freeze)]
ChannelMap = Annotated[Mapping[str, ChannelIndex], AfterValidator(_freeze)]


# ---------------------------------------------------------------------------
# Node kinds (discriminated union on "tag")
# ---------------------------------------------------------------------------


class DestinationKind(BaseModel):
    model_config = ConfigDict(frozen=True)

    tag: Literal["destination"] = "destination"


class OscillatorKind(BaseModel):
    model_config = ConfigDict(frozen=True)

    tag: Literal["oscillator"] = "oscillator"


class GainKind(BaseModel):
    model_config = ConfigDict(frozen=True)

    tag: Literal["gain"] = "gain"


class CustomKind(BaseModel):
    """User-defined node kind; ``name`` is passed through to the consumer verbatim."""

    model_config = ConfigDict(frozen=True)

    tag: Literal["custom"] = "custom"
    name: str


NodeKind = Annotated[
    Union[DestinationKind, OscillatorKind, GainKind, CustomKind],
    Field(discriminator="tag"),
]


# ---------------------------------------------------------------------------
# Node & connection
# ---------------------------------------------------------------------------


class Node(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: Identifier
    kind: NodeKind
    params: ParamMap = Field(default_factory=_empty_map)
    inputs: ChannelMap = Field(default_factory=_empty_map)  # label -> input channel
    outputs: ChannelMap = Field(default_factory=_empty_map)  # label -> output channel


class Connection(BaseModel):
    """Directed edge from an output channel of one node to an input channel of another."""

    model_config = ConfigDict(frozen=True)

    output_node: Identifier
    output_channel: ChannelIndex
    input_node: Identifier
    input_channel: ChannelIndex


# ---------------------------------------------------------------------------
# Top-level graph
# ---------------------------------------------------------------------------


class Graph(BaseModel):
    model_config = ConfigDict(frozen=True)

    nodes: Annotated[Mapping[str, Node], AfterValidator(_freeze)] = Field(
        default_factory=_empty_map
    )  # keyed by str(node.id)
    connections: tuple[Connection, ...] = ()  # most recent first
