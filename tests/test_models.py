from __future__ import annotations

import pytest
from pydantic import ValidationError

from audio_graph import (
    Connection,
    CustomKind,
    DestinationKind,
    FrequencyParam,
    GainKind,
    Identifier,
    Node,
    NoteParam,
    OscillatorKind,
    ValueParam,
    WaveformParam,
    as_identifier,
)

# ---------------------------------------------------------------------------
# Identifier
# ---------------------------------------------------------------------------


class TestIdentifier:
    @pytest.mark.parametrize("s", ["", "oscA", "_destination", "with space", "ünïcode"])
    def test_from_string_roundtrip(self, s: str) -> None:
        assert Identifier.from_string(s).to_string() == s
        assert str(Identifier.from_string(s)) == s

    @pytest.mark.parametrize("n", [0, 1, 42, 10**12])
    def test_from_int_decimal(self, n: int) -> None:
        assert str(Identifier.from_int(n)) == str(n)

    def test_equality_by_text(self) -> None:
        assert Identifier.from_int(7) == Identifier.from_string("7")
        assert Identifier.from_string("a") != Identifier.from_string("b")

    def test_hashable(self) -> None:
        ids = {Identifier.from_string("a"), Identifier.from_string("a"), Identifier.from_int(1)}
        assert len(ids) == 2

    def test_immutable(self) -> None:
        ident = Identifier.from_string("a")
        with pytest.raises(ValidationError):
            ident.value = "b"  # type: ignore[misc]

    def test_as_identifier(self) -> None:
        ident = Identifier.from_string("x")
        assert as_identifier(ident) is ident
        assert as_identifier("x") == ident
        assert as_identifier(3) == Identifier.from_string("3")


# ---------------------------------------------------------------------------
# Params
# ---------------------------------------------------------------------------


class TestParams:
    def test_tags(self) -> None:
        assert ValueParam(value=1.0).type == "value"
        assert NoteParam(value=60).type == "note"
        assert FrequencyParam(value=440.0).type == "frequency"
        assert WaveformParam(value="square").type == "waveform"

    def test_int_coerced_to_float(self) -> None:
        p = FrequencyParam(value=220)
        assert isinstance(p.value, float)
        assert p.value == 220.0

    def test_note_rejects_fraction(self) -> None:
        with pytest.raises(ValidationError):
            NoteParam(value=60.5)

    @pytest.mark.parametrize("bad", [float("nan"), float("inf"), float("-inf")])
    def test_value_rejects_non_finite(self, bad: float) -> None:
        with pytest.raises(ValidationError):
            ValueParam(value=bad)

    @pytest.mark.parametrize("bad", [float("nan"), float("inf"), float("-inf")])
    def test_frequency_rejects_non_finite(self, bad: float) -> None:
        with pytest.raises(ValidationError):
            FrequencyParam(value=bad)

    def test_equal_values_different_tags_differ(self) -> None:
        assert ValueParam(value=440.0) != FrequencyParam(value=440.0)

    def test_discriminated_param_in_node(self) -> None:
        n = Node.model_validate(
            {
                "id": {"value": "n"},
                "kind": {"tag": "gain"},
                "params": {"gain": {"type": "value", "value": 0.5}},
            }
        )
        assert isinstance(n.params["gain"], ValueParam)

    def test_unknown_param_tag_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Node.model_validate(
                {
                    "id": {"value": "n"},
                    "kind": {"tag": "gain"},
                    "params": {"gain": {"type": "input", "value": 0}},
                }
            )


# ---------------------------------------------------------------------------
# Node kinds
# ---------------------------------------------------------------------------


class TestNodeKinds:
    def test_builtin_tags(self) -> None:
        assert DestinationKind().tag == "destination"
        assert OscillatorKind().tag == "oscillator"
        assert GainKind().tag == "gain"

    def test_custom_carries_name(self) -> None:
        k = CustomKind(name="biquad")
        assert k.tag == "custom"
        assert k.name == "biquad"

    def test_custom_equality_by_name(self) -> None:
        assert CustomKind(name="a") == CustomKind(name="a")
        assert CustomKind(name="a") != CustomKind(name="b")


# ---------------------------------------------------------------------------
# Node & connection
# ---------------------------------------------------------------------------


class TestNodeModel:
    def test_defaults_empty(self) -> None:
        n = Node(id=Identifier.from_string("x"), kind=GainKind())
        assert n.params == {}
        assert n.inputs == {}
        assert n.outputs == {}

    def test_negative_channel_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Node(id=Identifier.from_string("x"), kind=GainKind(), inputs={"in": -1})

    def test_frozen(self) -> None:
        n = Node(id=Identifier.from_string("x"), kind=GainKind())
        with pytest.raises(ValidationError):
            n.kind = OscillatorKind()  # type: ignore[misc]

    def test_maps_read_only(self) -> None:
        n = Node(
            id=Identifier.from_string("x"),
            kind=GainKind(),
            params={"gain": ValueParam(value=1.0)},
            inputs={"audio": 0},
            outputs={"audio": 0},
        )
        with pytest.raises(TypeError):
            n.params["gain"] = ValueParam(value=9.0)  # type: ignore[index]
        with pytest.raises(TypeError):
            n.inputs["extra"] = 1  # type: ignore[index]
        with pytest.raises(TypeError):
            n.outputs["extra"] = 1  # type: ignore[index]

    def test_maps_copied_from_caller(self) -> None:
        params = {"gain": ValueParam(value=1.0)}
        n = Node(id=Identifier.from_string("x"), kind=GainKind(), params=params)
        params["gain"] = ValueParam(value=9.0)
        assert n.params["gain"] == ValueParam(value=1.0)


class TestConnectionModel:
    def test_structural_equality(self) -> None:
        a = Connection(
            output_node=Identifier.from_string("o"),
            output_channel=0,
            input_node=Identifier.from_string("i"),
            input_channel=1,
        )
        b = Connection(
            output_node=Identifier.from_string("o"),
            output_channel=0,
            input_node=Identifier.from_string("i"),
            input_channel=1,
        )
        assert a == b
        assert hash(a) == hash(b)

    def test_negative_channel_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Connection(
                output_node=Identifier.from_string("o"),
                output_channel=-1,
                input_node=Identifier.from_string("i"),
                input_channel=0,
            )
