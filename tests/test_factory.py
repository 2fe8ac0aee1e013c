import pytest

from logicsim.factory import (
    create_gate,
    gate_type_name,
    is_valid_gate_type,
    supported_types,
)
from logicsim.gates import (
    AndGate,
    BufferGate,
    GateType,
    NandGate,
    NorGate,
    NotGate,
    OrGate,
    XnorGate,
    XorGate,
)


def test_supported_types_order():
    assert supported_types() == [
        GateType.AND,
        GateType.OR,
        GateType.NOT,
        GateType.NOR,
        GateType.NAND,
        GateType.XOR,
        GateType.XNOR,
        GateType.BUFFER,
    ]


def test_supported_types_returns_fresh_list():
    types = supported_types()
    types.clear()
    assert len(supported_types()) == 8


@pytest.mark.parametrize(
    "gate_type, gate_cls",
    [
        (GateType.AND, AndGate),
        (GateType.OR, OrGate),
        (GateType.NOT, NotGate),
        (GateType.NOR, NorGate),
        (GateType.NAND, NandGate),
        (GateType.XOR, XorGate),
        (GateType.XNOR, XnorGate),
        (GateType.BUFFER, BufferGate),
    ],
)
def test_create_gate_builds_matching_class(gate_type, gate_cls):
    gate = create_gate(gate_type, "Made")
    assert type(gate) is gate_cls
    assert gate.type is gate_type
    assert gate.label == "Made"


def test_create_gate_default_label():
    gate = create_gate(GateType.XOR)
    assert gate.label == f"Gate{gate.id}"


@pytest.mark.parametrize("gate_type", [GateType.FLIP_FLOP, GateType.LATCH, "and", None])
def test_create_gate_rejects_unsupported(gate_type):
    with pytest.raises(ValueError, match="Invalid gate type"):
        create_gate(gate_type, "x")


def test_is_valid_gate_type_matches_supported_types():
    for gate_type in GateType:
        assert is_valid_gate_type(gate_type) == (gate_type in supported_types())


@pytest.mark.parametrize("gate_type", [GateType.FLIP_FLOP, GateType.LATCH])
def test_sequential_types_are_not_valid(gate_type):
    assert is_valid_gate_type(gate_type) is False


@pytest.mark.parametrize(
    "gate_type, name",
    [
        (GateType.AND, "AND"),
        (GateType.OR, "OR"),
        (GateType.NOT, "NOT"),
        (GateType.NOR, "NOR"),
        (GateType.NAND, "NAND"),
        (GateType.XOR, "XOR"),
        (GateType.XNOR, "XNOR"),
        (GateType.BUFFER, "BUFFER"),
        (GateType.FLIP_FLOP, "UNKNOWN"),
        (GateType.LATCH, "UNKNOWN"),
    ],
)
def test_gate_type_name(gate_type, name):
    assert gate_type_name(gate_type) == name


def test_created_gate_evaluates():
    gate = create_gate(GateType.NOT, "inv")
    gate.set_input(0, True)
    gate.evaluate()
    assert gate.output is False