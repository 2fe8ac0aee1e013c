"""Creation of gates by type."""

from __future__ import annotations

from .gates import (
    AndGate,
    BufferGate,
    Gate,
    GateType,
    NandGate,
    NorGate,
    NotGate,
    OrGate,
    XnorGate,
    XorGate,
)

_GATE_CLASSES: dict[GateType, type[Gate]] = {
    GateType.AND: AndGate,
    GateType.OR: OrGate,
    GateType.NOT: NotGate,
    GateType.NOR: NorGate,
    GateType.NAND: NandGate,
    GateType.XOR: XorGate,
    GateType.XNOR: XnorGate,
    GateType.BUFFER: BufferGate,
}

_TYPE_NAMES: dict[GateType, str] = {
    GateType.AND: "AND",
    GateType.OR: "OR",
    GateType.NOT: "NOT",
    GateType.NOR: "NOR",
    GateType.NAND: "NAND",
    GateType.XOR: "XOR",
    GateType.XNOR: "XNOR",
    GateType.BUFFER: "BUFFER",
}


def create_gate(gate_type: GateType, label: str = "") -> Gate:
    """Build a gate of the given type; raise ValueError for unsupported types."""
    try:
        gate_cls = _GATE_CLASSES[gate_type]
    except (KeyError, TypeError):
        raise ValueError("Invalid gate type") from None
    return gate_cls(label)


def is_valid_gate_type(gate_type: GateType) -> bool:
    """Return whether the factory can build gates of this type."""
    try:
        return gate_type in _GATE_CLASSES
    except TypeError:
        return False


def supported_types() -> list[GateType]:
    """Return the buildable gate types in their canonical order."""
    return list(_GATE_CLASSES)


def gate_type_name(gate_type: GateType) -> str:
    """Return the upper-case display name of a gate type, or ``UNKNOWN``."""
    try:
        return _TYPE_NAMES.get(gate_type, "UNKNOWN")
    except TypeError:
        return "UNKNOWN"