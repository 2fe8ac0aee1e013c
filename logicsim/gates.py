"""Logic gate types and the basic combinational gates."""

from __future__ import annotations

import itertools
from abc import ABC, abstractmethod
from enum import Enum, auto
from typing import ClassVar, Iterator


class GateType(Enum):
    """Kinds of gate known to the simulator."""

    AND = auto()
    OR = auto()
    NOT = auto()
    NOR = auto()
    NAND = auto()
    XOR = auto()
    XNOR = auto()
    BUFFER = auto()
    FLIP_FLOP = auto()
    LATCH = auto()


class Gate(ABC):
    """A gate with a list of boolean inputs and one boolean output."""

    _ids: ClassVar[Iterator[int]] = itertools.count()
    initial_inputs: ClassVar[int] = 0

    def __init__(self, gate_type: GateType, label: str = "") -> None:
        self._id = next(Gate._ids)
        self._type = gate_type
        self._label = label or f"Gate{self._id}"
        self._inputs: list[bool] = [False] * self.initial_inputs
        self._output = False

    @abstractmethod
    def evaluate(self) -> None:
        """Compute the output from the current inputs."""

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._inputs):
            raise IndexError("Index out of range")

    def set_input(self, index: int, value: bool) -> None:
        """Set the input at ``index``; raise IndexError if it does not exist."""
        self._check_index(index)
        self._inputs[index] = bool(value)

    def get_input(self, index: int) -> bool:
        """Return the input at ``index``; raise IndexError if it does not exist."""
        self._check_index(index)
        return self._inputs[index]

    def add_input(self, value: bool) -> None:
        """Append a new input with the given value."""
        self._inputs.append(bool(value))

    def reset(self) -> None:
        """Clear the output signal."""
        self._output = False

    @property
    def output(self) -> bool:
        return self._output

    @property
    def id(self) -> int:
        return self._id

    @property
    def label(self) -> str:
        return self._label

    @property
    def type(self) -> GateType:
        return self._type

    @property
    def input_count(self) -> int:
        return len(self._inputs)

    @property
    def inputs(self) -> tuple[bool, ...]:
        return tuple(self._inputs)

    def _require_at_least_two(self, name: str) -> None:
        if len(self._inputs) < 2:
            raise ValueError(f"{name}: At least 2 inputs are required.")

    def _require_exactly_one(self, message: str) -> None:
        if len(self._inputs) != 1:
            raise ValueError(message)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(label={self._label!r}, "
            f"inputs={self._inputs!r}, output={self._output!r})"
        )


class AndGate(Gate):
    """Output is true when every input is true."""

    initial_inputs = 2

    def __init__(self, label: str = "") -> None:
        super().__init__(GateType.AND, label)

    def evaluate(self) -> None:
        self._require_at_least_two("ANDGate")
        self._output = all(self._inputs)


class OrGate(Gate):
    """Output is true when any input is true."""

    initial_inputs = 2

    def __init__(self, label: str = "") -> None:
        super().__init__(GateType.OR, label)

    def evaluate(self) -> None:
        self._require_at_least_two("ORGate")
        self._output = any(self._inputs)


class NotGate(Gate):
    """Output is the inverse of its single input."""

    initial_inputs = 1

    def __init__(self, label: str = "") -> None:
        super().__init__(GateType.NOT, label)

    def evaluate(self) -> None:
        self._require_exactly_one("NOTGate: Exactly one input is required.")
        self._output = not self._inputs[0]


class NandGate(Gate):
    """Inverted AND."""

    initial_inputs = 2

    def __init__(self, label: str = "") -> None:
        super().__init__(GateType.NAND, label)

    def evaluate(self) -> None:
        self._require_at_least_two("NANDGate")
        self._output = not all(self._inputs)


class NorGate(Gate):
    """Inverted OR."""

    initial_inputs = 2

    def __init__(self, label: str = "") -> None:
        super().__init__(GateType.NOR, label)

    def evaluate(self) -> None:
        self._require_at_least_two("NORGate")
        self._output = not any(self._inputs)


class XorGate(Gate):
    """Output is true when an odd number of inputs are true."""

    initial_inputs = 2

    def __init__(self, label: str = "") -> None:
        super().__init__(GateType.XOR, label)

    def evaluate(self) -> None:
        self._require_at_least_two("XORGate")
        self._output = sum(self._inputs) % 2 == 1


class XnorGate(Gate):
    """Output is true when an even number of inputs are true."""

    initial_inputs = 2

    def __init__(self, label: str = "") -> None:
        super().__init__(GateType.XNOR, label)

    def evaluate(self) -> None:
        self._require_at_least_two("XNORGate")
        self._output = sum(self._inputs) % 2 == 0


class BufferGate(Gate):
    """Output follows its single input."""

    initial_inputs = 1

    def __init__(self, label: str = "") -> None:
        super().__init__(GateType.BUFFER, label)

    def evaluate(self) -> None:
        self._require_exactly_one("BufferGate: Exactly 1 input is required.")
        self._output = self._inputs[0]