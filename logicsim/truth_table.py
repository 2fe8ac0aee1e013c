"""Truth tables that check a gate against its expected outputs."""

from __future__ import annotations

import math
import sys
from dataclasses import dataclass
from typing import Optional, Sequence, TextIO

from .gates import Gate


def _bit(value: bool) -> str:
    return "1" if value else "0"


def _format_number(value: float) -> str:
    return f"{value:g}"


@dataclass
class TruthTableRow:
    """One input combination with its expected and actual output."""

    inputs: list[bool]
    expected_output: bool
    actual_output: bool = False
    is_match: bool = False


class TruthTable:
    """All input combinations of a gate, checked against expected outputs.

    Row ``i`` holds the inputs whose bit ``k`` of ``i`` is input ``k``.
    """

    def __init__(self, gate: Optional[Gate], expected_results: Sequence[bool]) -> None:
        if gate is None:
            raise ValueError("Gate pointer cannot be null")
        self._gate: Optional[Gate] = gate
        self._num_inputs = gate.input_count
        self._rows: list[TruthTableRow] = []
        if len(expected_results) != 1 << self._num_inputs:
            raise ValueError("Expected results size does not match number of rows")
        self.generate_input_combinations(self._num_inputs)
        self.set_expected_outputs(expected_results)

    def generate_input_combinations(self, num_inputs: int) -> None:
        """Replace the rows with every combination of ``num_inputs`` inputs."""
        self._rows = [
            TruthTableRow(
                [bool((combination >> bit) & 1) for bit in range(num_inputs)],
                False,
            )
            for combination in range(1 << num_inputs)
        ]

    def evaluate_gate(self) -> None:
        """Run the gate on every row, record its output and compare results."""
        if self._gate is None:
            raise ValueError("No gate to evaluate")
        for row in self._rows:
            self.set_gate_inputs(self._gate, row.inputs)
            self._gate.evaluate()
            row.actual_output = self._gate.output
        self.compare_results()

    def set_gate_inputs(self, gate: Gate, inputs: Sequence[bool]) -> None:
        """Apply ``inputs`` to ``gate``; their number must match the gate's."""
        if len(inputs) != gate.input_count:
            raise ValueError(
                "Number of inputs does not match gate's expected input count"
            )
        for index, value in enumerate(inputs):
            gate.set_input(index, value)

    def compare_results(self) -> None:
        """Mark each row as matching when its outputs agree."""
        for row in self._rows:
            row.is_match = row.expected_output == row.actual_output

    def header_line(self) -> str:
        columns = "".join(f"\tI{index}" for index in range(self._num_inputs))
        return f"Inputs{columns}\tExpected\tActual\tMatch"

    def row_line(self, row: TruthTableRow) -> str:
        cells = "".join(f"\t{_bit(value)}" for value in row.inputs)
        return (
            f"Row{cells}\t{_bit(row.expected_output)}"
            f"\t{_bit(row.actual_output)}\t{_bit(row.is_match)}"
        )

    def separator_line(self) -> str:
        return "-" * (5 * self._num_inputs + 5)

    def render(self) -> str:
        """Return the formatted table with its totals."""
        separator = self.separator_line()
        lines = [separator, self.header_line(), separator]
        lines.extend(self.row_line(row) for row in self._rows)
        lines.append(separator)
        lines.append(f"Total Rows: {len(self._rows)}")
        lines.append(f"Accuracy: {_format_number(self.accuracy())}")
        return "\n".join(lines) + "\n"

    def print_to_console(self, file: Optional[TextIO] = None) -> None:
        """Write the formatted table to ``file`` (standard output by default)."""
        (file if file is not None else sys.stdout).write(self.render())

    def set_expected_outputs(self, expected_outputs: Sequence[bool]) -> None:
        """Assign one expected output per row and clear the match flags."""
        if len(expected_outputs) != len(self._rows):
            raise ValueError("Expected outputs size does not match number of rows")
        for row, expected in zip(self._rows, expected_outputs):
            row.expected_output = bool(expected)
            row.is_match = False

    def validate_results(self) -> None:
        """Refresh the match flags of all rows."""
        self.compare_results()

    def accuracy(self) -> float:
        """Percentage of matching rows; NaN for an empty table."""
        if not self._rows:
            return math.nan
        matches = sum(row.is_match for row in self._rows)
        return matches / len(self._rows) * 100

    def mismatches(self) -> list[int]:
        """Indices of the rows that do not match."""
        return [index for index, row in enumerate(self._rows) if not row.is_match]

    def validation_report(self) -> str:
        """Return a summary of passing and failing rows."""
        failing = self.mismatches()
        total = len(self._rows)
        lines = [
            f"Total number of test cases: {total}",
            f"Number of passing test cases: {total - len(failing)}",
            f"Number of failing test cases: {len(failing)}",
            f"Accuracy: {_format_number(self.accuracy())}%",
            "Mismatches: " + "".join(f"{index} " for index in failing),
            "Test passed!" if not failing else "Test failed!",
        ]
        return "\n".join(lines) + "\n"

    def highlight_errors(self) -> str:
        """Return the formatted lines of the rows that do not match."""
        return "".join(
            self.row_line(row) + "\n" for row in self._rows if not row.is_match
        )

    @property
    def num_inputs(self) -> int:
        return self._num_inputs

    @property
    def num_rows(self) -> int:
        if not self._rows:
            raise ValueError("Number of rows cannot be zero")
        return len(self._rows)

    @property
    def rows(self) -> tuple[TruthTableRow, ...]:
        if not self._rows:
            raise ValueError("Number of rows cannot be zero")
        return tuple(self._rows)

    def is_passing(self) -> bool:
        """Whether every row matches."""
        return self.accuracy() == 100.0

    def reset(self) -> None:
        """Drop all rows and detach the gate."""
        self._rows = []
        self._num_inputs = 0
        self._gate = None

    def add_row(self, inputs: Sequence[bool], expected_output: bool) -> None:
        """Append a row; the number of inputs must match the table's."""
        if len(inputs) != self._num_inputs:
            raise ValueError(
                "Number of inputs does not match number of inputs in truth table"
            )
        self._rows.append(TruthTableRow(list(inputs), bool(expected_output)))