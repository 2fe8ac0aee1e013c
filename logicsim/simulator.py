"""Interactive command-line simulator for single logic gates."""

from __future__ import annotations

import argparse
import sys
from types import MappingProxyType
from typing import Iterable, Mapping, Optional, Sequence, TextIO

from .factory import create_gate, gate_type_name
from .gates import Gate, GateType
from .truth_table import TruthTable

_GATE_TYPES_BY_NAME: dict[str, GateType] = {
    "and": GateType.AND,
    "or": GateType.OR,
    "not": GateType.NOT,
    "nand": GateType.NAND,
    "nor": GateType.NOR,
    "xor": GateType.XOR,
    "xnor": GateType.XNOR,
    "buffer": GateType.BUFFER,
}

_COMMANDS = frozenset(
    {
        "create",
        "help",
        "exit",
        "clear",
        "list",
        "set",
        "eval",
        "table",
        "info",
        "delete",
        "test",
    }
)

_INPUT_VALUES: dict[str, bool] = {"1": True, "true": True, "0": False, "false": False}

_HELP_TEXT = """\
Available Commands:
  create <type> <name>  - Create a new gate
  list                  - Show all created gates
  set <name> <inputs>   - Set gate inputs (e.g., set MyGate 1 0)
  eval <name>           - Evaluate gate and show output
  info <name>           - Show gate information
  table <name>          - Generate truth table for gate
  test <name>           - Interactive testing mode
  delete <name>         - Delete a gate
  clear                 - Clear screen
  help                  - Show this help message
  exit                  - Exit the simulator

Gate types: and, or, not, nand, nor, xor, xnor, buffer"""

_CLEAR_SCREEN = "\033[2J\033[1;1H"


def _bit(value: bool) -> str:
    return "1" if value else "0"


def parse_input(line: str) -> list[str]:
    """Split a command line into whitespace-separated tokens."""
    return line.split()


def parse_gate_type(text: str) -> GateType:
    """Return the gate type named by ``text`` (case-insensitive)."""
    try:
        return _GATE_TYPES_BY_NAME[text.lower()]
    except KeyError:
        raise ValueError(f"Unknown gate type: {text}") from None


def is_known_command(tokens: Sequence[str]) -> bool:
    """Whether the first token is one of the simulator's commands."""
    return bool(tokens) and tokens[0] in _COMMANDS


def expected_output(gate_type: GateType, inputs: Sequence[bool]) -> bool:
    """The output a gate of ``gate_type`` should produce for ``inputs``."""
    ones = sum(bool(value) for value in inputs)
    if gate_type is GateType.AND:
        return all(inputs)
    if gate_type is GateType.OR:
        return any(inputs)
    if gate_type is GateType.NOT:
        return not inputs[0]
    if gate_type is GateType.NAND:
        return not all(inputs)
    if gate_type is GateType.NOR:
        return not any(inputs)
    if gate_type is GateType.XOR:
        return ones % 2 == 1
    if gate_type is GateType.XNOR:
        return ones % 2 == 0
    if gate_type is GateType.BUFFER:
        return bool(inputs[0])
    return False


def expected_results(gate_type: GateType, num_inputs: int) -> list[bool]:
    """Expected outputs for every input combination, in truth-table order."""
    return [
        expected_output(
            gate_type, [bool((combination >> bit) & 1) for bit in range(num_inputs)]
        )
        for combination in range(1 << num_inputs)
    ]


class InteractiveSimulator:
    """Holds named gates and executes text commands against them."""

    def __init__(self, out: Optional[TextIO] = None) -> None:
        self._out = out if out is not None else sys.stdout
        self._gates: dict[str, Gate] = {}
        self._running = True
        self._handlers = {
            "create": self._handle_create,
            "list": self._handle_list,
            "set": self._handle_set,
            "eval": self._handle_eval,
            "table": self._handle_table,
            "info": self._handle_info,
            "delete": self._handle_delete,
            "test": self._handle_test,
            "help": self._handle_help,
            "exit": self._handle_exit,
            "clear": self._handle_clear,
        }

    @property
    def running(self) -> bool:
        return self._running

    @property
    def gates(self) -> Mapping[str, Gate]:
        return MappingProxyType(self._gates)

    def _say(self, text: str = "") -> None:
        print(text, file=self._out)

    def display_welcome_message(self) -> None:
        self._say("=== Digital Logic Simulator ===")
        self._say("Type 'help' for available commands")
        self._say("Available gate types: and, or, not, nand, nor, xor, xnor, buffer")
        self._say()

    def display_prompt(self) -> None:
        self._out.write("> ")
        self._out.flush()

    def execute_command(self, line: str) -> None:
        """Parse and run one command line, reporting errors on the output."""
        tokens = parse_input(line)
        if not tokens:
            return
        command = tokens[0].lower()
        handler = self._handlers.get(command)
        if handler is None:
            self._say(
                f"Unknown command: {command}. Type 'help' for available commands."
            )
            return
        try:
            handler(tokens)
        except (ValueError, IndexError) as error:
            self._say(f"Error: {error}")

    def clean_up(self) -> None:
        self._gates.clear()
        self._say("Goodbye!")

    def run(self, lines: Iterable[str]) -> None:
        """Run a whole session over ``lines`` until exit or end of input."""
        self.display_welcome_message()
        iterator = iter(lines)
        while self._running:
            self.display_prompt()
            try:
                line = next(iterator)
            except StopIteration:
                break
            self.execute_command(line.rstrip("\r\n"))
        self.clean_up()

    def _find(self, name: str) -> Optional[Gate]:
        gate = self._gates.get(name)
        if gate is None:
            self._say(f"Gate '{name}' not found.")
        return gate

    def _handle_create(self, tokens: list[str]) -> None:
        if len(tokens) != 3:
            self._say("Usage: create <gate_type> <name>")
            self._say("Example: create and MyAndGate")
            return
        type_text, name = tokens[1], tokens[2]
        if name in self._gates:
            self._say(f"Gate '{name}' already exists!")
            return
        try:
            gate = create_gate(parse_gate_type(type_text), name)
        except ValueError as error:
            self._say(f"✗ Error: {error}")
            return
        self._gates[name] = gate
        self._say(
            f"✓ Created {type_text} gate '{name}' with {gate.input_count} inputs"
        )

    def _handle_list(self, tokens: list[str]) -> None:
        if not self._gates:
            self._say(
                "No gates created yet. Use 'create <type> <name>' to create a gate."
            )
            return
        self._say("Active Gates:")
        for name in sorted(self._gates):
            gate = self._gates[name]
            self._say(
                f"- {name} ({gate_type_name(gate.type)}, {gate.input_count} inputs)"
            )

    def _handle_set(self, tokens: list[str]) -> None:
        if len(tokens) < 3:
            self._say("Usage: set <gate_name> <input1> <input2> ...")
            self._say("Example: set MyAndGate 1 0")
            return
        name = tokens[1]
        gate = self._find(name)
        if gate is None:
            return
        values: list[bool] = []
        for token in tokens[2:]:
            if token not in _INPUT_VALUES:
                self._say(
                    f"Invalid input value: {token}. Use 0, 1, true, or false."
                )
                return
            values.append(_INPUT_VALUES[token])
        if len(values) != gate.input_count:
            self._say(
                f"Gate '{name}' expects {gate.input_count} inputs, got {len(values)}"
            )
            return
        for index, value in enumerate(values):
            gate.set_input(index, value)
        shown = "".join(f"{_bit(value)} " for value in values)
        self._say(f"✓ Set inputs for '{name}': {shown}")

    def _handle_eval(self, tokens: list[str]) -> None:
        if len(tokens) != 2:
            self._say("Usage: eval <gate_name>")
            return
        gate = self._find(tokens[1])
        if gate is None:
            return
        gate.evaluate()
        output = gate.output
        self._say(f"Output: {_bit(output)} ({'true' if output else 'false'})")

    def _handle_info(self, tokens: list[str]) -> None:
        if len(tokens) != 2:
            self._say("Usage: info <gate_name>")
            return
        name = tokens[1]
        gate = self._find(name)
        if gate is None:
            return
        self._say(f"Gate: {name}")
        self._say(f"Type: {gate_type_name(gate.type)}")
        self._say(f"Inputs: {gate.input_count}")
        self._say("Current inputs: " + "".join(f"{_bit(v)} " for v in gate.inputs))
        self._say(f"Last output: {_bit(gate.output)}")

    def _handle_help(self, tokens: list[str]) -> None:
        self._say(_HELP_TEXT)

    def _handle_exit(self, tokens: list[str]) -> None:
        self._running = False
        self._say("Exiting simulator...")

    def _handle_clear(self, tokens: list[str]) -> None:
        self._out.write(_CLEAR_SCREEN)

    def _build_table(self, gate: Gate) -> TruthTable:
        table = TruthTable(gate, expected_results(gate.type, gate.input_count))
        table.evaluate_gate()
        return table

    def _handle_table(self, tokens: list[str]) -> None:
        if len(tokens) != 2:
            self._say("Usage: table <gate_name>")
            return
        name = tokens[1]
        gate = self._gates.get(name)
        if gate is None:
            self._say(f"Gate not found: {name}")
            self._show_available_gates()
            return
        self._say(
            f"Generating Truth Table for '{name}' "
            f"({gate_type_name(gate.type)} gate)..."
        )
        self._say()
        table = self._build_table(gate)
        table.print_to_console(self._out)
        self._say()
        self._say("Truth table generated successfully!")
        self._say(f"Total combinations: {1 << gate.input_count}")

    def _handle_test(self, tokens: list[str]) -> None:
        if len(tokens) != 2:
            self._say("Usage: test <gate_name>")
            return
        gate = self._find(tokens[1])
        if gate is None:
            return
        self._out.write(self._build_table(gate).validation_report())

    def _handle_delete(self, tokens: list[str]) -> None:
        if len(tokens) != 2:
            self._say("Usage: delete <gate_name>")
            return
        name = tokens[1]
        if self._find(name) is None:
            return
        del self._gates[name]
        self._say(f"✓ Deleted gate '{name}'")

    def _show_available_gates(self) -> None:
        if not self._gates:
            self._say("No gates have been created yet.")
            return
        self._say("Available gates:")
        for name in sorted(self._gates):
            self._say(f"- {name} ({gate_type_name(self._gates[name].type)})")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run an interactive session on standard input and output."""
    parser = argparse.ArgumentParser(
        prog="logicsim", description="Interactive digital logic gate simulator."
    )
    parser.parse_args(argv)
    InteractiveSimulator(sys.stdout).run(sys.stdin)
    return 0


if __name__ == "__main__":
    sys.exit(main())