# logicsim

A small digital logic simulator. You create basic gates, set their inputs, evaluate them, and print
their truth tables. You can use it from an interactive prompt or as a Python library.

## Installation

```
pip install .
```

## Interactive use

```
logicsim
```

The `logicsim` command reads commands from standard input and stops at `exit` or at end of input.
You can also start the prompt with `python -m logicsim.simulator`.

| Command                 | Effect                                                    |
|-------------------------|-----------------------------------------------------------|
| `create <type> <name>`  | Create a new gate                                         |
| `list`                  | Show all created gates, sorted by name                    |
| `set <name> <inputs>`   | Set all of a gate's inputs, e.g. `set g 1 0`              |
| `eval <name>`           | Evaluate a gate and show its output                       |
| `info <name>`           | Show a gate's type, current inputs and last output        |
| `table <name>`          | Print the gate's truth table                              |
| `test <name>`           | Check the gate against its expected outputs and report    |
| `delete <name>`         | Delete a gate                                             |
| `clear`                 | Clear the screen (ANSI escape codes)                      |
| `help`                  | Show the command list                                     |
| `exit`                  | Leave the simulator                                       |

The gate types are `and`, `or`, `not`, `nand`, `nor`, `xor`, `xnor` and `buffer`. Gate types are not
case-sensitive. Command names are not case-sensitive either. `not` and `buffer` gates have one input.
The other gates have two. An input value is written as `0`, `1`, `true` or `false`. The `set` command
must be given exactly as many values as the gate has inputs.

Example session:

```
> create xor x1
✓ Created xor gate 'x1' with 2 inputs
> set x1 1 0
✓ Set inputs for 'x1': 1 0
> eval x1
Output: 1 (true)
```

## Library use

The package has four modules:

- `logicsim.gates`: `GateType`, the abstract `Gate` and the concrete gates `AndGate`, `OrGate`, `NotGate`,
  `NandGate`, `NorGate`, `XorGate`, `XnorGate` and `BufferGate`. A gate has these members:
  - `set_input`, `get_input` and `add_input`
  - `evaluate` and `reset`
  - the properties `output`, `id`, `label`, `type`, `input_count` and `inputs`

  Reading or writing an input that does not exist raises `IndexError`. Evaluating a gate with too few
  inputs raises `ValueError`.
- `logicsim.factory`: `create_gate`, `is_valid_gate_type`, `supported_types` and `gate_type_name`.
- `logicsim.truth_table`: `TruthTable` and `TruthTableRow`. Row `i` of a table holds the inputs given
  by the bits of `i`, with input `k` taken from bit `k`. A table has these members:
  - `evaluate_gate`, `accuracy()`, `mismatches()` and `is_passing()`
  - `render()`, `print_to_console()`, `validation_report()` and `highlight_errors()`
  - `add_row`, `set_expected_outputs` and `reset`
- `logicsim.simulator`: `InteractiveSimulator`, which writes to any text stream, and the helpers
  `parse_input`, `parse_gate_type`, `is_known_command`, `expected_output` and `expected_results`.

```python
from logicsim.factory import create_gate
from logicsim.gates import GateType
from logicsim.simulator import expected_results
from logicsim.truth_table import TruthTable

gate = create_gate(GateType.NAND, "n1")
gate.set_input(0, True)
gate.set_input(1, True)
gate.evaluate()
print(gate.output)          # False

table = TruthTable(gate, expected_results(GateType.NAND, gate.input_count))
table.evaluate_gate()
print(table.render())
print(table.is_passing())   # True
```

`InteractiveSimulator.run` takes any iterable of command lines. You can use it to script a session:

```python
import io
from logicsim.simulator import InteractiveSimulator

out = io.StringIO()
InteractiveSimulator(out).run(["create and a", "set a 1 1", "eval a", "exit"])
print(out.getvalue())
```

## What it does not do

- Each gate is evaluated on its own. Gates cannot be connected into circuits.
- Only combinational gates are available. `GateType.FLIP_FLOP` and `GateType.LATCH` exist in the
  enumeration, but `create_gate` rejects them.
- A session is not saved. All gates are lost when the simulator exits.

## Running the tests

```
pip install .[test]
pytest
```