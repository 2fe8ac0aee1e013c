import io
import math

import pytest

from logicsim.gates import AndGate, NotGate, OrGate, XorGate
from logicsim.truth_table import TruthTable, TruthTableRow


def _correct_and_table():
    gate = AndGate("A")
    table = TruthTable(gate, [False, False, False, True])
    return table


def test_rows_cover_every_combination_in_bit_order():
    table = TruthTable(OrGate("O"), [False, True, True, True])
    rows = table.rows
    assert table.num_rows == 4
    assert table.num_inputs == 2
    for index, row in enumerate(rows):
        assert sum(int(v) << bit for bit, v in enumerate(row.inputs)) == index
        assert row.actual_output is False
        assert row.is_match is False


def test_generate_input_combinations_three_inputs():
    table = _correct_and_table()
    table.generate_input_combinations(3)
    rows = table.rows
    assert len(rows) == 8
    assert len({tuple(r.inputs) for r in rows}) == 8
    assert all(len(r.inputs) == 3 for r in rows)


def test_expected_outputs_are_assigned_in_order():
    expected = [False, True, True, False]
    table = TruthTable(XorGate("X"), expected)
    assert [r.expected_output for r in table.rows] == expected


def test_evaluate_correct_and_gate_passes():
    table = _correct_and_table()
    table.evaluate_gate()
    assert table.is_passing()
    assert table.accuracy() == 100.0
    assert table.mismatches() == []
    for row in table.rows:
        assert row.actual_output == all(row.inputs)
        assert row.is_match


def test_evaluate_with_wrong_expectation_reports_mismatch():
    table = TruthTable(AndGate("A"), [False, False, False, False])
    table.evaluate_gate()
    assert table.mismatches() == [3]
    assert table.accuracy() == 75.0
    assert not table.is_passing()


def test_not_gate_table_has_two_rows():
    table = TruthTable(NotGate("N"), [True, False])
    table.evaluate_gate()
    assert table.num_rows == 2
    assert table.is_passing()


def test_constructor_rejects_missing_gate():
    with pytest.raises(ValueError, match="null"):
        TruthTable(None, [])


def test_constructor_rejects_wrong_expected_size():
    with pytest.raises(ValueError):
        TruthTable(AndGate("A"), [True, False])


def test_set_expected_outputs_wrong_size():
    table = _correct_and_table()
    with pytest.raises(ValueError):
        table.set_expected_outputs([True])


def test_set_expected_outputs_clears_match_flags():
    table = _correct_and_table()
    table.evaluate_gate()
    table.set_expected_outputs([False, False, False, True])
    assert not any(r.is_match for r in table.rows)
    table.validate_results()
    assert table.is_passing()


def test_set_gate_inputs_applies_values_and_checks_count():
    table = _correct_and_table()
    gate = AndGate("B")
    table.set_gate_inputs(gate, [True, False])
    assert gate.inputs == (True, False)
    with pytest.raises(ValueError):
        table.set_gate_inputs(gate, [True])


def test_add_row_appends_and_validates_length():
    table = _correct_and_table()
    table.add_row([True, True], True)
    assert table.num_rows == 5
    assert table.rows[-1] == TruthTableRow([True, True], True)
    with pytest.raises(ValueError):
        table.add_row([True], False)


def test_reset_empties_table():
    table = _correct_and_table()
    table.reset()
    assert table.num_inputs == 0
    assert math.isnan(table.accuracy())
    with pytest.raises(ValueError):
        _ = table.num_rows
    with pytest.raises(ValueError):
        _ = table.rows
    with pytest.raises(ValueError):
        table.evaluate_gate()


def test_header_and_row_lines():
    table = _correct_and_table()
    table.evaluate_gate()
    assert table.header_line() == "Inputs\tI0\tI1\tExpected\tActual\tMatch"
    assert table.row_line(table.rows[1]) == "Row\t1\t0\t0\t0\t1"


def test_separator_is_dashes_and_grows_with_inputs():
    two = _correct_and_table()
    one = TruthTable(NotGate("N"), [True, False])
    assert set(two.separator_line()) == {"-"}
    assert len(two.separator_line()) > len(one.separator_line())


def test_render_and_print_to_console_agree():
    table = _correct_and_table()
    table.evaluate_gate()
    text = table.render()
    lines = text.splitlines()
    assert lines[1] == table.header_line()
    assert lines[0] == lines[2] == table.separator_line()
    assert "Total Rows: 4" in lines
    assert lines[-1] == "Accuracy: 100"
    buffer = io.StringIO()
    table.print_to_console(buffer)
    assert buffer.getvalue() == text


def test_validation_report_pass_and_fail():
    good = _correct_and_table()
    good.evaluate_gate()
    assert good.validation_report().splitlines()[-1] == "Test passed!"

    bad = TruthTable(AndGate("A"), [False, False, False, False])
    bad.evaluate_gate()
    report = bad.validation_report().splitlines()
    assert "Mismatches: 3 " in report
    assert report[-1] == "Test failed!"


def test_highlight_errors_lists_only_failing_rows():
    table = TruthTable(AndGate("A"), [False, False, False, False])
    table.evaluate_gate()
    assert table.highlight_errors() == table.row_line(table.rows[3]) + "\n"
    passing = _correct_and_table()
    passing.evaluate_gate()
    assert passing.highlight_errors() == ""