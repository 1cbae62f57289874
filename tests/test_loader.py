import pytest

from simulator.errors import MalformedRuleError, ProgramLoadError, TapeLoadWarning
from simulator.loader import load_program, load_tape, parse_program_lines, parse_tape_lines
from simulator.models import Action, MachineConfig, Motion

PROGRAM = (
    "# unary increment\n"
    "\n"
    "1\t0\t1\t0\tR\n"
    "1\t~\tHALT\t1\tN\n"
)


def test_parse_program_skips_comments_and_blank_lines():
    rules = parse_program_lines(PROGRAM.splitlines(keepends=True))
    assert len(rules) == 2
    assert rules[0].line_no == 3
    assert rules[1].cur_state == "1"
    assert rules[1].read_symbol == "~"
    assert rules[1].action == Action("HALT", "1", Motion.STAY)


def test_parse_program_handles_crlf():
    rules = parse_program_lines(["1\t0\t1\t0\tR\r\n"])
    assert rules[0].action.motion == "R"


def test_space_is_a_valid_symbol():
    rules = parse_program_lines(["1\t \t2\t \tN\n"])
    assert rules[0].read_symbol == " "


@pytest.mark.parametrize("line", ["1\t0\t1\t0\n", "1\t0\t1\t0\tR\textra\n", "1 0 1 0 R\n"])
def test_wrong_field_count_is_malformed(line):
    with pytest.raises(MalformedRuleError) as exc:
        parse_program_lines(["# header\n", line])
    assert exc.value.line_no == 2


def test_custom_delimiter():
    rules = parse_program_lines(["1;0;1;0;R\n"], MachineConfig(field_delimiter=";"))
    assert rules[0].action.final_state == "1"


def test_load_program_builds_table(write_file):
    path = write_file("program.turing", PROGRAM)
    table = load_program(path)
    assert table.lookup("1", "~") == Action("HALT", "1", Motion.STAY)
    assert table.warnings == []


def test_load_program_reports_duplicates(write_file):
    path = write_file("program.turing", "1\ta\t2\tb\tN\n1\ta\t3\tc\tN\n")
    table = load_program(path)
    assert table.lookup("1", "a").final_state == "3"
    assert len(table.warnings) == 1
    assert "line 2" in str(table.warnings[0])


def test_load_program_rejects_bad_motion(write_file):
    path = write_file("program.turing", "1\t0\t1\t0\tR\n1\t1\t1\t0\tU\n")
    with pytest.raises(MalformedRuleError, match="Line 2"):
        load_program(path)


def test_missing_file(tmp_path):
    with pytest.raises(ProgramLoadError, match="not found"):
        load_program(tmp_path / "nope.turing")
    with pytest.raises(ProgramLoadError):
        load_tape(tmp_path / "nope.turing")


def test_parse_tape_keeps_last_line():
    symbols, discarded = parse_tape_lines(["# tape\n", "abc\n", "\n", "0011\n"])
    assert symbols == ["0", "0", "1", "1"]
    assert discarded == 1


def test_parse_tape_without_data_is_empty():
    assert parse_tape_lines(["# only a comment\n", "\n"]) == ([], 0)


def test_load_tape_uses_config_blank(write_file):
    path = write_file("tape.turing", "01\n")
    tape, warnings = load_tape(path, MachineConfig(blank_symbol="_"))
    assert str(tape) == "01"
    assert tape.read(2) == "_"
    assert warnings == []


def test_load_tape_flags_discarded_lines(write_file):
    path = write_file("tape.turing", "first\nsecond\nthird\n")
    tape, warnings = load_tape(path)
    assert str(tape) == "third"
    assert len(warnings) == 1
    assert isinstance(warnings[0], TapeLoadWarning)
    assert warnings[0].discarded == 2
