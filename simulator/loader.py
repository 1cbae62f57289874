from pathlib import Path

from simulator.errors import MalformedRuleError, ProgramLoadError, TapeLoadWarning
from simulator.models import Action, MachineConfig, Rule
from simulator.tape import Tape
from simulator.transition_table import TransitionTable

RULE_FIELDS = ("cur_state", "read_symbol", "final_state", "print_symbol", "motion")


def _strip_eol(line):
    return line.rstrip("\r\n")


def _is_skipped(line):
    # Comments are marked by '#' in the first column; empty lines are spacing.
    return line == "" or line.startswith("#")


def _read_lines(path):
    path = Path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            return f.readlines()
    except FileNotFoundError:
        raise ProgramLoadError(f"File not found: {path}") from None
    except (OSError, UnicodeDecodeError) as e:
        raise ProgramLoadError(f"Cannot read {path}: {e}") from e


def parse_program_lines(lines, config=None):
    """Turn program file lines into Rule records (field validation only)."""
    config = config or MachineConfig()
    rules = []
    for line_no, raw in enumerate(lines, start=1):
        line = _strip_eol(raw)
        if _is_skipped(line):
            continue
        fields = line.split(config.field_delimiter)
        if len(fields) != len(RULE_FIELDS):
            raise MalformedRuleError(
                f"expected {len(RULE_FIELDS)} fields ({', '.join(RULE_FIELDS)}), got {len(fields)}",
                line_no,
            )
        cur_state, read_symbol, final_state, print_symbol, motion = fields
        rules.append(Rule(cur_state, read_symbol, Action(final_state, print_symbol, motion), line_no))
    return rules


def load_program(path, config=None):
    return TransitionTable.build(parse_program_lines(_read_lines(path), config))


def parse_tape_lines(lines):
    """
    Return the symbols of the last tape line and how many earlier tape lines
    were discarded. Only the last non-comment line describes the tape.
    """
    tape_lines = [line for line in map(_strip_eol, lines) if not _is_skipped(line)]
    if not tape_lines:
        return [], 0
    return list(tape_lines[-1]), len(tape_lines) - 1


def load_tape(path, config=None):
    symbols, discarded = parse_tape_lines(_read_lines(path))
    warnings = [TapeLoadWarning(discarded, str(path))] if discarded else []
    return Tape.from_sequence(symbols, config), warnings
