import pytest

from simulator.models import Action, Rule
from simulator.tape import Tape
from simulator.transition_table import TransitionTable


def make_rule(cur, read, final, write, motion):
    return Rule(cur, read, Action(final, write, motion))


@pytest.fixture
def increment_table():
    return TransitionTable.build([
        make_rule("1", "0", "1", "0", "R"),
        make_rule("1", "~", "HALT", "1", "N"),
    ])


@pytest.fixture
def left_table():
    return TransitionTable.build([make_rule("1", "x", "1", "x", "L")])


@pytest.fixture
def write_file(tmp_path):
    def _write(name, text):
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path
    return _write


@pytest.fixture
def zero_tape():
    return Tape.from_sequence("000")
