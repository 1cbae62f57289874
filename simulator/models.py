from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple

BLANK = "~"
FIELD_DELIMITER = "\t"
INITIAL_STATE = "1"


class Motion(str, Enum):
    LEFT = "L"
    RIGHT = "R"
    STAY = "N"

    @property
    def delta(self) -> int:
        return {"L": -1, "R": 1, "N": 0}[self.value]


class MachineStatus(str, Enum):
    RUNNING = "running"
    HALTED_NO_RULE = "halted_no_rule"
    HALTED_OUT_OF_BOUNDS = "halted_out_of_bounds"
    HALTED_BY_REQUEST = "halted_by_request"

    @property
    def is_terminal(self) -> bool:
        return self is not MachineStatus.RUNNING


@dataclass(frozen=True)
class MachineConfig:
    """Per-machine constants handed to the loader and the tape."""
    blank_symbol: str = BLANK
    field_delimiter: str = FIELD_DELIMITER

    def __post_init__(self):
        if len(self.blank_symbol) != 1:
            raise ValueError(f"Blank symbol must be a single character, got {self.blank_symbol!r}")
        if not self.field_delimiter:
            raise ValueError("Field delimiter must not be empty")


@dataclass(frozen=True)
class Action:
    final_state: str
    print_symbol: str
    motion: Motion


@dataclass(frozen=True)
class Rule:
    cur_state: str
    read_symbol: str
    action: Action
    line_no: Optional[int] = field(default=None, compare=False)


@dataclass(frozen=True)
class MachineSnapshot:
    step: int
    state: str
    head: int
    tape: Tuple[str, ...]


@dataclass(frozen=True)
class StepOutcome:
    status: MachineStatus
    snapshot: MachineSnapshot

    @property
    def halted(self) -> bool:
        return self.status.is_terminal


@dataclass(frozen=True)
class RunResult:
    status: MachineStatus
    steps: int
    state: str
    head: int
    tape: Tuple[str, ...]
    detail: Optional[str] = None

    @property
    def tape_string(self) -> str:
        return "".join(self.tape)

    def to_dict(self):
        return {
            "status": self.status.value,
            "steps": self.steps,
            "final_state": self.state,
            "head": self.head,
            "final_tape": self.tape_string,
            "detail": self.detail,
        }
