from rich.console import Console

from simulator.models import MachineStatus
from simulator.supervisor import USER_STOP

STOP_MESSAGES = {
    MachineStatus.HALTED_NO_RULE: "Machine has stopped. Final contents of the tape is:",
    MachineStatus.HALTED_OUT_OF_BOUNDS: "Machine has stopped. Final contents of the tape is:",
    MachineStatus.HALTED_BY_REQUEST: "User has stopped the machine. Contents of the tape is:",
}
SUPERVISOR_STOP_MESSAGE = "Machine has been stopped. Contents of the tape is:"

HALT_REASONS = {
    MachineStatus.HALTED_NO_RULE: "no rule for the current state and tape symbol",
    MachineStatus.HALTED_OUT_OF_BOUNDS: "head moved over the left edge of the tape",
    MachineStatus.HALTED_BY_REQUEST: "stopped on request",
}


def plain_console():
    """Console that prints tape contents verbatim (no markup, emoji codes or highlighting)."""
    return Console(emoji=False, markup=False, highlight=False)


def print_plain(console, text, **kwargs):
    # ':name:' sequences are valid tape symbols, not emoji codes.
    console.print(text, markup=False, emoji=False, highlight=False, soft_wrap=True, **kwargs)


def caret_row(head):
    if head < 0:
        return "<"
    return " " * head + "^"


def stop_message(result):
    if result.status is MachineStatus.HALTED_BY_REQUEST and result.detail not in (None, USER_STOP):
        return SUPERVISOR_STOP_MESSAGE
    return STOP_MESSAGES[result.status]


class StatePrinter:
    """Observer printing the machine state, the tape and a caret under the head."""

    def __init__(self, console=None):
        self.console = console or plain_console()

    def __call__(self, tape, head, state):
        print_plain(self.console, f"Machine state: {state}")
        print_plain(self.console, "".join(tape))
        print_plain(self.console, caret_row(head))
        print_plain(self.console, "--next step--")


def render_final_report(result, console=None):
    console = console or plain_console()
    reason = result.detail or HALT_REASONS[result.status]
    print_plain(console, stop_message(result))
    print_plain(console, result.tape_string)
    print_plain(console, f"Halt reason: {reason} (after {result.steps} steps, state {result.state})")
