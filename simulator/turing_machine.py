import time

from simulator.models import INITIAL_STATE, MachineSnapshot, MachineStatus, RunResult, StepOutcome
from simulator.tape import Tape


class TuringMachine:
    """
    Single-tape deterministic machine driven one transition at a time.

    The observer is called as ``observer(tape_contents, head, state)`` once for
    the initial configuration and once after every applied transition. The
    supervisor is called as ``supervisor(snapshot, elapsed_seconds)`` after
    each observed step and stops the machine by returning False. Its own
    running time is left out of the elapsed seconds it is given.
    """

    def __init__(self, table, tape, initial_state=INITIAL_STATE, observer=None, supervisor=None,
                 clock=time.monotonic):
        self.table = table
        self.tape = tape
        self.initial_state = initial_state
        self.observer = observer
        self.supervisor = supervisor
        self.clock = clock
        self._initial_cells = tape.render()
        self._rewind()

    # === Read-only state ===
    @property
    def state(self):
        return self._state

    @property
    def head(self):
        return self._head

    @property
    def steps(self):
        return self._steps

    @property
    def status(self):
        return self._status

    @property
    def halted(self):
        return self._status.is_terminal

    def snapshot(self):
        return MachineSnapshot(self._steps, self._state, self._head, tuple(self.tape.render()))

    # === Stepping ===
    def _emit(self):
        if self.observer is not None:
            self.observer(self.tape.render(), self._head, self._state)

    def _halt(self, status):
        self._status = status
        return StepOutcome(status, self.snapshot())

    def step(self) -> StepOutcome:
        if self.halted:
            return StepOutcome(self._status, self.snapshot())

        if not self._started:
            self._started = True
            self._started_at = self.clock()
            self._emit()

        # A head that walked off the left edge never reaches the table.
        if self._head < 0:
            return self._halt(MachineStatus.HALTED_OUT_OF_BOUNDS)

        symbol = self.tape.read(self._head)
        action = self.table.lookup(self._state, symbol)
        if action is None:
            return self._halt(MachineStatus.HALTED_NO_RULE)

        self.tape.write(self._head, action.print_symbol)
        self._head += action.motion.delta
        self._state = action.final_state
        self._steps += 1
        self._emit()

        snapshot = self.snapshot()
        if self.supervisor is not None:
            # Time spent inside the supervisor (e.g. at a prompt) is not running time.
            paused_at = self.clock()
            elapsed = paused_at - self._started_at - self._supervised
            keep_going = self.supervisor(snapshot, elapsed)
            self._supervised += self.clock() - paused_at
            if not keep_going:
                self._status = MachineStatus.HALTED_BY_REQUEST
                self._detail = getattr(self.supervisor, "stop_message", None)
        return StepOutcome(self._status, snapshot)

    def run(self, supervisor=None) -> RunResult:
        if supervisor is not None:
            self.supervisor = supervisor
        while not self.halted:
            self.step()
        return RunResult(self._status, self._steps, self._state, self._head, tuple(self.tape.render()),
                         self._detail)

    def reset(self):
        """Rewind to the initial tape, state and head position."""
        self.tape = Tape(self._initial_cells, blank_symbol=self.tape.blank_symbol)
        self._rewind()

    def _rewind(self):
        self._state = self.initial_state
        self._head = 0
        self._steps = 0
        self._status = MachineStatus.RUNNING
        self._started = False
        self._started_at = None
        self._supervised = 0.0
        self._detail = None
