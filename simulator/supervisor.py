from rich.prompt import Confirm

USER_STOP = "stopped by the user"


def _confirm(question):
    return Confirm.ask(question)


class TimeBudgetSupervisor:
    """
    Asks the operator whether to keep going each time the machine has run
    for longer than ``time_control_sec`` since the last confirmation.
    A budget of 0 turns the check off.

    ``elapsed`` is running time only; the engine leaves out the time spent
    waiting for an answer, so a slow "yes" still opens a full new window.
    """

    stop_message = USER_STOP

    def __init__(self, time_control_sec, ask=None):
        if time_control_sec < 0:
            raise ValueError("time_control_sec must be non-negative")
        self.time_control_sec = time_control_sec
        self.ask = ask or _confirm
        self._window_start = 0.0

    def __call__(self, snapshot, elapsed):
        if not self.time_control_sec:
            return True
        if elapsed - self._window_start <= self.time_control_sec:
            return True
        keep_going = self.ask(
            f"Program has been running for {round(elapsed)} seconds. Do you want to continue?"
        )
        if keep_going:
            self._window_start = elapsed
        return bool(keep_going)


class StepLimitSupervisor:
    def __init__(self, max_steps):
        if max_steps < 0:
            raise ValueError("max_steps must be non-negative")
        self.max_steps = max_steps
        self.stop_message = f"step limit of {max_steps} steps reached"

    def __call__(self, snapshot, elapsed):
        return not self.max_steps or snapshot.step < self.max_steps


class CombinedSupervisor:
    """Continue only while every supervisor agrees."""

    def __init__(self, supervisors):
        self.supervisors = list(supervisors)
        self.stop_message = None

    def __call__(self, snapshot, elapsed):
        # Stop at the first refusal so later prompts are not shown.
        for supervisor in self.supervisors:
            if not supervisor(snapshot, elapsed):
                self.stop_message = getattr(supervisor, "stop_message", None)
                return False
        return True


def combine_supervisors(*supervisors):
    """Returns None when no supervisor is given."""
    active = [s for s in supervisors if s is not None]
    if not active:
        return None
    if len(active) == 1:
        return active[0]
    return CombinedSupervisor(active)
