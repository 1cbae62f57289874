class TouringError(Exception):
    """Base class for every error raised by the simulator."""


class MalformedRuleError(TouringError, ValueError):
    def __init__(self, message, line_no=None):
        self.line_no = line_no
        if line_no is not None:
            message = f"Line {line_no}: {message}"
        super().__init__(f"Incorrect input program: {message}")


class ProgramLoadError(TouringError):
    pass


class InvalidWriteError(TouringError):
    pass


class TapeBoundaryError(TouringError, IndexError):
    pass


# === Non-fatal notifications ===
class DuplicateRuleWarning(UserWarning):
    def __init__(self, state, symbol, line_no=None):
        self.state = state
        self.symbol = symbol
        self.line_no = line_no
        where = f" (line {line_no})" if line_no is not None else ""
        super().__init__(
            f"Ambiguous command for state '{state}' and tape symbol '{symbol}'{where}! "
            "The last definition in program will be used."
        )


class TapeLoadWarning(UserWarning):
    def __init__(self, discarded, path=None):
        self.discarded = discarded
        self.path = path
        source = f" in {path}" if path else ""
        super().__init__(
            f"{discarded} earlier tape line(s){source} discarded; only the last tape line is used."
        )
