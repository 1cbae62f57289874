from simulator.errors import InvalidWriteError, TapeBoundaryError
from simulator.models import BLANK, MachineConfig


def _check_symbol(symbol):
    if not isinstance(symbol, str) or len(symbol) != 1:
        raise ValueError(f"Tape symbols should be single characters only, got {symbol!r}")


class Tape:
    """
    Tape bounded on the left at index 0 and blank-padded to the right.
    Reads past the end return the blank symbol without growing the tape.
    """

    def __init__(self, symbols=(), blank_symbol=BLANK):
        _check_symbol(blank_symbol)
        self._blank = blank_symbol
        self._cells = []
        for symbol in symbols:
            _check_symbol(symbol)
            self._cells.append(symbol)

    @classmethod
    def from_sequence(cls, symbols, config=None):
        config = config or MachineConfig()
        return cls(symbols, blank_symbol=config.blank_symbol)

    @property
    def blank_symbol(self):
        return self._blank

    def read(self, index: int) -> str:
        if index < 0:
            raise TapeBoundaryError(f"Head position {index} is off the left edge of the tape")
        if index < len(self._cells):
            return self._cells[index]
        return self._blank

    def write(self, index: int, symbol: str) -> None:
        _check_symbol(symbol)
        size = len(self._cells)
        if index < 0 or index > size:
            raise InvalidWriteError(f"Cannot write at position {index} of a tape with {size} cells")
        if index == size:
            self._cells.append(symbol)
        else:
            self._cells[index] = symbol

    def render(self):
        return list(self._cells)

    def __len__(self):
        return len(self._cells)

    def __str__(self):
        return "".join(self._cells)

    def __repr__(self):
        return f"Tape({str(self)!r}, blank_symbol={self._blank!r})"
