from simulator.errors import DuplicateRuleWarning, MalformedRuleError
from simulator.models import Action, Motion


def _validate_rule(rule):
    """Check symbol widths and the motion token, returning a normalized Action."""
    if not isinstance(rule.read_symbol, str) or len(rule.read_symbol) != 1:
        raise MalformedRuleError(
            f"tape symbols should be single characters only, got read symbol {rule.read_symbol!r}",
            rule.line_no,
        )
    action = rule.action
    if not isinstance(action.print_symbol, str) or len(action.print_symbol) != 1:
        raise MalformedRuleError(
            f"tape symbols should be single characters only, got print symbol {action.print_symbol!r}",
            rule.line_no,
        )
    try:
        motion = Motion(action.motion)
    except ValueError:
        raise MalformedRuleError(
            f'tape motion can only take values "L" for one step left, "R" for one step right, '
            f'or "N" for staying in the same place, got {action.motion!r}',
            rule.line_no,
        ) from None
    return Action(action.final_state, action.print_symbol, motion)


class TransitionTable:
    """
    Immutable (state, symbol) -> Action mapping.

    When several rules share a key the last one wins and a DuplicateRuleWarning
    is recorded in ``warnings`` for each overwrite.
    """

    def __init__(self, transitions=None, warnings=None):
        self._transitions = dict(transitions or {})
        self.warnings = list(warnings or [])

    @classmethod
    def build(cls, rules):
        transitions = {}
        warnings = []
        for rule in rules:
            action = _validate_rule(rule)
            key = (rule.cur_state, rule.read_symbol)
            if key in transitions:
                warnings.append(DuplicateRuleWarning(rule.cur_state, rule.read_symbol, rule.line_no))
            transitions[key] = action
        return cls(transitions, warnings)

    def lookup(self, state, symbol):
        return self._transitions.get((state, symbol))

    def states(self):
        seen = {}
        for state, _ in self._transitions:
            seen.setdefault(state, None)
        return list(seen)

    def symbols(self):
        seen = {}
        for _, symbol in self._transitions:
            seen.setdefault(symbol, None)
        return list(seen)

    def items(self):
        return list(self._transitions.items())

    def __len__(self):
        return len(self._transitions)
