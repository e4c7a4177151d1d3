"""
Calculator Engine for PocketCalc
Left-to-right four-function arithmetic over an immutable display state
"""
import math
import re
from dataclasses import dataclass, replace
from decimal import Decimal
from enum import Enum
from typing import Optional

import config

DIGITS = "0123456789"

# Shortest repr() switches to exponent form below this magnitude
_POSITIONAL_MIN = 1e-6
_POSITIONAL_MAX = 1e21


class Operation(Enum):
    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "×"
    DIVIDE = "÷"

    @classmethod
    def from_symbol(cls, symbol):
        """Look up an operation by its key symbol ('*' and '/' are accepted too)"""
        symbol = {"*": "×", "/": "÷"}.get(symbol, symbol)
        return cls(symbol)

    def apply(self, left: float, right: float) -> Optional[float]:
        """Apply the operation, returning None on division by zero"""
        if self is Operation.ADD:
            return left + right
        if self is Operation.SUBTRACT:
            return left - right
        if self is Operation.MULTIPLY:
            return left * right
        if right == 0:
            return None
        return left / right


@dataclass(frozen=True)
class CalculatorState:
    display: str = "0"
    previous_value: Optional[float] = None
    operation: Optional[Operation] = None
    waiting_for_value: bool = False
    memory: float = 0

    @property
    def is_error(self) -> bool:
        return self.display == config.ERROR_DISPLAY

    @property
    def phase(self) -> str:
        """Name of the implicit state: idle, pending, accumulating or error"""
        if self.is_error:
            return "error"
        if self.operation is None:
            return "idle"
        return "pending" if self.waiting_for_value else "accumulating"

    def to_dict(self) -> dict:
        return {
            'display': self.display,
            'formatted': format_display(self.display),
            'previous_value': self.previous_value,
            'operation': self.operation.value if self.operation else None,
            'waiting_for_value': self.waiting_for_value,
            'memory': self.memory,
            'phase': self.phase,
        }


INITIAL_STATE = CalculatorState()


# ── Number formatting ──────────────────────────────────────────────────────────

def parse_number(text: str) -> float:
    """Parse a display string, ignoring thousands separators"""
    return float(text.replace(",", ""))


def format_number(value: float) -> str:
    """Shortest decimal string for a value; whole numbers carry no fraction"""
    if value == 0:
        return "0"
    magnitude = abs(value)
    if float(value).is_integer() and magnitude < _POSITIONAL_MAX:
        return str(int(value))
    text = repr(float(value))
    if "e" in text and _POSITIONAL_MIN <= magnitude < _POSITIONAL_MAX:
        text = format(Decimal(text), "f")
    return text


def format_display(text: str) -> str:
    """Insert thousands separators into the integer part for presentation"""
    if text == "0" or text == config.ERROR_DISPLAY or _is_scientific(text):
        return text
    integer_part, dot, fraction = text.partition(".")
    integer_part = re.sub(r"\B(?=(\d{3})+(?!\d))", ",", integer_part)
    return integer_part + dot + fraction


def round_result(value: float) -> float:
    """Round to 8 decimal places, halves rounding up"""
    scaled = value * config.ROUNDING_SCALE
    if not math.isfinite(scaled):
        return value
    return math.floor(scaled + 0.5) / config.ROUNDING_SCALE


def digit_count(text: str) -> int:
    return sum(1 for ch in text if ch in DIGITS)


def _is_scientific(text):
    return "e" in text.lower()


def _error_state(state):
    return replace(
        state,
        display=config.ERROR_DISPLAY,
        previous_value=None,
        operation=None,
        waiting_for_value=True,
    )


# ── Transitions ────────────────────────────────────────────────────────────────

def digit_entry(state: CalculatorState, digit: str) -> CalculatorState:
    if len(digit) != 1 or digit not in DIGITS:
        raise ValueError(f"Not a digit: {digit!r}")
    if state.is_error:
        return state
    # Scientific results are not editable buffers; typing starts a new number
    if state.waiting_for_value or _is_scientific(state.display):
        return replace(state, display=digit, waiting_for_value=False)
    if state.display == "0":
        return replace(state, display=digit)
    if digit_count(state.display) >= config.MAX_DIGITS:
        return state
    return replace(state, display=state.display + digit)


def decimal_entry(state: CalculatorState) -> CalculatorState:
    if state.is_error:
        return state
    if state.waiting_for_value or _is_scientific(state.display):
        return replace(state, display="0.", waiting_for_value=False)
    if "." not in state.display:
        return replace(state, display=state.display + ".")
    return state


def toggle_sign(state: CalculatorState) -> CalculatorState:
    if state.is_error:
        return state
    value = parse_number(state.display)
    if value == 0:
        return state
    return replace(state, display=format_number(-value))


def percent(state: CalculatorState) -> CalculatorState:
    if state.is_error:
        return state
    value = parse_number(state.display)
    return replace(state, display=format_number(value / 100))


def clear(state: CalculatorState = None) -> CalculatorState:
    return INITIAL_STATE


def input_operation(state: CalculatorState, operation: Operation) -> CalculatorState:
    """Choose the next operator, first applying any pending one (chaining)"""
    if state.is_error:
        return state

    if (state.previous_value is not None and state.operation is not None
            and not state.waiting_for_value):
        result = state.operation.apply(state.previous_value, parse_number(state.display))
        if result is None or not math.isfinite(result):
            return _error_state(state)
        result = round_result(result)
        return replace(
            state,
            display=format_number(result),
            previous_value=result,
            operation=operation,
            waiting_for_value=True,
        )

    # A second operator before a new operand just replaces the pending one
    return replace(
        state,
        previous_value=parse_number(state.display),
        operation=operation,
        waiting_for_value=True,
    )


def evaluate(state: CalculatorState) -> CalculatorState:
    """The '=' key"""
    if state.is_error or state.operation is None or state.previous_value is None:
        return state

    result = state.operation.apply(state.previous_value, parse_number(state.display))
    if result is None or not math.isfinite(result):
        return _error_state(state)

    if abs(result) > config.OVERFLOW_LIMIT:
        display = f"{result:.2e}"
    else:
        display = format_number(round_result(result))

    return replace(
        state,
        display=display,
        previous_value=None,
        operation=None,
        waiting_for_value=True,
    )


class Calculator:
    """Holds the current state and installs each transition's result"""

    def __init__(self, state=INITIAL_STATE):
        self._state = state

    @property
    def state(self):
        return self._state

    def apply(self, transition, *args):
        self._state = transition(self._state, *args)
        return self._state

    def add_digit(self, digit):
        return self.apply(digit_entry, str(digit)).display

    def add_decimal(self):
        return self.apply(decimal_entry).display

    def add_operator(self, operator):
        """Accepts an Operation or its key symbol"""
        if not isinstance(operator, Operation):
            operator = Operation.from_symbol(operator)
        return self.apply(input_operation, operator).display

    def toggle_sign(self):
        return self.apply(toggle_sign).display

    def percentage(self):
        return self.apply(percent).display

    def clear(self):
        return self.apply(clear).display

    def evaluate(self):
        return self.apply(evaluate).display

    def get_display(self):
        return self._state.display

    def get_formatted_display(self):
        return format_display(self._state.display)
