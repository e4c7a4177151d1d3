"""
Keypad adapter for PocketCalc
Maps keys and on-screen buttons to input events and feeds them to the engine
"""
import threading
from dataclasses import dataclass

import config
import calculator
from calculator import Calculator, Operation


# ── Input events ───────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class Digit:
    digit: str


@dataclass(frozen=True)
class Decimal:
    pass


@dataclass(frozen=True)
class OperationInput:
    operation: Operation


@dataclass(frozen=True)
class Evaluate:
    pass


@dataclass(frozen=True)
class Clear:
    pass


@dataclass(frozen=True)
class ToggleSign:
    pass


@dataclass(frozen=True)
class Percent:
    pass


_DISPATCH = {
    Digit:          lambda state, event: calculator.digit_entry(state, event.digit),
    Decimal:        lambda state, event: calculator.decimal_entry(state),
    OperationInput: lambda state, event: calculator.input_operation(state, event.operation),
    Evaluate:       lambda state, event: calculator.evaluate(state),
    Clear:          lambda state, event: calculator.clear(state),
    ToggleSign:     lambda state, event: calculator.toggle_sign(state),
    Percent:        lambda state, event: calculator.percent(state),
}


def apply_event(state, event):
    """Run the transition for one input event"""
    return _DISPATCH[type(event)](state, event)


# ── Key mapping ────────────────────────────────────────────────────────────────

_KEY_EVENTS = {
    ".": Decimal(),
    "+": OperationInput(Operation.ADD),
    "-": OperationInput(Operation.SUBTRACT),
    "*": OperationInput(Operation.MULTIPLY),
    "×": OperationInput(Operation.MULTIPLY),
    "/": OperationInput(Operation.DIVIDE),
    "÷": OperationInput(Operation.DIVIDE),
    "=": Evaluate(),
    "Enter": Evaluate(),
    "Return": Evaluate(),
    "KP_Enter": Evaluate(),
    "\r": Evaluate(),
    "\n": Evaluate(),
    "Escape": Clear(),
    "c": Clear(),
    "C": Clear(),
    "%": Percent(),
}
_KEY_EVENTS.update({d: Digit(d) for d in calculator.DIGITS})

# On-screen buttons add the sign toggle, which has no keyboard shortcut
_BUTTON_EVENTS = dict(_KEY_EVENTS, **{"±": ToggleSign()})


def event_for_key(key):
    """Event for a keyboard key (character or Tk keysym); None if unmapped"""
    return _KEY_EVENTS.get(key)


def event_for_button(label):
    return _BUTTON_EVENTS.get(label)


class Keypad:
    """Serializes key presses onto a single Calculator"""

    def __init__(self, calc=None):
        self.calculator = calc if calc is not None else Calculator()
        # Shared by the GUI thread and web keypad requests
        self.lock = threading.RLock()

    @property
    def state(self):
        return self.calculator.state

    def dispatch(self, event):
        with self.lock:
            return self.calculator.apply(apply_event, event)

    def press(self, key):
        """Apply one key; returns False if the key is not mapped"""
        event = event_for_button(key)
        if event is None:
            return False
        self.dispatch(event)
        return True

    def press_sequence(self, keys):
        """Apply each character of keys in order; returns the unmapped ones, which are skipped"""
        return [key for key in keys if not self.press(key)]


# ── Layout ─────────────────────────────────────────────────────────────────────

BUTTON_LAYOUT = [
    ["C", "±", "%", "÷"],
    ["7", "8", "9", "×"],
    ["4", "5", "6", "-"],
    ["1", "2", "3", "+"],
    ["0", ".", "="],
]
WIDE_BUTTONS = {"0"}

_EVENT_LABELS = {event_for_button(label): label for row in BUTTON_LAYOUT for label in row}


def label_for_event(event):
    """On-screen button that produces event"""
    return _EVENT_LABELS.get(event)


def button_kind(label):
    if label in ("C", "±", "%"):
        return "function"
    if label == "=":
        return "equals"
    if label in ("+", "-", "×", "÷"):
        return "operator"
    return "digit"


def display_font_size(display, window_width):
    """Point size for the display text at the given window width"""
    scale = "small" if window_width < config.SMALL_SCREEN_WIDTH else "large"
    short_size, long_size = config.DISPLAY_FONT_SIZES[scale]
    return long_size if len(display) > config.LONG_DISPLAY_LENGTH else short_size
