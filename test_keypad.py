"""Tests for the keypad adapter."""

import pytest

import config
import keypad
from calculator import INITIAL_STATE, Calculator, Operation
from keypad import (
    BUTTON_LAYOUT,
    Keypad,
    apply_event,
    button_kind,
    display_font_size,
    event_for_button,
    event_for_key,
)


class TestKeyMapping:
    """Tests for keyboard and button mapping."""

    @pytest.mark.parametrize("key", list("0123456789"))
    def test_digits(self, key):
        assert event_for_key(key) == keypad.Digit(key)

    @pytest.mark.parametrize("key,operation", [
        ("+", Operation.ADD),
        ("-", Operation.SUBTRACT),
        ("*", Operation.MULTIPLY),
        ("×", Operation.MULTIPLY),
        ("/", Operation.DIVIDE),
        ("÷", Operation.DIVIDE),
    ])
    def test_operators(self, key, operation):
        assert event_for_key(key) == keypad.OperationInput(operation)

    @pytest.mark.parametrize("key", ["=", "Enter", "Return", "\r"])
    def test_evaluate_keys(self, key):
        assert event_for_key(key) == keypad.Evaluate()

    @pytest.mark.parametrize("key", ["Escape", "c", "C"])
    def test_clear_keys(self, key):
        assert event_for_key(key) == keypad.Clear()

    def test_other_keys(self):
        assert event_for_key(".") == keypad.Decimal()
        assert event_for_key("%") == keypad.Percent()
        assert event_for_key("x") is None
        assert event_for_key("BackSpace") is None

    def test_sign_toggle_is_button_only(self):
        assert event_for_key("±") is None
        assert event_for_button("±") == keypad.ToggleSign()

    def test_every_layout_button_is_mapped(self):
        for row in BUTTON_LAYOUT:
            for label in row:
                assert event_for_button(label) is not None, label


class TestApplyEvent:
    """Tests for the event dispatch table."""

    def test_each_event_type(self):
        state = apply_event(INITIAL_STATE, keypad.Digit("4"))
        assert state.display == "4"
        state = apply_event(state, keypad.Decimal())
        assert state.display == "4."
        state = apply_event(state, keypad.ToggleSign())
        assert state.display == "-4"
        state = apply_event(state, keypad.Percent())
        assert state.display == "-0.04"
        state = apply_event(state, keypad.OperationInput(Operation.SUBTRACT))
        assert state.operation is Operation.SUBTRACT
        state = apply_event(state, keypad.Digit("1"))
        state = apply_event(state, keypad.Evaluate())
        assert state.display == "-1.04"
        assert apply_event(state, keypad.Clear()) == INITIAL_STATE


class TestKeypad:
    """Tests for the Keypad session."""

    def test_press_installs_state(self):
        pad = Keypad()
        assert pad.press("5")
        assert pad.press("+")
        assert pad.state.previous_value == 5
        assert pad.press("3")
        assert pad.state.display == "3"

    def test_chaining_sequence(self):
        pad = Keypad()
        assert pad.press_sequence("5+3+2=") == []
        assert pad.state.display == "10"

    def test_unmapped_keys_are_skipped(self):
        pad = Keypad()
        assert not pad.press("x")
        assert pad.press_sequence("1 2") == [" "]
        assert pad.state.display == "12"

    def test_shares_calculator(self):
        calc = Calculator()
        pad = Keypad(calc)
        pad.press_sequence("8÷0=")
        assert calc.get_display() == "Error"
        pad.press("Escape")
        assert calc.state == INITIAL_STATE


class TestEventLabels:
    """Tests for mapping events back to on-screen buttons."""

    @pytest.mark.parametrize("key,label", [
        ("*", "×"),
        ("/", "÷"),
        ("Return", "="),
        ("\r", "="),
        ("Escape", "C"),
        ("c", "C"),
        ("7", "7"),
        ("%", "%"),
    ])
    def test_key_highlights_its_button(self, key, label):
        assert keypad.label_for_event(event_for_key(key)) == label

    def test_every_button_round_trips(self):
        for row in BUTTON_LAYOUT:
            for label in row:
                assert keypad.label_for_event(event_for_button(label)) == label


class TestLayout:
    """Tests for layout helpers."""

    def test_layout_shape(self):
        assert [len(row) for row in BUTTON_LAYOUT] == [4, 4, 4, 4, 3]
        assert "0" in keypad.WIDE_BUTTONS

    @pytest.mark.parametrize("label,kind", [
        ("C", "function"),
        ("±", "function"),
        ("%", "function"),
        ("÷", "operator"),
        ("-", "operator"),
        ("=", "equals"),
        ("7", "digit"),
        (".", "digit"),
    ])
    def test_button_kind(self, label, kind):
        assert button_kind(label) == kind

    def test_display_font_size(self):
        large_short, large_long = config.DISPLAY_FONT_SIZES["large"]
        small_short, small_long = config.DISPLAY_FONT_SIZES["small"]
        assert display_font_size("123456", 800) == large_short
        assert display_font_size("1234567", 800) == large_long
        assert display_font_size("123456", 320) == small_short
        assert display_font_size("1234567", 320) == small_long
