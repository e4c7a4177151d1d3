"""
GUI for PocketCalc
Tkinter keypad and display driven by the calculator engine
"""
import tkinter as tk
import config
from calculator import format_display
from keypad import (Keypad, BUTTON_LAYOUT, WIDE_BUTTONS, button_kind, display_font_size,
                    event_for_button, label_for_event)


class PocketCalcGUI:
    def __init__(self, root, keypad=None):
        self.root = root
        self.root.title(config.APP_NAME)
        self.root.geometry(f"{config.WINDOW_WIDTH}x{config.WINDOW_HEIGHT}")

        self.keypad = keypad if keypad is not None else Keypad()
        self._shown_state = None
        self.T: dict = config.PALETTE
        self.root.configure(bg=self.T["bg"])

        # label -> tk.Button
        self.buttons = {}
        # View-only state for the press animation
        self.pressed_button = None
        self._release_job = None

        self.create_widgets()
        self.root.bind('<Key>', self.on_key_press)
        self.root.bind('<Configure>', self._on_resize)
        self.refresh()
        self._poll()

    # ── Widgets ────────────────────────────────────────────────────────────────
    def _btn_colours(self, label):
        """(bg, fg, active bg) for a button in its current state"""
        T = self.T
        kind = button_kind(label)
        if kind == "function":
            return T["function_bg"], T["function_fg"], T["function_act"]
        if kind == "digit":
            return T["digit_bg"], T["digit_fg"], T["digit_act"]
        operation = self.keypad.state.operation
        if kind == "operator" and operation is not None and operation.value == label:
            return T["selected_bg"], T["selected_fg"], T["operator_act"]
        return T["operator_bg"], T["operator_fg"], T["operator_act"]

    def _calc_btn(self, parent, label):
        bg, fg, abg = self._btn_colours(label)
        return tk.Button(
            parent, text=label,
            command=lambda: self.on_button_click(label),
            font=config.BUTTON_FONT,
            bg=bg, fg=fg,
            activebackground=abg, activeforeground=fg,
            relief=tk.FLAT, bd=0, cursor="hand2",
            highlightthickness=0,
        )

    def create_widgets(self):
        """Create display and keypad"""
        T = self.T
        self.display_frame = tk.Frame(self.root, bg=T["bg"])
        self.display_frame.pack(fill=tk.X, padx=12, pady=(24, 12))

        self.display = tk.Label(
            self.display_frame, text="0",
            font=(config.DISPLAY_FONT_FAMILY, config.DISPLAY_FONT_SIZES["large"][0]),
            bg=T["bg"], fg=T["display_fg"],
            anchor=tk.E,
        )
        self.display.pack(side=tk.TOP, fill=tk.X)

        self.keys_frame = tk.Frame(self.root, bg=T["bg"])
        self.keys_frame.pack(fill=tk.BOTH, expand=True, padx=8, pady=(0, 8))
        for col in range(4):
            self.keys_frame.grid_columnconfigure(col, weight=1, uniform="keys")

        for row, labels in enumerate(BUTTON_LAYOUT):
            self.keys_frame.grid_rowconfigure(row, weight=1, uniform="keys")
            col = 0
            for label in labels:
                span = 2 if label in WIDE_BUTTONS else 1
                btn = self._calc_btn(self.keys_frame, label)
                btn.grid(row=row, column=col, columnspan=span, sticky="nsew", padx=4, pady=4)
                self.buttons[label] = btn
                col += span

    # ── Rendering ──────────────────────────────────────────────────────────────
    def refresh(self):
        """Redraw display text, font size and button colours from current state"""
        state = self.keypad.state
        self._shown_state = state
        display = state.display
        self.display.config(
            text=format_display(display),
            font=(config.DISPLAY_FONT_FAMILY,
                  display_font_size(display, self.root.winfo_width())),
        )
        for label, btn in self.buttons.items():
            bg, fg, abg = self._btn_colours(label)
            if label == self.pressed_button:
                bg = abg
            btn.config(bg=bg, fg=fg, activebackground=abg, activeforeground=fg)

    def _on_resize(self, event):
        if event.widget is self.root:
            self.refresh()

    # ── Input ──────────────────────────────────────────────────────────────────
    def _highlight(self, label):
        """Briefly show a button as pressed"""
        if self._release_job is not None:
            self.root.after_cancel(self._release_job)
        self.pressed_button = label
        self._release_job = self.root.after(config.PRESS_HIGHLIGHT_MS, self._release)

    def _release(self):
        self._release_job = None
        self.pressed_button = None
        self.refresh()

    def on_button_click(self, label):
        """Handle keypad button clicks"""
        if self.keypad.press(label):
            self._highlight(label)
            self.refresh()

    def on_key_press(self, event):
        """Handle keyboard input"""
        key = event.char if event.char and event.char.isprintable() else event.keysym
        key_event = event_for_button(key)
        if key_event is None:
            return
        self.keypad.dispatch(key_event)
        self._highlight(label_for_event(key_event))
        self.refresh()

    def _poll(self):
        """Pick up presses made through the web keypad"""
        if self.keypad.state is not self._shown_state:
            self.refresh()
        self.root.after(config.WEB_POLL_MS, self._poll)
