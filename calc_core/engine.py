"""
Input state machine behind the calculator keypad.

Each key press goes through `handle_input`; the presentation layer renders
`display_text` verbatim afterwards. Operators are applied eagerly from left
to right, so `3 + 4 + 5 =` resolves as `(3 + 4) + 5` without precedence.
"""
import math
from typing import Callable

from calc_core.buttons import BUTTON_LAYOUT, CalculatorButton, from_glyph
from calc_core.formatting import format_number, parse_display


class CalculatorEngine:
    def __init__(self, logger: Callable[[str], None] = None):
        self.buttons = BUTTON_LAYOUT
        self.logger = logger
        self.display_text = ""
        self.current_value = 0.0
        self.current_operator = None
        self.is_typing_number = False

    def _log(self, message: str):
        if self.logger:
            self.logger(message)

    def handle_input(self, button):
        """Dispatch one key press. Accepts a CalculatorButton or its glyph."""
        if isinstance(button, str):
            glyph = button
            button = from_glyph(glyph)
            if button is None:
                self._log(f"Ignoring unknown key {glyph!r}")
                return
        elif not isinstance(button, CalculatorButton):
            raise TypeError(f"Expected CalculatorButton or str, got {type(button).__name__}")

        if button is CalculatorButton.CLEAR:
            self.clear()
        elif button is CalculatorButton.PLUS_MINUS:
            self.change_sign()
        elif button is CalculatorButton.PERCENT:
            self.calculate_percentage()
        elif button.is_operator:
            self.select_operator(button)
        elif button.is_digit:
            self.append_digit(button)
        elif button is CalculatorButton.DECIMAL:
            self.add_decimal_point()
        elif button is CalculatorButton.EQUALS:
            self.perform_calculation()

    def clear(self):
        self.display_text = ""
        self.current_value = 0.0
        self.current_operator = None
        self.is_typing_number = False
        self._log("Cleared")

    def change_sign(self):
        number = parse_display(self.display_text)
        if number is None:
            self._log(f"Sign change ignored, display {self.display_text!r} is not a number")
            return
        self.display_text = format_number(-number)

    def calculate_percentage(self):
        number = parse_display(self.display_text)
        if number is None:
            self._log(f"Percent ignored, display {self.display_text!r} is not a number")
            return
        self.display_text = format_number(number / 100)

    def select_operator(self, operator):
        if self.is_typing_number:
            self.perform_calculation()

        self.current_operator = operator
        number = parse_display(self.display_text)
        self.current_value = number if number is not None else 0.0
        self.is_typing_number = False
        self._log(f"Operator {operator.title} selected with {self.current_value}")

    def append_digit(self, digit):
        if not self.is_typing_number:
            self.display_text = ""

        self.display_text += digit.title
        self.is_typing_number = True

    def add_decimal_point(self):
        if not self.is_typing_number:
            self.display_text = "0."
            self.is_typing_number = True
        elif '.' not in self.display_text:
            self.display_text += "."

    def perform_calculation(self):
        """Apply the pending operator to the stored value and the displayed number."""
        operator = self.current_operator
        number = parse_display(self.display_text)
        if operator is None or number is None:
            self._log("Nothing to calculate")
            return

        if operator is CalculatorButton.DIVIDE:
            self.current_value = self._divide(self.current_value, number)
        elif operator is CalculatorButton.MULTIPLY:
            self.current_value *= number
        elif operator is CalculatorButton.SUBTRACT:
            self.current_value -= number
        elif operator is CalculatorButton.ADD:
            self.current_value += number

        self._log(f"Applied {operator.title} {number}: {self.current_value}")
        self.display_text = format_number(self.current_value)
        self.current_operator = None
        self.is_typing_number = False

    @staticmethod
    def _divide(dividend, divisor):
        # Python raises on float division by zero; IEEE 754 gives inf or nan
        if divisor == 0:
            if dividend == 0 or dividend != dividend:
                return float('nan')
            return math.copysign(float('inf'), dividend) * math.copysign(1.0, divisor)
        return dividend / divisor
