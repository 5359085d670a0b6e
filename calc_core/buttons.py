from enum import Enum


class CalculatorButton(Enum):
    CLEAR = "AC"
    PLUS_MINUS = "+/-"
    PERCENT = "%"
    DIVIDE = "÷"
    MULTIPLY = "×"
    SUBTRACT = "-"
    ADD = "+"
    ZERO = "0"
    ONE = "1"
    TWO = "2"
    THREE = "3"
    FOUR = "4"
    FIVE = "5"
    SIX = "6"
    SEVEN = "7"
    EIGHT = "8"
    NINE = "9"
    DECIMAL = "."
    EQUALS = "="

    @property
    def title(self):
        """Glyph shown on the key and echoed to the display for digits."""
        return self.value

    @property
    def is_digit(self):
        return self in DIGITS

    @property
    def is_operator(self):
        return self in OPERATORS


DIGITS = (
    CalculatorButton.ZERO, CalculatorButton.ONE, CalculatorButton.TWO,
    CalculatorButton.THREE, CalculatorButton.FOUR, CalculatorButton.FIVE,
    CalculatorButton.SIX, CalculatorButton.SEVEN, CalculatorButton.EIGHT,
    CalculatorButton.NINE,
)

OPERATORS = (
    CalculatorButton.DIVIDE, CalculatorButton.MULTIPLY,
    CalculatorButton.SUBTRACT, CalculatorButton.ADD,
)

# Keypad rows, top to bottom
BUTTON_LAYOUT = [
    [CalculatorButton.CLEAR, CalculatorButton.PLUS_MINUS, CalculatorButton.PERCENT, CalculatorButton.DIVIDE],
    [CalculatorButton.SEVEN, CalculatorButton.EIGHT, CalculatorButton.NINE, CalculatorButton.MULTIPLY],
    [CalculatorButton.FOUR, CalculatorButton.FIVE, CalculatorButton.SIX, CalculatorButton.SUBTRACT],
    [CalculatorButton.ONE, CalculatorButton.TWO, CalculatorButton.THREE, CalculatorButton.ADD],
    [CalculatorButton.ZERO, CalculatorButton.DECIMAL, CalculatorButton.EQUALS],
]


def from_glyph(text):
    """Returns the button whose glyph is `text`, or None."""
    try:
        return CalculatorButton(text)
    except ValueError:
        return None
