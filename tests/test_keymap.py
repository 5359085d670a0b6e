import unittest
from calc_core.buttons import CalculatorButton
from calc_core.keymap import resolve_key


class TestResolveKey(unittest.TestCase):

    def test_button_keys(self):
        """Test window button keys resolve by glyph"""
        self.assertIs(resolve_key("7"), CalculatorButton.SEVEN)
        self.assertIs(resolve_key("AC"), CalculatorButton.CLEAR)
        self.assertIs(resolve_key("+/-"), CalculatorButton.PLUS_MINUS)
        self.assertIs(resolve_key("-"), CalculatorButton.SUBTRACT)

    def test_keyboard_characters(self):
        self.assertIs(resolve_key("*"), CalculatorButton.MULTIPLY)
        self.assertIs(resolve_key("/"), CalculatorButton.DIVIDE)
        self.assertIs(resolve_key(","), CalculatorButton.DECIMAL)
        self.assertIs(resolve_key("c"), CalculatorButton.CLEAR)

    def test_keysyms_with_keycode_suffix(self):
        self.assertIs(resolve_key("Return:36"), CalculatorButton.EQUALS)
        self.assertIs(resolve_key("Escape:9"), CalculatorButton.CLEAR)
        self.assertIs(resolve_key("asterisk"), CalculatorButton.MULTIPLY)
        self.assertIs(resolve_key("KP_Add:86"), CalculatorButton.ADD)

    def test_keypad_digits(self):
        self.assertIs(resolve_key("KP_5"), CalculatorButton.FIVE)
        self.assertIs(resolve_key("KP_0:90"), CalculatorButton.ZERO)

    def test_passthrough_and_unmapped(self):
        self.assertIs(resolve_key(CalculatorButton.EQUALS), CalculatorButton.EQUALS)
        self.assertIsNone(resolve_key("q"))
        self.assertIsNone(resolve_key("Shift_L:50"))
        self.assertIsNone(resolve_key(None))
        self.assertIsNone(resolve_key(42))


if __name__ == '__main__':
    unittest.main()
