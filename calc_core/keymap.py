from calc_core.buttons import CalculatorButton, from_glyph

# Tk keysyms and plain characters that do not match a button glyph
KEY_MAP = {
    'Escape': CalculatorButton.CLEAR, 'Delete': CalculatorButton.CLEAR,
    'c': CalculatorButton.CLEAR, 'C': CalculatorButton.CLEAR,
    'Return': CalculatorButton.EQUALS, 'KP_Enter': CalculatorButton.EQUALS,
    'Enter': CalculatorButton.EQUALS, 'equal': CalculatorButton.EQUALS,
    'plus': CalculatorButton.ADD, 'KP_Add': CalculatorButton.ADD,
    'minus': CalculatorButton.SUBTRACT, 'KP_Subtract': CalculatorButton.SUBTRACT,
    '*': CalculatorButton.MULTIPLY, 'asterisk': CalculatorButton.MULTIPLY,
    'KP_Multiply': CalculatorButton.MULTIPLY, 'x': CalculatorButton.MULTIPLY,
    '/': CalculatorButton.DIVIDE, 'slash': CalculatorButton.DIVIDE,
    'KP_Divide': CalculatorButton.DIVIDE,
    'percent': CalculatorButton.PERCENT,
    'period': CalculatorButton.DECIMAL, 'comma': CalculatorButton.DECIMAL,
    ',': CalculatorButton.DECIMAL, 'KP_Decimal': CalculatorButton.DECIMAL,
    '±': CalculatorButton.PLUS_MINUS,
}


def resolve_key(event):
    """Translate a window event into a CalculatorButton, or None if unmapped."""
    if isinstance(event, CalculatorButton):
        return event
    if not isinstance(event, str):
        return None

    # Keyboard events arrive as 'keysym:keycode'
    if ':' in event:
        event = event.split(':')[0]
    event = event.strip()
    if event.startswith('KP_') and event[3:].isdigit():
        event = event[3:]

    button = from_glyph(event)
    if button is not None:
        return button
    return KEY_MAP.get(event)
