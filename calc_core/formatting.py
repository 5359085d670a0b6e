import math

MAX_FRACTION_DIGITS = 6


def format_number(value):
    """Render a float with at most MAX_FRACTION_DIGITS decimals and no trailing zeros."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "∞" if value > 0 else "-∞"

    text = f"{value:.{MAX_FRACTION_DIGITS}f}"
    if '.' in text:
        text = text.rstrip('0').rstrip('.')
    # Negative zero (or a tiny negative rounded away) shows as "0", not "-0",
    # so digits typed after toggling the sign of 0 give "05" rather than "-05"
    if text == "-0":
        text = "0"
    return text


def parse_display(text):
    """Returns the display text as a float, or None if it is not a number."""
    if not text:
        return None
    try:
        return float(text)
    except ValueError:
        return None
