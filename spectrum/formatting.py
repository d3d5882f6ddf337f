"""Human-readable formatting of measured quantities."""

_PREFIXES = ("k", "M", "G", "T")


def format_with_prefix(value, unit):
    """Format a value with an SI prefix, e.g. 1000 Hz becomes "1 kHz"."""
    scaled = float(value)
    prefix = ""
    for candidate in _PREFIXES:
        if abs(scaled) < 1000:
            break
        scaled /= 1000
        prefix = candidate

    text = f"{scaled:.1f}"
    if text.endswith(".0"):
        text = text[:-2]
    return f"{text} {prefix}{unit}"