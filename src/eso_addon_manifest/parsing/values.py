"""Conversions for typed directive values."""

BOOLEAN_VALUES = {"true": True, "false": False}

# Numeric fields are unsigned 32-bit in the game client
MAX_UNSIGNED = 2**32 - 1


def parse_unsigned(text: str) -> int | None:
    """Parse an unsigned 32-bit base-10 integer.

    An optional leading ``+`` is allowed, followed by one or more ASCII
    digits. Whitespace, underscores, ``-`` and values above
    ``MAX_UNSIGNED`` are rejected.

    Returns:
        The integer, or None if ``text`` is not a valid unsigned value
    """
    digits = text[1:] if text.startswith("+") else text
    if not digits or not digits.isascii() or not digits.isdigit():
        return None

    value = int(digits)
    if value > MAX_UNSIGNED:
        return None
    return value


def parse_bool(text: str) -> bool | None:
    """Parse the literal tokens ``true`` / ``false`` (case-sensitive)."""
    return BOOLEAN_VALUES.get(text)
