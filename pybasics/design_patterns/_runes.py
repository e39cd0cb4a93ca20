"""Single-character rendering of numeric values."""

MAX_CODE_POINT = 0x10FFFF
SURROGATE_RANGE = range(0xD800, 0xE000)
REPLACEMENT_CHARACTER = "\ufffd"


def rune_text(code: int) -> str:
    """Return the character for ``code``, or U+FFFD when it is not a valid code point."""
    if code < 0 or code > MAX_CODE_POINT or code in SURROGATE_RANGE:
        return REPLACEMENT_CHARACTER
    return chr(code)
