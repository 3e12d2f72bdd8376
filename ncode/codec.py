"""
N-code encoding/decoding for catalog numbers.

An N-code is the marker "n", the number modulo 9999 as 4 zero-padded
decimal digits, then the quotient (number // 9999) in base 26 written
with the letters a-z, most significant first. A zero quotient adds no
letters at all.

    530947 = 1000 + 53 * 9999, 53 = 2 * 26 + 1  ->  "n1000cb"

Known quirk: decode() accepts the digit run "9999", which encode() never
produces (n % 9999 is at most 9998). "n9999" therefore decodes to 9999,
while encode(9999) gives "n0000b" (quotient 1 is the letter b). Both
behaviors are kept as-is.
"""

from ncode.errors import ParseNcodeError

MARKER = "n"
NUMBER_WIDTH = 4
NUMBER_BASE = 9999

ALPHABET = "abcdefghijklmnopqrstuvwxyz"
ALPHABET_BASE = len(ALPHABET)

# Codes are 32-bit unsigned
MAX_VALUE = 0xFFFFFFFF

_DIGITS = "0123456789"
_MARKERS = (MARKER, MARKER.upper())


def check_value(value: int) -> int:
    """Validate a raw catalog number and return it unchanged."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"N-code value must be an int, got {type(value).__name__}")
    if not 0 <= value <= MAX_VALUE:
        raise ValueError(f"N-code value must be in 0..{MAX_VALUE}, got {value}")
    return value


def _letter_weight(c: str) -> int:
    """Base-36 digit value minus 10 for ASCII letters (a/A=0 .. z/Z=25), else -1."""
    return ALPHABET.find(c.lower()) if c.isascii() else -1


def encode(value: int) -> str:
    """
    Encode a catalog number as an N-code.

    Args:
        value: Number in 0..MAX_VALUE

    Returns:
        Lowercase N-code string

    Raises:
        TypeError: If value is not an int
        ValueError: If value is out of range

    Example:
        >>> encode(530947)
        'n1000cb'
        >>> encode(0)
        'n0000'
    """
    check_value(value)
    rest, low = divmod(value, NUMBER_BASE)

    letters = []
    while rest:
        rest, digit = divmod(rest, ALPHABET_BASE)
        letters.append(ALPHABET[digit])

    return f"{MARKER}{low:0{NUMBER_WIDTH}d}" + "".join(reversed(letters))


def decode(text: str) -> int:
    """
    Decode an N-code string to its catalog number.

    The marker and the letters are case-insensitive. No surrounding
    whitespace or separators are allowed.

    Args:
        text: N-code string (e.g. "n1000cb", "N1000CB")

    Returns:
        Catalog number

    Raises:
        TypeError: If text is not a str
        ParseNcodeError: If text is not a valid N-code

    Example:
        >>> decode("N1000CB")
        530947
    """
    if not isinstance(text, str):
        raise TypeError(f"N-code must be a str, got {type(text).__name__}")

    if not text or text[0] not in _MARKERS:
        raise ParseNcodeError(text, 0, "expected marker 'n'")

    number_part = 0
    for i in range(1, NUMBER_WIDTH + 1):
        if i >= len(text):
            raise ParseNcodeError(text, i, f"expected {NUMBER_WIDTH} digits")
        c = text[i]
        if c not in _DIGITS:
            raise ParseNcodeError(text, i, f"expected digit, got {c!r}")
        number_part = number_part * 10 + _DIGITS.index(c)

    alphabetic_part = 0
    for i in range(NUMBER_WIDTH + 1, len(text)):
        c = text[i]
        weight = _letter_weight(c)
        if weight < 0:
            raise ParseNcodeError(text, i, f"expected letter, got {c!r}")
        alphabetic_part = alphabetic_part * ALPHABET_BASE + weight

    value = number_part + alphabetic_part * NUMBER_BASE
    if value > MAX_VALUE:
        raise ParseNcodeError(text, None, f"value {value} exceeds {MAX_VALUE}")
    return value
