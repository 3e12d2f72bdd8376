"""
Ncode value type.

Ncode is a frozen value object wrapping a catalog number. It converts to
and from the N-code text form and compares by number.

Example usage:
    code = Ncode(530947)
    str(code)                     # 'n1000cb'
    Ncode.from_str("N1000CB")     # Ncode(530947)
    int(code)                     # 530947

    # Accept either form from user input
    as_ncode("n1000cb") == as_ncode(530947) == as_ncode("530947")
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Union

from ncode.codec import MARKER, MAX_VALUE, check_value, decode, encode
from ncode.errors import ParseNcodeError

__all__ = ["Ncode", "NcodeSpec", "as_ncode"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, order=True)
class Ncode:
    """Immutable catalog number with an N-code text form.

    Equality, hashing and ordering follow the numeric value.

    Attributes:
        value: Catalog number (0..MAX_VALUE)
    """

    value: int

    def __post_init__(self):
        check_value(self.value)

    @classmethod
    def from_str(cls, text: str) -> Ncode:
        """Parse an N-code string (case-insensitive).

        Raises:
            ParseNcodeError: If text is not a valid N-code
        """
        return cls(decode(text))

    def __str__(self) -> str:
        return encode(self.value)

    def __repr__(self) -> str:
        return f"Ncode({self.value})"

    def __format__(self, format_spec: str) -> str:
        return format(str(self), format_spec)

    def __int__(self) -> int:
        return self.value

    def __index__(self) -> int:
        return self.value


# Anything as_ncode() accepts
NcodeSpec = Union[Ncode, int, str]


def as_ncode(spec: NcodeSpec) -> Ncode:
    """Coerce a catalog number in any common form to an Ncode.

    Args:
        spec: Ncode, raw int, N-code string ("n1000cb"), or decimal string ("530947")

    Returns:
        Ncode (the same object if spec is already one)

    Raises:
        ParseNcodeError: If spec is a string in neither form
        TypeError: If spec is of an unsupported type
    """
    if isinstance(spec, Ncode):
        return spec
    if isinstance(spec, str):
        if spec[:1] in (MARKER, MARKER.upper()):
            return Ncode.from_str(spec)
        if spec.isascii() and spec.isdigit():
            # int() refuses digit strings past sys.get_int_max_str_digits()
            digits = spec.lstrip("0") or "0"
            if len(digits) > len(str(MAX_VALUE)):
                raise ParseNcodeError(spec, None, "number out of range")
            value = int(digits)
            if value > MAX_VALUE:
                raise ParseNcodeError(spec, None, "number out of range")
            logger.debug(f"Interpreting {spec!r} as a plain catalog number")
            return Ncode(value)
        raise ParseNcodeError(spec, 0, "expected N-code or decimal number")
    if isinstance(spec, int) and not isinstance(spec, bool):
        return Ncode(spec)
    raise TypeError(f"Cannot convert {type(spec).__name__} to Ncode")
