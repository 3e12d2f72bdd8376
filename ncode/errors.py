"""
Exceptions for ncode.

All text-to-number failures are reported as a single ParseNcodeError,
whatever the cause (missing marker, short digit run, stray character).
"""

from typing import Optional


class ParseNcodeError(ValueError):
    """Raised when a string is not a valid N-code.

    Callers only need to catch this one type. The optional attributes give
    diagnostic context and may be None.

    Attributes:
        text: The string that failed to parse
        position: Index of the offending character (len(text) if input ended early)
        reason: Short description of the failure
    """

    def __init__(
        self,
        text: Optional[str] = None,
        position: Optional[int] = None,
        reason: Optional[str] = None,
    ):
        self.text = text
        self.position = position
        self.reason = reason

        if reason is None:
            super().__init__("ParseNcodeError")
        elif position is None:
            super().__init__(f"ParseNcodeError: {reason} in {text!r}")
        else:
            super().__init__(f"ParseNcodeError: {reason} at position {position} in {text!r}")

    def __repr__(self) -> str:
        return f"ParseNcodeError(text={self.text!r}, position={self.position}, reason={self.reason!r})"
