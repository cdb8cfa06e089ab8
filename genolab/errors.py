"""
Exception types raised by GenoLab.

All errors derive from ValueError, so code that already guards
sequence helpers with ``except ValueError`` keeps working.
"""

from typing import Optional


class GenolabError(ValueError):
    """Base class for all GenoLab input errors."""


class ParseError(GenolabError):
    """
    A motif pattern could not be compiled.

    Attributes:
        pattern: The pattern string being compiled
        position: 0-based index in the pattern where parsing failed
    """

    def __init__(self, message: str, pattern: str = "", position: Optional[int] = None):
        self.pattern = pattern
        self.position = position
        if position is not None:
            message = f"{message} (pattern {pattern!r}, position {position})"
        super().__init__(message)


class DimensionError(GenolabError):
    """Sequences that must share a length do not, or there are none."""


class InvalidSymbolError(GenolabError):
    """
    A symbol outside the expected alphabet was found.

    Attributes:
        symbol: The offending character
        position: 0-based position within its sequence
        index: Index of the sequence in a collection, if any
    """

    def __init__(
        self,
        symbol: str,
        position: Optional[int] = None,
        index: Optional[int] = None,
        alphabet: Optional[str] = None,
    ):
        self.symbol = symbol
        self.position = position
        self.index = index
        self.alphabet = alphabet

        message = f"Invalid symbol {symbol!r}"
        if index is not None:
            message += f" in sequence {index}"
        if position is not None:
            message += f" at position {position}"
        if alphabet is not None:
            message += f" (expected one of {alphabet})"
        super().__init__(message)
