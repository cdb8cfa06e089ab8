"""
Protein motif patterns.

A motif is written in the compact PROSITE-like notation used for
N-glycosylation sites and similar features:

    N{P}[ST]{P}

- ``c``      matches exactly the symbol ``c``
- ``[abc]``  matches any one of the listed symbols
- ``{c}``    matches any symbol except ``c``

Patterns are compiled once into an immutable token sequence and then
matched by sliding a window of the same width along a sequence.
"""

import logging
from collections import abc
from dataclasses import dataclass
from typing import Dict, Iterable, List, Mapping, Tuple, Union

from genolab.errors import InvalidSymbolError, ParseError
from genolab.io.fasta import FastaRecord
from genolab.utils.windows import windows

logger = logging.getLogger(__name__)

# Characters scanned after '[' looking for ']', the bracket included
CLASS_SCAN_LIMIT = 5

_CLASS_FORBIDDEN = "[{}"
_BRACKETS = "[]{}"


@dataclass(frozen=True)
class Literal:
    """Matches exactly one symbol."""
    symbol: str

    def matches(self, symbol: str) -> bool:
        return symbol == self.symbol

    def __str__(self) -> str:
        return self.symbol


@dataclass(frozen=True)
class AnyOf:
    """Matches any symbol of a class, e.g. ``[ST]``."""
    symbols: Tuple[str, ...]

    def matches(self, symbol: str) -> bool:
        return symbol in self.symbols

    def __str__(self) -> str:
        return "[" + "".join(self.symbols) + "]"


@dataclass(frozen=True)
class NoneOf:
    """Matches any symbol except one, e.g. ``{P}``."""
    symbol: str

    def matches(self, symbol: str) -> bool:
        return symbol != self.symbol

    def __str__(self) -> str:
        return "{" + self.symbol + "}"


Token = Union[Literal, AnyOf, NoneOf]


@dataclass(frozen=True)
class CompiledMotif:
    """
    A parsed motif pattern.

    Attributes:
        pattern: The source pattern string
        tokens: One token per sequence position, in order
    """
    pattern: str
    tokens: Tuple[Token, ...]

    def __post_init__(self):
        if not self.tokens:
            raise ParseError("Motif has no tokens", self.pattern, 0)

    def __len__(self) -> int:
        return len(self.tokens)

    def __iter__(self):
        return iter(self.tokens)

    def __str__(self) -> str:
        """Canonical pattern text; duplicate class members are dropped."""
        return "".join(str(token) for token in self.tokens)

    def matches(self, window: str) -> bool:
        """Check whether a window of exactly ``len(self)`` symbols matches."""
        if len(window) != len(self.tokens):
            return False
        return all(
            token.matches(symbol)
            for token, symbol in zip(self.tokens, window)
        )

    def find_all(self, sequence: str) -> List[int]:
        """Shortcut for ``find_all(self, sequence)``."""
        return find_all(self, sequence)


def _parse_any_of(pattern: str, pos: int) -> Tuple[AnyOf, int]:
    """Parse a class body starting just after '['; return token and next index."""
    start = pos - 1
    symbols: List[str] = []

    for i in range(pos, pos + CLASS_SCAN_LIMIT):
        if i >= len(pattern):
            raise ParseError("Unterminated class", pattern, start)

        char = pattern[i]
        if char == "]":
            if not symbols:
                raise ParseError("Empty class", pattern, start)
            # Keep first-seen order so the canonical form is stable
            return AnyOf(tuple(dict.fromkeys(symbols))), i + 1
        if char in _CLASS_FORBIDDEN:
            raise ParseError(f"Unexpected {char!r} inside class", pattern, i)

        symbols.append(char)

    raise ParseError(
        f"Class not closed within {CLASS_SCAN_LIMIT} characters", pattern, start
    )


def _parse_none_of(pattern: str, pos: int) -> Tuple[NoneOf, int]:
    """Parse an exclusion body starting just after '{'."""
    start = pos - 1

    if pos >= len(pattern):
        raise ParseError("Unterminated exclusion", pattern, start)

    symbol = pattern[pos]
    if symbol in _BRACKETS:
        raise ParseError("Exclusion needs exactly one symbol", pattern, pos)

    if pos + 1 >= len(pattern) or pattern[pos + 1] != "}":
        raise ParseError("Unterminated exclusion", pattern, start)

    return NoneOf(symbol), pos + 2


def compile_motif(pattern: str) -> CompiledMotif:
    """
    Compile a motif pattern into a token sequence.

    Args:
        pattern: Motif string such as ``"N{P}[ST]{P}"``

    Returns:
        CompiledMotif with one token per matched position

    Raises:
        ParseError: If the pattern is empty, contains non-ASCII
            symbols, or has a malformed class or exclusion
        TypeError: If the pattern is not a string

    Example:
        >>> motif = compile_motif("N{P}[ST]{P}")
        >>> len(motif)
        4
        >>> motif.tokens[2]
        AnyOf(symbols=('S', 'T'))
    """
    if not isinstance(pattern, str):
        raise TypeError(f"Motif pattern must be a string, got {type(pattern).__name__}")
    if pattern == "":
        raise ParseError("Empty motif pattern", pattern, 0)

    for i, char in enumerate(pattern):
        if not char.isascii():
            raise ParseError(f"Non-ASCII symbol {char!r}", pattern, i)

    tokens: List[Token] = []
    pos = 0
    while pos < len(pattern):
        current = pattern[pos]
        if current == "[":
            token, pos = _parse_any_of(pattern, pos + 1)
        elif current == "{":
            token, pos = _parse_none_of(pattern, pos + 1)
        else:
            token, pos = Literal(current), pos + 1
        tokens.append(token)

    motif = CompiledMotif(pattern=pattern, tokens=tuple(tokens))
    logger.debug(f"Compiled motif {pattern!r} into {len(motif)} tokens")
    return motif


def find_all(motif: Union[CompiledMotif, str], sequence: str) -> List[int]:
    """
    Find every position where a motif matches a sequence.

    Windows overlap and advance one symbol at a time.

    Args:
        motif: Compiled motif, or a pattern string to compile first
        sequence: Protein or nucleotide sequence

    Returns:
        Ascending list of 1-based start positions. Empty when the
        sequence is shorter than the motif.

    Raises:
        InvalidSymbolError: If the sequence contains a non-ASCII symbol

    Example:
        >>> find_all("A", "AAAA")
        [1, 2, 3, 4]
    """
    if isinstance(motif, str):
        motif = compile_motif(motif)

    if not sequence.isascii():
        for i, symbol in enumerate(sequence):
            if not symbol.isascii():
                raise InvalidSymbolError(symbol, position=i)

    positions = [
        i + 1
        for i, window in enumerate(windows(sequence, len(motif)))
        if motif.matches(window)
    ]

    logger.debug(
        f"Motif {motif.pattern!r}: {len(positions)} hits in {len(sequence)} symbols"
    )
    return positions


Records = Union[Mapping[str, str], Iterable[Union[FastaRecord, Tuple[str, str]]]]


def find_in_records(
    motif: Union[CompiledMotif, str],
    records: Records
) -> Dict[str, List[int]]:
    """
    Scan several labelled sequences for a motif.

    Args:
        motif: Compiled motif or pattern string
        records: FastaRecord objects, (label, sequence) pairs, or a
            mapping from label to sequence

    Returns:
        Dictionary from label to match positions, in input order,
        holding only the sequences with at least one match

    Example:
        >>> find_in_records("N{P}[ST]{P}", {"P01": "MNASAP", "P02": "MKV"})
        {'P01': [2]}
    """
    if isinstance(motif, str):
        motif = compile_motif(motif)

    if isinstance(records, abc.Mapping):
        records = records.items()

    hits = {}
    for record in records:
        if isinstance(record, FastaRecord):
            label, sequence = record.id, record.sequence
        else:
            label, sequence = record

        positions = find_all(motif, sequence)
        if positions:
            hits[label] = positions

    logger.debug(f"Motif {motif.pattern!r} found in {len(hits)} records")
    return hits
