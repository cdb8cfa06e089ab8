"""
Windowed views over sequences.

Sequences are Python strings, so every step here works on whole
characters rather than raw bytes.
"""

from typing import Iterator


def windows(sequence: str, size: int) -> Iterator[str]:
    """
    Iterate over overlapping substrings of length ``size``.

    Windows advance one symbol at a time. Nothing is yielded when the
    sequence is shorter than the window.

    Args:
        sequence: Sequence to slide over
        size: Window length (must be at least 1)

    Yields:
        Substrings of length ``size``

    Example:
        >>> list(windows("ABCD", 2))
        ['AB', 'BC', 'CD']
    """
    if size < 1:
        raise ValueError(f"Window size must be positive, got {size}")

    for i in range(len(sequence) - size + 1):
        yield sequence[i:i + size]


def chunks(sequence: str, size: int) -> Iterator[str]:
    """
    Iterate over non-overlapping substrings of length ``size``.

    The last chunk is shorter when the length is not a multiple of
    ``size``.

    Example:
        >>> list(chunks("ATGATGAT", 3))
        ['ATG', 'ATG', 'AT']
    """
    if size < 1:
        raise ValueError(f"Chunk size must be positive, got {size}")

    for i in range(0, len(sequence), size):
        yield sequence[i:i + size]
