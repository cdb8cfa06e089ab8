"""
Profile matrices and consensus strings.

A profile matrix counts, for every column of a set of aligned
equal-length sequences, how often each alphabet symbol occurs.
The consensus string picks the most frequent symbol per column.
"""

import logging
import numpy as np
from typing import Optional, Sequence

from genolab.errors import DimensionError
from genolab.sequence.encoding import DNA_ALPHABET, encode_indices

logger = logging.getLogger(__name__)


class ProfileMatrix:
    """
    Per-column symbol counts over aligned sequences.

    Build instances with ``ProfileMatrix.from_sequences`` or
    ``build_profile``. The counts array is read-only.

    Args:
        counts: Non-negative integer counts of shape
            (len(alphabet), num_columns)
        alphabet: Symbols labelling the rows, in tie-break order
        num_sequences: Number of sequences counted; defaults to the
            total of the first column

    Example:
        >>> profile = ProfileMatrix.from_sequences(["ATCC", "ATGC", "ATCC"])
        >>> profile["C"].tolist()
        [0, 0, 2, 3]
        >>> profile.consensus()
        'ATCC'
    """

    def __init__(
        self,
        counts: np.ndarray,
        alphabet: str = DNA_ALPHABET,
        num_sequences: Optional[int] = None
    ):
        raw = np.asarray(counts)
        if raw.size and not np.issubdtype(raw.dtype, np.integer):
            if not np.issubdtype(raw.dtype, np.number) or not np.all(raw == np.round(raw)):
                raise ValueError("Counts must be whole numbers")
        if raw.size and (raw < 0).any():
            raise ValueError("Counts must not be negative")

        counts = np.array(raw, dtype=np.int64)
        if counts.ndim != 2 or counts.shape[0] != len(alphabet):
            raise DimensionError(
                f"Counts of shape {counts.shape} do not fit alphabet {alphabet!r}"
            )
        counts.flags.writeable = False

        column_totals = counts.sum(axis=0)
        if num_sequences is None:
            num_sequences = int(column_totals[0]) if column_totals.size else 0
        elif num_sequences < 0 or (column_totals != num_sequences).any():
            raise DimensionError(
                f"Column totals do not match {num_sequences} sequences"
            )

        self.counts = counts
        self.num_sequences = num_sequences
        self.alphabet = alphabet
        self._row = {symbol: i for i, symbol in enumerate(alphabet)}

    @classmethod
    def from_sequences(
        cls,
        sequences: Sequence[str],
        alphabet: str = DNA_ALPHABET
    ) -> "ProfileMatrix":
        """
        Count symbols column by column.

        Args:
            sequences: Aligned sequences, all of the same length
            alphabet: Allowed symbols; any other symbol is an error

        Raises:
            DimensionError: If no sequences are given or lengths differ
            InvalidSymbolError: If a symbol is outside the alphabet
        """
        if len(sequences) == 0:
            raise DimensionError("No sequences provided")

        length = len(sequences[0])
        for i, seq in enumerate(sequences):
            if len(seq) != length:
                raise DimensionError(
                    f"Sequence {i} has length {len(seq)}, expected {length}"
                )

        vocab = {symbol: i for i, symbol in enumerate(alphabet)}
        encoded = np.stack(
            [encode_indices(seq, vocab, index=i) for i, seq in enumerate(sequences)]
        )

        # Rows of `encoded` are sequences, so axis 0 walks each column
        counts = np.stack(
            [(encoded == row).sum(axis=0) for row in range(len(alphabet))]
        )

        logger.debug(
            f"Built profile of {len(sequences)} sequences x {length} columns"
        )
        return cls(counts, alphabet, num_sequences=len(sequences))

    def __len__(self) -> int:
        """Number of columns."""
        return self.counts.shape[1]

    def __getitem__(self, symbol: str) -> np.ndarray:
        """Per-column counts for one symbol."""
        try:
            return self.counts[self._row[symbol]]
        except KeyError:
            raise KeyError(f"{symbol!r} is not in alphabet {self.alphabet!r}") from None

    def __eq__(self, other) -> bool:
        if not isinstance(other, ProfileMatrix):
            return NotImplemented
        return (
            self.alphabet == other.alphabet
            and self.num_sequences == other.num_sequences
            and np.array_equal(self.counts, other.counts)
        )

    def __repr__(self) -> str:
        return f"ProfileMatrix(alphabet={self.alphabet!r}, columns={len(self)})"

    def __str__(self) -> str:
        """Tabular form, one ``symbol: counts`` line per alphabet symbol."""
        lines = []
        for symbol, row in zip(self.alphabet, self.counts):
            lines.append(f"{symbol}: " + " ".join(str(n) for n in row))
        return "\n".join(lines)

    def consensus(self) -> str:
        """
        Most frequent symbol of every column.

        Ties go to the symbol listed first in the alphabet.
        """
        # argmax returns the first maximum, which is the tie-break rule
        best = np.argmax(self.counts, axis=0)
        return "".join(self.alphabet[i] for i in best)

    def frequencies(self, pseudocount: float = 0.0) -> np.ndarray:
        """
        Column-normalised symbol frequencies.

        Args:
            pseudocount: Value added to every count before normalising

        Returns:
            Float array of shape (len(alphabet), num_columns) whose
            columns sum to 1
        """
        smoothed = self.counts.astype(np.float64) + pseudocount
        return smoothed / smoothed.sum(axis=0, keepdims=True)


def build_profile(
    sequences: Sequence[str],
    alphabet: str = DNA_ALPHABET
) -> ProfileMatrix:
    """Build a ProfileMatrix from aligned sequences."""
    return ProfileMatrix.from_sequences(sequences, alphabet=alphabet)


def consensus(matrix: ProfileMatrix) -> str:
    """Consensus string of a profile matrix."""
    return matrix.consensus()
