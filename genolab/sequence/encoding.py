"""
Index and one-hot encoding of nucleotide sequences.

Encodings are strict: a symbol outside the alphabet is an error,
never a zero row.
"""

import numpy as np
from typing import Dict, Optional

from genolab.errors import InvalidSymbolError

# Fixed enumeration order; consensus ties resolve in this order too
DNA_ALPHABET = "ACGT"
DNA_VOCAB = {symbol: i for i, symbol in enumerate(DNA_ALPHABET)}


def encode_indices(
    sequence: str,
    vocab: Optional[Dict[str, int]] = None,
    index: Optional[int] = None
) -> np.ndarray:
    """
    Map each symbol of a sequence to its alphabet index.

    Args:
        sequence: Sequence string (e.g., "ACGT")
        vocab: Mapping from symbol to index. Defaults to DNA_VOCAB.
        index: Position of the sequence in a larger collection, only
            used to make error messages point at the right input

    Returns:
        numpy int array of shape (len(sequence),)

    Raises:
        InvalidSymbolError: If a symbol is not in the vocabulary

    Example:
        >>> encode_indices("GATTACA")
        array([2, 0, 3, 3, 0, 1, 0])
    """
    if vocab is None:
        vocab = DNA_VOCAB

    indices = np.empty(len(sequence), dtype=np.intp)
    for i, symbol in enumerate(sequence):
        try:
            indices[i] = vocab[symbol]
        except KeyError:
            raise InvalidSymbolError(
                symbol, position=i, index=index, alphabet="".join(vocab)
            ) from None

    return indices


def one_hot_encode(
    sequence: str,
    vocab: Optional[Dict[str, int]] = None
) -> np.ndarray:
    """
    One-hot encode a sequence.

    Returns:
        numpy array of shape (len(sequence), vocab_size)

    Example:
        >>> one_hot_encode("ACG")
        array([[1, 0, 0, 0],
               [0, 1, 0, 0],
               [0, 0, 1, 0]])
    """
    if vocab is None:
        vocab = DNA_VOCAB

    vocab_size = max(vocab.values()) + 1
    indices = encode_indices(sequence, vocab)

    encoding = np.zeros((len(sequence), vocab_size), dtype=np.int64)
    encoding[np.arange(len(sequence)), indices] = 1
    return encoding
