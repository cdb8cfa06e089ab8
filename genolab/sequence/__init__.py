"""
Sequence encoding.

This module provides:
- Strict index encoding over a fixed alphabet
- One-hot encoding built on it
"""

from genolab.sequence.encoding import (
    encode_indices,
    one_hot_encode,
    DNA_ALPHABET,
    DNA_VOCAB,
)

__all__ = [
    "encode_indices",
    "one_hot_encode",
    "DNA_ALPHABET",
    "DNA_VOCAB",
]
