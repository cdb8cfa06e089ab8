"""
FASTA decoding.

Turns FASTA text into labelled sequences; reading the text from
files or services is left to the caller.
"""

from genolab.io.fasta import (
    FastaRecord,
    parse_fasta_string,
    fasta_to_dict,
)

__all__ = [
    "FastaRecord",
    "parse_fasta_string",
    "fasta_to_dict",
]
