"""
Protein motif patterns.

Compact patterns such as ``N{P}[ST]{P}`` are compiled into a token
sequence and matched against sequences with a sliding window.
"""

from genolab.motif.pattern import (
    compile_motif,
    find_all,
    find_in_records,
    CompiledMotif,
    Literal,
    AnyOf,
    NoneOf,
    CLASS_SCAN_LIMIT,
)

__all__ = [
    "compile_motif",
    "find_all",
    "find_in_records",
    "CompiledMotif",
    "Literal",
    "AnyOf",
    "NoneOf",
    "CLASS_SCAN_LIMIT",
]
