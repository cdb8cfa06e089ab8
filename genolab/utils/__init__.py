"""
Sequence manipulation utilities for genomic data.

This module provides common operations for DNA/RNA/protein sequences:
- Nucleotide counting and transcription
- Reverse complement and GC content
- Codon translation and ORF finding
- Hamming distance and protein mass
- Overlapping windows and fixed-size chunks
"""

from genolab.utils.sequences import (
    count_nucleotides,
    dna_to_rna,
    reverse_complement,
    gc_content,
    hamming_distance,
    translate,
    find_orfs,
    candidate_proteins,
    protein_mass,
    CODON_TABLE,
    START_CODONS,
    STOP_CODONS,
    MONOISOTOPIC_MASS,
)

from genolab.utils.windows import (
    windows,
    chunks,
)

__all__ = [
    "count_nucleotides",
    "dna_to_rna",
    "reverse_complement",
    "gc_content",
    "hamming_distance",
    "translate",
    "find_orfs",
    "candidate_proteins",
    "protein_mass",
    "CODON_TABLE",
    "START_CODONS",
    "STOP_CODONS",
    "MONOISOTOPIC_MASS",
    "windows",
    "chunks",
]
