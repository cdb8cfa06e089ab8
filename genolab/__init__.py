"""
GenoLab: Sequence Analysis Routines for Bioinformatics

This package provides tools for:
- Protein motif patterns (compile and scan, e.g. N{P}[ST]{P})
- Profile matrices and consensus strings over aligned sequences
- FASTA parsing
- Nucleotide counting, complementation, GC content, Hamming distance
- Codon translation, ORF discovery and protein masses

Built on top of NumPy for the column-wise counting.
"""

__version__ = "0.1.0"
__author__ = "GenoLab Contributors"

from genolab.errors import (
    GenolabError,
    ParseError,
    DimensionError,
    InvalidSymbolError,
)

from genolab.motif import (
    compile_motif,
    find_all,
    find_in_records,
    CompiledMotif,
)

from genolab.profile import (
    build_profile,
    consensus,
    ProfileMatrix,
)

from genolab.io import (
    parse_fasta_string,
    fasta_to_dict,
    FastaRecord,
)

from genolab.utils import (
    count_nucleotides,
    dna_to_rna,
    reverse_complement,
    gc_content,
    hamming_distance,
    translate,
    find_orfs,
    candidate_proteins,
    protein_mass,
)

__all__ = [
    # Errors
    "GenolabError",
    "ParseError",
    "DimensionError",
    "InvalidSymbolError",
    # Motifs
    "compile_motif",
    "find_all",
    "find_in_records",
    "CompiledMotif",
    # Profiles
    "build_profile",
    "consensus",
    "ProfileMatrix",
    # I/O
    "parse_fasta_string",
    "fasta_to_dict",
    "FastaRecord",
    # Utilities
    "count_nucleotides",
    "dna_to_rna",
    "reverse_complement",
    "gc_content",
    "hamming_distance",
    "translate",
    "find_orfs",
    "candidate_proteins",
    "protein_mass",
]
