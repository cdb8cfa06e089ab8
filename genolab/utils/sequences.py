"""
Core sequence manipulation utilities.

Functions for working with DNA, RNA and protein sequences:
counting, complementation, translation and simple comparisons.
"""

from typing import Dict, List, Optional, Tuple

from genolab.errors import DimensionError, InvalidSymbolError
from genolab.sequence.encoding import DNA_ALPHABET
from genolab.utils.windows import chunks

# DNA complement mapping
DNA_COMPLEMENT = {
    "A": "T", "T": "A", "G": "C", "C": "G",
    "a": "t", "t": "a", "g": "c", "c": "g",
    "N": "N", "n": "n",
}

# RNA complement mapping
RNA_COMPLEMENT = {
    "A": "U", "U": "A", "G": "C", "C": "G",
    "a": "u", "u": "a", "g": "c", "c": "g",
    "N": "N", "n": "n",
}

# Standard genetic code (DNA codons)
CODON_TABLE = {
    "TTT": "F", "TTC": "F", "TTA": "L", "TTG": "L",
    "TCT": "S", "TCC": "S", "TCA": "S", "TCG": "S",
    "TAT": "Y", "TAC": "Y", "TAA": "*", "TAG": "*",
    "TGT": "C", "TGC": "C", "TGA": "*", "TGG": "W",
    "CTT": "L", "CTC": "L", "CTA": "L", "CTG": "L",
    "CCT": "P", "CCC": "P", "CCA": "P", "CCG": "P",
    "CAT": "H", "CAC": "H", "CAA": "Q", "CAG": "Q",
    "CGT": "R", "CGC": "R", "CGA": "R", "CGG": "R",
    "ATT": "I", "ATC": "I", "ATA": "I", "ATG": "M",
    "ACT": "T", "ACC": "T", "ACA": "T", "ACG": "T",
    "AAT": "N", "AAC": "N", "AAA": "K", "AAG": "K",
    "AGT": "S", "AGC": "S", "AGA": "R", "AGG": "R",
    "GTT": "V", "GTC": "V", "GTA": "V", "GTG": "V",
    "GCT": "A", "GCC": "A", "GCA": "A", "GCG": "A",
    "GAT": "D", "GAC": "D", "GAA": "E", "GAG": "E",
    "GGT": "G", "GGC": "G", "GGA": "G", "GGG": "G",
}

START_CODONS = {"ATG"}
STOP_CODONS = {"TAA", "TAG", "TGA"}

# Monoisotopic residue masses in daltons
MONOISOTOPIC_MASS = {
    "A": 71.03711, "C": 103.00919, "D": 115.02694, "E": 129.04259,
    "F": 147.06841, "G": 57.02146, "H": 137.05891, "I": 113.08406,
    "K": 128.09496, "L": 113.08406, "M": 131.04049, "N": 114.04293,
    "P": 97.05276, "Q": 128.05858, "R": 156.10111, "S": 87.03203,
    "T": 101.04768, "V": 99.06841, "W": 186.07931, "Y": 163.06333,
}

_WHITESPACE = " \t\r\n"


def count_nucleotides(sequence: str) -> Tuple[int, int, int, int]:
    """
    Count A, C, G and T in a DNA sequence.

    Whitespace is skipped so that raw multi-line input can be passed
    straight in.

    Args:
        sequence: DNA sequence

    Returns:
        Tuple of counts in (A, C, G, T) order

    Raises:
        InvalidSymbolError: For any other symbol

    Example:
        >>> count_nucleotides("ACGTTA")
        (2, 1, 1, 2)
    """
    counts = dict.fromkeys(DNA_ALPHABET, 0)

    for i, nuc in enumerate(sequence):
        if nuc in counts:
            counts[nuc] += 1
        elif nuc not in _WHITESPACE:
            raise InvalidSymbolError(nuc, position=i, alphabet=DNA_ALPHABET)

    return counts["A"], counts["C"], counts["G"], counts["T"]


def dna_to_rna(sequence: str) -> str:
    """
    Transcribe DNA into RNA.

    Example:
        >>> dna_to_rna("GATTACA")
        'GAUUACA'
    """
    return sequence.replace("T", "U")


def reverse_complement(sequence: str, rna: bool = False) -> str:
    """
    Get the reverse complement of a DNA or RNA sequence.

    Symbols without a complement are kept as they are.

    Args:
        sequence: DNA or RNA sequence string
        rna: If True, treat as RNA (use U instead of T)

    Returns:
        Reverse complement sequence

    Example:
        >>> reverse_complement("AACG")
        'CGTT'
    """
    complement_map = RNA_COMPLEMENT if rna else DNA_COMPLEMENT
    return "".join(complement_map.get(base, base) for base in reversed(sequence))


def gc_content(sequence: str, percent: bool = False) -> float:
    """
    Calculate the GC content of a sequence.

    Args:
        sequence: DNA or RNA sequence
        percent: Return a percentage (0-100) instead of a fraction

    Returns:
        GC content; 0.0 for an empty sequence

    Example:
        >>> gc_content("ACGT")
        0.5
        >>> gc_content("ACGT", percent=True)
        50.0
    """
    sequence = sequence.upper()
    total = len(sequence)

    if total == 0:
        return 0.0

    fraction = (sequence.count("G") + sequence.count("C")) / total
    return fraction * 100.0 if percent else fraction


def hamming_distance(seq1: str, seq2: str) -> int:
    """
    Calculate Hamming distance between two sequences.

    Raises:
        DimensionError: If the sequences differ in length

    Example:
        >>> hamming_distance("ACGT", "ACGA")
        1
    """
    if len(seq1) != len(seq2):
        raise DimensionError(
            f"Sequences must be of equal length ({len(seq1)} != {len(seq2)})"
        )

    return sum(c1 != c2 for c1, c2 in zip(seq1.upper(), seq2.upper()))


def translate(
    sequence: str,
    codon_table: Optional[Dict[str, str]] = None,
    stop_symbol: str = "*",
    to_stop: bool = False
) -> str:
    """
    Translate a DNA or RNA sequence to protein.

    A trailing partial codon is ignored.

    Args:
        sequence: DNA or RNA sequence
        codon_table: Custom codon table (defaults to standard)
        stop_symbol: Symbol to use for stop codons
        to_stop: If True, stop translation at first stop codon

    Returns:
        Amino acid sequence; unknown codons become 'X'

    Example:
        >>> translate("AUGGCC")
        'MA'
        >>> translate("ATGTGA", to_stop=True)
        'M'
    """
    if codon_table is None:
        codon_table = CODON_TABLE

    sequence = sequence.upper().replace("U", "T")

    protein = []
    for codon in chunks(sequence, 3):
        if len(codon) < 3:
            break

        aa = codon_table.get(codon, "X")
        if aa == "*":
            if to_stop:
                break
            aa = stop_symbol

        protein.append(aa)

    return "".join(protein)


def find_orfs(
    sequence: str,
    min_length: int = 100,
    start_codons: Optional[set] = None,
    stop_codons: Optional[set] = None,
    all_frames: bool = True
) -> List[Tuple[int, int, int, str]]:
    """
    Find Open Reading Frames (ORFs) in a DNA sequence.

    Every start codon opens an ORF that runs to the next in-frame stop
    codon; starts with no downstream stop are not reported.

    Args:
        sequence: DNA (or RNA) sequence
        min_length: Minimum ORF length in nucleotides, stop included
        start_codons: Set of start codons (default: ATG)
        stop_codons: Set of stop codons (default: TAA, TAG, TGA)
        all_frames: If True, search all 6 reading frames

    Returns:
        List of tuples (start, end, frame, protein_sequence), sorted by
        start. Coordinates are 0-based on the forward strand. Frame is
        0, 1, 2 for forward strand, -1, -2, -3 for reverse.

    Example:
        >>> find_orfs("ATGAAATGA", min_length=3, all_frames=False)
        [(0, 9, 0, 'MK')]
    """
    if start_codons is None:
        start_codons = START_CODONS
    if stop_codons is None:
        stop_codons = STOP_CODONS

    sequence = sequence.upper().replace("U", "T")
    orfs = []

    frames = [0, 1, 2, -1, -2, -3] if all_frames else [0, 1, 2]

    for frame in frames:
        if frame >= 0:
            seq = sequence
            offset = frame
        else:
            seq = reverse_complement(sequence)
            offset = abs(frame) - 1

        codons = [
            (offset + 3 * i, codon)
            for i, codon in enumerate(chunks(seq[offset:], 3))
            if len(codon) == 3
        ]

        for n, (start, codon) in enumerate(codons):
            if codon not in start_codons:
                continue

            for i, candidate in codons[n:]:
                if candidate not in stop_codons:
                    continue

                end = i + 3
                if end - start >= min_length:
                    protein = translate(seq[start:end], to_stop=True)

                    # Convert coordinates back to original if reverse strand
                    if frame < 0:
                        start_fwd, end_fwd = len(sequence) - end, len(sequence) - start
                    else:
                        start_fwd, end_fwd = start, end

                    orfs.append((start_fwd, end_fwd, frame, protein))
                break

    return sorted(orfs, key=lambda x: x[0])


def candidate_proteins(sequence: str) -> List[str]:
    """
    Distinct proteins translated from every ORF in all six frames.

    Example:
        >>> candidate_proteins("ATGAAATGA")
        ['MK']
    """
    return sorted({protein for _, _, _, protein in find_orfs(sequence, min_length=0)})


def protein_mass(
    protein: str,
    table: Optional[Dict[str, float]] = None
) -> float:
    """
    Total monoisotopic mass of a protein string.

    Args:
        protein: Amino acid sequence (one-letter codes)
        table: Residue mass table (defaults to MONOISOTOPIC_MASS)

    Raises:
        InvalidSymbolError: If a residue has no mass in the table

    Example:
        >>> round(protein_mass("SKADYEK"), 3)
        821.392
    """
    if table is None:
        table = MONOISOTOPIC_MASS

    total = 0.0
    for i, residue in enumerate(protein):
        try:
            total += table[residue]
        except KeyError:
            raise InvalidSymbolError(residue, position=i) from None

    return total
