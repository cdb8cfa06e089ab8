#!/usr/bin/env python3
"""
Example: Sequence Analysis with GenoLab

This example demonstrates:
- Decoding FASTA text
- Scanning proteins for the N-glycosylation motif
- Building a profile matrix and consensus string
- Basic nucleotide statistics
- Finding ORFs and candidate proteins
"""

import logging

from genolab import (
    ParseError,
    build_profile,
    candidate_proteins,
    compile_motif,
    count_nucleotides,
    find_in_records,
    gc_content,
    hamming_distance,
    parse_fasta_string,
    reverse_complement,
)

PROTEINS = """>sp|P01|DEMO1 demo protein one
MKNNTSAAQNPSPLLNGTW
>sp|P02|DEMO2 demo protein two
MKVLLLAAGG
>sp|P03|DEMO3 demo protein three
QQNRSLPPNASA
"""

ALIGNED = """>s1
ATCCAGCT
>s2
GGGCAACT
>s3
ATGGATCT
>s4
AAGCAACC
>s5
TTGGAACT
>s6
ATGCCATT
>s7
ATGGCACT
"""


def demo_motif_scan():
    """Scan protein records for N{P}[ST]{P}."""
    print("\n" + "=" * 60)
    print("MOTIF SCAN")
    print("=" * 60)

    motif = compile_motif("N{P}[ST]{P}")
    print(f"\nMotif: {motif} ({len(motif)} positions)")

    records = list(parse_fasta_string(PROTEINS))
    hits = find_in_records(motif, records)

    for label, positions in hits.items():
        print(f"  {label}")
        print("    " + " ".join(str(p) for p in positions))

    print("\nMalformed patterns are rejected:")
    for pattern in ["N[ST", "N{P", "[]"]:
        try:
            compile_motif(pattern)
        except ParseError as e:
            print(f"  {pattern!r}: {e}")


def demo_profile():
    """Build a profile matrix and its consensus."""
    print("\n" + "=" * 60)
    print("PROFILE MATRIX")
    print("=" * 60)

    sequences = [r.sequence for r in parse_fasta_string(ALIGNED)]
    profile = build_profile(sequences)

    print(f"\nConsensus: {profile.consensus()}")
    print(profile)


def demo_sequence_properties():
    """Demonstrate sequence statistics."""
    print("\n" + "=" * 60)
    print("SEQUENCE PROPERTIES")
    print("=" * 60)

    seq = "ATGCATGCATGCTAGCTGATCGATCGATCGATCG"
    print(f"\nSequence: {seq}")
    print(f"Counts (A C G T): {count_nucleotides(seq)}")
    print(f"GC Content: {gc_content(seq, percent=True):.2f}%")
    print(f"Reverse complement: {reverse_complement(seq)}")
    print(f"Hamming distance to itself reversed: {hamming_distance(seq, seq[::-1])}")


def demo_orfs():
    """Demonstrate candidate protein discovery."""
    print("\n" + "=" * 60)
    print("CANDIDATE PROTEINS")
    print("=" * 60)

    seq = (
        "AGCCATGTAGCTAACTCAGGTTACATGGGGATGACCCCGCGACTTGGATTAGAGTCTCTTTT"
        "GGAATAAGCCTGAATGATCCGAGTAGCATCTCAG"
    )
    for protein in candidate_proteins(seq):
        print(f"  {protein}")


def main():
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    print("=" * 60)
    print("GenoLab Sequence Analysis Demo")
    print("=" * 60)

    demo_motif_scan()
    demo_profile()
    demo_sequence_properties()
    demo_orfs()

    print("\n" + "=" * 60)
    print("Demo Complete!")
    print("=" * 60)


if __name__ == "__main__":
    main()
