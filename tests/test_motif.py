"""
Tests for motif pattern compilation and scanning.
"""

import pytest

from genolab.errors import InvalidSymbolError, ParseError
from genolab.io import FastaRecord
from genolab.motif import (
    AnyOf,
    CLASS_SCAN_LIMIT,
    CompiledMotif,
    Literal,
    NoneOf,
    compile_motif,
    find_all,
    find_in_records,
)

GLYCOSYLATION = "N{P}[ST]{P}"


class TestCompileMotif:

    def test_glycosylation_tokens(self):
        motif = compile_motif(GLYCOSYLATION)
        assert motif.tokens == (
            Literal("N"),
            NoneOf("P"),
            AnyOf(("S", "T")),
            NoneOf("P"),
        )
        assert len(motif) == 4

    def test_deterministic(self):
        assert compile_motif(GLYCOSYLATION) == compile_motif(GLYCOSYLATION)
        assert str(compile_motif(GLYCOSYLATION)) == GLYCOSYLATION

    def test_plain_literals(self):
        motif = compile_motif("ACG")
        assert [str(t) for t in motif] == ["A", "C", "G"]

    def test_stray_closers_are_literals(self):
        motif = compile_motif("A]}")
        assert motif.tokens == (Literal("A"), Literal("]"), Literal("}"))

    def test_class_duplicates_collapse(self):
        motif = compile_motif("[SST]")
        assert motif.tokens == (AnyOf(("S", "T")),)
        assert str(motif) == "[ST]"

    def test_class_at_scan_limit(self):
        # Four symbols plus ']' fill the scan limit exactly
        body = "ACDE"
        assert len(body) + 1 == CLASS_SCAN_LIMIT
        motif = compile_motif(f"[{body}]")
        assert motif.tokens == (AnyOf(tuple(body)),)

    def test_class_over_scan_limit(self):
        with pytest.raises(ParseError):
            compile_motif("[ACDEF]")

    @pytest.mark.parametrize("pattern", ["[ST", "N[S", "[", "A[ST"])
    def test_unterminated_class(self, pattern):
        with pytest.raises(ParseError):
            compile_motif(pattern)

    def test_empty_class(self):
        with pytest.raises(ParseError):
            compile_motif("N[]")

    def test_nested_class(self):
        with pytest.raises(ParseError) as excinfo:
            compile_motif("[S[T]]")
        assert excinfo.value.position == 2

    @pytest.mark.parametrize("pattern", ["{P", "N{", "{PP}", "{}", "{}}"])
    def test_malformed_exclusion(self, pattern):
        with pytest.raises(ParseError):
            compile_motif(pattern)

    def test_empty_pattern(self):
        with pytest.raises(ParseError):
            compile_motif("")

    def test_non_string_pattern(self):
        with pytest.raises(TypeError, match="NoneType"):
            compile_motif(None)

    def test_non_ascii_pattern(self):
        with pytest.raises(ParseError) as excinfo:
            compile_motif("N{P}[Sé]")
        assert excinfo.value.position == 6
        assert excinfo.value.pattern == "N{P}[Sé]"

    def test_parse_error_is_value_error(self):
        with pytest.raises(ValueError):
            compile_motif("{")

    def test_motif_without_tokens_rejected(self):
        with pytest.raises(ParseError):
            CompiledMotif(pattern="", tokens=())


class TestFindAll:

    def test_single_literal_overlaps(self):
        assert find_all(compile_motif("A"), "AAAA") == [1, 2, 3, 4]

    def test_overlapping_windows(self):
        assert find_all("AA", "AAAA") == [1, 2, 3]

    def test_excluded_symbol_rejects_window(self):
        # N P S P at position 5: the first {P} sees a P
        assert find_all(GLYCOSYLATION, "MKVLNPSPGG") == []

    def test_glycosylation_hit(self):
        assert find_all(GLYCOSYLATION, "MKVLNASAGG") == [5]

    def test_trailing_exclusion_rejects_window(self):
        assert find_all(GLYCOSYLATION, "NASP") == []
        assert find_all(GLYCOSYLATION, "NATA") == [1]

    def test_multiple_hits_in_order(self):
        sequence = "NRSLNQTANGTW"
        assert find_all(GLYCOSYLATION, sequence) == [1, 5, 9]

    def test_every_reported_window_matches(self):
        motif = compile_motif("[AC]{G}T")
        sequence = "ACTGATCCTAGTCATAAT"
        positions = find_all(motif, sequence)
        for p in positions:
            window = sequence[p - 1:p - 1 + len(motif)]
            assert window[0] in "AC"
            assert window[1] != "G"
            assert window[2] == "T"
        # Exhaustive: no other start matches
        expected = [
            i + 1 for i in range(len(sequence) - 2)
            if sequence[i] in "AC" and sequence[i + 1] != "G" and sequence[i + 2] == "T"
        ]
        assert positions == expected

    def test_sequence_shorter_than_motif(self):
        assert find_all(GLYCOSYLATION, "NAS") == []
        assert find_all(GLYCOSYLATION, "") == []

    def test_sequence_equal_to_motif_width(self):
        assert find_all(GLYCOSYLATION, "NASA") == [1]

    def test_case_sensitive(self):
        assert find_all("N", "nnN") == [3]

    def test_non_ascii_sequence(self):
        with pytest.raises(InvalidSymbolError) as excinfo:
            find_all("A", "AAÅA")
        assert excinfo.value.position == 2

    def test_method_shortcut(self):
        motif = compile_motif("[ST]")
        assert motif.find_all("ASTA") == [2, 3]

    def test_matches_requires_full_window(self):
        motif = compile_motif("AC")
        assert motif.matches("AC")
        assert not motif.matches("A")
        assert not motif.matches("ACG")


class TestFindInRecords:

    def test_mapping_keeps_only_hits(self):
        records = {
            "P01": "MNASAP",
            "P02": "MKVLLL",
            "P03": "NGTANPSP",
        }
        assert find_in_records(GLYCOSYLATION, records) == {
            "P01": [2],
            "P03": [1],
        }

    def test_fasta_records_keyed_by_id(self):
        records = [
            FastaRecord(id="B5ZC00", description="B5ZC00 demo", sequence="KNNTSAAQ"),
            FastaRecord(id="P07204", description="P07204 demo", sequence="QQQ"),
        ]
        assert find_in_records(compile_motif(GLYCOSYLATION), records) == {"B5ZC00": [2, 3]}

    def test_pairs(self):
        hits = find_in_records("A", [("x", "CA"), ("y", "CC")])
        assert list(hits) == ["x"]
        assert hits["x"] == [2]
