import logging
from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional

logger = logging.getLogger(__name__)


@dataclass
class FastaRecord:
    """
    Represents a single FASTA record.

    Attributes:
        id: Sequence identifier (first word after '>')
        description: Full header line (everything after '>')
        sequence: The nucleotide/protein sequence
    """
    id: str
    description: str
    sequence: str

    def __len__(self) -> int:
        return len(self.sequence)

    def __str__(self) -> str:
        return f">{self.description}\n{self.sequence}"

    def to_fasta(self, line_width: int = 60) -> str:
        """Format as FASTA string with wrapped sequence lines."""
        lines = [f">{self.description}"]
        for i in range(0, len(self.sequence), line_width):
            lines.append(self.sequence[i:i + line_width])
        return "\n".join(lines)


def _make_record(header: str, parts: List[str], uppercase: bool) -> FastaRecord:
    seq = "".join(parts)
    if uppercase:
        seq = seq.upper()
    seq_id = header.split()[0] if header else ""
    return FastaRecord(id=seq_id, description=header, sequence=seq)


def parse_fasta_string(
    content: str,
    uppercase: bool = True
) -> Iterator[FastaRecord]:
    """
    Parse FASTA format from a string.

    Lines starting with '>' open a new record; every other non-blank
    line is stripped and appended to the current record's sequence.

    Args:
        content: FASTA formatted string
        uppercase: Convert sequences to uppercase

    Yields:
        FastaRecord objects

    Example:
        >>> records = list(parse_fasta_string(">s1 demo\\nAC\\nGT\\n"))
        >>> records[0].id, records[0].sequence
        ('s1', 'ACGT')
    """
    current_header: Optional[str] = None
    current_sequence: List[str] = []
    orphan_lines = 0

    for line in content.splitlines():
        line = line.strip()
        if not line:
            continue

        if line.startswith(">"):
            if current_header is not None:
                yield _make_record(current_header, current_sequence, uppercase)

            current_header = line[1:].strip()
            current_sequence = []
        elif current_header is None:
            orphan_lines += 1
        else:
            current_sequence.append(line)

    if orphan_lines:
        logger.warning(f"Skipped {orphan_lines} sequence line(s) before the first header")

    if current_header is not None:
        yield _make_record(current_header, current_sequence, uppercase)


def fasta_to_dict(
    content: str,
    key: str = "id",
    uppercase: bool = True
) -> Dict[str, str]:
    """
    Parse a FASTA string into a dictionary of sequences.

    Args:
        content: FASTA formatted string
        key: Record field used as dictionary key ("id" or "description")
        uppercase: Convert sequences to uppercase

    Returns:
        Dictionary mapping record keys to sequences. A repeated key
        keeps the last record.
    """
    if key not in ("id", "description"):
        raise ValueError(f"Unknown key: {key}")

    return {
        getattr(record, key): record.sequence
        for record in parse_fasta_string(content, uppercase=uppercase)
    }
