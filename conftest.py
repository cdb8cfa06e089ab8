import pytest


@pytest.fixture
def aligned_sequences():
    """Seven aligned DNA sequences with consensus ATGCAACT."""
    return [
        "ATCCAGCT",
        "GGGCAACT",
        "ATGGATCT",
        "AAGCAACC",
        "TTGGAACT",
        "ATGCCATT",
        "ATGGCACT",
    ]
