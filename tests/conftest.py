# conftest.py
# Shared FASTA fixtures; everything is written under pytest's tmp_path.

from pathlib import Path

import pytest


@pytest.fixture
def write_fasta(tmp_path: Path):
    """Factory: write_fasta({"id": "SEQ", ...}, name="x.fa") -> Path."""
    def _write(records, name="toy.fa"):
        p = tmp_path / name
        with p.open("w") as f:
            for rid, seq in records.items():
                f.write(f">{rid}\n{seq}\n")
        return p
    return _write


@pytest.fixture
def toy_fasta(write_fasta) -> Path:
    """Two short records; with k=2 every row has at least one window."""
    return write_fasta({"seq1": "ACGT", "seq2": "TTTT"})
