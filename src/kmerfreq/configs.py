from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from .alphabet import UNIVERSE_POLICIES

MAX_KMER_SIZE = 10
DEFAULT_KMER_SIZE = 4
DEFAULT_OUT_DIRNAME = "kmer-out"


def default_out_dir() -> Path:
    return Path.cwd() / DEFAULT_OUT_DIRNAME


# ------------------------------
# KmerConfig
# ------------------------------
@dataclass
class KmerConfig:
    # --- input ---
    input_file: str
    format_hint: Optional[str] = None     # advisory only, any string; FASTA is always read

    # --- counting ---
    kmer_size: int = DEFAULT_KMER_SIZE
    universe_policy: str = "all"          # "all" (4**k columns) or "canonical"

    # --- output ---
    out_dir: Path = field(default_factory=default_out_dir)  # accepted, nothing is written there

    def __post_init__(self):
        if self.kmer_size > MAX_KMER_SIZE:
            raise ValueError(f"--kmer_size ({self.kmer_size}) must be less than {MAX_KMER_SIZE}")
        if self.kmer_size < 1:
            raise ValueError(f"--kmer_size ({self.kmer_size}) must be at least 1")
        if self.universe_policy not in UNIVERSE_POLICIES:
            raise ValueError(f"universe_policy must be one of {UNIVERSE_POLICIES}")
        if self.format_hint is not None:
            self.format_hint = self.format_hint.lower()
        self.out_dir = Path(self.out_dir)
