from collections import Counter
from dataclasses import dataclass
from typing import Iterable, List, Sequence

import numpy as np

from .alphabet import kmer_universe
from .rc import canon_kmer
from .records import SequenceRecord


def get_kmers(k: int, seq: str) -> List[str]:
    """Canonical k-mer of every window in `seq`, left to right.

    A sequence shorter than k has no windows.
    """
    n = len(seq) - k + 1 if len(seq) >= k else 0
    return [canon_kmer(seq[i:i+k]) for i in range(n)]


def count_kmers(kmers: Iterable[str]) -> Counter:
    return Counter(kmers)


def kmer_frequencies(k: int, seq: str, universe: Sequence[str]) -> np.ndarray:
    """Per-universe-entry frequency: count / number of windows in `seq`.

    The denominator is the window count, not the universe size. Records with
    no windows get an all-zero vector.
    """
    v = np.zeros(len(universe), dtype=np.float64)
    kmers = get_kmers(k, seq)
    if not kmers:
        return v
    counts = count_kmers(kmers)
    n = float(len(kmers))
    for i, kmer in enumerate(universe):
        c = counts.get(kmer)
        if c:
            v[i] = c / n
    return v


@dataclass
class KmerScanner:
    """Binds k and a column universe once; scans records against it."""
    k: int
    universe: Sequence[str] = ()

    def __post_init__(self):
        if not self.universe:
            self.universe = kmer_universe(self.k)

    def scan(self, record: SequenceRecord) -> np.ndarray:
        return kmer_frequencies(self.k, record.seq.upper(), self.universe)
