from itertools import product
from typing import List, Tuple

from .rc import canon_kmer

DNA_ALPHABET = "ACGT"
UNIVERSE_POLICIES = ("all", "canonical")


def all_kmers(k: int, alphabet: str = DNA_ALPHABET) -> List[str]:
    """Every length-k string over `alphabet`, rightmost position varying fastest.

    k=0 yields an empty list (not [""]). Callers are responsible for bounding k;
    4**10 is about one million strings.
    """
    if k <= 0:
        return []
    return ["".join(p) for p in product(alphabet, repeat=k)]


def kmer_universe(k: int, policy: str = "all") -> Tuple[str, ...]:
    """Column universe for the frequency table.

    policy="all"       raw 4**k enumeration (some columns can never be observed
                       because windows are always canonicalized)
    policy="canonical" only entries equal to their own canonical form,
                       enumeration order preserved
    """
    if policy not in UNIVERSE_POLICIES:
        raise ValueError(f"universe policy must be one of {UNIVERSE_POLICIES}, got {policy!r}")
    kmers = all_kmers(k)
    if policy == "canonical":
        kmers = [km for km in kmers if canon_kmer(km) == km]
    return tuple(kmers)
