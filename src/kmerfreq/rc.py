
PLACEHOLDER = "X"


class _Complement(dict):
    """Translation table that maps anything outside ACGT to the placeholder."""
    def __missing__(self, key):
        return ord(PLACEHOLDER)


BASE_COMP = _Complement({ord(a): ord(b) for a, b in zip("ACGT", "TGCA")})

def revcomp(seq: str) -> str:
    """Reverse-complement of an uppercase DNA string; non-ACGT becomes 'X'."""
    return seq.translate(BASE_COMP)[::-1]

def canon_kmer(kmer: str) -> str:
    """Return canonical representation: min(kmer, revcomp(kmer))."""
    rc = revcomp(kmer)
    return kmer if kmer <= rc else rc
