__version__ = "0.1.0"

from .rc import revcomp, canon_kmer
from .alphabet import all_kmers, kmer_universe
from .scanner import KmerScanner, get_kmers, count_kmers, kmer_frequencies
from .records import SequenceRecord
from .configs import KmerConfig
from .pipeline import FileType, guess_format, read_records, run
