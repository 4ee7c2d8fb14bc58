from __future__ import annotations

import logging
import sys
from enum import Enum
from pathlib import Path
from typing import Iterator, Optional, TextIO

from Bio.SeqIO.FastaIO import SimpleFastaParser

from .alphabet import kmer_universe
from .configs import KmerConfig
from .records import SequenceRecord
from .scanner import KmerScanner
from .table import TableWriter

log = logging.getLogger("kmerfreq")


class FileType(Enum):
    FASTA = "fasta"
    FASTQ = "fastq"


FASTQ_HINTS = ("fastq", "fq")


_EXT_TO_TYPE = {
    "fa": FileType.FASTA,
    "fasta": FileType.FASTA,
    "fna": FileType.FASTA,
    "fastq": FileType.FASTQ,
    "fq": FileType.FASTQ,
}


def guess_format(path: Path | str) -> Optional[FileType]:
    """Guess the sequence format from the file extension (no content sniffing)."""
    ext = Path(path).suffix.lstrip(".")
    return _EXT_TO_TYPE.get(ext)


def resolve_input(path: Path | str) -> Path:
    p = Path(path)
    if not p.is_file():
        raise FileNotFoundError(f"-f \"{path}\" is not a file")
    return p


def read_records(path: Path | str) -> Iterator[SequenceRecord]:
    """Yield (id, sequence) records from a FASTA file, one at a time.

    Undecodable bytes are carried through as surrogates; a record whose sequence
    is not valid UTF-8 is logged and skipped. Parse errors propagate.
    """
    with open(path, "r", encoding="utf-8", errors="surrogateescape") as handle:
        for title, seq in SimpleFastaParser(handle):
            rec_id = (title.split(None, 1) or [""])[0]
            try:
                seq.encode("utf-8")
            except UnicodeEncodeError:
                log.warning("Skipping record %r: sequence is not valid UTF-8 text.", rec_id)
                continue
            yield SequenceRecord(rec_id, seq)


def run(config: KmerConfig, out: TextIO = None) -> int:
    """Print the k-mer frequency table for `config.input_file`; return rows written."""
    out = out if out is not None else sys.stdout
    path = resolve_input(config.input_file)

    guessed = guess_format(path)
    log.info("Guessed %s", guessed.name if guessed else "None")
    log.debug("Output directory (unused): %s", config.out_dir)
    if guessed is FileType.FASTQ or config.format_hint in FASTQ_HINTS:
        log.warning("FASTQ input is not supported; reading %s as FASTA.", path)

    universe = kmer_universe(config.kmer_size, config.universe_policy)
    scanner = KmerScanner(config.kmer_size, universe)

    writer = TableWriter(out)
    writer.header(universe)
    for record in read_records(path):
        writer.row(record.id, scanner.scan(record))
    return writer.rows
