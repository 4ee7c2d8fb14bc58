import argparse, logging, sys
from pathlib import Path

from . import __version__
from .configs import DEFAULT_KMER_SIZE, KmerConfig, default_out_dir
from .pipeline import run


def _setup_logging(level: str) -> logging.Logger:
    log = logging.getLogger("kmerfreq")
    if not log.handlers:
        ch = logging.StreamHandler(sys.stderr)
        ch.setFormatter(logging.Formatter("[%(name)s] %(message)s"))
        log.addHandler(ch)
    log.setLevel(level.upper())
    return log


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="kmerfreq", description="Count kmers per sequence")
    p.add_argument("-f", "--file", dest="input_file", metavar="FILE", required=True,
                   help="Input file")
    p.add_argument("-t", "--format", metavar="FORMAT", default=None,
                   help="Input file format (fasta/q); advisory only")
    p.add_argument("-k", "--kmer_size", metavar="N", type=int, default=DEFAULT_KMER_SIZE,
                   help="Kmer size")
    p.add_argument("-o", "--outdir", dest="out_dir", metavar="DIR", type=Path, default=None,
                   help="Output directory")
    p.add_argument("-c", "--canonical-only", action="store_true",
                   help="Only emit columns for canonical k-mers")
    p.add_argument("--log-level", default="INFO",
                   choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return p


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    _setup_logging(args.log_level)
    try:
        cfg = KmerConfig(
            input_file=args.input_file,
            format_hint=args.format,
            kmer_size=args.kmer_size,
            universe_policy="canonical" if args.canonical_only else "all",
            out_dir=args.out_dir or default_out_dir(),
        )
        run(cfg)
    except (ValueError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
