from typing import Iterable, Sequence, TextIO

HEADER_LABEL = "seq_id"


def format_header(universe: Sequence[str]) -> str:
    return "\t".join([HEADER_LABEL, *universe])


def format_row(record_id: str, freqs: Iterable[float]) -> str:
    # repr of a Python float, e.g. 0.2 / 0.0 / 0.3333333333333333
    return "\t".join([record_id, *(repr(float(f)) for f in freqs)])


class TableWriter:
    """Streams tab-separated lines to a text handle, flushing per row."""
    def __init__(self, out: TextIO):
        self.out = out
        self.rows = 0

    def header(self, universe: Sequence[str]) -> None:
        self.out.write(format_header(universe) + "\n")

    def row(self, record_id: str, freqs: Iterable[float]) -> None:
        self.out.write(format_row(record_id, freqs) + "\n")
        self.out.flush()
        self.rows += 1
