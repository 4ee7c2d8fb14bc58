from dataclasses import dataclass


@dataclass(frozen=True)
class SequenceRecord:
    id: str
    seq: str
