"""
Sample Data Reader
==================

Reads sample documents from tab-separated text:

    #id	name	shape
    G1	Point One	-10 20
    G2	Box	-10 -10 10 10

Blank lines and lines starting with '#' are skipped.
"""

from dataclasses import dataclass
from typing import Iterable, Iterator


@dataclass(frozen=True)
class SampleData:
    """One sample document: id, display name and legacy shape text."""
    id: str
    name: str
    shape: str


def read_sample_data(lines: Iterable[str]) -> Iterator[SampleData]:
    """
    Yield SampleData records from ``lines``.

    Raises:
        ValueError: If a line does not have 3 tab-separated columns
    """
    for line_number, raw in enumerate(lines, start=1):
        line = raw.rstrip("\r\n")
        if not line.strip() or line.startswith("#"):
            continue
        parts = line.split("\t")
        if len(parts) != 3:
            raise ValueError(
                f"Line {line_number}: expected 'id<TAB>name<TAB>shape', got {line!r}"
            )
        yield SampleData(id=parts[0], name=parts[1], shape=parts[2])
