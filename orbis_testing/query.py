"""
Test Query Reader
=================

Reads test queries, one per line: expected ids, '@', then spatial args.

    G1 G2 @ Intersects(-10 -10 10 10)
    @ IsWithin(50 50 60 60)             # expects no results

Blank lines and lines starting with '#' are skipped.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable, Iterator, List

from orbis_strategy.args import SpatialArgs, SpatialArgsParser

if TYPE_CHECKING:
    from orbis_spatial.context import SpatialContext


@dataclass(frozen=True)
class SpatialTestQuery:
    """
    Attributes:
        test_name: Source the query came from (file name)
        line_number: 1-based line in the source
        line: Raw query line
        ids: Expected result ids
        args: Parsed operation and shape
    """
    test_name: str
    line_number: int
    line: str
    ids: List[str]
    args: SpatialArgs

    def __str__(self) -> str:
        return f"{self.test_name}:{self.line_number} {self.line}"


def read_test_queries(
    parser: SpatialArgsParser,
    ctx: "SpatialContext",
    name: str,
    lines: Iterable[str],
) -> Iterator[SpatialTestQuery]:
    """
    Yield SpatialTestQuery records from ``lines``.

    Raises:
        ValueError: If a line has no '@' separator or its args are malformed
    """
    for line_number, raw in enumerate(lines, start=1):
        line = raw.strip()
        if not line or line.startswith("#"):
            continue
        ids_text, sep, args_text = line.partition("@")
        if not sep:
            raise ValueError(f"{name}:{line_number}: expected 'ids @ args', got {line!r}")
        try:
            args = parser.parse(args_text.strip(), ctx)
        except ValueError as e:
            raise ValueError(f"{name}:{line_number}: {e}") from e
        yield SpatialTestQuery(
            test_name=name,
            line_number=line_number,
            line=line,
            ids=ids_text.split(),
            args=args,
        )
