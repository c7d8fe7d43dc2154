"""
Match Concerns
==============

How a query's actual result ids are compared with the expected ids.

- ORDERED: same ids in the same sequence, no extras
- SUPERSET: every expected id present, extras allowed
- UNORDERED_EXACT: same ids once both sides are sorted
"""

from enum import Enum
from typing import Sequence


class MatchFailure(AssertionError):
    """Raised when results do not satisfy a match concern."""
    pass


class SpatialMatchConcern(str, Enum):
    """Policy for comparing actual and expected result ids."""
    ORDERED = "ordered"
    SUPERSET = "superset"
    UNORDERED_EXACT = "unordered_exact"

    @property
    def order_is_important(self) -> bool:
        return self is SpatialMatchConcern.ORDERED

    @property
    def results_are_superset(self) -> bool:
        return self is SpatialMatchConcern.SUPERSET


_MISSING = object()


def check_results(
    concern: SpatialMatchConcern,
    expected: Sequence[str],
    got: Sequence[str],
    msg: str = "",
) -> None:
    """
    Compare result ids against expected ids under ``concern``.

    Raises:
        MatchFailure: On the first violation found
    """
    if concern.order_is_important:
        expected_ids = iter(expected)
        for got_id in got:
            expected_id = next(expected_ids, _MISSING)
            if expected_id is _MISSING:
                raise MatchFailure(f"out of order: {msg} :: unexpected extra result: {got_id}")
            if expected_id != got_id:
                raise MatchFailure(
                    f"out of order: {msg} :: expected {expected_id} but got {got_id}"
                )
        remaining = next(expected_ids, _MISSING)
        if remaining is not _MISSING:
            raise MatchFailure(f"{msg} :: expect more results than we got: {remaining}")

    elif concern.results_are_superset:
        found = set(got)
        for expected_id in expected:
            if expected_id not in found:
                raise MatchFailure(
                    f"Results are missing id: {expected_id} :: {sorted(found)}"
                )

    else:
        # sort both so that the order is not important
        expected_sorted = sorted(expected)
        got_sorted = sorted(got)
        if expected_sorted != got_sorted:
            raise MatchFailure(f"{msg} :: expected {expected_sorted} but got {got_sorted}")
