"""Longest rest block search."""
from typing import Sequence, Tuple

from shiftrota.models.shift import ShiftKind


def find_anchor(schedule: Sequence[ShiftKind]) -> Tuple[int, int]:
    """
    Locate the longest run of REST days.

    Returns ``(start_index, length)`` with a 0-based start. The earliest run
    wins ties. Only runs followed by a working day inside the month count, so
    a rest run reaching the last day is never the anchor. ``(0, 0)`` when no
    run qualifies.
    """
    n = len(schedule)
    best_start, best_len = 0, 0
    i = 0
    while i < n:
        if schedule[i] != ShiftKind.REST:
            i += 1
            continue
        j = i
        while j < n and schedule[j] == ShiftKind.REST:
            j += 1
        if j < n and j - i > best_len:
            best_start, best_len = i, j - i
        i = j
    return best_start, best_len
