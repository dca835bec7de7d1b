import logging
from typing import Dict, Optional

from algorithms.stepper import Outcome, Stepper

log = logging.getLogger(__name__)


def bm_build_last_occurrence(p: str) -> Dict[str, int]:
    last = {}
    for i, ch in enumerate(p):
        last[ch] = i
    return last


def last_occurrence(table: Dict[str, int], symbol: str) -> Optional[int]:
    """Rightmost index of `symbol` in the pattern, None if it never occurs."""
    return table.get(symbol)


def bad_character_shift(j: int, lo: Optional[int]) -> int:
    """
    Shift after a mismatch at pattern index j.

    An absent symbol moves the pattern past the whole compared prefix (j + 1).
    A last occurrence right of j would give j - lo <= 0, hence the floor of 1.
    """
    if lo is None:
        return j + 1
    return max(1, j - lo)


def found_shift(table: Dict[str, int], text: str, s: int, m: int) -> int:
    """Shift after a full match at s, keyed on the symbol just past the window."""
    if s + m >= len(text):
        return 1
    lo = last_occurrence(table, text[s+m])
    return m + 1 if lo is None else m - lo


class BoyerMooreStepper(Stepper):
    """Boyer-Moore with the bad-character rule over an (s, j) cursor."""

    name = "boyer-moore"

    def __init__(self):
        super().__init__()
        self.last = None
        self.s = self.j = None

    def _prepare(self):
        self.last = bm_build_last_occurrence(self.pattern)
        self.s, self.j = 0, len(self.pattern) - 1

    def table(self):
        return dict(sorted((self.last or {}).items()))

    @property
    def shift(self):
        return self.s

    def _exhausted(self):
        return self.s > len(self.text) - len(self.pattern)

    def _advance(self, on_compare, emit):
        s, j, m = self.s, self.j, len(self.pattern)
        match = self.pattern[j] == self.text[s+j]
        self.comparisons += 1
        if match:
            on_compare(self._compared(s, s + j, j, True))
            self.j = j - 1
            if self.j < 0:
                shift = found_shift(self.last, self.text, s, m)
                self._report_found(emit, s, next_shift=shift)
                self._realign(shift)
            return
        lo = last_occurrence(self.last, self.text[s+j])
        shift = bad_character_shift(j, lo)
        on_compare(self._compared(s, s + j, j, False,
                                  last_occurrence=lo, next_shift=shift))
        self._realign(shift)

    def _realign(self, shift):
        self.s += shift
        self.j = len(self.pattern) - 1
        log.debug("boyer-moore: shift by %d to s=%d", shift, self.s)


def bm_find_all(t: str, p: str):
    stepper = BoyerMooreStepper()
    if stepper.start(t, p) is Outcome.EMPTY_PATTERN:
        return []
    return stepper.find_all()
