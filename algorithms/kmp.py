import logging

from algorithms.stepper import Outcome, Stepper

log = logging.getLogger(__name__)


def kmp_build_lps(p: str):
    lps = [0] * len(p)
    length, i = 0, 1
    while i < len(p):
        if p[i] == p[length]:
            length += 1
            lps[i] = length
            i += 1
        elif length:
            # reuse the shorter border, i stays put
            length = lps[length-1]
        else:
            lps[i] = 0
            i += 1
    return lps


class KMPStepper(Stepper):
    """Knuth-Morris-Pratt over an (i, j) cursor, one comparison per tick."""

    name = "kmp"

    def __init__(self):
        super().__init__()
        self.lps = None
        self.i = self.j = None

    def _prepare(self):
        self.lps = kmp_build_lps(self.pattern)
        self.i = self.j = 0

    def table(self):
        return list(self.lps or [])

    @property
    def shift(self):
        return self.i - self.j

    def _exhausted(self):
        return self.i >= len(self.text)

    def _advance(self, on_compare, emit):
        i, j, m = self.i, self.j, len(self.pattern)
        match = self.text[i] == self.pattern[j]
        self.comparisons += 1
        on_compare(self._compared(i - j, i, j, match))
        if match:
            self.i, self.j = i + 1, j + 1
            if self.j == m:
                self._report_found(emit, self.i - m)
                self.j = self.lps[self.j-1]
        elif j:
            self.j = self.lps[j-1]
            log.debug("kmp: mismatch at text[%d], j falls back %d -> %d", i, j, self.j)
        else:
            self.i = i + 1


def kmp_find_all(t: str, p: str):
    stepper = KMPStepper()
    if stepper.start(t, p) is Outcome.EMPTY_PATTERN:
        return []
    return stepper.find_all()
