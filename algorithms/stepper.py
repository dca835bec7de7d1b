import logging
from enum import Enum
from typing import Callable, List, Optional

from algorithms.events import EventKind, StepEvent

log = logging.getLogger(__name__)

EMPTY_PATTERN_MESSAGE = "Empty pattern: matches at every position."

Emit = Callable[[StepEvent], None]


class StepperNotStarted(RuntimeError):
    pass


class Outcome(str, Enum):
    STARTED = "started"
    EMPTY_PATTERN = "empty_pattern"


def _discard(event: StepEvent) -> None:
    pass


class Stepper:
    """
    Shared driver for the stepping engines.

    Subclasses build their table in `_prepare`, say when the cursor has run off
    the text in `_exhausted`, and perform exactly one comparison in `_advance`.
    `step`, `run_to_completion` and `find_all` all go through `_tick`, so the
    three modes only differ in how often it runs and which events get through.
    """

    name = ""

    def __init__(self):
        self.text: Optional[str] = None
        self.pattern: Optional[str] = None
        self.comparisons = 0
        self.found: List[int] = []
        self.finished = False
        self._started = False

    def start(self, text: str, pattern: str) -> Outcome:
        self.text, self.pattern = text, pattern
        self.comparisons = 0
        self.found = []
        self._started = True
        if not pattern:
            self.finished = True
            log.info("%s: empty pattern, nothing to step", self.name)
            return Outcome.EMPTY_PATTERN
        self.finished = False
        self._prepare()
        log.info("%s: started, n=%d m=%d", self.name, len(text), len(pattern))
        return Outcome.STARTED

    def step(self) -> List[StepEvent]:
        """Perform one comparison and return the events it produced."""
        events: List[StepEvent] = []
        self._tick(events.append, compare=True)
        return events

    def run_to_completion(self, on_event: Optional[Emit] = None) -> List[int]:
        self._drain(on_event, compare=True)
        return list(self.found)

    def find_all(self, on_event: Optional[Emit] = None) -> List[int]:
        """Like run_to_completion, but compare events are suppressed."""
        self._drain(on_event, compare=False)
        return list(self.found)

    def table(self):
        raise NotImplementedError

    def _drain(self, on_event, compare):
        emit = on_event or _discard
        while True:
            self._tick(emit, compare)
            if self.finished:
                break

    def _tick(self, emit: Emit, compare: bool):
        if not self._started:
            raise StepperNotStarted(f"{self.name}: start() must be called first")
        if self.finished:
            return
        if not self._exhausted():
            self._advance(emit if compare else _discard, emit)
        # the finished event rides along with the last comparison
        if self._exhausted():
            self.finished = True
            log.info("%s: finished after %d comparisons, found %s",
                     self.name, self.comparisons, self.found)
            emit(StepEvent(EventKind.FINISHED, self.name, self.comparisons))

    def _compared(self, shift, text_index, pattern_index, match, **extra) -> StepEvent:
        return StepEvent(
            EventKind.COMPARE, self.name, self.comparisons,
            shift=shift, text_index=text_index, pattern_index=pattern_index,
            text_symbol=self.text[text_index],
            pattern_symbol=self.pattern[pattern_index],
            match=match, **extra,
        )

    def _report_found(self, emit: Emit, index: int, next_shift: Optional[int] = None):
        self.found.append(index)
        log.debug("%s: pattern found at %d", self.name, index)
        emit(StepEvent(EventKind.FOUND, self.name, self.comparisons,
                       shift=index, found_index=index, next_shift=next_shift))

    def _prepare(self):
        raise NotImplementedError

    def _exhausted(self) -> bool:
        raise NotImplementedError

    def _advance(self, on_compare: Emit, emit: Emit):
        raise NotImplementedError
