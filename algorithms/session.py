import logging
from enum import Enum
from typing import Callable, List, Optional

from algorithms.boyer_moore import BoyerMooreStepper
from algorithms.events import StepEvent
from algorithms.kmp import KMPStepper
from algorithms.stepper import Outcome, Stepper

log = logging.getLogger(__name__)


class Command(str, Enum):
    NEXT = "next"
    AUTO = "auto"
    FIND_ALL = "find_all"
    QUIT = "quit"


_COMMANDS = {
    "n": Command.NEXT, "next": Command.NEXT,
    "a": Command.AUTO, "auto": Command.AUTO,
    "f": Command.FIND_ALL, "find_all": Command.FIND_ALL, "find-all": Command.FIND_ALL,
    "q": Command.QUIT, "quit": Command.QUIT,
}

_ALGORITHMS = {
    "1": KMPStepper, "kmp": KMPStepper,
    "2": BoyerMooreStepper, "bm": BoyerMooreStepper,
    "boyer-moore": BoyerMooreStepper, "boyer_moore": BoyerMooreStepper,
    "boyermoore": BoyerMooreStepper,
}


def parse_command(token: Optional[str]) -> Command:
    # anything unrecognized, blank lines included, means "next"
    return _COMMANDS.get((token or "").strip().lower(), Command.NEXT)


def make_stepper(algorithm: Optional[str]) -> Stepper:
    return _ALGORITHMS.get((algorithm or "").strip().lower(), KMPStepper)()


class Session:
    """One text/pattern pair driven by exactly one stepper."""

    def __init__(self, text: str, pattern: str, algorithm: Optional[str] = "kmp"):
        self.stepper = make_stepper(algorithm)
        self.outcome = self.stepper.start(text, pattern)
        self.quit_requested = False

    @property
    def algorithm(self) -> str:
        return self.stepper.name

    @property
    def empty_pattern(self) -> bool:
        return self.outcome is Outcome.EMPTY_PATTERN

    @property
    def finished(self) -> bool:
        return self.quit_requested or self.stepper.finished

    @property
    def found(self) -> List[int]:
        return list(self.stepper.found)

    @property
    def comparisons(self) -> int:
        return self.stepper.comparisons

    def table(self):
        return self.stepper.table()

    def apply(self, token: Optional[str],
              on_event: Optional[Callable[[StepEvent], None]] = None) -> List[StepEvent]:
        command = parse_command(token)
        if command is Command.QUIT:
            self.quit()
            return []
        if self.finished:
            return []
        events: List[StepEvent] = []

        def collect(event):
            events.append(event)
            if on_event is not None:
                on_event(event)

        if command is Command.AUTO:
            self.stepper.run_to_completion(collect)
        elif command is Command.FIND_ALL:
            self.stepper.find_all(collect)
        else:
            for event in self.stepper.step():
                collect(event)
        return events

    def quit(self):
        if not self.quit_requested:
            log.info("%s: quit after %d comparisons", self.algorithm, self.comparisons)
        self.quit_requested = True
