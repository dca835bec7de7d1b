from dataclasses import dataclass, asdict
from enum import Enum
from typing import Optional


class EventKind(str, Enum):
    COMPARE = "compare"
    FOUND = "found"
    FINISHED = "finished"


@dataclass(frozen=True)
class StepEvent:
    """
    One comparison or shift decision made by a stepper.

    compare  -> shift, text_index, pattern_index, both symbols and `match`.
                Boyer-Moore mismatches also carry `last_occurrence` (None when
                the text symbol never appears in the pattern) and `next_shift`.
    found    -> found_index, plus `next_shift` for Boyer-Moore.
    finished -> only the total `comparisons`.
    """

    kind: EventKind
    algorithm: str
    comparisons: int
    shift: Optional[int] = None
    text_index: Optional[int] = None
    pattern_index: Optional[int] = None
    text_symbol: Optional[str] = None
    pattern_symbol: Optional[str] = None
    match: Optional[bool] = None
    found_index: Optional[int] = None
    next_shift: Optional[int] = None
    last_occurrence: Optional[int] = None

    def to_dict(self) -> dict:
        d = asdict(self)
        d["kind"] = self.kind.value
        return d
