from typing import Dict, List

from algorithms.events import EventKind, StepEvent


def render_alignment(text: str, pat: str, shift: int, text_idx: int, is_match: bool) -> str:
    """Text, the pattern shifted under it, and an M/X caret under the compared symbol."""
    caret = ""
    if 0 <= text_idx < len(text):
        caret = " " * text_idx + ("M" if is_match else "X")
    return "\n".join([text, " " * shift + pat, caret])


def render_lps_table(pat: str, lps: List[int]) -> str:
    return "\n".join([
        "Index: " + " ".join(str(i) for i in range(len(pat))),
        "Value: " + " ".join(str(v) for v in lps),
    ])


def render_last_occurrence(table: Dict[str, int]) -> str:
    return "   ".join(f"'{ch}' -> {idx}" for ch, idx in sorted(table.items()))


def describe_event(event: StepEvent, ran_through: bool = False) -> str:
    """ran_through: the event came from an auto or find-all run."""
    if event.kind is EventKind.FOUND:
        return f"Pattern found at index {event.found_index}"
    if event.kind is EventKind.FINISHED:
        if ran_through:
            return f"Done. Total comparisons: {event.comparisons}"
        return f"Search finished. Total comparisons: {event.comparisons}"
    line = (
        f"Shift = {event.shift}, compare text[{event.text_index}]='{event.text_symbol}'"
        f" with pat[{event.pattern_index}]='{event.pattern_symbol}'"
        f" -> {'MATCH' if event.match else 'MISMATCH'}"
    )
    if event.next_shift is not None and not event.match:
        lo = "-1 (absent)" if event.last_occurrence is None else event.last_occurrence
        line += (
            f"\nMismatch -> bad-character last-occurrence for '{event.text_symbol}'"
            f" = {lo}, shifting by {event.next_shift}"
        )
    return line


def render_event(event: StepEvent, text: str, pat: str, ran_through: bool = False) -> str:
    """describe_event plus the alignment diagram for comparisons."""
    out = describe_event(event, ran_through)
    if event.kind is EventKind.COMPARE:
        diagram = render_alignment(text, pat, event.shift, event.text_index, event.match)
        out += "\n" + diagram + f"\nComparisons so far: {event.comparisons}"
    return out
