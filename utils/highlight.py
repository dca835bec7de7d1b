import html
from typing import Iterable


def highlight_found_html(text: str, found: Iterable[int], length: int) -> str:
    """Wrap every covered run of `text` in <mark>; overlapping matches merge."""
    if not text:
        return "<em>No text</em>"
    covered = [False] * len(text)
    if length > 0:
        for start in found:
            for k in range(max(0, start), min(len(text), start + length)):
                covered[k] = True
    out, run_start = [], 0
    for k in range(1, len(text) + 1):
        if k == len(text) or covered[k] != covered[run_start]:
            seg = html.escape(text[run_start:k])
            out.append(f"<mark>{seg}</mark>" if covered[run_start] else seg)
            run_start = k
    return "<div style='white-space:pre-wrap;font-family:monospace'>" + "".join(out) + "</div>"
