import pytest

from algorithms.events import EventKind
from algorithms.kmp import KMPStepper, kmp_build_lps, kmp_find_all
from algorithms.stepper import Outcome, StepperNotStarted


def test_kmp_basic():
    assert kmp_find_all("ababcabcababd", "ababd") == [8]
    assert kmp_find_all("aaaaa", "aa") == [0,1,2,3]
    assert kmp_find_all("abc", "abcd") == []
    assert kmp_find_all("ABABDABACDABABCABAB", "ABABCABAB") == [10]


@pytest.mark.parametrize("pattern, expected", [
    ("", []),
    ("a", [0]),
    ("abcd", [0, 0, 0, 0]),
    ("aaaa", [0, 1, 2, 3]),
    ("ababaca", [0, 0, 1, 2, 3, 0, 1]),
    ("AAACAAAA", [0, 1, 2, 0, 1, 2, 3, 3]),
    ("ABABCABAB", [0, 0, 1, 2, 0, 1, 2, 3, 4]),
])
def test_build_lps(pattern, expected):
    assert kmp_build_lps(pattern) == expected


def test_empty_pattern_short_circuits():
    s = KMPStepper()
    assert s.start("abc", "") is Outcome.EMPTY_PATTERN
    assert s.finished
    assert s.step() == []
    assert s.comparisons == 0
    assert s.i is None and s.j is None


def test_step_before_start():
    with pytest.raises(StepperNotStarted):
        KMPStepper().step()


def test_single_steps_walk_the_cursor():
    s = KMPStepper()
    s.start("abab", "ab")
    assert s.table() == [0, 0]

    (ev,) = s.step()
    assert ev.kind is EventKind.COMPARE
    assert (ev.shift, ev.text_index, ev.pattern_index) == (0, 0, 0)
    assert (ev.text_symbol, ev.pattern_symbol, ev.match) == ("a", "a", True)
    assert ev.comparisons == 1

    cmp_ev, found = s.step()
    assert cmp_ev.match and cmp_ev.text_index == 1
    assert found.kind is EventKind.FOUND and found.found_index == 0
    # j recovers through lps instead of a hard reset
    assert (s.i, s.j) == (2, 0)
    assert s.shift == 2


def test_mismatch_falls_back_without_moving_text_index():
    s = KMPStepper()
    s.start("aab", "ab")
    s.step()                    # a == a
    (ev,) = s.step()            # a != b
    assert not ev.match
    assert (s.i, s.j) == (1, 0)


def test_finished_event_comes_with_last_comparison():
    s = KMPStepper()
    s.start("abcdef", "xyz")
    events = []
    while not s.finished:
        events.extend(s.step())
    assert events[-1].kind is EventKind.FINISHED
    assert events[-1].comparisons == s.comparisons == 6
    assert s.found == []
    assert s.step() == []


def test_shift_never_decreases_and_comparisons_grow():
    s = KMPStepper()
    s.start("ABABDABACDABABCABAB", "ABABCABAB")
    shifts, counts = [], []
    while not s.finished:
        for ev in s.step():
            counts.append(ev.comparisons)
            if ev.kind is EventKind.COMPARE:
                shifts.append(ev.shift)
    assert shifts == sorted(shifts)
    assert counts == sorted(counts)
    assert s.found == [10]


def test_run_to_completion_and_find_all_agree():
    a, b = KMPStepper(), KMPStepper()
    a.start("abracadabra", "abra")
    b.start("abracadabra", "abra")
    seen_a, seen_b = [], []
    assert a.run_to_completion(seen_a.append) == b.find_all(seen_b.append) == [0, 7]
    assert a.comparisons == b.comparisons
    assert [e.kind for e in seen_b] == [EventKind.FOUND, EventKind.FOUND, EventKind.FINISHED]
    assert sum(e.kind is EventKind.COMPARE for e in seen_a) == a.comparisons


def test_run_to_completion_resumes_after_steps():
    s = KMPStepper()
    s.start("aaaaa", "aa")
    s.step()
    s.step()
    assert s.run_to_completion() == [0, 1, 2, 3]
