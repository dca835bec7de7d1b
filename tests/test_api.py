import importlib
import logging

from fastapi.testclient import TestClient

import api.main
from api.main import app

client = TestClient(app)


def test_health():
    assert client.get("/health").json() == {"ok": True}


def test_tables():
    r = client.post("/api/tables", json={"algorithm": "kmp", "pattern": "aab"})
    assert r.json()["lps"] == [0, 1, 0]
    r = client.post("/api/tables", json={"algorithm": "bm", "pattern": "aab"})
    assert r.json()["last_occurrence"] == {"a": 1, "b": 2}


def test_trace_auto():
    r = client.post("/api/trace", json={
        "algorithm": "boyer-moore", "text": "ABABDABACDABABCABAB", "pattern": "ABABCABAB",
    })
    assert r.status_code == 200
    body = r.json()
    assert body["found"] == [10]
    assert body["algorithm"] == "boyer-moore"
    assert body["events"][0]["kind"] == "compare"
    assert body["events"][-1]["kind"] == "finished"
    assert body["events"][-1]["comparisons"] == body["comparisons"]
    assert "<mark>ABABCABAB</mark>" in body["highlighted"]


def test_trace_find_all_has_no_compares():
    r = client.post("/api/trace", json={
        "algorithm": "kmp", "text": "aaaaa", "pattern": "aa", "mode": "find_all",
    })
    body = r.json()
    assert body["found"] == [0, 1, 2, 3]
    assert {e["kind"] for e in body["events"]} == {"found", "finished"}


def test_trace_empty_pattern():
    r = client.post("/api/trace", json={"algorithm": "kmp", "text": "abc", "pattern": ""})
    body = r.json()
    assert body["empty_pattern"] is True
    assert body["events"] == [] and body["comparisons"] == 0


def test_bad_algorithm_rejected():
    r = client.post("/api/trace", json={"algorithm": "rk", "text": "a", "pattern": "a"})
    assert r.status_code == 422


def test_limits(monkeypatch):
    monkeypatch.setenv("VISUALIZER_MAX_TEXT_LEN", "3")
    r = client.post("/api/trace", json={"algorithm": "kmp", "text": "abcd", "pattern": "a"})
    assert r.status_code == 413
    monkeypatch.setenv("VISUALIZER_MAX_TEXT_LEN", "100")
    monkeypatch.setenv("VISUALIZER_MAX_EVENTS", "2")
    r = client.post("/api/trace", json={"algorithm": "kmp", "text": "abcd", "pattern": "a"})
    assert r.status_code == 413


def test_default_limits_accept_long_text():
    r = client.post("/api/trace", json={"algorithm": "kmp", "text": "ab" * 3000, "pattern": "ab"})
    assert r.status_code == 200
    assert len(r.json()["found"]) == 3000


def test_import_leaves_root_logging_alone(monkeypatch):
    calls = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kw: calls.append(kw))
    importlib.reload(api.main)
    assert calls == []
