import logging
import os
from typing import Dict, List, Optional, Union

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from algorithms.session import Session, make_stepper
from utils.highlight import highlight_found_html

log = logging.getLogger(__name__)

app = FastAPI(title="Pattern Matching Visualizer API", version="1.0")

# CORS for demos; restrict origins in production
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

ALGORITHM_PATTERN = r"^(kmp|1|2|bm|boyer[-_]?moore)$"


class TablesRequest(BaseModel):
    algorithm: str = Field(pattern=ALGORITHM_PATTERN)
    pattern: str


class TablesResponse(BaseModel):
    algorithm: str
    lps: Optional[List[int]] = None                    # for KMP
    last_occurrence: Optional[Dict[str, int]] = None   # for Boyer-Moore


class TraceRequest(BaseModel):
    algorithm: str = Field(pattern=ALGORITHM_PATTERN)
    text: str
    pattern: str
    mode: str = Field(default="auto", pattern=r"^(auto|find_all)$")


class TraceResponse(BaseModel):
    algorithm: str
    empty_pattern: bool
    tables: Union[List[int], Dict[str, int]]
    events: List[dict]
    found: List[int]
    comparisons: int
    highlighted: str


def _limit(name: str, default: str) -> int:
    return int(os.getenv(name, default))


@app.get("/health")
def health():
    return {"ok": True}


@app.post("/api/tables", response_model=TablesResponse)
def tables(req: TablesRequest):
    stepper = make_stepper(req.algorithm)
    stepper.start("", req.pattern)
    if stepper.name == "kmp":
        return TablesResponse(algorithm="kmp", lps=stepper.table())
    return TablesResponse(algorithm=stepper.name, last_occurrence=stepper.table())


@app.post("/api/trace", response_model=TraceResponse)
def trace(req: TraceRequest):
    max_text = _limit("VISUALIZER_MAX_TEXT_LEN", "10000")
    if len(req.text) > max_text:
        log.warning("trace rejected: text length %d > %d", len(req.text), max_text)
        raise HTTPException(status_code=413, detail=f"text longer than {max_text} characters")

    # a KMP auto run emits at most 2n compares plus the finished event
    max_events = _limit("VISUALIZER_MAX_EVENTS", "20001")
    emitted = 0

    def within_budget(event):
        nonlocal emitted
        emitted += 1
        if emitted > max_events:
            log.warning("trace rejected: more than %d events", max_events)
            raise HTTPException(status_code=413, detail=f"trace longer than {max_events} events")

    session = Session(req.text, req.pattern, req.algorithm)
    events = session.apply(req.mode, on_event=within_budget)

    return TraceResponse(
        algorithm=session.algorithm,
        empty_pattern=session.empty_pattern,
        tables=session.table(),
        events=[e.to_dict() for e in events],
        found=session.found,
        comparisons=session.comparisons,
        highlighted=highlight_found_html(req.text, session.found, len(req.pattern)),
    )


def main():
    import uvicorn

    logging.basicConfig(level=os.getenv("VISUALIZER_LOG_LEVEL", "WARNING").upper())
    uvicorn.run(app, host=os.getenv("VISUALIZER_HOST", "0.0.0.0"),
                port=int(os.getenv("VISUALIZER_PORT", "8000")))


if __name__ == "__main__":
    main()

# Run with: python -m api.main, or uvicorn api.main:app --host 0.0.0.0 --port 8000
