"""FastAPI REST API for fastwild."""

import copy
import time

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel
from typing import List, Optional

from .config import Config
from .fixtures import Suite
from .harness import Harness
from .metrics import Metrics
from .symbols import fold_case, to_scalars, to_units
from .wildcard import SCALAR, SINGLE_UNIT


app = FastAPI(title="fastwild API", version="1.0.0")
metrics = Metrics()
config_instance: Optional[Config] = None


class MatchRequest(BaseModel):
    pattern: str
    subject: str
    ignore_case: bool = False
    units: bool = False


class MatchBatchRequest(BaseModel):
    pattern: str
    subjects: List[str]
    ignore_case: bool = False


class RunRequest(BaseModel):
    suites: Optional[List[str]] = None
    cases: Optional[List[Suite]] = None
    ignore_case: Optional[bool] = None


def set_config(config: Config):
    """Set the configuration used by suite runs."""
    global config_instance
    config_instance = config


def _prepare(pattern: str, subject: str, ignore_case: bool, units: bool):
    try:
        if units:
            pattern, subject = to_units(pattern), to_units(subject)
        else:
            pattern, subject = to_scalars(pattern), to_scalars(subject)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    if ignore_case:
        pattern, subject = fold_case(pattern), fold_case(subject)
    return pattern, subject


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "healthy"}


@app.post("/api/match")
def match(request: MatchRequest):
    """Match one subject against a pattern."""
    pattern, subject = _prepare(request.pattern, request.subject, request.ignore_case, request.units)
    matcher = SINGLE_UNIT if request.units else SCALAR
    start = time.perf_counter_ns()
    matched = matcher.match(pattern, subject)
    metrics.record_comparison("single_unit" if request.units else "scalar", time.perf_counter_ns() - start)
    return {"pattern": request.pattern, "subject": request.subject, "matched": matched}


@app.post("/api/match/batch")
def match_batch(request: MatchBatchRequest):
    """Match several subjects against one pattern."""
    results = []
    for subject in request.subjects:
        pattern, prepared = _prepare(request.pattern, subject, request.ignore_case, False)
        start = time.perf_counter_ns()
        matched = SCALAR.match(pattern, prepared)
        metrics.record_comparison("scalar", time.perf_counter_ns() - start)
        results.append({"subject": subject, "matched": matched})
    return {"pattern": request.pattern, "results": results}


@app.post("/api/run")
def run_suites(request: RunRequest):
    """Run built-in or posted suites and return the outcome."""
    config = copy.deepcopy(config_instance) if config_instance else Config()
    if request.ignore_case is not None:
        config.set("harness", "ignore_case", request.ignore_case)

    harness = Harness(config, metrics=metrics)
    try:
        if request.cases is None and request.suites is not None:
            config.set("harness", "suites", request.suites)
        results = harness.run(request.cases)
    except KeyError as e:
        raise HTTPException(status_code=404, detail=str(e))

    return {
        "passed": all(r.passed for r in results),
        "suites": [r.to_dict() for r in results],
        "report": harness.report(results)
    }


@app.get("/api/stats")
async def stats():
    """Get comparison statistics."""
    return metrics.get_stats()
