"""
Lazy Sequence Service

Serves finite windows of infinite lazy sequences over HTTP.
Features:
- Named producers (naturals, Fibonacci, xorshift, Newton's method, ...)
- Lazy map / filter / drop / take / cycle pipelines chosen by query params
- Bounded evaluation: every request scans a capped number of source elements
- Evaluation time and memory tracking
"""

import datetime
from typing import Annotated

from fastapi import FastAPI, HTTPException, Query
from fastapi.responses import JSONResponse

from sequences import PRODUCERS
from utils import (
    TRANSFORMS, PREDICATES,
    setup_logging, load_settings,
    process_sequence, get_performance_summary
)
from models import (
    SequenceParams, SequenceResponse, SequenceListResponse,
    StatsResponse, HealthCheckResponse, ErrorResponse
)

settings = load_settings()
logger = setup_logging(settings.log_level)

app = FastAPI(
    title="Lazy Sequence Service",
    description="Finite windows over infinite lazy lists",
    version="1.0.0"
)


@app.get("/sequences", response_model=SequenceListResponse)
async def list_sequences() -> SequenceListResponse:
    """List the sequence, transform and predicate names that can be requested"""
    return SequenceListResponse(
        ok=True,
        sequences=sorted(PRODUCERS),
        transforms=sorted(TRANSFORMS),
        predicates=sorted(PREDICATES)
    )


@app.get("/sequences/{name}", response_model=SequenceResponse)
async def get_sequence(
    name: str,
    params: Annotated[SequenceParams, Query()]
) -> SequenceResponse:
    """
    Evaluate a window of the named sequence. The source is built lazily and
    only as many elements as the pipeline needs are computed.
    """
    producer = PRODUCERS.get(name)
    if producer is None:
        raise HTTPException(status_code=404, detail=f"Unknown sequence: {name}")
    if params.transform and params.transform not in TRANSFORMS:
        raise HTTPException(status_code=404, detail=f"Unknown transform: {params.transform}")
    if params.predicate and params.predicate not in PREDICATES:
        raise HTTPException(status_code=404, detail=f"Unknown predicate: {params.predicate}")
    if params.take > settings.max_take:
        raise HTTPException(
            status_code=422,
            detail=f"take must be <= {settings.max_take}"
        )

    logger.info(f"Evaluating {name} with {params.get_operations()}")
    result = process_sequence(name, producer, params, settings.scan_limit)

    if "error" in result:
        return JSONResponse(
            status_code=500,
            content=ErrorResponse(
                error=f"Failed to evaluate sequence: {result['error']}",
                error_code="EVALUATION_ERROR",
                timestamp=datetime.datetime.now(datetime.timezone.utc).isoformat()
            ).model_dump()
        )

    values = result["result"]
    return SequenceResponse(
        ok=True,
        name=name,
        values=values,
        count=len(values),
        operations_applied=result["operations_applied"],
        processing_time_ms=result["performance"]["processing_time_ms"],
        memory_usage_mb=result["performance"]["memory_usage_mb"],
        timestamp=datetime.datetime.now(datetime.timezone.utc).isoformat()
    )


@app.get("/stats", response_model=StatsResponse)
async def get_stats() -> StatsResponse:
    """Running totals of the evaluations served so far"""
    return StatsResponse(**get_performance_summary())


@app.get("/health", response_model=HealthCheckResponse)
async def health_check() -> HealthCheckResponse:
    """Health check endpoint"""
    start_time = datetime.datetime.now(datetime.timezone.utc)

    producer = PRODUCERS["naturals"]
    checks = {
        "producers": bool(PRODUCERS),
        "evaluation": producer().take(3).to_list() == [1, 2, 3]
    }

    response_time = (datetime.datetime.now(datetime.timezone.utc) - start_time).total_seconds() * 1000
    return HealthCheckResponse(
        status="healthy" if all(checks.values()) else "unhealthy",
        timestamp=start_time,
        checks=checks,
        response_time_ms=response_time
    )
