"""
Helpers around the lazy list: logging and settings setup, the named
transforms and predicates usable from the API, and evaluation of a sequence
pipeline with time and memory tracking.
"""

import os
import sys
import time
import gc
import logging
import tracemalloc
from collections import deque
from typing import Any, Callable, Dict, List, Mapping, Optional

from lazy import LazyList
from models import SequenceParams, Settings

logger = logging.getLogger(__name__)


def setup_logging(level: str = "INFO") -> logging.Logger:
    """Configure root logging once and return the service logger"""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[logging.StreamHandler(sys.stdout)]
    )
    return logging.getLogger('lazylist')


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Build Settings from LAZYLIST_* variables, falling back to defaults"""
    environ = os.environ if environ is None else environ
    values = {}
    for field_name in Settings.model_fields:
        env_name = f"LAZYLIST_{field_name.upper()}"
        if env_name in environ:
            values[field_name] = environ[env_name]
    return Settings(**values)


# ---------- Named element operations ----------

TRANSFORMS: Dict[str, Callable[[Any], Any]] = {
    "square": lambda x: x * x,
    "double": lambda x: x * 2,
    "negate": lambda x: -x,
    "mod10": lambda x: x % 10,
}

PREDICATES: Dict[str, Callable[[Any], bool]] = {
    "even": lambda x: x % 2 == 0,
    "odd": lambda x: x % 2 == 1,
    "positive": lambda x: x > 0,
}


# ---------- Performance tracking ----------

# Most recent evaluations kept in the history; totals count every one
MAX_RECORDED_OPERATIONS = 100

_performance_metrics = {
    "operations": deque(maxlen=MAX_RECORDED_OPERATIONS),
    "total_time_ms": 0.0,
    "total_memory_mb": 0.0,
    "operation_count": 0
}


def measure_evaluation(operation_name: str, lazy_list: LazyList) -> Dict[str, Any]:
    """
    Materialize a finite lazy list while tracking elapsed time and peak
    traced memory. The measurement is added to the running totals.
    """
    tracemalloc.start()
    gc.collect()
    start_time = time.perf_counter()

    try:
        values = lazy_list.to_list()
        execution_time_ms = (time.perf_counter() - start_time) * 1000
        current, peak = tracemalloc.get_traced_memory()
    finally:
        tracemalloc.stop()

    memory_mb = peak / 1024 / 1024
    performance_info = {
        "operation": operation_name,
        "execution_time_ms": execution_time_ms,
        "memory_usage_mb": memory_mb,
        "result_size": len(values),
        "timestamp": time.time()
    }

    _performance_metrics["operations"].append(performance_info)
    _performance_metrics["total_time_ms"] += execution_time_ms
    _performance_metrics["total_memory_mb"] += memory_mb
    _performance_metrics["operation_count"] += 1

    logger.debug(f"{operation_name}: {len(values)} values in {execution_time_ms:.2f} ms")
    return {"values": values, **performance_info}


def get_performance_summary() -> Dict[str, Any]:
    """Get summary of all performance metrics"""
    count = _performance_metrics["operation_count"]
    if count == 0:
        return {
            "total_operations": 0,
            "total_time_ms": 0.0,
            "total_memory_mb": 0.0,
            "avg_time_ms": 0.0,
            "avg_memory_mb": 0.0
        }

    return {
        "total_operations": count,
        "total_time_ms": _performance_metrics["total_time_ms"],
        "total_memory_mb": _performance_metrics["total_memory_mb"],
        "avg_time_ms": _performance_metrics["total_time_ms"] / count,
        "avg_memory_mb": _performance_metrics["total_memory_mb"] / count
    }


def clear_performance_metrics():
    """Clear all performance metrics"""
    global _performance_metrics
    _performance_metrics = {
        "operations": deque(maxlen=MAX_RECORDED_OPERATIONS),
        "total_time_ms": 0.0,
        "total_memory_mb": 0.0,
        "operation_count": 0
    }


# ---------- Pipelines ----------

def build_pipeline(source: LazyList, params: SequenceParams, scan_limit: int) -> LazyList:
    """
    Chain the requested steps onto ``source``. The source is capped at
    ``scan_limit`` elements first so a predicate that stops matching cannot
    make evaluation run forever.
    """
    pipeline = source.take(scan_limit)
    if params.transform:
        pipeline = pipeline.map(TRANSFORMS[params.transform])
    if params.predicate:
        pipeline = pipeline.filter(PREDICATES[params.predicate])
    pipeline = pipeline.drop(params.skip).take(params.take)
    if params.repeat > 1:
        pipeline = pipeline.cycle(params.repeat)
    return pipeline


def process_sequence(name: str, producer: Callable[[], LazyList], params: SequenceParams,
                     scan_limit: int) -> Dict[str, Any]:
    """Evaluate a sequence request; failures are reported in the result"""
    operations_applied: List[str] = params.get_operations()

    try:
        pipeline = build_pipeline(producer(), params, scan_limit)
        measured = measure_evaluation(f"sequence_{name}", pipeline)

        return {
            "result": measured["values"],
            "operations_applied": operations_applied,
            "performance": {
                "processing_time_ms": measured["execution_time_ms"],
                "memory_usage_mb": measured["memory_usage_mb"],
                "output_size": measured["result_size"],
                "operation": measured["operation"]
            }
        }

    except Exception as e:
        logger.error(f"Failed to evaluate sequence {name}: {e}")
        return {
            "error": str(e),
            "operations_applied": operations_applied,
            "performance": {
                "error": True
            }
        }
