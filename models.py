"""
Pydantic models for the lazy sequence service: settings, request parameters
and response payloads.
"""

from typing import Any, Dict, List, Optional
from pydantic import BaseModel, Field, field_validator
from datetime import datetime


class Settings(BaseModel):
    """Runtime configuration, read from LAZYLIST_* environment variables"""
    log_level: str = Field(
        "INFO",
        description="Logging level name"
    )
    max_take: int = Field(
        1000,
        description="Largest number of elements a single request may take",
        ge=1
    )
    scan_limit: int = Field(
        100_000,
        description="Largest number of source elements scanned per request",
        ge=1
    )

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v):
        """Accept standard logging level names in any case"""
        level = v.strip().upper()
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if level not in valid_levels:
            raise ValueError(f"Invalid log level: {v}. Valid levels: {valid_levels}")
        return level


class SequenceParams(BaseModel):
    """Query parameters shaping a sequence request"""
    take: int = Field(
        10,
        description="Number of elements to return",
        ge=1
    )
    skip: int = Field(
        0,
        description="Number of elements to skip after filtering",
        ge=0
    )
    transform: Optional[str] = Field(
        None,
        description="Name of a transform applied to every element"
    )
    predicate: Optional[str] = Field(
        None,
        description="Name of a predicate elements must satisfy"
    )
    repeat: int = Field(
        1,
        description="How many times the selected window is repeated",
        ge=1,
        le=100
    )

    def get_operations(self) -> List[str]:
        """Names of the pipeline steps these parameters enable, in order"""
        operations = []
        if self.transform:
            operations.append(f"map:{self.transform}")
        if self.predicate:
            operations.append(f"filter:{self.predicate}")
        if self.skip:
            operations.append(f"drop:{self.skip}")
        operations.append(f"take:{self.take}")
        if self.repeat > 1:
            operations.append(f"cycle:{self.repeat}")
        return operations


class SequenceResponse(BaseModel):
    """Materialized window of a sequence"""
    ok: bool = Field(..., description="Whether the request succeeded")
    name: str = Field(..., description="Name of the source sequence")
    values: List[Any] = Field(
        default_factory=list,
        description="Elements of the requested window"
    )
    count: int = Field(..., description="Number of returned elements", ge=0)
    operations_applied: List[str] = Field(
        default_factory=list,
        description="Pipeline steps applied to the source"
    )
    processing_time_ms: Optional[float] = Field(
        None,
        description="Evaluation time in milliseconds",
        ge=0
    )
    memory_usage_mb: Optional[float] = Field(
        None,
        description="Peak memory traced during evaluation in megabytes",
        ge=0
    )
    timestamp: str = Field(..., description="ISO timestamp of the response")


class SequenceListResponse(BaseModel):
    """Names usable with the sequence endpoint"""
    ok: bool = Field(True, description="Whether the request succeeded")
    sequences: List[str] = Field(..., description="Available sequence names")
    transforms: List[str] = Field(..., description="Available transform names")
    predicates: List[str] = Field(..., description="Available predicate names")


class StatsResponse(BaseModel):
    """Running totals of evaluations served"""
    total_operations: int = Field(..., ge=0)
    total_time_ms: float = Field(..., ge=0)
    total_memory_mb: float = Field(..., ge=0)
    avg_time_ms: float = Field(..., ge=0)
    avg_memory_mb: float = Field(..., ge=0)


class HealthCheckResponse(BaseModel):
    """Health check response"""
    status: str = Field(..., description="Overall health status")
    timestamp: datetime = Field(..., description="Time of the check")
    checks: Dict[str, bool] = Field(
        default_factory=dict,
        description="Individual check results"
    )
    response_time_ms: float = Field(..., description="Time taken by the check", ge=0)


class ErrorResponse(BaseModel):
    """Error payload returned when evaluation fails"""
    ok: bool = Field(False, description="Always false for errors")
    error: str = Field(..., description="Error message")
    error_code: str = Field(..., description="Machine readable error code")
    timestamp: str = Field(..., description="ISO timestamp of the error")
