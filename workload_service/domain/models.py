"""
Domain models for the workload service.

Defines the synthetic user record served by ``GET /users`` and the metrics
record returned by ``GET /benchmark``. Attributes are snake_case in Python and
camelCase on the wire; all models are frozen once constructed.
"""
from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, Mapping, Tuple

from pydantic import BaseModel, Field, field_serializer, field_validator
from pydantic.alias_generators import to_camel


class WireModel(BaseModel):
    """
    Base for immutable value records serialized with camelCase keys.
    """

    model_config = {
        "frozen": True,
        "populate_by_name": True,
        "alias_generator": to_camel,
        "arbitrary_types_allowed": False,
    }


class Address(WireModel):
    street: str = Field(..., description="House number followed by street name.")
    city: str
    state: str = Field(..., description="Two-letter state abbreviation.")
    zip_code: str = Field(..., pattern=r"^\d{5}$")
    country: str = "USA"


class Company(WireModel):
    name: str
    department: str
    position: str
    salary: int = Field(..., ge=40_000, le=199_999)
    start_date: datetime


class UserPreferences(WireModel):
    theme: str
    language: str
    notifications_enabled: bool
    newsletter: bool
    two_factor_enabled: bool


class User(WireModel):
    """
    A single synthetic user record; every field derives from ``id``.
    """

    id: int = Field(..., ge=1, description="1-based generation index.")
    first_name: str
    last_name: str
    email: str
    phone_number: str
    date_of_birth: datetime
    address: Address
    company: Company
    preferences: UserPreferences
    metadata: Tuple[Tuple[str, str], ...] = Field(
        ..., description="Key/value pairs in insertion order; serialized as a JSON object."
    )
    tags: Tuple[str, ...]
    is_active: bool
    created_at: datetime
    updated_at: datetime

    @field_validator("metadata", mode="before")
    @classmethod
    def metadata_from_mapping(cls, value: Any) -> Any:
        if isinstance(value, Mapping):
            return tuple(value.items())
        return value

    @field_serializer("metadata")
    def metadata_as_object(self, value: Tuple[Tuple[str, str], ...]) -> Dict[str, str]:
        return dict(value)


class BenchmarkResult(WireModel):
    """
    Metrics from one prime-counting run.

    ``process_id`` is -1 and ``working_set_mb`` is 0.0 when the corresponding
    process query was unavailable.
    """

    execution_time_ms: int = Field(..., ge=0)
    primes_found: int = Field(..., ge=0)
    process_id: int
    working_set_mb: float = Field(..., ge=0.0, alias="workingSetMB")


__all__ = ["Address", "BenchmarkResult", "Company", "User", "UserPreferences", "WireModel"]
