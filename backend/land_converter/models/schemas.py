"""Pydantic schemas for API request/response validation."""

from __future__ import annotations

from pydantic import BaseModel, field_validator

from land_converter.core.converter.units import canonical_unit


class ConvertAllRequest(BaseModel):
    value: str  # raw text from the value field, parsed by the route
    from_unit: str
    record: bool = False

    @field_validator("value", mode="before")
    @classmethod
    def value_as_text(cls, v):
        # JSON clients may send a number instead of the field's text
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return str(v)
        return v

    @field_validator("from_unit")
    @classmethod
    def canonicalize(cls, v: str) -> str:
        return canonical_unit(v)


class ConvertRequest(ConvertAllRequest):
    to_unit: str

    @field_validator("to_unit")
    @classmethod
    def canonicalize_target(cls, v: str) -> str:
        return canonical_unit(v)


class UnitResponse(BaseModel):
    name: str
    square_meters_per_unit: float
    description: str


class ConvertResponse(BaseModel):
    value: float
    from_unit: str
    to_unit: str
    result: float
    text: str


class ConvertAllResponse(BaseModel):
    value: float
    from_unit: str
    results: dict[str, float]
    text: str


class HistoryResponse(BaseModel):
    entries: list[str]
