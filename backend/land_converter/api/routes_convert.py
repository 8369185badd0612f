"""Convert endpoints — pairwise and convert-to-all land unit conversions."""

import logging
import math

from fastapi import APIRouter, HTTPException

from land_converter.config import settings
from land_converter.models.schemas import (
    ConvertRequest,
    ConvertAllRequest,
    ConvertResponse,
    ConvertAllResponse,
)
from land_converter.core.converter.units import convert, convert_to_all
from land_converter.core.converter.formatting import (
    ValueParseError,
    parse_value,
    format_conversion,
    format_conversions,
)
from land_converter.api.routes_history import session_history

logger = logging.getLogger(__name__)

router = APIRouter(tags=["convert"])


def _parse_or_422(text: str) -> float:
    try:
        return parse_value(text)
    except ValueParseError as e:
        raise HTTPException(422, detail=[{"kind": "parse", "message": str(e)}])


def _require_finite(*values: float) -> None:
    # Finite inputs can still overflow once multiplied by a unit factor
    if not all(math.isfinite(v) for v in values):
        raise HTTPException(422, detail=[
            {"kind": "range", "message": "Value is too large to convert."},
        ])


def _unit_error(result) -> HTTPException:
    logger.warning("Rejected conversion: %s (%s)", result.error, ", ".join(result.error.units))
    return HTTPException(422, detail=[
        {"kind": "unit", "message": str(result.error), "units": list(result.error.units)},
    ])


@router.post("/convert", response_model=ConvertResponse)
async def convert_value(req: ConvertRequest):
    """Convert a value between two units. Records to history if requested."""
    value = _parse_or_422(req.value)

    result = convert(value, req.from_unit, req.to_unit)
    if not result.ok:
        raise _unit_error(result)
    _require_finite(result.value)

    text = format_conversion(value, req.from_unit, result.value, req.to_unit, settings.result_precision)
    if req.record:
        session_history.append(text)
        logger.info("Recorded conversion: %s", text)

    return {
        "value": value,
        "from_unit": req.from_unit,
        "to_unit": req.to_unit,
        "result": result.value,
        "text": text,
    }


@router.post("/convert/all", response_model=ConvertAllResponse)
async def convert_value_to_all(req: ConvertAllRequest):
    """Convert a value into every supported unit."""
    value = _parse_or_422(req.value)

    result = convert_to_all(value, req.from_unit)
    if not result.ok:
        raise _unit_error(result)
    _require_finite(*result.value.values())

    text = format_conversions(value, req.from_unit, result.value, settings.result_precision)
    if req.record:
        session_history.append(text)
        logger.info("Recorded conversion to all units from %s", req.from_unit)

    return {
        "value": value,
        "from_unit": req.from_unit,
        "results": result.value,
        "text": text,
    }
