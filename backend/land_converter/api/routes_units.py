"""Unit endpoints — list supported land units and their descriptions."""

from fastapi import APIRouter, HTTPException

from land_converter.models.schemas import UnitResponse
from land_converter.core.converter.units import (
    UNIT_TABLE,
    canonical_unit,
    describe_unit,
    list_units,
)

router = APIRouter(tags=["units"])


@router.get("/units")
async def get_units():
    """Return every supported unit with its square-meter factor."""
    return {
        "units": [
            UnitResponse(
                name=name,
                square_meters_per_unit=UNIT_TABLE[name].square_meters_per_unit,
                description=UNIT_TABLE[name].description,
            )
            for name in list_units()
        ],
    }


@router.get("/units/{unit}")
async def get_unit_description(unit: str):
    """Return the description shown as the value field's tooltip."""
    name = canonical_unit(unit)
    description = describe_unit(name)
    if description is None:
        raise HTTPException(404, detail=f"Unknown unit '{unit}'")
    return {"name": name, "description": description}
