"""Units endpoint — lists known units and the alias table."""

from fastapi import APIRouter

from dimension.models.schemas import UnitsResponse
from dimension.core.dimension import Dimension

router = APIRouter(tags=["units"])


@router.get("/units", response_model=UnitsResponse)
async def list_units():
    params = Dimension.registry.parameters
    return UnitsResponse(
        units=sorted(Dimension.get_units()),
        aliases=dict(params.aliases),
        anchor_unit=params.anchor_unit,
    )
