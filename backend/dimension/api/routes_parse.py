"""Parse endpoint — splits a dimension literal into value and canonical unit."""

from fastapi import APIRouter, HTTPException

from dimension.models.schemas import DimensionModel, ParseRequest
from dimension.core.dimension import Dimension
from dimension.core.exceptions import DimensionParseError

router = APIRouter(tags=["parse"])


@router.post("/parse", response_model=DimensionModel)
async def parse_dimension(req: ParseRequest):
    """Parse a literal such as "2.5in". Aliased units come back canonical."""
    try:
        dim = Dimension.from_spec(req.text)
    except DimensionParseError as e:
        raise HTTPException(
            status_code=422,
            detail=[{"message": str(e), "text": e.text}],
        )

    return DimensionModel(value=dim.value, unit=dim.unit)
