"""Convert endpoint — converts a dimension into another unit."""

import logging

from fastapi import APIRouter, HTTPException

from dimension.models.schemas import ConvertRequest, ConvertResponse
from dimension.core.dimension import Dimension
from dimension.core.exceptions import ConversionError, DimensionParseError
from dimension.utils.formatting import format_number, to_fixed

logger = logging.getLogger(__name__)

router = APIRouter(tags=["convert"])


@router.post("/convert", response_model=ConvertResponse)
async def convert_dimension(req: ConvertRequest):
    """Convert a literal or {value, unit} record to ``to_unit``, optionally rounded."""
    try:
        dim = Dimension.from_spec(req.dimension)
    except DimensionParseError as e:
        raise HTTPException(422, detail=[{"message": str(e), "text": e.text}])

    # One resolution feeds the value, the text and the indirect flag
    transform = Dimension.get_conversion_function(dim.unit, req.to_unit)
    if transform is None:
        e = ConversionError(dim.unit, req.to_unit)
        logger.info("Rejected conversion request: %s", e)
        raise HTTPException(422, detail=[
            {"message": str(e), "from_unit": e.from_unit, "to_unit": e.to_unit}
        ])

    value = transform(dim.value)
    converted = Dimension(value, req.to_unit)
    text = format_number(value) if req.digits is None else to_fixed(value, req.digits)

    return ConvertResponse(
        value=converted.value,
        unit=converted.unit,
        text=text + req.to_unit,
        indirect=transform.indirect,
    )
