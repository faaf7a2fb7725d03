from fastapi import APIRouter, HTTPException, Request
from fastapi.responses import JSONResponse
from fastapi.templating import Jinja2Templates

from app import TEMPLATES_DIR
from app.enums import MetalType
from app.logger import logger
from app.models.calculation import CalculationRequest, CalculationResult
from app.services import config_service
from app.services.config_service import ConfigNotFoundError
from app.services.pricing_service import PricingError, calculate_price
from app.utils import AmountError, format_inr

router = APIRouter()
templates = Jinja2Templates(directory=TEMPLATES_DIR)
templates.env.filters["inr"] = format_inr


async def _calculate(metal: MetalType, weight: float, item_id: str) -> CalculationResult:
    config = await config_service.get_config()
    try:
        item = config_service.find_item(config, metal, item_id)
    except ConfigNotFoundError as e:
        logger.warning(f"Price requested for unknown item: {e}")
        raise HTTPException(status_code=404, detail=str(e))

    try:
        return calculate_price(metal, weight, item, config.base_metal_config)
    except (PricingError, AmountError) as e:
        logger.warning(f"Rejected {metal.value} calculation for {item_id}: {e}")
        raise HTTPException(status_code=400, detail=str(e))


@router.post("/{metal}")
async def calculate(metal: MetalType, data: CalculationRequest):
    result = await _calculate(metal, data.weight, data.item_id)
    return JSONResponse(content=result.model_dump(mode="json"))


@router.get("/{metal}/estimate")
async def print_estimate(request: Request, metal: MetalType, weight: float, item_id: str):
    """Printable estimate slip with every amount in figures and in words."""
    result = await _calculate(metal, weight, item_id)
    return templates.TemplateResponse(request, "calculators/estimate.html", {
        "result": result,
        "metal_label": metal.value.title(),
    })
