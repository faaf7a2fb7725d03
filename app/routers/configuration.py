import json

from fastapi import APIRouter, HTTPException, Request
from fastapi.responses import JSONResponse, Response

from app.enums import MetalType
from app.logger import logger
from app.models.config import BasePriceUpdate, MetalItemCreate
from app.services import config_service
from app.services.config_service import ConfigImportError, ConfigNotFoundError

router = APIRouter()


@router.get("")
async def get_configuration():
    config = await config_service.get_config()
    return JSONResponse(content=config.model_dump())


@router.put("/base-prices")
async def update_base_prices(data: BasePriceUpdate):
    config = await config_service.update_base_prices(
        gold_price_per_10g=data.gold_price_per_10g,
        silver_price_per_10g=data.silver_price_per_10g,
    )
    return JSONResponse(content=config.base_metal_config.model_dump())


@router.get("/export")
async def export_configuration():
    payload = await config_service.export_config()
    return Response(
        content=json.dumps(payload, indent=2, ensure_ascii=False),
        media_type="application/json",
        headers={"Content-Disposition": f"attachment; filename={config_service.EXPORT_FILENAME}"},
    )


@router.post("/import")
async def import_configuration(request: Request):
    try:
        payload = await request.json()
    except ValueError:
        raise HTTPException(status_code=400, detail="Error importing file: file is not valid JSON")

    try:
        config = await config_service.import_config(payload)
    except ConfigImportError as e:
        logger.warning(f"Rejected configuration import: {e}")
        raise HTTPException(status_code=400, detail=f"Error importing file: {e}")

    return JSONResponse(content={
        "message": "Configuration imported successfully!",
        "config": config.model_dump(),
    })


@router.post("/{metal}/items", status_code=201)
async def add_item(metal: MetalType, data: MetalItemCreate):
    item = await config_service.add_item(metal, data)
    return JSONResponse(content=item.model_dump(), status_code=201)


@router.put("/{metal}/items/{item_id}")
async def update_item(metal: MetalType, item_id: str, data: MetalItemCreate):
    try:
        item = await config_service.update_item(metal, item_id, data)
    except ConfigNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return JSONResponse(content=item.model_dump())


@router.delete("/{metal}/items/{item_id}")
async def delete_item(metal: MetalType, item_id: str):
    try:
        await config_service.remove_item(metal, item_id)
    except ConfigNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return JSONResponse(content={"message": "Item deleted successfully"})
