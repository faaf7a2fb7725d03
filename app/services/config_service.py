"""Calculator configuration store.

The whole configuration (base metal prices plus the gold and silver item
lists) lives in one document of the ``app_settings`` collection, so an
export is just that document and an import replaces it.
"""
from datetime import datetime
from typing import Any, Dict, List, Optional

from bson import ObjectId
from pydantic import ValidationError

from app.database import get_collection
from app.enums import MetalType
from app.logger import logger
from app.models.config import CalculatorConfig, MetalItem, MetalItemCreate, default_config
from config import settings as app_settings

EXPORT_FILENAME = "jewellery-config.json"
REQUIRED_SECTIONS = ("baseMetalConfig", "goldConfigs", "silverConfigs")


class ConfigNotFoundError(LookupError):
    """Raised when an item id does not exist in the configuration"""
    pass


class ConfigImportError(ValueError):
    """Raised when an imported configuration file is not usable"""
    pass


def _items(config: CalculatorConfig, metal: MetalType) -> List[MetalItem]:
    return config.gold_configs if metal == MetalType.GOLD else config.silver_configs


async def get_config() -> CalculatorConfig:
    """Return the stored configuration, or the defaults if nothing is stored yet."""
    col = await get_collection("app_settings")
    doc = await col.find_one({"_id": app_settings.CONFIG_DOCUMENT_ID})
    if not doc:
        return default_config()
    return CalculatorConfig(**doc["config"])


async def save_config(config: CalculatorConfig, updated_by: str = "system") -> CalculatorConfig:
    col = await get_collection("app_settings")
    doc = {
        "_id": app_settings.CONFIG_DOCUMENT_ID,
        "config": config.model_dump(),
        "updated_at": datetime.utcnow(),
        "updated_by": updated_by,
    }
    await col.replace_one({"_id": app_settings.CONFIG_DOCUMENT_ID}, doc, upsert=True)
    return config


async def ensure_default_config() -> bool:
    """Seed the default configuration if none is stored. Returns True when seeded."""
    col = await get_collection("app_settings")
    if await col.find_one({"_id": app_settings.CONFIG_DOCUMENT_ID}):
        return False
    await save_config(default_config())
    logger.info("Seeded default calculator configuration")
    return True


async def update_base_prices(
    gold_price_per_10g: Optional[float] = None,
    silver_price_per_10g: Optional[float] = None,
) -> CalculatorConfig:
    config = await get_config()
    if gold_price_per_10g is not None:
        config.base_metal_config.gold_price_per_10g = gold_price_per_10g
    if silver_price_per_10g is not None:
        config.base_metal_config.silver_price_per_10g = silver_price_per_10g
    await save_config(config)
    logger.info(
        f"Base prices updated: gold={config.base_metal_config.gold_price_per_10g} "
        f"silver={config.base_metal_config.silver_price_per_10g}"
    )
    return config


def find_item(config: CalculatorConfig, metal: MetalType, item_id: str) -> MetalItem:
    for item in _items(config, metal):
        if item.id == item_id:
            return item
    raise ConfigNotFoundError(f"No {metal.value} item with id {item_id}")


async def add_item(metal: MetalType, data: MetalItemCreate) -> MetalItem:
    config = await get_config()
    item = MetalItem(id=str(ObjectId()), **data.model_dump())
    _items(config, metal).append(item)
    await save_config(config)
    logger.info(f"Added {metal.value} item {item.name} ({item.id})")
    return item


async def update_item(metal: MetalType, item_id: str, data: MetalItemCreate) -> MetalItem:
    config = await get_config()
    items = _items(config, metal)
    for index, item in enumerate(items):
        if item.id == item_id:
            items[index] = MetalItem(id=item_id, **data.model_dump())
            await save_config(config)
            logger.info(f"Updated {metal.value} item {item_id}")
            return items[index]
    raise ConfigNotFoundError(f"No {metal.value} item with id {item_id}")


async def remove_item(metal: MetalType, item_id: str) -> None:
    config = await get_config()
    items = _items(config, metal)
    remaining = [item for item in items if item.id != item_id]
    if len(remaining) == len(items):
        raise ConfigNotFoundError(f"No {metal.value} item with id {item_id}")
    items[:] = remaining
    await save_config(config)
    logger.info(f"Removed {metal.value} item {item_id}")


async def export_config() -> Dict[str, Any]:
    config = await get_config()
    return config.model_dump(by_alias=True)


async def import_config(payload: Any) -> CalculatorConfig:
    """Replace the stored configuration with an exported one."""
    if not isinstance(payload, dict):
        raise ConfigImportError("Invalid config file format.")
    missing = [key for key in REQUIRED_SECTIONS if payload.get(key) is None]
    if missing:
        raise ConfigImportError(f"Invalid config file format. Missing: {', '.join(missing)}")

    try:
        config = CalculatorConfig.model_validate(payload)
    except ValidationError as e:
        raise ConfigImportError(f"Invalid config file format: {e.error_count()} invalid field(s)")

    await save_config(config, updated_by="import")
    logger.info(
        f"Imported configuration with {len(config.gold_configs)} gold "
        f"and {len(config.silver_configs)} silver items"
    )
    return config
