"""Tests for the calculator configuration store."""

import pytest

from app.enums import MetalType
from app.models.config import MetalItemCreate, default_config
from app.services import config_service
from app.services.config_service import ConfigImportError, ConfigNotFoundError


class TestConfigService:

    @pytest.mark.asyncio
    async def test_defaults_until_something_is_saved(self, settings_collection) -> None:
        config = await config_service.get_config()

        assert config == default_config()
        assert settings_collection.documents == {}

    @pytest.mark.asyncio
    async def test_ensure_default_config_seeds_once(self, settings_collection) -> None:
        assert await config_service.ensure_default_config() is True
        assert await config_service.ensure_default_config() is False
        assert len(settings_collection.documents) == 1

    @pytest.mark.asyncio
    async def test_update_base_prices_keeps_unset_price(self, settings_collection) -> None:
        await config_service.update_base_prices(gold_price_per_10g=120000)

        config = await config_service.get_config()
        assert config.base_metal_config.gold_price_per_10g == 120000
        assert config.base_metal_config.silver_price_per_10g == 1200

    @pytest.mark.asyncio
    async def test_item_lifecycle(self, settings_collection) -> None:
        item = await config_service.add_item(
            MetalType.GOLD, MetalItemCreate(name="22K Chain", purity=91.6, making_charge=900, add_on_price=4000)
        )
        config = await config_service.get_config()
        assert config_service.find_item(config, MetalType.GOLD, item.id).name == "22K Chain"

        updated = await config_service.update_item(
            MetalType.GOLD, item.id, MetalItemCreate(name="22K Chain", purity=91.6, making_charge=950)
        )
        assert updated.making_charge == 950
        assert updated.add_on_price == 0

        await config_service.remove_item(MetalType.GOLD, item.id)
        config = await config_service.get_config()
        with pytest.raises(ConfigNotFoundError):
            config_service.find_item(config, MetalType.GOLD, item.id)

    @pytest.mark.asyncio
    async def test_unknown_item_ids(self, settings_collection) -> None:
        data = MetalItemCreate(name="x", purity=50, making_charge=1)
        with pytest.raises(ConfigNotFoundError):
            await config_service.update_item(MetalType.SILVER, "missing", data)
        with pytest.raises(ConfigNotFoundError):
            await config_service.remove_item(MetalType.SILVER, "missing")

    @pytest.mark.asyncio
    async def test_export_then_import_uses_camel_case(self, settings_collection) -> None:
        exported = await config_service.export_config()
        assert set(exported) == {"baseMetalConfig", "goldConfigs", "silverConfigs"}
        assert exported["goldConfigs"][0]["makingCharge"] == 800

        exported["baseMetalConfig"]["goldPricePer10g"] = 99000
        exported["silverConfigs"] = []
        config = await config_service.import_config(exported)

        assert config.base_metal_config.gold_price_per_10g == 99000
        assert (await config_service.get_config()).silver_configs == []

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "payload",
        [
            [],
            {"goldConfigs": [], "silverConfigs": []},
            {"baseMetalConfig": {}, "goldConfigs": [{"name": "no id"}], "silverConfigs": []},
        ],
    )
    async def test_import_rejects_invalid_files(self, settings_collection, payload) -> None:
        with pytest.raises(ConfigImportError):
            await config_service.import_config(payload)
        assert settings_collection.documents == {}
