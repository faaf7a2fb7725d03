from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional

# Aliases keep the camelCase keys of exported configuration files
_aliased = ConfigDict(populate_by_name=True)


class BaseMetalConfig(BaseModel):
    model_config = _aliased

    gold_price_per_10g: float = Field(118000.0, ge=0, allow_inf_nan=False, alias="goldPricePer10g")
    silver_price_per_10g: float = Field(1200.0, ge=0, allow_inf_nan=False, alias="silverPricePer10g")


class BasePriceUpdate(BaseModel):
    model_config = _aliased

    gold_price_per_10g: Optional[float] = Field(None, ge=0, allow_inf_nan=False, alias="goldPricePer10g")
    silver_price_per_10g: Optional[float] = Field(None, ge=0, allow_inf_nan=False, alias="silverPricePer10g")


class MetalItemCreate(BaseModel):
    model_config = _aliased

    name: str = Field(..., min_length=1)
    purity: float = Field(..., gt=0, le=100)  # percent of 24 karat / fine silver
    making_charge: float = Field(..., ge=0, allow_inf_nan=False, alias="makingCharge")
    add_on_price: float = Field(0.0, ge=0, allow_inf_nan=False, alias="addOnPrice")


class MetalItem(MetalItemCreate):
    id: str


class CalculatorConfig(BaseModel):
    model_config = _aliased

    base_metal_config: BaseMetalConfig = Field(default_factory=BaseMetalConfig, alias="baseMetalConfig")
    gold_configs: List[MetalItem] = Field(default_factory=list, alias="goldConfigs")
    silver_configs: List[MetalItem] = Field(default_factory=list, alias="silverConfigs")


def default_config() -> CalculatorConfig:
    return CalculatorConfig(
        base_metal_config=BaseMetalConfig(),
        gold_configs=[
            MetalItem(id="1", name="916 KDM", purity=91.6, add_on_price=5000, making_charge=800),
            MetalItem(id="2", name="750 KDM", purity=75.0, add_on_price=6500, making_charge=550),
        ],
        silver_configs=[
            MetalItem(id="s1", name="Payal MRDX", purity=56, add_on_price=200, making_charge=250),
            MetalItem(id="s2", name="Payal SC-70", purity=70.0, add_on_price=200, making_charge=250),
        ],
    )
