from pydantic import BaseModel, Field

from app.enums import MetalType


class AmountInWordsOut(BaseModel):
    english: str
    hindi: str


class CalculationRequest(BaseModel):
    weight: float = Field(..., description="Weight in grams")
    item_id: str


class CalculationResult(BaseModel):
    metal: MetalType
    item_id: str
    item_name: str
    weight: float
    total_price: float
    rate_applied: float  # per 10g
    making_charge: float
    purchase_rate: float
    total_price_in_words: AmountInWordsOut
    rate_applied_in_words: AmountInWordsOut
    making_charge_in_words: AmountInWordsOut
    purchase_rate_in_words: AmountInWordsOut
