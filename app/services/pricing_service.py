"""
Jewellery price calculation.

Rates are quoted per 10 grams of pure metal. For an item of a given purity:

    rate per 10g     = base price * purity / 100
    total price      = weight * (rate per 10g + add-on) / 10 + making charge
    purchase rate    = weight * rate per 10g / 10 + purchase margin

Every money figure is returned together with its Indian-English and Hindi
spelling so the counter slip can be filled in directly.
"""
import math
from typing import Optional

from app.enums import MetalType
from app.logger import logger
from app.models.calculation import AmountInWordsOut, CalculationResult
from app.models.config import BaseMetalConfig, MetalItem
from app.utils import number_to_words
from config import settings as app_settings


class PricingError(ValueError):
    """Raised when a price cannot be calculated from the given inputs"""
    pass


def base_price_per_10g(metal: MetalType, base: BaseMetalConfig) -> float:
    if metal == MetalType.GOLD:
        return base.gold_price_per_10g
    return base.silver_price_per_10g


def _in_words(amount: float) -> AmountInWordsOut:
    return AmountInWordsOut(**number_to_words(amount)._asdict())


def calculate_price(
    metal: MetalType,
    weight: float,
    item: MetalItem,
    base: BaseMetalConfig,
    purchase_margin: Optional[float] = None,
) -> CalculationResult:
    """Price ``weight`` grams of ``item`` at today's base rate."""
    if weight is None or not math.isfinite(weight) or weight <= 0:
        raise PricingError("Weight must be a finite number greater than zero")

    if purchase_margin is None:
        purchase_margin = app_settings.PURCHASE_RATE_MARGIN

    rate_per_10g = base_price_per_10g(metal, base) * (item.purity / 100)
    rate_with_add_on = rate_per_10g + item.add_on_price
    total_price = weight * (rate_with_add_on / 10) + item.making_charge
    purchase_rate = (rate_per_10g / 10) * weight + purchase_margin

    # Silver slips show the purity-adjusted rate, gold slips include the add-on
    rate_applied = rate_with_add_on if metal == MetalType.GOLD else rate_per_10g

    logger.info(
        f"Calculated {metal.value} price: item={item.name} weight={weight}g "
        f"total={total_price:.2f} purchase={purchase_rate:.2f}"
    )

    return CalculationResult(
        metal=metal,
        item_id=item.id,
        item_name=item.name,
        weight=weight,
        total_price=total_price,
        rate_applied=rate_applied,
        making_charge=item.making_charge,
        purchase_rate=purchase_rate,
        total_price_in_words=_in_words(total_price),
        rate_applied_in_words=_in_words(rate_applied),
        making_charge_in_words=_in_words(item.making_charge),
        purchase_rate_in_words=_in_words(purchase_rate),
    )
