"""High-margin classification from brand and price ending."""

import math
from dataclasses import dataclass
from typing import Iterable, Optional

from ..config.rules import HIGH_MARGIN_BRANDS, PRICE_ENDING_REASON
from ..config.settings import HIGH_MARGIN_PRICE_ENDINGS


@dataclass(frozen=True)
class MarginInfo:
    is_high_margin: bool
    reason: Optional[str] = None


NOT_HIGH_MARGIN = MarginInfo(False)


def is_high_margin_product(
    brand: Optional[str],
    price,
    endings: Iterable[str] = HIGH_MARGIN_PRICE_ENDINGS,
) -> MarginInfo:
    """Brand rule first, then the floored price's last digits."""
    brand_key = (brand or "").strip().lower()
    if brand_key in HIGH_MARGIN_BRANDS:
        return MarginInfo(True, HIGH_MARGIN_BRANDS[brand_key])

    try:
        value = float(price)
    except (TypeError, ValueError):
        return NOT_HIGH_MARGIN
    if math.isnan(value) or math.isinf(value):
        return NOT_HIGH_MARGIN

    digits = str(math.floor(value))
    for ending in endings:
        if digits.endswith(ending):
            return MarginInfo(True, PRICE_ENDING_REASON.format(ending=ending))
    return NOT_HIGH_MARGIN
