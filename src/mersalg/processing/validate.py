from typing import List

import pandas as pd

from ..recommend.engine import Product


class InvalidReferenceError(ValueError):
    """The reference product cannot anchor a comparison."""


def validate_reference(product: Product) -> Product:
    price = product.price
    if price is None or isinstance(price, bool):
        raise InvalidReferenceError(f"Reference {product.id!r} has no price")
    try:
        value = float(price)
    except (TypeError, ValueError):
        raise InvalidReferenceError(f"Reference {product.id!r} has a non-numeric price: {price!r}")
    if pd.isna(value) or value < 0:
        raise InvalidReferenceError(f"Reference {product.id!r} has an invalid price: {price!r}")
    return product


def validate_product(product: Product) -> List[str]:
    warnings = []

    if not product.price or product.price <= 0:
        warnings.append("price_missing")
    if product.specs.ram_gb is None:
        warnings.append("ram_missing")
    if product.specs.storage_gb is None:
        warnings.append("storage_missing")
    if product.specs.cpu is not None and product.specs.cpu_tier == 0:
        warnings.append("cpu_tier_unknown")

    return warnings
