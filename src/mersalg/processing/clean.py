"""Raw catalog listing -> Product mapping."""

import hashlib
import re
from typing import Any, Dict, Optional

import pandas as pd
from bs4 import BeautifulSoup

from ..config.settings import POWER_CDN, POWER_SITE
from ..recommend.engine import Product
from ..recommend.margin import is_high_margin_product
from .specs import extract_specs

UNKNOWN_NAME = "Ukendt produkt"
UNKNOWN_BRAND = "Ukendt"

_WS_RE = re.compile(r"[ \t\r\f\v]+")


def clean_sales_text(raw) -> str:
    """Marketing copy may be a list of bullets or an HTML fragment."""
    if raw is None:
        return ""
    if isinstance(raw, (list, tuple)):
        raw = "\n".join(str(x) for x in raw if x)
    text = str(raw)
    if "<" in text and ">" in text:
        text = BeautifulSoup(text, "lxml").get_text("\n", strip=True)
    lines = (_WS_RE.sub(" ", line).strip() for line in text.splitlines())
    return "\n".join(line for line in lines if line)


def _to_price(value) -> Optional[float]:
    if value is None or isinstance(value, bool):
        return None
    try:
        price = float(value)
    except (TypeError, ValueError):
        return None
    return None if pd.isna(price) else price


def absolute_url(url: Optional[str], host: str = POWER_SITE) -> str:
    url = (url or "").strip()
    if not url or url.startswith("http"):
        return url
    if not url.startswith("/"):
        url = "/" + url
    return host + url


def image_url(product_image: Optional[Dict[str, Any]]) -> Optional[str]:
    """First image variant on the CDN host, or None."""
    if not product_image:
        return None
    base_path = product_image.get("basePath") or ""
    variants = product_image.get("variants") or []
    if not variants or not variants[0].get("filename"):
        return None
    sep = "" if base_path.endswith("/") else "/"
    path = f"{base_path}{sep}{variants[0]['filename']}"
    if path.startswith("http"):
        return path
    return POWER_CDN + path


def is_in_stock(raw: Dict[str, Any]) -> bool:
    try:
        stock = int(raw.get("stockCount") or 0)
    except (TypeError, ValueError):
        stock = 0
    return stock > 0 or bool(raw.get("canAddToCart"))


def _stable_id(raw: Dict[str, Any]) -> str:
    key = f"{raw.get('url') or ''}|{raw.get('title') or ''}"
    return "p-" + hashlib.sha1(key.encode("utf-8")).hexdigest()[:10]


def listing_to_product(raw: Dict[str, Any]) -> Product:
    name = (raw.get("title") or "").strip() or UNKNOWN_NAME
    brand = (raw.get("manufacturerName") or "").strip() or UNKNOWN_BRAND
    price = _to_price(raw.get("price"))
    margin = is_high_margin_product(brand, price)
    sales = clean_sales_text(raw.get("salesArguments"))

    product_id = raw.get("productId")
    sku = raw.get("barcode") or raw.get("elguideId")

    return Product(
        id=str(product_id) if product_id not in (None, "") else _stable_id(raw),
        name=name,
        brand=brand,
        price=price,
        product_url=absolute_url(raw.get("url")),
        original_price=_to_price(raw.get("previousPrice")) or None,
        image_url=image_url(raw.get("productImage")),
        sku=str(sku) if sku else None,
        in_stock=is_in_stock(raw),
        is_high_margin=margin.is_high_margin,
        margin_reason=margin.reason,
        specs=extract_specs(name, sales),
    )
