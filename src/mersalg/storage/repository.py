from __future__ import annotations

import json
from pathlib import Path
from typing import Iterable, List, Optional

import pandas as pd

from ..config.settings import PRODUCTS_FILE
from ..processing.specs import ExtractedSpecs
from ..recommend.engine import Product
from ..utils.logging import get_logger

logger = get_logger(__name__)

COLUMNS = [
    "id", "name", "brand", "price", "original_price", "image_url", "product_url",
    "sku", "in_stock", "is_high_margin", "margin_reason", "specs",
]
SEARCH_FIELDS = ("name", "brand", "sku")
_STR_COLUMNS = {"id": str, "sku": str, "name": str, "brand": str}


def _clean(value):
    if value is None:
        return None
    try:
        if pd.isna(value):
            return None
    except (TypeError, ValueError):
        pass
    return value


def _to_bool(value) -> bool:
    value = _clean(value)
    if isinstance(value, str):
        return value.strip().lower() in ("true", "1", "yes")
    return bool(value)


def _specs_from_json(raw) -> ExtractedSpecs:
    raw = _clean(raw)
    if not raw:
        return ExtractedSpecs()
    try:
        return ExtractedSpecs.from_dict(json.loads(raw))
    except (TypeError, ValueError):
        logger.warning("Unreadable specs JSON: %.60s", raw)
        return ExtractedSpecs()


def product_to_row(product: Product) -> dict:
    row = {col: getattr(product, col) for col in COLUMNS if col != "specs"}
    row["id"] = str(product.id)
    row["specs"] = json.dumps(product.specs.to_dict(), ensure_ascii=False)
    return row


def row_to_product(row) -> Product:
    price = _clean(row.get("price"))
    original = _clean(row.get("original_price"))
    return Product(
        id=str(row["id"]),
        name=_clean(row.get("name")) or "",
        brand=_clean(row.get("brand")) or "",
        price=float(price) if price is not None else None,
        product_url=_clean(row.get("product_url")) or "",
        original_price=float(original) if original is not None else None,
        image_url=_clean(row.get("image_url")),
        sku=_clean(row.get("sku")),
        in_stock=_to_bool(row.get("in_stock")),
        is_high_margin=_to_bool(row.get("is_high_margin")),
        margin_reason=_clean(row.get("margin_reason")),
        specs=_specs_from_json(row.get("specs")),
    )


class ProductRepository:
    """CSV-backed product store keyed by product id.

    Scores are never stored: they only mean something next to the
    reference they were computed against.
    """

    def __init__(self, path: Optional[Path] = None):
        self.path = Path(path or PRODUCTS_FILE)

    def _load(self) -> pd.DataFrame:
        if not self.path.exists():
            return pd.DataFrame(columns=COLUMNS)
        try:
            df = pd.read_csv(self.path, encoding="utf-8", dtype=_STR_COLUMNS)
        except pd.errors.EmptyDataError:
            return pd.DataFrame(columns=COLUMNS)
        except (OSError, ValueError) as e:
            logger.error("Could not read %s: %s", self.path, e)
            return pd.DataFrame(columns=COLUMNS)
        for col in COLUMNS:
            if col not in df.columns:
                df[col] = None
        return df[COLUMNS]

    def _save(self, df: pd.DataFrame) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self.path.with_suffix(self.path.suffix + ".tmp")
        df.to_csv(tmp, index=False, encoding="utf-8")
        tmp.replace(self.path)

    def upsert(self, products: Iterable[Product]) -> int:
        """Insert or replace by id; the last duplicate in a batch wins."""
        rows = [product_to_row(p) for p in products]
        if not rows:
            return 0
        incoming = pd.DataFrame(rows, columns=COLUMNS)
        existing = self._load()
        if existing.empty:
            merged = incoming
        else:
            merged = pd.concat([existing, incoming], ignore_index=True)
        merged = merged.drop_duplicates(subset=["id"], keep="last").reset_index(drop=True)
        self._save(merged)
        logger.debug("Upserted %d products into %s (total %d)", len(rows), self.path, len(merged))
        return len(rows)

    def search(self, query: str) -> List[Product]:
        q = (query or "").strip().lower()
        if not q:
            return []
        df = self._load()
        if df.empty:
            return []
        mask = pd.Series(False, index=df.index)
        for col in SEARCH_FIELDS:
            mask |= df[col].fillna("").astype(str).str.lower().str.contains(q, regex=False)
        return [row_to_product(row) for _, row in df[mask].iterrows()]

    def all_products(self) -> List[Product]:
        return [row_to_product(row) for _, row in self._load().iterrows()]

    def get(self, product_id) -> Optional[Product]:
        df = self._load()
        hit = df[df["id"].astype(str) == str(product_id)]
        if hit.empty:
            return None
        return row_to_product(hit.iloc[0])

    def count(self) -> int:
        return len(self._load())

    def high_margin_count(self) -> int:
        df = self._load()
        if df.empty:
            return 0
        return int(df["is_high_margin"].map(_to_bool).sum())

    def clear(self) -> None:
        if self.path.exists():
            self.path.unlink()
        logger.info("Product store cleared: %s", self.path)
