"""Shared fixtures for the mersalg test suite."""

import sys
from pathlib import Path

import pytest

# Ensure src/ is on the path so "import mersalg" works when running from repo root.
repo_root = Path(__file__).resolve().parents[1]
src_path = repo_root / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from mersalg.processing.specs import ExtractedSpecs  # noqa: E402
from mersalg.recommend.engine import Product  # noqa: E402


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def make_product():
    """Factory for Products with just the fields a test cares about."""
    counter = {"n": 0}

    def _make(price=3000, ram_gb=None, cpu_tier=None, storage_gb=None, gpu_tier=None,
              is_high_margin=False, name=None, brand="Acer", product_id=None, **spec_kwargs):
        counter["n"] += 1
        n = counter["n"]
        specs = ExtractedSpecs(
            ram_gb=ram_gb,
            ram=f"{ram_gb} GB" if ram_gb else None,
            cpu_tier=cpu_tier,
            storage_gb=storage_gb,
            storage=f"{storage_gb:g} GB" if storage_gb else None,
            gpu_tier=gpu_tier,
            **spec_kwargs,
        )
        return Product(
            id=product_id or f"p{n}",
            name=name or f"Laptop {n}",
            brand=brand,
            price=price,
            is_high_margin=is_high_margin,
            margin_reason="Pris ender på 98" if is_high_margin else None,
            specs=specs,
        )

    return _make


@pytest.fixture
def raw_listing():
    """One product as the catalog API returns it."""
    return {
        "productId": 1234567,
        "title": "ASUS Vivobook 15 OLED",
        "manufacturerName": "ASUS",
        "price": 5498,
        "previousPrice": 5999,
        "url": "/computer-og-tablets/baerbar-computer/asus-vivobook-15/p-1234567/",
        "barcode": "4711387000000",
        "elguideId": "E-1234567",
        "stockCount": 12,
        "canAddToCart": True,
        "salesArguments": "Intel Core i5-1335U / 16 GB RAM / 512 GB SSD / 15,6\" OLED skærm",
        "productImage": {
            "basePath": "/images/h-abc123",
            "variants": [{"filename": "vivobook.jpg"}, {"filename": "vivobook-small.jpg"}],
        },
    }


@pytest.fixture
def make_listing(raw_listing):
    def _make(product_id, price, sales, title="Laptop", stock=5, brand="Lenovo"):
        raw = dict(raw_listing)
        raw.update({
            "productId": product_id,
            "title": title,
            "price": price,
            "salesArguments": sales,
            "stockCount": stock,
            "canAddToCart": stock > 0,
            "manufacturerName": brand,
            "url": f"/p-{product_id}/",
        })
        return raw

    return _make


@pytest.fixture
def repo(tmp_path):
    from mersalg.storage.repository import ProductRepository
    return ProductRepository(tmp_path / "products.csv")
