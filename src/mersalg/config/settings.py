import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parents[3]
DATA_DIR = Path(os.environ.get("MERSALG_DATA_DIR", BASE_DIR / "data"))
LOG_DIR = BASE_DIR / "logs"

PRODUCTS_FILE = Path(os.environ.get("MERSALG_PRODUCTS_FILE", DATA_DIR / "products.csv"))
LOG_FILE = Path(os.environ.get("MERSALG_LOG_FILE", LOG_DIR / "mersalg.log"))
LOG_LEVEL = os.environ.get("MERSALG_LOG_LEVEL", "INFO").upper()

# Power.dk product-list API
POWER_SITE = "https://www.power.dk"
POWER_CDN = "https://media.power-cdn.net"
POWER_API_BASE = os.environ.get("MERSALG_API_BASE", f"{POWER_SITE}/api/v2/productlists")
LAPTOP_CATEGORY_ID = int(os.environ.get("MERSALG_CATEGORY_ID", "1341"))
REQUEST_TIMEOUT = float(os.environ.get("MERSALG_TIMEOUT", "15"))

SYNC_PAGE_SIZE = 30
SEARCH_PAGE_SIZE = 15
CATEGORY_PAGE_SIZE = 20
CATEGORY_MAX_ALTERNATIVES = 15

USER_AGENTS = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36",
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36",
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64; rv:121.0) Gecko/20100101 Firefox/121.0",
)


def _parse_endings(raw: str) -> tuple:
    endings = tuple(part.strip() for part in raw.split(",") if part.strip())
    return endings or ("98",)


# Price endings that mark a product as high margin. The catalog sync script
# historically also accepted "92"; both paths share this setting now.
HIGH_MARGIN_PRICE_ENDINGS = _parse_endings(os.environ.get("MERSALG_MARGIN_ENDINGS", "98"))
