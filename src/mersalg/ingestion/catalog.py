"""Client for the retailer's product-list JSON API."""

import random
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence

import requests

from ..config.settings import (
    LAPTOP_CATEGORY_ID,
    POWER_API_BASE,
    POWER_SITE,
    REQUEST_TIMEOUT,
    USER_AGENTS,
)
from ..utils.logging import get_logger

logger = get_logger(__name__)

DEFAULT_HEADERS = {
    "Accept": "application/json",
    "Accept-Language": "da-DK,da;q=0.9,en;q=0.8",
    "Referer": f"{POWER_SITE}/",
    "Origin": POWER_SITE,
}


class CatalogError(Exception):
    """The catalog could not be reached or returned garbage."""


class CatalogTimeout(CatalogError):
    pass


class CatalogBlocked(CatalogError):
    """HTTP 403/429 from the catalog."""


class UserAgentProvider:
    """Picks a user agent per request; ``rng`` makes the choice reproducible."""

    def __init__(self, agents: Sequence[str] = USER_AGENTS, rng: Optional[random.Random] = None):
        if not agents:
            raise ValueError("at least one user agent is required")
        self.agents = tuple(agents)
        self.rng = rng or random.Random()

    def next(self) -> str:
        return self.rng.choice(self.agents)


@dataclass
class CatalogPage:
    products: List[Dict[str, Any]] = field(default_factory=list)
    total_count: int = 0


class PowerCatalog:
    def __init__(
        self,
        session: Optional[requests.Session] = None,
        user_agents: Optional[UserAgentProvider] = None,
        api_base: str = POWER_API_BASE,
        category_id: int = LAPTOP_CATEGORY_ID,
        timeout: float = REQUEST_TIMEOUT,
    ):
        self.sess = session or requests.Session()
        self.sess.headers.update(DEFAULT_HEADERS)
        self.user_agents = user_agents or UserAgentProvider()
        self.api_base = api_base
        self.category_id = category_id
        self.timeout = timeout

    def _get(self, params: Dict[str, Any]) -> CatalogPage:
        headers = {"User-Agent": self.user_agents.next()}
        logger.debug("GET %s params=%s", self.api_base, params)
        try:
            r = self.sess.get(self.api_base, params=params, headers=headers, timeout=self.timeout)
        except requests.Timeout as exc:
            raise CatalogTimeout(f"Catalog timed out after {self.timeout}s") from exc
        except requests.RequestException as exc:
            raise CatalogError(f"Catalog request failed: {exc}") from exc

        if r.status_code in (403, 429):
            raise CatalogBlocked(f"Catalog refused the request (HTTP {r.status_code})")
        try:
            r.raise_for_status()
            data = r.json()
        except requests.HTTPError as exc:
            raise CatalogError(f"Catalog returned HTTP {r.status_code}") from exc
        except ValueError as exc:
            raise CatalogError("Catalog returned invalid JSON") from exc

        if not isinstance(data, dict):
            raise CatalogError("Catalog returned an unexpected payload")
        products = [p for p in (data.get("products") or []) if isinstance(p, dict)]
        try:
            total = int(data.get("totalProductCount") or len(products))
        except (TypeError, ValueError):
            total = len(products)
        return CatalogPage(products, total)

    def search(self, query: str, size: int, offset: int = 0) -> CatalogPage:
        return self._get({"q": query, "cat": self.category_id, "size": size, "from": offset})

    def fetch_page(self, offset: int, size: int) -> CatalogPage:
        return self._get({"cat": self.category_id, "size": size, "from": offset})
