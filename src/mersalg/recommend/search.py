"""Search orchestration: find a reference product, build the candidate
pool from the store (or the catalog) and run the engine over it."""

from dataclasses import dataclass, field
from typing import Iterable, List, Optional

from ..config.settings import (
    CATEGORY_MAX_ALTERNATIVES,
    CATEGORY_PAGE_SIZE,
    SEARCH_PAGE_SIZE,
)
from ..ingestion.catalog import CatalogError, PowerCatalog
from ..processing.clean import is_in_stock, listing_to_product
from ..processing.validate import InvalidReferenceError, validate_reference
from ..storage.repository import ProductRepository
from ..utils.logging import get_logger
from .engine import Product, ScoredCandidate, as_reference, recommend_upgrades
from .scoring import price_ceiling

logger = get_logger(__name__)

__all__ = [
    "InvalidReferenceError",
    "SearchResult",
    "build_candidate_pool",
    "compare_products",
    "search_upgrades",
]


@dataclass
class SearchResult:
    products: List[ScoredCandidate] = field(default_factory=list)
    total_count: int = 0
    search_query: str = ""
    source: str = "catalog"

    @property
    def reference(self) -> Optional[ScoredCandidate]:
        return self.products[0] if self.products else None

    @property
    def alternatives(self) -> List[ScoredCandidate]:
        return self.products[1:]

    @property
    def top_pick(self) -> Optional[ScoredCandidate]:
        return next((p for p in self.alternatives if p.is_top_pick), None)

    def to_dict(self) -> dict:
        return {
            "products": [p.to_dict() for p in self.products],
            "total_count": self.total_count,
            "search_query": self.search_query,
            "source": self.source,
        }


def build_candidate_pool(reference: Product, products: Iterable[Product]) -> List[Product]:
    """Drop the reference itself, unpriced products, anything over the price ceiling and
    products without RAM or storage data."""
    ceiling = price_ceiling(reference.price)
    pool = []
    for p in products:
        if p.id == reference.id:
            continue
        if p.price is None or p.price > ceiling:
            continue
        if not p.specs.ram_gb or not p.specs.storage_gb:
            continue
        pool.append(p)
    return pool


def _run(reference: Product, products: Iterable[Product], query: str,
         total: int, source: str) -> SearchResult:
    validate_reference(reference)
    pool = build_candidate_pool(reference, products)
    alternatives = recommend_upgrades(reference, pool)
    logger.info(
        "%d alternatives for %r from %d candidates (%s)",
        len(alternatives), reference.name, len(pool), source,
    )
    return SearchResult([as_reference(reference), *alternatives], total, query, source)


def _category_pool(catalog: PowerCatalog, reference: Product) -> List[Product]:
    page = catalog.fetch_page(0, CATEGORY_PAGE_SIZE)
    raws = [
        raw for raw in page.products
        if str(raw.get("productId")) != reference.id and is_in_stock(raw)
    ]
    return [listing_to_product(raw) for raw in raws[:CATEGORY_MAX_ALTERNATIVES]]


def search_upgrades(
    query: str,
    repository: ProductRepository,
    catalog: Optional[PowerCatalog] = None,
    use_database: bool = False,
) -> SearchResult:
    """
    Find ``query`` and recommend upgrades for the first hit.

    With ``use_database`` the store is searched first; otherwise (or when
    the store has no hit) the catalog is searched. The result's
    ``products[0]`` is always the reference.
    """
    query = (query or "").strip()
    if not query:
        raise ValueError("Søgeord er påkrævet")

    stored_count = repository.count()

    if use_database and stored_count > 0:
        hits = repository.search(query)
        if hits:
            logger.info("Store hit for %r: %d products", query, len(hits))
            return _run(hits[0], repository.all_products(), query, len(hits), "database")
        logger.info("No store hit for %r, asking the catalog", query)

    catalog = catalog or PowerCatalog()
    page = catalog.search(query, SEARCH_PAGE_SIZE)
    raws = [raw for raw in page.products if is_in_stock(raw)]
    if not raws:
        logger.info("No in-stock products for %r", query)
        return SearchResult([], 0, query, "catalog")

    reference = validate_reference(listing_to_product(raws[0]))
    stored = repository.get(reference.id)
    if stored is not None and not stored.specs.is_empty():
        reference.specs = stored.specs

    if stored_count > 0:
        pool = repository.all_products()
    elif len(raws) == 1:
        try:
            pool = _category_pool(catalog, reference)
        except CatalogError as exc:
            logger.warning("Could not fetch category alternatives: %s", exc)
            pool = []
    else:
        pool = []

    return _run(reference, pool, query, page.total_count, "catalog")


def compare_products(
    ids: Iterable[str],
    repository: ProductRepository,
    catalog: Optional[PowerCatalog] = None,
) -> List[Product]:
    """Look up products by id, store first, then the catalog; unknown ids are skipped."""
    wanted = [str(i).strip() for i in ids if str(i).strip()]
    if not wanted:
        raise ValueError("Mangler produkt-id'er")

    found = []
    for product_id in wanted:
        product = repository.get(product_id)
        if product is None:
            catalog = catalog or PowerCatalog()
            try:
                page = catalog.search(product_id, 1)
            except CatalogError as exc:
                logger.error("Failed to fetch %s from the catalog: %s", product_id, exc)
                continue
            if page.products:
                product = listing_to_product(page.products[0])
        if product is None:
            logger.info("Product %s not found", product_id)
            continue
        found.append(product)
    return found
