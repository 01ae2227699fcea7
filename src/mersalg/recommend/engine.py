"""Recommendation engine: scores a candidate pool against a reference,
keeps the valid upgrades and marks the top pick.

Submodules:
  - hardware: CPU/GPU tier classifiers
  - margin: high-margin classification
  - scoring: calculate_upgrade_score, validity gate
"""

from dataclasses import asdict, dataclass, field, replace
from typing import Any, Dict, Iterable, List, Optional

import pandas as pd

from ..config.scoring_constants import MAX_ALTERNATIVES
from ..processing.specs import ExtractedSpecs
from ..utils.logging import get_logger
from .scoring import calculate_upgrade_score, price_ceiling, to_number

logger = get_logger(__name__)


@dataclass
class Product:
    id: str
    name: str
    brand: str
    price: Optional[float]
    product_url: str = ""
    original_price: Optional[float] = None
    image_url: Optional[str] = None
    sku: Optional[str] = None
    in_stock: bool = True
    is_high_margin: bool = False
    margin_reason: Optional[str] = None
    specs: ExtractedSpecs = field(default_factory=ExtractedSpecs)

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["specs"] = self.specs.to_dict()
        return data


@dataclass
class ScoredCandidate(Product):
    """A product scored relative to one reference; never persisted."""
    is_top_pick: bool = False
    price_difference: float = 0.0
    upgrade_score: float = 0.0
    upgrade_reason: Optional[str] = None
    is_valid_upgrade: bool = False
    score_breakdown: Dict[str, float] = field(default_factory=dict)


def as_reference(product: Product) -> ScoredCandidate:
    """The reference row of a result: zero difference, no score."""
    base = {k: getattr(product, k) for k in Product.__dataclass_fields__}
    return ScoredCandidate(**base)


def score_candidate(
    candidate: Product,
    reference: Product,
    max_price: Optional[float] = None,
) -> ScoredCandidate:
    result = calculate_upgrade_score(
        candidate.specs,
        reference.specs,
        candidate.is_high_margin,
        candidate.price,
        reference.price,
        max_price=max_price,
    )
    base = {k: getattr(candidate, k) for k in Product.__dataclass_fields__}
    return ScoredCandidate(
        **base,
        price_difference=to_number(candidate.price) - to_number(reference.price),
        upgrade_score=result.score,
        upgrade_reason=result.upgrade_reason,
        is_valid_upgrade=result.is_valid_upgrade,
        score_breakdown=dict(result.breakdown),
    )


def score_candidates(reference: Product, pool: Iterable[Product]) -> List[ScoredCandidate]:
    return [score_candidate(p, reference) for p in pool]


def find_top_pick(candidates: List[ScoredCandidate]) -> Optional[int]:
    """Index of the best high-margin candidate; the first one wins ties."""
    best_idx, best_score = None, None
    for i, cand in enumerate(candidates):
        if not cand.is_high_margin:
            continue
        if best_score is None or cand.upgrade_score > best_score:
            best_idx, best_score = i, cand.upgrade_score
    return best_idx


def select_recommendations(
    scored: List[ScoredCandidate],
    reference_price: float,
    limit: int = MAX_ALTERNATIVES,
) -> List[ScoredCandidate]:
    """
    Valid upgrades under the price ceiling, best score first, at most
    ``limit`` of them. At most one entry comes back with ``is_top_pick``.
    """
    if not scored:
        return []

    ceiling = price_ceiling(reference_price)
    frame = pd.DataFrame({
        "score": [c.upgrade_score for c in scored],
        "price": [to_number(c.price) for c in scored],
        "valid": [bool(c.is_valid_upgrade) for c in scored],
    })
    keep = frame[frame["valid"] & (frame["price"] <= ceiling)]
    # mergesort keeps the pool order between equal scores
    ranked = keep.sort_values(by="score", ascending=False, kind="mergesort").head(limit)

    selected = [replace(scored[i], is_top_pick=False) for i in ranked.index]
    top = find_top_pick(selected)
    if top is not None:
        selected[top] = replace(selected[top], is_top_pick=True)

    logger.debug(
        "Selected %d/%d candidates (ceiling %.0f, top pick: %s)",
        len(selected), len(scored), ceiling,
        selected[top].name if top is not None else "none",
    )
    return selected


def recommend_upgrades(reference: Product, pool: Iterable[Product]) -> List[ScoredCandidate]:
    """Score ``pool`` against ``reference`` and select the alternatives."""
    return select_recommendations(score_candidates(reference, pool), reference.price)
