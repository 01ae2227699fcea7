"""mersalg: upgrade recommendations for laptop sales assistants.

Public API surface; import submodules directly for full access:
  mersalg.config.rules              extraction patterns, tier ladders
  mersalg.config.scoring_constants  upgrade score weights
  mersalg.processing.specs          spec extraction
  mersalg.recommend.engine          scoring + selection
  mersalg.recommend.search          search orchestration
  mersalg.app.cli                   CLI entry point
"""

from .processing.specs import ExtractedSpecs, extract_specs
from .recommend.engine import Product, ScoredCandidate, recommend_upgrades
from .recommend.hardware import get_cpu_tier, get_gpu_tier
from .recommend.margin import is_high_margin_product
from .recommend.scoring import calculate_upgrade_score
from .recommend.search import search_upgrades


def main():
    """CLI entry point."""
    import sys
    from .app.main import main as _main
    sys.exit(_main())


__all__ = [
    "ExtractedSpecs",
    "Product",
    "ScoredCandidate",
    "calculate_upgrade_score",
    "extract_specs",
    "get_cpu_tier",
    "get_gpu_tier",
    "is_high_margin_product",
    "recommend_upgrades",
    "search_upgrades",
    "main",
]
