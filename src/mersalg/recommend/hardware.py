"""CPU and GPU tier classifiers."""

from typing import Optional

import pandas as pd

from ..config.rules import (
    CPU_FALLBACK_RULES,
    CPU_TIER_RULES,
    CPU_TIER_UNKNOWN,
    GPU_TIER_RULES,
    GPU_TIER_UNKNOWN,
)


def _first_match(text: str, rules) -> Optional[int]:
    for pattern, tier in rules:
        if pattern.search(text):
            return tier
    return None


def get_cpu_tier(cpu_text) -> int:
    """Ordinal CPU tier 0-10 (1 = avoid, 0 = unknown).

    Generation/suffix rules are tried first; the family-only fallback
    table only runs when none of them matched.
    """
    if cpu_text is None or pd.isna(cpu_text):
        return CPU_TIER_UNKNOWN
    text = str(cpu_text).strip()
    if not text:
        return CPU_TIER_UNKNOWN

    tier = _first_match(text, CPU_TIER_RULES)
    if tier is None:
        tier = _first_match(text, CPU_FALLBACK_RULES)
    return CPU_TIER_UNKNOWN if tier is None else tier


def get_gpu_tier(gpu_text) -> int:
    if gpu_text is None or pd.isna(gpu_text):
        return GPU_TIER_UNKNOWN
    tier = _first_match(str(gpu_text), GPU_TIER_RULES)
    return GPU_TIER_UNKNOWN if tier is None else tier
