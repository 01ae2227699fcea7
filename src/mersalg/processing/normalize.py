"""Regex helpers that pull single specs out of free product text.

Each ``parse_*`` function returns ``None`` (or an empty result) when
nothing trustworthy was found; callers never get zero as a placeholder.
"""

import re
from typing import List, NamedTuple, Optional

from ..config.rules import (
    COMBINED_NOTATION,
    CPU_PATTERNS,
    CPU_SHORTHAND,
    FEATURE_PATTERNS,
    GPU_PATTERNS,
    GPU_VRAM_PATTERN,
    OS_PATTERNS,
    RAM_MAX_GB,
    RAM_MIN_GB,
    RAM_PATTERNS,
    RESOLUTION_PATTERN,
    SCREEN_BARE,
    SCREEN_BARE_BLOCKED_PREFIXES,
    SCREEN_MAX_INCH,
    SCREEN_MIN_INCH,
    SCREEN_TYPE_PATTERN,
    SCREEN_WITH_UNIT,
    STORAGE_GB_PATTERN,
    STORAGE_MIN_GB,
    STORAGE_TB_PATTERN,
    TRADEMARK_GLYPHS,
)


class CombinedNotation(NamedTuple):
    cpu_code: str
    ram_gb: Optional[int]
    storage_gb: Optional[float]


def strip_trademarks(text: Optional[str]) -> str:
    if not text:
        return ""
    return TRADEMARK_GLYPHS.sub("", str(text))


def build_search_text(title: str, secondary: Optional[str] = None) -> str:
    """Marketing copy first (denser, more reliable), then the title."""
    clean_title = strip_trademarks(title)
    clean_secondary = strip_trademarks(secondary).strip()
    if clean_secondary:
        return f"{clean_secondary}\n{clean_title}"
    return clean_title


def _to_float(raw: str) -> float:
    return float(raw.replace(",", "."))


def format_ram(gb: int) -> str:
    return f"{gb} GB"


def format_storage(gb: float) -> str:
    if gb >= 1024:
        tb = gb / 1024
        return f"{tb:g} TB"
    return f"{gb:g} GB"


def parse_cpu(text: str) -> Optional[str]:
    for pattern in CPU_PATTERNS:
        m = pattern.search(text)
        if m:
            return m.group(0).strip()
    return None


def parse_gpu(text: str) -> Optional[str]:
    for pattern in GPU_PATTERNS:
        m = pattern.search(text)
        if m:
            return m.group(0).strip()
    return None


def expand_cpu_shorthand(code: str) -> Optional[str]:
    """'i5' -> 'Intel Core i5', 'R7' -> 'AMD Ryzen 7', 'U7' -> 'Intel Core Ultra 7'."""
    code = (code or "").strip()
    for pattern, template in CPU_SHORTHAND:
        m = pattern.match(code)
        if m:
            return template.format(m.group(1))
    return None


def parse_combined_notation(text: str) -> Optional[CombinedNotation]:
    """Parse '(i5/16/512 GB)' style tokens.

    RAM is only kept inside [4, 64] GB; storage only when it is at least
    64 GB, or when the token says TB.
    """
    m = COMBINED_NOTATION.search(text)
    if not m:
        return None

    cpu_code, ram_raw, storage_raw, unit = m.groups()

    ram_val = int(ram_raw)
    ram_gb = ram_val if RAM_MIN_GB <= ram_val <= RAM_MAX_GB else None

    storage_val = int(storage_raw)
    storage_gb: Optional[float] = None
    if unit and unit.upper() == "TB":
        if storage_val > 0:
            storage_gb = float(storage_val * 1024)
    elif storage_val >= STORAGE_MIN_GB:
        storage_gb = float(storage_val)

    return CombinedNotation(cpu_code.strip(), ram_gb, storage_gb)


def parse_ram_gb(text: str) -> Optional[int]:
    """First plausible RAM size; '<N> GB' right after a GPU name is VRAM."""
    vram_starts = {m.start(1) for m in GPU_VRAM_PATTERN.finditer(text)}
    for pattern in RAM_PATTERNS:
        for m in pattern.finditer(text):
            if m.start(1) in vram_starts:
                continue
            val = int(m.group(1))
            if RAM_MIN_GB <= val <= RAM_MAX_GB:
                return val
    return None


def parse_storage_gb(text: str) -> Optional[float]:
    m = STORAGE_TB_PATTERN.search(text)
    if m:
        tb = _to_float(m.group(1))
        if tb > 0:
            return tb * 1024

    for m in STORAGE_GB_PATTERN.finditer(text):
        val = int(m.group(1))
        if val >= STORAGE_MIN_GB:
            return float(val)
    return None


def _in_screen_range(size: float) -> bool:
    return SCREEN_MIN_INCH <= size <= SCREEN_MAX_INCH


def parse_screen_size(text: str) -> Optional[float]:
    """Screen diagonal in inches, 10-18 only.

    Sizes with an explicit unit (14", 15,6", 16-inch, 14 tommer) are
    preferred; otherwise the first free-standing number in range that is
    not a capacity, refresh rate or version number.
    """
    if not text:
        return None

    for m in SCREEN_WITH_UNIT.finditer(text):
        size = _to_float(m.group(1))
        if _in_screen_range(size):
            return size

    for m in SCREEN_BARE.finditer(text):
        if SCREEN_BARE_BLOCKED_PREFIXES.search(text[max(0, m.start() - 14):m.start()]):
            continue
        size = _to_float(m.group(1))
        if _in_screen_range(size):
            return size
    return None


def parse_gpu_vram_gb(text: str) -> Optional[int]:
    m = GPU_VRAM_PATTERN.search(text)
    if not m:
        return None
    val = int(m.group(1))
    return val if 1 <= val <= 32 else None


def parse_os(text: str) -> Optional[str]:
    for pattern in OS_PATTERNS:
        m = pattern.search(text)
        if m:
            return m.group(0).strip()
    return None


def parse_screen_type(text: str) -> Optional[str]:
    m = SCREEN_TYPE_PATTERN.search(text)
    if not m:
        return None
    return re.sub(r"\s+", "", m.group(1)).upper()


def parse_resolution(text: str) -> Optional[str]:
    m = RESOLUTION_PATTERN.search(text)
    if not m:
        return None
    return f"{m.group(1)}x{m.group(2)}"


def parse_features(text: str) -> List[str]:
    return [label for pattern, label in FEATURE_PATTERNS if pattern.search(text)]

