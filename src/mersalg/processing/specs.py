"""Structured spec extraction from product titles and marketing copy."""

from dataclasses import asdict, dataclass, field, fields
from typing import Any, Dict, List, Optional

from ..recommend.hardware import get_cpu_tier, get_gpu_tier
from ..utils.logging import get_logger
from .normalize import (
    build_search_text,
    expand_cpu_shorthand,
    format_ram,
    format_storage,
    parse_combined_notation,
    parse_cpu,
    parse_features,
    parse_gpu,
    parse_gpu_vram_gb,
    parse_os,
    parse_ram_gb,
    parse_resolution,
    parse_screen_size,
    parse_screen_type,
    parse_storage_gb,
)

logger = get_logger(__name__)

# camelCase keys of the stored JSON -> dataclass fields
_CAMEL_KEYS = {
    "cpuTier": "cpu_tier",
    "gpuTier": "gpu_tier",
    "gpuVram": "gpu_vram_gb",
    "gpuVramGB": "gpu_vram_gb",
    "ramGB": "ram_gb",
    "storageGB": "storage_gb",
    "screenSize": "screen_size",
    "screenType": "screen_type",
    "screenResolution": "screen_resolution",
}


@dataclass
class ExtractedSpecs:
    cpu: Optional[str] = None
    cpu_tier: Optional[int] = None
    gpu: Optional[str] = None
    gpu_tier: Optional[int] = None
    gpu_vram_gb: Optional[int] = None
    ram: Optional[str] = None
    ram_gb: Optional[int] = None
    storage: Optional[str] = None
    storage_gb: Optional[float] = None
    screen_size: Optional[float] = None
    screen_type: Optional[str] = None
    screen_resolution: Optional[str] = None
    os: Optional[str] = None
    features: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """Only populated fields; an empty feature list counts as unset."""
        return {k: v for k, v in asdict(self).items() if v is not None and v != []}

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "ExtractedSpecs":
        if not data:
            return cls()
        known = {f.name for f in fields(cls)}
        kwargs: Dict[str, Any] = {}
        for key, value in data.items():
            name = _CAMEL_KEYS.get(key, key)
            if name in known and value is not None:
                kwargs[name] = value
        if "features" in kwargs:
            kwargs["features"] = list(kwargs["features"])
        return cls(**kwargs)

    def is_empty(self) -> bool:
        return not self.to_dict()


def extract_specs(title: Optional[str], secondary: Optional[str] = None) -> ExtractedSpecs:
    """
    Pull CPU, GPU, RAM, storage and screen size out of free text.

    ``secondary`` (marketing copy) is searched before the title. Fields
    without a trustworthy match stay ``None``; a CPU that matched but is
    not in the tier table gets ``cpu_tier == 0``.
    """
    text = build_search_text(title or "", secondary)
    specs = ExtractedSpecs()
    if not text.strip():
        return specs

    specs.cpu = parse_cpu(text)

    combined = parse_combined_notation(text)
    if combined is not None:
        if specs.cpu is None:
            # unknown codes are kept as written and tiered like any CPU name
            specs.cpu = expand_cpu_shorthand(combined.cpu_code) or combined.cpu_code.strip() or None
        if combined.ram_gb is not None:
            specs.ram_gb = combined.ram_gb
        if combined.storage_gb is not None:
            specs.storage_gb = combined.storage_gb

    if specs.cpu is not None:
        specs.cpu_tier = get_cpu_tier(specs.cpu)

    specs.gpu = parse_gpu(text)
    if specs.gpu is not None:
        specs.gpu_tier = get_gpu_tier(specs.gpu)
        specs.gpu_vram_gb = parse_gpu_vram_gb(text)

    if specs.ram_gb is None:
        specs.ram_gb = parse_ram_gb(text)
    if specs.ram_gb is not None:
        specs.ram = format_ram(specs.ram_gb)

    if specs.storage_gb is None:
        specs.storage_gb = parse_storage_gb(text)
    if specs.storage_gb is not None:
        specs.storage = format_storage(specs.storage_gb)

    specs.screen_size = parse_screen_size(text)
    specs.screen_type = parse_screen_type(text)
    specs.screen_resolution = parse_resolution(text)
    specs.os = parse_os(text)
    specs.features = parse_features(text)

    logger.debug("Extracted %s from %r", specs.to_dict(), (title or "")[:60])
    return specs
