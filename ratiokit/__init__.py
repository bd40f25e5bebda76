"""Exact 64-bit rational ratios, SI and binary prefix names, and dimension-checked quantities."""

__version__ = "1.0.0"
__all__ = [
    "integral",
    "ratio",
    "prefixes",
    "binary_prefixes",
    "ratio_io",
    "legacy_io",
    "physics",
]