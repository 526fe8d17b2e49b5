"""
Common utilities for hypixel-stats.

Modules:
- json_values: JSON value classification and string normalization
- unstable: Dynamic-property accessor over raw Hypixel API JSON
"""

__all__ = [
    "json_values",
    "unstable",
]
