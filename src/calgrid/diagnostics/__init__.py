"""Diagnostics package.

- pretty_month, invariants: stdlib only
- fill_stats: requires the diagnostics extras (numpy, matplotlib for --plot)
"""

__all__ = ["pretty_month", "invariants", "fill_stats"]
