from __future__ import annotations


class ChartConfigError(ValueError):
    """Raised when chart configuration or sample data cannot be used."""
