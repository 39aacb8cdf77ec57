from __future__ import annotations


class CatalogError(ValueError):
    """Raised when the catalog file violates a load-time integrity rule."""
