"""Static reference data: resource tiers."""

from .tiers import TierCatalog

__all__ = ["TierCatalog"]
