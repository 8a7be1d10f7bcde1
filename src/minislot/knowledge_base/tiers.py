"""Data access layer for resource tiers."""

import json
import logging
from pathlib import Path
from types import MappingProxyType

from ..shared.schemas import ResourceTier

logger = logging.getLogger(__name__)


class TierCatalog:
    """Read-only catalog of resource tiers.

    Loaded once at process start and shared by every request; nothing mutates
    it after construction.
    """

    def __init__(self, data_path: Path | None = None):
        """
        Initialize the tier catalog.

        Args:
            data_path: Path to tiers.json (defaults to the bundled catalog)
        """
        if data_path is None:
            data_path = Path(__file__).parent.parent / "data" / "tiers.json"

        self.data_path = Path(data_path)
        self._tiers = MappingProxyType(self._load_data())

    def _load_data(self) -> dict[str, ResourceTier]:
        """Load tiers from JSON file."""
        try:
            with open(self.data_path) as f:
                data = json.load(f)
            tiers = {
                name: ResourceTier(name=name, **tier_data)
                for name, tier_data in data["tiers"].items()
            }
            logger.info(f"Loaded {len(tiers)} resource tiers from {self.data_path}")
            return tiers
        except Exception as e:
            logger.error(f"Failed to load resource tiers from {self.data_path}: {e}")
            raise

    def lookup(self, name: str) -> tuple[ResourceTier | None, bool]:
        """
        Look up a tier by name.

        Args:
            name: Tier name (e.g., 'professional')

        Returns:
            Tuple of (tier or None, found)
        """
        tier = self._tiers.get(name)
        return tier, tier is not None

    def get_tier(self, name: str) -> ResourceTier | None:
        """Get a tier by name, or None if it is not in the catalog."""
        return self._tiers.get(name)

    def list_tiers(self) -> list[ResourceTier]:
        """Get all tiers in catalog order."""
        return list(self._tiers.values())

    def tier_names(self) -> list[str]:
        return list(self._tiers.keys())

    def __contains__(self, name: object) -> bool:
        return name in self._tiers

    def __len__(self) -> int:
        return len(self._tiers)
