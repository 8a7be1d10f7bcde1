"""Reference data endpoints (resource tiers)."""

from fastapi import APIRouter, Depends

from ...knowledge_base.tiers import TierCatalog
from ..dependencies import get_tier_catalog

router = APIRouter(tags=["reference-data"])


@router.get("/tiers")
async def list_tiers(tier_catalog: TierCatalog = Depends(get_tier_catalog)):
    """Get list of available resource tiers."""
    tiers = tier_catalog.list_tiers()
    return {"tiers": [tier.model_dump() for tier in tiers], "count": len(tiers)}
