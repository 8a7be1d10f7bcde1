"""Tests for the resource tier catalog."""

import json

import pytest

from minislot.knowledge_base.tiers import TierCatalog


@pytest.mark.parametrize(
    "name, storage, memory_request, memory_limit, cpu_request, cpu_limit",
    [
        ("free", "1Gi", "1Gi", "2Gi", "500m", "1"),
        ("professional", "10Gi", "2Gi", "4Gi", "1", "2"),
        ("enterprise", "50Gi", "4Gi", "8Gi", "2", "4"),
    ],
)
def test_bundled_tiers(tier_catalog, name, storage, memory_request, memory_limit, cpu_request, cpu_limit):
    tier, found = tier_catalog.lookup(name)

    assert found
    assert tier.name == name
    assert tier.storage == storage
    assert tier.memory_request == memory_request
    assert tier.memory_limit == memory_limit
    assert tier.cpu_request == cpu_request
    assert tier.cpu_limit == cpu_limit


def test_unknown_tier_is_not_found(tier_catalog):
    tier, found = tier_catalog.lookup("platinum")

    assert tier is None
    assert found is False
    assert tier_catalog.get_tier("platinum") is None
    assert "platinum" not in tier_catalog


def test_catalog_is_read_only(tier_catalog):
    tier = tier_catalog.get_tier("free")

    with pytest.raises(Exception):
        tier.storage = "100Gi"
    with pytest.raises(TypeError):
        tier_catalog._tiers["free"] = tier

    assert tier_catalog.tier_names() == ["free", "professional", "enterprise"]
    assert len(tier_catalog) == 3


def test_template_values_use_template_names(tier_catalog):
    values = tier_catalog.get_tier("professional").to_template_values()

    assert values == {
        "storage": "10Gi",
        "resources": {
            "requests": {"memory": "2Gi", "cpu": "1"},
            "limits": {"memory": "4Gi", "cpu": "2"},
        },
    }


def test_custom_catalog_path(tmp_path):
    path = tmp_path / "tiers.json"
    path.write_text(
        json.dumps(
            {
                "tiers": {
                    "tiny": {
                        "storage": "512Mi",
                        "memory_request": "256Mi",
                        "memory_limit": "512Mi",
                        "cpu_request": "100m",
                        "cpu_limit": "250m",
                    }
                }
            }
        )
    )

    catalog = TierCatalog(path)

    assert catalog.tier_names() == ["tiny"]
    assert catalog.get_tier("tiny").cpu_limit == "250m"


def test_missing_catalog_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        TierCatalog(tmp_path / "missing.json")
