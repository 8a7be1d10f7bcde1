"""Shared Pydantic schemas for minislot.

This module provides all data schemas used across the application,
organized by domain:
- deployment: request/response wire models and pipeline stages
- resources: tiers and decoded manifest resources
"""

from .deployment import (
    CreatedResource,
    DeploymentOutcome,
    DeploymentRequest,
    DeploymentResponse,
    DeploymentStage,
    ErrorResponse,
)
from .resources import ManifestResource, ResourceKind, ResourceTier

__all__ = [
    # Deployment schemas
    "DeploymentRequest",
    "DeploymentResponse",
    "DeploymentStage",
    "DeploymentOutcome",
    "CreatedResource",
    "ErrorResponse",
    # Resource schemas
    "ResourceTier",
    "ResourceKind",
    "ManifestResource",
]
