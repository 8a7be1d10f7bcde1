"""Resource tier and manifest resource schemas."""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ResourceTier(BaseModel):
    """Named bundle of Kubernetes quantities for a dev node."""

    model_config = ConfigDict(frozen=True)

    name: str
    description: str = ""
    storage: str = Field(..., description="PVC storage request (e.g. '10Gi')")
    memory_request: str
    memory_limit: str
    cpu_request: str
    cpu_limit: str

    def to_template_values(self) -> dict[str, Any]:
        """Quantities under the names the manifest template references."""
        return {
            "storage": self.storage,
            "resources": {
                "requests": {"memory": self.memory_request, "cpu": self.cpu_request},
                "limits": {"memory": self.memory_limit, "cpu": self.cpu_limit},
            },
        }


class ResourceKind(str, Enum):
    """Resource kinds the submitter knows how to create."""

    PERSISTENT_VOLUME_CLAIM = "PersistentVolumeClaim"
    DEPLOYMENT = "Deployment"
    SERVICE = "Service"


# (apiVersion, kind) pairs recognised by the decoder
RESOURCE_SCHEME: dict[tuple[str, str], ResourceKind] = {
    ("v1", "PersistentVolumeClaim"): ResourceKind.PERSISTENT_VOLUME_CLAIM,
    ("apps/v1", "Deployment"): ResourceKind.DEPLOYMENT,
    ("v1", "Service"): ResourceKind.SERVICE,
}


class ManifestResource(BaseModel):
    """One decoded manifest document."""

    model_config = ConfigDict(frozen=True)

    kind: str
    api_version: str
    name: str
    body: dict[str, Any]

    @property
    def resource_kind(self) -> ResourceKind | None:
        """Typed kind, or None when the document is outside the scheme."""
        return RESOURCE_SCHEME.get((self.api_version, self.kind))
