"""Deployment request/response schemas and pipeline stages."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class DeploymentRequest(BaseModel):
    """Request to deploy a Katana dev node.

    Field aliases are the JSON wire names; the manifest template is rendered
    against the same names.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., min_length=1, description="Deployment identifier, used in resource names")
    namespace: str | None = Field(None, description="Target namespace (server default if omitted)")
    version: str = Field("latest", description="Katana image tag")
    seed: int = 0
    chain_id: int = Field(1, alias="chainId")
    block_time: int = Field(0, alias="blockTime")
    tier: str = Field("free", description="Resource tier name")
    storage_class: str = Field("standard", alias="storageClass")


class DeploymentStage(str, Enum):
    """Stages a deployment request moves through, in order."""

    RECEIVED = "received"
    VALIDATED = "validated"
    RENDERED = "rendered"
    DECODED = "decoded"
    SUBMITTING = "submitting"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


class CreatedResource(BaseModel):
    """Identity of a resource the control plane accepted."""

    kind: str
    name: str
    namespace: str
    uid: str | None = None


class DeploymentOutcome(BaseModel):
    """Result of a successful pass through the pipeline."""

    deployment_id: str
    namespace: str
    stage: DeploymentStage
    resources: list[CreatedResource] = Field(default_factory=list)


class DeploymentResponse(BaseModel):
    """Response body for a created deployment."""

    message: str
    deployment_id: str
    namespace: str
    resources: list[CreatedResource]


class ErrorResponse(BaseModel):
    """Error body returned for every failed request."""

    error: str
