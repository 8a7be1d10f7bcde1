"""Deployment pipeline: manifest rendering, decoding and submission to Kubernetes."""

from .cluster import KubernetesClusterManager, KubernetesDeploymentError
from .decoder import ManifestDecoder
from .generator import ManifestRenderer
from .submitter import ResourceOutcome, ResourceSubmitter, SubmissionResult
from .validator import ManifestValidator

__all__ = [
    "ManifestRenderer",
    "ManifestDecoder",
    "ManifestValidator",
    "ResourceSubmitter",
    "ResourceOutcome",
    "SubmissionResult",
    "KubernetesClusterManager",
    "KubernetesDeploymentError",
]
