"""Kubernetes Cluster Management for Deployments.

This module wraps the Kubernetes Python client behind the three create
operations the submitter needs. Each call either returns the identity the
API server assigned or raises KubernetesDeploymentError with a reason.
"""

import logging
from typing import Any

from kubernetes import client, config
from kubernetes.client.rest import ApiException
from kubernetes.config.config_exception import ConfigException
from urllib3.exceptions import HTTPError

from ..shared.schemas import CreatedResource

logger = logging.getLogger(__name__)

ALREADY_EXISTS = "already_exists"
INVALID = "invalid"
NOT_FOUND = "not_found"
TRANSIENT = "transient"


class KubernetesDeploymentError(Exception):
    """Raised when the cluster rejects or fails a request."""

    def __init__(self, message: str, reason: str = TRANSIENT, status: int | None = None):
        super().__init__(message)
        self.reason = reason
        self.status = status


def classify_api_exception(e: ApiException) -> str:
    """Map an API server status code to a failure reason."""
    if e.status == 409:
        return ALREADY_EXISTS
    if e.status == 404:
        return NOT_FOUND
    if e.status in (400, 422):
        return INVALID
    return TRANSIENT


class KubernetesClusterManager:
    """Create resources in a Kubernetes cluster."""

    def __init__(
        self,
        api_client: client.ApiClient | None = None,
        request_timeout: float | None = 30.0,
        context: str | None = None,
    ):
        """
        Initialize cluster manager.

        Args:
            api_client: Preconfigured API client (loads cluster config if not provided)
            request_timeout: Deadline in seconds applied to every create call
            context: kubeconfig context to use outside a cluster

        Raises:
            KubernetesDeploymentError: If no cluster configuration can be loaded
        """
        self.api_client = api_client or self._load_api_client(context)
        self.request_timeout = request_timeout
        self.core_v1 = client.CoreV1Api(self.api_client)
        self.apps_v1 = client.AppsV1Api(self.api_client)

    @staticmethod
    def _load_api_client(context: str | None) -> client.ApiClient:
        """Load in-cluster configuration, falling back to kubeconfig."""
        try:
            config.load_incluster_config()
            logger.info("Loaded in-cluster Kubernetes configuration")
        except ConfigException:
            try:
                config.load_kube_config(context=context)
                logger.info(f"Loaded kubeconfig (context: {context or 'current'})")
            except (ConfigException, FileNotFoundError) as e:
                raise KubernetesDeploymentError(
                    f"Cannot load Kubernetes configuration: {e}", reason=TRANSIENT
                ) from e
        return client.ApiClient()

    def _create(self, kind: str, create_call, namespace: str, body: dict[str, Any]) -> CreatedResource:
        name = body.get("metadata", {}).get("name", "<unnamed>")
        try:
            created = create_call(
                namespace=namespace, body=body, _request_timeout=self.request_timeout
            )
        except ApiException as e:
            reason = classify_api_exception(e)
            raise KubernetesDeploymentError(
                f"Failed to create {kind} {name} in {namespace}: {e.status} {e.reason}",
                reason=reason,
                status=e.status,
            ) from e
        except HTTPError as e:
            raise KubernetesDeploymentError(
                f"Failed to create {kind} {name} in {namespace}: {e}", reason=TRANSIENT
            ) from e

        metadata = getattr(created, "metadata", None)
        uid = getattr(metadata, "uid", None)
        logger.info(f"Created {kind} {namespace}/{name} (uid={uid})")
        return CreatedResource(kind=kind, name=name, namespace=namespace, uid=uid)

    def create_persistent_volume_claim(self, namespace: str, body: dict[str, Any]) -> CreatedResource:
        """Create a PersistentVolumeClaim."""
        return self._create(
            "PersistentVolumeClaim",
            self.core_v1.create_namespaced_persistent_volume_claim,
            namespace,
            body,
        )

    def create_deployment(self, namespace: str, body: dict[str, Any]) -> CreatedResource:
        """Create an apps/v1 Deployment."""
        return self._create(
            "Deployment", self.apps_v1.create_namespaced_deployment, namespace, body
        )

    def create_service(self, namespace: str, body: dict[str, Any]) -> CreatedResource:
        """Create a Service."""
        return self._create("Service", self.core_v1.create_namespaced_service, namespace, body)
