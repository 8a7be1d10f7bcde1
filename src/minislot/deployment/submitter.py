"""Ordered, fail-fast submission of decoded resources to the control plane.

Resources are created strictly in decode order, one call at a time, because
later documents depend on earlier ones (the Deployment mounts the claim).
The first failure stops the submission. Resources created before it are
left in place; nothing is rolled back or retried.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Callable

from ..exceptions import MinislotError, SubmissionError, UnsupportedKindError
from ..shared.schemas import CreatedResource, ManifestResource, ResourceKind
from .cluster import KubernetesDeploymentError

logger = logging.getLogger(__name__)

CREATED = "created"
FAILED = "failed"


@dataclass
class ResourceOutcome:
    """Outcome of submitting one resource."""

    kind: str
    name: str
    status: str
    created: CreatedResource | None = None
    error: MinislotError | None = None


@dataclass
class SubmissionResult:
    """Per-resource outcomes of one submission, in submission order."""

    namespace: str
    outcomes: list[ResourceOutcome] = field(default_factory=list)

    @property
    def success(self) -> bool:
        return all(outcome.status == CREATED for outcome in self.outcomes)

    @property
    def created(self) -> list[CreatedResource]:
        return [o.created for o in self.outcomes if o.status == CREATED and o.created]

    @property
    def failure(self) -> ResourceOutcome | None:
        return next((o for o in self.outcomes if o.status == FAILED), None)

    def raise_for_failure(self) -> None:
        """Raise the error of the failed resource, if any."""
        failure = self.failure
        if failure is not None and failure.error is not None:
            raise failure.error


class ResourceSubmitter:
    """Create decoded resources through a control-plane client."""

    def __init__(self, cluster_client: Any):
        """
        Initialize the submitter.

        Args:
            cluster_client: Object exposing create_persistent_volume_claim,
                create_deployment and create_service, each taking
                (namespace, body) and returning a CreatedResource
        """
        self.cluster_client = cluster_client
        self._handlers: dict[ResourceKind, Callable[[str, dict], CreatedResource]] = {
            ResourceKind.PERSISTENT_VOLUME_CLAIM: cluster_client.create_persistent_volume_claim,
            ResourceKind.DEPLOYMENT: cluster_client.create_deployment,
            ResourceKind.SERVICE: cluster_client.create_service,
        }
        unhandled = set(ResourceKind) - set(self._handlers)
        if unhandled:
            raise ValueError(f"No create handler for kinds: {sorted(k.value for k in unhandled)}")

    def submit(self, namespace: str, resources: list[ManifestResource]) -> SubmissionResult:
        """
        Create every resource in order, stopping at the first failure.

        Args:
            namespace: Namespace every resource is created in
            resources: Decoded resources, in decode order

        Returns:
            SubmissionResult; at most one outcome is failed and it is always the last
        """
        result = SubmissionResult(namespace=namespace)

        for position, resource in enumerate(resources, start=1):
            outcome = self._submit_one(namespace, resource)
            result.outcomes.append(outcome)

            if outcome.status == FAILED:
                logger.error(
                    f"Submission aborted at resource {position}/{len(resources)} "
                    f"({resource.kind}/{resource.name}); "
                    f"{len(result.created)} resource(s) already created are left in place"
                )
                return result

        logger.info(f"Submitted {len(resources)} resource(s) to namespace {namespace}")
        return result

    def _submit_one(self, namespace: str, resource: ManifestResource) -> ResourceOutcome:
        resource_kind = resource.resource_kind
        if resource_kind is None:
            return ResourceOutcome(
                kind=resource.kind,
                name=resource.name,
                status=FAILED,
                error=UnsupportedKindError(resource.kind, resource.api_version, resource.name),
            )

        create = self._handlers[resource_kind]
        try:
            created = create(namespace, resource.body)
        except KubernetesDeploymentError as e:
            return ResourceOutcome(
                kind=resource.kind,
                name=resource.name,
                status=FAILED,
                error=SubmissionError(
                    f"Error creating {resource.kind} {resource.name}: {e}",
                    kind=resource.kind,
                    name=resource.name,
                    reason=e.reason,
                ),
            )

        return ResourceOutcome(
            kind=resource.kind, name=resource.name, status=CREATED, created=created
        )
