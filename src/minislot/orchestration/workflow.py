"""Workflow orchestration for the end-to-end deploy flow.

One request is one linear pass:
received -> validated -> rendered -> decoded -> submitting -> succeeded.
Any failing step raises and the request ends in the failed state.
"""

import logging
from typing import Callable

from ..deployment.decoder import ManifestDecoder
from ..deployment.generator import ManifestRenderer
from ..deployment.submitter import ResourceSubmitter
from ..exceptions import MinislotError, ValidationError
from ..knowledge_base.tiers import TierCatalog
from ..shared.schemas import DeploymentOutcome, DeploymentRequest, DeploymentStage

logger = logging.getLogger(__name__)


class DeploymentWorkflow:
    """Compose tier lookup, rendering, decoding and submission."""

    def __init__(
        self,
        tier_catalog: TierCatalog,
        renderer: ManifestRenderer,
        submitter: ResourceSubmitter | None = None,
        decoder: ManifestDecoder | None = None,
        default_namespace: str = "default",
        submitter_factory: Callable[[], ResourceSubmitter] | None = None,
    ):
        """
        Initialize the workflow.

        Args:
            tier_catalog: Read-only tier catalog
            renderer: Renderer holding the parsed template
            submitter: Submitter bound to the control-plane client
            decoder: Manifest decoder (creates default if not provided)
            default_namespace: Namespace used when a request names none
            submitter_factory: Builds the submitter when a request first
                reaches the submitting stage

        Raises:
            ValueError: If neither submitter nor submitter_factory is given
        """
        if submitter is None and submitter_factory is None:
            raise ValueError("DeploymentWorkflow needs a submitter or a submitter_factory")
        self.tier_catalog = tier_catalog
        self.renderer = renderer
        self.submitter = submitter
        self.submitter_factory = submitter_factory
        self.decoder = decoder or ManifestDecoder()
        self.default_namespace = default_namespace

    def deploy(self, request: DeploymentRequest) -> DeploymentOutcome:
        """
        Deploy one request.

        Args:
            request: Parsed deployment request

        Returns:
            DeploymentOutcome in the succeeded stage

        Raises:
            ValidationError: Unknown tier (nothing is rendered)
            TemplateError: Template could not be rendered
            DecodeError: Rendered manifest is malformed (nothing is submitted)
            UnsupportedKindError: A resource has no create operation
            SubmissionError: The control plane rejected a create call
            KubernetesDeploymentError: The control-plane client could not be created
        """
        stage = DeploymentStage.RECEIVED
        namespace = request.namespace or self.default_namespace
        logger.info(
            f"Deployment {request.id} {stage.value}: namespace={namespace}, "
            f"tier={request.tier}, version={request.version}"
        )

        try:
            tier, found = self.tier_catalog.lookup(request.tier)
            if not found:
                raise ValidationError(
                    f"invalid tier: {request.tier} "
                    f"(expected one of: {', '.join(self.tier_catalog.tier_names())})"
                )
            stage = self._advance(request, DeploymentStage.VALIDATED)

            manifest = self.renderer.render(request, tier, namespace=namespace)
            stage = self._advance(request, DeploymentStage.RENDERED)

            resources = self.decoder.decode(manifest)
            stage = self._advance(request, DeploymentStage.DECODED)

            stage = self._advance(request, DeploymentStage.SUBMITTING)
            result = self._get_submitter().submit(namespace, resources)
            result.raise_for_failure()

        except MinislotError as e:
            logger.error(
                f"Deployment {request.id} {DeploymentStage.FAILED.value} "
                f"after stage {stage.value}: {e.describe()}"
            )
            raise

        stage = self._advance(request, DeploymentStage.SUCCEEDED)
        return DeploymentOutcome(
            deployment_id=request.id,
            namespace=namespace,
            stage=stage,
            resources=result.created,
        )

    def _get_submitter(self) -> ResourceSubmitter:
        if self.submitter is None:
            self.submitter = self.submitter_factory()
        return self.submitter

    @staticmethod
    def _advance(request: DeploymentRequest, stage: DeploymentStage) -> DeploymentStage:
        logger.info(f"Deployment {request.id} {stage.value}")
        return stage
