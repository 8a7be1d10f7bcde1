"""Shared dependencies for API routes.

This module provides singleton instances and dependency injection
for the API routes. All shared state is initialized here: the tier
catalog and parsed template are loaded once at startup and only read
afterwards. The cluster client is created the first time a request
reaches submission, so requests rejected earlier never need a cluster.
"""

import logging
import threading
from typing import Callable

from fastapi import Depends

from ..config import Settings
from ..deployment.cluster import KubernetesClusterManager, KubernetesDeploymentError
from ..deployment.decoder import ManifestDecoder
from ..deployment.generator import ManifestRenderer
from ..deployment.submitter import ResourceSubmitter
from ..knowledge_base.tiers import TierCatalog
from ..orchestration.workflow import DeploymentWorkflow

logger = logging.getLogger(__name__)

# Singleton instances
_settings: Settings | None = None
_tier_catalog: TierCatalog | None = None
_manifest_renderer: ManifestRenderer | None = None
_manifest_decoder: ManifestDecoder | None = None
_cluster_manager: KubernetesClusterManager | None = None
_cluster_lock = threading.Lock()


def init_dependencies(settings: Settings) -> None:
    """
    Load startup-time state.

    Args:
        settings: Server settings

    Raises:
        TemplateError: If the manifest template cannot be loaded
    """
    global _settings, _tier_catalog, _manifest_renderer, _manifest_decoder, _cluster_manager
    _settings = settings
    _tier_catalog = TierCatalog(settings.tiers_path)
    _manifest_renderer = ManifestRenderer(settings.template_path)
    _manifest_decoder = ManifestDecoder()
    _cluster_manager = None


def get_settings() -> Settings:
    """Get the server settings singleton."""
    global _settings
    if _settings is None:
        _settings = Settings.from_env()
    return _settings


def get_tier_catalog() -> TierCatalog:
    """Get the tier catalog singleton."""
    global _tier_catalog
    if _tier_catalog is None:
        _tier_catalog = TierCatalog(get_settings().tiers_path)
    return _tier_catalog


def get_manifest_renderer() -> ManifestRenderer:
    """Get the manifest renderer singleton."""
    global _manifest_renderer
    if _manifest_renderer is None:
        _manifest_renderer = ManifestRenderer(get_settings().template_path)
    return _manifest_renderer


def get_manifest_decoder() -> ManifestDecoder:
    """Get the manifest decoder singleton."""
    global _manifest_decoder
    if _manifest_decoder is None:
        _manifest_decoder = ManifestDecoder()
    return _manifest_decoder


def get_cluster_manager() -> KubernetesClusterManager:
    """
    Get or create the cluster manager.

    Raises:
        KubernetesDeploymentError: If no cluster configuration can be loaded
    """
    global _cluster_manager
    with _cluster_lock:
        if _cluster_manager is None:
            settings = get_settings()
            try:
                _cluster_manager = KubernetesClusterManager(
                    request_timeout=settings.request_timeout,
                    context=settings.kube_context,
                )
                logger.info("Kubernetes cluster manager initialized successfully")
            except KubernetesDeploymentError as e:
                logger.warning(f"Kubernetes cluster not accessible: {e}")
                raise
    return _cluster_manager


def get_cluster_provider() -> Callable[[], KubernetesClusterManager]:
    """Provide the cluster manager lazily; it is only built once a request reaches submission."""
    return get_cluster_manager


def get_deployment_workflow(
    settings: Settings = Depends(get_settings),
    tier_catalog: TierCatalog = Depends(get_tier_catalog),
    renderer: ManifestRenderer = Depends(get_manifest_renderer),
    decoder: ManifestDecoder = Depends(get_manifest_decoder),
    cluster_provider: Callable[[], KubernetesClusterManager] = Depends(get_cluster_provider),
) -> DeploymentWorkflow:
    """Build the per-request workflow from the shared singletons."""
    return DeploymentWorkflow(
        tier_catalog=tier_catalog,
        renderer=renderer,
        decoder=decoder,
        default_namespace=settings.default_namespace,
        submitter_factory=lambda: ResourceSubmitter(cluster_provider()),
    )
