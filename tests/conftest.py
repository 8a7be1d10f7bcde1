"""Shared fixtures for minislot tests."""

import pytest
from fastapi.testclient import TestClient

from minislot.api.app import create_app
from minislot.api.dependencies import get_cluster_provider
from minislot.config import Settings
from minislot.deployment.cluster import ALREADY_EXISTS, KubernetesDeploymentError
from minislot.deployment.generator import ManifestRenderer
from minislot.knowledge_base.tiers import TierCatalog
from minislot.shared.schemas import CreatedResource, DeploymentRequest


class FakeClusterClient:
    """In-memory control-plane client recording every create call."""

    def __init__(self, fail_on_call: int | None = None, reason: str = ALREADY_EXISTS):
        self.calls: list[tuple[str, str, dict]] = []
        self.fail_on_call = fail_on_call
        self.reason = reason

    def _create(self, kind: str, namespace: str, body: dict) -> CreatedResource:
        self.calls.append((kind, namespace, body))
        name = body["metadata"]["name"]
        if self.fail_on_call is not None and len(self.calls) == self.fail_on_call:
            raise KubernetesDeploymentError(
                f"{kind} {name} already exists", reason=self.reason, status=409
            )
        return CreatedResource(
            kind=kind, name=name, namespace=namespace, uid=f"uid-{len(self.calls)}"
        )

    def create_persistent_volume_claim(self, namespace, body):
        return self._create("PersistentVolumeClaim", namespace, body)

    def create_deployment(self, namespace, body):
        return self._create("Deployment", namespace, body)

    def create_service(self, namespace, body):
        return self._create("Service", namespace, body)

    @property
    def kinds(self) -> list[str]:
        return [kind for kind, _, _ in self.calls]


@pytest.fixture
def tier_catalog():
    return TierCatalog()


@pytest.fixture
def renderer():
    return ManifestRenderer()


@pytest.fixture
def fake_cluster():
    return FakeClusterClient()


@pytest.fixture
def sample_request():
    """The request from the end-to-end scenario."""
    return DeploymentRequest.model_validate(
        {
            "id": "test-001",
            "namespace": "my-namespace",
            "version": "latest",
            "seed": 42,
            "chainId": 1,
            "blockTime": 5,
            "tier": "free",
            "storageClass": "standard",
        }
    )


@pytest.fixture
def settings():
    return Settings(default_namespace="katana-default")


@pytest.fixture
def app(settings, fake_cluster):
    application = create_app(settings)
    application.dependency_overrides[get_cluster_provider] = lambda: lambda: fake_cluster
    return application


@pytest.fixture
def client(app):
    return TestClient(app)
