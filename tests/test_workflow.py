"""Tests for the deployment workflow composition."""

from unittest.mock import MagicMock

import pytest

from minislot.deployment.submitter import ResourceSubmitter
from minislot.exceptions import DecodeError, SubmissionError, ValidationError
from minislot.orchestration.workflow import DeploymentWorkflow
from minislot.shared.schemas import DeploymentRequest, DeploymentStage


@pytest.fixture
def workflow(tier_catalog, renderer, fake_cluster):
    return DeploymentWorkflow(
        tier_catalog=tier_catalog,
        renderer=renderer,
        submitter=ResourceSubmitter(fake_cluster),
        default_namespace="katana-default",
    )


def test_deploy_succeeds(workflow, fake_cluster, sample_request):
    outcome = workflow.deploy(sample_request)

    assert outcome.stage == DeploymentStage.SUCCEEDED
    assert outcome.deployment_id == "test-001"
    assert outcome.namespace == "my-namespace"
    assert [(r.kind, r.name) for r in outcome.resources] == [
        ("PersistentVolumeClaim", "katana-data-test-001"),
        ("Deployment", "katana-test-001"),
        ("Service", "katana-test-001"),
    ]
    assert len(fake_cluster.calls) == 3


def test_unknown_tier_never_renders(tier_catalog, fake_cluster, sample_request):
    renderer = MagicMock()
    workflow = DeploymentWorkflow(
        tier_catalog=tier_catalog,
        renderer=renderer,
        submitter=ResourceSubmitter(fake_cluster),
    )

    with pytest.raises(ValidationError, match="invalid tier: gold"):
        workflow.deploy(sample_request.model_copy(update={"tier": "gold"}))

    renderer.render.assert_not_called()
    assert fake_cluster.calls == []


def test_default_namespace_is_applied(workflow, fake_cluster):
    request = DeploymentRequest(id="abc")

    outcome = workflow.deploy(request)

    assert outcome.namespace == "katana-default"
    assert {namespace for _, namespace, _ in fake_cluster.calls} == {"katana-default"}
    assert {body["metadata"]["namespace"] for _, _, body in fake_cluster.calls} == {
        "katana-default"
    }


def test_decode_failure_submits_nothing(tier_catalog, fake_cluster, sample_request):
    renderer = MagicMock()
    renderer.render.return_value = "kind: [broken\n"
    workflow = DeploymentWorkflow(
        tier_catalog=tier_catalog,
        renderer=renderer,
        submitter=ResourceSubmitter(fake_cluster),
    )

    with pytest.raises(DecodeError):
        workflow.deploy(sample_request)

    assert fake_cluster.calls == []


def test_submission_failure_propagates(workflow, fake_cluster, sample_request):
    fake_cluster.fail_on_call = 3

    with pytest.raises(SubmissionError) as excinfo:
        workflow.deploy(sample_request)

    assert excinfo.value.describe().startswith("submission failed: ")
    assert len(fake_cluster.calls) == 3


def test_submitter_factory_runs_only_at_submission(
    tier_catalog, renderer, fake_cluster, sample_request
):
    factory = MagicMock(return_value=ResourceSubmitter(fake_cluster))
    workflow = DeploymentWorkflow(
        tier_catalog=tier_catalog, renderer=renderer, submitter_factory=factory
    )

    with pytest.raises(ValidationError):
        workflow.deploy(sample_request.model_copy(update={"tier": "gold"}))
    factory.assert_not_called()

    workflow.deploy(sample_request)
    workflow.deploy(sample_request.model_copy(update={"id": "test-002"}))
    factory.assert_called_once_with()
    assert len(fake_cluster.calls) == 6


def test_workflow_requires_a_submitter(tier_catalog, renderer):
    with pytest.raises(ValueError, match="submitter"):
        DeploymentWorkflow(tier_catalog=tier_catalog, renderer=renderer)
