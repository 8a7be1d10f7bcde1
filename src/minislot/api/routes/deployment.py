"""Deployment endpoint."""

import logging

from fastapi import APIRouter, Depends, HTTPException

from ...deployment.cluster import KubernetesDeploymentError
from ...exceptions import MinislotError, ValidationError
from ...orchestration.workflow import DeploymentWorkflow
from ...shared.schemas import DeploymentRequest, DeploymentResponse, ErrorResponse
from ..dependencies import get_deployment_workflow

logger = logging.getLogger(__name__)

router = APIRouter(tags=["deployment"])


@router.post(
    "/deploy",
    status_code=201,
    response_model=DeploymentResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def create_deployment(
    request: DeploymentRequest,
    workflow: DeploymentWorkflow = Depends(get_deployment_workflow),
):
    """
    Render the Katana manifest for a request and create its resources.

    Runs in the server's worker thread pool; create calls block.

    Args:
        request: Deployment request

    Returns:
        Deployment response listing the created resources

    Raises:
        HTTPException: 400 for an unknown tier, 500 for render, decode or submission
            failures, 503 when the cluster client cannot be configured
    """
    try:
        outcome = workflow.deploy(request)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=e.describe()) from e
    except MinislotError as e:
        raise HTTPException(status_code=500, detail=e.describe()) from e
    except KubernetesDeploymentError as e:
        raise HTTPException(
            status_code=503, detail=f"Kubernetes cluster not accessible: {str(e)}"
        ) from e
    except Exception as e:
        logger.error(f"Unexpected failure deploying {request.id}: {e}", exc_info=True)
        raise HTTPException(
            status_code=500, detail=f"Failed to create deployment: {str(e)}"
        ) from e

    return DeploymentResponse(
        message="Deployment created successfully",
        deployment_id=outcome.deployment_id,
        namespace=outcome.namespace,
        resources=outcome.resources,
    )
