"""Workflow orchestration for the deploy request."""

from .workflow import DeploymentWorkflow

__all__ = ["DeploymentWorkflow"]
