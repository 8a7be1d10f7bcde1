"""Manifest rendering for Katana dev-node deployments.

This module turns a deployment request and its resolved resource tier into
multi-document Kubernetes YAML using a Jinja2 template. Rendering is pure
text substitution: the output is not validated here.
"""

import logging
from pathlib import Path
from typing import Any

from jinja2 import (
    Environment,
    FileSystemLoader,
    StrictUndefined,
    TemplateError as JinjaTemplateError,
    TemplateNotFound,
    TemplateSyntaxError,
)

from ..config import DEFAULT_TEMPLATE_PATH
from ..exceptions import TemplateError
from ..shared.schemas import DeploymentRequest, ResourceTier

logger = logging.getLogger(__name__)


class ManifestRenderer:
    """Render deployment manifests from a template parsed once at startup."""

    def __init__(self, template_path: str | Path | None = None):
        """
        Load and parse the manifest template.

        Args:
            template_path: Path to the Jinja2 template (default: bundled katana template)

        Raises:
            TemplateError: If the template is missing or malformed
        """
        self.template_path = Path(template_path) if template_path else DEFAULT_TEMPLATE_PATH

        self.env = Environment(
            loader=FileSystemLoader(str(self.template_path.parent)),
            undefined=StrictUndefined,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )

        try:
            self.template = self.env.get_template(self.template_path.name)
        except TemplateNotFound as e:
            raise TemplateError(f"Template file not found: {self.template_path}") from e
        except TemplateSyntaxError as e:
            raise TemplateError(
                f"Malformed template {self.template_path} (line {e.lineno}): {e.message}"
            ) from e

        logger.info(f"ManifestRenderer loaded template: {self.template_path}")

    def build_context(
        self, request: DeploymentRequest, tier: ResourceTier, namespace: str | None = None
    ) -> dict[str, Any]:
        """
        Prepare the template context.

        Request fields appear under their JSON names (id, chainId, blockTime,
        storageClass, ...) next to the tier quantities (storage, resources).

        Args:
            request: Deployment request
            tier: Resolved resource tier
            namespace: Effective namespace, overriding the request's own

        Returns:
            Context dictionary with all template variables
        """
        context = request.model_dump(by_alias=True)
        if namespace is not None:
            context["namespace"] = namespace
        context.update(tier.to_template_values())
        return context

    def render(
        self, request: DeploymentRequest, tier: ResourceTier, namespace: str | None = None
    ) -> str:
        """
        Render the manifest for a request.

        Args:
            request: Deployment request
            tier: Resolved resource tier
            namespace: Effective namespace, overriding the request's own

        Returns:
            Multi-document YAML text

        Raises:
            TemplateError: If the template references a field that cannot be resolved
        """
        context = self.build_context(request, tier, namespace)
        try:
            rendered = self.template.render(**context)
        except JinjaTemplateError as e:
            raise TemplateError(f"Failed to render {self.template_path.name}: {e}") from e

        logger.debug(f"Rendered manifest for {request.id}:\n{rendered}")
        return rendered
