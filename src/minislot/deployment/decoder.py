"""Decode rendered multi-document YAML into typed manifest resources."""

import logging
from collections.abc import Iterator

import yaml

from ..exceptions import DecodeError
from ..shared.schemas import ManifestResource
from ..shared.schemas.resources import RESOURCE_SCHEME
from .validator import ManifestValidator

logger = logging.getLogger(__name__)


class ManifestDecoder:
    """Split a rendered manifest into resources, preserving document order."""

    def __init__(self, validator: ManifestValidator | None = None):
        self.validator = validator or ManifestValidator()

    def iter_documents(self, text: str) -> Iterator[tuple[int, object]]:
        """
        Lazily parse YAML documents, skipping empty ones.

        Args:
            text: Rendered multi-document YAML

        Yields:
            (document index, parsed document) in source order

        Raises:
            DecodeError: On the first document that is not valid YAML
        """
        index = 0
        try:
            for document in yaml.safe_load_all(text):
                if document is None:
                    # Blank document, e.g. a trailing "---"
                    continue
                yield index, document
                index += 1
        except yaml.YAMLError as e:
            raise DecodeError(f"Invalid YAML after document {index}: {e}") from e

    def decode(self, text: str) -> list[ManifestResource]:
        """
        Decode a rendered manifest.

        Documents whose apiVersion/kind pair is outside the typed scheme are
        kept with no resource_kind; the submitter decides what to do with them.

        Args:
            text: Rendered multi-document YAML

        Returns:
            Resources in the order they appear in the text

        Raises:
            DecodeError: If any document is malformed; no partial result is returned
        """
        resources = []
        for index, document in self.iter_documents(text):
            if isinstance(document, dict):
                api_version = document.get("apiVersion")
                kind = document.get("kind")
                if not isinstance(api_version, str) or not isinstance(kind, str):
                    raise DecodeError(
                        f"Document {index} has a missing or non-string apiVersion/kind"
                    )
                resource_kind = RESOURCE_SCHEME.get((api_version, kind))
            else:
                resource_kind = None

            self.validator.validate_document(document, index, resource_kind)

            resource = ManifestResource(
                kind=document["kind"],
                api_version=document["apiVersion"],
                name=str(document["metadata"]["name"]),
                body=document,
            )
            if resource.resource_kind is None:
                logger.warning(
                    f"Document {index} has kind {resource.api_version}/{resource.kind} "
                    f"outside the supported scheme"
                )
            resources.append(resource)

        logger.info(
            f"Decoded {len(resources)} resource(s): "
            f"{', '.join(f'{r.kind}/{r.name}' for r in resources)}"
        )
        return resources
