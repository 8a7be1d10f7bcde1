"""Structural checks for decoded manifest documents."""

import logging
from typing import Any

from ..exceptions import DecodeError
from ..shared.schemas import ResourceKind

logger = logging.getLogger(__name__)


class ManifestValidator:
    """Validate that a manifest document carries the fields its kind needs."""

    # Fields every document must carry to be classified at all
    COMMON_REQUIRED_FIELDS = [
        "apiVersion",
        "kind",
        "metadata.name",
    ]

    # Required fields per typed kind
    KIND_REQUIRED_FIELDS = {
        ResourceKind.PERSISTENT_VOLUME_CLAIM: [
            "spec.accessModes",
            "spec.resources.requests.storage",
        ],
        ResourceKind.DEPLOYMENT: [
            "spec.selector",
            "spec.template.spec.containers",
        ],
        ResourceKind.SERVICE: [
            "spec.ports",
        ],
    }

    def _get_nested_field(self, data: dict[str, Any], field_path: str) -> Any | None:
        """
        Get nested field from dictionary using dot notation.

        Args:
            data: Dictionary to search
            field_path: Dot-separated field path (e.g., "metadata.name")

        Returns:
            Field value if found, None otherwise
        """
        current: Any = data
        for part in field_path.split("."):
            if isinstance(current, dict) and part in current:
                current = current[part]
            else:
                return None
        return current

    def missing_fields(self, data: dict[str, Any], required_fields: list[str]) -> list[str]:
        """Return the required field paths absent (or empty) in a document."""
        return [
            field
            for field in required_fields
            if self._get_nested_field(data, field) in (None, "", [], {})
        ]

    def validate_document(
        self, data: Any, index: int, resource_kind: ResourceKind | None = None
    ) -> None:
        """
        Validate one decoded document.

        Args:
            data: Parsed YAML document
            index: Position of the document in the manifest (for error messages)
            resource_kind: Typed kind, if the document is in the scheme

        Raises:
            DecodeError: If the document is not a mapping or misses required fields
        """
        if not isinstance(data, dict):
            raise DecodeError(
                f"Document {index} is a {type(data).__name__}, expected a mapping"
            )

        required = list(self.COMMON_REQUIRED_FIELDS)
        if resource_kind is not None:
            required.extend(self.KIND_REQUIRED_FIELDS[resource_kind])

        missing = self.missing_fields(data, required)
        if missing:
            kind = data.get("kind", "<unknown>")
            raise DecodeError(
                f"Document {index} ({kind}) is missing required fields: {', '.join(missing)}"
            )
