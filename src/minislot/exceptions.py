"""Error taxonomy for the deployment pipeline.

Every error carries the pipeline stage it was raised from so that the API
layer can tell the caller where a deployment stopped.
"""


class MinislotError(Exception):
    """Base class for deployment pipeline errors."""

    stage = "deployment"

    def __init__(self, message: str, stage: str | None = None):
        super().__init__(message)
        self.message = message
        if stage is not None:
            self.stage = stage

    def describe(self) -> str:
        """Human-readable message prefixed with the failed stage."""
        return f"{self.stage} failed: {self.message}"


class ValidationError(MinislotError):
    """Raised when a deployment request is malformed or names an unknown tier."""

    stage = "validation"


class TemplateError(MinislotError):
    """Raised when the manifest template cannot be loaded or rendered."""

    stage = "render"


class DecodeError(MinislotError):
    """Raised when the rendered manifest is not valid structured data."""

    stage = "decode"


class UnsupportedKindError(MinislotError):
    """Raised when a decoded resource has no matching create operation."""

    stage = "submission"

    def __init__(self, kind: str, api_version: str, name: str):
        super().__init__(f"unsupported resource kind {api_version}/{kind} ({name})")
        self.kind = kind
        self.api_version = api_version
        self.name = name


class SubmissionError(MinislotError):
    """Raised when the control plane rejects a create call."""

    stage = "submission"

    def __init__(self, message: str, kind: str, name: str, reason: str | None = None):
        super().__init__(message)
        self.kind = kind
        self.name = name
        self.reason = reason
