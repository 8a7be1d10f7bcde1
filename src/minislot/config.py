"""Process configuration loaded from the environment."""

import os
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

PACKAGE_DIR = Path(__file__).parent
DEFAULT_TEMPLATE_PATH = PACKAGE_DIR / "deployment" / "templates" / "katana.yaml.j2"
DEFAULT_TIERS_PATH = PACKAGE_DIR / "data" / "tiers.json"


class Settings(BaseModel):
    """Immutable server settings, built once at startup."""

    model_config = ConfigDict(frozen=True)

    host: str = "0.0.0.0"
    port: int = 8080
    template_path: Path = DEFAULT_TEMPLATE_PATH
    tiers_path: Path = DEFAULT_TIERS_PATH
    default_namespace: str = "default"
    request_timeout: float = Field(30.0, gt=0, description="Deadline (s) for each create call")
    kube_context: str | None = None
    debug: bool = False
    log_file: str | None = None

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> "Settings":
        """
        Build settings from environment variables.

        Args:
            environ: Mapping to read from (defaults to os.environ)

        Returns:
            Settings instance

        Raises:
            ValueError: If a numeric variable cannot be parsed
        """
        env = os.environ if environ is None else environ

        port = env.get("PORT") or "8080"
        timeout = env.get("MINISLOT_REQUEST_TIMEOUT") or "30"
        try:
            port_value = int(port)
            timeout_value = float(timeout)
        except ValueError as e:
            raise ValueError(f"Invalid numeric setting: {e}") from e

        return cls(
            host=env.get("MINISLOT_HOST", "0.0.0.0"),
            port=port_value,
            template_path=Path(env.get("MINISLOT_TEMPLATE_PATH") or DEFAULT_TEMPLATE_PATH),
            tiers_path=Path(env.get("MINISLOT_TIERS_PATH") or DEFAULT_TIERS_PATH),
            default_namespace=env.get("MINISLOT_DEFAULT_NAMESPACE") or "default",
            request_timeout=timeout_value,
            kube_context=env.get("MINISLOT_KUBE_CONTEXT") or None,
            debug=env.get("MINISLOT_DEBUG", "false").lower() == "true",
            log_file=env.get("MINISLOT_LOG_FILE") or None,
        )
