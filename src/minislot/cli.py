"""katana-cli: submit Katana deployment requests to a minislot server."""

import argparse
import logging
import sys

import requests

from .knowledge_base.tiers import TierCatalog
from .logging_config import setup_logging
from .shared.schemas import DeploymentRequest

logger = logging.getLogger(__name__)


class CLIError(Exception):
    """Raised for any failure the CLI reports to the user."""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="katana-cli",
        description="A CLI tool to interact with the Katana Deployment Server and create new deployments.",
    )
    parser.add_argument("--server", default="http://localhost:8080", help="Deployment server URL")
    parser.add_argument("--id", dest="deployment_id", required=True, help="Deployment ID")
    parser.add_argument("--namespace", default="default", help="Kubernetes namespace")
    parser.add_argument("--version", default="latest", help="Katana version")
    parser.add_argument("--seed", type=int, default=0, help="Seed value")
    parser.add_argument("--chain-id", type=int, default=1, help="Chain ID")
    parser.add_argument("--block-time", type=int, default=0, help="Block time")
    parser.add_argument(
        "--tier", default="free", help="Resource tier (free, professional, enterprise)"
    )
    parser.add_argument("--storage-class", default="standard", help="Storage class")
    parser.add_argument(
        "--timeout", type=float, default=30.0, help="HTTP timeout in seconds (default: 30)"
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    return parser


def build_request(args: argparse.Namespace, tier_catalog: TierCatalog) -> DeploymentRequest:
    """
    Build a deployment request from parsed flags.

    Raises:
        CLIError: If the tier is not in the catalog
    """
    if args.tier not in tier_catalog:
        raise CLIError(
            f"invalid tier: {args.tier} (expected one of: {', '.join(tier_catalog.tier_names())})"
        )

    return DeploymentRequest(
        id=args.deployment_id,
        namespace=args.namespace,
        version=args.version,
        seed=args.seed,
        chain_id=args.chain_id,
        block_time=args.block_time,
        tier=args.tier,
        storage_class=args.storage_class,
    )


def submit_deployment(server: str, request: DeploymentRequest, timeout: float = 30.0) -> dict:
    """
    POST a deployment request to the server.

    Args:
        server: Base URL of the deployment server
        request: Deployment request
        timeout: HTTP timeout in seconds

    Returns:
        Parsed JSON response body

    Raises:
        CLIError: On connection failure or any non-201 response
    """
    url = f"{server.rstrip('/')}/deploy"
    logger.debug(f"POST {url}")
    try:
        response = requests.post(
            url, json=request.model_dump(by_alias=True), timeout=timeout
        )
    except requests.RequestException as e:
        raise CLIError(f"error sending request: {e}") from e

    if response.status_code != 201:
        try:
            message = response.json().get("error") or response.text
        except ValueError:
            message = response.text
        raise CLIError(f"deployment failed ({response.status_code}): {message}")

    return response.json()


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    if args.debug:
        setup_logging(debug=True, banner=False)

    try:
        request = build_request(args, TierCatalog())
        result = submit_deployment(args.server, request, timeout=args.timeout)
    except CLIError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print("Deployment created successfully")
    for resource in result.get("resources", []):
        print(f"  {resource['kind']}/{resource['name']} in {resource['namespace']}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
