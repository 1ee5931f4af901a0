"""Deployment file parsers for safe-supported-networks."""

import json
from pathlib import Path
from typing import Any, Dict, List, Tuple, Union

from .exceptions import DeploymentFileError


def parse_deployment_path(relative_path: str) -> Tuple[str, str]:
    """
    Split a deployment file path into version and contract name.

    Args:
        relative_path: Path relative to the assets root, e.g. "v1.3.0/Safe.json"

    Returns:
        Tuple of (version, contract_name), e.g. ("v1.3.0", "Safe")

    Raises:
        DeploymentFileError: If the path has no version segment
    """
    segments = relative_path.split("/")
    if len(segments) < 2:
        raise DeploymentFileError(
            f"Expected <version>/<contract>.json, got: {relative_path}"
        )

    version = segments[0]
    # Everything after the first dot is extension
    name = segments[1].split(".")[0]

    return version, name


def parse_network_addresses(file_path: Union[Path, str]) -> Dict[str, List[str]]:
    """
    Parse the per-chain address map of a deployment file.

    Older files map a chain ID straight to an address. Newer files map it to
    one or more deployment types (e.g. "canonical", "eip155") which are keys
    of the file's deployments map; those are resolved to their address.
    Values that name no deployment type are taken as addresses. Every chain
    gets a list, in the file's key order.

    Args:
        file_path: Path to deployment JSON file

    Returns:
        Dictionary mapping chain ID string -> addresses

    Raises:
        DeploymentFileError: If networkAddresses is missing
    """
    with open(file_path, encoding="utf-8") as f:
        data = json.load(f)

    if "networkAddresses" not in data:
        raise DeploymentFileError(
            f"Missing networkAddresses in deployment file: {file_path}"
        )

    deployments: Dict[str, Any] = data.get("deployments") or {}

    result: Dict[str, List[str]] = {}
    for chain_id, value in data["networkAddresses"].items():
        entries = value if isinstance(value, list) else [value]
        result[chain_id] = [
            deployments[entry]["address"] if entry in deployments else entry
            for entry in entries
        ]

    return result
