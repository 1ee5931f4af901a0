"""Supported networks documentation generator."""

import logging
import os
import shutil
import subprocess
from pathlib import Path
from typing import List, Optional, Sequence, Union

from .constants import (
    CHAINS_URL_ENV,
    CLONE_DIR_ENV,
    DEFAULT_CHAINS_URL,
    DEFAULT_CLONE_DIR,
    DEFAULT_OUTPUT_DIR,
    DEFAULT_REPO_URL,
    OUTPUT_DIR_ENV,
    REPO_URL_ENV,
)
from .parsers import parse_deployment_path, parse_network_addresses
from .paths import get_assets_dir, relative_asset_path, resolve_dir, walk_path
from .registry import fetch_chain_registry, find_chain
from .render import write_version_pages
from .types import ChainRegistryEntry, ContractRecord

logger = logging.getLogger(__name__)


def clone_repository(repo_url: str, clone_dir: Union[Path, str]) -> int:
    """
    Clone the deployments repository.

    A failed clone is logged but not raised; the missing assets directory
    surfaces at the tree walk instead.

    Args:
        repo_url: Git repository URL
        clone_dir: Target directory for the clone

    Returns:
        git exit status
    """
    logger.info("Cloning %s into %s", repo_url, clone_dir)

    # Set GIT_TERMINAL_PROMPT=0 so git fails instead of prompting for credentials
    env = os.environ.copy()
    env["GIT_TERMINAL_PROMPT"] = "0"
    result = subprocess.run(
        ["git", "clone", "--quiet", repo_url, str(clone_dir)],
        capture_output=True,
        text=True,
        env=env,
    )

    if result.returncode != 0:
        logger.warning(
            "git clone exited with status %d: %s", result.returncode, result.stderr.strip()
        )

    return result.returncode


def collect_contract_records(
    assets_dir: Union[Path, str],
    registry: Sequence[ChainRegistryEntry],
    files: Optional[Sequence[Path]] = None,
) -> List[ContractRecord]:
    """
    Build contract records from every deployment file below assets_dir.

    Args:
        assets_dir: Directory holding <version>/<contract>.json files
        registry: Chain registry used to resolve names and explorers
        files: Deployment files already listed by walk_path(assets_dir);
               walked here when omitted

    Returns:
        Contract records in discovery order

    Raises:
        AssetsNotFoundError: If assets_dir does not exist
        DeploymentFileError: If a deployment file is malformed
    """
    records: List[ContractRecord] = []

    if files is None:
        files = walk_path(assets_dir)

    for file_path in files:
        relative_path = relative_asset_path(file_path, assets_dir)
        version, name = parse_deployment_path(relative_path)
        logger.debug("Parsing %s (version=%s, contract=%s)", relative_path, version, name)

        for chain_key, addresses in parse_network_addresses(file_path).items():
            chain_id = int(chain_key)
            chain_name, explorer_url = find_chain(chain_id, registry)
            if chain_name is None:
                logger.debug("Chain %d not found in registry", chain_id)

            for address in addresses:
                records.append(
                    ContractRecord(
                        name=name,
                        version=version,
                        address=address,
                        chain_id=chain_id,
                        chain_name=chain_name,
                        block_explorer_url=explorer_url,
                    )
                )

    return records


def generate_supported_networks(
    repo_url: Optional[str] = None,
    chains_url: Optional[str] = None,
    clone_dir: Optional[Union[Path, str]] = None,
    output_dir: Optional[Union[Path, str]] = None,
) -> List[Path]:
    """
    Regenerate the supported networks pages from scratch.

    Clones the deployments repository, joins every deployment with the chain
    registry and writes one Markdown page per version. The output directory
    is deleted and recreated first. The clone is removed once all pages are
    written; on failure it is left behind.

    Args:
        repo_url: Deployments repository (defaults to $SAFE_DEPLOYMENTS_REPO_URL,
                  then safe-global/safe-deployments)
        chains_url: Chain registry URL (defaults to $CHAIN_REGISTRY_URL,
                    then chainid.network)
        clone_dir: Scratch clone directory (defaults to $SAFE_DEPLOYMENTS_CLONE_DIR,
                   then ./deployments)
        output_dir: Page directory (defaults to $SUPPORTED_NETWORKS_DIR,
                    then ./safe-smart-account/supported-networks)

    Returns:
        Paths of the written pages

    Raises:
        AssetsNotFoundError: If the clone has no assets directory
        DeploymentFileError: If a deployment file is malformed
        ChainRegistryError: If the chain registry cannot be fetched
    """
    if repo_url is None:
        repo_url = os.environ.get(REPO_URL_ENV, DEFAULT_REPO_URL)
    if chains_url is None:
        chains_url = os.environ.get(CHAINS_URL_ENV, DEFAULT_CHAINS_URL)

    clone_path = resolve_dir(clone_dir, CLONE_DIR_ENV, DEFAULT_CLONE_DIR)
    output_path = resolve_dir(output_dir, OUTPUT_DIR_ENV, DEFAULT_OUTPUT_DIR)

    clone_repository(repo_url, clone_path)

    shutil.rmtree(output_path, ignore_errors=True)

    assets_dir = get_assets_dir(clone_path)
    asset_files = walk_path(assets_dir)
    logger.info("Found %d deployment files", len(asset_files))

    registry = fetch_chain_registry(chains_url)
    records = collect_contract_records(assets_dir, registry, asset_files)
    logger.info("Collected %d contract records", len(records))

    output_path.mkdir(parents=True)
    written = write_version_pages(records, output_path)

    shutil.rmtree(clone_path, ignore_errors=True)
    logger.info("Removed %s", clone_path)

    return written
