"""Chain registry download and lookup for safe-supported-networks."""

import logging
from typing import Any, Dict, List, Optional, Sequence, Tuple

import requests

from .constants import REGISTRY_TIMEOUT
from .exceptions import ChainRegistryError
from .types import ChainRegistryEntry

logger = logging.getLogger(__name__)


def parse_chain_registry(payload: List[Dict[str, Any]]) -> List[ChainRegistryEntry]:
    """
    Convert the raw chains.json payload into registry entries.

    Entries without a chainId are skipped. Each explorer descriptor keeps
    its URL position, with None where a descriptor has no url.

    Args:
        payload: Decoded chains.json array

    Returns:
        Registry entries in payload order
    """
    entries: List[ChainRegistryEntry] = []
    for chain in payload:
        if "chainId" not in chain:
            continue

        explorers = [e.get("url") for e in chain.get("explorers") or []]
        entries.append(
            ChainRegistryEntry(
                chain_id=int(chain["chainId"]),
                name=chain.get("name"),
                explorers=explorers,
            )
        )

    return entries


def fetch_chain_registry(
    url: str, timeout: Optional[float] = REGISTRY_TIMEOUT
) -> List[ChainRegistryEntry]:
    """
    Download the public chain registry.

    Args:
        url: Location of chains.json
        timeout: Request timeout in seconds

    Returns:
        Registry entries

    Raises:
        ChainRegistryError: If the request fails or the payload is not an array
    """
    try:
        response = requests.get(url, timeout=timeout)
        response.raise_for_status()
        payload = response.json()
    except requests.RequestException as e:
        raise ChainRegistryError(f"Failed to fetch chain registry from {url}: {e}") from e
    except ValueError as e:
        raise ChainRegistryError(f"Chain registry at {url} is not valid JSON: {e}") from e

    if not isinstance(payload, list):
        raise ChainRegistryError(
            f"Expected a JSON array from {url}, got {type(payload).__name__}"
        )

    entries = parse_chain_registry(payload)
    logger.info("Loaded %d chains from %s", len(entries), url)
    return entries


def find_chain(
    chain_id: int, registry: Sequence[ChainRegistryEntry]
) -> Tuple[Optional[str], Optional[str]]:
    """
    Look up a chain's name and explorer URL.

    Args:
        chain_id: Numeric chain ID
        registry: Registry entries; the first matching entry wins

    Returns:
        Tuple of (chain_name, explorer_url), or (None, None) if not found
    """
    for entry in registry:
        if entry.chain_id == chain_id:
            return entry.name, entry.explorer_url

    return None, None
