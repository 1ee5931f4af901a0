"""
safe-supported-networks: generate per-version Safe contract address pages
"""

from importlib.metadata import PackageNotFoundError, version

from .exceptions import (
    AssetsNotFoundError,
    ChainRegistryError,
    DeploymentFileError,
    SupportedNetworksError,
)
from .generator import collect_contract_records, generate_supported_networks
from .types import ChainRegistryEntry, ContractRecord

try:
    __version__ = version("safe-supported-networks")
except PackageNotFoundError:
    __version__ = None

__all__ = [
    "generate_supported_networks",
    "collect_contract_records",
    "ChainRegistryEntry",
    "ContractRecord",
    "SupportedNetworksError",
    "AssetsNotFoundError",
    "DeploymentFileError",
    "ChainRegistryError",
]
