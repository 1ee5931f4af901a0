"""Data types and dataclasses for safe-supported-networks."""

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass(frozen=True)
class ChainRegistryEntry:
    """A chain from the public chain registry."""

    chain_id: int
    name: Optional[str]
    # Explorer base URLs in registry order; None where a descriptor has no url
    explorers: List[Optional[str]] = field(default_factory=list)

    @property
    def explorer_url(self) -> Optional[str]:
        """First explorer URL, if the chain lists any."""
        return self.explorers[0] if self.explorers else None


@dataclass(frozen=True)
class ContractRecord:
    """A contract address on one chain, joined with registry data."""

    name: str  # e.g., "Safe"
    version: str  # e.g., "v1.3.0"
    address: str
    chain_id: int

    # Absent when the chain ID is not in the registry
    chain_name: Optional[str] = None
    block_explorer_url: Optional[str] = None
