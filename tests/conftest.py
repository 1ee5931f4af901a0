"""Shared pytest fixtures for safe-supported-networks tests."""

import json
import shutil
from pathlib import Path
from typing import Any, Dict, List

import pytest

from safe_supported_networks.registry import parse_chain_registry
from safe_supported_networks.types import ChainRegistryEntry, ContractRecord


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def sample_chains_json(fixtures_dir: Path) -> List[Dict[str, Any]]:
    """Load and return the sample chains.json fixture."""
    with open(fixtures_dir / "chains.json") as f:
        return json.load(f)


@pytest.fixture
def sample_registry(sample_chains_json: List[Dict[str, Any]]) -> List[ChainRegistryEntry]:
    """Registry entries built from the sample chains.json."""
    return parse_chain_registry(sample_chains_json)


@pytest.fixture
def sample_repo_dir(fixtures_dir: Path) -> Path:
    """Return the sample safe-deployments checkout."""
    return fixtures_dir / "safe_deployments"


@pytest.fixture
def sample_assets_dir(sample_repo_dir: Path) -> Path:
    """Return the assets directory of the sample checkout."""
    return sample_repo_dir / "src" / "assets"


@pytest.fixture
def fake_clone(monkeypatch, sample_repo_dir: Path) -> List[List[str]]:
    """
    Replace git clone with a copy of the sample checkout.

    Returns the list of recorded git commands.
    """
    calls: List[List[str]] = []

    class _Completed:
        returncode = 0
        stdout = ""
        stderr = ""

    def fake_run(cmd, **kwargs):
        calls.append(cmd)
        shutil.copytree(sample_repo_dir, cmd[-1])
        return _Completed()

    monkeypatch.setattr("safe_supported_networks.generator.subprocess.run", fake_run)
    return calls


def make_record(**overrides: Any) -> ContractRecord:
    """Build a ContractRecord with sensible defaults."""
    fields: Dict[str, Any] = {
        "name": "Safe",
        "version": "v1.3.0",
        "address": "0xABC",
        "chain_id": 1,
        "chain_name": "Ethereum Mainnet",
        "block_explorer_url": "https://etherscan.io",
    }
    fields.update(overrides)
    return ContractRecord(**fields)


@pytest.fixture
def record_factory():
    """Return a ContractRecord builder with sensible defaults."""
    return make_record
