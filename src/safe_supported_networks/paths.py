"""Path management utilities for safe-supported-networks."""

import os
from pathlib import Path
from typing import List, Optional, Union

from .constants import ASSETS_SUBDIR
from .exceptions import AssetsNotFoundError


def resolve_dir(
    directory: Optional[Union[Path, str]], env_var: str, default: str
) -> Path:
    """
    Resolve a working directory from an argument, environment, or default.

    Args:
        directory: Explicit directory (takes precedence)
        env_var: Environment variable consulted when directory is None
        default: Fallback relative to the current working directory

    Returns:
        Absolute path
    """
    if directory is None:
        directory = os.environ.get(env_var, default)

    return Path(directory).absolute()


def get_assets_dir(clone_dir: Union[Path, str]) -> Path:
    """
    Get the deployment assets directory inside a clone.

    Args:
        clone_dir: Root of the cloned deployments repository

    Returns:
        Path to {clone_dir}/src/assets
    """
    return Path(clone_dir) / ASSETS_SUBDIR


def walk_path(root: Union[Path, str]) -> List[Path]:
    """
    Recursively list every file below a directory.

    Entries are visited in sorted name order so repeated runs over the same
    tree return the same sequence.

    Args:
        root: Directory to walk

    Returns:
        Paths of all non-directory entries, depth-first

    Raises:
        AssetsNotFoundError: If root does not exist
    """
    root = Path(root)
    if not root.is_dir():
        raise AssetsNotFoundError(f"Deployment assets directory not found at {root}")

    results: List[Path] = []
    for entry in sorted(root.iterdir(), key=lambda p: p.name):
        if entry.is_dir():
            results.extend(walk_path(entry))
        else:
            results.append(entry)

    return results


def relative_asset_path(path: Union[Path, str], root: Union[Path, str]) -> str:
    """
    Express a deployment file path relative to the assets root.

    Args:
        path: Deployment file path
        root: Assets root directory

    Returns:
        POSIX-style relative path, e.g. "v1.3.0/gnosis_safe.json"
    """
    return Path(path).relative_to(root).as_posix()
