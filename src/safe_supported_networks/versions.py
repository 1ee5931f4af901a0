"""Version ordering utilities for safe-supported-networks."""

from typing import Iterable, List, TypeVar

from .types import ContractRecord

T = TypeVar("T")


def deduplicate(items: Iterable[T]) -> List[T]:
    """
    Drop repeated items, keeping the first occurrence of each.

    Items are compared by equality, so unhashable values are accepted.

    Args:
        items: Any iterable

    Returns:
        New list in first-seen order
    """
    result: List[T] = []
    for item in items:
        if item not in result:
            result.append(item)
    return result


def ordered_versions(records: Iterable[ContractRecord]) -> List[str]:
    """
    Distinct versions in reverse order of first appearance.

    This follows the order files were discovered in, not semantic versioning.

    Args:
        records: Contract records in discovery order

    Returns:
        List of version strings
    """
    versions = deduplicate(r.version for r in records)
    versions.reverse()
    return versions
