"""Markdown rendering of supported network pages."""

import logging
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Sequence, Union

from .constants import DEPRECATED_BLOCK_EXPLORERS
from .types import ContractRecord
from .versions import ordered_versions

logger = logging.getLogger(__name__)


def format_address(record: ContractRecord) -> str:
    """
    Render an address, linked to its explorer when one is usable.

    Args:
        record: Contract record

    Returns:
        Bare address, or a Markdown link to {explorer}/address/{address}
    """
    explorer = record.block_explorer_url
    if explorer is None or explorer in DEPRECATED_BLOCK_EXPLORERS:
        return record.address

    return f"[{record.address}]({explorer}/address/{record.address})"


def group_by_chain(records: Iterable[ContractRecord]) -> Dict[int, Optional[str]]:
    """
    Collect the chains a set of records is deployed on.

    Args:
        records: Contract records

    Returns:
        Dictionary mapping chain ID -> chain name (first seen wins),
        ordered by ascending chain ID
    """
    chains: Dict[int, Optional[str]] = {}
    for record in records:
        if record.chain_id not in chains:
            chains[record.chain_id] = record.chain_name

    return dict(sorted(chains.items()))


def _render_chain_section(
    chain_id: int, chain_name: Optional[str], records: Sequence[ContractRecord]
) -> str:
    heading = chain_name if chain_name is not None else str(chain_id)
    bullets = "\n".join(
        f"- `{r.name}.sol`: {format_address(r)}"
        for r in records
        if r.chain_id == chain_id
    )
    return f"### {heading}\n\nThis network's chain ID is {chain_id}.\n\n{bullets}\n"


def render_version_page(version: str, records: Iterable[ContractRecord]) -> str:
    """
    Render the Markdown page for one version.

    Args:
        version: Version tag, e.g. "v1.3.0"
        records: Contract records; records of other versions are ignored

    Returns:
        Page content
    """
    version_records = [r for r in records if r.version == version]
    sections = [
        _render_chain_section(chain_id, chain_name, version_records)
        for chain_id, chain_name in group_by_chain(version_records).items()
    ]

    header = (
        f"# {version}\n"
        "\n"
        f"This page lists the addresses of all the Safe contracts `{version}` "
        "grouped by chain.\n"
        "\n"
        "## Networks\n"
    )
    if not sections:
        return header

    return header + "\n" + "\n".join(sections)


def write_version_pages(
    records: Sequence[ContractRecord], output_dir: Union[Path, str]
) -> List[Path]:
    """
    Write one {version}.md page per distinct version.

    Existing pages with the same name are overwritten.

    Args:
        records: All contract records, in discovery order
        output_dir: Existing directory to write into

    Returns:
        Paths of written pages, in version order
    """
    output_dir = Path(output_dir)
    written: List[Path] = []

    for version in ordered_versions(records):
        page_path = output_dir / f"{version}.md"
        page_path.write_text(render_version_page(version, records), encoding="utf-8")
        logger.info("Wrote %s", page_path)
        written.append(page_path)

    return written
