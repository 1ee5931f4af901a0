"""Command line entry point for safe-supported-networks."""

import logging
import os

from .generator import generate_supported_networks


def main() -> None:
    logging.basicConfig(
        level=os.getenv("LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    generate_supported_networks()


if __name__ == "__main__":
    main()
