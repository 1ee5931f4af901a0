"""Configuration constants for safe-supported-networks."""

DEFAULT_REPO_URL = "https://github.com/safe-global/safe-deployments/"
DEFAULT_CHAINS_URL = "https://chainid.network/chains.json"

# Relative to the current working directory
DEFAULT_CLONE_DIR = "deployments"
DEFAULT_OUTPUT_DIR = "safe-smart-account/supported-networks"

# Deployment JSON files live under this directory of the clone
ASSETS_SUBDIR = "src/assets"

# Environment variables overriding the defaults above
REPO_URL_ENV = "SAFE_DEPLOYMENTS_REPO_URL"
CHAINS_URL_ENV = "CHAIN_REGISTRY_URL"
CLONE_DIR_ENV = "SAFE_DEPLOYMENTS_CLONE_DIR"
OUTPUT_DIR_ENV = "SUPPORTED_NETWORKS_DIR"

# Seconds
REGISTRY_TIMEOUT = 30

# Retired explorers still listed in the chain registry; never linked to
DEPRECATED_BLOCK_EXPLORERS = frozenset(
    {
        "https://ropsten.etherscan.io",
        "https://rinkeby.etherscan.io",
        "https://kovan-optimistic.etherscan.io",
        "https://stardust-explorer.metis.io",
        "https://blockexplorer.rinkeby.boba.network",
        "https://blockexplorer.bobabeam.boba.network",
        "https://rabbit.analogscan.com",
        "https://explorer.eurus.network",
        "https://testnetexplorer.eurus.network",
        "https://explorer.tst.publicmint.io",
        "https://evm-testnet.venidiumexplorer.com",
        "https://evm.venidiumexplorer.com",
        "https://evm.explorer.canto.io",
        "https://explorer.autobahn.network",
        "https://explorer.cascadia.foundation",
    }
)
