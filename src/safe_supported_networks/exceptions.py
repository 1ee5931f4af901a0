"""Custom exception classes for safe-supported-networks."""


class SupportedNetworksError(Exception):
    """Base exception for documentation generation errors."""

    pass


class AssetsNotFoundError(SupportedNetworksError, FileNotFoundError):
    """Raised when the deployment assets directory does not exist."""

    pass


class DeploymentFileError(SupportedNetworksError, ValueError):
    """Raised when a deployment file has an unexpected path or layout."""

    pass


class ChainRegistryError(SupportedNetworksError, RuntimeError):
    """Raised when the chain registry cannot be fetched or decoded."""

    pass
