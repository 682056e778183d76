"""Environment-driven configuration for the pvfs bridge."""

import os
import tempfile
from typing import Optional

from pvfs_bridge.constants import DEFAULT_S3A_IMPL


def _flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() == "true"


class BridgeConfig:
    """Tuning values written by the binders.

    Values are read on attribute access so tests and long-running
    processes observe environment changes.
    """

    @property
    def s3a_impl(self) -> str:
        # Driver class the backend factory instantiates for s3a URIs
        return os.getenv("PVFS_S3_IMPL", DEFAULT_S3A_IMPL)

    @property
    def buffer_dir(self) -> str:
        return os.getenv("PVFS_BUFFER_DIR") or tempfile.gettempdir()

    @property
    def attempts_maximum(self) -> str:
        return os.getenv("PVFS_S3_ATTEMPTS_MAXIMUM", "3")

    @property
    def hcp_forward_proxy(self) -> bool:
        return _flag("PVFS_HCP_FORWARD_PROXY")

    @property
    def self_signed_ca_bundle(self) -> Optional[str]:
        return os.getenv("PVFS_SELF_SIGNED_CA_BUNDLE") or None


class FactoryConfig:
    """Configuration for the default backend filesystem factory."""

    # Maximum number of backend filesystems kept by the factory cache
    CACHE_SIZE: int = int(os.getenv("PVFS_FS_CACHE_SIZE", "64"))


class LoggingConfig:
    """Configuration for the command line entry point."""

    @property
    def level(self) -> str:
        return os.getenv("PVFS_LOG_LEVEL", "WARNING").upper()


# Global config instances
bridge_config = BridgeConfig()
factory_config = FactoryConfig()
logging_config = LoggingConfig()
