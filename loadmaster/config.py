"""
Runtime settings for the CLI and API server.

Only process-level knobs live here. Aircraft data is fixed in the catalog
and is never read from the environment.
"""

import os
from dataclasses import dataclass

ENV_PREFIX = "LOADMASTER_"


@dataclass(frozen=True)
class Settings:
    """Log level and server bind address."""
    log_level: str = "WARNING"
    host: str = "127.0.0.1"
    port: int = 8000

    @classmethod
    def from_env(cls) -> "Settings":
        """
        Read settings from LOADMASTER_LOG_LEVEL, LOADMASTER_HOST and
        LOADMASTER_PORT, falling back to the defaults.

        Raises:
            ValueError: if LOADMASTER_PORT is not an integer
        """
        defaults = cls()
        port = os.environ.get(f"{ENV_PREFIX}PORT")
        return cls(
            log_level=os.environ.get(f"{ENV_PREFIX}LOG_LEVEL", defaults.log_level).upper(),
            host=os.environ.get(f"{ENV_PREFIX}HOST", defaults.host),
            port=int(port) if port else defaults.port,
        )
