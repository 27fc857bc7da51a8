"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
API can be started without any configuration, listening on the local
port used by the fixture clients (``3000``).
"""

import os
from dataclasses import dataclass


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Pet Store API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")

    # Prefix under which every router is mounted.  Empty by default so
    # that the routes are exactly ``/pets``, ``/pets/{id}`` and so on.
    api_prefix: str = os.getenv("API_PREFIX", "")

    host: str = os.getenv("HOST", "127.0.0.1")
    port: int = int(os.getenv("PORT", "3000"))

    # Maximum bracket nesting honoured when decoding query strings such
    # as ``russianDoll[nestedDoll][name]=x``.  Deeper segments are kept
    # as a literal key.
    query_max_depth: int = int(os.getenv("QUERY_MAX_DEPTH", "20"))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# must be set before importing this module.
settings = Settings()
