"""Centralized runtime configuration for the coverage demo service.

Host and port are read once from the environment at import time; the
launcher's command-line flags take precedence over them.

Usage:
    from coverage_demo.env_config import DEFAULT_HOST, DEFAULT_PORT
"""

import os


# =============================================================================
# SERVER CONFIGURATION
# =============================================================================

DEFAULT_HOST = os.environ.get("COVERAGE_DEMO_HOST", "127.0.0.1")

DEFAULT_PORT = int(os.environ.get("COVERAGE_DEMO_PORT", "3000"))


# =============================================================================
# LOGGING CONFIGURATION
# =============================================================================

LOG_LEVEL_ENV = "COVERAGE_DEMO_LOG_LEVEL"


def get_log_level() -> str:
    """Current log level; read on each call so the launcher can override it."""
    return os.environ.get(LOG_LEVEL_ENV, "INFO").upper()
