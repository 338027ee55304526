"""Constants used throughout the confmgr codebase.

This module centralizes fixed paths, suffixes and logging limits so the
loader and the CLI agree on them.
"""

CONFIG_PATH = "configs/"
"""Directory, relative to the working directory, where config files live."""

DIST_SUFFIX = ".dist"
"""Suffix appended to the primary filename by ConfigMgr.load_app_configs()."""

LOGGER_NAME = "config"
"""Name of the logger that receives all loader diagnostics."""

# Log rotation
MAX_LOG_FILES = 30
"""Oldest session logs are removed once this many exist in the log directory."""

LOG_LOCK_FILENAME = "log_rotation.lock"
