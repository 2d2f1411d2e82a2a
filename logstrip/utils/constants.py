"""Centralized constants for log-strip.

Single source of truth for paths and defaults shared by the CLI,
configuration loader and discovery.
"""

from pathlib import Path

# ============================================================================
# STATE DIRECTORY
# ============================================================================

# Per-project directory for config and error logs
STATE_DIR_NAME = ".logstrip"
STATE_DIR = Path(".") / STATE_DIR_NAME

CONFIG_FILE_NAME = "config.json"
ERROR_LOG_FILE = STATE_DIR / "error.log"

# ============================================================================
# SCAN DEFAULTS
# ============================================================================

DEFAULT_EXTENSIONS = [".js", ".jsx", ".ts", ".tsx", ".mjs", ".cjs", ".vue", ".svelte"]

# Build output, dependencies and VCS metadata
DEFAULT_SKIP_DIRS = [
    "node_modules",
    ".git",
    ".next",
    ".nuxt",
    "dist",
    "build",
    "coverage",
    ".cache",
    ".output",
    "vendor",
    "__pycache__",
    ".venv",
    "target",
]

# Worker threads for batch scans (1 = sequential)
DEFAULT_JOBS = 1

# ============================================================================
# GIT
# ============================================================================

GIT_STAGED_COMMAND = ["git", "diff", "--cached", "--name-only", "--diff-filter=ACMR"]
DEFAULT_GIT_TIMEOUT = 10

# ============================================================================
# REPORTING
# ============================================================================

DEFAULT_SNIPPET_CHARS = 80

# ============================================================================
# ENVIRONMENT VARIABLES
# ============================================================================

ENV_PREFIX = "LOGSTRIP"
