"""Centralized configuration documentation and defaults for the view engine.

This module provides an overview of all configuration options and their
environment variable mappings.
"""

# =============================================================================
# ENVIRONMENT VARIABLES REFERENCE
# =============================================================================

# Template syntax
# ---------------
# GOFR_VIEW_LEFT: Left delimiter for composition tags and statements (default: {%)
# GOFR_VIEW_RIGHT: Right delimiter (default: %})
#   Variables keep the Jinja2 {{ ... }} syntax.
#
# Template directories
# --------------------
# GOFR_VIEW_ROOT: Base template directory (default: asset/views)
# GOFR_VIEW_SHARED: Name of the shared-template subdirectory (default: shared)
#
# Output
# ------
# GOFR_VIEW_AUTOESCAPE: Escape non-markup values in template output (default: true)
#
# Development & Testing
# ---------------------
# GOFR_VIEW_LOG_LEVEL: Logging verbosity for the CLI (default: INFO)
#   Values: DEBUG, INFO, WARNING, ERROR, CRITICAL

# =============================================================================
# CONFIGURATION DEFAULTS
# =============================================================================

from gofr_view.config import (
    DEFAULT_LEFT_DELIMITER,
    DEFAULT_RIGHT_DELIMITER,
    DEFAULT_ROOT,
    DEFAULT_SHARED,
)

DEFAULT_LOG_LEVEL = "INFO"

# Jinja2 variable syntax, kept regardless of the configured delimiters
VARIABLE_DELIMITERS = ("{{", "}}")

# =============================================================================
# CONFIGURATION HELPER FUNCTIONS
# =============================================================================


def get_config_summary(config=None) -> dict:
    """Get a summary of the effective configuration.

    Args:
        config: ViewConfig to summarize (defaults to one built from the environment)

    Returns:
        Dictionary with current configuration values
    """
    import os

    from gofr_view.config import ViewConfig

    if config is None:
        config = ViewConfig.from_env()

    return {
        "left": config.left,
        "right": config.right,
        "root": config.root,
        "shared": config.shared,
        "autoescape": config.autoescape,
        "root_exists": config.root_path.is_dir(),
        "log_level": os.getenv("GOFR_VIEW_LOG_LEVEL", DEFAULT_LOG_LEVEL),
    }


def validate_configuration(config) -> tuple[bool, list[str]]:
    """Validate a configuration for completeness and consistency.

    Returns:
        Tuple of (is_valid, list of error messages)
    """
    errors = []

    if not config.root_path.exists():
        errors.append(f"Template root does not exist: {config.root}")
    elif not config.root_path.is_dir():
        errors.append(f"Template root is not a directory: {config.root}")

    if config.left == config.right:
        errors.append(f"Left and right delimiters must differ (both are '{config.left}')")

    for delimiter in (config.left, config.right):
        if delimiter in VARIABLE_DELIMITERS:
            errors.append(
                f"Delimiter '{delimiter}' collides with the variable syntax "
                f"{VARIABLE_DELIMITERS[0]} ... {VARIABLE_DELIMITERS[1]}"
            )

    if "/" in config.shared or "\\" in config.shared:
        errors.append(f"Shared directory name must be a single path segment: {config.shared}")

    return len(errors) == 0, errors


__all__ = [
    "DEFAULT_LEFT_DELIMITER",
    "DEFAULT_RIGHT_DELIMITER",
    "DEFAULT_ROOT",
    "DEFAULT_SHARED",
    "DEFAULT_LOG_LEVEL",
    "get_config_summary",
    "validate_configuration",
]
