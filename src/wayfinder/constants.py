APP_NAME = "wayfinder"
ENV_PREFIX = f"{APP_NAME.upper()}_"

# Shared by every caller in the process; replaces the start directory of the upward search.
PROJECT_DIR_ENV_VAR = "PROJECT_DIR"

SUBDIR_ENV_VAR_SUFFIX = "_SUBDIR"


def subdir_env_var(prefix: str) -> str:
    """Name of the direct override variable for a prefix, e.g. ``PROMPTS`` -> ``PROMPTS_SUBDIR``."""
    return f"{prefix}{SUBDIR_ENV_VAR_SUFFIX}"
