import logging
import os

LOG_LEVEL_ENV_VAR = "SYSEXEC_LOG_LEVEL"
DEFAULT_LOG_LEVEL = logging.INFO


def get_env_var(env_var_name: str, default: str | None = None) -> str | None:
    env_var = os.getenv(env_var_name)
    if env_var is None or not env_var.strip():
        return default
    return env_var.strip()


def get_log_level() -> int:
    """Resolve the logging level named by SYSEXEC_LOG_LEVEL, defaulting to INFO."""
    level_name = get_env_var(LOG_LEVEL_ENV_VAR)
    if level_name is None:
        return DEFAULT_LOG_LEVEL
    level = logging.getLevelName(level_name.upper())
    if not isinstance(level, int):
        # Not routed through the package logger, which is configured from this value
        logging.getLogger(__name__).error(
            f"Unknown log level {level_name!r} in {LOG_LEVEL_ENV_VAR}, using INFO"
        )
        return DEFAULT_LOG_LEVEL
    return level
