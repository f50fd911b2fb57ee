import sys
import os
from loguru import logger


def _env_flag(name: str) -> bool:
    return os.getenv(name, "").lower() in ("1", "true", "yes")


def setup_logging(level=None, suppress_console=None, enable_file_logging=None):
    """
    Configures the global logger.

    Safe to call repeatedly: existing sinks are dropped before new ones are
    added, so the CLI can reconfigure verbosity after import.

    Args:
        level: Console logging level. If None, check TERMEDIT_LOG_LEVEL (default: INFO).
        suppress_console: If True, suppress console logging. If None, check TERMEDIT_QUIET env var.
        enable_file_logging: If True, enable file logging. If None, check TERMEDIT_FILE_LOGGING env var.
    """
    logger.remove()

    if level is None:
        level = os.getenv("TERMEDIT_LOG_LEVEL", "INFO").upper()

    if suppress_console is None:
        suppress_console = _env_flag("TERMEDIT_QUIET")

    # Stream 1: timestamp | LEVEL | message on stderr, stdout stays clean for read output
    if not suppress_console:
        logger.add(
            sys.stderr,
            level=level,
            format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <level>{message}</level>",
            colorize=None,
        )

    # Stream 2: File logging is opt-in only
    if enable_file_logging is None:
        enable_file_logging = _env_flag("TERMEDIT_FILE_LOGGING")

    if enable_file_logging:
        from termedit.paths import get_paths
        paths = get_paths()
        paths.ensure_dirs()

        logger.add(
            paths.logs_dir / "termedit.log",
            level="DEBUG",
            rotation="1 MB",
            retention="7 days",
            catch=True,
            serialize=False,
        )


# Configure the logger on import (will check env vars)
setup_logging()
