import sys
import os
from loguru import logger

# Flag to track if logging has been configured
_logging_configured = False


def setup_logging(level="INFO", suppress_console=None, enable_file_logging=None, force=False):
    """
    Configures the global logger.

    By default, only console logging is enabled. File logging is opt-in via
    GOREORDER_LOG_FILE=<path> environment variable or enable_file_logging=<path>.

    Args:
        level: Logging level (default: INFO)
        suppress_console: If True, suppress console logging. If None, check GOREORDER_QUIET env var.
        enable_file_logging: Path of a log file to write. If None, check GOREORDER_LOG_FILE env var.
        force: Reconfigure even if logging was already set up (used by the CLI and tests).
    """
    global _logging_configured

    # Only configure once to avoid duplicate handlers
    if _logging_configured and not force:
        return
    _logging_configured = True

    logger.remove()

    if suppress_console is None:
        suppress_console = os.getenv("GOREORDER_QUIET", "").lower() in ("1", "true", "yes")

    # Stream 1: Human-readable console output on stderr (stdout carries Go source)
    if not suppress_console:
        logger.add(
            sys.stderr,
            level=level,
            format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan> - <level>{message}</level>",
            colorize=True
        )

    # Stream 2: File logging is OPT-IN only
    if enable_file_logging is None:
        enable_file_logging = os.getenv("GOREORDER_LOG_FILE") or None

    if enable_file_logging:
        logger.add(
            enable_file_logging,
            level="DEBUG",
            rotation="10 MB",
            retention="1 day",
            compression="gz",
            catch=True,
            serialize=False
        )


# Configure the logger on import. Library use stays quiet below WARNING.
setup_logging(level="WARNING")
