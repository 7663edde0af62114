import logging

LOGGER_NAME = "playlister"
logger = logging.getLogger(LOGGER_NAME)


def log_section(title: str) -> None:
    """Header separating the phases of a run (track list, auth, import...)."""
    logger.info("")
    logger.info("=== %s ===", title)


def log_info(message: str) -> None:
    logger.info("%s", message)


def log_debug(message: str) -> None:
    logger.debug("%s", message)


def log_step(message: str) -> None:
    logger.info("→ %s", message)


def log_success(message: str) -> None:
    logger.info("✅ %s", message)


def log_warning(message: str) -> None:
    """Non-fatal problem: the run goes on."""
    logger.warning("⚠️ %s", message)


def log_error(message: str) -> None:
    """Fatal problem: the run stops."""
    logger.error("❌ %s", message)


def log_progress(done: int, total: int, prefix: str = "Progress") -> None:
    """
    Log "<prefix> done/total (pct%)".

    Example:
      log_progress(25, 200, prefix="Importing tracks")
      -> "Importing tracks 25/200 (12.5%)"
    """
    percent = 100.0 * done / total if total > 0 else 100.0
    logger.info("%s %d/%d (%.1f%%)", prefix, done, total, min(percent, 100.0))
