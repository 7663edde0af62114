import logging
import sys

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s - %(message)s"

# Third-party loggers that are only worth reading when debugging
_CHATTY_LOGGERS = ("urllib3", "requests")


def configure_logging(level: int = logging.INFO) -> None:
    """
    Configure root logging for the command line run.

    - Logs go to stdout, one handler only (repeated calls just adjust the level)
    - HTTP client libraries stay at WARNING unless DEBUG is requested
    """
    root = logging.getLogger()
    root.setLevel(level)

    if not root.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%H:%M:%S"))
        root.addHandler(handler)

    chatty_level = logging.DEBUG if level <= logging.DEBUG else logging.WARNING
    for name in _CHATTY_LOGGERS:
        logging.getLogger(name).setLevel(chatty_level)
