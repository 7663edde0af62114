"""Public façade for the playlister.core package.

Logging helpers, the data model and the CSV track list reader.
"""

from .logging_config import configure_logging
from .logging_utils import (
    log_debug,
    log_error,
    log_info,
    log_progress,
    log_section,
    log_step,
    log_success,
    log_warning,
)
from .models import ImportReport, Playlist, TrackRequest
from .tracklist import TrackListError, read_track_requests

__all__ = [
    "configure_logging",
    "log_section",
    "log_info",
    "log_debug",
    "log_step",
    "log_success",
    "log_warning",
    "log_error",
    "log_progress",
    "TrackRequest",
    "Playlist",
    "ImportReport",
    "TrackListError",
    "read_track_requests",
]
