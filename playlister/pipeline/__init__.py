"""Public façade for the playlister.pipeline package."""

from .importer import import_tracks
from .reporting import write_unmatched_report

__all__ = [
    "import_tracks",
    "write_unmatched_report",
]
