import csv
from pathlib import Path
from typing import List

from playlister.core.models import TrackRequest


class TrackListError(Exception):
    """Raised when the track list CSV cannot be read."""


def read_track_requests(path: str | Path) -> List[TrackRequest]:
    """
    Parse a CSV file into TrackRequest entries, in file order.

    - the first row is a header and is skipped
    - column 0 is the track title, column 1 the artist; extra columns are ignored
    - blank lines are ignored
    Raises TrackListError if the file cannot be read or a row is too short.
    """
    try:
        with open(path, "r", encoding="utf-8", newline="") as f:
            rows = list(csv.reader(f))
    except (OSError, UnicodeDecodeError, csv.Error) as e:
        raise TrackListError(f"Failed to read CSV file {str(path)!r}: {e}") from e

    track_requests: List[TrackRequest] = []
    for line_no, row in enumerate(rows[1:], start=2):
        if not row:
            continue
        if len(row) < 2:
            raise TrackListError(
                f"Row {line_no} of {str(path)!r} needs a title and an artist column."
            )
        track_requests.append(TrackRequest(title=row[0].strip(), artist=row[1].strip()))
    return track_requests
