import time
from typing import Callable, List

import requests

from playlister.config import SEARCH_DELAY_SECONDS
from playlister.core.logging_utils import (
    log_info,
    log_progress,
    log_step,
    log_warning,
)
from playlister.core.models import ImportReport, TrackRequest
from playlister.spotify.client import SpotifyClient

# Log a progress line every this many rows
PROGRESS_EVERY = 25


def import_tracks(
    client: SpotifyClient,
    playlist_id: str,
    track_requests: List[TrackRequest],
    delay: float = SEARCH_DELAY_SECONDS,
    sleep: Callable[[float], None] = time.sleep,
) -> ImportReport:
    """
    Search each requested track, in order, and append the first match to
    the playlist.

    - one search per request, followed by a `delay` pause whatever its outcome
    - zero results: the request is recorded as not found, nothing is appended
    - a search or append error is logged and recorded; the next row proceeds
    No retries.
    """
    report = ImportReport()
    total = len(track_requests)
    log_step(f"Importing {total} tracks...")

    for index, track in enumerate(track_requests, start=1):
        try:
            track_ids = client.search_tracks(track.query)
        except requests.RequestException as e:
            log_warning(f"Failed to search for track '{track}': {e}")
            report.failed.append(track)
            continue
        finally:
            sleep(delay)

        if not track_ids:
            log_warning(f"Could not find track '{track}'")
            report.not_found.append(track)
        else:
            try:
                client.add_tracks_to_playlist(playlist_id, [track_ids[0]])
            except requests.RequestException as e:
                log_warning(f"Failed to add track '{track}' to playlist: {e}")
                report.failed.append(track)
            else:
                log_info(f"Added track '{track}' to playlist")
                report.added += 1

        if index % PROGRESS_EVERY == 0 and index < total:
            log_progress(index, total, prefix="Importing tracks")

    return report
