import logging

from playlister.core import TrackRequest, log_progress
from playlister.pipeline import import_tracks


class AlwaysFoundClient:
    def search_tracks(self, query: str):
        return ["t1"]

    def add_tracks_to_playlist(self, playlist_id, track_ids):
        return "snap"


def test_log_progress_formats_count_and_percent(caplog) -> None:
    caplog.set_level(logging.INFO, logger="playlister")

    log_progress(25, 200, prefix="Importing tracks")

    assert caplog.messages == ["Importing tracks 25/200 (12.5%)"]


def test_log_progress_handles_empty_total(caplog) -> None:
    caplog.set_level(logging.INFO, logger="playlister")

    log_progress(0, 0, prefix="Importing tracks")

    assert caplog.messages == ["Importing tracks 0/0 (100.0%)"]


def test_import_tracks_logs_progress_every_25_rows(caplog) -> None:
    caplog.set_level(logging.INFO, logger="playlister")
    rows = [TrackRequest(title=f"Song {i}", artist="Band") for i in range(30)]

    import_tracks(AlwaysFoundClient(), "p1", rows, sleep=lambda _: None)

    progress = [m for m in caplog.messages if m.startswith("Importing tracks ")]
    assert progress == ["Importing tracks 25/30 (83.3%)"]
