from pathlib import Path

import pytest

from playlister.core import TrackListError, TrackRequest, read_track_requests


def _write_csv(tmp_path: Path, content: str, name: str = "tracks.csv") -> Path:
    path = tmp_path / name
    path.write_text(content, encoding="utf-8")
    return path


def test_read_track_requests_skips_header_and_keeps_order(tmp_path: Path) -> None:
    path = _write_csv(
        tmp_path,
        "Track,Artist\nYesterday,The Beatles\nImagine,John Lennon\n",
    )

    result = read_track_requests(path)

    assert result == [
        TrackRequest(title="Yesterday", artist="The Beatles"),
        TrackRequest(title="Imagine", artist="John Lennon"),
    ]


def test_read_track_requests_handles_quoted_commas_and_extra_columns(
    tmp_path: Path,
) -> None:
    path = _write_csv(
        tmp_path,
        'Track,Artist,Album\n"Hello, Goodbye",The Beatles,Magical Mystery Tour\n',
    )

    result = read_track_requests(path)

    assert result == [TrackRequest(title="Hello, Goodbye", artist="The Beatles")]


def test_read_track_requests_header_only_returns_empty(tmp_path: Path) -> None:
    path = _write_csv(tmp_path, "Track,Artist\n")

    assert read_track_requests(path) == []


def test_read_track_requests_empty_file_returns_empty(tmp_path: Path) -> None:
    path = _write_csv(tmp_path, "")

    assert read_track_requests(path) == []


def test_read_track_requests_short_row_raises(tmp_path: Path) -> None:
    path = _write_csv(tmp_path, "Track,Artist\nYesterday,The Beatles\nLonely\n")

    with pytest.raises(TrackListError) as exc_info:
        read_track_requests(path)

    assert "Row 3" in str(exc_info.value)


def test_read_track_requests_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(TrackListError):
        read_track_requests(tmp_path / "missing.csv")


def test_track_request_query_is_artist_then_title() -> None:
    request = TrackRequest(title="Yesterday", artist="The Beatles")

    assert request.query == "The Beatles Yesterday"
    assert str(request) == "The Beatles - Yesterday"
