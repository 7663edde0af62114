from typing import Any, Dict, List

import pytest
import requests

from playlister.spotify import (
    SpotifyClient,
    create_playlist_for_current_user,
    playlist_name_from_path,
)


class FakeResponse:
    def __init__(self, payload: Dict, status_code: int = 200) -> None:
        self._payload = payload
        self.status_code = status_code

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error")

    def json(self) -> Dict:
        return self._payload


class FakeSession:
    """Records requests and answers them from a path -> payload mapping."""

    def __init__(self, payloads: Dict[str, Any]) -> None:
        self.payloads = payloads
        self.calls: List[Dict[str, Any]] = []

    def _answer(self, method: str, url: str, **kwargs) -> FakeResponse:
        self.calls.append({"method": method, "url": url, **kwargs})
        path = url.replace("https://api.spotify.com/v1", "")
        payload = self.payloads[path]
        if isinstance(payload, FakeResponse):
            return payload
        return FakeResponse(payload)

    def get(self, url: str, **kwargs) -> FakeResponse:
        return self._answer("GET", url, **kwargs)

    def post(self, url: str, **kwargs) -> FakeResponse:
        return self._answer("POST", url, **kwargs)


def _client(payloads: Dict[str, Any]) -> tuple[SpotifyClient, FakeSession]:
    session = FakeSession(payloads)
    return SpotifyClient({"access_token": "tok"}, session=session), session


def test_client_requires_access_token() -> None:
    with pytest.raises(ValueError):
        SpotifyClient({"refresh_token": "only"})


def test_search_tracks_sends_query_and_returns_ids_in_order() -> None:
    client, session = _client(
        {"/search": {"tracks": {"items": [{"id": "t1"}, {"id": "t2"}]}}}
    )

    ids = client.search_tracks("The Beatles Yesterday")

    assert ids == ["t1", "t2"]
    call = session.calls[0]
    assert call["method"] == "GET"
    assert call["params"]["q"] == "The Beatles Yesterday"
    assert call["params"]["type"] == "track"
    assert call["headers"] == {"Authorization": "Bearer tok"}


def test_search_tracks_without_results_returns_empty_list() -> None:
    client, _ = _client({"/search": {"tracks": {"items": []}}})

    assert client.search_tracks("nothing") == []


def test_search_tracks_raises_on_http_error() -> None:
    client, _ = _client({"/search": FakeResponse({}, status_code=429)})

    with pytest.raises(requests.HTTPError):
        client.search_tracks("busy")


def test_add_tracks_to_playlist_posts_uris() -> None:
    client, session = _client({"/playlists/p1/tracks": {"snapshot_id": "snap"}})

    snapshot = client.add_tracks_to_playlist("p1", ["t1"])

    assert snapshot == "snap"
    assert session.calls[0]["json"] == {"uris": ["spotify:track:t1"]}


def test_create_playlist_for_current_user_is_private_and_not_collaborative() -> None:
    client, session = _client(
        {
            "/me": {"id": "user-1"},
            "/users/user-1/playlists": {
                "id": "p1",
                "name": "road trip",
                "owner": {"id": "user-1"},
            },
        }
    )

    playlist = create_playlist_for_current_user(client, "road trip")

    assert playlist.id == "p1"
    assert playlist.name == "road trip"
    assert playlist.owner == "user-1"
    payload = session.calls[1]["json"]
    assert payload["name"] == "road trip"
    assert payload["public"] is False
    assert payload["collaborative"] is False


def test_playlist_name_from_path_strips_directory_and_extension() -> None:
    assert playlist_name_from_path("/tmp/lists/road trip.csv") == "road trip"
    assert playlist_name_from_path("oldies.v2.csv") == "oldies.v2"
