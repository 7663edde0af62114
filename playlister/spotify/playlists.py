from pathlib import Path

from playlister.core.logging_utils import log_success
from playlister.core.models import Playlist
from playlister.spotify.client import SpotifyClient


def playlist_name_from_path(path: str | Path) -> str:
    """
    Playlist name for a CSV file: its base name without the extension.
    Example:
      playlist_name_from_path("/tmp/road trip.csv") -> "road trip"
    """
    return Path(path).stem


def create_playlist_for_current_user(
    client: SpotifyClient,
    name: str,
    description: str = "",
) -> Playlist:
    """
    Create a private, non-collaborative playlist owned by the authenticated
    user. Name collisions are left to Spotify (it allows duplicates).
    """
    user_id = client.current_user()["id"]
    data = client.create_playlist(
        user_id,
        name,
        public=False,
        collaborative=False,
        description=description,
    )
    owner = (data.get("owner") or {}).get("id", user_id)
    playlist = Playlist(id=data["id"], name=data.get("name", name), owner=owner)
    log_success(f"Playlist created: {playlist.name}")
    return playlist
