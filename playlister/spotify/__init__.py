"""Public façade for the playlister.spotify package.

Exposes the interactive authorization flow, the authenticated API client
and the playlist helpers. Callers should import these symbols from this
façade instead of the internal auth, client, or playlists modules.
"""

from .auth import (
    AuthorizationFlow,
    AuthorizationResult,
    SpotifyAuthError,
    generate_state,
)
from .client import SpotifyClient
from .playlists import create_playlist_for_current_user, playlist_name_from_path

__all__ = [
    "AuthorizationFlow",
    "AuthorizationResult",
    "SpotifyAuthError",
    "generate_state",
    "SpotifyClient",
    "create_playlist_for_current_user",
    "playlist_name_from_path",
]
