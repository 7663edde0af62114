import time
from typing import Any, Dict, List, Optional

import requests

from playlister.config import HTTP_TIMEOUT_SECONDS, SPOTIFY_API_BASE


class SpotifyClient:
    """
    Authenticated handle on the Spotify Web API for a single run.

    Wraps the token payload returned by the token endpoint
    (access_token, refresh_token, expires_in, ...). The token is never
    refreshed nor written to disk.
    """

    def __init__(
        self,
        token_info: Dict[str, Any],
        session: Optional[requests.Session] = None,
        api_base: str = SPOTIFY_API_BASE,
    ) -> None:
        if not token_info.get("access_token"):
            raise ValueError("token_info has no access_token")
        self.token_info = dict(token_info)
        self.token_info.setdefault("timestamp", int(time.time()))
        self.api_base = api_base.rstrip("/")
        self._http = session or requests.Session()

    @property
    def access_token(self) -> str:
        return self.token_info["access_token"]

    @property
    def refresh_token(self) -> Optional[str]:
        return self.token_info.get("refresh_token")

    def headers(self) -> Dict[str, str]:
        return {"Authorization": f"Bearer {self.access_token}"}

    def _get(self, path: str, params: Optional[Dict[str, Any]] = None) -> Dict:
        r = self._http.get(
            f"{self.api_base}{path}",
            headers=self.headers(),
            params=params,
            timeout=HTTP_TIMEOUT_SECONDS,
        )
        r.raise_for_status()
        return r.json()

    def _post(self, path: str, payload: Dict[str, Any]) -> Dict:
        r = self._http.post(
            f"{self.api_base}{path}",
            headers=self.headers(),
            json=payload,
            timeout=HTTP_TIMEOUT_SECONDS,
        )
        r.raise_for_status()
        return r.json()

    def current_user(self) -> Dict:
        return self._get("/me")

    def create_playlist(
        self,
        user_id: str,
        name: str,
        public: bool = False,
        collaborative: bool = False,
        description: str = "",
    ) -> Dict:
        payload = {
            "name": name,
            "public": public,
            "collaborative": collaborative,
            "description": description,
        }
        return self._post(f"/users/{user_id}/playlists", payload)

    def search_tracks(self, query: str, limit: int = 10) -> List[str]:
        """
        Free-text track search. Returns the track ids in the provider's
        ranking order (possibly empty).
        """
        data = self._get("/search", params={"q": query, "type": "track", "limit": limit})
        items = (data.get("tracks") or {}).get("items") or []
        return [t["id"] for t in items if t and t.get("id")]

    def add_tracks_to_playlist(self, playlist_id: str, track_ids: List[str]) -> str:
        """Append tracks to a playlist. Returns the new snapshot id."""
        uris = [f"spotify:track:{tid}" for tid in track_ids]
        data = self._post(f"/playlists/{playlist_id}/tracks", {"uris": uris})
        return data.get("snapshot_id", "")
