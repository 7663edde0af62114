import os
from typing import List
from urllib.parse import urlparse

from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError, field_validator

from playlister.core.logging_utils import log_warning

# Spotify API constants
SPOTIFY_AUTH_URL = "https://accounts.spotify.com/authorize"
SPOTIFY_TOKEN_URL = "https://accounts.spotify.com/api/token"
SPOTIFY_API_BASE = "https://api.spotify.com/v1"

DEFAULT_REDIRECT_URI = "http://127.0.0.1:8008/callback"

SCOPES: List[str] = [
    "playlist-modify-private",
]

# Pause after each search to stay under the API rate limits
SEARCH_DELAY_SECONDS = 0.1

# How long to wait for the user to finish the browser authorization
AUTH_TIMEOUT_SECONDS = 180

HTTP_TIMEOUT_SECONDS = 30


class ConfigError(Exception):
    """Raised when required configuration is missing or invalid."""


class SpotifyCredentials(BaseModel):
    """
    Credentials of the Spotify application used for the authorization flow.

    - client_id     : SPOTIFY_CLIENT_ID
    - client_secret : SPOTIFY_CLIENT_SECRET
    - redirect_uri  : SPOTIFY_REDIRECT_URI (must be registered on the app,
                      with an explicit port for the local listener)
    """

    client_id: str = Field(min_length=1)
    client_secret: str = Field(min_length=1)
    redirect_uri: str = DEFAULT_REDIRECT_URI

    @field_validator("redirect_uri")
    @classmethod
    def _check_redirect_uri(cls, value: str) -> str:
        parsed = urlparse(value)
        if parsed.scheme != "http" or not parsed.hostname:
            raise ValueError(f"{value!r} must be an http:// loopback URL")
        try:
            port = parsed.port
        except ValueError:
            raise ValueError(f"{value!r} has an invalid port") from None
        if port is None:
            raise ValueError(
                f"{value!r} needs an explicit port, e.g. http://127.0.0.1:8008/callback"
            )
        return value


def load_environment(env_file: str = ".env") -> bool:
    """
    Load variables from a .env file into the process environment.

    A missing or empty file is not fatal: credentials may already be
    exported in the shell. Returns True when something was loaded.
    """
    loaded = load_dotenv(env_file)
    if not loaded:
        log_warning(f"Could not load environment file {env_file!r}.")
    return loaded


def load_credentials() -> SpotifyCredentials:
    """
    Read Spotify credentials from the environment.
    Raises ConfigError if the client id or secret is missing, or if the
    redirect URI cannot be served by the local listener.
    """
    try:
        return SpotifyCredentials(
            client_id=os.getenv("SPOTIFY_CLIENT_ID", "").strip(),
            client_secret=os.getenv("SPOTIFY_CLIENT_SECRET", "").strip(),
            redirect_uri=os.getenv("SPOTIFY_REDIRECT_URI") or DEFAULT_REDIRECT_URI,
        )
    except ValidationError as e:
        missing = []
        problems = []
        for err in e.errors():
            name = "SPOTIFY_" + str(err["loc"][0]).upper()
            if err["type"] == "string_too_short":
                missing.append(name)
            else:
                problems.append(f"{name}: {err['msg']}")
        if missing:
            problems.insert(
                0, f"Please set {', '.join(missing)} in the environment or the .env file."
            )
        raise ConfigError(" ".join(problems)) from e
