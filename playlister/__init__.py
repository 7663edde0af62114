"""playlister: build a Spotify playlist from a CSV of (track, artist) rows."""

__version__ = "0.1.0"
