from pathlib import Path
from typing import List

from playlister.core.models import TrackRequest


def write_unmatched_report(
    unmatched: List[TrackRequest],
    path: str | Path,
    playlist_name: str = "",
) -> str:
    """
    Write a markdown report listing all requested tracks for which the
    search returned nothing.
    Returns the full path of the report file.
    """
    Path(path).parent.mkdir(parents=True, exist_ok=True)

    with open(path, "w", encoding="utf-8") as f:
        title = "# Tracks not found on Spotify"
        if playlist_name:
            title += f" ({playlist_name})"
        f.write(f"{title}\n\n")
        f.write(f"Total unmatched: {len(unmatched)}\n\n")

        unmatched_sorted = sorted(unmatched, key=lambda t: (t.artist, t.title))

        current_artist = None
        for t in unmatched_sorted:
            if t.artist != current_artist:
                if current_artist is not None:
                    f.write("\n")
                current_artist = t.artist
                f.write(f"## {current_artist or 'Unknown artist'}\n")
            f.write(f"- {t.title or 'Unknown title'}\n")

    return str(path)
