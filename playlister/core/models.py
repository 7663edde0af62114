from dataclasses import dataclass, field
from typing import List


@dataclass(frozen=True)
class TrackRequest:
    """One data row of the input CSV: column 0 is the title, column 1 the artist."""

    title: str
    artist: str

    @property
    def query(self) -> str:
        return f"{self.artist} {self.title}"

    def __str__(self) -> str:
        return f"{self.artist} - {self.title}"


@dataclass
class Playlist:
    id: str
    name: str
    owner: str


@dataclass
class ImportReport:
    """
    Outcome of one import run.

    - added     : number of tracks appended to the playlist
    - not_found : requests whose search returned no result
    - failed    : requests whose search or append raised an error
    """

    added: int = 0
    not_found: List[TrackRequest] = field(default_factory=list)
    failed: List[TrackRequest] = field(default_factory=list)

    @property
    def total(self) -> int:
        return self.added + len(self.not_found) + len(self.failed)
