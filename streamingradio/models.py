from collections.abc import Hashable
from dataclasses import dataclass, field
from datetime import datetime

from streamingradio.errors import OutOfRangeError

MIN_STARS = 1
MAX_STARS = 5


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass(frozen=True)
class Song:
    title: str
    artist: str
    # Descriptive tags (genre, mood, tempo class...) compared for similarity
    attributes: frozenset[str] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        if isinstance(self.attributes, str):
            object.__setattr__(self, "attributes", frozenset({self.attributes}))
        elif not isinstance(self.attributes, frozenset):
            object.__setattr__(self, "attributes", frozenset(self.attributes))

    @classmethod
    def of(cls, title: str, artist: str, *attributes: str) -> "Song":
        return cls(title=title, artist=artist, attributes=frozenset(attributes))


@dataclass(frozen=True)
class Station:
    name: str
    # Identity is the name alone
    capacity: int = field(default=100, compare=False)

    def __post_init__(self) -> None:
        if not _is_int(self.capacity) or self.capacity < 1:
            raise OutOfRangeError("capacity", self.capacity, 1)


@dataclass(frozen=True)
class User:
    id: Hashable


@dataclass(frozen=True)
class Rating:
    stars: int
    created: datetime
    updated: datetime


def check_stars(stars: object) -> int:
    if not _is_int(stars) or not MIN_STARS <= stars <= MAX_STARS:
        raise OutOfRangeError("stars", stars, MIN_STARS, MAX_STARS)
    return stars
