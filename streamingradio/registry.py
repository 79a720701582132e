from collections.abc import Iterator

from loguru import logger

from streamingradio.errors import (
    DuplicateEntityError,
    NotFoundError,
    OutOfRangeError,
    require,
)
from streamingradio.models import Song


class SongRegistry:
    """Canonical set of songs, kept in insertion order.

    Songs live in a fixed-size slot array that doubles whenever an insertion
    would overflow it. A dict maps each song to its slot so lookups don't
    scan the array.
    """

    def __init__(self, initial_capacity: int = 16) -> None:
        if initial_capacity < 1:
            raise OutOfRangeError("initial_capacity", initial_capacity, 1)
        self._slots: list[Song | None] = [None] * initial_capacity
        self._size = 0
        self._index: dict[Song, int] = {}

    def __len__(self) -> int:
        return self._size

    def __contains__(self, song: object) -> bool:
        return song in self._index

    def __iter__(self) -> Iterator[Song]:
        for slot in range(self._size):
            yield self._slots[slot]

    @property
    def capacity(self) -> int:
        return len(self._slots)

    def size(self) -> int:
        return self._size

    def contains(self, song: Song) -> bool:
        require(song, "song")
        return song in self._index

    def position(self, song: Song) -> int:
        """Insertion rank of ``song``, earliest first."""
        require(song, "song")
        if song not in self._index:
            raise NotFoundError("Song", song)
        return self._index[song]

    def add(self, song: Song) -> None:
        require(song, "song")
        if song in self._index:
            raise DuplicateEntityError("Song", song)

        if self._size == len(self._slots):
            self._grow()

        self._slots[self._size] = song
        self._index[song] = self._size
        self._size += 1

    def remove(self, song: Song) -> None:
        require(song, "song")
        slot = self._index.pop(song, None)
        if slot is None:
            raise NotFoundError("Song", song)

        # Shift the tail left so insertion order survives removal
        for i in range(slot, self._size - 1):
            moved = self._slots[i + 1]
            self._slots[i] = moved
            self._index[moved] = i
        self._size -= 1
        self._slots[self._size] = None

    def _grow(self) -> None:
        new_capacity = len(self._slots) * 2
        logger.debug(
            "Growing song registry capacity {} -> {}", len(self._slots), new_capacity
        )
        self._slots.extend([None] * (new_capacity - len(self._slots)))
