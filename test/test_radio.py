from concurrent.futures import ThreadPoolExecutor

import pytest

from streamingradio import StreamingRadioError
from streamingradio.errors import (
    DuplicateEntityError,
    NotFoundError,
    NullReferenceError,
    OutOfRangeError,
)
from streamingradio.models import Song, Station, User
from streamingradio.radio import StreamingRadio


def test_create() -> None:
    radio = StreamingRadio.create()

    assert radio.song_count() == 0


def test_add_song(radio: StreamingRadio) -> None:
    for i in range(10):
        radio.add_song(Song.of(f"name-{i}", f"artist-{i}", "rock"))
        assert radio.song_count() == i + 1

    assert radio.has_song(Song.of("name-0", "artist-0", "rock"))
    assert not radio.has_song(Song.of("name-0", "artist-0", "pop"))


def test_add_song_duplicate(radio: StreamingRadio, songs: list[Song]) -> None:
    with pytest.raises(DuplicateEntityError):
        radio.add_song(Song.of("Song A", "Artist A", "rock", "fast"))

    assert radio.song_count() == 3
    assert radio.songs() == tuple(songs)


def test_add_song_none(radio: StreamingRadio) -> None:
    with pytest.raises(NullReferenceError):
        radio.add_song(None)


def test_remove_song(radio: StreamingRadio, songs: list[Song]) -> None:
    radio.remove_song(songs[1])

    assert radio.songs() == (songs[0], songs[2])


def test_remove_song_missing(radio: StreamingRadio, songs: list[Song]) -> None:
    with pytest.raises(NotFoundError):
        radio.remove_song(Song.of("Song A", "Artist A", "rock"))

    assert radio.song_count() == 3


def test_remove_song_none(radio: StreamingRadio) -> None:
    with pytest.raises(NullReferenceError):
        radio.remove_song(None)


def test_remove_song_leaves_suggestions_consistent(
    radio: StreamingRadio, user: User, songs: list[Song]
) -> None:
    rock_fast, rock_slow, _ = songs
    radio.rate_song(user, rock_fast, 5)
    radio.remove_song(rock_slow)

    assert radio.suggest_song(user) is None

    radio.remove_song(rock_fast)

    assert radio.predict_rating(user, songs[2]) == -1


def test_failed_calls_change_nothing(
    radio: StreamingRadio, user: User, station: Station, songs: list[Song]
) -> None:
    rock_fast, rock_slow, jazz = songs
    radio.rate_song(user, rock_fast, 4)
    radio.add_to_station(station, rock_fast)
    missing = Song.of("name", "artist")

    failing_calls = [
        lambda: radio.add_song(rock_fast),
        lambda: radio.remove_song(missing),
        lambda: radio.add_to_station(station, missing),
        lambda: radio.add_to_station(Station("missing-station"), jazz),
        lambda: radio.rate_song(user, rock_slow, 9),
        lambda: radio.rate_song(user, missing, 3),
        lambda: radio.rate_song(User("missing-user"), rock_slow, 3),
        lambda: radio.clear_rating(user, rock_slow),
        lambda: radio.add_station(Station(station.name, capacity=10)),
        lambda: radio.add_user(User(user.id)),
    ]
    for call in failing_calls:
        with pytest.raises(StreamingRadioError):
            call()

    assert radio.songs() == tuple(songs)
    assert radio.playlist(station) == (rock_fast,)
    assert radio.rating_of(user, rock_fast) == 4
    assert radio.rating_of(user, rock_slow) is None


def test_error_families() -> None:
    assert issubclass(NullReferenceError, TypeError)
    assert issubclass(NotFoundError, LookupError)
    assert issubclass(OutOfRangeError, ValueError)
    assert issubclass(DuplicateEntityError, StreamingRadioError)


def test_concurrent_operations(radio: StreamingRadio, user: User) -> None:
    anchor = Song.of("anchor", "artist", "rock", "fast")
    radio.add_song(anchor)
    radio.rate_song(user, anchor, 5)

    def add_and_remove(i: int) -> None:
        song = Song.of(f"name-{i}", "artist", "rock", "fast", f"tag-{i}")
        radio.add_song(song)
        if i % 2:
            radio.remove_song(song)

    def suggest(_: int) -> Song | None:
        return radio.suggest_song(user)

    with ThreadPoolExecutor(max_workers=8) as executor:
        writes = [executor.submit(add_and_remove, i) for i in range(100)]
        reads = [executor.submit(suggest, i) for i in range(100)]
        for future in writes:
            future.result()
        suggestions = [future.result() for future in reads]

    assert radio.song_count() == 51
    assert anchor not in suggestions
    remaining = set(radio.songs()) - {anchor}
    assert all(song.title.endswith(("0", "2", "4", "6", "8")) for song in remaining)
    assert radio.suggest_song(user) in remaining
