from collections.abc import Generator
from uuid import UUID

import pytest
from freezegun import freeze_time
from pytest_socket import disable_socket

from streamingradio import config
from streamingradio.config import Config
from streamingradio.models import Song, Station, User
from streamingradio.radio import StreamingRadio

FAKE_USER_ID = UUID("00000000-0000-4000-0000-000000000000")
OTHER_USER_ID = UUID("00000000-0000-4000-0000-000000000001")


def pytest_runtest_setup() -> None:
    disable_socket()


@pytest.fixture(autouse=True)
def set_time() -> Generator[None, None, None]:
    with freeze_time("2020-01-01"):
        yield


@pytest.fixture(autouse=True)
def set_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOG_FILE", "/dev/null")  # DEBUG logs still written to stdout
    monkeypatch.setenv("SIMILARITY_THRESHOLD", "0.3")
    monkeypatch.setenv("INITIAL_SONG_CAPACITY", "2")
    monkeypatch.setenv("DEFAULT_STATION_CAPACITY", "3")
    monkeypatch.setattr(config, "_config", None)


@pytest.fixture
def radio(set_env: None) -> StreamingRadio:  # noqa: ARG001
    return StreamingRadio(Config())


@pytest.fixture
def user(radio: StreamingRadio) -> User:
    fake_user = User(FAKE_USER_ID)
    radio.add_user(fake_user)
    return fake_user


@pytest.fixture
def station(radio: StreamingRadio) -> Station:
    return radio.create_station("fake-station", capacity=2)


@pytest.fixture
def songs(radio: StreamingRadio) -> list[Song]:
    fake_songs = [
        Song.of("Song A", "Artist A", "rock", "fast"),
        Song.of("Song B", "Artist B", "rock", "slow"),
        Song.of("Song C", "Artist C", "jazz"),
    ]
    for song in fake_songs:
        radio.add_song(song)
    return fake_songs


@pytest.fixture
def other_user(radio: StreamingRadio) -> User:
    fake_user = User(OTHER_USER_ID)
    radio.add_user(fake_user)
    return fake_user
