from threading import RLock

from loguru import logger

from streamingradio.config import Config, get_config
from streamingradio.errors import NotFoundError, require
from streamingradio.logsetup import setup_logger
from streamingradio.models import Rating, Song, Station, User, check_stars
from streamingradio.ratings import RatingStore
from streamingradio.recommender import RecommendationEngine
from streamingradio.registry import SongRegistry
from streamingradio.stations import StationCatalog


class StreamingRadio:
    """In-process backend for a streaming radio service.

    Owns the song registry, station playlists, users and their ratings, and
    answers rating predictions and song suggestions over them. Every public
    operation runs under one lock, and arguments are fully validated before
    anything is mutated, so a failed call leaves all state as it was.

    Removing a song cascades: it disappears from every playlist and every
    rating of it is deleted.
    """

    def __init__(self, config: Config | None = None) -> None:
        self._config = config or get_config()
        self._lock = RLock()
        self._songs = SongRegistry(self._config.initial_song_capacity)
        self._stations = StationCatalog()
        self._ratings = RatingStore()
        self._engine = RecommendationEngine(
            self._songs, self._ratings, self._config.similarity_threshold
        )

    @classmethod
    def create(cls) -> "StreamingRadio":
        config = get_config()  # Loads environment variables
        setup_logger(config)
        return cls(config)

    # Songs

    def add_song(self, song: Song) -> None:
        require(song, "song")
        with self._lock:
            self._songs.add(song)
            logger.info("Added song {} (total={})", song, len(self._songs))

    def remove_song(self, song: Song) -> None:
        require(song, "song")
        with self._lock:
            self._songs.remove(song)
            playlists = self._stations.purge_song(song)
            ratings = self._ratings.purge_song(song)
            logger.info(
                "Removed song {} from registry, {} playlist(s), {} rating(s)",
                song,
                playlists,
                ratings,
            )

    def has_song(self, song: Song) -> bool:
        with self._lock:
            return self._songs.contains(song)

    def song_count(self) -> int:
        with self._lock:
            return self._songs.size()

    def songs(self) -> tuple[Song, ...]:
        with self._lock:
            return tuple(self._songs)

    # Stations

    def add_station(self, station: Station) -> None:
        require(station, "station")
        with self._lock:
            self._stations.add_station(station)
            logger.bind(station=station.name).info(
                "Added station with capacity {}", station.capacity
            )

    def create_station(self, name: str, capacity: int | None = None) -> Station:
        require(name, "name")
        if capacity is None:
            capacity = self._config.default_station_capacity
        station = Station(name=name, capacity=capacity)
        self.add_station(station)
        return station

    def playlist(self, station: Station) -> tuple[Song, ...]:
        require(station, "station")
        with self._lock:
            return self._stations.playlist(station)

    def add_to_station(self, station: Station, song: Song) -> bool:
        require(station, "station")
        require(song, "song")
        with self._lock:
            if not self._stations.has_station(station):
                raise NotFoundError("Station", station)
            if not self._songs.contains(song):
                raise NotFoundError("Song", song)

            added = self._stations.add_to_station(station, song)
            if added:
                logger.bind(station=station.name).info("Added {} to playlist", song)
            return added

    def remove_from_station(self, station: Station, song: Song) -> bool:
        require(station, "station")
        require(song, "song")
        with self._lock:
            removed = self._stations.remove_from_station(station, song)
            if removed:
                logger.bind(station=station.name).info(
                    "Removed {} from playlist", song
                )
            return removed

    # Users and ratings

    def add_user(self, user: User) -> None:
        require(user, "user")
        with self._lock:
            self._ratings.add_user(user)
            logger.bind(user=user.id).info("Added user")

    def rate_song(self, user: User, song: Song, stars: int) -> None:
        require(user, "user")
        require(song, "song")
        with self._lock:
            self._check_user_and_song(user, song)
            check_stars(stars)
            self._ratings.rate_song(user, song, stars)
            logger.bind(user=user.id).info("Rated {} with {} star(s)", song, stars)

    def clear_rating(self, user: User, song: Song) -> None:
        require(user, "user")
        require(song, "song")
        with self._lock:
            if not self._ratings.has_user(user):
                raise NotFoundError("User", user)
            self._ratings.clear_rating(user, song)
            logger.bind(user=user.id).info("Cleared rating of {}", song)

    def rating_of(self, user: User, song: Song) -> int | None:
        require(user, "user")
        require(song, "song")
        with self._lock:
            self._check_user_and_song(user, song)
            return self._ratings.rating_of(user, song)

    def rating_details(self, user: User, song: Song) -> Rating | None:
        """Full rating record, with when it was first made and last changed."""
        require(user, "user")
        require(song, "song")
        with self._lock:
            self._check_user_and_song(user, song)
            return self._ratings.get_rating(user, song)

    # Recommendations

    def predict_rating(self, user: User, song: Song) -> int:
        require(user, "user")
        require(song, "song")
        with self._lock:
            return self._engine.predict_rating(user, song)

    def suggest_song(self, user: User) -> Song | None:
        require(user, "user")
        with self._lock:
            suggestion = self._engine.suggest_song(user)
            logger.bind(user=user.id).debug("Suggestion: {}", suggestion)
            return suggestion

    def _check_user_and_song(self, user: User, song: Song) -> None:
        if not self._ratings.has_user(user):
            raise NotFoundError("User", user)
        if not self._songs.contains(song):
            raise NotFoundError("Song", song)
