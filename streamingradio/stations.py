from loguru import logger

from streamingradio.errors import DuplicateEntityError, NotFoundError, require
from streamingradio.models import Song, Station


class StationCatalog:
    def __init__(self) -> None:
        self._stations: dict[str, Station] = {}
        self._playlists: dict[str, list[Song]] = {}

    def add_station(self, station: Station) -> None:
        require(station, "station")
        if station.name in self._stations:
            raise DuplicateEntityError("Station", station)
        self._stations[station.name] = station
        self._playlists[station.name] = []

    def has_station(self, station: Station) -> bool:
        require(station, "station")
        return station.name in self._stations

    def playlist(self, station: Station) -> tuple[Song, ...]:
        return tuple(self._playlist_for(station))

    def add_to_station(self, station: Station, song: Song) -> bool:
        """Append ``song`` to the station's playlist.

        Returns False, without changing anything, when the playlist is full or
        already holds the song. Checking that the song exists in the registry
        is left to the caller.
        """
        require(song, "song")
        playlist = self._playlist_for(station)
        registered = self._stations[station.name]

        if song in playlist:
            logger.debug("{} already on station {}", song, station.name)
            return False
        if len(playlist) >= registered.capacity:
            logger.debug(
                "Station {} is full ({} songs)", station.name, registered.capacity
            )
            return False

        playlist.append(song)
        return True

    def remove_from_station(self, station: Station, song: Song) -> bool:
        require(song, "song")
        playlist = self._playlist_for(station)
        if song not in playlist:
            return False
        playlist.remove(song)
        return True

    def purge_song(self, song: Song) -> int:
        """Remove ``song`` from every playlist, returning how many held it."""
        require(song, "song")
        touched = 0
        for playlist in self._playlists.values():
            if song in playlist:
                playlist.remove(song)
                touched += 1
        return touched

    def _playlist_for(self, station: Station) -> list[Song]:
        require(station, "station")
        if station.name not in self._stations:
            raise NotFoundError("Station", station)
        return self._playlists[station.name]
