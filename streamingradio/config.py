import os

from loguru import logger


class MissingEnvironmentVariableError(Exception):
    def __init__(self, variable_name: str) -> None:
        super().__init__(f"No {variable_name} environment variable provided")


class InvalidEnvironmentVariableError(Exception):
    def __init__(self, variable_name: str, value: str, expected: str) -> None:
        super().__init__(
            f"Invalid {variable_name} environment variable: {value!r} ({expected})"
        )


def _read_int(variable_name: str, default: int) -> int:
    raw = os.environ.get(variable_name, str(default))
    try:
        value = int(raw)
    except ValueError as error:
        raise InvalidEnvironmentVariableError(
            variable_name, raw, "expected an integer"
        ) from error
    if value < 1:
        raise InvalidEnvironmentVariableError(variable_name, raw, "must be >= 1")
    return value


def _read_threshold(variable_name: str, default: float) -> float:
    raw = os.environ.get(variable_name, str(default))
    try:
        value = float(raw)
    except ValueError as error:
        raise InvalidEnvironmentVariableError(
            variable_name, raw, "expected a number"
        ) from error
    # A threshold of 1.0 could never be exceeded
    if not 0.0 <= value < 1.0:
        raise InvalidEnvironmentVariableError(
            variable_name, raw, "must be in [0.0, 1.0)"
        )
    return value


class Config:
    def __init__(self) -> None:
        self._log_file: str = os.environ.get(
            "LOG_FILE", "/opt/streamingradio/streamingradio.log"
        )
        if not self._log_file:
            raise MissingEnvironmentVariableError("LOG_FILE")
        logger.debug("log_file={}", self._log_file)

        self._similarity_threshold: float = _read_threshold(
            "SIMILARITY_THRESHOLD", 0.3
        )
        logger.debug("similarity_threshold={}", self._similarity_threshold)

        self._initial_song_capacity: int = _read_int("INITIAL_SONG_CAPACITY", 16)
        logger.debug("initial_song_capacity={}", self._initial_song_capacity)

        self._default_station_capacity: int = _read_int(
            "DEFAULT_STATION_CAPACITY", 100
        )
        logger.debug("default_station_capacity={}", self._default_station_capacity)

    @property
    def log_file(self) -> str:
        return self._log_file

    @property
    def similarity_threshold(self) -> float:
        return self._similarity_threshold

    @property
    def initial_song_capacity(self) -> int:
        return self._initial_song_capacity

    @property
    def default_station_capacity(self) -> int:
        return self._default_station_capacity


_config: Config | None = None


def get_config() -> Config:
    global _config  # noqa: PLW0603
    if not _config:
        _config = Config()
    return _config
