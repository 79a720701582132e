from streamingradio.errors import (
    DuplicateEntityError,
    NotFoundError,
    NullReferenceError,
    OutOfRangeError,
    StreamingRadioError,
)
from streamingradio.models import Rating, Song, Station, User
from streamingradio.radio import StreamingRadio
from streamingradio.recommender import NO_PREDICTION, similarity

__all__ = [
    "NO_PREDICTION",
    "DuplicateEntityError",
    "NotFoundError",
    "NullReferenceError",
    "OutOfRangeError",
    "Rating",
    "Song",
    "Station",
    "StreamingRadio",
    "StreamingRadioError",
    "User",
    "similarity",
]
