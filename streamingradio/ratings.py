from datetime import UTC, datetime

from streamingradio.errors import DuplicateEntityError, NotFoundError, require
from streamingradio.models import Rating, Song, User, check_stars


class RatingStore:
    """Sparse user x song matrix of star ratings.

    Only users registered through ``add_user`` can rate. A cleared rating is
    deleted outright, so lookups only ever see a valid star value or nothing.
    """

    def __init__(self) -> None:
        self._ratings: dict[User, dict[Song, Rating]] = {}

    def add_user(self, user: User) -> None:
        require(user, "user")
        if user in self._ratings:
            raise DuplicateEntityError("User", user)
        self._ratings[user] = {}

    def has_user(self, user: User) -> bool:
        require(user, "user")
        return user in self._ratings

    def rate_song(self, user: User, song: Song, stars: int) -> Rating:
        require(user, "user")
        require(song, "song")
        stars = check_stars(stars)
        user_ratings = self._ratings_for(user)

        now = datetime.now(tz=UTC)
        previous = user_ratings.get(song)
        rating = Rating(
            stars=stars,
            created=previous.created if previous else now,
            updated=now,
        )
        user_ratings[song] = rating
        return rating

    def clear_rating(self, user: User, song: Song) -> None:
        require(user, "user")
        require(song, "song")
        user_ratings = self._ratings_for(user)
        if song not in user_ratings:
            raise NotFoundError("Rating", (user, song))
        del user_ratings[song]

    def get_rating(self, user: User, song: Song) -> Rating | None:
        require(user, "user")
        require(song, "song")
        return self._ratings_for(user).get(song)

    def rating_of(self, user: User, song: Song) -> int | None:
        rating = self.get_rating(user, song)
        return rating.stars if rating else None

    def rated_songs_of(self, user: User) -> set[Song]:
        require(user, "user")
        return set(self._ratings_for(user))

    def ratings_of(self, user: User) -> dict[Song, int]:
        require(user, "user")
        return {song: rating.stars for song, rating in self._ratings_for(user).items()}

    def purge_song(self, song: Song) -> int:
        """Delete every rating of ``song``, returning how many were removed."""
        require(song, "song")
        removed = 0
        for user_ratings in self._ratings.values():
            if user_ratings.pop(song, None) is not None:
                removed += 1
        return removed

    def _ratings_for(self, user: User) -> dict[Song, Rating]:
        if user not in self._ratings:
            raise NotFoundError("User", user)
        return self._ratings[user]
