import math
from fractions import Fraction

from loguru import logger

from streamingradio.errors import NotFoundError, require
from streamingradio.models import MAX_STARS, MIN_STARS, Song, User
from streamingradio.ratings import RatingStore
from streamingradio.registry import SongRegistry

NO_PREDICTION = -1


def similarity(first: Song, second: Song) -> Fraction:
    """Jaccard index of the two songs' attribute sets, in [0, 1].

    Kept as an exact fraction so weighted averages land on true .5 ties.
    A song without attributes scores 0 against everything, including another
    song without attributes.
    """
    if not first.attributes or not second.attributes:
        return Fraction(0)

    intersection = first.attributes & second.attributes
    union = first.attributes | second.attributes
    return Fraction(len(intersection), len(union))


def _round_half_up(value: Fraction) -> int:
    return math.floor(value + Fraction(1, 2))


def _clamp_stars(value: int) -> int:
    return max(MIN_STARS, min(MAX_STARS, value))


class RecommendationEngine:
    """Predicts and suggests from whatever the registry and ratings hold now.

    The engine never mutates either collaborator.
    """

    def __init__(
        self,
        registry: SongRegistry,
        ratings: RatingStore,
        similarity_threshold: float = 0.3,
    ) -> None:
        self._registry = registry
        self._ratings = ratings
        self._similarity_threshold = similarity_threshold

    def predict_rating(self, user: User, song: Song) -> int:
        require(user, "user")
        require(song, "song")
        self._check_user(user)
        if song not in self._registry:
            raise NotFoundError("Song", song)

        current = self._ratings.rating_of(user, song)
        if current is not None:
            return current

        rated = self._ratings.ratings_of(user)
        if not rated:
            return NO_PREDICTION

        weighted_total = Fraction(0)
        total_weight = Fraction(0)
        for rated_song, stars in rated.items():
            weight = similarity(song, rated_song)
            weighted_total += weight * stars
            total_weight += weight

        if total_weight > 0:
            average = weighted_total / total_weight
        else:
            logger.debug("No similar rated songs for {}, using plain average", song)
            average = Fraction(sum(rated.values()), len(rated))

        return _clamp_stars(_round_half_up(average))

    def suggest_song(self, user: User) -> Song | None:
        require(user, "user")
        self._check_user(user)

        rated = self._ratings.ratings_of(user)
        if not rated:
            return None

        anchors = sorted(
            rated,
            key=lambda anchor: (-rated[anchor], self._registry.position(anchor)),
        )
        candidates = [song for song in self._registry if song not in rated]
        if not candidates:
            return None

        for anchor in anchors:
            for candidate in candidates:
                score = similarity(anchor, candidate)
                if score > self._similarity_threshold:
                    logger.debug(
                        "Suggesting {} (similarity {:.2f} to {})",
                        candidate,
                        float(score),
                        anchor,
                    )
                    return candidate

        return None

    def _check_user(self, user: User) -> None:
        if not self._ratings.has_user(user):
            raise NotFoundError("User", user)
