"""
Read-only movie queries: sorted listings, title/genre search and random picks.

Every call takes a fresh snapshot from the record store and computes its
result in memory over that snapshot. Nothing is cached between calls.
"""

import logging
import random

from movie_api.config import settings
from movie_api.errors import EmptySelectionError, InvalidArgumentError
from movie_api.models import Movie
from movie_api.services.store import MovieStore

logger = logging.getLogger(__name__)

# Seeded once per process, shared by every query service instance.
_rng = random.Random(settings.random_seed)


class MovieQueryService:
    def __init__(self, store: MovieStore, rng: random.Random | None = None):
        self._store = store
        self._rng = rng or _rng

    # ── Listings ──────────────────────────────────────────────────────

    def list_titles(self) -> list[str]:
        return sorted(m.title for m in self._store.list_all())

    def list_genres(self) -> list[str]:
        return sorted(m.genre for m in self._store.list_all())

    # ── Search ────────────────────────────────────────────────────────

    def search_exact_title(self, title: str) -> list[Movie]:
        """Case-insensitive whole-title match."""
        wanted = title.casefold()
        return [m for m in self._store.list_all() if m.title.casefold() == wanted]

    def search_title(self, keyword: str) -> list[Movie]:
        return [m for m in self._store.list_all() if keyword in m.title]

    def search_genre(self, keyword: str) -> list[Movie]:
        return [m for m in self._store.list_all() if keyword in m.genre]

    # ── Random selection ──────────────────────────────────────────────

    def random_movie(self) -> Movie:
        return self._pick(self._store.list_all(), "No movies available to pick from")

    def random_movie_by_genre(self, genre: str) -> Movie:
        return self._pick(self.search_genre(genre), f"No movies found in genre {genre!r}")

    def random_movie_list(self, count: int) -> list[Movie]:
        """
        Return `count` distinct movies in random order.

        Sampling is without replacement, so the result never repeats a record
        and the call always terminates.
        """
        if count < 0:
            raise InvalidArgumentError(f"Requested count must not be negative, got {count}")
        if count == 0:
            return []

        snapshot = self._store.list_all()
        if count > len(snapshot):
            logger.warning("Random list of %d requested from %d movies", count, len(snapshot))
            raise InvalidArgumentError(
                f"Requested {count} movies but only {len(snapshot)} are available"
            )
        return self._rng.sample(snapshot, count)

    def _pick(self, candidates: list[Movie], empty_message: str) -> Movie:
        if not candidates:
            logger.warning("Empty selection: %s", empty_message)
            raise EmptySelectionError(empty_message)
        return candidates[self._rng.randrange(len(candidates))]
