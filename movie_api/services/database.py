"""SQLite record store which manages connection management and movie persistence."""

import logging
import sqlite3
from contextlib import contextmanager
from pathlib import Path

from movie_api.errors import ConcurrencyConflictError
from movie_api.models import Movie, MovieCreate
from movie_api.services.store import MovieStore

logger = logging.getLogger(__name__)

SCHEMA_SQL = """
CREATE TABLE IF NOT EXISTS movies (
    id       INTEGER PRIMARY KEY AUTOINCREMENT,
    title    TEXT NOT NULL,
    genre    TEXT NOT NULL,
    year     INTEGER,
    director TEXT,
    rating   REAL
);

CREATE INDEX IF NOT EXISTS idx_movies_title ON movies(title);
CREATE INDEX IF NOT EXISTS idx_movies_genre ON movies(genre);
"""

_COLUMNS = "id, title, genre, year, director, rating"


class DatabaseService(MovieStore):
    def __init__(self, db_path: Path):
        self._db_path = db_path
        self.init_schema()
        logger.info("DatabaseService initialized with %s", db_path)

    @contextmanager
    def _connect(self):
        conn = sqlite3.connect(self._db_path)
        conn.row_factory = sqlite3.Row
        conn.execute("PRAGMA journal_mode=WAL")
        try:
            yield conn
        finally:
            conn.close()

    def init_schema(self) -> None:
        with self._connect() as conn:
            conn.executescript(SCHEMA_SQL)
            conn.commit()

    def health_check(self) -> bool:
        try:
            with self._connect() as conn:
                conn.execute("SELECT 1 FROM movies LIMIT 1")
            return True
        except Exception:
            logger.exception("Database health check failed")
            return False

    def list_all(self) -> list[Movie]:
        with self._connect() as conn:
            rows = conn.execute(f"SELECT {_COLUMNS} FROM movies ORDER BY id").fetchall()
        return [Movie(**dict(r)) for r in rows]

    def find_by_id(self, movie_id: int) -> Movie | None:
        with self._connect() as conn:
            row = conn.execute(
                f"SELECT {_COLUMNS} FROM movies WHERE id = ?", (movie_id,)
            ).fetchone()
        return Movie(**dict(row)) if row else None

    def exists(self, movie_id: int) -> bool:
        with self._connect() as conn:
            row = conn.execute("SELECT 1 FROM movies WHERE id = ?", (movie_id,)).fetchone()
        return row is not None

    def add(self, movie: MovieCreate) -> Movie:
        with self._connect() as conn:
            cur = conn.execute(
                "INSERT INTO movies (title, genre, year, director, rating) VALUES (?,?,?,?,?)",
                (movie.title, movie.genre, movie.year, movie.director, movie.rating),
            )
            conn.commit()
            movie_id = cur.lastrowid
        return Movie(id=movie_id, **movie.model_dump())

    def save(self, movie: Movie) -> None:
        with self._connect() as conn:
            cur = conn.execute(
                """UPDATE movies
                   SET title = ?, genre = ?, year = ?, director = ?, rating = ?
                   WHERE id = ?""",
                (movie.title, movie.genre, movie.year, movie.director, movie.rating, movie.id),
            )
            conn.commit()
            updated = cur.rowcount
        if updated == 0:
            raise ConcurrencyConflictError(f"Movie {movie.id} was not updated")

    def remove(self, movie: Movie) -> None:
        with self._connect() as conn:
            cur = conn.execute("DELETE FROM movies WHERE id = ?", (movie.id,))
            conn.commit()
            deleted = cur.rowcount
        if deleted == 0:
            raise ConcurrencyConflictError(f"Movie {movie.id} was not deleted")
