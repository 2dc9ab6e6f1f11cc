"""
setup_db.py — Build the SQLite movie database.

Data source (optional, expected in the workspace):
  data/movies.csv   columns: title, genre, year, director, rating

When the CSV is missing a small built-in sample collection is loaded instead.

Output: movies.db
"""

import csv
import os
import sqlite3
import time
from pathlib import Path

from pydantic import ValidationError

from movie_api.models import MovieCreate
from movie_api.services.database import SCHEMA_SQL

BASE_DIR = Path(__file__).resolve().parent
DB_PATH = BASE_DIR / "movies.db"

MOVIES_CSV = BASE_DIR / "data" / "movies.csv"

SAMPLE_MOVIES = [
    {"title": "Amelie", "genre": "Romance", "year": 2001, "director": "Jean-Pierre Jeunet", "rating": 8.3},
    {"title": "Alien", "genre": "Horror", "year": 1979, "director": "Ridley Scott", "rating": 8.5},
    {"title": "Blade Runner", "genre": "Sci-Fi", "year": 1982, "director": "Ridley Scott", "rating": 8.1},
    {"title": "Casablanca", "genre": "Drama", "year": 1942, "director": "Michael Curtiz", "rating": 8.5},
    {"title": "Dune", "genre": "Sci-Fi", "year": 2021, "director": "Denis Villeneuve", "rating": 8.0},
    {"title": "Dune Part Two", "genre": "Sci-Fi", "year": 2024, "director": "Denis Villeneuve", "rating": 8.5},
    {"title": "Get Out", "genre": "Horror", "year": 2017, "director": "Jordan Peele", "rating": 7.8},
    {"title": "Groundhog Day", "genre": "Comedy", "year": 1993, "director": "Harold Ramis", "rating": 8.0},
    {"title": "Heat", "genre": "Crime", "year": 1995, "director": "Michael Mann", "rating": 8.3},
    {"title": "Parasite", "genre": "Thriller", "year": 2019, "director": "Bong Joon-ho", "rating": 8.5},
    {"title": "Spirited Away", "genre": "Animation", "year": 2001, "director": "Hayao Miyazaki", "rating": 8.6},
    {"title": "The Grand Budapest Hotel", "genre": "Comedy", "year": 2014, "director": "Wes Anderson", "rating": 8.1},
]


def parse_int(text: str | None) -> int | None:
    try:
        return int(text) if text else None
    except ValueError:
        return None


def parse_float(text: str | None) -> float | None:
    try:
        return float(text) if text else None
    except ValueError:
        return None


def read_movies_csv(path: Path) -> tuple[list[dict], int]:
    """
    Parse a movies CSV into row dicts validated against MovieCreate.
    Returns (movies, skipped): rows that fail validation are skipped and counted.
    """
    movies: list[dict] = []
    skipped = 0
    with open(path, encoding="utf-8", newline="") as f:
        reader = csv.DictReader(f)
        for row in reader:
            try:
                movie = MovieCreate(
                    title=(row.get("title") or "").strip(),
                    genre=(row.get("genre") or "").strip(),
                    year=parse_int(row.get("year")),
                    director=(row.get("director") or "").strip() or None,
                    rating=parse_float(row.get("rating")),
                )
            except ValidationError:
                skipped += 1
                continue
            movies.append(movie.model_dump())
    return movies, skipped


def load_movies(cur: sqlite3.Cursor, movies: list[dict]) -> int:
    """Insert movie rows. Returns count of inserted rows."""
    cur.executemany(
        "INSERT INTO movies (title, genre, year, director, rating) VALUES (?,?,?,?,?)",
        [
            (m["title"], m["genre"], m.get("year"), m.get("director"), m.get("rating"))
            for m in movies
        ],
    )
    return len(movies)


def print_summary(cur: sqlite3.Cursor) -> None:
    cur.execute("SELECT COUNT(*) FROM movies")
    print("\n=== Database Summary ===")
    print(f"  {'movies':20s}: {cur.fetchone()[0]:>8,} rows")

    print("\n=== Movies per genre ===")
    cur.execute("SELECT genre, COUNT(*) FROM movies GROUP BY genre ORDER BY genre")
    for genre, count in cur.fetchall():
        print(f"  {genre:20s}: {count:>8,}")


def main() -> None:
    if DB_PATH.exists():
        os.remove(DB_PATH)
        print(f"Removed existing {DB_PATH.name}")

    t0 = time.perf_counter()
    conn = sqlite3.connect(DB_PATH)
    conn.execute("PRAGMA journal_mode=WAL")
    cur = conn.cursor()

    print("Creating schema...")
    cur.executescript(SCHEMA_SQL)

    if MOVIES_CSV.exists():
        print(f"Loading movies from {MOVIES_CSV}...")
        movies, skipped = read_movies_csv(MOVIES_CSV)
        if skipped:
            print(f"  Skipped {skipped} invalid rows")
    else:
        print("No data/movies.csv found, loading built-in sample movies...")
        movies = SAMPLE_MOVIES
    n_movies = load_movies(cur, movies)
    conn.commit()
    print(f"  Loaded {n_movies} movies")

    print_summary(cur)

    conn.close()
    elapsed = time.perf_counter() - t0
    print(f"\nDone. Database written to {DB_PATH}  ({elapsed:.1f}s)")


if __name__ == "__main__":
    main()
