"""
Schedule CSV import/export.

One row per screening:
    movie_title, duration, date (YYYY-MM-DD), time (HH:MM:SS[.ffffff]), theater

Only naive datetime screenings can be written; anything else is skipped
with a warning.
"""

import logging
from datetime import datetime
from pathlib import Path
from typing import Iterable, List, Optional

import pandas as pd

from movie_schedule.models import Movie, Screening

logger = logging.getLogger(__name__)

SCHEDULE_COLUMNS = ['movie_title', 'duration', 'date', 'time', 'theater']


def _representable(movie: Movie, screening: Screening) -> bool:
    if isinstance(screening.time, datetime) and screening.time.tzinfo is None:
        return True
    logger.warning(f"{movie.title}: skipping screening at {screening.time!r} in {screening.theater} "
                   f"(only naive datetimes can be saved)")
    return False


def to_dataframe(movies: Iterable[Movie]) -> pd.DataFrame:
    """Convert movies to a DataFrame, one row per screening"""
    rows = [
        {
            'movie_title': movie.title,
            'duration': movie.duration,
            'date': s.time.date().isoformat(),
            'time': s.time.time().isoformat(),
            'theater': s.theater,
        }
        for movie in movies
        for s in movie.screenings
        if _representable(movie, s)
    ]
    return pd.DataFrame(rows, columns=SCHEDULE_COLUMNS)


def to_csv(movies: Iterable[Movie], filepath: Path | str) -> Path:
    """Save movies' screenings to CSV"""
    filepath = Path(filepath)
    filepath.parent.mkdir(parents=True, exist_ok=True)

    df = to_dataframe(movies)
    df.to_csv(filepath, index=False, encoding='utf-8')
    logger.info(f"Saved {len(df)} screenings to {filepath}")
    return filepath


def load_movies(csv_path: Path | str) -> List[Movie]:
    """Load movies from a schedule CSV, keeping first-appearance order"""
    try:
        df = pd.read_csv(csv_path, dtype=str, keep_default_na=False)
    except pd.errors.EmptyDataError:
        logger.warning(f"Empty schedule file: {csv_path}")
        return []

    missing = [col for col in SCHEDULE_COLUMNS if col not in df.columns]
    if missing:
        logger.warning(f"Missing required columns in {csv_path}: {', '.join(missing)}")
        return []

    df['starts_at'] = pd.to_datetime(df['date'] + ' ' + df['time'], format='ISO8601', errors='coerce')
    df['minutes'] = pd.to_numeric(df['duration'], errors='coerce')

    # CSV line numbers: header is line 1
    bad = df['starts_at'].isna() | df['minutes'].isna() | (df['minutes'] % 1 != 0)
    for index, row in df[bad].iterrows():
        logger.warning(f"Skipping malformed row at line {index + 2} of {csv_path}: "
                       f"duration={row['duration']!r} date={row['date']!r} time={row['time']!r}")
    df = df[~bad]

    movies = []
    for (title, duration), group in df.groupby(['movie_title', 'minutes'], sort=False):
        movie = Movie(title, int(duration))
        for row in group.itertuples(index=False):
            movie.add_screening(Screening(row.starts_at.to_pydatetime(), row.theater))
        movies.append(movie)

    logger.info(f"Loaded {len(df)} screenings of {len(movies)} movies from {csv_path}")
    return movies


def find_movie(movies: Iterable[Movie], title: str) -> Optional[Movie]:
    """First movie with this title, ignoring case"""
    wanted = title.casefold()
    for movie in movies:
        if movie.title.casefold() == wanted:
            return movie
    return None
