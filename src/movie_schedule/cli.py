#!/usr/bin/env python3
"""
List, filter and cancel screenings from a schedule CSV.

Usage:
    movie-schedule schedule.csv
    movie-schedule schedule.csv --title Inception --date 2025-09-01
    movie-schedule schedule.csv --upcoming --now 2025-09-01T18:00
    movie-schedule schedule.csv --cancel 2025-09-01T19:00 "Theater 1" --output schedule.csv
"""

import argparse
import logging
import os
import sys
from datetime import date, datetime
from pathlib import Path

from movie_schedule.models import Movie, Screening
from movie_schedule.schedule_io import find_movie, load_movies, to_csv

logger = logging.getLogger(__name__)

# Configuration
SCHEDULE_DIR = Path(os.environ.get("MOVIE_SCHEDULE_DIR", "./schedule_data"))

LOG_FORMAT = '%(asctime)s | %(levelname)-8s | %(message)s'
LOG_DATEFMT = '%H:%M:%S'


def format_screening(movie: Movie, screening: Screening) -> str:
    return f"{screening.time:%Y-%m-%d %H:%M} | {screening.theater} | {movie.title}"


def select_screenings(movie: Movie, args: argparse.Namespace) -> list[Screening]:
    if args.date:
        return movie.screenings_on(args.date)
    if args.upcoming:
        return movie.upcoming_screenings(args.now or datetime.now())
    return movie.screenings


def resolve_output(path: str) -> Path:
    """Bare file names land in SCHEDULE_DIR; any path with a directory is kept"""
    output = Path(path)
    if output.is_absolute() or os.sep in path or (os.altsep and os.altsep in path):
        return output
    return SCHEDULE_DIR / output


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='List, filter and cancel movie screenings from a schedule CSV')
    parser.add_argument('csv', type=str, help='Path to schedule CSV')
    parser.add_argument('--title', type=str, help='Only this movie (case-insensitive)')
    when = parser.add_mutually_exclusive_group()
    when.add_argument('--date', type=date.fromisoformat, help='Screenings on this day (YYYY-MM-DD)')
    when.add_argument('--upcoming', action='store_true', help='Screenings after --now')
    parser.add_argument('--now', type=datetime.fromisoformat, help='Reference time for --upcoming (default: now)')
    parser.add_argument('--cancel', nargs=2, metavar=('TIME', 'THEATER'),
                        help='Cancel screenings at TIME (ISO format) in THEATER')
    parser.add_argument('--output', type=str, help='Write the resulting schedule to this CSV')
    parser.add_argument('-v', '--verbose', action='store_true', help='Debug logging')
    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format=LOG_FORMAT,
        datefmt=LOG_DATEFMT,
    )

    if args.now is not None and not args.upcoming:
        parser.error("--now only applies with --upcoming")

    cancel_time = None
    if args.cancel:
        try:
            cancel_time = datetime.fromisoformat(args.cancel[0])
        except ValueError:
            parser.error(f"invalid --cancel time: {args.cancel[0]!r}")

    all_movies = load_movies(args.csv)
    if not all_movies:
        logger.error(f"No movies loaded from {args.csv}")
        sys.exit(1)

    movies = all_movies
    if args.title:
        movie = find_movie(all_movies, args.title)
        if movie is None:
            logger.error(f"Movie not found: {args.title}")
            sys.exit(1)
        movies = [movie]

    if cancel_time is not None:
        theater = args.cancel[1]
        removed = sum(movie.cancel_screening(cancel_time, theater) for movie in movies)
        if not removed:
            logger.warning(f"No screening at {cancel_time:%Y-%m-%d %H:%M} in {theater}")

    count = 0
    for movie in movies:
        for screening in select_screenings(movie, args):
            print(format_screening(movie, screening))
            count += 1
    logger.info(f"Listed {count} screenings")

    if args.output:
        to_csv(all_movies, resolve_output(args.output))

    return 0


if __name__ == "__main__":
    sys.exit(main())
