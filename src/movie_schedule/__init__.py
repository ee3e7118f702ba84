"""Movie screenings: data model, CSV schedule and command-line tool."""

from movie_schedule.models import Movie, Screening

__all__ = ["Movie", "Screening"]
