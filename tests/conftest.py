from datetime import datetime

import pytest

from movie_schedule.models import Movie, Screening


@pytest.fixture
def inception():
    return Movie(title="Inception", duration=148)


@pytest.fixture
def schedule_csv(tmp_path):
    path = tmp_path / "schedule.csv"
    path.write_text(
        "movie_title,duration,date,time,theater\n"
        "Inception,148,2025-09-01,19:00,Theater 1\n"
        "Arrival,116,2025-09-01,20:30,Theater 2\n"
        "Inception,148,2025-09-02,21:15,Theater 3\n",
        encoding="utf-8",
    )
    return path


@pytest.fixture
def two_movies():
    inception = Movie(title="Inception", duration=148)
    inception.add_screening(Screening(time=datetime(2025, 9, 1, 19, 0), theater="Theater 1"))
    inception.add_screening(Screening(time=datetime(2025, 9, 2, 21, 15), theater="Theater 3"))
    arrival = Movie(title="Arrival", duration=116)
    arrival.add_screening(Screening(time=datetime(2025, 9, 1, 20, 30), theater="Theater 2"))
    return [inception, arrival]
