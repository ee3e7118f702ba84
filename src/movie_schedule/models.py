"""Data models for movie screenings."""

import logging
from datetime import date, datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, PrivateAttr

logger = logging.getLogger(__name__)


class Screening(BaseModel):
    """
    Single showing of a movie.

    `time` is stored exactly as given: any comparable value works, though
    only datetime/date values have a calendar day.
    """

    model_config = ConfigDict(frozen=True)

    time: Any
    theater: str

    def __init__(self, time: Any, theater: str, **data):
        super().__init__(time=time, theater=theater, **data)

    @property
    def date(self) -> Optional[date]:
        if isinstance(self.time, datetime):
            return self.time.date()
        if isinstance(self.time, date):
            return self.time
        return None


class Movie(BaseModel):
    """Movie information and its screenings."""

    title: str
    duration: int  # minutes

    _screenings: list[Screening] = PrivateAttr(default_factory=list)

    def __init__(self, title: str, duration: int, **data):
        super().__init__(title=title, duration=duration, **data)

    @property
    def screenings(self) -> list[Screening]:
        """Copy of the screenings, in the order they were added."""
        return list(self._screenings)

    def add_screening(self, screening: Screening) -> None:
        self._screenings.append(screening)
        logger.debug(f"{self.title}: added screening {screening.time} in {screening.theater}")

    def upcoming_screenings(self, current_time) -> list[Screening]:
        """Screenings strictly later than current_time."""
        return [s for s in self._screenings if s.time > current_time]

    def screenings_on(self, day: date | datetime) -> list[Screening]:
        """Screenings on the same calendar day, whatever the time of day."""
        if isinstance(day, datetime):
            day = day.date()
        return [s for s in self._screenings if s.date == day]

    def cancel_screening(self, time, theater: str) -> int:
        """
        Remove every screening at this time in this theater.

        Returns the number of screenings removed; nothing matching is not an error.
        """
        kept = [s for s in self._screenings if not (s.time == time and s.theater == theater)]
        removed = len(self._screenings) - len(kept)
        self._screenings = kept

        if removed:
            logger.info(f"{self.title}: cancelled {removed} screening(s) at {time} in {theater}")
        else:
            logger.debug(f"{self.title}: no screening at {time} in {theater} to cancel")
        return removed
