"""Course meetings and the orderings used to list them by room or department."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class Weekday(IntEnum):
    """A teaching day, numbered from Monday."""

    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5

    @classmethod
    def from_letter(cls, letter: str) -> "Weekday":
        """Return the day for a schedule letter (M, T, W, R or F)."""
        try:
            return _LETTERS[letter]
        except KeyError:
            raise ValueError(f"unknown day letter: {letter!r}") from None

    @property
    def label(self) -> str:
        return self.name.capitalize()


_LETTERS = {
    "M": Weekday.MONDAY,
    "T": Weekday.TUESDAY,
    "W": Weekday.WEDNESDAY,
    "R": Weekday.THURSDAY,
    "F": Weekday.FRIDAY,
}


def to_24_hour(text: str) -> tuple[int, int]:
    """Convert a time such as ``"02:30PM"`` to ``(hour, minute)`` on a 24-hour clock."""
    hour = int(text[0:2])
    minute = int(text[3:5])
    if hour == 12:
        hour = 0
    if text[5:7] == "PM":
        hour += 12
    return hour, minute


@dataclass(frozen=True)
class Course:
    """One weekly meeting of a course section."""

    crn: str
    department: str
    code: str
    name: str
    day: Weekday
    start: str
    end: str
    room: str

    def day_name(self) -> str:
        """The full name of the meeting day."""
        return self.day.label

    def duration(self) -> tuple[int, int]:
        """Length of the meeting as ``(hours, minutes)``."""
        start_hour, start_minute = to_24_hour(self.start)
        end_hour, end_minute = to_24_hour(self.end)
        hours = end_hour - start_hour
        minutes = end_minute - start_minute
        if minutes < 0:
            minutes += 60
            hours -= 1
        return hours, minutes


def room_key(course: Course) -> tuple:
    """Order by room, then day, then start time."""
    hour, minute = to_24_hour(course.start)
    return (course.room, int(course.day), hour, minute)


def department_key(course: Course) -> tuple:
    """Order by course number and section, then day, then latest start first."""
    number = int(course.code[0:4])
    section = int(course.code[5:7])
    hour, minute = to_24_hour(course.start)
    return (number, section, int(course.day), -hour, -minute)