import pytest

from coursekit.course import (
    Course,
    Weekday,
    department_key,
    room_key,
    to_24_hour,
)


def make(code="1100-01", day="M", start="10:00AM", end="11:50AM", room="DCC 308", dept="CSCI"):
    return Course("12345", dept, code, "INTRO", Weekday.from_letter(day), start, end, room)


def test_weekday_letters():
    assert Weekday.from_letter("M") is Weekday.MONDAY
    assert Weekday.from_letter("R") is Weekday.THURSDAY
    assert Weekday.from_letter("F") is Weekday.FRIDAY


def test_unknown_letter_raises():
    with pytest.raises(ValueError):
        Weekday.from_letter("S")


def test_day_name():
    assert make(day="T").day_name() == "Tuesday"
    assert make(day="W").day_name() == "Wednesday"


def test_noon_and_midnight():
    assert to_24_hour("12:30AM") == (0, 30)
    assert to_24_hour("12:30PM") == (12, 30)


def test_pm_hours_shift():
    hour, minute = to_24_hour("02:15PM")
    am_hour, am_minute = to_24_hour("02:15AM")
    assert hour - am_hour == 12
    assert minute == am_minute == 15


def test_duration_with_borrow():
    assert make(start="10:00AM", end="11:50AM").duration() == (1, 50)
    hours, minutes = make(start="11:40AM", end="01:10PM").duration()
    assert hours * 60 + minutes == 90
    assert 0 <= minutes < 60


def test_room_key_orders_room_then_day_then_time():
    a = make(room="A", day="W", start="09:00AM")
    b = make(room="A", day="M", start="04:00PM")
    c = make(room="A", day="M", start="10:00AM")
    d = make(room="B", day="M", start="08:00AM")
    assert sorted([d, a, b, c], key=room_key) == [c, b, a, d]


def test_department_key_latest_start_first_on_ties():
    early = make(code="1200-01", day="M", start="09:00AM")
    late = make(code="1200-01", day="M", start="02:00PM")
    lower = make(code="1100-02", day="F", start="08:00AM")
    section = make(code="1200-02", day="M", start="08:00AM")
    ordered = sorted([early, section, late, lower], key=department_key)
    assert ordered == [lower, late, early, section]