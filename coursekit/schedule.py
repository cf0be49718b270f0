"""Reports on a weekly course schedule: by department, by room, or summary statistics."""

from __future__ import annotations

import sys
from itertools import groupby
from operator import attrgetter
from typing import Iterable, Sequence

from coursekit.course import Course, Weekday, department_key, room_key

_FIELDS = 8
_MODES = ("room", "dept", "custom")


def parse_courses(text: str) -> list[Course]:
    """Read whitespace-separated course records, one meeting per listed day.

    Each record holds CRN, department, course code, title, day letters,
    start time, end time and room.
    """
    tokens = text.split()
    if len(tokens) % _FIELDS:
        raise ValueError("incomplete course record at end of input")
    courses: list[Course] = []
    fields = iter(tokens)
    for crn, department, code, name, days, start, end, room in zip(*[fields] * _FIELDS):
        courses.extend(
            Course(crn, department, code, name, Weekday.from_letter(letter), start, end, room)
            for letter in days
        )
    return courses


def _table(courses: Sequence[Course], with_department: bool) -> list[str]:
    """Header, rule and one line per meeting, with columns sized to fit."""
    name_width = max([len("Class Title"), *(len(c.name) for c in courses)])
    day_width = max([len("Day"), *(len(c.day_name()) for c in courses)])
    dept_width = max([len("Dept"), *(len(c.department) for c in courses)])

    header = (
        "Coursenum".ljust(11)
        + "Class Title".ljust(name_width + 2)
        + "Day".ljust(day_width + 2)
        + "Start Time".ljust(12)
        + "End Time".ljust(8)
    )
    rule = "  ".join(["-" * 9, "-" * name_width, "-" * day_width, "-" * 10, "-" * 8])
    if with_department:
        header = "Dept".ljust(dept_width + 2) + header
        rule = "-" * dept_width + "  " + rule

    lines = [header, rule]
    for course in courses:
        row = (
            course.code.ljust(11)
            + course.name.ljust(name_width + 2)
            + course.day_name().ljust(day_width + 2)
            + course.start.ljust(12)
            + course.end.ljust(8)
        )
        if with_department:
            row = course.department.ljust(dept_width + 2) + row
        lines.append(row)
    return lines


def format_department(courses: Iterable[Course], department: str) -> str:
    """List the meetings of one department, by course number, day and latest start."""
    selected = sorted((c for c in courses if c.department == department), key=department_key)
    lines = [
        f"Dept {department}",
        *_table(selected, with_department=False),
        f"{len(selected)} entries",
        "",
    ]
    return "\n".join(lines) + "\n"


def format_room(courses: Iterable[Course], room: str) -> str:
    """List the meetings held in one room, by day and start time."""
    selected = sorted((c for c in courses if c.room == room), key=room_key)
    lines = [
        f"Room {room}",
        *_table(selected, with_department=True),
        f"{len(selected)} entries",
    ]
    return "\n".join(lines) + "\n"


def format_all_rooms(courses: Iterable[Course]) -> str:
    """List every room in alphabetical order, each followed by a blank line."""
    ordered = sorted(courses, key=room_key)
    blocks = [
        format_room(list(group), room) + "\n"
        for room, group in groupby(ordered, key=attrgetter("room"))
    ]
    return "".join(blocks)


def format_custom(courses: Iterable[Course]) -> str:
    """Per department: classes, kinds of class, and weekly hours of teaching."""
    courses = list(courses)
    departments = sorted({c.department for c in courses})
    width = max((len(d) for d in departments), default=0)
    ordered = sorted(courses, key=department_key)

    lines = [
        "dept".ljust(width + 2)
        + "class_num".ljust(11)
        + "types_of_class".ljust(16)
        + "hours_of_class_per_week",
        "  ".join(["-" * width, "-" * 9, "-" * 14, "-" * 23]),
    ]
    for department in departments:
        classes = kinds = hours = minutes = 0
        current_code = "0000"
        section = "00"
        for course in ordered:
            if course.department != department:
                continue
            if course.code[0:4] != current_code:
                classes += 1
                kinds += 1
                current_code = course.code[0:4]
            elif course.code[4:6] != section:
                classes += 1
                section = course.code[4:6]
            spent_hours, spent_minutes = course.duration()
            hours += spent_hours
            minutes += spent_minutes
        carry, minutes = divmod(minutes, 60)
        hours += carry
        hour_text = "00" if hours == 0 else str(hours)
        minute_text = "00" if minutes == 0 else str(minutes)
        lines.append(
            department.ljust(width + 2)
            + str(classes).ljust(11)
            + str(kinds).ljust(16)
            + f"{hour_text}:{minute_text}"
        )
    return "\n".join(lines) + "\n"


def build_report(courses: Sequence[Course], mode: str, name: str | None = None) -> str:
    """Produce the report for a mode: ``room``, ``dept`` or ``custom``."""
    if not courses:
        return "No data available.\n"
    if mode == "room":
        return format_all_rooms(courses) if name is None else format_room(courses, name)
    if mode == "dept":
        if name is None:
            raise ValueError("the dept report needs a department name")
        return format_department(courses, name)
    if mode == "custom":
        return format_custom(courses)
    raise ValueError(f"unknown report mode: {mode!r}")


def main(argv: Sequence[str] | None = None) -> int:
    """Command entry: <input> <output> <room|dept|custom> [name]."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not 3 <= len(args) <= 4:
        print("Given incorect number of arguments.", file=sys.stderr)
        return 1
    input_file, output_file, mode = args[0], args[1], args[2]
    name = args[3] if len(args) == 4 else None
    try:
        with open(input_file, encoding="utf-8") as handle:
            text = handle.read()
    except OSError:
        print(f"Could not open {input_file} to read.", file=sys.stderr)
        return 1
    try:
        report = build_report(parse_courses(text), mode, name)
    except ValueError as error:
        print(f"Error: {error}", file=sys.stderr)
        return 1
    try:
        with open(output_file, "w", encoding="utf-8") as handle:
            handle.write(report)
    except OSError:
        print(f"Could not open {output_file} to write.", file=sys.stderr)
        return 0
    return 0


if __name__ == "__main__":
    sys.exit(main())