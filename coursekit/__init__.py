"""Data-structure exercises: grid editing, course schedules, connect four, a kitchen simulator, star battle and word frequencies."""

__version__ = "0.1.0"