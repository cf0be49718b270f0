[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "coursekit"
version = "0.1.0"
description = "Small data-structure exercises: character-grid editing, course schedules, connect four, a kitchen simulator, a star battle solver and word-frequency text generation."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "education",
    "data structures",
    "algorithms",
    "puzzles",
    "simulation",
    "text generation",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Environment :: Console",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: Games/Entertainment :: Puzzle Games",
    "Topic :: Text Processing :: Linguistic",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
coursekit-image = "coursekit.imaging:main"
coursekit-schedule = "coursekit.schedule:main"
coursekit-kitchen = "coursekit.kitchen:main"
coursekit-starbattle = "coursekit.star_battle:main"
coursekit-wordfreq = "coursekit.wordfreq:main"

[tool.hatch.build.targets.wheel]
packages = ["coursekit"]

[tool.hatch.build.targets.sdist]
include = ["coursekit", "tests", "pyproject.toml", "README.md"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
