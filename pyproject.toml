[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fsrs"
version = "0.1.0"
description = "Free Spaced Repetition Scheduler (FSRS) for flashcard review scheduling"
requires-python = ">=3.10"
dependencies = []
keywords = ["fsrs", "spaced-repetition", "flashcards", "scheduler", "memory"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["fsrs"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
