[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "practice-apps"
version = "0.1.0"
description = "Small console programs and a task-management HTTP API: grade recorder, palindrome check, character frequency, library manager and task manager."
requires-python = ">=3.10"
keywords = ["cli", "library", "tasks", "flask", "mongodb", "exercises"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Environment :: Web Environment",
    "Framework :: Flask",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Application Frameworks",
]
dependencies = [
    "flask>=2.2",
    "pymongo>=4.0",
]

[project.optional-dependencies]
test = [
    "pytest>=7.0",
]

[project.scripts]
grade-recorder = "practice_apps.grades:main"
palindrome-check = "practice_apps.palindrome:main"
word-frequency = "practice_apps.word_frequency:main"
library-manager = "practice_apps.library_cli:main"
task-api = "practice_apps.task_api:main"

[tool.hatch.build.targets.wheel]
packages = ["practice_apps"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
ignore_missing_imports = true
