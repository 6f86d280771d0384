[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "thesaurust"
version = "0.1.2"
description = "A terminal-based dictionary and thesaurus."
requires-python = ">=3.10"
keywords = ["dictionary", "thesaurus", "tui", "terminal", "curses"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console :: Curses",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: English",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: Linguistic",
]
dependencies = [
    "requests",
]

[project.optional-dependencies]
test = [
    "pytest",
    "responses",
]

[project.scripts]
thesaurust = "thesaurust.tui:main"

[tool.hatch.build.targets.wheel]
packages = ["thesaurust"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
