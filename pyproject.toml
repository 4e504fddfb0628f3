[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "musicwalker"
version = "0.1.0"
description = "A small desktop MP3 player with a play queue and history"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["mp3", "music", "player", "queue", "audio"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: X11 Applications",
    "Environment :: Win32 (MS Windows)",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Sound/Audio :: Players :: MP3",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.gui-scripts]
musicwalker = "musicwalker.gui:main"

[tool.hatch.build.targets.wheel]
packages = ["musicwalker"]

[tool.pytest.ini_options]
addopts = "-ra"
