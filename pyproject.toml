[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "spectrum"
version = "0.1.0"
description = "Data model for a music player: songs, playback state, equalizer filters and presets."
requires-python = ">=3.10"
dependencies = []
keywords = ["music", "player", "equalizer", "audio", "song"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Sound/Audio :: Players",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["spectrum"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
