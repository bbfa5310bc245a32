[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dialoguecut"
version = "1.1.2"
description = "Turn subtitle timings into padded, merged dialogue intervals, with helpers for timecodes, encoder presets, waveform samples and exports"
requires-python = ">=3.10"
keywords = ["subtitles", "dialogue", "audio", "intervals", "waveform", "timecode"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Sound/Audio :: Analysis",
    "Topic :: Multimedia :: Video",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["dialoguecut"]

[tool.pytest.ini_options]
addopts = "-ra"
