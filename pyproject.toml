[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "songwalker"
version = "0.2.1"
description = "Stereo mixing, MIDI routing, level metering, parameter and keyboard models for a multi-timbral instrument"
requires-python = ">=3.10"
dependencies = []
keywords = ["audio", "midi", "synthesizer", "mixer", "instrument", "visualizer", "pan"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Sound/Audio :: Sound Synthesis",
    "Topic :: Multimedia :: Sound/Audio :: MIDI",
    "Topic :: Multimedia :: Sound/Audio :: Mixers",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["songwalker"]

[tool.pytest.ini_options]
addopts = "-ra"
