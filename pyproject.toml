[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "volumectl"
version = "0.2.2"
description = "Get and set the system audio volume and mute state from Python or the command line"
requires-python = ">=3.10"
dependencies = []
keywords = ["volume", "audio", "mixer", "pulseaudio", "amixer", "osascript", "mute"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Developers",
    "Operating System :: MacOS",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Sound/Audio :: Mixers",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
volume = "volumectl.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["volumectl"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
