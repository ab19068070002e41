[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ghostcomm"
version = "0.1.0"
description = "Encode alphanumeric text to Morse code and decode it back, with an interactive console menu."
requires-python = ">=3.10"
dependencies = []
keywords = ["morse", "morse-code", "encoding", "decoding", "ham-radio", "cli"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Communications :: Ham Radio",
    "Topic :: Text Processing :: Filters",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
ghostcomm = "ghostcomm.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["ghostcomm"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
