[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "charfreq"
version = "0.1.0"
description = "Count printable ASCII characters per input line and list them by ascending frequency"
requires-python = ">=3.10"
dependencies = []
keywords = ["character", "frequency", "ascii", "text", "histogram"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: General",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
charfreq = "charfreq.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["charfreq"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
