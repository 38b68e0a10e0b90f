[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wutils"
version = "0.1.0"
description = "Everyday helpers and small command-line tools: line-list diffs, hashing, timeouts, MP4 durations, disk keep-alive, script launching and JetBrains portability."
requires-python = ">=3.10"
keywords = [
    "utilities",
    "cli",
    "diff",
    "hash",
    "timeout",
    "mp4",
    "jetbrains",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
]
dependencies = [
    "pyyaml",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
common-starter = "wutils.starter:main"
jpu = "wutils.jpu:main"

[tool.hatch.build.targets.wheel]
packages = ["wutils"]

[tool.pytest.ini_options]
addopts = "-ra"
