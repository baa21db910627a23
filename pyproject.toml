[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "pyftls"
version = "0.1.0"
description = "A small ls-style directory lister with long format, recursion, hidden files, reverse and time sorting"
requires-python = ">=3.10"
dependencies = []
keywords = ["ls", "directory", "listing", "filesystem", "cli"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: System Administrators",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Filesystems",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
pyftls = "pyftls.listing:main"

[tool.setuptools.packages.find]
include = ["pyftls*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
