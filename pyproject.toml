[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "nouzen"
version = "0.1.0"
description = "Helpers for an APT package tool: argument parsing, error codes, path and file utilities, URI resolution and console prompts."
requires-python = ">=3.10"
dependencies = []
keywords = ["apt", "debian", "packages", "filesystem", "paths", "cli", "console"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: POSIX",
    "Operating System :: Microsoft :: Windows",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Software Distribution",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["nouzen"]

[tool.pytest.ini_options]
addopts = "-ra"
