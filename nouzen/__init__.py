"""Helpers for an APT package tool: errors, arguments, paths, files, URIs and prompts."""

__version__ = "0.1.0"
__all__ = [
    "errors",
    "cliargs",
    "units",
    "buffer",
    "paths",
    "filesystem",
    "attributes",
    "fileops",
    "locations",
    "base_uri",
    "keys",
    "ask",
]