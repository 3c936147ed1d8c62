"""Resolving references against a base URL, file or directory."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from urllib.parse import urljoin, urlsplit, urlunsplit

from .errors import ErrorCode, NouzenError
from .paths import SEP, basename, is_absolute

PATH_MAX = 4096
"""Longest path, terminator included, that resolve_path will build."""


class URIType(IntEnum):
    """What the value of a BaseURI refers to."""

    TEXT = 0x00
    URL = 0x01
    LOCAL_FILE = 0x02
    LOCAL_DIRECTORY = 0x03


class URIError(NouzenError):
    """Raised when a reference cannot be resolved against a base."""


def _check_url_text(url: str) -> None:
    if not url or any(ch.isspace() or ord(ch) < 32 or ord(ch) == 127 for ch in url):
        raise URIError(ErrorCode.PKG_RESOLVE_URI_FAILURE, url)


def resolve_url(base: str, reference: str) -> str:
    """Resolve a URL reference against an absolute base URL."""
    _check_url_text(base)
    _check_url_text(reference)

    parts = urlsplit(base)
    if not parts.scheme or (not parts.netloc and parts.scheme != "file"):
        raise URIError(ErrorCode.PKG_RESOLVE_URI_FAILURE, base)

    result = urlsplit(urljoin(base, reference))
    if not result.scheme:
        raise URIError(ErrorCode.PKG_RESOLVE_URI_FAILURE, reference)
    path = result.path
    if not path and result.netloc:
        path = "/"
    return urlunsplit((result.scheme, result.netloc, path, result.query, result.fragment))


def resolve_path(base: str, reference: str) -> str:
    """Resolve a path against the directory that holds the base path.

    An absolute reference is returned unchanged.
    """
    if is_absolute(reference):
        return reference

    name = basename(base)
    size = len(base) - len(name) - 1
    if size < 0:
        raise URIError(ErrorCode.PKG_RESOLVE_URI_FAILURE, base)
    if size + len(SEP) + len(reference) + 1 > PATH_MAX:
        raise URIError(ErrorCode.PKG_RESOLVE_URI_FAILURE, "resulting path is too long")
    return base[:size] + SEP + reference


def resolve_file(base: str, reference: str) -> str:
    """Resolve a path against the directory of a base file."""
    return resolve_path(base, reference)


def resolve_directory(base: str, reference: str) -> str:
    """Resolve a path against a base directory."""
    if base.endswith(SEP):
        return resolve_path(base, reference)
    return resolve_path(base + SEP, reference)


@dataclass
class BaseURI:
    """A base location that relative references are resolved against."""

    type: URIType = URIType.TEXT
    value: str = ""

    def resolve(self, source: str) -> str:
        """Resolve source against this base."""
        if self.type is URIType.URL:
            return resolve_url(self.value, source)
        if self.type is URIType.LOCAL_FILE:
            return resolve_file(self.value, source)
        if self.type is URIType.LOCAL_DIRECTORY:
            return resolve_directory(self.value, source)
        raise URIError(ErrorCode.LOAD_UNSUPPORTED_URI, source)