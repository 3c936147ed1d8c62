import pytest

from nouzen.base_uri import (
    BaseURI,
    URIError,
    URIType,
    resolve_directory,
    resolve_file,
    resolve_path,
    resolve_url,
)
from nouzen.errors import ErrorCode
from nouzen.paths import SEP


def p(*parts):
    return SEP.join(parts)


def test_url_relative_with_dot_segments():
    result = resolve_url(
        "http://example.com/debian/dists/stable/Release", "../../pool/main/a.deb"
    )
    assert result == "http://example.com/debian/pool/main/a.deb"


def test_url_absolute_reference_replaces_base():
    reference = "https://mirror.example.com/pool/b.deb"
    assert resolve_url("http://example.com/debian/", reference) == reference


def test_url_host_only_base():
    assert resolve_url("http://example.com", "a") == "http://example.com/a"


def test_url_relative_result_keeps_base_host():
    result = resolve_url("http://example.com/x/y", "z")
    assert result.startswith("http://example.com/")
    assert result.endswith("/z")


@pytest.mark.parametrize("base", ["not a url", "relative/path", ""])
def test_url_invalid_base(base):
    with pytest.raises(URIError):
        resolve_url(base, "a")


def test_url_reference_with_space_rejected():
    with pytest.raises(URIError):
        resolve_url("http://example.com/", "a b")


def test_path_relative():
    assert resolve_path(p("", "srv", "repo", "Packages"), "pool") == p("", "srv", "repo", "pool")


def test_path_absolute_reference():
    reference = p("", "opt", "other")
    assert resolve_path(p("", "srv", "repo", "Packages"), reference) == reference


def test_path_base_at_root():
    assert resolve_path(p("", "Packages"), "x") == SEP + "x"


def test_path_base_without_separator():
    with pytest.raises(URIError):
        resolve_path("Packages", "x")


def test_path_too_long():
    with pytest.raises(URIError):
        resolve_path(p("", "base"), "a" * 5000)


def test_file_matches_path():
    base = p("", "srv", "repo", "Release")
    assert resolve_file(base, "main") == resolve_path(base, "main")


def test_directory_with_and_without_trailing_separator():
    base = p("", "srv", "repo")
    assert resolve_directory(base, "pool") == resolve_directory(base + SEP, "pool")
    assert resolve_directory(base, "pool") == base + SEP + "pool"


def test_directory_absolute_reference():
    reference = p("", "elsewhere")
    assert resolve_directory(p("", "srv"), reference) == reference


@pytest.mark.parametrize(
    "uri_type, function",
    [
        (URIType.URL, resolve_url),
        (URIType.LOCAL_FILE, resolve_file),
        (URIType.LOCAL_DIRECTORY, resolve_directory),
    ],
)
def test_base_uri_dispatch(uri_type, function):
    value = "http://example.com/dists/Release" if uri_type is URIType.URL else p("", "srv", "repo")
    base = BaseURI(uri_type, value)
    assert base.resolve("main") == function(value, "main")


def test_base_uri_text_unsupported():
    with pytest.raises(URIError) as info:
        BaseURI(URIType.TEXT, "anything").resolve("x")
    assert info.value.code == ErrorCode.LOAD_UNSUPPORTED_URI


def test_uri_type_values_select_resolver():
    url = "http://example.com/dists/Release"
    directory = p("", "srv", "repo")
    assert BaseURI(URIType(1), url).resolve("a") == resolve_url(url, "a")
    assert BaseURI(URIType(2), directory).resolve("a") == resolve_file(directory, "a")
    assert BaseURI(URIType(3), directory).resolve("a") == resolve_directory(directory, "a")
    with pytest.raises(URIError):
        BaseURI(URIType(0), url).resolve("a")