"""Error codes, their messages, and the exception that carries them."""

from __future__ import annotations

from enum import IntEnum


class ErrorCode(IntEnum):
    """Numeric error codes reported by the package."""

    SUCCESS = 0
    ARCHIVE_UNCOMPRESS_FAILURE = -1
    ARGPARSE_ARGUMENT_EMPTY = -2
    ARGPARSE_ARGUMENT_INVALID = -3
    ARGPARSE_ARGUMENT_VALUE_MISSING = -4
    ARGPARSE_INVALID_UINT = -5
    ARGPARSE_TOO_MANY_PACKAGES = -6
    ARGPARSE_VALUE_UNEXPECTED = -7
    CLI_USER_INTERRUPTED = -8
    EXPAND_FILENAME_FAILURE = -9
    FSTREAM_LOCK_FAILURE = -10
    FSTREAM_OPEN_FAILURE = -11
    FSTREAM_READ_EMPTY_FILE = -12
    FSTREAM_READ_FAILURE = -13
    FSTREAM_SEEK_FAILURE = -14
    FSTREAM_TELL_FAILURE = -15
    FSTREAM_WRITE_FAILURE = -16
    FS_CHMOD_FAILURE = -17
    FS_GTMOD_FAILURE = -18
    FS_MKDIR_FAILURE = -19
    FS_READLINK_FAILURE = -20
    FS_RM_FAILURE = -21
    FS_SYMLINK_FAILURE = -22
    FS_WALKDIR_FAILURE = -23
    FS_CHDIR_FAILURE = -23
    GET_APP_DIRECTORY_FAILURE = -24
    LOAD_UNSUPPORTED_URI = -25
    MEM_ALLOC_FAILURE = -26
    NO_TMPDIR = -27
    PACKAGE_DEPENDENCY_LOOP = -28
    PACKAGE_MISSING_FILENAME = -29
    PACKAGE_MISSING_NAME = -30
    PACKAGE_MISSING_VERSION = -31
    PACKAGE_SECTION_INVALID = -32
    PACKAGE_UNSATISFIED_DEPENDENCY = -33
    PATCHELF_INIT_FAILURE = -34
    PKG_DATA_FILE_MISSING = -35
    PKG_METADATA_WRITE_FAILURE = -36
    PKG_RESOLVE_URI_FAILURE = -37
    PLATFORM_UNKNOWN = -38
    REPO_CONF_MISSING_FIELD = -39
    REPO_CONF_PARSE_FAILURE = -40
    REPO_GET_CONFDIR_FAILURE = -41
    REPO_GET_PKGSDIR_FAILURE = -42
    REPO_GET_SRCDIR_FAILURE = -43
    REPO_LOAD_NO_SOURCES_AVAILABLE = -44
    REPO_LOAD_UNSUPPORTED_URI = -45
    REPO_PKG_INDEX_TOO_LARGE = -46
    REPO_UNKNOWN_ARCHITECTURE = -47
    WCURLMLT_ADD_FAILURE = -48
    WCURLMLT_INIT_FAILURE = -49
    WCURLMLT_PERFORM_FAILURE = -50
    WCURLMLT_POLL_FAILURE = -51
    WCURLMLT_REMOVE_FAILURE = -52
    WCURLMLT_SETOPT_FAILURE = -53
    WCURL_GETINFO_FAILURE = -54
    WCURL_INIT_FAILURE = -55
    WCURL_REQUEST_FAILURE = -56
    WCURL_SETOPT_FAILURE = -57
    WCURL_SLIST_FAILURE = -58


_UNKNOWN = "Unknown error"

_MESSAGES: dict[int, str] = {
    ErrorCode.SUCCESS: "Success",
    ErrorCode.ARCHIVE_UNCOMPRESS_FAILURE: "Could not uncompress archive",
    ErrorCode.ARGPARSE_ARGUMENT_EMPTY: "Got an empty argument while parsing the command-line arguments",
    ErrorCode.ARGPARSE_ARGUMENT_INVALID: "This argument is invalid or was not recognized",
    ErrorCode.ARGPARSE_ARGUMENT_VALUE_MISSING: "This keyword argument requires a value to be supplied",
    ErrorCode.ARGPARSE_INVALID_UINT: "Could not parse this string as a decimal integer",
    ErrorCode.ARGPARSE_TOO_MANY_PACKAGES: "Too many packages specified in a single command call",
    ErrorCode.ARGPARSE_VALUE_UNEXPECTED: "Got an unexpected value while parsing the command-line arguments",
    ErrorCode.CLI_USER_INTERRUPTED: "User interrupted",
    ErrorCode.EXPAND_FILENAME_FAILURE: "Could not resolve filename",
    ErrorCode.FSTREAM_LOCK_FAILURE: "Could not lock file",
    ErrorCode.FSTREAM_OPEN_FAILURE: "Could not open file",
    ErrorCode.FSTREAM_READ_EMPTY_FILE: "Tried to read contents from an empty file",
    ErrorCode.FSTREAM_READ_FAILURE: "Could not read data from file",
    ErrorCode.FSTREAM_SEEK_FAILURE: "Could not seek file",
    ErrorCode.FSTREAM_TELL_FAILURE: "Could not get current file position",
    ErrorCode.FSTREAM_WRITE_FAILURE: "Could not write data to file",
    ErrorCode.FS_CHMOD_FAILURE: "Could not set file permissions",
    ErrorCode.FS_GTMOD_FAILURE: "Could not query file permissions",
    ErrorCode.FS_MKDIR_FAILURE: "Could not create directory at the specified location",
    ErrorCode.FS_READLINK_FAILURE: "Could not query symbolic link of file",
    ErrorCode.FS_RM_FAILURE: "Could not delete file/directory",
    ErrorCode.FS_SYMLINK_FAILURE: "Could not create symbolic link",
    ErrorCode.FS_WALKDIR_FAILURE: "Could not iterate over the files at the specified location",
    ErrorCode.GET_APP_DIRECTORY_FAILURE: "Could not get application directory",
    ErrorCode.LOAD_UNSUPPORTED_URI: (
        "Could not load repository from this URI; either this protocol "
        "is not supported or it was not recognized"
    ),
    ErrorCode.MEM_ALLOC_FAILURE: "Could not allocate memory",
    ErrorCode.NO_TMPDIR: "Could not find a suitable directory for storing temporary files",
    ErrorCode.PACKAGE_DEPENDENCY_LOOP: "Dependency loop",
    ErrorCode.PACKAGE_MISSING_FILENAME: "The metadata section of this package is missing the 'Filename' field",
    ErrorCode.PACKAGE_MISSING_NAME: "The metadata section of this package is missing the 'Package' field",
    ErrorCode.PACKAGE_MISSING_VERSION: "The metadata section of this package is missing the 'Version' field",
    ErrorCode.PACKAGE_SECTION_INVALID: "The metadata section of this package is invalid",
    ErrorCode.PACKAGE_UNSATISFIED_DEPENDENCY: "This package has an unsatisfiable dependency",
    ErrorCode.PATCHELF_INIT_FAILURE: "Could not initialize the patchelf utility",
    ErrorCode.PKG_DATA_FILE_MISSING: "Could not find the 'data.tar' file inside the package archive",
    ErrorCode.PKG_METADATA_WRITE_FAILURE: "Could not write package metadata",
    ErrorCode.PKG_RESOLVE_URI_FAILURE: "Could not resolve URI to a valid resource",
    ErrorCode.PLATFORM_UNKNOWN: "Cannot detect current platform",
    ErrorCode.REPO_CONF_MISSING_FIELD: "This configuration file is missing required fields",
    ErrorCode.REPO_CONF_PARSE_FAILURE: "Could not parse repository source list file",
    ErrorCode.REPO_GET_CONFDIR_FAILURE: "Could not get configuration directory",
    ErrorCode.REPO_GET_PKGSDIR_FAILURE: "Could not get packages directory",
    ErrorCode.REPO_GET_SRCDIR_FAILURE: "Could not get sources directory",
    ErrorCode.REPO_LOAD_NO_SOURCES_AVAILABLE: "No sources have been configured in /etc/nouzen",
    ErrorCode.REPO_LOAD_UNSUPPORTED_URI: (
        "Could not load repository index from this URI; either this protocol "
        "is not supported or it was not recognized"
    ),
    ErrorCode.REPO_PKG_INDEX_TOO_LARGE: "This package index exceeds the maximum allowed size",
    ErrorCode.REPO_UNKNOWN_ARCHITECTURE: "Unknown repository architecture",
    ErrorCode.WCURLMLT_ADD_FAILURE: "Could not add the cURL handler to cURL multi",
    ErrorCode.WCURLMLT_INIT_FAILURE: "Could not initialize the cURL multi interface",
    ErrorCode.WCURLMLT_PERFORM_FAILURE: "Could not perform on cURL multi",
    ErrorCode.WCURLMLT_POLL_FAILURE: "Could not poll on cURL multi",
    ErrorCode.WCURLMLT_REMOVE_FAILURE: "Could not remove the cURL handler from cURL multi",
    ErrorCode.WCURLMLT_SETOPT_FAILURE: "Could not set options on cURL multi",
    ErrorCode.WCURL_GETINFO_FAILURE: "Could not get info about HTTP transfer",
    ErrorCode.WCURL_INIT_FAILURE: "Could not initialize the HTTP client due to an unexpected error",
    ErrorCode.WCURL_REQUEST_FAILURE: "HTTP request failure",
    ErrorCode.WCURL_SETOPT_FAILURE: "Could not set options on HTTP client",
    ErrorCode.WCURL_SLIST_FAILURE: "Could not append item to list",
}


def error_message(code: int) -> str:
    """Return the human-readable message for an error code."""
    return _MESSAGES.get(int(code), _UNKNOWN)


class NouzenError(Exception):
    """An error that carries one of the package's error codes."""

    def __init__(self, code: int, detail: str | None = None) -> None:
        try:
            self.code: int = ErrorCode(code)
        except ValueError:
            self.code = int(code)
        self.detail = detail
        message = error_message(code)
        super().__init__(f"{message}: {detail}" if detail else message)

    @property
    def message(self) -> str:
        """The message associated with this error's code."""
        return error_message(self.code)