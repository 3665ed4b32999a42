# topmark:header:start
#
#   project      : CodegenLint
#   file         : exit_codes.py
#   file_relpath : src/codegenlint/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 CodegenLint contributors
#
# topmark:header:end

"""Standardized exit codes of the ``codegenlint`` CLI.

Values follow the BSD `sysexits` convention where practical. ``WOULD_CHANGE``
(2) signals a dry run that found diagnostics; since Click also exits with 2 on
usage errors, tests assert ``result.exception is None`` to tell them apart.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Exit codes of the ``codegenlint`` CLI.

    Attributes:
        SUCCESS: No diagnostics.
        FAILURE: Diagnostics remain after ``--apply``, or a generic failure.
        WOULD_CHANGE: Dry run found diagnostics.
        USAGE_ERROR: Invalid flags or arguments (``EX_USAGE``).
        ENCODING_ERROR: A document is not valid UTF-8 (``EX_DATAERR``).
        FILE_NOT_FOUND: An input path does not exist (``EX_NOINPUT``).
        UNSUPPORTED_FILE_TYPE: No marker syntax for a named file (``EX_UNAVAILABLE``).
        IO_ERROR: A document could not be read or written (``EX_IOERR``).
        PERMISSION_DENIED: Insufficient permissions (``EX_NOPERM``).
        CONFIG_ERROR: Invalid config or preset modules (``EX_CONFIG``).
        UNEXPECTED_ERROR: Last resort.
    """

    SUCCESS = 0
    FAILURE = 1
    WOULD_CHANGE = 2

    USAGE_ERROR = 64  # EX_USAGE
    ENCODING_ERROR = 65  # EX_DATAERR
    FILE_NOT_FOUND = 66  # EX_NOINPUT
    UNSUPPORTED_FILE_TYPE = 69  # EX_UNAVAILABLE
    IO_ERROR = 74  # EX_IOERR
    PERMISSION_DENIED = 77  # EX_NOPERM
    CONFIG_ERROR = 78  # EX_CONFIG

    UNEXPECTED_ERROR = 255
