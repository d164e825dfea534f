"""Numeric process exit codes used by the ``narwhalol`` CLI.

Each constant maps to a failure category and is referenced by the
corresponding :class:`~narwhalol.exceptions.NarwhalError` subclass.
Shell scripts can branch on the exit code without parsing stderr.

Example::

    $ narwhalol --region na summoner "Nobody Here"
    $ echo $?
    4   # EXIT_NOT_FOUND -- the API answered 404
"""

EXIT_SUCCESS = 0
"""The command completed successfully."""

EXIT_GENERIC_FAILURE = 1
"""An unclassified error occurred."""

EXIT_BAD_REQUEST = 2
"""The API rejected the request itself (400, 405, 415)."""

EXIT_AUTH_FAILURE = 3
"""The API key was rejected (401, 403)."""

EXIT_NOT_FOUND = 4
"""The requested resource does not exist (HTTP 404)."""

EXIT_SERVER_ERROR = 5
"""The remote API returned an HTTP 5xx error."""

EXIT_CONNECTION_ERROR = 6
"""A network-level error occurred before a status code was received."""

EXIT_RATE_LIMITED = 7
"""The API answered 429 Too Many Requests."""

EXIT_CONFIG_ERROR = 8
"""The API key or another setting is missing or malformed."""

EXIT_DESERIALIZATION_ERROR = 9
"""The API answered 2xx with a body that does not match the expected shape."""
