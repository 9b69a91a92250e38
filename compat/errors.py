"""Errors raised by the compatibility resolver.

Only two things are failures: a blank query parameter and an asset that
does not exist. Missing compatibility data is an empty result, never an error.
"""


class CompatError(Exception):
    """Base class; ``status_code`` is what the HTTP layer answers with."""

    status_code = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class NotFound(CompatError):
    status_code = 404


class ValidationError(CompatError):
    status_code = 400
