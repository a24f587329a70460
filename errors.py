"""Errors raised by the tagger and the HTTP status each one maps to."""


class TaggerError(Exception):
    """Base error; rendered by the app as ``{"error": message}``."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(TaggerError):
    """A required request field is missing or empty."""

    status_code = 400


class NotFoundError(TaggerError):
    status_code = 404


class NotDirectoryError(TaggerError):
    """The path exists but is not a directory."""

    status_code = 400


class FileAccessError(TaggerError):
    """Reading or writing a specific file failed."""

    status_code = 500
