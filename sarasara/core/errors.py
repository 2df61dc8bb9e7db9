"""Exceptions raised while building feeds and resolving audio."""


class SarasaraError(Exception):
    """Base class for errors raised by sarasara."""


class ProgramNotFoundError(SarasaraError):
    """The upstream program endpoint answered with a non-200 status."""

    def __init__(self, program: str, status_code: int):
        self.program = program
        self.status_code = status_code
        super().__init__(f"Program '{program}' not found upstream (status {status_code})")


class ProgramFetchError(SarasaraError):
    """The program could not be fetched or its JSON could not be parsed."""


class AudioFetchError(SarasaraError):
    """A network error occurred while resolving an audio URL."""


class InvalidUrlError(SarasaraError, ValueError):
    """A value could not be parsed as an absolute URL."""
