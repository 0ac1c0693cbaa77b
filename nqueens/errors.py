class NQueensError(Exception):
    """Base class for every error raised by the nqueens package."""


class ConflictError(NQueensError):
    """Two fixed queens share a square or attack each other."""


class BoardFormatError(NQueensError, ValueError):
    """The board text or the queen coordinates are malformed."""


class ClientError(NQueensError):
    """The solver service answered with an unexpected status."""

    def __init__(self, message, status_code=None):
        super().__init__(message)
        self.status_code = status_code
