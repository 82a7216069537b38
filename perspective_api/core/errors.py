"""Root of the perspective-client exception hierarchy."""


class PerspectiveError(Exception):
    """Base class for every error the client raises on its own behalf.

    Transport failures from ``requests`` are not wrapped and never appear
    here. `retriable` hints whether repeating the same call may succeed.
    """

    def __init__(self, message: str, retriable: bool = False) -> None:
        super().__init__(message)
        self.message = message
        self.retriable = retriable
