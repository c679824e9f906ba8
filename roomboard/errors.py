"""Error taxonomy shared by the stores, the organization engine and the API."""


class BoardError(Exception):
    code = "board_error"
    status_code = 500
    retryable = False

    def __init__(self, message: str, **context):
        super().__init__(message)
        self.message = message
        self.context = context


class NotFound(BoardError):
    code = "not_found"
    status_code = 404


class InvalidReference(BoardError):
    """A room or section id that points into a different project."""

    code = "invalid_reference"
    status_code = 400


class ValidationError(BoardError):
    code = "validation_error"
    status_code = 422


class Conflict(BoardError):
    code = "section_not_empty"
    status_code = 409

    def __init__(self, message: str, blocking_rooms: int):
        super().__init__(message, blocking_rooms=blocking_rooms)
        self.blocking_rooms = blocking_rooms


class PartialFailure(BoardError):
    """The second write of an order swap failed after the first was committed.

    The bucket still holds a valid total order. Callers should re-fetch the
    board before issuing another reorder.
    """

    code = "partial_failure"
    status_code = 503
    retryable = True
