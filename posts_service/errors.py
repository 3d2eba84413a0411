from fastapi import status


class PostServiceError(Exception):
    """Base error; carries the HTTP status and the message shown to the caller."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(PostServiceError):
    """Caller-supplied input is missing a required field."""

    status_code = status.HTTP_400_BAD_REQUEST


class StoreUnavailable(PostServiceError):
    """Any failure talking to DynamoDB. Detail stays in the server log."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
