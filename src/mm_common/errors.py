"""Unified error codes and custom exceptions.

Error code ranges:
  1xxx: Request validation (InvalidRequest)
  9xxx: System
"""


class AppError(Exception):
    """Base application error."""

    def __init__(
        self,
        code: int,
        message: str,
        http_status: int = 500,
    ) -> None:
        self.code = code
        self.message = message
        self.http_status = http_status
        super().__init__(message)


# --- 1xxx: InvalidRequest ---

class InvalidRequestError(AppError):
    def __init__(self, detail: str = "Invalid request", code: int = 1001) -> None:
        super().__init__(code, detail, 400)


class MissingIdentityError(InvalidRequestError):
    def __init__(self) -> None:
        super().__init__("Missing player identity", 1002)


class UnknownGameError(InvalidRequestError):
    def __init__(self, game: object) -> None:
        super().__init__(f"Invalid game: {game}", 1003)
