"""Domain errors. Each carries the HTTP status and a client-safe message."""


class AppError(Exception):
    status_code = 500
    default_message = "Server error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(AppError):
    status_code = 400
    default_message = "Missing fields"


class ConflictError(AppError):
    status_code = 409
    default_message = "Already exists"


class AuthError(AppError):
    status_code = 401
    default_message = "Unauthorized"


class NotFoundError(AppError):
    status_code = 404
    default_message = "Not found"


class StoreError(AppError):
    status_code = 500
    default_message = "DB error"
