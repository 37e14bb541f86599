"""Domain errors raised by the auth workflow and translated to responses in main."""

from fastapi import status


class AppError(Exception):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "Internal server error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)

    def to_body(self) -> dict:
        return {"message": self.message}


REQUEST_LOCATIONS = {"body", "query", "path", "header", "cookie"}


def field_errors(raw_errors) -> list[dict]:
    """Flatten pydantic error dicts into ``{field, message}`` pairs."""
    errors = []
    for error in raw_errors:
        loc = [str(part) for part in error.get("loc", ())]
        if loc and loc[0] in REQUEST_LOCATIONS:
            loc = loc[1:]
        message = str(error.get("msg", "Invalid value"))
        if message.startswith("Value error, "):
            message = message[len("Value error, "):]
        errors.append({"field": ".".join(loc), "message": message})
    return errors


class ValidationError(AppError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid request"

    def __init__(self, errors: list[dict], message: str | None = None):
        super().__init__(message)
        self.errors = errors

    def to_body(self) -> dict:
        return {"message": self.message, "errors": self.errors}


# Duplicate sign-ups answer 401, not 409.
class ConflictError(AppError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "User already registered"


class NotRegisteredError(AppError):
    status_code = status.HTTP_409_CONFLICT
    default_message = "User not registered"


class InvalidCredentialsError(AppError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Invalid password"


class InvalidTokenError(AppError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Invalid token"


class UnauthenticatedError(AppError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Not authenticated"


class HashingError(AppError):
    default_message = "Failed to process password"

    def to_body(self) -> dict:
        return {"message": InternalError.default_message}


class InternalError(AppError):
    pass
