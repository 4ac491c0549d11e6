from fastapi import status


class AppError(Exception):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(AppError):
    """Missing or malformed role / profile field."""
    status_code = status.HTTP_400_BAD_REQUEST


class ConflictError(AppError):
    """Email already registered."""
    status_code = status.HTTP_400_BAD_REQUEST


class AuthError(AppError):
    """Unknown email or wrong password."""
    status_code = status.HTTP_401_UNAUTHORIZED


class InvalidSessionError(AppError):
    """Missing, expired or unparseable session id (or identity token)."""
    status_code = status.HTTP_401_UNAUTHORIZED

    def __init__(self, message: str = "Invalid session cookie"):
        super().__init__(message)


class InternalError(AppError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str = "Internal server error"):
        super().__init__(message)


class DuplicateEmailError(Exception):
    """Raised by the credential store when the unique email index rejects an insert."""

    def __init__(self, email: str):
        super().__init__(f"Email already stored: {email}")
        self.email = email
