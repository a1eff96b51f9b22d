from __future__ import annotations


class SwotWebError(Exception):
    """
    Base class for errors raised by the service layer.
    The web layer maps status_code onto the HTTP response.
    """
    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(SwotWebError):
    status_code = 400


class AuthenticationError(SwotWebError):
    status_code = 401


class NotFoundError(SwotWebError):
    status_code = 404


class ConflictError(SwotWebError):
    status_code = 409
