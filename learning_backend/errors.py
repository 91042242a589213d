"""Failure kinds raised by the services and rendered by the API gateway.

Every service operation either returns its result or raises one of the
classes below. ``main.py`` maps each class to its fixed status code.
"""


class ServiceError(Exception):
    status_code = 500
    default_message = 'Internal server error.'

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)

    @property
    def headers(self) -> dict[str, str] | None:
        return None


class ValidationError(ServiceError):
    status_code = 400
    default_message = 'Invalid request.'


class Conflict(ServiceError):
    status_code = 409
    default_message = 'Resource already exists.'


class InvalidCredentials(ServiceError):
    status_code = 400
    default_message = 'Invalid credentials.'


class Unauthenticated(ServiceError):
    status_code = 401
    default_message = 'Authentication required.'

    @property
    def headers(self) -> dict[str, str] | None:
        return {'WWW-Authenticate': 'Bearer'}


class Forbidden(ServiceError):
    status_code = 403
    default_message = 'Admin access required.'


class NotFound(ServiceError):
    status_code = 404
    default_message = 'Resource not found.'


class Internal(ServiceError):
    status_code = 500
    default_message = 'Internal server error.'
