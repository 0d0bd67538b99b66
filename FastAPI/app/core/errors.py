"""Domain errors raised by services and rendered by the API as ``{"error": message}``."""


class DomainError(Exception):
    status_code = 400
    default_message = "Request could not be processed"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidInput(DomainError):
    status_code = 400
    default_message = "Invalid input"


class NotFound(DomainError):
    status_code = 404
    default_message = "Not found"


class Forbidden(DomainError):
    status_code = 403
    default_message = "Unauthorized access"


class Unauthenticated(DomainError):
    status_code = 401
    default_message = "Not authenticated"


class InvalidToken(DomainError):
    status_code = 401
    default_message = "Invalid or expired token"


class InvalidCredentials(DomainError):
    status_code = 401
    default_message = "Invalid email or password"


class MissingFilter(DomainError):
    status_code = 405
    default_message = "A search parameter must exist while browsing Job Offers"
