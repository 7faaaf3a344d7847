"""Domain errors raised by services and converted to HTTP responses by the API."""


class JobBoardError(Exception):
    """Base error carrying a human-readable message."""

    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class AuthError(JobBoardError):
    """Bad credentials, duplicate sign-up, expired or unknown tokens."""

    def __init__(self, message: str, status_code: int = 400):
        super().__init__(message)
        self.status_code = status_code


class NotFound(JobBoardError):
    status_code = 404


class PermissionDenied(JobBoardError):
    status_code = 403


class RoleUndetermined(JobBoardError):
    """Identity has neither a seeker nor an employer profile."""

    status_code = 409

    def __init__(self, identity_id: str):
        super().__init__("Account has no seeker or employer profile")
        self.identity_id = identity_id


class StoreError(JobBoardError):
    """Backend failure on a read or write; safe to retry."""

    status_code = 503
