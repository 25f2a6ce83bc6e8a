# warm_admin/core/exceptions.py
"""Error types shared by the provisioner and the login client."""


class AdminError(Exception):
    """Base class for every error raised by warm_admin."""


class ConnectivityError(AdminError):
    """The database could not be reached or the connection was rejected."""


class PersistenceError(AdminError):
    """A schema or row operation failed inside the database."""


class ValidationError(AdminError):
    """Login form input is incomplete; raised before any network call."""

    def __init__(self, message: str, fields=None):
        super().__init__(message)
        self.fields = list(fields or [])


class AuthenticationFailure(AdminError):
    """The login endpoint rejected the credentials or could not be reached."""

    def __init__(self, message: str, status_code=None):
        super().__init__(message)
        self.status_code = status_code
