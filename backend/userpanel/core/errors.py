"""
Domain exceptions raised by the user store and service layer.

Routers translate these into HTTP responses; store errors are left to the
application-wide handler in ``userpanel.main``.
"""


class UserPanelError(Exception):
    """Base class for all application errors."""


class UserNotFoundError(UserPanelError):
    """The referenced username is not in the collection."""


class DuplicateUserError(UserPanelError):
    """The username is already taken by another record."""


class AuthenticationError(UserPanelError):
    """Credentials or the admin secret did not match."""


class InvalidInputError(UserPanelError):
    """A required request field is missing or empty."""


class StoreError(UserPanelError):
    """The backing document could not be read, parsed or written."""


class StoreReadError(StoreError):
    pass


class StoreParseError(StoreError):
    pass


class StoreWriteError(StoreError):
    pass
