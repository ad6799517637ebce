# utils/errors.py
# Domain errors raised by the service layer and translated to responses by the routes.


class HandoverError(Exception):
    """Base class for errors handled at the request boundary."""


class DuplicateUserError(HandoverError):
    def __init__(self, username: str):
        super().__init__(f"User '{username}' already exists")
        self.username = username


class InvalidCredentialsError(HandoverError):
    # Same message for unknown users and wrong passwords
    def __init__(self):
        super().__init__("Invalid username or password")


class LoginRequired(HandoverError):
    """No active session on a route behind the session gate."""


class PersistenceError(HandoverError):
    """The store rejected or failed a statement."""


class NotFoundError(HandoverError):
    def __init__(self, resource: str, key):
        super().__init__(f"{resource} {key} not found")
        self.resource = resource
        self.key = key
