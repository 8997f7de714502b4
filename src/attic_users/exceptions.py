"""
Errors raised by attic-users.

Every error carries what failed and why; the CLI prints them as
``<what>: <why>`` and exits non-zero.
"""


class AtticUsersError(Exception):
    """Base exception for attic-users."""

    def __init__(self, what: str, reason: str):
        self.what = what
        self.reason = reason
        super().__init__(f"{what}: {reason}")


class ConfigReadError(AtticUsersError):
    """Raised when the config file cannot be read."""

    def __init__(self, reason: str):
        super().__init__("Unable to read config file", reason)


class ConfigParseError(AtticUsersError):
    """Raised when the config file is malformed or names an unknown permission."""

    def __init__(self, reason: str):
        super().__init__("Unable to parse config", reason)


class UnknownUserError(AtticUsersError):
    """Raised when a requested user has no entry in the config."""

    def __init__(self, user: str):
        self.user = user
        super().__init__("Could not find rules", f"No such user '{user}' in file")


class CommandSpawnError(AtticUsersError):
    """Raised when the admin binary cannot be started."""

    def __init__(self, reason: str):
        super().__init__("Unable to execute command", reason)
