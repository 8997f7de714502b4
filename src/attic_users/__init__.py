__version__ = "0.1.0"

from attic_users.command import TokenCommand, generate_command, generate_commands
from attic_users.exceptions import (
    AtticUsersError,
    CommandSpawnError,
    ConfigParseError,
    ConfigReadError,
    UnknownUserError,
)
from attic_users.executor import execute, execute_all, render
from attic_users.spec import (
    CachePermission,
    CachePermissionExtended,
    CacheRule,
    Configuration,
    load_configuration,
)

__all__ = [
    "AtticUsersError",
    "CachePermission",
    "CachePermissionExtended",
    "CacheRule",
    "CommandSpawnError",
    "ConfigParseError",
    "ConfigReadError",
    "Configuration",
    "TokenCommand",
    "UnknownUserError",
    "execute",
    "execute_all",
    "generate_command",
    "generate_commands",
    "load_configuration",
    "render",
]
