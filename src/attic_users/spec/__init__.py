from attic_users.spec.config import (
    Configuration,
    UserConfig,
    UserRecord,
    load_configuration,
    parse_toml,
    parse_yaml,
    render_example,
)
from attic_users.spec.permission import (
    CachePermission,
    CachePermissionExtended,
    expand,
    expand_all,
)
from attic_users.spec.rule import CacheRule, RuleRecord

__all__ = [
    "CachePermission",
    "CachePermissionExtended",
    "CacheRule",
    "Configuration",
    "RuleRecord",
    "UserConfig",
    "UserRecord",
    "expand",
    "expand_all",
    "load_configuration",
    "parse_toml",
    "parse_yaml",
    "render_example",
]
