import logging
from dataclasses import dataclass
from typing import Optional

from attic_users.exceptions import UnknownUserError
from attic_users.spec.config import Configuration, UserConfig

logger = logging.getLogger(__name__)

DEFAULT_PROGRAM = "atticadm"
DEFAULT_VALIDITY = "2 years"


@dataclass(frozen=True)
class TokenCommand:
    """A ``make-token`` invocation for one user."""

    user: str
    program: str
    args: tuple[str, ...]

    @property
    def argv(self) -> list[str]:
        return [self.program, *self.args]


def generate_command(
    config: Configuration,
    user: str,
    program: str = DEFAULT_PROGRAM,
    validity: str = DEFAULT_VALIDITY,
) -> TokenCommand:
    """Build the token command for one user.

    Each permission of each rule contributes its flag followed by the
    rule's pattern, keeping the order of the config file.

    Raises:
        UnknownUserError: If the user has no entry in the config
    """
    user_config = config.user(user)
    if user_config is None:
        raise UnknownUserError(user)
    return build_command(user_config, program, validity)


def build_command(
    user_config: UserConfig,
    program: str = DEFAULT_PROGRAM,
    validity: str = DEFAULT_VALIDITY,
) -> TokenCommand:
    args = ["make-token", "--sub", user_config.name, "--validity", validity]
    for rule in user_config.rules:
        for permission in rule.permissions:
            args.extend([permission.flag, rule.pattern])

    return TokenCommand(user=user_config.name, program=program, args=tuple(args))


def generate_commands(
    config: Configuration,
    user: Optional[str] = None,
    program: str = DEFAULT_PROGRAM,
    validity: str = DEFAULT_VALIDITY,
) -> list[TokenCommand]:
    """Build commands for ``user``, or for every user when it is None."""
    if user is not None:
        commands = [generate_command(config, user, program, validity)]
    else:
        commands = [
            build_command(user_config, program, validity)
            for user_config in config.user_configs()
        ]
    logger.debug(f"Generated {len(commands)} command(s)")
    return commands
