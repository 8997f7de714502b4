"""Shared test fixtures for attic-users tests."""

import pytest

TOML_CONFIG = """\
[alice]
"alice-*" = ["push", "pull"]

[bob]
"bob-*" = ["use"]
shared = ["pull", "admin"]
"""

YAML_CONFIG = """\
- name: alice
  rules:
    - pattern: alice-*
      permissions: [push, pull]
- name: bob
  rules:
    - pattern: bob-*
      permissions: [use]
    - pattern: shared
      permissions: [pull, admin]
"""


@pytest.fixture(autouse=True)
def clear_attic_env(monkeypatch):
    """Keep ATTIC_USERS_* from the outer environment out of the tests."""
    for var in ("ATTIC_USERS_FILE", "ATTIC_USERS_PROGRAM", "ATTIC_USERS_VALIDITY"):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def toml_config(tmp_path):
    """Create a sample nested-mapping config file."""
    config_path = tmp_path / "attic-users.toml"
    config_path.write_text(TOML_CONFIG)
    return config_path


@pytest.fixture
def yaml_config(tmp_path):
    """Create a sample list-of-records config file."""
    config_path = tmp_path / "attic-users.yaml"
    config_path.write_text(YAML_CONFIG)
    return config_path
