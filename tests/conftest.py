"""Pytest configuration and shared fixtures."""

import pytest

from graph_permissions.catalog import (
    Category,
    PermissionCatalog,
    PermissionDefinition,
    ReviewRequirement,
    get_catalog,
)


@pytest.fixture
def catalog():
    """The default Graph API permission catalog."""
    return get_catalog()


@pytest.fixture
def small_catalog():
    """A three-entry catalog that leaves most categories empty."""
    return PermissionCatalog([
        PermissionDefinition("public_profile", Category.PUBLIC, "Public profile",
                             review=ReviewRequirement.NOT_REQUIRED),
        PermissionDefinition("user_posts", Category.USER_DATA, "Timeline posts",
                             review=ReviewRequirement.REQUIRED),
        PermissionDefinition("user_link", Category.USER_DATA, "Profile URL", "3.0",
                             ReviewRequirement.REQUIRED),
    ])


@pytest.fixture
def sample_config():
    """Sample configuration dictionary."""
    return {
        "logging": {
            "level": "debug",
            "log_dir": "/tmp/graph-permissions/logs",
            "file_logging": False,
            "console_logging": False,
        },
        "scopes": {
            "strict": True,
            "warn_on_review": False,
        },
        "export": {
            "default_format": "json",
        },
    }


@pytest.fixture
def config_file(tmp_path):
    """Config file that keeps CLI runs quiet and file-free."""
    path = tmp_path / "config.yaml"
    path.write_text(
        "logging:\n"
        "  level: WARNING\n"
        "  console_logging: false\n"
        "  file_logging: false\n"
    )
    return str(path)
