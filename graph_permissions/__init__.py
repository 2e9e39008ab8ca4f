"""graph-permissions: catalog of Facebook Graph API login permissions."""

from .catalog import (
    Category,
    PermissionCatalog,
    PermissionDefinition,
    ReviewRequirement,
    get_catalog,
)

__version__ = "1.0.0"

__all__ = [
    "Category",
    "PermissionCatalog",
    "PermissionDefinition",
    "ReviewRequirement",
    "get_catalog",
]
