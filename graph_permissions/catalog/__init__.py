"""Facebook Graph API permission catalog.

This module defines the permission records, the immutable catalog built from
them, scope validation and documentation export.
"""

from .definitions import Category, PermissionDefinition, ReviewRequirement, PERMISSION_TABLE
from .catalog import (
    DEFAULT_CATALOG,
    PermissionCatalog,
    all_permissions,
    coerce_category,
    get_catalog,
    get_permission,
    get_permissions_for_category,
    is_valid_permission,
)
from .errors import (
    CatalogError,
    DuplicatePermissionError,
    InvalidCategoryError,
    InvalidPermissionIdentifierError,
    PermissionNotFoundError,
    UnknownScopeError,
)
from .export import ExportFormat, PermissionRecord, export_permissions, to_records
from .scopes import ScopeValidationResult, ScopeValidator, format_scope, parse_scope, validate_scope

__all__ = [
    "Category",
    "PermissionDefinition",
    "ReviewRequirement",
    "PERMISSION_TABLE",
    "DEFAULT_CATALOG",
    "PermissionCatalog",
    "all_permissions",
    "coerce_category",
    "get_catalog",
    "get_permission",
    "get_permissions_for_category",
    "is_valid_permission",
    "CatalogError",
    "DuplicatePermissionError",
    "InvalidCategoryError",
    "InvalidPermissionIdentifierError",
    "PermissionNotFoundError",
    "UnknownScopeError",
    "ExportFormat",
    "PermissionRecord",
    "export_permissions",
    "to_records",
    "ScopeValidationResult",
    "ScopeValidator",
    "format_scope",
    "parse_scope",
    "validate_scope",
]
