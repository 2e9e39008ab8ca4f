"""Exceptions raised by the permission catalog."""

from typing import Any, Iterable


class CatalogError(Exception):
    """Base class for permission catalog errors."""


class InvalidPermissionIdentifierError(CatalogError, ValueError):
    """Raised when a lookup is given an empty, blank or non-string identifier."""

    def __init__(self, identifier: Any):
        super().__init__(f"Invalid permission identifier: {identifier!r}")
        self.identifier = identifier


class InvalidCategoryError(CatalogError, ValueError):
    """Raised when a category name does not match any known category."""

    def __init__(self, category: Any):
        super().__init__(f"Invalid permission category: {category!r}")
        self.category = category


class DuplicatePermissionError(CatalogError, ValueError):
    """Raised when a catalog is built with the same identifier twice."""

    def __init__(self, identifier: str):
        super().__init__(f"Duplicate permission identifier: {identifier}")
        self.identifier = identifier


class PermissionNotFoundError(CatalogError, LookupError):
    """Raised when a well-formed identifier is not in the catalog."""

    def __init__(self, identifier: str):
        super().__init__(f"Unknown permission: {identifier}")
        self.identifier = identifier


class UnknownScopeError(PermissionNotFoundError):
    """Raised by strict scope validation when identifiers are unknown."""

    def __init__(self, identifiers: Iterable[str]):
        self.identifiers = tuple(identifiers)
        CatalogError.__init__(
            self, f"Unknown permissions in scope: {', '.join(self.identifiers)}"
        )
        self.identifier = self.identifiers[0] if self.identifiers else ""
