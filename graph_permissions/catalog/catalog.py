"""Permission catalog: enumeration, lookup and grouping of definitions.

The catalog is built once from a literal table and never changes afterwards.
All collections it hands out are tuples, frozensets or read-only mapping
proxies, so it can be shared between threads without locking.
"""

from types import MappingProxyType
from typing import Any, Dict, FrozenSet, Iterable, Iterator, List, Mapping, Optional, Tuple, Union

from ..common.logger import get_logger
from .definitions import PERMISSION_TABLE, Category, PermissionDefinition
from .errors import (
    DuplicatePermissionError,
    InvalidCategoryError,
    InvalidPermissionIdentifierError,
    PermissionNotFoundError,
)

logger = get_logger("catalog")


def _check_identifier(identifier: Any) -> str:
    """Reject identifiers that cannot name a permission."""
    if not isinstance(identifier, str) or not identifier.strip():
        raise InvalidPermissionIdentifierError(identifier)
    return identifier


def coerce_category(category: Union[Category, str]) -> Category:
    """Resolve a Category from an enum member or its name.

    Names are matched case-insensitively ("user_data" and "USER_DATA" both
    resolve to Category.USER_DATA).

    Raises:
        InvalidCategoryError: If no category has that name
    """
    if isinstance(category, Category):
        return category
    if isinstance(category, str):
        try:
            return Category[category.strip().upper()]
        except KeyError:
            pass
    raise InvalidCategoryError(category)


class PermissionCatalog:
    """Immutable, ordered set of permission definitions keyed by identifier."""

    def __init__(self, definitions: Iterable[PermissionDefinition]):
        """
        Build the catalog and its indexes.

        Args:
            definitions: Permission definitions in display order

        Raises:
            DuplicatePermissionError: If two definitions share an identifier
            InvalidCategoryError: If a category is not a known Category name
        """
        by_identifier: Dict[str, PermissionDefinition] = {}
        by_category: Dict[Category, List[PermissionDefinition]] = {
            category: [] for category in Category
        }
        for definition in definitions:
            category = coerce_category(definition.category)
            if category is not definition.category:
                definition = definition._replace(category=category)
            if definition.identifier in by_identifier:
                raise DuplicatePermissionError(definition.identifier)
            by_identifier[definition.identifier] = definition
            by_category[definition.category].append(definition)

        self._definitions: Tuple[PermissionDefinition, ...] = tuple(by_identifier.values())
        self._by_identifier = MappingProxyType(by_identifier)
        self._by_category = MappingProxyType(
            {category: tuple(members) for category, members in by_category.items()}
        )
        self._wire_identifiers = frozenset(by_identifier)
        logger.debug(f"Built permission catalog with {len(self._definitions)} entries")

    def __len__(self) -> int:
        return len(self._definitions)

    def __iter__(self) -> Iterator[PermissionDefinition]:
        return iter(self._definitions)

    def __contains__(self, identifier: object) -> bool:
        return isinstance(identifier, str) and identifier in self._by_identifier

    def __repr__(self) -> str:
        return f"PermissionCatalog({len(self._definitions)} permissions)"

    def all(self) -> Tuple[PermissionDefinition, ...]:
        """Return every definition in declaration order."""
        return self._definitions

    def by_identifier(self, identifier: str) -> Optional[PermissionDefinition]:
        """Look up a definition by its exact wire identifier.

        Args:
            identifier: Wire identifier, matched case-sensitively

        Returns:
            The matching definition, or None if the catalog does not know it

        Raises:
            InvalidPermissionIdentifierError: If identifier is empty or blank
        """
        return self._by_identifier.get(_check_identifier(identifier))

    def get(self, identifier: str) -> PermissionDefinition:
        """Look up a definition, raising if it is unknown.

        Raises:
            InvalidPermissionIdentifierError: If identifier is empty or blank
            PermissionNotFoundError: If the catalog does not know it
        """
        definition = self.by_identifier(identifier)
        if definition is None:
            raise PermissionNotFoundError(identifier)
        return definition

    def by_category(self, category: Union[Category, str]) -> Tuple[PermissionDefinition, ...]:
        """Return the definitions of one category in catalog order.

        An unused category yields an empty tuple.

        Raises:
            InvalidCategoryError: If category names no known category
        """
        return self._by_category[coerce_category(category)]

    def categories(self) -> FrozenSet[Category]:
        """Return every category, whether or not it has members."""
        return frozenset(Category)

    def wire_identifiers(self) -> FrozenSet[str]:
        """Return the set of all wire identifiers."""
        return self._wire_identifiers

    def grouped(self) -> Mapping[Category, Tuple[PermissionDefinition, ...]]:
        """Return a read-only mapping of every category to its definitions."""
        return self._by_category

    def introduced_in(self, version: str) -> Tuple[PermissionDefinition, ...]:
        """Return the definitions added in exactly the given Graph API version."""
        return tuple(d for d in self._definitions if d.introduced_in_version == version)

    def requiring_review(self) -> Tuple[PermissionDefinition, ...]:
        """Return the definitions that need App Review before production use."""
        return tuple(d for d in self._definitions if d.requires_review)


# Graph API catalog shared by the whole process
DEFAULT_CATALOG = PermissionCatalog(PERMISSION_TABLE)


def get_catalog() -> PermissionCatalog:
    """Get the default Graph API permission catalog.

    Returns:
        Global PermissionCatalog instance
    """
    return DEFAULT_CATALOG


def all_permissions() -> Tuple[PermissionDefinition, ...]:
    """Return every definition of the default catalog."""
    return DEFAULT_CATALOG.all()


def get_permission(identifier: str) -> Optional[PermissionDefinition]:
    """Look up a definition in the default catalog.

    Convenience function that uses the global catalog.

    Args:
        identifier: Wire identifier

    Returns:
        PermissionDefinition or None if not found
    """
    return DEFAULT_CATALOG.by_identifier(identifier)


def get_permissions_for_category(
    category: Union[Category, str],
) -> Tuple[PermissionDefinition, ...]:
    """Get the definitions of a category from the default catalog."""
    return DEFAULT_CATALOG.by_category(category)


def is_valid_permission(identifier: str) -> bool:
    """Check if a wire identifier is known to the default catalog."""
    return identifier in DEFAULT_CATALOG
