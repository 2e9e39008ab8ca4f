"""Validation of requested login scopes against the permission catalog.

A scope is the list of permission identifiers an app asks for during the
login flow. The Graph API login dialog takes it as a comma separated string,
e.g. ``"email,public_profile,pages_show_list"``.

Unknown identifiers are not an error by default: the platform may add
permissions before the catalog is updated, so the caller decides whether to
forward them or reject them.
"""

from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Tuple, Union

from ..common.logger import get_logger
from .catalog import PermissionCatalog, get_catalog
from .definitions import PermissionDefinition
from .errors import UnknownScopeError

logger = get_logger("scopes")

SCOPE_SEPARATOR = ","


def parse_scope(scope: Union[str, Iterable[str]]) -> Tuple[str, ...]:
    """Split a scope into identifiers.

    Whitespace around items is stripped, empty items and repeats are dropped,
    and first-seen order is kept. Case is left untouched.

    Args:
        scope: Comma separated scope string, or an iterable of identifiers

    Returns:
        Tuple of identifiers
    """
    items = scope.split(SCOPE_SEPARATOR) if isinstance(scope, str) else scope
    seen = {}
    for item in items:
        identifier = str(item).strip()
        if identifier and identifier not in seen:
            seen[identifier] = None
    return tuple(seen)


def format_scope(identifiers: Iterable[Union[str, PermissionDefinition]]) -> str:
    """Join identifiers or definitions into a scope string."""
    return SCOPE_SEPARATOR.join(parse_scope(str(i) for i in identifiers))


@dataclass
class ScopeValidationResult:
    """Outcome of validating a requested scope."""

    known: List[PermissionDefinition] = field(default_factory=list)
    unknown: List[str] = field(default_factory=list)
    review_required: List[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.unknown

    @property
    def identifiers(self) -> Tuple[str, ...]:
        """Known identifiers followed by unknown ones."""
        return tuple(d.identifier for d in self.known) + tuple(self.unknown)


class ScopeValidator:
    """Checks requested scopes against a permission catalog."""

    def __init__(
        self,
        catalog: Optional[PermissionCatalog] = None,
        *,
        strict: bool = False,
        warn_on_review: bool = True,
    ):
        """
        Args:
            catalog: Catalog to validate against (default Graph API catalog)
            strict: Raise UnknownScopeError instead of reporting unknown identifiers
            warn_on_review: Log permissions that need App Review
        """
        self.catalog = catalog if catalog is not None else get_catalog()
        self.strict = strict
        self.warn_on_review = warn_on_review

    def validate(self, scope: Union[str, Iterable[str]]) -> ScopeValidationResult:
        """Validate a requested scope.

        Args:
            scope: Comma separated scope string, or an iterable of identifiers

        Returns:
            ScopeValidationResult with known, unknown and review-required entries

        Raises:
            UnknownScopeError: In strict mode, if any identifier is unknown
        """
        result = ScopeValidationResult()
        for identifier in parse_scope(scope):
            definition = self.catalog.by_identifier(identifier)
            if definition is None:
                result.unknown.append(identifier)
                continue
            result.known.append(definition)
            if definition.requires_review:
                result.review_required.append(identifier)

        if result.unknown:
            logger.warning(
                f"Permissions not recognized by this catalog: {', '.join(result.unknown)}"
            )
            if self.strict:
                raise UnknownScopeError(result.unknown)

        if result.review_required and self.warn_on_review:
            logger.info(
                f"Permissions requiring App Review: {', '.join(result.review_required)}"
            )

        return result

    def is_valid(self, scope: Union[str, Iterable[str]]) -> bool:
        """Check that every identifier in the scope is known."""
        return all(identifier in self.catalog for identifier in parse_scope(scope))


def validate_scope(scope: Union[str, Iterable[str]], strict: bool = False) -> ScopeValidationResult:
    """Validate a scope against the default catalog.

    Convenience function that uses the global catalog.
    """
    return ScopeValidator(strict=strict).validate(scope)
