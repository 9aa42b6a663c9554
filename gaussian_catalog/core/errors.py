"""Exceptions raised by the catalog domain and storage layers."""

from typing import Optional


class CatalogError(Exception):
    """Base class for catalog errors."""


class NullParameterError(CatalogError, ValueError):
    """Raised when a required parameter is None."""

    def __init__(self, param_name: Optional[str] = None, message: Optional[str] = None):
        super().__init__(message or "A required parameter is null.")
        self.param_name = param_name


class ValueInUseError(CatalogError):
    """Raised when deleting an object that still has related records."""

    def __init__(self, object_name: Optional[str] = None, message: Optional[str] = None):
        if message is None:
            if object_name:
                message = f"Cannot delete object {object_name} because it has related records."
            else:
                message = "Cannot delete this object because it has related records."
        super().__init__(message)
        self.object_name = object_name


class EntityNotFoundError(CatalogError, LookupError):
    """Raised when an entity with the requested id does not exist."""

    def __init__(self, entity_name: str, entity_id: int):
        super().__init__(f"No {entity_name} exists with the supplied Id {entity_id}.")
        self.entity_name = entity_name
        self.entity_id = entity_id


class DuplicateValueError(CatalogError):
    """Raised when a name and keyword pair is already taken by another entity."""

    def __init__(
        self, entity_name: str, name: Optional[str], keyword: Optional[str]
    ):
        super().__init__(
            f"A {entity_name} with Name {name!r} and Keyword {keyword!r} already exists."
        )
        self.entity_name = entity_name
        self.name = name
        self.keyword = keyword
