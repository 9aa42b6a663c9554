"""Shared building blocks for the catalog entity shapes.

Every catalog entity exists in up to four shapes:

- Record: id and label(s) only, for drop-downs and foreign-key display.
- Simple: related entities referenced by id.
- Intermediate: related entities embedded as Records.
- Full: related entities embedded as Full models.

The shapes of one entity share the same common attributes (id, descriptions,
timestamps, archived flag) plus their label fields, and every conversion
copies those values unchanged. ``CatalogEntity.common_values`` is the single
place that copy happens.
"""

import typing
from dataclasses import dataclass, field, fields
from datetime import datetime, timezone
from typing import Any, ClassVar, Dict, Optional, Tuple, TypeVar

from gaussian_catalog.core.errors import NullParameterError

# Attributes carried unchanged by every conversion, in addition to the labels
COMMON_FIELDS: Tuple[str, ...] = (
    "id",
    "description_rtf",
    "description_text",
    "created_date",
    "last_updated_date",
    "archived",
)

T = TypeVar("T")


def require(value: Optional[T], param_name: str) -> T:
    """Return ``value``, raising NullParameterError if it is None.

    Args:
        value: The value to check
        param_name: Name reported in the error

    Returns:
        The value itself
    """
    if value is None:
        raise NullParameterError(
            param_name, f"The parameter {param_name} cannot be null."
        )
    return value


def utc_now() -> datetime:
    """The current UTC time as a naive datetime, the form stored in the database."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def display_label(name: Optional[str], keyword: Optional[str]) -> str:
    """Render an entity that has an optional name and an optional keyword.

    Returns the keyword if the name is blank, the name if the keyword is
    blank, and "Name/Keyword" otherwise.
    """
    if is_blank(name):
        return keyword or ""
    if is_blank(keyword):
        return name or ""
    return f"{name}/{keyword}"


def _serialize(value: Any) -> Any:
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, Serializable):
        return value.to_dict()
    return value


def _deserialize(hint: Any, value: Any) -> Any:
    if value is None:
        return None

    # Optional[X] -> X
    if typing.get_origin(hint) is typing.Union:
        candidates = [arg for arg in typing.get_args(hint) if arg is not type(None)]
        hint = candidates[0] if len(candidates) == 1 else Any

    if hint is datetime and isinstance(value, str):
        return datetime.fromisoformat(value)
    if (
        isinstance(hint, type)
        and issubclass(hint, Serializable)
        and isinstance(value, dict)
    ):
        return hint.from_dict(value)
    return value


class Serializable:
    """Mixin giving dataclass shapes a JSON-friendly dict form."""

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a dictionary for API responses.

        Datetimes become ISO-8601 strings and embedded shapes become nested
        dictionaries.
        """
        return {f.name: _serialize(getattr(self, f.name)) for f in fields(self)}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]):
        """Rebuild a shape from ``to_dict`` output (or an API payload).

        Nested shapes are rebuilt from the field annotations, and keys that do
        not correspond to a field are ignored.
        """
        hints = typing.get_type_hints(cls)
        kwargs = {
            f.name: _deserialize(hints[f.name], data[f.name])
            for f in fields(cls)
            if f.init and f.name in data
        }
        return cls(**kwargs)


@dataclass(kw_only=True)
class CatalogEntity(Serializable):
    """Attributes shared by the Simple, Intermediate and Full shapes.

    Subclasses declare their label fields in ``LABEL_FIELDS`` and the
    relationship fields that may never be None in ``REQUIRED_RELATIONS``.
    """

    LABEL_FIELDS: ClassVar[Tuple[str, ...]] = ()
    REQUIRED_RELATIONS: ClassVar[Tuple[str, ...]] = ()

    id: int = 0
    description_rtf: Optional[str] = None
    description_text: Optional[str] = None
    created_date: datetime = field(default_factory=utc_now)
    last_updated_date: datetime = field(default_factory=utc_now)
    archived: bool = False

    def __post_init__(self):
        for relation in self.REQUIRED_RELATIONS:
            require(getattr(self, relation), relation)

    def common_values(self) -> Dict[str, Any]:
        """Values every conversion copies unchanged: common attributes plus labels."""
        return {name: getattr(self, name) for name in COMMON_FIELDS + self.LABEL_FIELDS}
