"""Record shapes: the minimal id + label projection of each entity."""

from dataclasses import dataclass
from typing import Optional

from gaussian_catalog.core.models.base import Serializable, display_label


@dataclass(frozen=True)
class MethodFamilyRecord(Serializable):
    """A family of computational methods, by id and name."""

    id: int
    name: str

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class SpinStateRecord(Serializable):
    """A spin state, by id, name and keyword."""

    id: int
    name: Optional[str] = None
    keyword: Optional[str] = None

    def __str__(self) -> str:
        return display_label(self.name, self.keyword)


@dataclass(frozen=True)
class ElectronicStateRecord(Serializable):
    """An electronic state, by id, name and keyword."""

    id: int
    name: Optional[str] = None
    keyword: Optional[str] = None

    def __str__(self) -> str:
        return display_label(self.name, self.keyword)


@dataclass(frozen=True)
class CalculationTypeRecord(Serializable):
    id: int
    name: str
    keyword: str

    def __str__(self) -> str:
        return f"{self.name} ({self.keyword})"


@dataclass(frozen=True)
class BaseMethodRecord(Serializable):
    id: int
    keyword: str

    def __str__(self) -> str:
        return self.keyword


@dataclass(frozen=True)
class ElectronicStateMethodFamilyRecord(Serializable):
    id: int
    name: Optional[str] = None
    keyword: Optional[str] = None

    def __str__(self) -> str:
        return display_label(self.name, self.keyword)


@dataclass(frozen=True)
class SpinStateElectronicStateMethodFamilyRecord(Serializable):
    id: int
    name: Optional[str] = None
    keyword: Optional[str] = None

    def __str__(self) -> str:
        return display_label(self.name, self.keyword)


@dataclass(frozen=True)
class FullMethodRecord(Serializable):
    id: int
    keyword: str

    def __str__(self) -> str:
        return self.keyword
