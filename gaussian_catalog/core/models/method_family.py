"""Method Family: a family of computational methods (e.g. Hartree-Fock, DFT)."""

from dataclasses import dataclass
from typing import ClassVar, Tuple

from gaussian_catalog.core.models.base import CatalogEntity
from gaussian_catalog.core.models.records import MethodFamilyRecord


@dataclass(kw_only=True)
class MethodFamilyFullModel(CatalogEntity):
    """A Method Family with all of its details.

    Method Families have no related entities, so the Full model doubles as
    the Simple model when stored or sent over the API.
    """

    LABEL_FIELDS: ClassVar[Tuple[str, ...]] = ("name",)

    name: str = ""

    def to_record(self) -> MethodFamilyRecord:
        """Convert to a record containing the id and name."""
        return MethodFamilyRecord(self.id, self.name)

    def __str__(self) -> str:
        return self.name
