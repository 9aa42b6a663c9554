"""Electronic State used in Gaussian calculations (e.g. ground state, TD)."""

from dataclasses import dataclass
from typing import ClassVar, Optional, Tuple

from gaussian_catalog.core.models.base import CatalogEntity, display_label
from gaussian_catalog.core.models.records import ElectronicStateRecord


@dataclass(kw_only=True)
class ElectronicStateFullModel(CatalogEntity):
    """An Electronic State with all of its details."""

    LABEL_FIELDS: ClassVar[Tuple[str, ...]] = ("name", "keyword")

    name: Optional[str] = None
    keyword: Optional[str] = None

    def to_record(self) -> ElectronicStateRecord:
        """Convert to a record containing the id, name and keyword."""
        return ElectronicStateRecord(self.id, self.name, self.keyword)

    def __str__(self) -> str:
        return display_label(self.name, self.keyword)
