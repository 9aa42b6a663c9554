"""Spin State: the spin multiplicity of a calculation (e.g. Doublet)."""

from dataclasses import dataclass
from typing import ClassVar, Optional, Tuple

from gaussian_catalog.core.models.base import CatalogEntity, display_label
from gaussian_catalog.core.models.records import SpinStateRecord


@dataclass(kw_only=True)
class SpinStateFullModel(CatalogEntity):
    """A Spin State with all of its details.

    At least one of ``name`` and ``keyword`` is expected to be set; the
    storage layer and the API enforce that.
    """

    LABEL_FIELDS: ClassVar[Tuple[str, ...]] = ("name", "keyword")

    name: Optional[str] = None
    keyword: Optional[str] = None

    def to_record(self) -> SpinStateRecord:
        return SpinStateRecord(self.id, self.name, self.keyword)

    def __str__(self) -> str:
        return display_label(self.name, self.keyword)
