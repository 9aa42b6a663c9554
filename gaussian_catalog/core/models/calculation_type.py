"""Calculation Type: the kind of job to run (e.g. Optimization, Frequency)."""

from dataclasses import dataclass
from typing import ClassVar, Tuple

from gaussian_catalog.core.models.base import CatalogEntity
from gaussian_catalog.core.models.records import CalculationTypeRecord


@dataclass(kw_only=True)
class CalculationTypeFullModel(CatalogEntity):
    LABEL_FIELDS: ClassVar[Tuple[str, ...]] = ("name", "keyword")

    name: str = ""
    keyword: str = ""

    def to_record(self) -> CalculationTypeRecord:
        return CalculationTypeRecord(self.id, self.name, self.keyword)

    def __str__(self) -> str:
        return f"{self.name} ({self.keyword})"
