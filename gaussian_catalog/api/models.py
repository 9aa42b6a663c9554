"""Pydantic request models for the REST API.

Each model carries the fields of the entity's Simple shape (the Full shape
for leaf entities) together with the validation rules of the catalog:
maximum lengths, required fields, and name-or-keyword.
"""

from datetime import datetime
from typing import ClassVar, Optional

from pydantic import BaseModel, Field, model_validator

from gaussian_catalog.core.models import (
    BaseMethodSimpleModel,
    CalculationTypeFullModel,
    ElectronicStateFullModel,
    ElectronicStateMethodFamilySimpleModel,
    FullMethodSimpleModel,
    MethodFamilyFullModel,
    SpinStateElectronicStateMethodFamilySimpleModel,
    SpinStateFullModel,
)
from gaussian_catalog.core.models.base import is_blank, utc_now


class CatalogAPIModel(BaseModel):
    """Fields shared by every request model."""

    domain_class: ClassVar[type]

    id: int = 0
    description_rtf: Optional[str] = None
    description_text: Optional[str] = Field(None, max_length=4000)
    created_date: datetime = Field(default_factory=utc_now)
    last_updated_date: datetime = Field(default_factory=utc_now)
    archived: bool = False

    def to_domain(self):
        """Convert to the domain shape accepted by the storage layer."""
        return self.domain_class(**self.model_dump())


class NameOrKeywordAPIModel(CatalogAPIModel):
    """Request model for entities identified by a name, a keyword, or both."""

    name: Optional[str] = Field(None, max_length=200)
    keyword: Optional[str] = Field(None, max_length=50)

    @model_validator(mode="after")
    def check_name_or_keyword(self):
        if is_blank(self.name) and is_blank(self.keyword):
            raise ValueError("Either Name or Keyword must be provided.")
        return self


class MethodFamilyAPIModel(CatalogAPIModel):
    domain_class: ClassVar[type] = MethodFamilyFullModel

    name: str = Field(..., min_length=1, max_length=200)
    description_text: Optional[str] = Field(None, max_length=2000)


class SpinStateAPIModel(NameOrKeywordAPIModel):
    domain_class: ClassVar[type] = SpinStateFullModel


class ElectronicStateAPIModel(NameOrKeywordAPIModel):
    domain_class: ClassVar[type] = ElectronicStateFullModel


class CalculationTypeAPIModel(CatalogAPIModel):
    domain_class: ClassVar[type] = CalculationTypeFullModel

    name: str = Field(..., min_length=1, max_length=200)
    keyword: str = Field(..., min_length=1, max_length=30)
    description_text: Optional[str] = Field(None, max_length=2000)


class BaseMethodAPIModel(CatalogAPIModel):
    domain_class: ClassVar[type] = BaseMethodSimpleModel

    keyword: str = Field(..., min_length=1, max_length=50)
    method_family_id: int


class ElectronicStateMethodFamilyAPIModel(NameOrKeywordAPIModel):
    domain_class: ClassVar[type] = ElectronicStateMethodFamilySimpleModel

    electronic_state_id: int
    method_family_id: Optional[int] = None


class SpinStateElectronicStateMethodFamilyAPIModel(NameOrKeywordAPIModel):
    domain_class: ClassVar[type] = SpinStateElectronicStateMethodFamilySimpleModel

    electronic_state_method_family_id: int
    spin_state_id: Optional[int] = None


class FullMethodAPIModel(CatalogAPIModel):
    domain_class: ClassVar[type] = FullMethodSimpleModel

    keyword: str = Field(..., min_length=1, max_length=50)
    spin_state_electronic_state_method_family_id: int
    base_method_id: int
