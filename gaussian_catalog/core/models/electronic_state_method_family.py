"""Electronic State / Method Family shapes.

Pairs an Electronic State (required) with an optional Method Family.
"""

from dataclasses import dataclass
from typing import ClassVar, Optional, Tuple

from gaussian_catalog.core.models.base import CatalogEntity, display_label, require
from gaussian_catalog.core.models.electronic_state import ElectronicStateFullModel
from gaussian_catalog.core.models.method_family import MethodFamilyFullModel
from gaussian_catalog.core.models.records import (
    ElectronicStateMethodFamilyRecord,
    ElectronicStateRecord,
    MethodFamilyRecord,
)


class _ElectronicStateMethodFamilyShape(CatalogEntity):
    """Behaviour shared by the three shapes; not a dataclass itself."""

    LABEL_FIELDS: ClassVar[Tuple[str, ...]] = ("name", "keyword")

    def to_record(self) -> ElectronicStateMethodFamilyRecord:
        return ElectronicStateMethodFamilyRecord(self.id, self.name, self.keyword)

    def __str__(self) -> str:
        return display_label(self.name, self.keyword)


@dataclass(kw_only=True)
class ElectronicStateMethodFamilySimpleModel(_ElectronicStateMethodFamilyShape):
    REQUIRED_RELATIONS: ClassVar[Tuple[str, ...]] = ("electronic_state_id",)

    name: Optional[str] = None
    keyword: Optional[str] = None
    electronic_state_id: int
    method_family_id: Optional[int] = None

    @classmethod
    def from_intermediate_model(
        cls, intermediate_model: "ElectronicStateMethodFamilyIntermediateModel"
    ) -> "ElectronicStateMethodFamilySimpleModel":
        return require(intermediate_model, "intermediate_model").to_simple_model()

    @classmethod
    def from_full_model(
        cls, full_model: "ElectronicStateMethodFamilyFullModel"
    ) -> "ElectronicStateMethodFamilySimpleModel":
        return require(full_model, "full_model").to_simple_model()

    def to_intermediate_model(
        self,
        electronic_state: ElectronicStateRecord,
        method_family: Optional[MethodFamilyRecord] = None,
    ) -> "ElectronicStateMethodFamilyIntermediateModel":
        """Convert to an intermediate model.

        Args:
            electronic_state: The Electronic State record (required)
            method_family: The Method Family record, if there is one

        Returns:
            The intermediate model
        """
        return ElectronicStateMethodFamilyIntermediateModel(
            **self.common_values(),
            electronic_state=require(electronic_state, "electronic_state"),
            method_family=method_family,
        )

    def to_full_model(
        self,
        electronic_state: ElectronicStateFullModel,
        method_family: Optional[MethodFamilyFullModel] = None,
    ) -> "ElectronicStateMethodFamilyFullModel":
        return ElectronicStateMethodFamilyFullModel(
            **self.common_values(),
            electronic_state=require(electronic_state, "electronic_state"),
            method_family=method_family,
        )


@dataclass(kw_only=True)
class ElectronicStateMethodFamilyIntermediateModel(_ElectronicStateMethodFamilyShape):
    REQUIRED_RELATIONS: ClassVar[Tuple[str, ...]] = ("electronic_state",)

    name: Optional[str] = None
    keyword: Optional[str] = None
    electronic_state: ElectronicStateRecord
    method_family: Optional[MethodFamilyRecord] = None

    @classmethod
    def from_simple_model(
        cls,
        model: ElectronicStateMethodFamilySimpleModel,
        electronic_state: ElectronicStateRecord,
        method_family: Optional[MethodFamilyRecord] = None,
    ) -> "ElectronicStateMethodFamilyIntermediateModel":
        return require(model, "model").to_intermediate_model(
            electronic_state, method_family
        )

    @classmethod
    def from_full_model(
        cls, full_model: "ElectronicStateMethodFamilyFullModel"
    ) -> "ElectronicStateMethodFamilyIntermediateModel":
        return require(full_model, "full_model").to_intermediate_model()

    def to_simple_model(self) -> ElectronicStateMethodFamilySimpleModel:
        return ElectronicStateMethodFamilySimpleModel(
            **self.common_values(),
            electronic_state_id=self.electronic_state.id,
            method_family_id=self.method_family.id if self.method_family else None,
        )

    def to_full_model(
        self,
        electronic_state: ElectronicStateFullModel,
        method_family: Optional[MethodFamilyFullModel] = None,
    ) -> "ElectronicStateMethodFamilyFullModel":
        return ElectronicStateMethodFamilyFullModel(
            **self.common_values(),
            electronic_state=require(electronic_state, "electronic_state"),
            method_family=method_family,
        )


@dataclass(kw_only=True)
class ElectronicStateMethodFamilyFullModel(_ElectronicStateMethodFamilyShape):
    REQUIRED_RELATIONS: ClassVar[Tuple[str, ...]] = ("electronic_state",)

    name: Optional[str] = None
    keyword: Optional[str] = None
    electronic_state: ElectronicStateFullModel
    method_family: Optional[MethodFamilyFullModel] = None

    @classmethod
    def from_simple_model(
        cls,
        model: ElectronicStateMethodFamilySimpleModel,
        electronic_state: ElectronicStateFullModel,
        method_family: Optional[MethodFamilyFullModel] = None,
    ) -> "ElectronicStateMethodFamilyFullModel":
        return require(model, "model").to_full_model(electronic_state, method_family)

    @classmethod
    def from_intermediate_model(
        cls,
        model: ElectronicStateMethodFamilyIntermediateModel,
        electronic_state: ElectronicStateFullModel,
        method_family: Optional[MethodFamilyFullModel] = None,
    ) -> "ElectronicStateMethodFamilyFullModel":
        return require(model, "model").to_full_model(electronic_state, method_family)

    def to_simple_model(self) -> ElectronicStateMethodFamilySimpleModel:
        return ElectronicStateMethodFamilySimpleModel(
            **self.common_values(),
            electronic_state_id=self.electronic_state.id,
            method_family_id=self.method_family.id if self.method_family else None,
        )

    def to_intermediate_model(self) -> ElectronicStateMethodFamilyIntermediateModel:
        return ElectronicStateMethodFamilyIntermediateModel(
            **self.common_values(),
            electronic_state=self.electronic_state.to_record(),
            method_family=(
                self.method_family.to_record() if self.method_family else None
            ),
        )
