"""Spin State / Electronic State / Method Family shapes.

Combines an Electronic State / Method Family (required) with an optional
Spin State.
"""

from dataclasses import dataclass
from typing import ClassVar, Optional, Tuple

from gaussian_catalog.core.models.base import CatalogEntity, display_label, require
from gaussian_catalog.core.models.electronic_state_method_family import (
    ElectronicStateMethodFamilyFullModel,
)
from gaussian_catalog.core.models.records import (
    ElectronicStateMethodFamilyRecord,
    SpinStateElectronicStateMethodFamilyRecord,
    SpinStateRecord,
)
from gaussian_catalog.core.models.spin_state import SpinStateFullModel


class _SpinStateElectronicStateMethodFamilyShape(CatalogEntity):
    LABEL_FIELDS: ClassVar[Tuple[str, ...]] = ("name", "keyword")

    def to_record(self) -> SpinStateElectronicStateMethodFamilyRecord:
        return SpinStateElectronicStateMethodFamilyRecord(
            self.id, self.name, self.keyword
        )

    def __str__(self) -> str:
        return display_label(self.name, self.keyword)


@dataclass(kw_only=True)
class SpinStateElectronicStateMethodFamilySimpleModel(
    _SpinStateElectronicStateMethodFamilyShape
):
    REQUIRED_RELATIONS: ClassVar[Tuple[str, ...]] = (
        "electronic_state_method_family_id",
    )

    name: Optional[str] = None
    keyword: Optional[str] = None
    electronic_state_method_family_id: int
    spin_state_id: Optional[int] = None

    @classmethod
    def from_intermediate_model(
        cls, intermediate_model: "SpinStateElectronicStateMethodFamilyIntermediateModel"
    ) -> "SpinStateElectronicStateMethodFamilySimpleModel":
        return require(intermediate_model, "intermediate_model").to_simple_model()

    @classmethod
    def from_full_model(
        cls, full_model: "SpinStateElectronicStateMethodFamilyFullModel"
    ) -> "SpinStateElectronicStateMethodFamilySimpleModel":
        return require(full_model, "full_model").to_simple_model()

    def to_intermediate_model(
        self,
        electronic_state_method_family: ElectronicStateMethodFamilyRecord,
        spin_state: Optional[SpinStateRecord] = None,
    ) -> "SpinStateElectronicStateMethodFamilyIntermediateModel":
        return SpinStateElectronicStateMethodFamilyIntermediateModel(
            **self.common_values(),
            electronic_state_method_family=require(
                electronic_state_method_family, "electronic_state_method_family"
            ),
            spin_state=spin_state,
        )

    def to_full_model(
        self,
        electronic_state_method_family: ElectronicStateMethodFamilyFullModel,
        spin_state: Optional[SpinStateFullModel] = None,
    ) -> "SpinStateElectronicStateMethodFamilyFullModel":
        """Convert to a full model.

        Args:
            electronic_state_method_family: The parent combination (required)
            spin_state: The Spin State, if there is one

        Returns:
            The full model

        Raises:
            NullParameterError: If electronic_state_method_family is None
        """
        return SpinStateElectronicStateMethodFamilyFullModel(
            **self.common_values(),
            electronic_state_method_family=require(
                electronic_state_method_family, "electronic_state_method_family"
            ),
            spin_state=spin_state,
        )


@dataclass(kw_only=True)
class SpinStateElectronicStateMethodFamilyIntermediateModel(
    _SpinStateElectronicStateMethodFamilyShape
):
    REQUIRED_RELATIONS: ClassVar[Tuple[str, ...]] = ("electronic_state_method_family",)

    name: Optional[str] = None
    keyword: Optional[str] = None
    electronic_state_method_family: ElectronicStateMethodFamilyRecord
    spin_state: Optional[SpinStateRecord] = None

    @classmethod
    def from_simple_model(
        cls,
        model: SpinStateElectronicStateMethodFamilySimpleModel,
        electronic_state_method_family: ElectronicStateMethodFamilyRecord,
        spin_state: Optional[SpinStateRecord] = None,
    ) -> "SpinStateElectronicStateMethodFamilyIntermediateModel":
        return require(model, "model").to_intermediate_model(
            electronic_state_method_family, spin_state
        )

    @classmethod
    def from_full_model(
        cls, full_model: "SpinStateElectronicStateMethodFamilyFullModel"
    ) -> "SpinStateElectronicStateMethodFamilyIntermediateModel":
        return require(full_model, "full_model").to_intermediate_model()

    def to_simple_model(self) -> SpinStateElectronicStateMethodFamilySimpleModel:
        return SpinStateElectronicStateMethodFamilySimpleModel(
            **self.common_values(),
            electronic_state_method_family_id=self.electronic_state_method_family.id,
            spin_state_id=self.spin_state.id if self.spin_state else None,
        )

    def to_full_model(
        self,
        electronic_state_method_family: ElectronicStateMethodFamilyFullModel,
        spin_state: Optional[SpinStateFullModel] = None,
    ) -> "SpinStateElectronicStateMethodFamilyFullModel":
        return SpinStateElectronicStateMethodFamilyFullModel(
            **self.common_values(),
            electronic_state_method_family=require(
                electronic_state_method_family, "electronic_state_method_family"
            ),
            spin_state=spin_state,
        )


@dataclass(kw_only=True)
class SpinStateElectronicStateMethodFamilyFullModel(
    _SpinStateElectronicStateMethodFamilyShape
):
    REQUIRED_RELATIONS: ClassVar[Tuple[str, ...]] = ("electronic_state_method_family",)

    name: Optional[str] = None
    keyword: Optional[str] = None
    electronic_state_method_family: ElectronicStateMethodFamilyFullModel
    spin_state: Optional[SpinStateFullModel] = None

    @classmethod
    def from_simple_model(
        cls,
        model: SpinStateElectronicStateMethodFamilySimpleModel,
        electronic_state_method_family: ElectronicStateMethodFamilyFullModel,
        spin_state: Optional[SpinStateFullModel] = None,
    ) -> "SpinStateElectronicStateMethodFamilyFullModel":
        return require(model, "model").to_full_model(
            electronic_state_method_family, spin_state
        )

    @classmethod
    def from_intermediate_model(
        cls,
        model: SpinStateElectronicStateMethodFamilyIntermediateModel,
        electronic_state_method_family: ElectronicStateMethodFamilyFullModel,
        spin_state: Optional[SpinStateFullModel] = None,
    ) -> "SpinStateElectronicStateMethodFamilyFullModel":
        return require(model, "model").to_full_model(
            electronic_state_method_family, spin_state
        )

    def to_simple_model(self) -> SpinStateElectronicStateMethodFamilySimpleModel:
        return SpinStateElectronicStateMethodFamilySimpleModel(
            **self.common_values(),
            electronic_state_method_family_id=self.electronic_state_method_family.id,
            spin_state_id=self.spin_state.id if self.spin_state else None,
        )

    def to_intermediate_model(
        self,
    ) -> SpinStateElectronicStateMethodFamilyIntermediateModel:
        return SpinStateElectronicStateMethodFamilyIntermediateModel(
            **self.common_values(),
            electronic_state_method_family=self.electronic_state_method_family.to_record(),
            spin_state=self.spin_state.to_record() if self.spin_state else None,
        )
