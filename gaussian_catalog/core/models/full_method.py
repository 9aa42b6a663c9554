"""Full Method shapes.

A Full Method is the keyword Gaussian actually receives (e.g. ``UB3LYP``): a
Base Method applied to a Spin State / Electronic State / Method Family. Both
relationships are required.
"""

from dataclasses import dataclass
from typing import ClassVar, Tuple

from gaussian_catalog.core.models.base import CatalogEntity, require
from gaussian_catalog.core.models.base_method import BaseMethodFullModel
from gaussian_catalog.core.models.records import (
    BaseMethodRecord,
    FullMethodRecord,
    SpinStateElectronicStateMethodFamilyRecord,
)
from gaussian_catalog.core.models.spin_state_electronic_state_method_family import (
    SpinStateElectronicStateMethodFamilyFullModel,
)


class _FullMethodShape(CatalogEntity):
    LABEL_FIELDS: ClassVar[Tuple[str, ...]] = ("keyword",)

    def to_record(self) -> FullMethodRecord:
        return FullMethodRecord(self.id, self.keyword)

    def __str__(self) -> str:
        return self.keyword


@dataclass(kw_only=True)
class FullMethodSimpleModel(_FullMethodShape):
    """A Full Method referencing its parents by id."""

    REQUIRED_RELATIONS: ClassVar[Tuple[str, ...]] = (
        "spin_state_electronic_state_method_family_id",
        "base_method_id",
    )

    keyword: str = ""
    spin_state_electronic_state_method_family_id: int
    base_method_id: int

    @classmethod
    def from_intermediate_model(
        cls, intermediate_model: "FullMethodIntermediateModel"
    ) -> "FullMethodSimpleModel":
        return require(intermediate_model, "intermediate_model").to_simple_model()

    @classmethod
    def from_full_model(cls, full_model: "FullMethodFullModel") -> "FullMethodSimpleModel":
        return require(full_model, "full_model").to_simple_model()

    def to_intermediate_model(
        self,
        spin_state_electronic_state_method_family: SpinStateElectronicStateMethodFamilyRecord,
        base_method: BaseMethodRecord,
    ) -> "FullMethodIntermediateModel":
        return FullMethodIntermediateModel(
            **self.common_values(),
            spin_state_electronic_state_method_family=require(
                spin_state_electronic_state_method_family,
                "spin_state_electronic_state_method_family",
            ),
            base_method=require(base_method, "base_method"),
        )

    def to_full_model(
        self,
        spin_state_electronic_state_method_family: SpinStateElectronicStateMethodFamilyFullModel,
        base_method: BaseMethodFullModel,
    ) -> "FullMethodFullModel":
        """Convert to a full model.

        Args:
            spin_state_electronic_state_method_family: The parent combination
            base_method: The Base Method

        Returns:
            The full model

        Raises:
            NullParameterError: If either argument is None
        """
        return FullMethodFullModel(
            **self.common_values(),
            spin_state_electronic_state_method_family=require(
                spin_state_electronic_state_method_family,
                "spin_state_electronic_state_method_family",
            ),
            base_method=require(base_method, "base_method"),
        )


@dataclass(kw_only=True)
class FullMethodIntermediateModel(_FullMethodShape):
    """A Full Method with its parents as records."""

    REQUIRED_RELATIONS: ClassVar[Tuple[str, ...]] = (
        "spin_state_electronic_state_method_family",
        "base_method",
    )

    keyword: str = ""
    spin_state_electronic_state_method_family: SpinStateElectronicStateMethodFamilyRecord
    base_method: BaseMethodRecord

    @classmethod
    def from_simple_model(
        cls,
        model: FullMethodSimpleModel,
        spin_state_electronic_state_method_family: SpinStateElectronicStateMethodFamilyRecord,
        base_method: BaseMethodRecord,
    ) -> "FullMethodIntermediateModel":
        return require(model, "model").to_intermediate_model(
            spin_state_electronic_state_method_family, base_method
        )

    @classmethod
    def from_full_model(cls, full_model: "FullMethodFullModel") -> "FullMethodIntermediateModel":
        return require(full_model, "full_model").to_intermediate_model()

    def to_simple_model(self) -> FullMethodSimpleModel:
        return FullMethodSimpleModel(
            **self.common_values(),
            spin_state_electronic_state_method_family_id=(
                self.spin_state_electronic_state_method_family.id
            ),
            base_method_id=self.base_method.id,
        )

    def to_full_model(
        self,
        spin_state_electronic_state_method_family: SpinStateElectronicStateMethodFamilyFullModel,
        base_method: BaseMethodFullModel,
    ) -> "FullMethodFullModel":
        return FullMethodFullModel(
            **self.common_values(),
            spin_state_electronic_state_method_family=require(
                spin_state_electronic_state_method_family,
                "spin_state_electronic_state_method_family",
            ),
            base_method=require(base_method, "base_method"),
        )


@dataclass(kw_only=True)
class FullMethodFullModel(_FullMethodShape):
    """A Full Method with its complete parent graph."""

    REQUIRED_RELATIONS: ClassVar[Tuple[str, ...]] = (
        "spin_state_electronic_state_method_family",
        "base_method",
    )

    keyword: str = ""
    spin_state_electronic_state_method_family: SpinStateElectronicStateMethodFamilyFullModel
    base_method: BaseMethodFullModel

    @classmethod
    def from_simple_model(
        cls,
        model: FullMethodSimpleModel,
        spin_state_electronic_state_method_family: SpinStateElectronicStateMethodFamilyFullModel,
        base_method: BaseMethodFullModel,
    ) -> "FullMethodFullModel":
        return require(model, "model").to_full_model(
            spin_state_electronic_state_method_family, base_method
        )

    @classmethod
    def from_intermediate_model(
        cls,
        model: FullMethodIntermediateModel,
        spin_state_electronic_state_method_family: SpinStateElectronicStateMethodFamilyFullModel,
        base_method: BaseMethodFullModel,
    ) -> "FullMethodFullModel":
        return require(model, "model").to_full_model(
            spin_state_electronic_state_method_family, base_method
        )

    def to_simple_model(self) -> FullMethodSimpleModel:
        return FullMethodSimpleModel(
            **self.common_values(),
            spin_state_electronic_state_method_family_id=(
                self.spin_state_electronic_state_method_family.id
            ),
            base_method_id=self.base_method.id,
        )

    def to_intermediate_model(self) -> FullMethodIntermediateModel:
        return FullMethodIntermediateModel(
            **self.common_values(),
            spin_state_electronic_state_method_family=(
                self.spin_state_electronic_state_method_family.to_record()
            ),
            base_method=self.base_method.to_record(),
        )
