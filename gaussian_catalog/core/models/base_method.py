"""Base Method shapes.

A Base Method (e.g. ``HF``, ``B3LYP``) always belongs to a Method Family.
The relationship is required, so every shape carries it: an id in the Simple
shape, a record in the Intermediate shape and a full model in the Full shape.
"""

from dataclasses import dataclass
from typing import ClassVar, Tuple

from gaussian_catalog.core.models.base import CatalogEntity, require
from gaussian_catalog.core.models.method_family import MethodFamilyFullModel
from gaussian_catalog.core.models.records import BaseMethodRecord, MethodFamilyRecord


@dataclass(kw_only=True)
class BaseMethodSimpleModel(CatalogEntity):
    """A Base Method with only the Method Family id."""

    LABEL_FIELDS: ClassVar[Tuple[str, ...]] = ("keyword",)
    REQUIRED_RELATIONS: ClassVar[Tuple[str, ...]] = ("method_family_id",)

    keyword: str = ""
    method_family_id: int

    @classmethod
    def from_intermediate_model(
        cls, intermediate_model: "BaseMethodIntermediateModel"
    ) -> "BaseMethodSimpleModel":
        return require(intermediate_model, "intermediate_model").to_simple_model()

    @classmethod
    def from_full_model(cls, full_model: "BaseMethodFullModel") -> "BaseMethodSimpleModel":
        return require(full_model, "full_model").to_simple_model()

    def to_intermediate_model(
        self, method_family: MethodFamilyRecord
    ) -> "BaseMethodIntermediateModel":
        """Convert to an intermediate model.

        Args:
            method_family: The Method Family record to embed

        Returns:
            The intermediate model

        Raises:
            NullParameterError: If method_family is None
        """
        return BaseMethodIntermediateModel(
            **self.common_values(),
            method_family=require(method_family, "method_family"),
        )

    def to_full_model(self, method_family: MethodFamilyFullModel) -> "BaseMethodFullModel":
        """Convert to a full model.

        Args:
            method_family: The Method Family full model to embed

        Returns:
            The full model

        Raises:
            NullParameterError: If method_family is None
        """
        return BaseMethodFullModel(
            **self.common_values(),
            method_family=require(method_family, "method_family"),
        )

    def to_record(self) -> BaseMethodRecord:
        return BaseMethodRecord(self.id, self.keyword)

    def __str__(self) -> str:
        return self.keyword


@dataclass(kw_only=True)
class BaseMethodIntermediateModel(CatalogEntity):
    """A Base Method with its Method Family as a record."""

    LABEL_FIELDS: ClassVar[Tuple[str, ...]] = ("keyword",)
    REQUIRED_RELATIONS: ClassVar[Tuple[str, ...]] = ("method_family",)

    keyword: str = ""
    method_family: MethodFamilyRecord

    @classmethod
    def from_simple_model(
        cls, model: BaseMethodSimpleModel, method_family: MethodFamilyRecord
    ) -> "BaseMethodIntermediateModel":
        return require(model, "model").to_intermediate_model(method_family)

    @classmethod
    def from_full_model(cls, full_model: "BaseMethodFullModel") -> "BaseMethodIntermediateModel":
        return require(full_model, "full_model").to_intermediate_model()

    def to_simple_model(self) -> BaseMethodSimpleModel:
        return BaseMethodSimpleModel(
            **self.common_values(),
            method_family_id=self.method_family.id,
        )

    def to_full_model(self, method_family: MethodFamilyFullModel) -> "BaseMethodFullModel":
        return BaseMethodFullModel(
            **self.common_values(),
            method_family=require(method_family, "method_family"),
        )

    def to_record(self) -> BaseMethodRecord:
        return BaseMethodRecord(self.id, self.keyword)

    def __str__(self) -> str:
        return self.keyword


@dataclass(kw_only=True)
class BaseMethodFullModel(CatalogEntity):
    """A Base Method with its full Method Family."""

    LABEL_FIELDS: ClassVar[Tuple[str, ...]] = ("keyword",)
    REQUIRED_RELATIONS: ClassVar[Tuple[str, ...]] = ("method_family",)

    keyword: str = ""
    method_family: MethodFamilyFullModel

    @classmethod
    def from_simple_model(
        cls, model: BaseMethodSimpleModel, method_family: MethodFamilyFullModel
    ) -> "BaseMethodFullModel":
        """Build a full model from a simple model and its Method Family.

        Raises:
            NullParameterError: If model or method_family is None
        """
        require(model, "model")
        require(method_family, "method_family")
        return model.to_full_model(method_family)

    @classmethod
    def from_intermediate_model(
        cls, model: BaseMethodIntermediateModel, method_family: MethodFamilyFullModel
    ) -> "BaseMethodFullModel":
        require(model, "model")
        require(method_family, "method_family")
        return model.to_full_model(method_family)

    def to_simple_model(self) -> BaseMethodSimpleModel:
        return BaseMethodSimpleModel(
            **self.common_values(),
            method_family_id=self.method_family.id,
        )

    def to_intermediate_model(self) -> BaseMethodIntermediateModel:
        return BaseMethodIntermediateModel(
            **self.common_values(),
            method_family=self.method_family.to_record(),
        )

    def to_record(self) -> BaseMethodRecord:
        return BaseMethodRecord(self.id, self.keyword)

    def __str__(self) -> str:
        return self.keyword
