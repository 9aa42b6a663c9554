"""Lookup table of the shape classes that make up each entity family."""

from typing import Dict, NamedTuple, Optional, Type

from gaussian_catalog.core.models.base_method import (
    BaseMethodFullModel,
    BaseMethodIntermediateModel,
    BaseMethodSimpleModel,
)
from gaussian_catalog.core.models.calculation_type import CalculationTypeFullModel
from gaussian_catalog.core.models.electronic_state import ElectronicStateFullModel
from gaussian_catalog.core.models.electronic_state_method_family import (
    ElectronicStateMethodFamilyFullModel,
    ElectronicStateMethodFamilyIntermediateModel,
    ElectronicStateMethodFamilySimpleModel,
)
from gaussian_catalog.core.models.full_method import (
    FullMethodFullModel,
    FullMethodIntermediateModel,
    FullMethodSimpleModel,
)
from gaussian_catalog.core.models.method_family import MethodFamilyFullModel
from gaussian_catalog.core.models.records import (
    BaseMethodRecord,
    CalculationTypeRecord,
    ElectronicStateMethodFamilyRecord,
    ElectronicStateRecord,
    FullMethodRecord,
    MethodFamilyRecord,
    SpinStateElectronicStateMethodFamilyRecord,
    SpinStateRecord,
)
from gaussian_catalog.core.models.spin_state import SpinStateFullModel
from gaussian_catalog.core.models.spin_state_electronic_state_method_family import (
    SpinStateElectronicStateMethodFamilyFullModel,
    SpinStateElectronicStateMethodFamilyIntermediateModel,
    SpinStateElectronicStateMethodFamilySimpleModel,
)


class EntityFamily(NamedTuple):
    """The shapes of one entity.

    Leaf entities have no relationships, so their ``simple`` and
    ``intermediate`` slots are None and the Full model is used in their place.
    """

    record: Type
    simple: Optional[Type]
    intermediate: Optional[Type]
    full: Type

    @property
    def has_relations(self) -> bool:
        return self.simple is not None

    @property
    def input_model(self) -> Type:
        """The shape accepted for create and update: Simple, or Full for leaves."""
        return self.simple or self.full


ENTITY_FAMILIES: Dict[str, EntityFamily] = {
    "method_family": EntityFamily(
        MethodFamilyRecord, None, None, MethodFamilyFullModel
    ),
    "spin_state": EntityFamily(SpinStateRecord, None, None, SpinStateFullModel),
    "electronic_state": EntityFamily(
        ElectronicStateRecord, None, None, ElectronicStateFullModel
    ),
    "calculation_type": EntityFamily(
        CalculationTypeRecord, None, None, CalculationTypeFullModel
    ),
    "base_method": EntityFamily(
        BaseMethodRecord,
        BaseMethodSimpleModel,
        BaseMethodIntermediateModel,
        BaseMethodFullModel,
    ),
    "electronic_state_method_family": EntityFamily(
        ElectronicStateMethodFamilyRecord,
        ElectronicStateMethodFamilySimpleModel,
        ElectronicStateMethodFamilyIntermediateModel,
        ElectronicStateMethodFamilyFullModel,
    ),
    "spin_state_electronic_state_method_family": EntityFamily(
        SpinStateElectronicStateMethodFamilyRecord,
        SpinStateElectronicStateMethodFamilySimpleModel,
        SpinStateElectronicStateMethodFamilyIntermediateModel,
        SpinStateElectronicStateMethodFamilyFullModel,
    ),
    "full_method": EntityFamily(
        FullMethodRecord,
        FullMethodSimpleModel,
        FullMethodIntermediateModel,
        FullMethodFullModel,
    ),
}
