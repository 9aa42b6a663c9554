"""Storage services for entities with no parents."""

from gaussian_catalog.storage.entity_storage import EntityStorage
from gaussian_catalog.storage.models import (
    BaseMethodTable,
    CalculationTypeTable,
    ElectronicStateMethodFamilyTable,
    ElectronicStateTable,
    MethodFamilyTable,
    SpinStateElectronicStateMethodFamilyTable,
    SpinStateTable,
)


class MethodFamilyStorage(EntityStorage):
    """Storage service for Method Families."""

    table = MethodFamilyTable
    entity_name = "Method Family"
    param_name = "method_family"
    order_by = ("name",)
    dependents = (
        (BaseMethodTable, "method_family_id", "Base Methods"),
        (
            ElectronicStateMethodFamilyTable,
            "method_family_id",
            "Electronic State/Method Family Combinations",
        ),
    )


class SpinStateStorage(EntityStorage):
    """Storage service for Spin States."""

    table = SpinStateTable
    entity_name = "Spin State"
    param_name = "spin_state"
    order_by = ("name", "keyword")
    dependents = (
        (
            SpinStateElectronicStateMethodFamilyTable,
            "spin_state_id",
            "Spin State/Electronic State/Method Family Combinations",
        ),
    )
    requires_name_or_keyword = True


class ElectronicStateStorage(EntityStorage):
    """Storage service for Electronic States."""

    table = ElectronicStateTable
    entity_name = "Electronic State"
    param_name = "electronic_state"
    order_by = ("name", "keyword")
    dependents = (
        (
            ElectronicStateMethodFamilyTable,
            "electronic_state_id",
            "Electronic State/Method Family Combinations",
        ),
    )
    requires_name_or_keyword = True


class CalculationTypeStorage(EntityStorage):
    """Storage service for Calculation Types."""

    table = CalculationTypeTable
    entity_name = "Calculation Type"
    param_name = "calculation_type"
    order_by = ("name",)
