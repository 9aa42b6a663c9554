"""Entity shapes for the Gaussian catalog.

Each entity family is defined in its own module; everything is re-exported
here so callers can import from ``gaussian_catalog.core.models`` directly.
"""

from gaussian_catalog.core.models.base import (
    COMMON_FIELDS,
    CatalogEntity,
    Serializable,
    display_label,
    require,
    utc_now,
)
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
from gaussian_catalog.core.models.method_family import MethodFamilyFullModel
from gaussian_catalog.core.models.spin_state import SpinStateFullModel
from gaussian_catalog.core.models.electronic_state import ElectronicStateFullModel
from gaussian_catalog.core.models.calculation_type import CalculationTypeFullModel
from gaussian_catalog.core.models.base_method import (
    BaseMethodFullModel,
    BaseMethodIntermediateModel,
    BaseMethodSimpleModel,
)
from gaussian_catalog.core.models.electronic_state_method_family import (
    ElectronicStateMethodFamilyFullModel,
    ElectronicStateMethodFamilyIntermediateModel,
    ElectronicStateMethodFamilySimpleModel,
)
from gaussian_catalog.core.models.spin_state_electronic_state_method_family import (
    SpinStateElectronicStateMethodFamilyFullModel,
    SpinStateElectronicStateMethodFamilyIntermediateModel,
    SpinStateElectronicStateMethodFamilySimpleModel,
)
from gaussian_catalog.core.models.full_method import (
    FullMethodFullModel,
    FullMethodIntermediateModel,
    FullMethodSimpleModel,
)
from gaussian_catalog.core.models.families import ENTITY_FAMILIES, EntityFamily

__all__ = [
    "COMMON_FIELDS",
    "CatalogEntity",
    "Serializable",
    "display_label",
    "utc_now",
    "require",
    "BaseMethodRecord",
    "CalculationTypeRecord",
    "ElectronicStateMethodFamilyRecord",
    "ElectronicStateRecord",
    "FullMethodRecord",
    "MethodFamilyRecord",
    "SpinStateElectronicStateMethodFamilyRecord",
    "SpinStateRecord",
    "MethodFamilyFullModel",
    "SpinStateFullModel",
    "ElectronicStateFullModel",
    "CalculationTypeFullModel",
    "BaseMethodSimpleModel",
    "BaseMethodIntermediateModel",
    "BaseMethodFullModel",
    "ElectronicStateMethodFamilySimpleModel",
    "ElectronicStateMethodFamilyIntermediateModel",
    "ElectronicStateMethodFamilyFullModel",
    "SpinStateElectronicStateMethodFamilySimpleModel",
    "SpinStateElectronicStateMethodFamilyIntermediateModel",
    "SpinStateElectronicStateMethodFamilyFullModel",
    "FullMethodSimpleModel",
    "FullMethodIntermediateModel",
    "FullMethodFullModel",
    "ENTITY_FAMILIES",
    "EntityFamily",
]
