"""Storage module for gaussian-catalog.

This module provides SQLAlchemy-backed storage for the catalog entities.
"""

from gaussian_catalog.storage.catalog_storage import CatalogStorage, alembic_config
from gaussian_catalog.storage.entity_storage import (
    EntityStorage,
    RelationalEntityStorage,
)
from gaussian_catalog.storage.leaf_storage import (
    CalculationTypeStorage,
    ElectronicStateStorage,
    MethodFamilyStorage,
    SpinStateStorage,
)
from gaussian_catalog.storage.method_storage import (
    BaseMethodStorage,
    ElectronicStateMethodFamilyStorage,
    FullMethodStorage,
    SpinStateElectronicStateMethodFamilyStorage,
)

__all__ = [
    "CatalogStorage",
    "alembic_config",
    "EntityStorage",
    "RelationalEntityStorage",
    "MethodFamilyStorage",
    "SpinStateStorage",
    "ElectronicStateStorage",
    "CalculationTypeStorage",
    "BaseMethodStorage",
    "ElectronicStateMethodFamilyStorage",
    "SpinStateElectronicStateMethodFamilyStorage",
    "FullMethodStorage",
]
