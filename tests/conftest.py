"""Shared fixtures for the catalog tests."""

from datetime import datetime
from types import SimpleNamespace

import pytest

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
from gaussian_catalog.storage import CatalogStorage

CREATED = datetime(2024, 1, 2, 3, 4, 5)
UPDATED = datetime(2024, 6, 7, 8, 9, 10)


@pytest.fixture
def common():
    """Common attribute values with non-default timestamps and flags."""
    return {
        "description_rtf": "{\\rtf1 text}",
        "description_text": "text",
        "created_date": CREATED,
        "last_updated_date": UPDATED,
        "archived": True,
    }


@pytest.fixture
def storage(tmp_path):
    """A catalog storage backed by a temporary SQLite file."""
    catalog = CatalogStorage(f"sqlite:///{tmp_path / 'catalog.db'}")
    yield catalog
    catalog.dispose()


@pytest.fixture
def seeded(storage):
    """One entity of every kind, linked together, as stored Full models."""
    hartree_fock = storage.method_families.create(
        MethodFamilyFullModel(name="Hartree-Fock")
    )
    dft = storage.method_families.create(MethodFamilyFullModel(name="DFT"))
    doublet = storage.spin_states.create(SpinStateFullModel(name="Doublet", keyword="D"))
    ground = storage.electronic_states.create(
        ElectronicStateFullModel(name="Ground State")
    )
    optimization = storage.calculation_types.create(
        CalculationTypeFullModel(name="Optimization", keyword="Opt")
    )
    hf = storage.base_methods.create(
        BaseMethodSimpleModel(keyword="HF", method_family_id=hartree_fock.id)
    )
    ground_hf = storage.electronic_state_method_families.create(
        ElectronicStateMethodFamilySimpleModel(
            name="Ground State HF",
            electronic_state_id=ground.id,
            method_family_id=hartree_fock.id,
        )
    )
    unrestricted = storage.spin_state_electronic_state_method_families.create(
        SpinStateElectronicStateMethodFamilySimpleModel(
            keyword="U",
            electronic_state_method_family_id=ground_hf.id,
            spin_state_id=doublet.id,
        )
    )
    uhf = storage.full_methods.create(
        FullMethodSimpleModel(
            keyword="UHF",
            spin_state_electronic_state_method_family_id=unrestricted.id,
            base_method_id=hf.id,
        )
    )
    return SimpleNamespace(
        hartree_fock=hartree_fock,
        dft=dft,
        doublet=doublet,
        ground=ground,
        optimization=optimization,
        hf=hf,
        ground_hf=ground_hf,
        unrestricted=unrestricted,
        uhf=uhf,
    )
