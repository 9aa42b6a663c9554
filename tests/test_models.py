"""Tests for the entity shapes and their conversions."""

import dataclasses

import pytest

from gaussian_catalog.core.errors import NullParameterError
from gaussian_catalog.core.models import (
    ENTITY_FAMILIES,
    BaseMethodFullModel,
    BaseMethodIntermediateModel,
    BaseMethodRecord,
    BaseMethodSimpleModel,
    CalculationTypeFullModel,
    CalculationTypeRecord,
    ElectronicStateFullModel,
    ElectronicStateMethodFamilyFullModel,
    ElectronicStateMethodFamilyIntermediateModel,
    ElectronicStateMethodFamilySimpleModel,
    FullMethodFullModel,
    FullMethodIntermediateModel,
    FullMethodSimpleModel,
    MethodFamilyFullModel,
    MethodFamilyRecord,
    SpinStateElectronicStateMethodFamilyFullModel,
    SpinStateElectronicStateMethodFamilyIntermediateModel,
    SpinStateElectronicStateMethodFamilySimpleModel,
    SpinStateFullModel,
    SpinStateRecord,
    display_label,
    utc_now,
)


@pytest.fixture
def method_family():
    return MethodFamilyFullModel(id=3, name="Hartree-Fock")


@pytest.fixture
def electronic_state():
    return ElectronicStateFullModel(id=4, name="Ground State", keyword="GS")


@pytest.fixture
def spin_state():
    return SpinStateFullModel(id=5, name="Doublet", keyword="D")


@pytest.fixture
def base_method(method_family, common):
    return BaseMethodFullModel(
        id=1, keyword="HF", method_family=method_family, **common
    )


@pytest.fixture
def esmf(electronic_state, method_family, common):
    return ElectronicStateMethodFamilyFullModel(
        id=6,
        name="Ground State HF",
        keyword=None,
        electronic_state=electronic_state,
        method_family=method_family,
        **common,
    )


@pytest.fixture
def ssesmf(esmf, spin_state, common):
    return SpinStateElectronicStateMethodFamilyFullModel(
        id=7,
        name=None,
        keyword="U",
        electronic_state_method_family=esmf,
        spin_state=spin_state,
        **common,
    )


@pytest.fixture
def full_method(ssesmf, base_method, common):
    return FullMethodFullModel(
        id=8,
        keyword="UHF",
        spin_state_electronic_state_method_family=ssesmf,
        base_method=base_method,
        **common,
    )


class TestDisplayPolicy:
    """Tests for how entities with a name and a keyword render."""

    @pytest.mark.parametrize(
        "name, keyword, expected",
        [
            ("Doublet", None, "Doublet"),
            (None, "D", "D"),
            ("Doublet", "D", "Doublet/D"),
            ("  ", "D", "D"),
            ("Doublet", "", "Doublet"),
            (None, None, ""),
        ],
    )
    def test_display_label(self, name, keyword, expected):
        assert display_label(name, keyword) == expected

    def test_models_and_records_render_alike(self):
        model = SpinStateFullModel(id=2, name="Doublet", keyword="D")

        assert str(model) == "Doublet/D"
        assert str(model.to_record()) == "Doublet/D"

    def test_calculation_type_renders_name_and_keyword(self):
        model = CalculationTypeFullModel(id=1, name="Optimization", keyword="Opt")

        assert str(model) == "Optimization (Opt)"
        assert str(model.to_record()) == "Optimization (Opt)"

    def test_keyword_entities_render_keyword(self, base_method, full_method):
        assert str(base_method) == "HF"
        assert str(base_method.to_simple_model()) == "HF"
        assert str(full_method) == "UHF"

    def test_name_entities_render_name(self, method_family):
        assert str(method_family) == "Hartree-Fock"


class TestRecords:
    """Tests for the Record projections."""

    def test_leaf_records(self, method_family, spin_state):
        assert method_family.to_record() == MethodFamilyRecord(3, "Hartree-Fock")
        assert spin_state.to_record() == SpinStateRecord(5, "Doublet", "D")
        assert CalculationTypeFullModel(
            id=9, name="Frequency", keyword="Freq"
        ).to_record() == CalculationTypeRecord(9, "Frequency", "Freq")

    def test_records_are_immutable(self):
        record = BaseMethodRecord(1, "HF")

        with pytest.raises(dataclasses.FrozenInstanceError):
            record.keyword = "B3LYP"

    def test_to_record_does_not_mutate(self, full_method):
        before = dataclasses.replace(full_method)

        record = full_method.to_record()

        assert record.id == 8
        assert record.keyword == "UHF"
        assert full_method == before

    def test_every_shape_gives_the_same_record(self, esmf):
        assert esmf.to_record() == esmf.to_simple_model().to_record()
        assert esmf.to_record() == esmf.to_intermediate_model().to_record()


class TestBaseMethodConversions:
    """Tests for the Base Method shapes."""

    def test_simple_to_full_end_to_end(self):
        simple = BaseMethodSimpleModel(id=1, keyword="HF", method_family_id=3)
        method_family = MethodFamilyFullModel(id=3, name="Hartree-Fock")

        full = simple.to_full_model(method_family)

        assert full.method_family.name == "Hartree-Fock"
        assert full.to_simple_model().method_family_id == 3

    def test_simple_round_trips_through_full(self, base_method, method_family):
        simple = base_method.to_simple_model()

        assert simple.to_full_model(method_family).to_simple_model() == simple

    def test_intermediate_matches_simple_upgrade(self, base_method, method_family):
        upgraded = base_method.to_simple_model().to_intermediate_model(
            method_family.to_record()
        )

        assert upgraded == base_method.to_intermediate_model()
        assert upgraded.method_family == MethodFamilyRecord(3, "Hartree-Fock")

    def test_alternate_constructors(self, base_method, method_family):
        simple = BaseMethodSimpleModel.from_full_model(base_method)
        intermediate = BaseMethodIntermediateModel.from_simple_model(
            simple, method_family.to_record()
        )

        assert BaseMethodSimpleModel.from_intermediate_model(intermediate) == simple
        assert BaseMethodIntermediateModel.from_full_model(base_method) == intermediate
        assert (
            BaseMethodFullModel.from_intermediate_model(intermediate, method_family)
            == base_method
        )
        assert BaseMethodFullModel.from_simple_model(simple, method_family) == base_method

    def test_common_attributes_survive(self, base_method, common):
        for shape in (
            base_method.to_simple_model(),
            base_method.to_intermediate_model(),
            base_method.to_intermediate_model().to_simple_model(),
        ):
            for name, value in common.items():
                assert getattr(shape, name) == value

    def test_none_related_entity_raises(self):
        simple = BaseMethodSimpleModel(id=1, keyword="HF", method_family_id=3)

        with pytest.raises(NullParameterError) as exc_info:
            simple.to_full_model(None)

        assert exc_info.value.param_name == "method_family"
        assert isinstance(exc_info.value, ValueError)

    def test_none_source_model_raises(self, method_family):
        with pytest.raises(NullParameterError):
            BaseMethodFullModel.from_simple_model(None, method_family)

    def test_required_relation_in_constructor(self):
        with pytest.raises(NullParameterError):
            BaseMethodFullModel(id=1, keyword="HF", method_family=None)


class TestElectronicStateMethodFamilyConversions:
    """Tests for the Electronic State / Method Family shapes."""

    def test_simple_round_trips_through_full(self, esmf, electronic_state, method_family):
        simple = esmf.to_simple_model()

        assert simple.electronic_state_id == 4
        assert simple.method_family_id == 3
        assert (
            simple.to_full_model(electronic_state, method_family).to_simple_model()
            == simple
        )

    def test_intermediate_matches_simple_upgrade(self, esmf, electronic_state, method_family):
        upgraded = esmf.to_simple_model().to_intermediate_model(
            electronic_state.to_record(), method_family.to_record()
        )

        assert upgraded == esmf.to_intermediate_model()

    def test_missing_method_family_propagates_none(self, electronic_state):
        simple = ElectronicStateMethodFamilySimpleModel(
            id=2, keyword="TD", electronic_state_id=4
        )

        full = simple.to_full_model(electronic_state)
        intermediate = full.to_intermediate_model()

        assert full.method_family is None
        assert intermediate.method_family is None
        assert intermediate.to_simple_model().method_family_id is None
        assert full.to_simple_model() == simple

    def test_electronic_state_is_required(self):
        simple = ElectronicStateMethodFamilySimpleModel(
            id=2, keyword="TD", electronic_state_id=4
        )

        with pytest.raises(NullParameterError) as exc_info:
            simple.to_intermediate_model(None)

        assert exc_info.value.param_name == "electronic_state"

    def test_alternate_constructors(self, esmf, electronic_state, method_family):
        intermediate = ElectronicStateMethodFamilyIntermediateModel.from_full_model(esmf)

        assert (
            ElectronicStateMethodFamilyFullModel.from_intermediate_model(
                intermediate, electronic_state, method_family
            )
            == esmf
        )
        assert (
            ElectronicStateMethodFamilySimpleModel.from_intermediate_model(intermediate)
            == esmf.to_simple_model()
        )


class TestSpinStateElectronicStateMethodFamilyConversions:
    """Tests for the Spin State / Electronic State / Method Family shapes."""

    def test_simple_round_trips_through_full(self, ssesmf, esmf, spin_state):
        simple = ssesmf.to_simple_model()

        assert simple.electronic_state_method_family_id == 6
        assert simple.spin_state_id == 5
        assert simple.to_full_model(esmf, spin_state).to_simple_model() == simple

    def test_intermediate_matches_simple_upgrade(self, ssesmf, esmf, spin_state):
        upgraded = ssesmf.to_simple_model().to_intermediate_model(
            esmf.to_record(), spin_state.to_record()
        )

        assert upgraded == ssesmf.to_intermediate_model()

    def test_missing_spin_state_propagates_none(self, esmf):
        simple = SpinStateElectronicStateMethodFamilySimpleModel(
            id=3, name="Closed shell", electronic_state_method_family_id=6
        )

        full = SpinStateElectronicStateMethodFamilyFullModel.from_simple_model(
            simple, esmf
        )

        assert full.spin_state is None
        assert full.to_intermediate_model().spin_state is None
        assert full.to_simple_model().spin_state_id is None

    def test_parent_combination_is_required(self, spin_state):
        simple = SpinStateElectronicStateMethodFamilySimpleModel(
            id=3, keyword="R", electronic_state_method_family_id=6
        )

        with pytest.raises(NullParameterError):
            SpinStateElectronicStateMethodFamilyIntermediateModel.from_simple_model(
                simple, None, spin_state.to_record()
            )


class TestFullMethodConversions:
    """Tests for the Full Method shapes."""

    def test_simple_round_trips_through_full(self, full_method, ssesmf, base_method):
        simple = full_method.to_simple_model()

        assert simple.spin_state_electronic_state_method_family_id == 7
        assert simple.base_method_id == 1
        assert simple.to_full_model(ssesmf, base_method).to_simple_model() == simple

    def test_intermediate_matches_simple_upgrade(self, full_method, ssesmf, base_method):
        upgraded = full_method.to_simple_model().to_intermediate_model(
            ssesmf.to_record(), base_method.to_record()
        )

        assert upgraded == full_method.to_intermediate_model()
        assert str(upgraded.spin_state_electronic_state_method_family) == "U"

    def test_both_relations_are_required(self, ssesmf, base_method):
        simple = FullMethodSimpleModel(
            id=8,
            keyword="UHF",
            spin_state_electronic_state_method_family_id=7,
            base_method_id=1,
        )

        with pytest.raises(NullParameterError):
            simple.to_full_model(None, base_method)
        with pytest.raises(NullParameterError):
            simple.to_full_model(ssesmf, None)

    def test_intermediate_to_full(self, full_method, ssesmf, base_method):
        intermediate = FullMethodIntermediateModel.from_full_model(full_method)

        assert intermediate.to_full_model(ssesmf, base_method) == full_method
        assert (
            FullMethodSimpleModel.from_intermediate_model(intermediate)
            == full_method.to_simple_model()
        )


class TestSerialization:
    """Tests for to_dict / from_dict."""

    def test_to_dict_nests_and_formats(self, base_method):
        data = base_method.to_dict()

        assert data["method_family"]["name"] == "Hartree-Fock"
        assert data["created_date"] == "2024-01-02T03:04:05"
        assert data["archived"] is True

    def test_from_dict_rebuilds_nested_full_models(self, full_method):
        rebuilt = FullMethodFullModel.from_dict(full_method.to_dict())

        assert rebuilt == full_method
        assert isinstance(rebuilt.base_method.method_family, MethodFamilyFullModel)

    def test_from_dict_rebuilds_records_and_none(self, ssesmf):
        intermediate = ssesmf.to_intermediate_model()
        data = intermediate.to_dict()
        data["spin_state"] = None

        rebuilt = SpinStateElectronicStateMethodFamilyIntermediateModel.from_dict(data)

        assert rebuilt.spin_state is None
        assert rebuilt.electronic_state_method_family == intermediate.electronic_state_method_family

    def test_from_dict_ignores_unknown_keys(self):
        model = MethodFamilyFullModel.from_dict({"id": 2, "name": "DFT", "extra": 1})

        assert model.id == 2
        assert model.name == "DFT"


class TestTimestamps:
    """Tests for the default creation and update stamps."""

    def test_defaults_are_naive_utc(self):
        before = utc_now()

        model = MethodFamilyFullModel(name="DFT")

        assert model.created_date.tzinfo is None
        assert before <= model.created_date <= utc_now()
        assert before <= model.last_updated_date <= utc_now()


class TestEntityFamilies:
    """Tests for the family table."""

    def test_leaf_families_use_full_model_as_input(self):
        family = ENTITY_FAMILIES["spin_state"]

        assert not family.has_relations
        assert family.input_model is SpinStateFullModel

    def test_relational_families_use_simple_model_as_input(self):
        family = ENTITY_FAMILIES["base_method"]

        assert family.has_relations
        assert family.input_model is BaseMethodSimpleModel
        assert family.intermediate is BaseMethodIntermediateModel

    def test_every_family_is_listed(self):
        assert len(ENTITY_FAMILIES) == 8
