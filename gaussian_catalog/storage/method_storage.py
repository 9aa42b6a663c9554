"""Storage services for entities that reference other entities.

Each service is given the services of the entities it references and uses
them to load those parents inside its own session.
"""

from typing import List, Optional

from gaussian_catalog.core.models import (
    BaseMethodFullModel,
    BaseMethodIntermediateModel,
    BaseMethodSimpleModel,
    ElectronicStateMethodFamilyFullModel,
    ElectronicStateMethodFamilyIntermediateModel,
    ElectronicStateMethodFamilySimpleModel,
    FullMethodFullModel,
    FullMethodIntermediateModel,
    FullMethodSimpleModel,
    SpinStateElectronicStateMethodFamilyFullModel,
    SpinStateElectronicStateMethodFamilyIntermediateModel,
    SpinStateElectronicStateMethodFamilySimpleModel,
)
from gaussian_catalog.storage.entity_storage import (
    EntityStorage,
    RelationalEntityStorage,
    match_optional,
)
from gaussian_catalog.storage.models import (
    BaseMethodTable,
    ElectronicStateMethodFamilyTable,
    FullMethodTable,
    SpinStateElectronicStateMethodFamilyTable,
)


class BaseMethodStorage(RelationalEntityStorage):
    """Storage service for Base Methods."""

    table = BaseMethodTable
    entity_name = "Base Method"
    param_name = "base_method"
    order_by = ("keyword",)
    dependents = ((FullMethodTable, "base_method_id", "Full Methods"),)

    def __init__(self, session_factory, method_families: EntityStorage):
        super().__init__(session_factory)
        self.method_families = method_families

    def _to_full_from_simple(
        self, session, simple: BaseMethodSimpleModel
    ) -> BaseMethodFullModel:
        method_family = self.method_families.require_full(
            session, simple.method_family_id, "method_family"
        )
        return simple.to_full_model(method_family)

    def _to_intermediate(self, session, row) -> BaseMethodIntermediateModel:
        simple = row.to_domain()
        return simple.to_intermediate_model(
            self.method_families.require_record(
                session, simple.method_family_id, "method_family"
            )
        )

    def get_by_method_family(self, method_family_id: int) -> List[BaseMethodFullModel]:
        """Get the Base Methods belonging to a Method Family.

        Args:
            method_family_id: The ID of the Method Family

        Returns:
            Full models of the non-archived Base Methods, ordered by keyword
        """
        return self._find_full(BaseMethodTable.method_family_id == method_family_id)


class ElectronicStateMethodFamilyStorage(RelationalEntityStorage):
    """Storage service for Electronic State/Method Family Combinations."""

    table = ElectronicStateMethodFamilyTable
    entity_name = "Electronic State/Method Family Combination"
    param_name = "electronic_state_method_family"
    order_by = ("name", "keyword")
    dependents = (
        (
            SpinStateElectronicStateMethodFamilyTable,
            "electronic_state_method_family_id",
            "Spin State/Electronic State/Method Family Combinations",
        ),
    )
    requires_name_or_keyword = True

    def __init__(
        self,
        session_factory,
        electronic_states: EntityStorage,
        method_families: EntityStorage,
    ):
        super().__init__(session_factory)
        self.electronic_states = electronic_states
        self.method_families = method_families

    def _to_full_from_simple(
        self, session, simple: ElectronicStateMethodFamilySimpleModel
    ) -> ElectronicStateMethodFamilyFullModel:
        return simple.to_full_model(
            self.electronic_states.require_full(
                session, simple.electronic_state_id, "electronic_state"
            ),
            self.method_families.optional_full(
                session, simple.method_family_id, "method_family"
            ),
        )

    def _to_intermediate(
        self, session, row
    ) -> ElectronicStateMethodFamilyIntermediateModel:
        simple = row.to_domain()
        return simple.to_intermediate_model(
            self.electronic_states.require_record(
                session, simple.electronic_state_id, "electronic_state"
            ),
            self.method_families.optional_record(
                session, simple.method_family_id, "method_family"
            ),
        )

    def get_by_electronic_state(
        self, electronic_state_id: int
    ) -> List[ElectronicStateMethodFamilyFullModel]:
        return self._find_full(
            ElectronicStateMethodFamilyTable.electronic_state_id == electronic_state_id
        )

    def get_by_method_family(
        self, method_family_id: Optional[int]
    ) -> List[ElectronicStateMethodFamilyFullModel]:
        """Get the combinations using a Method Family.

        A ``method_family_id`` of None or 0 selects combinations without one.
        """
        return self._find_full(
            match_optional(ElectronicStateMethodFamilyTable.method_family_id, method_family_id)
        )

    def get_by_electronic_state_and_method_family(
        self, electronic_state_id: int, method_family_id: Optional[int]
    ) -> List[ElectronicStateMethodFamilyFullModel]:
        return self._find_full(
            ElectronicStateMethodFamilyTable.electronic_state_id == electronic_state_id,
            match_optional(ElectronicStateMethodFamilyTable.method_family_id, method_family_id),
        )


class SpinStateElectronicStateMethodFamilyStorage(RelationalEntityStorage):
    """Storage service for Spin State/Electronic State/Method Family Combinations."""

    table = SpinStateElectronicStateMethodFamilyTable
    entity_name = "Spin State/Electronic State/Method Family Combination"
    param_name = "spin_state_electronic_state_method_family"
    order_by = ("name", "keyword")
    dependents = (
        (
            FullMethodTable,
            "spin_state_electronic_state_method_family_id",
            "Full Methods",
        ),
    )
    requires_name_or_keyword = True

    def __init__(
        self,
        session_factory,
        electronic_state_method_families: ElectronicStateMethodFamilyStorage,
        spin_states: EntityStorage,
    ):
        super().__init__(session_factory)
        self.electronic_state_method_families = electronic_state_method_families
        self.spin_states = spin_states

    def _to_full_from_simple(
        self, session, simple: SpinStateElectronicStateMethodFamilySimpleModel
    ) -> SpinStateElectronicStateMethodFamilyFullModel:
        return simple.to_full_model(
            self.electronic_state_method_families.require_full(
                session,
                simple.electronic_state_method_family_id,
                "electronic_state_method_family",
            ),
            self.spin_states.optional_full(session, simple.spin_state_id, "spin_state"),
        )

    def _to_intermediate(
        self, session, row
    ) -> SpinStateElectronicStateMethodFamilyIntermediateModel:
        simple = row.to_domain()
        return simple.to_intermediate_model(
            self.electronic_state_method_families.require_record(
                session,
                simple.electronic_state_method_family_id,
                "electronic_state_method_family",
            ),
            self.spin_states.optional_record(
                session, simple.spin_state_id, "spin_state"
            ),
        )

    def get_by_spin_state(
        self, spin_state_id: Optional[int]
    ) -> List[SpinStateElectronicStateMethodFamilyFullModel]:
        """Get the combinations using a Spin State.

        A ``spin_state_id`` of None or 0 selects combinations without one.
        """
        return self._find_full(
            match_optional(SpinStateElectronicStateMethodFamilyTable.spin_state_id, spin_state_id)
        )

    def get_by_electronic_state_method_family(
        self, electronic_state_method_family_id: int
    ) -> List[SpinStateElectronicStateMethodFamilyFullModel]:
        return self._find_full(
            SpinStateElectronicStateMethodFamilyTable.electronic_state_method_family_id
            == electronic_state_method_family_id
        )

    def get_by_spin_state_and_electronic_state_method_family(
        self, spin_state_id: Optional[int], electronic_state_method_family_id: int
    ) -> List[SpinStateElectronicStateMethodFamilyFullModel]:
        return self._find_full(
            match_optional(SpinStateElectronicStateMethodFamilyTable.spin_state_id, spin_state_id),
            SpinStateElectronicStateMethodFamilyTable.electronic_state_method_family_id
            == electronic_state_method_family_id,
        )


class FullMethodStorage(RelationalEntityStorage):
    """Storage service for Full Methods."""

    table = FullMethodTable
    entity_name = "Full Method"
    param_name = "full_method"
    order_by = ("keyword",)

    def __init__(
        self,
        session_factory,
        spin_state_electronic_state_method_families: SpinStateElectronicStateMethodFamilyStorage,
        base_methods: BaseMethodStorage,
    ):
        super().__init__(session_factory)
        self.spin_state_electronic_state_method_families = (
            spin_state_electronic_state_method_families
        )
        self.base_methods = base_methods

    def _to_full_from_simple(
        self, session, simple: FullMethodSimpleModel
    ) -> FullMethodFullModel:
        return simple.to_full_model(
            self.spin_state_electronic_state_method_families.require_full(
                session,
                simple.spin_state_electronic_state_method_family_id,
                "spin_state_electronic_state_method_family",
            ),
            self.base_methods.require_full(session, simple.base_method_id, "base_method"),
        )

    def _to_intermediate(self, session, row) -> FullMethodIntermediateModel:
        simple = row.to_domain()
        return simple.to_intermediate_model(
            self.spin_state_electronic_state_method_families.require_record(
                session,
                simple.spin_state_electronic_state_method_family_id,
                "spin_state_electronic_state_method_family",
            ),
            self.base_methods.require_record(session, simple.base_method_id, "base_method"),
        )

    def get_by_base_method(self, base_method_id: int) -> List[FullMethodFullModel]:
        return self._find_full(FullMethodTable.base_method_id == base_method_id)

    def get_by_spin_state_electronic_state_method_family(
        self, spin_state_electronic_state_method_family_id: int
    ) -> List[FullMethodFullModel]:
        return self._find_full(
            FullMethodTable.spin_state_electronic_state_method_family_id
            == spin_state_electronic_state_method_family_id
        )

    def get_by_spin_state_electronic_state_method_family_and_base_method(
        self, spin_state_electronic_state_method_family_id: int, base_method_id: int
    ) -> List[FullMethodFullModel]:
        return self._find_full(
            FullMethodTable.spin_state_electronic_state_method_family_id
            == spin_state_electronic_state_method_family_id,
            FullMethodTable.base_method_id == base_method_id,
        )
