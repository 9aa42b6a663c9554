"""SQLAlchemy table definitions for the catalog.

Each table converts its rows to the domain shape the storage services work
with (``to_domain``), to a Record (``to_record``), and back from a domain
shape (``from_domain`` / ``update_from_domain``).
"""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    DateTime,
    ForeignKey,
    Integer,
    String,
    Text,
    UniqueConstraint,
)
from sqlalchemy.orm import declarative_base

from gaussian_catalog.core.models import (
    BaseMethodRecord,
    BaseMethodSimpleModel,
    CalculationTypeFullModel,
    CalculationTypeRecord,
    ElectronicStateFullModel,
    ElectronicStateMethodFamilyRecord,
    ElectronicStateMethodFamilySimpleModel,
    ElectronicStateRecord,
    FullMethodRecord,
    FullMethodSimpleModel,
    MethodFamilyFullModel,
    MethodFamilyRecord,
    SpinStateElectronicStateMethodFamilyRecord,
    SpinStateElectronicStateMethodFamilySimpleModel,
    SpinStateFullModel,
    SpinStateRecord,
)
from gaussian_catalog.core.models.base import COMMON_FIELDS, utc_now

Base = declarative_base()


class CatalogColumnsMixin:
    """Columns shared by every catalog table."""

    id = Column(Integer, primary_key=True, autoincrement=True)
    description_rtf = Column(Text, nullable=True)
    created_date = Column(DateTime, nullable=False, default=utc_now)
    last_updated_date = Column(DateTime, nullable=False, default=utc_now)
    archived = Column(Boolean, nullable=False, default=False)

    # Subclasses list the columns copied to and from the domain model
    DOMAIN_COLUMNS = ()
    domain_class = None

    def to_domain(self):
        """Convert the row to its domain model."""
        return self.domain_class(
            **{name: getattr(self, name) for name in COMMON_FIELDS + self.DOMAIN_COLUMNS}
        )

    @classmethod
    def from_domain(cls, model):
        """Create a new row from a domain model.

        The model's id is never copied; the database assigns a new one.
        """
        values = {
            name: getattr(model, name)
            for name in COMMON_FIELDS + cls.DOMAIN_COLUMNS
            if name != "id"
        }
        return cls(**values)

    def update_from_domain(self, model):
        """Copy the editable values of a domain model onto this row.

        The id, creation date and archived flag are left alone.
        """
        self.description_rtf = model.description_rtf
        self.description_text = model.description_text
        for name in self.DOMAIN_COLUMNS:
            setattr(self, name, getattr(model, name))


class MethodFamilyTable(CatalogColumnsMixin, Base):
    """SQLAlchemy model for the method_families table."""

    __tablename__ = "method_families"

    name = Column(String(200), nullable=False)
    description_text = Column(String(2000), nullable=True)

    DOMAIN_COLUMNS = ("name",)
    domain_class = MethodFamilyFullModel

    def to_record(self) -> MethodFamilyRecord:
        return MethodFamilyRecord(self.id, self.name)


class SpinStateTable(CatalogColumnsMixin, Base):
    """SQLAlchemy model for the spin_states table."""

    __tablename__ = "spin_states"
    __table_args__ = (
        UniqueConstraint("name", "keyword", name="uq_spin_states_name_keyword"),
        CheckConstraint(
            "name IS NOT NULL OR keyword IS NOT NULL",
            name="ck_spin_states_name_or_keyword",
        ),
    )

    name = Column(String(200), nullable=True)
    keyword = Column(String(50), nullable=True)
    description_text = Column(String(4000), nullable=True)

    DOMAIN_COLUMNS = ("name", "keyword")
    domain_class = SpinStateFullModel

    def to_record(self) -> SpinStateRecord:
        return SpinStateRecord(self.id, self.name, self.keyword)


class ElectronicStateTable(CatalogColumnsMixin, Base):
    """SQLAlchemy model for the electronic_states table."""

    __tablename__ = "electronic_states"
    __table_args__ = (
        UniqueConstraint("name", "keyword", name="uq_electronic_states_name_keyword"),
        CheckConstraint(
            "name IS NOT NULL OR keyword IS NOT NULL",
            name="ck_electronic_states_name_or_keyword",
        ),
    )

    name = Column(String(200), nullable=True)
    keyword = Column(String(50), nullable=True)
    description_text = Column(String(4000), nullable=True)

    DOMAIN_COLUMNS = ("name", "keyword")
    domain_class = ElectronicStateFullModel

    def to_record(self) -> ElectronicStateRecord:
        return ElectronicStateRecord(self.id, self.name, self.keyword)


class CalculationTypeTable(CatalogColumnsMixin, Base):
    """SQLAlchemy model for the calculation_types table."""

    __tablename__ = "calculation_types"

    name = Column(String(200), nullable=False)
    keyword = Column(String(30), nullable=False)
    description_text = Column(String(2000), nullable=True)

    DOMAIN_COLUMNS = ("name", "keyword")
    domain_class = CalculationTypeFullModel

    def to_record(self) -> CalculationTypeRecord:
        return CalculationTypeRecord(self.id, self.name, self.keyword)


class BaseMethodTable(CatalogColumnsMixin, Base):
    """SQLAlchemy model for the base_methods table."""

    __tablename__ = "base_methods"

    keyword = Column(String(50), nullable=False, unique=True)
    method_family_id = Column(
        Integer, ForeignKey("method_families.id"), nullable=False, index=True
    )
    description_text = Column(String(4000), nullable=True)

    DOMAIN_COLUMNS = ("keyword", "method_family_id")
    domain_class = BaseMethodSimpleModel

    def to_record(self) -> BaseMethodRecord:
        return BaseMethodRecord(self.id, self.keyword)


class ElectronicStateMethodFamilyTable(CatalogColumnsMixin, Base):
    """SQLAlchemy model for the electronic_states_method_families table."""

    __tablename__ = "electronic_states_method_families"
    __table_args__ = (
        UniqueConstraint(
            "name", "keyword", name="uq_electronic_states_method_families_name_keyword"
        ),
        CheckConstraint(
            "name IS NOT NULL OR keyword IS NOT NULL",
            name="ck_electronic_states_method_families_name_or_keyword",
        ),
    )

    name = Column(String(200), nullable=True)
    keyword = Column(String(50), nullable=True)
    electronic_state_id = Column(
        Integer, ForeignKey("electronic_states.id"), nullable=False, index=True
    )
    method_family_id = Column(
        Integer, ForeignKey("method_families.id"), nullable=True, index=True
    )
    description_text = Column(String(4000), nullable=True)

    DOMAIN_COLUMNS = ("name", "keyword", "electronic_state_id", "method_family_id")
    domain_class = ElectronicStateMethodFamilySimpleModel

    def to_record(self) -> ElectronicStateMethodFamilyRecord:
        return ElectronicStateMethodFamilyRecord(self.id, self.name, self.keyword)


class SpinStateElectronicStateMethodFamilyTable(CatalogColumnsMixin, Base):
    """SQLAlchemy model for the spin_states_electronic_states_method_families table."""

    __tablename__ = "spin_states_electronic_states_method_families"
    __table_args__ = (
        UniqueConstraint(
            "name",
            "keyword",
            name="uq_spin_states_electronic_states_method_families_name_keyword",
        ),
        CheckConstraint(
            "name IS NOT NULL OR keyword IS NOT NULL",
            name="ck_spin_states_electronic_states_method_families_name_or_keyword",
        ),
    )

    name = Column(String(200), nullable=True)
    keyword = Column(String(50), nullable=True)
    electronic_state_method_family_id = Column(
        Integer,
        ForeignKey("electronic_states_method_families.id"),
        nullable=False,
        index=True,
    )
    spin_state_id = Column(
        Integer, ForeignKey("spin_states.id"), nullable=True, index=True
    )
    description_text = Column(String(4000), nullable=True)

    DOMAIN_COLUMNS = (
        "name",
        "keyword",
        "electronic_state_method_family_id",
        "spin_state_id",
    )
    domain_class = SpinStateElectronicStateMethodFamilySimpleModel

    def to_record(self) -> SpinStateElectronicStateMethodFamilyRecord:
        return SpinStateElectronicStateMethodFamilyRecord(
            self.id, self.name, self.keyword
        )


class FullMethodTable(CatalogColumnsMixin, Base):
    """SQLAlchemy model for the full_methods table."""

    __tablename__ = "full_methods"
    __table_args__ = (
        UniqueConstraint(
            "spin_state_electronic_state_method_family_id",
            "base_method_id",
            name="uq_full_methods_parent_base_method",
        ),
    )

    keyword = Column(String(50), nullable=False, unique=True)
    spin_state_electronic_state_method_family_id = Column(
        Integer,
        ForeignKey("spin_states_electronic_states_method_families.id"),
        nullable=False,
        index=True,
    )
    base_method_id = Column(
        Integer, ForeignKey("base_methods.id"), nullable=False, index=True
    )
    description_text = Column(String(4000), nullable=True)

    DOMAIN_COLUMNS = (
        "keyword",
        "spin_state_electronic_state_method_family_id",
        "base_method_id",
    )
    domain_class = FullMethodSimpleModel

    def to_record(self) -> FullMethodRecord:
        return FullMethodRecord(self.id, self.keyword)
