"""Entry point to the catalog database."""

import logging
import os
from typing import Dict

import sqlalchemy as sa
from sqlalchemy.orm import sessionmaker

from gaussian_catalog.storage.entity_storage import EntityStorage
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
from gaussian_catalog.storage.models import Base

logger = logging.getLogger(__name__)


def alembic_config():
    """Load the Alembic configuration shipped at the project root."""
    from alembic.config import Config

    root_dir = os.path.dirname(os.path.dirname(os.path.dirname(__file__)))
    config = Config(os.path.join(root_dir, "alembic.ini"))
    config.set_main_option("script_location", os.path.join(root_dir, "migrations"))
    return config


class CatalogStorage:
    """Creates the engine and wires up one storage service per entity."""

    def __init__(self, connection_string: str, create_tables: bool = True):
        """Initialize the catalog storage.

        Args:
            connection_string: SQLAlchemy connection string
            create_tables: Create missing tables on start-up
        """
        connect_args = {}
        if connection_string.startswith("sqlite"):
            # The API serves requests from a thread pool
            connect_args["check_same_thread"] = False

        self.engine = sa.create_engine(connection_string, connect_args=connect_args)
        self.Session = sessionmaker(bind=self.engine)

        if create_tables:
            self._create_tables()

        self.method_families = MethodFamilyStorage(self.Session)
        self.spin_states = SpinStateStorage(self.Session)
        self.electronic_states = ElectronicStateStorage(self.Session)
        self.calculation_types = CalculationTypeStorage(self.Session)
        self.base_methods = BaseMethodStorage(self.Session, self.method_families)
        self.electronic_state_method_families = ElectronicStateMethodFamilyStorage(
            self.Session, self.electronic_states, self.method_families
        )
        self.spin_state_electronic_state_method_families = (
            SpinStateElectronicStateMethodFamilyStorage(
                self.Session, self.electronic_state_method_families, self.spin_states
            )
        )
        self.full_methods = FullMethodStorage(
            self.Session,
            self.spin_state_electronic_state_method_families,
            self.base_methods,
        )

        logger.info("Initialized catalog storage")

    def _create_tables(self):
        """Create the necessary tables if they don't exist."""
        Base.metadata.create_all(self.engine)
        logger.debug("Ensured catalog tables exist")

    def apply_migrations(self, revision: str = "head") -> bool:
        """Apply database migrations using Alembic.

        Args:
            revision: Target revision

        Returns:
            True if the migrations were applied
        """
        try:
            from alembic import command

            os.environ["DATABASE_URI"] = self.engine.url.render_as_string(
                hide_password=False
            )
            command.upgrade(alembic_config(), revision)
            logger.info(f"Applied database migrations up to {revision}")
            return True
        except Exception as e:
            logger.warning(f"Error applying migrations: {e}")
            return False

    def services(self) -> Dict[str, EntityStorage]:
        """Storage services keyed by entity family name."""
        return {
            "method_family": self.method_families,
            "spin_state": self.spin_states,
            "electronic_state": self.electronic_states,
            "calculation_type": self.calculation_types,
            "base_method": self.base_methods,
            "electronic_state_method_family": self.electronic_state_method_families,
            "spin_state_electronic_state_method_family": (
                self.spin_state_electronic_state_method_families
            ),
            "full_method": self.full_methods,
        }

    def service(self, family: str) -> EntityStorage:
        """Get the storage service for an entity family.

        Raises:
            KeyError: If the family is unknown
        """
        return self.services()[family]

    def dispose(self):
        """Release the connection pool."""
        self.engine.dispose()
