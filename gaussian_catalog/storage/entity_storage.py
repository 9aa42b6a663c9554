"""Shared storage service for catalog entities.

``EntityStorage`` implements create, update, lookups and soft delete once;
the per-entity services in ``leaf_storage`` and ``method_storage`` describe
their table, ordering, dependents and how a row becomes a Full model.
"""

import logging
from typing import Any, List, Optional, Tuple

from sqlalchemy import false

from gaussian_catalog.core.errors import (
    DuplicateValueError,
    EntityNotFoundError,
    NullParameterError,
    ValueInUseError,
)
from gaussian_catalog.core.models import require
from gaussian_catalog.core.models.base import is_blank, utc_now

logger = logging.getLogger(__name__)


def match_optional(column, value: Optional[int]):
    """Filter on an optional foreign key, where None or 0 means "no parent"."""
    if not value:
        return column.is_(None)
    return column == value


def match_label(column, value: Optional[str]):
    """Filter on a nullable label, where None matches NULL."""
    if value is None:
        return column.is_(None)
    return column == value


class EntityStorage:
    """Storage service for one catalog table.

    Subclasses set:
        table: The SQLAlchemy table class
        entity_name: Human readable name used in messages
        param_name: Name used when this entity is a missing parameter
        order_by: Column names used to order lists
        dependents: (table, foreign key column, description) triples that
            block a delete while non-archived rows reference the entity
        requires_name_or_keyword: Reject models whose name and keyword are
            both blank
    """

    table: Any = None
    entity_name: str = ""
    param_name: str = ""
    order_by: Tuple[str, ...] = ()
    dependents: Tuple[Tuple[Any, str, str], ...] = ()
    requires_name_or_keyword: bool = False

    def __init__(self, session_factory):
        """Initialize the storage service.

        Args:
            session_factory: A SQLAlchemy ``sessionmaker`` bound to the catalog
                database
        """
        self.Session = session_factory

    # Hooks

    def _to_full(self, session, row):
        """Convert a row to its Full model; leaf tables map directly."""
        return row.to_domain()

    def _check_relations(self, session, model) -> None:
        """Ensure every entity referenced by ``model`` exists."""

    # Helpers shared with dependent services

    def _active_query(self, session):
        query = session.query(self.table).filter(self.table.archived == false())
        return query.order_by(*[getattr(self.table, name) for name in self.order_by])

    def require_full(self, session, entity_id: int, param_name: str):
        """Load a Full model inside an open session.

        Raises:
            NullParameterError: If no row has the id
        """
        row = session.get(self.table, entity_id)
        if row is None:
            raise NullParameterError(
                param_name,
                f"The {param_name} with ID = {entity_id} is null (does not exist).",
            )
        return self._to_full(session, row)

    def optional_full(self, session, entity_id: Optional[int], param_name: str):
        """Like ``require_full`` but None or 0 yields None."""
        if not entity_id:
            return None
        return self.require_full(session, entity_id, param_name)

    def require_record(self, session, entity_id: int, param_name: str):
        row = session.get(self.table, entity_id)
        if row is None:
            raise NullParameterError(
                param_name,
                f"The {param_name} with ID = {entity_id} is null (does not exist).",
            )
        return row.to_record()

    def optional_record(self, session, entity_id: Optional[int], param_name: str):
        if not entity_id:
            return None
        return self.require_record(session, entity_id, param_name)

    def _validate(self, model) -> None:
        if self.requires_name_or_keyword and is_blank(model.name) and is_blank(
            model.keyword
        ):
            raise NullParameterError(
                "name", "Either Name or Keyword must be provided."
            )

    def _check_unique(self, session, model, exclude_id: Optional[int] = None) -> None:
        """Reject a name and keyword pair used by another row, archived or not.

        NULL labels compare equal here, unlike in the database's unique
        constraint.

        Raises:
            DuplicateValueError: If another row has the same name and keyword
        """
        if not self.requires_name_or_keyword:
            return
        query = session.query(self.table).filter(
            match_label(self.table.name, model.name),
            match_label(self.table.keyword, model.keyword),
        )
        if exclude_id is not None:
            query = query.filter(self.table.id != exclude_id)
        if query.count():
            raise DuplicateValueError(self.entity_name, model.name, model.keyword)

    # Operations

    def create(self, model):
        """Store a new entity.

        Args:
            model: The Simple model (Full model for leaf entities) to store

        Returns:
            The stored entity as a Full model, with its new id and timestamps

        Raises:
            NullParameterError: If the model is None or references a missing
                entity
            DuplicateValueError: If the name and keyword pair is taken
        """
        require(model, "model")
        self._validate(model)

        session = self.Session()
        try:
            self._check_relations(session, model)
            self._check_unique(session, model)

            now = utc_now()
            row = self.table.from_domain(model)
            row.created_date = now
            row.last_updated_date = now
            row.archived = False

            session.add(row)
            session.flush()
            output = self._to_full(session, row)

            session.commit()
            logger.info(f"Created {self.entity_name} with ID {output.id}")
            return output
        except Exception as e:
            session.rollback()
            logger.error(f"Error creating {self.entity_name}: {e}")
            raise
        finally:
            session.close()

    def update(self, model):
        """Update an existing entity.

        Args:
            model: The Simple model (Full model for leaf entities) carrying the
                new values; its id selects the row

        Returns:
            The updated entity as a Full model

        Raises:
            NullParameterError: If the model is None or references a missing
                entity
            EntityNotFoundError: If no row has the model's id
            DuplicateValueError: If another row has the same name and keyword
        """
        require(model, "model")
        self._validate(model)

        session = self.Session()
        try:
            row = session.get(self.table, model.id)
            if row is None:
                raise EntityNotFoundError(self.entity_name, model.id)

            self._check_relations(session, model)
            self._check_unique(session, model, exclude_id=model.id)
            row.update_from_domain(model)
            row.last_updated_date = utc_now()

            session.flush()
            output = self._to_full(session, row)

            session.commit()
            logger.info(f"Updated {self.entity_name} with ID {model.id}")
            return output
        except Exception as e:
            session.rollback()
            logger.error(f"Error updating {self.entity_name} with ID {model.id}: {e}")
            raise
        finally:
            session.close()

    def get_by_id(self, entity_id: int):
        """Get an entity by ID.

        Args:
            entity_id: The ID of the entity

        Returns:
            The Full model, or None if no row has the ID
        """
        session = self.Session()
        try:
            row = session.get(self.table, entity_id)
            if row is None:
                logger.debug(f"{self.entity_name} with ID {entity_id} not found")
                return None
            return self._to_full(session, row)
        except Exception as e:
            logger.error(f"Error getting {self.entity_name} with ID {entity_id}: {e}")
            raise
        finally:
            session.close()

    def get_all_full(self) -> List[Any]:
        """Get all non-archived entities as Full models, ordered by label."""
        return self._find_full()

    def get_list(self) -> List[Any]:
        """Get Records of all non-archived entities, ordered by label."""
        session = self.Session()
        try:
            rows = self._active_query(session).all()
            return [row.to_record() for row in rows]
        except Exception as e:
            logger.error(f"Error listing {self.entity_name} records: {e}")
            raise
        finally:
            session.close()

    def _find_full(self, *criteria) -> List[Any]:
        session = self.Session()
        try:
            rows = self._active_query(session).filter(*criteria).all()
            output = [self._to_full(session, row) for row in rows]
            logger.debug(f"Found {len(output)} {self.entity_name} rows")
            return output
        except Exception as e:
            logger.error(f"Error getting {self.entity_name} rows: {e}")
            raise
        finally:
            session.close()

    def delete(self, entity_id: int) -> None:
        """Archive an entity.

        Rows are never removed: the archived flag is set and the last updated
        date refreshed.

        Args:
            entity_id: The ID of the entity

        Raises:
            EntityNotFoundError: If no row has the ID
            ValueInUseError: If non-archived rows still reference the entity
        """
        session = self.Session()
        try:
            row = session.get(self.table, entity_id)
            if row is None:
                raise EntityNotFoundError(self.entity_name, entity_id)

            for dependent_table, column_name, description in self.dependents:
                in_use = (
                    session.query(dependent_table)
                    .filter(
                        getattr(dependent_table, column_name) == entity_id,
                        dependent_table.archived == false(),
                    )
                    .count()
                )
                if in_use:
                    raise ValueInUseError(
                        self.param_name,
                        f"Cannot delete {self.entity_name} with Id {entity_id} "
                        f"because it is in use by one or more {description}.",
                    )

            row.archived = True
            row.last_updated_date = utc_now()
            session.commit()
            logger.info(f"Archived {self.entity_name} with ID {entity_id}")
        except Exception as e:
            session.rollback()
            logger.error(f"Error deleting {self.entity_name} with ID {entity_id}: {e}")
            raise
        finally:
            session.close()


class RelationalEntityStorage(EntityStorage):
    """Storage for entities that reference other entities.

    Rows map to Simple models; subclasses implement ``_to_full`` and
    ``_to_intermediate`` by loading the referenced entities.
    """

    def _to_intermediate(self, session, row):
        raise NotImplementedError

    def _check_relations(self, session, model) -> None:
        # Building the Full model loads, and so validates, every parent
        self._to_full_from_simple(session, model)

    def _to_full(self, session, row):
        return self._to_full_from_simple(session, row.to_domain())

    def _to_full_from_simple(self, session, simple):
        raise NotImplementedError

    def get_all_simple(self) -> List[Any]:
        """Get all non-archived entities as Simple models, ordered by label."""
        session = self.Session()
        try:
            return [row.to_domain() for row in self._active_query(session).all()]
        except Exception as e:
            logger.error(f"Error getting simple {self.entity_name} rows: {e}")
            raise
        finally:
            session.close()

    def get_all_intermediate(self) -> List[Any]:
        """Get all non-archived entities as Intermediate models, ordered by label."""
        session = self.Session()
        try:
            return [
                self._to_intermediate(session, row)
                for row in self._active_query(session).all()
            ]
        except Exception as e:
            logger.error(f"Error getting intermediate {self.entity_name} rows: {e}")
            raise
        finally:
            session.close()
