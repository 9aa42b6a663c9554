"""create_catalog_tables

Revision ID: 3f1c9a7d2b40
Revises:
Create Date: 2026-10-16 09:12:41.118503

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

from gaussian_catalog.utils.logging import get_logger

logger = get_logger("alembic.migration")

# revision identifiers, used by Alembic.
revision: str = "3f1c9a7d2b40"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _common_columns():
    return [
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("description_rtf", sa.Text(), nullable=True),
        sa.Column("created_date", sa.DateTime(), nullable=False),
        sa.Column("last_updated_date", sa.DateTime(), nullable=False),
        sa.Column("archived", sa.Boolean(), nullable=False),
    ]


def _name_or_keyword(table_name: str):
    return [
        sa.UniqueConstraint("name", "keyword", name=f"uq_{table_name}_name_keyword"),
        sa.CheckConstraint(
            "name IS NOT NULL OR keyword IS NOT NULL",
            name=f"ck_{table_name}_name_or_keyword",
        ),
    ]


def upgrade() -> None:
    """Upgrade schema."""
    logger.info("Starting create_catalog_tables upgrade")

    op.create_table(
        "method_families",
        *_common_columns(),
        sa.Column("name", sa.String(length=200), nullable=False),
        sa.Column("description_text", sa.String(length=2000), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )

    for table_name in ("spin_states", "electronic_states"):
        op.create_table(
            table_name,
            *_common_columns(),
            sa.Column("name", sa.String(length=200), nullable=True),
            sa.Column("keyword", sa.String(length=50), nullable=True),
            sa.Column("description_text", sa.String(length=4000), nullable=True),
            sa.PrimaryKeyConstraint("id"),
            *_name_or_keyword(table_name),
        )

    op.create_table(
        "calculation_types",
        *_common_columns(),
        sa.Column("name", sa.String(length=200), nullable=False),
        sa.Column("keyword", sa.String(length=30), nullable=False),
        sa.Column("description_text", sa.String(length=2000), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "base_methods",
        *_common_columns(),
        sa.Column("keyword", sa.String(length=50), nullable=False),
        sa.Column("method_family_id", sa.Integer(), nullable=False),
        sa.Column("description_text", sa.String(length=4000), nullable=True),
        sa.ForeignKeyConstraint(["method_family_id"], ["method_families.id"]),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("keyword"),
    )
    op.create_index(
        "ix_base_methods_method_family_id", "base_methods", ["method_family_id"]
    )

    op.create_table(
        "electronic_states_method_families",
        *_common_columns(),
        sa.Column("name", sa.String(length=200), nullable=True),
        sa.Column("keyword", sa.String(length=50), nullable=True),
        sa.Column("electronic_state_id", sa.Integer(), nullable=False),
        sa.Column("method_family_id", sa.Integer(), nullable=True),
        sa.Column("description_text", sa.String(length=4000), nullable=True),
        sa.ForeignKeyConstraint(["electronic_state_id"], ["electronic_states.id"]),
        sa.ForeignKeyConstraint(["method_family_id"], ["method_families.id"]),
        sa.PrimaryKeyConstraint("id"),
        *_name_or_keyword("electronic_states_method_families"),
    )
    op.create_index(
        "ix_electronic_states_method_families_electronic_state_id",
        "electronic_states_method_families",
        ["electronic_state_id"],
    )
    op.create_index(
        "ix_electronic_states_method_families_method_family_id",
        "electronic_states_method_families",
        ["method_family_id"],
    )

    op.create_table(
        "spin_states_electronic_states_method_families",
        *_common_columns(),
        sa.Column("name", sa.String(length=200), nullable=True),
        sa.Column("keyword", sa.String(length=50), nullable=True),
        sa.Column("electronic_state_method_family_id", sa.Integer(), nullable=False),
        sa.Column("spin_state_id", sa.Integer(), nullable=True),
        sa.Column("description_text", sa.String(length=4000), nullable=True),
        sa.ForeignKeyConstraint(
            ["electronic_state_method_family_id"],
            ["electronic_states_method_families.id"],
        ),
        sa.ForeignKeyConstraint(["spin_state_id"], ["spin_states.id"]),
        sa.PrimaryKeyConstraint("id"),
        *_name_or_keyword("spin_states_electronic_states_method_families"),
    )
    op.create_index(
        "ix_spin_states_electronic_states_method_families_electronic_state_method_family_id",
        "spin_states_electronic_states_method_families",
        ["electronic_state_method_family_id"],
    )
    op.create_index(
        "ix_spin_states_electronic_states_method_families_spin_state_id",
        "spin_states_electronic_states_method_families",
        ["spin_state_id"],
    )

    op.create_table(
        "full_methods",
        *_common_columns(),
        sa.Column("keyword", sa.String(length=50), nullable=False),
        sa.Column(
            "spin_state_electronic_state_method_family_id", sa.Integer(), nullable=False
        ),
        sa.Column("base_method_id", sa.Integer(), nullable=False),
        sa.Column("description_text", sa.String(length=4000), nullable=True),
        sa.ForeignKeyConstraint(["base_method_id"], ["base_methods.id"]),
        sa.ForeignKeyConstraint(
            ["spin_state_electronic_state_method_family_id"],
            ["spin_states_electronic_states_method_families.id"],
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("keyword"),
        sa.UniqueConstraint(
            "spin_state_electronic_state_method_family_id",
            "base_method_id",
            name="uq_full_methods_parent_base_method",
        ),
    )
    op.create_index(
        "ix_full_methods_spin_state_electronic_state_method_family_id",
        "full_methods",
        ["spin_state_electronic_state_method_family_id"],
    )
    op.create_index(
        "ix_full_methods_base_method_id", "full_methods", ["base_method_id"]
    )

    logger.info("Completed create_catalog_tables upgrade")


def downgrade() -> None:
    """Downgrade schema."""
    logger.info("Starting create_catalog_tables downgrade")

    op.drop_table("full_methods")
    op.drop_table("spin_states_electronic_states_method_families")
    op.drop_table("electronic_states_method_families")
    op.drop_table("base_methods")
    op.drop_table("calculation_types")
    op.drop_table("electronic_states")
    op.drop_table("spin_states")
    op.drop_table("method_families")

    logger.info("Completed create_catalog_tables downgrade")
